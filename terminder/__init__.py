"""Terminder Python package.

Public API:
  - import from `terminder.api` (preferred) or `import terminder` (re-export)
"""

from __future__ import annotations

__version__ = "1.1"

from .api import *  # noqa: F401,F403,E402
from . import api as _api  # noqa: E402

__all__ = list(_api.__all__)
