"""terminder.api

Stable *library* entrypoint for Terminder.

Policy:
  - Only names listed in __all__ are considered public API.
  - Everything else is internal and may change without notice.
"""

from __future__ import annotations

from terminder.model import Appointment
from terminder.storage import ParseError, SaveError, format_line, load_store, parse_line, save_store
from terminder.store import AppointmentStore, create
from terminder.util.timeparse import date_to_epoch_s, parse_date_dd_mm_yyyy
from terminder.util.tz import format_date, resolve_tz, start_of_today

# --- Public API exports (locked by contract tests) ------------------------
# Keep changes intentional and reviewable.
_PUBLIC_EXPORTS = (
    "Appointment",
    "AppointmentStore",
    "ParseError",
    "SaveError",
    "create",
    "date_to_epoch_s",
    "format_date",
    "format_line",
    "load_store",
    "parse_date_dd_mm_yyyy",
    "parse_line",
    "resolve_tz",
    "save_store",
    "start_of_today",
)

__all__ = [n for n in _PUBLIC_EXPORTS if n in globals()]
# --- /Public API exports --------------------------------------------------
