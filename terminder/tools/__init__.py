"""terminder.tools package

Developer utilities (file checks, CI gate).

Keep this package's __init__ free of eager imports so `python -m ...`
execution stays side-effect free.
"""

__all__: list[str] = []
