# terminder/util/timeparse.py
from __future__ import annotations

import datetime as dt
import re

from .tz import midnight_epoch_s

_DMY_RE = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{1,4})$")

MIN_YEAR = 1900
MAX_YEAR = 9998


def parse_date_dd_mm_yyyy(s: str) -> dt.date:
    m = _DMY_RE.match(s.strip())
    if not m:
        raise ValueError(f"Invalid date (expected DD.MM.YYYY): {s!r}")
    day, month, year = (int(g) for g in m.groups())
    if not (MIN_YEAR <= year <= MAX_YEAR):
        raise ValueError(f"Invalid date: {s!r} (year must be {MIN_YEAR}..{MAX_YEAR})")
    try:
        return dt.date(year, month, day)
    except ValueError as ex:
        raise ValueError(f"Invalid date: {s!r} ({ex})") from ex


def date_to_epoch_s(s: str, tz: dt.tzinfo) -> int:
    """Epoch seconds for midnight of the DD.MM.YYYY date `s` in `tz`."""
    return midnight_epoch_s(parse_date_dd_mm_yyyy(s), tz)
