# terminder/util/tz.py
from __future__ import annotations

import datetime as dt
import re
import time
from typing import Optional, Tuple

from zoneinfo import ZoneInfo

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

DATE_FMT = "%d.%m.%Y"

# Stored timestamps must stay convertible in any zone, so keep a day of
# slack on both ends of the supported date range (1900..9998).
MIN_EPOCH_S = int(dt.datetime(1899, 12, 30, tzinfo=dt.timezone.utc).timestamp())
MAX_EPOCH_S = int(dt.datetime(9999, 12, 30, tzinfo=dt.timezone.utc).timestamp())


class LocalTimezone(dt.tzinfo):
    """The machine's local zone, DST rules included (via time.localtime)."""

    def _local(self, d: dt.datetime) -> time.struct_time:
        tt = (d.year, d.month, d.day, d.hour, d.minute, d.second, d.weekday(), 0, -1)
        return time.localtime(time.mktime(tt))

    def utcoffset(self, d: Optional[dt.datetime]) -> dt.timedelta:
        if d is None:
            return dt.timedelta(seconds=time.localtime().tm_gmtoff)
        return dt.timedelta(seconds=self._local(d).tm_gmtoff)

    def dst(self, d: Optional[dt.datetime]) -> dt.timedelta:
        lt = time.localtime() if d is None else self._local(d)
        if lt.tm_isdst > 0:
            return dt.timedelta(seconds=time.timezone - time.altzone)
        return dt.timedelta(0)

    def tzname(self, d: Optional[dt.datetime]) -> str:
        lt = time.localtime() if d is None else self._local(d)
        return lt.tm_zone

    def fromutc(self, d: dt.datetime) -> dt.datetime:
        stamp = (d.replace(tzinfo=None) - dt.datetime(1970, 1, 1)).total_seconds()
        return d + dt.timedelta(seconds=time.localtime(stamp).tm_gmtoff)

    def __repr__(self) -> str:
        return "LocalTimezone()"


def normalize_tz_name(name: Optional[str]) -> str:
    """Normalize a timezone identifier.

    Supported forms:
      - None/"" / "local" -> "local" (the machine's local timezone)
      - "UTC" -> "UTC"
      - IANA names, e.g. "Europe/Berlin"
      - Fixed offsets: "+02:00", "+0200", "-05:00"
    """
    s = "" if name is None else str(name).strip()
    if not s or s.lower() == "local":
        return "local"
    if s.lower() == "utc":
        return "UTC"
    return s


def resolve_tz(name: Optional[str]) -> dt.tzinfo:
    """Resolve a timezone name into a tzinfo.

    Raises ValueError for invalid timezone identifiers.
    """
    tz_name = normalize_tz_name(name)

    if tz_name == "UTC":
        return dt.timezone.utc

    if tz_name == "local":
        return LocalTimezone()

    m = _OFFSET_RE.match(tz_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh = int(hh_s)
        mm = int(mm_s)
        if hh > 23 or mm > 59:
            raise ValueError(f"Invalid timezone offset: {tz_name!r}")
        sign = 1 if sign_s == "+" else -1
        off_min = sign * (hh * 60 + mm)
        return dt.timezone(dt.timedelta(minutes=off_min))

    try:
        return ZoneInfo(tz_name)
    except Exception as ex:
        raise ValueError(f"Invalid timezone identifier: {tz_name!r}") from ex


def today_date(tz: dt.tzinfo) -> dt.date:
    return dt.datetime.now(tz=tz).date()


def start_of_today(now: Optional[float] = None, tz: Optional[dt.tzinfo] = None) -> int:
    """Epoch seconds of midnight, in `tz`, of the current UTC date.

    This is the reset time: appointments starting before it are stale.
    Dates are stored as midnight in the entry zone, so the cutoff is taken
    in that same zone (default UTC).
    """
    if now is None:
        now = time.time()
    d = dt.datetime.fromtimestamp(now, tz=dt.timezone.utc).date()
    return midnight_epoch_s(d, tz or dt.timezone.utc)


def midnight_epoch_s(d: dt.date, tz: dt.tzinfo) -> int:
    aware = dt.datetime(d.year, d.month, d.day, 0, 0, 0, tzinfo=tz)
    return int(aware.timestamp())


def check_epoch_s(ts: int) -> int:
    if not (MIN_EPOCH_S <= ts <= MAX_EPOCH_S):
        raise ValueError(f"timestamp out of range: {ts}")
    return ts


def date_of(ts: int, tz: dt.tzinfo) -> dt.date:
    return dt.datetime.fromtimestamp(int(ts), tz=tz).date()


def date_fields(ts: int, tz: dt.tzinfo) -> Tuple[int, int, int]:
    """(day, month, year) of `ts` in `tz`."""
    d = date_of(ts, tz)
    return d.day, d.month, d.year


def format_date(ts: int, tz: dt.tzinfo) -> str:
    return date_of(ts, tz).strftime(DATE_FMT)
