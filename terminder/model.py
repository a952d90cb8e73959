# terminder/model.py
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from typing import Tuple

from .util.tz import date_fields, date_of, format_date


@dataclass(frozen=True)
class Appointment:
    description: str
    start: int  # epoch seconds, midnight of the entered date

    def date(self, tz: dt.tzinfo) -> dt.date:
        return date_of(self.start, tz)

    def fields(self, tz: dt.tzinfo) -> Tuple[int, int, int]:
        return date_fields(self.start, tz)

    def date_str(self, tz: dt.tzinfo) -> str:
        return format_date(self.start, tz)


__all__ = [
    "Appointment",
]
