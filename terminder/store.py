# terminder/store.py
"""terminder.store

Chronologically ordered appointment container.

Ordering rules:
- insert places a record before the first element whose start is strictly
  later, so records sharing a start keep their insertion order.
- find/delete match descriptions exactly and act on the first hit in
  stored order.
- day filters compare calendar fields (day, month, year), not raw seconds.
"""

from __future__ import annotations

import datetime as dt
from typing import Iterator, List, Optional

from .model import Appointment


class AppointmentStore:
    def __init__(self) -> None:
        self._items: List[Appointment] = []

    def __iter__(self) -> Iterator[Appointment]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"AppointmentStore({len(self._items)} appointments)"

    def iterate(self) -> Iterator[Appointment]:
        """Iterate appointments in stored (chronological) order."""
        return iter(self)

    def insert(self, start: int, description: str) -> Appointment:
        appt = Appointment(description=description, start=int(start))
        for i, cur in enumerate(self._items):
            if cur.start - appt.start > 0:
                self._items.insert(i, appt)
                return appt
        self._items.append(appt)
        return appt

    def find(self, description: str) -> Optional[Appointment]:
        for appt in self._items:
            if appt.description == description:
                return appt
        return None

    def delete(self, description: str) -> bool:
        for i, appt in enumerate(self._items):
            if appt.description == description:
                del self._items[i]
                return True
        return False

    def clear(self) -> None:
        self._items.clear()

    def on_day(self, day: int, month: int, year: int, tz: dt.tzinfo) -> List[Appointment]:
        """Appointments whose calendar date in `tz` is day.month.year."""
        want = (day, month, year)
        return [a for a in self._items if a.fields(tz) == want]

    def on_date(self, d: dt.date, tz: dt.tzinfo) -> List[Appointment]:
        """Appointments whose calendar date in `tz` is `d`."""
        return [a for a in self._items if a.date(tz) == d]


def create() -> AppointmentStore:
    return AppointmentStore()


__all__ = [
    "AppointmentStore",
    "create",
]
