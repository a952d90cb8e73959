# terminder/shell.py
from __future__ import annotations

import datetime as dt
import logging
import sys
from typing import Callable, Iterable, Optional, TextIO

from . import __version__
from .model import Appointment
from .store import AppointmentStore
from .util.console import emit
from .util.timeparse import parse_date_dd_mm_yyyy
from .util.tz import midnight_epoch_s, today_date

logger = logging.getLogger(__name__)

RULE = "-" * 38

MENU = (
    " ------------------------------------------------------ ",
    "| Please choose one of the following options:          |",
    "| 1. All appointments (today)                          |",
    "| 2. All appointments (specific day)                   |",
    "| 3. All appointments (everything)                     |",
    "| 4. Create new appointment                            |",
    "| 5. Search appointment                                |",
    "| 6. Delete appointment                                |",
    "| 7. Delete all appointments                           |",
    "| 8. Quit                                              |",
    " ------------------------------------------------------ ",
    "",
)

QUIT = 8

InputFn = Callable[[str], str]


class Shell:
    """Menu loop over an AppointmentStore.

    `input_fn` follows the signature of the builtin `input`; EOFError from it
    cancels a date prompt and quits at the menu prompt.
    """

    def __init__(
        self,
        store: AppointmentStore,
        *,
        tz: dt.tzinfo,
        input_fn: Optional[InputFn] = None,
        out: Optional[TextIO] = None,
    ) -> None:
        self.store = store
        self.tz = tz
        self._input = input_fn if input_fn is not None else input
        self.out = out if out is not None else sys.stdout

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def _ask(self, prompt: str) -> Optional[str]:
        try:
            return self._input(prompt)
        except EOFError:
            return None

    def read_choice(self) -> int:
        while True:
            emit(self.out, *MENU)
            raw = self._ask("Choice: ")
            if raw is None:
                return QUIT
            s = raw.strip()
            if s.isdecimal() and 1 <= int(s) <= QUIT:
                return int(s)
            emit(self.out, "Invalid input!")

    def read_date(self) -> Optional[dt.date]:
        """Prompt until a valid DD.MM.YYYY date; None on empty line or EOF."""
        while True:
            raw = self._ask("Please enter the date as DD.MM.YYYY (empty to cancel): ")
            if raw is None or not raw.strip():
                return None
            try:
                return parse_date_dd_mm_yyyy(raw)
            except ValueError as ex:
                logger.debug("rejected date input: %s", ex)
                emit(self.out, "", "Invalid input format.")

    def read_text(self, prompt: str = "") -> Optional[str]:
        raw = self._ask(prompt)
        if raw is None:
            return None
        return raw.rstrip("\r\n")

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------
    def print_appointment(self, appt: Appointment) -> None:
        emit(
            self.out,
            RULE,
            f"Appointment: {appt.description}",
            f"Due on: {appt.date_str(self.tz)}",
            RULE,
        )

    def print_list(self, appts: Iterable[Appointment]) -> None:
        found = False
        for appt in appts:
            self.print_appointment(appt)
            found = True
        if not found:
            emit(self.out, "No appointments found!")

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def list_today(self) -> None:
        self.print_list(self.store.on_date(today_date(self.tz), self.tz))

    def list_day(self) -> None:
        d = self.read_date()
        if d is None:
            return
        self.print_list(self.store.on_date(d, self.tz))

    def list_all(self) -> None:
        self.print_list(self.store)

    def create(self) -> None:
        emit(self.out, "New appointment:")
        text = self.read_text("Description: ")
        if text is None:
            return
        if "|" in text:
            emit(self.out, "Description must not contain '|'.")
            return
        d = self.read_date()
        if d is None:
            return
        self.store.insert(midnight_epoch_s(d, self.tz), text)
        logger.debug("inserted %r on %s", text, d.isoformat())

    def search(self) -> None:
        emit(self.out, "Search appointment:")
        text = self.read_text("Description: ")
        if text is None:
            return
        appt = self.store.find(text)
        if appt is not None:
            self.print_appointment(appt)
        else:
            emit(self.out, "Appointment not found!")

    def delete(self) -> None:
        emit(self.out, "Delete appointment:")
        text = self.read_text("Description: ")
        if text is None:
            return
        if self.store.delete(text):
            emit(self.out, "Appointment deleted!")
        else:
            emit(self.out, "Appointment not found!")

    def clear(self) -> None:
        self.store.clear()
        emit(self.out, "List cleared!")

    def dispatch(self, choice: int) -> bool:
        """Run one menu action; return False when the user quits."""
        actions = {
            1: self.list_today,
            2: self.list_day,
            3: self.list_all,
            4: self.create,
            5: self.search,
            6: self.delete,
            7: self.clear,
        }
        if choice == QUIT:
            return False
        actions[choice]()
        return True

    def run(self) -> None:
        emit(self.out, f"Terminder - Version {__version__}")
        while self.dispatch(self.read_choice()):
            pass
        emit(self.out, "See you soon!")


__all__ = [
    "Shell",
    "MENU",
    "QUIT",
]
