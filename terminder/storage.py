"""Load/save appointment files.

Format, one record per line:

    <description>|<epoch_seconds>;

Blank lines are ignored. Any other line that does not match aborts the load
with ParseError; a partially read store is never returned.
"""

from __future__ import annotations

import datetime as dt
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from .model import Appointment
from .store import AppointmentStore
from .util.tz import check_epoch_s, start_of_today

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

_LINE_RE = re.compile(r"^(?P<desc>[^|]*)\|(?P<start>[+-]?\d+);$")


class ParseError(ValueError):
    """A persisted record does not match `description|epoch_seconds;`."""

    def __init__(self, path: PathLike, lineno: int, line: str, reason: str) -> None:
        self.path = str(path)
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"{self.path}:{lineno}: {reason}: {line!r}")


class SaveError(OSError):
    """The save destination cannot be opened for writing."""

    def __init__(self, path: PathLike, cause: OSError) -> None:
        self.path = str(path)
        super().__init__(f"Cannot write appointments to '{self.path}': {cause.strerror or cause}")
        self.errno = cause.errno


def _check_description(description: str) -> None:
    if "|" in description:
        raise ValueError(f"description must not contain '|': {description!r}")
    if "\n" in description or "\r" in description:
        raise ValueError(f"description must not contain line breaks: {description!r}")


def format_line(appt: Appointment) -> str:
    _check_description(appt.description)
    return f"{appt.description}|{int(appt.start)};"


def _why_malformed(line: str) -> str:
    if "|" not in line:
        return "missing '|' delimiter"
    if not line.endswith(";"):
        return "missing ';' terminator"
    return "timestamp is not an integer"


def parse_line(line: str) -> Appointment:
    """Decode one record; raises ValueError on malformed input."""
    m = _LINE_RE.match(line)
    if not m:
        raise ValueError(_why_malformed(line))
    start = check_epoch_s(int(m.group("start")))
    return Appointment(description=m.group("desc"), start=start)


def iter_lines(path: Path) -> Iterator[Tuple[int, str]]:
    """Yield (lineno, line) for non-blank lines; undecodable bytes raise ParseError."""
    with open(path, "rb") as f:
        for lineno, raw in enumerate(f, start=1):
            try:
                text = raw.decode("utf-8")
            except UnicodeDecodeError as ex:
                line = raw.decode("utf-8", errors="replace").rstrip("\r\n")
                raise ParseError(path, lineno, line, "not valid UTF-8") from ex
            line = text.rstrip("\r\n")
            if line.strip():
                yield lineno, line


def _read_records(path: Path) -> list[Appointment]:
    out: list[Appointment] = []
    for lineno, line in iter_lines(path):
        try:
            out.append(parse_line(line))
        except ValueError as ex:
            raise ParseError(path, lineno, line, str(ex)) from ex
    return out


def load_store(
    path: PathLike,
    *,
    reset_time: Optional[int] = None,
    tz: Optional[dt.tzinfo] = None,
) -> AppointmentStore:
    """Load appointments from `path` into a new store.

    A missing file yields an empty store. Records starting before
    `reset_time` are dropped; the default is midnight, in `tz` (the zone
    dates were entered in, UTC when omitted), of the current UTC date.
    Read failures other than a missing file propagate as OSError.
    """
    p = Path(path)
    store = AppointmentStore()
    if not p.exists():
        logger.info("File '%s' not found. Starting with an empty list.", p)
        return store

    logger.info("Using file '%s' for storage.", p)
    records = _read_records(p)

    cutoff = start_of_today(tz=tz) if reset_time is None else int(reset_time)
    stale = 0
    for appt in records:
        if appt.start - cutoff >= 0:
            store.insert(appt.start, appt.description)
        else:
            stale += 1
    if stale:
        logger.info("Dropped %d overdue appointment(s) from '%s'.", stale, p)
    logger.debug("Loaded %d appointment(s) from '%s'.", len(store), p)
    return store


def save_store(store: Iterable[Appointment], path: PathLike) -> int:
    """Write every appointment in stored order; return the record count."""
    lines = [format_line(a) for a in store]
    p = Path(path)
    try:
        f = open(p, "w", encoding="utf-8")
    except OSError as ex:
        raise SaveError(p, ex) from ex
    with f:
        for line in lines:
            f.write(line + "\n")
    logger.debug("Saved %d appointment(s) to '%s'.", len(lines), p)
    return len(lines)


__all__ = [
    "ParseError",
    "SaveError",
    "format_line",
    "iter_lines",
    "parse_line",
    "load_store",
    "save_store",
]
