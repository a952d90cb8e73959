#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
from pathlib import Path
from typing import List

from terminder.storage import ParseError, iter_lines, parse_line
from terminder.util.console import eprint
from terminder.util.tz import resolve_tz, start_of_today

PROG = "terminder-validate-file"


def _die(msg: str, rc: int = 2) -> int:
    eprint(f"[{PROG}] ERROR: {msg}")
    return rc


def check_file(path: Path, *, reset_time: int) -> tuple[int, int, List[ParseError]]:
    """Return (records, stale, errors) for an appointment file.

    Unlike load_store this keeps going after a bad record so every problem
    is reported in one run. Undecodable bytes still stop the scan.
    """
    records = 0
    stale = 0
    errors: List[ParseError] = []
    try:
        for lineno, line in iter_lines(path):
            try:
                appt = parse_line(line)
            except ValueError as ex:
                errors.append(ParseError(path, lineno, line, str(ex)))
                continue
            records += 1
            if appt.start < reset_time:
                stale += 1
    except ParseError as ex:
        errors.append(ex)
    return records, stale, errors


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog=PROG,
        description="Check an appointment file (description|epoch_seconds; per line).",
    )
    ap.add_argument("path", help="Appointment file to check")
    ap.add_argument(
        "--reset-time",
        type=int,
        default=None,
        help="Epoch seconds used for the overdue count (default: start of today in --tz)",
    )
    ap.add_argument(
        "--tz",
        default=os.getenv("TERMINDER_TZ", "local"),
        help="Zone the dates were entered in (default: env TERMINDER_TZ or 'local')",
    )
    ap.add_argument("--strict", action="store_true", help="Treat overdue records as errors.")
    ns = ap.parse_args(argv)

    p = Path(ns.path)
    if not p.exists():
        return _die(f"file not found: {p}")

    if ns.reset_time is None:
        try:
            reset_time = start_of_today(tz=resolve_tz(ns.tz))
        except ValueError as ex:
            return _die(f"Invalid --tz value: {ex}")
    else:
        reset_time = int(ns.reset_time)
    try:
        records, stale, errors = check_file(p, reset_time=reset_time)
    except OSError as ex:
        return _die(f"cannot read {p}: {ex}")

    for e in errors:
        eprint(f"[{PROG}] ERROR: {e}")
    if errors:
        return 2

    if stale and ns.strict:
        return _die(f"{stale} overdue record(s) in {p}", rc=1)

    print(f"[{PROG}] OK records={records} overdue={stale} file={p}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
