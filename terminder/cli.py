from __future__ import annotations

import argparse
import logging
import os

from .shell import Shell
from .storage import ParseError, SaveError, load_store, save_store
from .util.console import eprint
from .util.tz import resolve_tz

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def _setup_logging(level_name: str) -> None:
    level = logging.getLevelName(str(level_name).strip().upper())
    if not isinstance(level, int):
        raise SystemExit(f"Invalid --log-level value: {level_name!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt=LOG_DATEFMT)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="terminder",
        description="Interactive appointment manager backed by a delimited text file.",
    )
    ap.add_argument(
        "--file",
        default=os.getenv("TERMINDER_FILE", "appointments.txt"),
        help="Appointment file to load and save (default: env TERMINDER_FILE or appointments.txt)",
    )
    ap.add_argument(
        "--tz",
        default=os.getenv("TERMINDER_TZ", "local"),
        help="Timezone for date entry and day listings (default: env TERMINDER_TZ or 'local')",
    )
    ap.add_argument("--no-save", action="store_true", help="Do not write the file on quit")
    ap.add_argument(
        "--log-level",
        default=os.getenv("TERMINDER_LOG_LEVEL", "WARNING"),
        help="Logging level (default: env TERMINDER_LOG_LEVEL or WARNING)",
    )

    args = ap.parse_args(argv)
    _setup_logging(args.log_level)

    try:
        tz = resolve_tz(args.tz)
    except ValueError as e:
        raise SystemExit(f"Invalid --tz value: {e}")

    try:
        store = load_store(args.file, tz=tz)
    except (ParseError, OSError) as e:
        eprint(f"[terminder] ERROR: {e}")
        return 2

    Shell(store, tz=tz).run()

    if args.no_save:
        return 0
    try:
        save_store(store, args.file)
    except SaveError as e:
        eprint(f"[terminder] ERROR: {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
