# terminder/util/console.py
from __future__ import annotations
import sys
from typing import Any, TextIO

def eprint(*args: Any) -> None:
    print(*args, file=sys.stderr)


def emit(out: TextIO, *lines: str) -> None:
    for line in lines:
        out.write(line + "\n")
