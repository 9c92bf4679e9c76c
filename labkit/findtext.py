"""Report the numbers of the lines of a file that contain a given text."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional

ERR_INVALID_ARGS_COUNT = (
    "Invalid arguments count\n"
    "Usage: findtext <input file> <searched text>\n"
)
ERR_FAILED_OPEN_FILE = "Failed open file for reading: "
RESULT_NOT_FOUND = "No string found\n"


def find_lines(lines: Iterable[str], needle: str) -> Iterator[int]:
    """Yield the 1-based numbers of the lines containing ``needle``."""
    for number, line in enumerate(lines, start=1):
        if needle in line:
            yield number


def main(argv: Optional[list[str]] = None) -> int:
    """Print matching line numbers; exit 0 if found, 1 if not, 2 on errors."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 2:
        sys.stdout.write(ERR_INVALID_ARGS_COUNT)
        return 2
    path, needle = args
    try:
        handle = open(path, encoding="utf-8", errors="surrogateescape")
    except OSError:
        sys.stdout.write(f"{ERR_FAILED_OPEN_FILE}{path}\n")
        return 2

    found = False
    with handle:
        for number in find_lines((line.removesuffix("\n") for line in handle), needle):
            found = True
            sys.stdout.write(f"{number}\n")

    if not found:
        sys.stdout.write(RESULT_NOT_FOUND)
        return 1
    return 0