"""Strip leading and trailing spaces from each input line."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def read_string(stream: TextIO) -> str:
    """Read one line without its line break; empty at end of input."""
    return stream.readline().removesuffix("\n")


def trim_blanks(text: str) -> str:
    """Remove spaces at both ends; other whitespace is kept."""
    return text.strip(" ")


def print_string(output: TextIO, text: str) -> None:
    """Write ``text`` followed by a line break."""
    output.write(f"{text}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Trim every line of standard input, printing one more line at its end."""
    while True:
        raw = sys.stdin.readline()
        print_string(sys.stdout, trim_blanks(raw.removesuffix("\n")))
        if not raw.endswith("\n"):
            break
    return 0