"""Read numbers, scale them by their minimum and print them."""

from __future__ import annotations

import re
import sys
from typing import Iterable, Optional, TextIO

_SPACE = re.compile(r"[ \t\n\v\f\r]*")
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_vector(stream: TextIO) -> list[float]:
    """Read numbers from ``stream`` up to the first thing that is not a number."""
    text = stream.read()
    values: list[float] = []
    position = 0
    while True:
        position = _SPACE.match(text, position).end()
        match = _NUMBER.match(text, position)
        if match is None:
            return values
        values.append(float(match.group()))
        position = match.end()


def multiply_by_min(values: Iterable[float]) -> list[float]:
    """Return every value multiplied by the smallest of them."""
    items = list(values)
    if not items:
        return []
    smallest = min(items)
    return [value * smallest for value in items]


def print_vector(output: TextIO, values: Iterable[float]) -> None:
    """Write the values with two decimals, each followed by a space, then a line break."""
    output.write("".join(f"{value:.2f} " for value in values) + "\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Scale the numbers on standard input by their minimum and print them."""
    print_vector(sys.stdout, multiply_by_min(parse_vector(sys.stdin)))
    return 0