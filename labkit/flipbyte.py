"""Reverse the order of the bits in a byte."""

from __future__ import annotations

import re
import sys
from typing import Optional

ERR_INVALID_ARGS_COUNT = "Invalid arguments count\nUsage: flipbyte <num to flip>\n"
ERR_VALUE_IS_NOT_INT = "Entered value is not in\n"
ERR_VALUE_OUT_OF_RANGE = "Entered number is lower 0 or bigger 255\n"

_INT = re.compile(r"-?[0-9]+")


def flip_byte(byte: int) -> int:
    """Return ``byte`` with its eight bits in reverse order."""
    byte = (byte & 0b11110000) >> 4 | (byte & 0b00001111) << 4
    byte = (byte & 0b11001100) >> 2 | (byte & 0b00110011) << 2
    byte = (byte & 0b10101010) >> 1 | (byte & 0b01010101) << 1
    return byte


def is_int(text: str) -> bool:
    """Whether ``text`` is an optional minus sign followed by decimal digits."""
    return _INT.fullmatch(text) is not None


def main(argv: Optional[list[str]] = None) -> int:
    """Print the bit-reversed value of the byte given on the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        sys.stdout.write(ERR_INVALID_ARGS_COUNT)
        return 1
    text = args[0]
    if not is_int(text):
        sys.stdout.write(ERR_VALUE_IS_NOT_INT)
        return 1
    byte = int(text)
    if not 0 <= byte <= 255:
        sys.stdout.write(ERR_VALUE_OUT_OF_RANGE)
        return 1
    sys.stdout.write(f"{flip_byte(byte)}\n")
    return 0