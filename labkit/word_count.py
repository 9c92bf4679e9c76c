"""Count how often each whitespace-separated word occurs."""

from __future__ import annotations

import re
import sys
from collections import Counter
from typing import Mapping, Optional, TextIO

_WORD = re.compile(r"[^ \t\n\v\f\r]+")


def read_words(stream: TextIO) -> dict[str, int]:
    """Read every word of ``stream``; return word counts ordered by word."""
    counts = Counter(_WORD.findall(stream.read()))
    return dict(sorted(counts.items()))


def print_words(output: TextIO, words: Mapping[str, int]) -> None:
    """Write one ``word->count`` line per word, in sorted order."""
    for word, count in sorted(words.items()):
        output.write(f"{word}->{count}\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Count the words on standard input and print the tally."""
    print_words(sys.stdout, read_words(sys.stdin))
    return 0