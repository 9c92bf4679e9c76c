"""Rational numbers kept in lowest terms with a positive denominator."""

from __future__ import annotations

import math
import re
from fractions import Fraction
from typing import Optional, Union

DELIMITER = "/"
ZERO_DENOMINATOR_ERR = "Denominator must not be zero"

_TEXT = re.compile(r"\s*([+-]?[0-9]+)/\s*([+-]?[0-9]+)")

Operand = Union["Rational", int]


class Rational:
    """An immutable fraction of two integers."""

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        if denominator == 0:
            raise ValueError(ZERO_DENOMINATOR_ERR)
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        self._numerator = numerator // divisor
        self._denominator = denominator // divisor

    @property
    def numerator(self) -> int:
        """The numerator, carrying the sign of the number."""
        return self._numerator

    @property
    def denominator(self) -> int:
        """The denominator, always positive."""
        return self._denominator

    def to_float(self) -> float:
        """The value as a floating-point number."""
        return self._numerator / self._denominator

    def __float__(self) -> float:
        return self.to_float()

    @classmethod
    def parse(cls, text: str) -> Rational:
        """Read a number written as ``numerator/denominator``; trailing text is ignored."""
        match = _TEXT.match(text)
        if match is None:
            raise ValueError(f"not a rational number: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @staticmethod
    def _coerce(value: object) -> Optional[Rational]:
        if isinstance(value, Rational):
            return value
        if isinstance(value, int):
            return Rational(value)
        return None

    def __pos__(self) -> Rational:
        return self

    def __neg__(self) -> Rational:
        return Rational(-self._numerator, self._denominator)

    def __add__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator + self._denominator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __radd__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs + self

    def __sub__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator - self._denominator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __rsub__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._numerator,
            self._denominator * rhs._denominator,
        )

    def __rmul__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs * self

    def __truediv__(self, other: object) -> Rational:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self._numerator * rhs._denominator,
            self._denominator * rhs._numerator,
        )

    def __rtruediv__(self, other: object) -> Rational:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return (self._numerator, self._denominator) == (rhs._numerator, rhs._denominator)

    def __hash__(self) -> int:
        return hash(Fraction(self._numerator, self._denominator))

    def __lt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() < rhs.to_float()

    def __le__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() <= rhs.to_float()

    def __gt__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() > rhs.to_float()

    def __ge__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self.to_float() >= rhs.to_float()

    def __str__(self) -> str:
        return f"{self._numerator}{DELIMITER}{self._denominator}"

    def __repr__(self) -> str:
        return f"Rational({self._numerator}, {self._denominator})"