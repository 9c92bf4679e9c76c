"""Interactive command loop that builds bodies and queries them."""

from __future__ import annotations

import math
import re
import sys
from typing import Callable, Optional, TextIO

from labkit.bodies import Body, Compound, Cone, Cylinder, Parallelepiped, Sphere

G = 9.8
WATER_DENSITY = 997.0

INTRODUCTION = (
    "Add bodies:\n"
    "\tSpehere: 1 density<double> radius<double>\n"
    "\t\tSpehere example: 1 800.5 1.5\n"
    "\tParallelepiped: 2 density<double> width<double> height<double> depth<double>\n"
    "\t\tParallelepiped example: 2 250.25 2 6.8 14.7\n"
    "\tCone: 3 density<double> radius<double> height<double>\n"
    "\t\tCone example: 3 250 6.5 15.5\n"
    "\tCylinder: 4 density<double> radius<double> height<double>\n"
    "\t\tCylinder example: 4 250 6.5 15.5\n"
    "\tStart compound: 5\n"
    "\tEnd compound: 6\n"
    "Max mass body: 7\n"
    "Min weight: 8\n"
    "Print bodies: 9\n"
    "Exit: 10\n"
)
UNKNOWN_COMMAND = "Unknown command\n"
MAX_MASS_ERR = "Can't find max mass body: bodies empty\n"
MAX_MASS_RESULT = "Max mass body: "
MIN_WEIGHT_ERR = "Can't find min weight body: bodies empty\n"
MIN_WEIGHT_RESULT = "Min weight body: "
EMPTY_BODIES = "Bodies is empty\n"
BODIES_SIZE = "Bodies size: "
ARG_LOWER_0_ERR = "Arg can't be lower or equal 0\n"
ARG_TO_DOUBLE_ERR = "Can't parse args to double\n"
ARGS_COUNT_ERR = "Invalid args count\n"
COMPOUND_MODE_ENABLE = "Compound mode enabled\n"
COMPOUND_MODE_DISABLE = "Compound mode disabled\n"

_SPHERE, _PARALLELEPIPED, _CONE, _CYLINDER = 1, 2, 3, 4
_COMPOUND_START, _COMPOUND_END = 5, 6
_MAX_MASS, _MIN_WEIGHT, _PRINT, _EXIT = 7, 8, 9, 10

# command -> (token count including the command, factory from parsed arguments)
_SHAPES: dict[int, tuple[int, Callable[[list[float]], Body]]] = {
    _SPHERE: (3, lambda a: Sphere(a[0], a[1])),
    _PARALLELEPIPED: (5, lambda a: Parallelepiped(a[0], a[1], a[2], a[3])),
    _CONE: (4, lambda a: Cone(a[0], a[1], a[2])),
    _CYLINDER: (4, lambda a: Cylinder(a[0], a[1], a[2])),
}

_COMMAND = re.compile(r"-?[0-9]+")
_NUMBER = re.compile(
    r"\s*([+-]?)(?:(0[xX][0-9a-fA-F]+)|(inf(?:inity)?|nan)"
    r"|((?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))",
    re.IGNORECASE,
)


def _command_of(token: str) -> int:
    return int(token) if _COMMAND.fullmatch(token) else 0


def _parse_double(text: str) -> float:
    """Parse the leading number of ``text``; trailing characters are ignored."""
    match = _NUMBER.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    sign, hexadecimal, special, decimal = match.groups()
    if hexadecimal:
        try:
            value = float(int(hexadecimal, 16))
        except OverflowError as exc:
            raise ValueError(f"number out of range: {text!r}") from exc
    elif special:
        value = float(special)
    else:
        value = float(decimal)
        if math.isinf(value):
            raise ValueError(f"number out of range: {text!r}")
    return -value if sign == "-" else value


class BodyHandler:
    """Reads commands from a stream and maintains a list of bodies."""

    def __init__(self, stream_in: TextIO, stream_out: TextIO, bodies: list[Body]) -> None:
        self._in = stream_in
        self._out = stream_out
        self._bodies = bodies

    def introduce(self) -> None:
        """Write the list of available commands."""
        self._out.write(INTRODUCTION)

    def _read_line(self) -> Optional[str]:
        line = self._in.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line

    def _check_args(self, tokens: list[str]) -> Optional[list[float]]:
        """Validate every token as a positive number; return the arguments after the command."""
        values = []
        for token in tokens:
            try:
                value = _parse_double(token)
            except ValueError:
                self._out.write(ARG_TO_DOUBLE_ERR)
                return None
            if value <= 0:
                self._out.write(ARG_LOWER_0_ERR)
                return None
            values.append(value)
        return values[1:]

    def _read_shape(self, tokens: list[str], command: int) -> Optional[Body]:
        count, factory = _SHAPES[command]
        if len(tokens) != count:
            self._out.write(ARGS_COUNT_ERR)
            return None
        values = self._check_args(tokens)
        if values is None:
            return None
        return factory(values)

    def _create_compound(self) -> Compound:
        compound = Compound()
        self._out.write(COMPOUND_MODE_ENABLE)
        while (line := self._read_line()) is not None:
            tokens = line.split(" ")
            command = _command_of(tokens[0])
            if command in _SHAPES:
                body = self._read_shape(tokens, command)
                if body is not None:
                    compound.add_child(body)
            elif command == _COMPOUND_START:
                sub_compound = self._create_compound()
                if len(sub_compound) != 0:
                    compound.add_child(sub_compound)
            elif command == _COMPOUND_END:
                break
            else:
                self._out.write(UNKNOWN_COMMAND)
        self._out.write(COMPOUND_MODE_DISABLE)
        return compound

    def max_mass(self) -> Optional[Body]:
        """Return the heaviest body, or None (with a message) when there are none."""
        if not self._bodies:
            self._out.write(MAX_MASS_ERR)
            return None
        return max(self._bodies, key=lambda body: body.mass)

    def min_weight(self) -> Optional[Body]:
        """Return the body that weighs least in water, or None when there are none."""
        if not self._bodies:
            self._out.write(MIN_WEIGHT_ERR)
            return None
        return min(
            self._bodies,
            key=lambda body: body.mass * G - body.volume * WATER_DENSITY * G,
        )

    def print_bodies(self) -> None:
        """Write the number of bodies followed by the description of each."""
        if not self._bodies:
            self._out.write(EMPTY_BODIES)
        self._out.write(f"{BODIES_SIZE}{len(self._bodies)}\n")
        for body in self._bodies:
            self._out.write(body.to_string() + "\n")

    def operate(self) -> None:
        """Process commands until the input ends or the exit command arrives."""
        while (line := self._read_line()) is not None:
            tokens = line.split(" ")
            command = _command_of(tokens[0])
            if command in _SHAPES:
                body = self._read_shape(tokens, command)
                if body is not None:
                    self._bodies.append(body)
            elif command == _COMPOUND_START:
                compound = self._create_compound()
                if len(compound) != 0:
                    self._bodies.append(compound)
            elif command == _MAX_MASS:
                body = self.max_mass()
                if body is not None:
                    self._out.write(MAX_MASS_RESULT + body.to_string() + "\n")
            elif command == _MIN_WEIGHT:
                body = self.min_weight()
                if body is not None:
                    self._out.write(MIN_WEIGHT_RESULT + body.to_string() + "\n")
            elif command == _PRINT:
                self.print_bodies()
            elif command == _EXIT:
                self.print_bodies()
                self.max_mass()
                self.min_weight()
                return
            else:
                self._out.write(UNKNOWN_COMMAND)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the interactive body builder on standard input and output."""
    bodies: list[Body] = []
    handler = BodyHandler(sys.stdin, sys.stdout, bodies)
    handler.introduce()
    handler.operate()
    return 0