"""Command loop that drives a car from lines of text."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

from labkit.car import Car, CarError, Direction

INTRODUCTION = (
    "Enter command:\n"
    "1 - Info(Car info about engine, gear, speed and direction)\n"
    "2 - EngineOn\n"
    "3 - EngineOff\n"
    "4 (some int value) - SetGear\n"
    "5 (some int value) - SetSpeed\n"
    "\n"
)
UNKNOWN_COMMAND = "Unknown command\n"

_DIRECTION_TEXT = {
    Direction.BACKWARD: "Current direction: backward\n",
    Direction.FORWARD: "Current direction: forward\n",
    Direction.STANDING_STILL: "Current direction: standing still\n",
}

_INFO, _ENGINE_ON, _ENGINE_OFF, _SET_GEAR, _SET_SPEED = 1, 2, 3, 4, 5

_INT = re.compile(r"-?[0-9]+")


def _as_int(token: str) -> Optional[int]:
    return int(token) if _INT.fullmatch(token) else None


class CarHandler:
    """Reads commands from a stream and applies them to a car."""

    def __init__(self, car: Car, stream_in: TextIO, stream_out: TextIO) -> None:
        self.car = car
        self._in = stream_in
        self._out = stream_out

    def introduce(self) -> None:
        """Write the list of available commands."""
        self._out.write(INTRODUCTION)

    def info(self) -> None:
        """Write the car's gear, speed, engine state and direction."""
        car = self.car
        self._out.write(
            "Car info:\n"
            f"Current gear: {int(car.gear)}\n"
            f"Current speed: {car.speed}\n"
            + ("Engine: on\n" if car.is_turned_on else "Engine: off\n")
            + _DIRECTION_TEXT[car.direction]
        )

    def _execute(self, line: str) -> None:
        tokens = line.split(" ")
        command = _as_int(tokens[0]) or 0
        argument = 0
        if len(tokens) == 2:
            value = _as_int(tokens[1])
            if value is None:
                command = 0
            else:
                argument = value

        if command == _INFO:
            self.info()
        elif command == _ENGINE_ON:
            self.car.turn_on_engine()
        elif command == _ENGINE_OFF:
            self.car.turn_off_engine()
        elif command in (_SET_GEAR, _SET_SPEED):
            action = self.car.set_gear if command == _SET_GEAR else self.car.set_speed
            try:
                action(argument)
            except CarError as err:
                self._out.write(f"{err}\n")
        else:
            self._out.write(UNKNOWN_COMMAND)

    def run(self) -> None:
        """Process commands until the input ends."""
        for raw in self._in:
            self._execute(raw.removesuffix("\n"))


def main(argv: Optional[list[str]] = None) -> int:
    """Drive a car from commands on standard input."""
    handler = CarHandler(Car(), sys.stdin, sys.stdout)
    handler.introduce()
    handler.run()
    return 0