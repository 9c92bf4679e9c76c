"""A car with an engine, a gearbox and a speed limited by the engaged gear."""

from __future__ import annotations

from enum import IntEnum


class Direction(IntEnum):
    """Which way the car is moving."""

    BACKWARD = -1
    STANDING_STILL = 0
    FORWARD = 1


class Gear(IntEnum):
    """Gearbox positions, numbered as the driver selects them."""

    REVERSE = -1
    NEUTRAL = 0
    FIRST = 1
    SECOND = 2
    THIRD = 3
    FOURTH = 4
    FIFTH = 5


SPEED_RANGES: dict[Gear, tuple[int, int]] = {
    Gear.REVERSE: (0, 20),
    Gear.NEUTRAL: (0, 150),
    Gear.FIRST: (0, 30),
    Gear.SECOND: (20, 50),
    Gear.THIRD: (30, 60),
    Gear.FOURTH: (40, 90),
    Gear.FIFTH: (50, 150),
}

ERR_GEAR_ENGINE_OFF = "Can't set new gear because engine turned off"
ERR_GEAR_OUT_OF_RANGE = "Can't set gear because new gear not in gear range"
ERR_GEAR_REAR_TO_FORWARD = "Can't set gear because: can't change rear gear to forward"
ERR_GEAR_SPEED_OUT_OF_RANGE = (
    "Can't set new gear because current speed not in new gear speed range"
)
ERR_SPEED_NEGATIVE = "Can't set speed because new speed lower 0"
ERR_SPEED_ENGINE_OFF = "Can't set speed because engine is off"
ERR_SPEED_NEUTRAL = (
    "Can't set speed because current gear is neutral and new speed is bigger "
    "than current speed"
)
ERR_SPEED_OUT_OF_RANGE = "Can't set speed because new speed isn't in current gear speed range"


class CarError(ValueError):
    """Raised when the car refuses a gear or speed change."""


class Car:
    """A car that starts with the engine off, in neutral and standing still."""

    def __init__(self) -> None:
        self._engine_on = False
        self._speed = 0
        self._gear = Gear.NEUTRAL
        self._direction = Direction.STANDING_STILL

    @property
    def is_turned_on(self) -> bool:
        """Whether the engine is running."""
        return self._engine_on

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def gear(self) -> Gear:
        return self._gear

    @property
    def direction(self) -> Direction:
        return self._direction

    def turn_on_engine(self) -> None:
        """Start the engine."""
        self._engine_on = True

    def turn_off_engine(self) -> bool:
        """Stop the engine if the car stands in neutral; return whether it is off."""
        if not self._engine_on:
            return True
        if self._gear is Gear.NEUTRAL and self._speed == 0:
            self._engine_on = False
            self._direction = Direction.STANDING_STILL
            return True
        return False

    def set_gear(self, gear: int) -> None:
        """Engage a gear, raising CarError when the change is not allowed."""
        if not self._engine_on and gear != Gear.NEUTRAL:
            raise CarError(ERR_GEAR_ENGINE_OFF)
        if not Gear.REVERSE <= gear <= Gear.FIFTH:
            raise CarError(ERR_GEAR_OUT_OF_RANGE)
        new_gear = Gear(gear)
        if new_gear is Gear.NEUTRAL:
            self._gear = new_gear
            return
        if self._gear is Gear.REVERSE and new_gear is not Gear.REVERSE:
            raise CarError(ERR_GEAR_REAR_TO_FORWARD)
        low, high = SPEED_RANGES[new_gear]
        if not low <= self._speed <= high:
            raise CarError(ERR_GEAR_SPEED_OUT_OF_RANGE)
        self._gear = new_gear
        self._direction = (
            Direction.BACKWARD if new_gear is Gear.REVERSE else Direction.FORWARD
        )

    def set_speed(self, speed: int) -> None:
        """Change the speed, raising CarError when the current gear forbids it."""
        if speed < 0:
            raise CarError(ERR_SPEED_NEGATIVE)
        if not self._engine_on:
            raise CarError(ERR_SPEED_ENGINE_OFF)
        if self._gear is Gear.NEUTRAL:
            if speed >= self._speed:
                raise CarError(ERR_SPEED_NEUTRAL)
            self._speed = speed
            return
        low, high = SPEED_RANGES[self._gear]
        if not low <= speed <= high:
            raise CarError(ERR_SPEED_OUT_OF_RANGE)
        self._speed = speed