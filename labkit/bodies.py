"""Geometric bodies with density, volume and mass, and compounds of them."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

PRECISION = 3


def _fmt(value: float) -> str:
    return f"{value:.{PRECISION}f}"


class Body(ABC):
    """A physical body with a density, a volume and a mass."""

    @property
    @abstractmethod
    def density(self) -> float:
        """Density of the body."""

    @property
    @abstractmethod
    def volume(self) -> float:
        """Volume of the body."""

    @property
    @abstractmethod
    def mass(self) -> float:
        """Mass of the body."""

    @property
    @abstractmethod
    def type_name(self) -> str:
        """Human-readable name of the kind of body."""

    @abstractmethod
    def _properties(self) -> str:
        """Text describing the properties specific to this kind of body."""

    def to_string(self) -> str:
        """Describe the body: type, density, volume, mass and its own properties."""
        return (
            f"{self.type_name}:\n"
            f"\tDensity: {_fmt(self.density)}\n"
            f"\tVolume: {_fmt(self.volume)}\n"
            f"\tMass: {_fmt(self.mass)}\n"
            + self._properties()
        )

    def __str__(self) -> str:
        return self.to_string()


class SolidBody(Body):
    """A body made of a single material of uniform density."""

    def __init__(self, density: float) -> None:
        self._density = density

    @property
    def density(self) -> float:
        return self._density

    @property
    def mass(self) -> float:
        return self.volume * self.density


class Sphere(SolidBody):
    """A solid sphere."""

    def __init__(self, density: float, radius: float) -> None:
        super().__init__(density)
        self.radius = radius

    @property
    def type_name(self) -> str:
        return "Sphere"

    @property
    def volume(self) -> float:
        # The leading factor is an integer division, which yields 1.
        return (4 // 3) * (self.radius**3 * math.pi)

    def _properties(self) -> str:
        return f"\tRadius: {_fmt(self.radius)}\n"


class Cone(SolidBody):
    """A solid right circular cone."""

    def __init__(self, density: float, base_radius: float, height: float) -> None:
        super().__init__(density)
        self.base_radius = base_radius
        self.height = height

    @property
    def type_name(self) -> str:
        return "Cone"

    @property
    def volume(self) -> float:
        return math.pi * self.base_radius**2 * (self.height / 3)

    def _properties(self) -> str:
        return f"\tRadius: {_fmt(self.base_radius)}\n\tHeight: {_fmt(self.height)}\n"


class Cylinder(SolidBody):
    """A solid right circular cylinder."""

    def __init__(self, density: float, base_radius: float, height: float) -> None:
        super().__init__(density)
        self.base_radius = base_radius
        self.height = height

    @property
    def type_name(self) -> str:
        return "Cylinder"

    @property
    def volume(self) -> float:
        return math.pi * self.base_radius**2 * self.height

    def _properties(self) -> str:
        return f"\tRadius: {_fmt(self.base_radius)}\n\tHeight: {_fmt(self.height)}\n"


class Parallelepiped(SolidBody):
    """A solid rectangular box."""

    def __init__(self, density: float, height: float, width: float, depth: float) -> None:
        super().__init__(density)
        self.height = height
        self.width = width
        self.depth = depth

    @property
    def type_name(self) -> str:
        return "Parallelepiped"

    @property
    def volume(self) -> float:
        return self.width * self.height * self.depth

    def _properties(self) -> str:
        return (
            f"\tHeight: {_fmt(self.height)}\n"
            f"\tWidth: {_fmt(self.width)}\n"
            f"\tDepth: {_fmt(self.depth)}\n"
        )


class Compound(Body):
    """A body assembled from other bodies, compounds included."""

    def __init__(self) -> None:
        self._children: list[Body] = []

    def add_child(self, child: Body) -> None:
        """Append a body to this compound."""
        self._children.append(child)

    @property
    def children(self) -> list[Body]:
        """A copy of the list of child bodies, in insertion order."""
        return list(self._children)

    def __len__(self) -> int:
        return len(self._children)

    @property
    def type_name(self) -> str:
        return "Compound"

    @property
    def volume(self) -> float:
        return sum(child.volume for child in self._children)

    @property
    def mass(self) -> float:
        return sum(child.mass for child in self._children)

    @property
    def density(self) -> float:
        volume = self.volume
        if volume == 0:
            return math.nan
        return self.mass / volume

    def _properties(self) -> str:
        parts = ["\tChild bodies: \n"]
        for child in self._children:
            parts.append(
                f"\t\t{child.type_name}\n"
                f"\t\t\t\tDensity: {_fmt(child.density)}\n"
                f"\t\t\t\tMass: {_fmt(child.mass)}\n"
                f"\t\t\t\tVolume: {_fmt(child.volume)}\n"
            )
            if isinstance(child, Compound):
                parts.append("\n")
                parts.append(child.to_string())
        parts.append("\n")
        return "".join(parts)