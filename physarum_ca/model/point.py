"""2-D point geometry for agent positions and grid coordinates."""

import math
from dataclasses import dataclass
from typing import Union

Number = Union[int, float]


def round_half_away(value: float) -> int:
    """Round to nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return int(math.copysign(whole, value))


@dataclass(frozen=True)
class Point:
    """
    Pair of coordinates.

    Float points are continuous positions, int points are grid cells.
    Nothing here clamps to a grid; bounds are the grid's concern.
    """
    x: Number
    y: Number

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar: Number) -> "Point":
        return Point(self.x * scalar, self.y * scalar)

    @classmethod
    def from_degrees(cls, degrees: float) -> "Point":
        """Unit vector pointing along the given heading."""
        radians = math.radians(degrees)
        return cls(math.cos(radians), math.sin(radians))

    def rounded(self) -> "Point":
        """Nearest integer point; may be negative or off-grid."""
        return Point(round_half_away(self.x), round_half_away(self.y))

    def to_discrete(self) -> "Point":
        """
        Nearest non-negative grid point.

        Raises ValueError when a component rounds below zero.
        """
        point = self.rounded()
        if point.x < 0 or point.y < 0:
            raise ValueError(f"Cannot map {self} to a grid cell: negative coordinate")
        return point
