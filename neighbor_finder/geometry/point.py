"""Immutable integer point on the plane."""

import math
import numbers
from dataclasses import dataclass

from neighbor_finder.config import COORD_MAX, COORD_MIN
from neighbor_finder.errors import ArgumentError, RangeError


def check_coordinate(name: str, value) -> int:
    """Validate an integer coordinate and return it as a plain int."""
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ArgumentError(f"{name} must be an integer, got {value!r}")
    value = int(value)
    if value < COORD_MIN or value > COORD_MAX:
        raise RangeError(
            f"{name}={value} outside allowed range [{COORD_MIN}, {COORD_MAX}]"
        )
    return value


@dataclass(frozen=True)
class Point:
    """2D point with integer coordinates.

    Equality and hashing are by value.

    Parameters
    ----------
    x : int
        X coordinate in [-99000, 99000].
    y : int
        Y coordinate in [-99000, 99000].

    Raises
    ------
    RangeError
        If either coordinate lies outside the allowed range.
    ArgumentError
        If either coordinate is not an integer.
    """

    x: int
    y: int

    def __post_init__(self):
        object.__setattr__(self, "x", check_coordinate("x", self.x))
        object.__setattr__(self, "y", check_coordinate("y", self.y))

    def squared_distance(self, other: "Point") -> int:
        """Return the squared Euclidean distance to ``other``."""
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def distance(self, other: "Point") -> float:
        """Return the Euclidean distance to ``other``."""
        return math.sqrt(self.squared_distance(other))

    def __str__(self) -> str:
        return f"{{x={self.x}, y={self.y}}}"
