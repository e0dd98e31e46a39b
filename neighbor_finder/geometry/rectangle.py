"""
Axis-aligned rectangle with integer bounds.

Used by the 2d-tree as the bounding region of each subtree and as the
search region of range queries.
"""

import math
from dataclasses import dataclass

from neighbor_finder.errors import RangeError
from neighbor_finder.geometry.point import Point, check_coordinate


@dataclass(frozen=True)
class Rectangle:
    """Immutable axis-aligned rectangle, closed on all edges.

    Parameters
    ----------
    min_x, min_y : int
        Lower-left corner.
    max_x, max_y : int
        Upper-right corner.

    Raises
    ------
    RangeError
        If any bound is outside [-99000, 99000], or if ``max_x < min_x``
        or ``max_y < min_y``.
    ArgumentError
        If any bound is not an integer.
    """

    min_x: int
    min_y: int
    max_x: int
    max_y: int

    def __post_init__(self):
        for name in ("min_x", "min_y", "max_x", "max_y"):
            object.__setattr__(self, name, check_coordinate(name, getattr(self, name)))
        if self.max_x < self.min_x or self.max_y < self.min_y:
            raise RangeError(
                f"Invalid rectangle: ({self.min_x}, {self.min_y}) - ({self.max_x}, {self.max_y})"
            )

    def contains(self, p: Point) -> bool:
        """Return True if ``p`` lies inside or on the boundary."""
        return self.min_x <= p.x <= self.max_x and self.min_y <= p.y <= self.max_y

    def intersects(self, other: "Rectangle") -> bool:
        """Return True if the rectangles overlap or touch."""
        return (
            self.max_x >= other.min_x
            and self.max_y >= other.min_y
            and other.max_x >= self.min_x
            and other.max_y >= self.min_y
        )

    def squared_distance_to(self, p: Point) -> int:
        """
        Squared distance from ``p`` to the closest point of the rectangle.

        Zero when the rectangle contains ``p``.
        """
        if p.x < self.min_x:
            dx = p.x - self.min_x
        elif p.x > self.max_x:
            dx = p.x - self.max_x
        else:
            dx = 0

        if p.y < self.min_y:
            dy = p.y - self.min_y
        elif p.y > self.max_y:
            dy = p.y - self.max_y
        else:
            dy = 0

        return dx * dx + dy * dy

    def distance_to(self, p: Point) -> float:
        """Euclidean distance from ``p`` to the rectangle."""
        return math.sqrt(self.squared_distance_to(p))
