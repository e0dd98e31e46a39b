"""Geometry primitives: integer points and axis-aligned rectangles."""

from neighbor_finder.geometry.point import Point
from neighbor_finder.geometry.rectangle import Rectangle

__all__ = [
    "Point",
    "Rectangle",
]
