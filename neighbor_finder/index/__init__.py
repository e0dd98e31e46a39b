"""Spatial index module."""

from neighbor_finder.index.kdtree import KdTree

__all__ = [
    "KdTree",
]
