"""
2d-tree spatial index for neighbor_finder.

Provides the KdTree class: a binary tree over integer points that splits
the plane on x at even depths and on y at odd depths. Each node implicitly
owns the axis-aligned rectangle enclosing its subtree, which lets nearest
and range queries prune whole subtrees.

All walks are iterative. The tree is never rebalanced, so sorted input
gives linear depth and recursion would hit the interpreter limit.
"""

import logging
import math
from typing import Iterable, Iterator, List, Optional, Tuple

from neighbor_finder.config import COORD_MAX, COORD_MIN
from neighbor_finder.errors import ArgumentError
from neighbor_finder.geometry import Point, Rectangle

logger = logging.getLogger(__name__)


def _check_point(p) -> None:
    if not isinstance(p, Point):
        raise ArgumentError(f"Expected Point, got {type(p).__name__}")


class _Node:
    __slots__ = ("point", "splits_by_x", "left", "right")

    def __init__(self, point: Point, splits_by_x: bool):
        self.point = point
        self.splits_by_x = splits_by_x
        self.left: Optional["_Node"] = None
        self.right: Optional["_Node"] = None

    def goes_left(self, p: Point) -> bool:
        if self.splits_by_x:
            return p.x < self.point.x
        return p.y < self.point.y

    def left_rect(self, rect: Rectangle) -> Rectangle:
        if self.splits_by_x:
            return Rectangle(rect.min_x, rect.min_y, self.point.x, rect.max_y)
        return Rectangle(rect.min_x, rect.min_y, rect.max_x, self.point.y)

    def right_rect(self, rect: Rectangle) -> Rectangle:
        if self.splits_by_x:
            return Rectangle(self.point.x, rect.min_y, rect.max_x, rect.max_y)
        return Rectangle(rect.min_x, self.point.y, rect.max_x, rect.max_y)


class KdTree:
    """Mutable 2d-tree over integer points.

    Parameters
    ----------
    points : iterable of Point, optional
        Points inserted in order. Value-duplicates are ignored.

    Attributes
    ----------
    size : int
        Number of distinct points stored.
    """

    def __init__(self, points: Optional[Iterable[Point]] = None):
        self._root: Optional[_Node] = None
        self.size = 0
        self._min_x = COORD_MAX
        self._max_x = COORD_MIN
        self._min_y = COORD_MAX
        self._max_y = COORD_MIN

        if points is not None:
            n_seen = 0
            for p in points:
                self.insert(p)
                n_seen += 1
            logger.debug(f"Built 2d-tree: {self.size} distinct of {n_seen} points")

    def __len__(self) -> int:
        return self.size

    def __contains__(self, p) -> bool:
        return isinstance(p, Point) and self.contains(p)

    def __iter__(self) -> Iterator[Point]:
        """Yield stored points in pre-order."""
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.point
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    @property
    def bounds(self) -> Optional[Rectangle]:
        """Bounding box of all inserted points, or None if empty."""
        if self._root is None:
            return None
        return Rectangle(self._min_x, self._min_y, self._max_x, self._max_y)

    def insert(self, p: Point) -> None:
        """
        Add ``p`` to the tree unless a value-equal point is already stored.

        Raises
        ------
        ArgumentError
            If ``p`` is None or not a Point. The tree is left unchanged.
        """
        if p is None:
            raise ArgumentError("Cannot insert None into the tree")
        _check_point(p)

        self._expand_bounds(p)

        if self._root is None:
            self._root = _Node(p, splits_by_x=True)
            self.size += 1
            return

        node = self._root
        while True:
            if node.point == p:
                logger.debug(f"Ignoring duplicate point {p}")
                return
            if node.goes_left(p):
                if node.left is None:
                    node.left = _Node(p, not node.splits_by_x)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(p, not node.splits_by_x)
                    break
                node = node.right
        self.size += 1

    def contains(self, p: Point) -> bool:
        """Return True if a point value-equal to ``p`` is stored."""
        _check_point(p)
        node = self._root
        while node is not None:
            if node.point == p:
                return True
            node = node.left if node.goes_left(p) else node.right
        return False

    def nearest(self, p: Point) -> Optional[Point]:
        """
        Find the stored point closest to ``p``, excluding ``p`` itself.

        Parameters
        ----------
        p : Point
            Query point. It does not need to be stored.

        Returns
        -------
        Point or None
            Nearest distinct point, or None if there is none. On equal
            distances the point visited first wins.
        """
        _check_point(p)
        if self._root is None:
            return None

        best: Optional[Point] = None
        best_dist = 0
        stack: List[Tuple[_Node, Rectangle]] = [(self._root, self.bounds)]

        while stack:
            node, rect = stack.pop()
            if best is not None and rect.squared_distance_to(p) >= best_dist:
                continue

            dist = node.point.squared_distance(p)
            if (best is None or dist < best_dist) and node.point != p:
                best = node.point
                best_dist = dist

            children = [(node.left, node.left_rect), (node.right, node.right_rect)]
            if node.goes_left(p):
                children.reverse()
            # Far side pushed first so the near side is explored before it
            for child, make_rect in children:
                if child is not None:
                    stack.append((child, make_rect(rect)))

        return best

    def range(self, rect: Rectangle) -> List[Point]:
        """
        Return all stored points inside ``rect`` (edges inclusive).

        The order of the returned points is unspecified.

        Raises
        ------
        ArgumentError
            If ``rect`` is not a Rectangle.
        """
        if not isinstance(rect, Rectangle):
            raise ArgumentError(f"Expected Rectangle, got {type(rect).__name__}")

        found: List[Point] = []
        if self._root is None:
            return found

        stack: List[Tuple[_Node, Rectangle]] = [(self._root, self.bounds)]
        while stack:
            node, node_rect = stack.pop()
            if not node_rect.intersects(rect):
                continue
            if rect.contains(node.point):
                found.append(node.point)
            if node.right is not None:
                stack.append((node.right, node.right_rect(node_rect)))
            if node.left is not None:
                stack.append((node.left, node.left_rect(node_rect)))
        return found

    def radius(self, center: Point, r: float) -> List[Point]:
        """
        Return all stored points within distance ``r`` of ``center``.

        Candidates come from a range query over a square slightly larger
        than the circle, then are filtered by exact squared distance. A
        negative ``r`` is a caller error; it returns at most ``center``
        itself.

        Parameters
        ----------
        center : Point
            Circle center. It does not need to be stored.
        r : float
            Circle radius.

        Returns
        -------
        list of Point
            Points with squared distance <= r * r, in unspecified order.

        Raises
        ------
        ArgumentError
            If ``center`` is not a Point or ``r`` is NaN or infinite.
        """
        _check_point(center)
        if not math.isfinite(r):
            raise ArgumentError(f"Radius must be finite, got {r!r}")
        if self._root is None:
            return []

        half = max(math.ceil(r + 0.5), 0)
        # Stored points never leave the coordinate range, so clamping loses nothing
        search = Rectangle(
            max(center.x - half, COORD_MIN),
            max(center.y - half, COORD_MIN),
            min(center.x + half, COORD_MAX),
            min(center.y + half, COORD_MAX),
        )
        squared_radius = r * r
        return [
            p for p in self.range(search) if p.squared_distance(center) <= squared_radius
        ]

    def _expand_bounds(self, p: Point) -> None:
        if p.x < self._min_x:
            self._min_x = p.x
        if p.x > self._max_x:
            self._max_x = p.x
        if p.y < self._min_y:
            self._min_y = p.y
        if p.y > self._max_y:
            self._max_y = p.y
