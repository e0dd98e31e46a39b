"""Tests for neighbor_finder.geometry module."""

import math

import numpy as np
import pytest


class TestPoint:
    """Tests for Point."""

    def test_point_creation(self):
        from neighbor_finder.geometry import Point

        p = Point(3, -4)
        assert p.x == 3
        assert p.y == -4

    def test_point_limits(self):
        """Coordinates at exactly +/-99000 are allowed."""
        from neighbor_finder.geometry import Point

        for x, y in [(99000, 99000), (-99000, -99000), (99000, -99000)]:
            p = Point(x, y)
            assert (p.x, p.y) == (x, y)

    @pytest.mark.parametrize("x, y", [(99001, 0), (-99001, 0), (0, 99001), (0, -99001)])
    def test_point_out_of_range(self, x, y):
        from neighbor_finder.errors import RangeError
        from neighbor_finder.geometry import Point

        with pytest.raises(RangeError, match="outside allowed range"):
            Point(x, y)

    def test_point_range_error_is_value_error(self):
        from neighbor_finder.geometry import Point

        with pytest.raises(ValueError):
            Point(100000, 0)

    def test_point_rejects_non_integers(self):
        from neighbor_finder.errors import ArgumentError
        from neighbor_finder.geometry import Point

        with pytest.raises(ArgumentError):
            Point(1.5, 2)
        with pytest.raises(ArgumentError):
            Point("1", 2)

    def test_point_accepts_numpy_integers(self):
        from neighbor_finder.geometry import Point

        p = Point(np.int64(5), np.int32(-7))
        assert type(p.x) is int
        assert p == Point(5, -7)

    def test_point_immutable(self):
        from dataclasses import FrozenInstanceError
        from neighbor_finder.geometry import Point

        p = Point(1, 2)
        with pytest.raises(FrozenInstanceError):
            p.x = 5

    def test_point_equality_and_hash(self):
        from neighbor_finder.geometry import Point

        assert Point(1, 2) == Point(1, 2)
        assert Point(1, 2) != Point(2, 1)
        assert len({Point(1, 2), Point(1, 2), Point(2, 1)}) == 2

    def test_point_distance(self):
        from neighbor_finder.geometry import Point

        a = Point(0, 0)
        b = Point(3, 4)
        assert a.squared_distance(b) == 25
        assert isinstance(a.squared_distance(b), int)
        assert a.distance(b) == 5.0
        assert b.distance(a) == 5.0

    def test_point_distance_large_coordinates(self):
        """Squared distance across the full range does not overflow."""
        from neighbor_finder.geometry import Point

        a = Point(-99000, -99000)
        b = Point(99000, 99000)
        assert a.squared_distance(b) == 2 * 198000 ** 2
        assert math.isclose(a.distance(b), 198000 * math.sqrt(2))

    def test_point_str(self):
        from neighbor_finder.geometry import Point

        assert str(Point(6, -6)) == "{x=6, y=-6}"


class TestRectangle:
    """Tests for Rectangle."""

    def test_rectangle_creation(self):
        from neighbor_finder.geometry import Rectangle

        r = Rectangle(-1, -2, 3, 4)
        assert (r.min_x, r.min_y, r.max_x, r.max_y) == (-1, -2, 3, 4)

    def test_rectangle_degenerate_allowed(self):
        """A single-point rectangle is valid."""
        from neighbor_finder.geometry import Point, Rectangle

        r = Rectangle(5, 5, 5, 5)
        assert r.contains(Point(5, 5))

    @pytest.mark.parametrize("bounds", [(5, 0, 4, 10), (0, 5, 10, 4)])
    def test_rectangle_inverted(self, bounds):
        from neighbor_finder.errors import RangeError
        from neighbor_finder.geometry import Rectangle

        with pytest.raises(RangeError, match="Invalid rectangle"):
            Rectangle(*bounds)

    @pytest.mark.parametrize("bounds", [
        (-99001, 0, 0, 0),
        (0, -99001, 0, 0),
        (0, 0, 99001, 0),
        (0, 0, 0, 99001),
    ])
    def test_rectangle_out_of_range(self, bounds):
        from neighbor_finder.errors import RangeError
        from neighbor_finder.geometry import Rectangle

        with pytest.raises(RangeError):
            Rectangle(*bounds)

    @pytest.mark.parametrize("bounds", [
        (0, 0, float("nan"), 5),
        (0.5, 0, 3.7, 5),
        (0, 0, 3, "5"),
        (True, 0, 3, 5),
    ])
    def test_rectangle_rejects_non_integer_bounds(self, bounds):
        from neighbor_finder.errors import ArgumentError
        from neighbor_finder.geometry import Rectangle

        with pytest.raises(ArgumentError, match="must be an integer"):
            Rectangle(*bounds)

    def test_rectangle_accepts_numpy_integers(self):
        from neighbor_finder.geometry import Rectangle

        r = Rectangle(np.int64(-3), np.int32(0), np.int64(4), np.int32(9))
        assert type(r.min_x) is int
        assert r == Rectangle(-3, 0, 4, 9)

    def test_rectangle_contains(self):
        from neighbor_finder.geometry import Point, Rectangle

        big = Rectangle(-1000, -1000, 1000, 1000)
        assert big.contains(Point(0, 0))
        assert not big.contains(Point(1100, 1100))

    def test_rectangle_contains_edges(self):
        """Containment is inclusive on every edge and corner."""
        from neighbor_finder.geometry import Point, Rectangle

        r = Rectangle(0, 0, 10, 5)
        for p in [Point(0, 0), Point(10, 5), Point(0, 5), Point(10, 0), Point(5, 0), Point(10, 3)]:
            assert r.contains(p)
        assert not r.contains(Point(11, 3))
        assert not r.contains(Point(5, -1))

    def test_rectangle_intersects(self):
        from neighbor_finder.geometry import Rectangle

        big = Rectangle(-1000, -1000, 1000, 1000)
        assert big.intersects(Rectangle(900, 900, 1100, 1100))
        assert not big.intersects(Rectangle(900, 1100, 1100, 1200))

    def test_rectangle_intersects_shared_edge(self):
        from neighbor_finder.geometry import Rectangle

        a = Rectangle(0, 0, 5, 5)
        assert a.intersects(Rectangle(5, 0, 10, 5))
        assert a.intersects(Rectangle(5, 5, 10, 10))  # corner only
        assert Rectangle(5, 0, 10, 5).intersects(a)
        assert not a.intersects(Rectangle(6, 0, 10, 5))

    def test_rectangle_intersects_contained(self):
        from neighbor_finder.geometry import Rectangle

        outer = Rectangle(0, 0, 10, 10)
        inner = Rectangle(2, 2, 3, 3)
        assert outer.intersects(inner)
        assert inner.intersects(outer)

    def test_rectangle_distance_inside(self):
        from neighbor_finder.geometry import Point, Rectangle

        big = Rectangle(-1000, -1000, 1000, 1000)
        assert big.distance_to(Point(0, 0)) == 0
        assert big.squared_distance_to(Point(1000, -1000)) == 0

    def test_rectangle_distance_corner(self):
        from neighbor_finder.geometry import Point, Rectangle

        big = Rectangle(-1000, -1000, 1000, 1000)
        assert big.squared_distance_to(Point(1100, 1100)) == 20000
        assert big.squared_distance_to(Point(-1003, -1004)) == 25
        assert big.distance_to(Point(-1003, -1004)) == 5.0

    def test_rectangle_distance_side(self):
        """Only the violated axis contributes to the distance."""
        from neighbor_finder.geometry import Point, Rectangle

        r = Rectangle(0, 0, 10, 10)
        assert r.squared_distance_to(Point(5, 13)) == 9
        assert r.squared_distance_to(Point(5, -2)) == 4
        assert r.squared_distance_to(Point(-4, 7)) == 16
        assert r.squared_distance_to(Point(12, 0)) == 4
