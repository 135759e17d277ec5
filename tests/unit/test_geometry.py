"""
Unit tests for geometry primitives.

Tests:
- Point arithmetic and immutability
- Distance and mirroring
- Rounding
- Grid snapping tolerance rules
"""

import dataclasses
import math

import pytest
from models.geometry import (
    Point, GridSize, distance, mirror, snap, snap_point, round_point
)


class TestPoint:
    """Tests for Point value type."""

    def test_coordinates_are_floats(self):
        """Integer input is stored as float."""
        p = Point(3, 4)
        assert isinstance(p.x, float)
        assert isinstance(p.y, float)

    def test_arithmetic(self):
        """Test +, - and unary negation."""
        a = Point(1, 2)
        b = Point(10, 20)
        assert a + b == Point(11, 22)
        assert b - a == Point(9, 18)
        assert -a == Point(-1, -2)

    def test_immutable(self):
        """Points cannot be changed in place."""
        p = Point(1, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5

    def test_hashable(self):
        assert len({Point(1, 2), Point(1.0, 2.0)}) == 1

    def test_to_tuple(self):
        assert Point(5, 6).to_tuple() == (5.0, 6.0)


class TestDistanceAndMirror:
    """Tests for distance and mirroring."""

    def test_distance(self):
        assert distance(Point(0, 0), Point(3, 4)) == 5.0
        assert Point(1, 1).distance_to(Point(1, 1)) == 0.0

    def test_mirror(self):
        """Mirror of (50, 20) about (100, 0) is (150, -20)."""
        assert mirror(Point(50, 20), Point(100, 0)) == Point(150, -20)

    def test_mirror_is_involutive(self):
        """Mirroring twice returns the original point."""
        center = Point(7, -3)
        for p in [Point(0, 0), Point(12, 40), Point(-5, 9)]:
            assert mirror(mirror(p, center), center) == p

    def test_mirror_of_center_is_center(self):
        c = Point(10, 10)
        assert c.mirrored(c) == c


class TestRounding:
    """Tests for rounding to whole units."""

    def test_round_point(self):
        assert round_point(Point(1.4, 2.6)) == Point(1, 3)

    def test_halves_round_away_from_zero(self):
        assert round_point(Point(0.5, 2.5)) == Point(1, 3)
        assert round_point(Point(-0.5, -2.5)) == Point(-1, -3)

    def test_rounding_is_idempotent(self):
        for p in [Point(1.49, -7.51), Point(0.5, 100.2), Point(-3.3, 3.3)]:
            once = round_point(p)
            assert round_point(once) == once

    def test_no_negative_zero(self):
        """Small negatives round to a plain zero."""
        p = round_point(Point(-0.2, -0.4))
        assert math.copysign(1, p.x) == 1
        assert math.copysign(1, p.y) == 1


class TestSnap:
    """Tests for grid snapping."""

    def test_snap_up_within_tolerance(self):
        """46 is 4 away from 50."""
        assert snap(46, 50) == 50

    def test_snap_down_within_tolerance(self):
        """104 is 4 away from 100."""
        assert snap(104, 50) == 100

    def test_no_snap_outside_tolerance(self):
        """30 is 30 from 0 and 20 from 50."""
        assert snap(30, 50) == 30

    def test_tolerance_boundary_is_exclusive(self):
        """Exactly 10 away does not snap."""
        assert snap(40, 50) == 40
        assert snap(60, 50) == 60
        assert snap(41, 50) == 50

    def test_exact_multiple(self):
        assert snap(150, 50) == 150
        assert snap(0, 50) == 0

    def test_negative_coordinates(self):
        """Negative values snap like positive ones."""
        assert snap(-46, 50) == -50
        assert snap(-30, 50) == -30

    def test_custom_tolerance(self):
        assert snap(30, 50, tolerance=25) == 50
        assert snap(46, 50, tolerance=2) == 46

    def test_non_positive_step(self):
        assert snap(46, 0) == 46
        assert snap(46, -50) == 46

    def test_snap_point_per_axis(self):
        """Axes snap independently."""
        assert snap_point(Point(46, 30), GridSize(50, 50)) == Point(50, 30)
        assert snap_point(Point(46, 46), GridSize(50, 50)) == Point(50, 50)
        assert snap_point(Point(26, 18), GridSize(25, 20)) == Point(25, 20)

    def test_snap_point_without_grid(self):
        p = Point(46, 46)
        assert snap_point(p, None) is p
