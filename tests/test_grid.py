"""Tests for grid math."""

import pytest
from py_worldgen.core.grid import (
    points_in_radius, offset_points, round_half_away,
    translate_to_grid, squared_distance
)


class TestPointsInRadius:
    """Test lattice point generation."""

    def test_radius_one_is_single_point(self):
        """Only the origin is strictly inside radius 1."""
        assert points_in_radius(1) == [(0, 0)]

    def test_radius_two_points(self):
        """Radius 2 covers the 3x3 block around the origin."""
        points = points_in_radius(2)

        assert len(points) == 9
        assert set(points) == {(x, y) for x in (-1, 0, 1) for y in (-1, 0, 1)}
        assert (2, 0) not in points  # 4 < 4 is false

    def test_strictly_inside(self):
        """Every point satisfies dx² + dy² < r²."""
        for radius in (3, 5, 10):
            points = points_in_radius(radius)
            assert all(dx * dx + dy * dy < radius * radius for dx, dy in points)
            assert len(points) == len(set(points))

    def test_row_major_order(self):
        """dx is the outer loop and dy the inner loop, both ascending."""
        points = points_in_radius(4)
        assert points == sorted(points)
        assert points[0] == (-3, -2)

    def test_radius_ten_count(self):
        """Matches a brute-force count."""
        expected = sum(
            1 for x in range(-10, 11) for y in range(-10, 11) if x * x + y * y < 100
        )
        assert len(points_in_radius(10)) == expected

    def test_offset_points(self):
        """Offsets translate by the center and keep their order."""
        shifted = offset_points((5, -2), points_in_radius(2))
        assert shifted[0] == (4, -3)
        assert shifted[4] == (5, -2)
        assert len(shifted) == 9


class TestTranslateToGrid:
    """Test world-to-grid conversion."""

    def test_exact_tiles(self):
        assert translate_to_grid((0.0, 0.0), 1.0) == (0, 0)
        assert translate_to_grid((32.0, -64.0), 16.0) == (2, -4)

    def test_round_half_away_from_zero(self):
        """Ties round away from zero on both sides."""
        assert round_half_away(0.5) == 1
        assert round_half_away(-0.5) == -1
        assert round_half_away(2.5) == 3
        assert round_half_away(-2.5) == -3
        assert round_half_away(0.49) == 0
        assert round_half_away(-0.49) == 0

    def test_boundary_is_stable(self):
        """Positions on either side of a half-tile edge map consistently."""
        assert translate_to_grid((0.4999, 0.0), 1.0) == (0, 0)
        assert translate_to_grid((0.5, 0.0), 1.0) == (1, 0)
        assert translate_to_grid((0.5, 0.0), 1.0) == translate_to_grid((0.5, 0.0), 1.0)

    def test_ignores_extra_components(self):
        """A z component (sprite depth) is ignored."""
        assert translate_to_grid((3.2, 1.7, 900.0), 1.0) == (3, 2)

    def test_returns_ints(self):
        x, y = translate_to_grid((7.6, -3.3), 2.0)
        assert isinstance(x, int) and isinstance(y, int)
        assert (x, y) == (4, -2)


def test_squared_distance():
    assert squared_distance((0, 0), (3, 4)) == 25
    assert squared_distance((-1, -1), (-1, -1)) == 0
    assert squared_distance((2, 0), (0, 0)) == 4
