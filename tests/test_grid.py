"""Tests for model/grid.py"""

import pytest

from physarum_ca.model.grid import Grid
from physarum_ca.model.point import Point


class TestGrid:
    """Tests for row-major addressing."""

    def test_index_of(self):
        grid = Grid(5, 3)
        assert grid.index_of(0, 0) == 0
        assert grid.index_of(4, 2) == 14
        assert grid.size == 15

    @pytest.mark.parametrize("x,y", [(5, 0), (0, 3), (-1, 0), (0, -1)])
    def test_out_of_bounds_is_none(self, x, y):
        """Out-of-range coordinates never wrap into valid slots."""
        assert Grid(5, 3).index_of(x, y) is None

    def test_coords_of_inverts_index_of(self):
        grid = Grid(5, 3)
        for index in range(grid.size):
            x, y = grid.coords_of(index)
            assert grid.index_of(x, y) == index
        assert grid.coords_of(7) == (2, 1)

    def test_coords_of_out_of_range(self):
        with pytest.raises(IndexError):
            Grid(5, 3).coords_of(15)

    def test_index_of_point(self):
        grid = Grid(5, 3)
        assert grid.index_of_point(Point(2.6, 0.4)) == 3
        assert grid.index_of_point(Point(-0.6, 0.0)) is None
        assert grid.index_of_point(Point(4.6, 0.0)) is None

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (0, 0)])
    def test_zero_size_rejected(self, width, height):
        with pytest.raises(ValueError):
            Grid(width, height)
