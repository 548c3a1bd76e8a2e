"""Tests for model/trail_map.py"""

import numpy as np
import pytest

from physarum_ca.model.point import Point
from physarum_ca.model.rng import SequenceSource
from physarum_ca.model.trail_map import TrailMap


class TestTrailMapInit:
    """Tests for trail construction."""

    def test_new_is_zero(self):
        trail = TrailMap(4, 3)
        assert trail.field.shape == (3, 4)
        assert trail.field.dtype == np.uint8
        assert not trail.field.any()

    def test_new_random_row_major(self):
        """One draw per slot, in row-major order, rounded to a byte."""
        source = SequenceSource([0.0, 0.5, 0.999, 0.1])
        trail = TrailMap.new_random(2, 2, source)
        assert source.calls == 4
        assert trail.get(0, 0) == 0
        assert trail.get(1, 0) == 128   # 127.5 rounds up
        assert trail.get(0, 1) == 255
        assert trail.get(1, 1) == 26    # 25.5 rounds up

    def test_zero_size_rejected(self):
        with pytest.raises(ValueError):
            TrailMap(0, 3)


class TestTrailMapAccess:
    """Tests for bounds-checked reads and writes."""

    def test_get_out_of_bounds(self):
        trail = TrailMap(3, 3)
        assert trail.get(3, 0) is None
        assert trail.get(-1, 0) is None

    def test_value_at_off_grid_is_zero(self):
        trail = TrailMap(3, 3)
        trail.field[:] = 9
        assert trail.value_at(Point(-1.0, 0.0)) == 0
        assert trail.value_at(Point(1.2, 5.0)) == 0
        assert trail.value_at(Point(1.2, 1.6)) == 9

    def test_deposit_overwrites(self):
        trail = TrailMap(3, 3)
        index = trail.index_of(1, 2)
        trail.deposit(index, 200)
        trail.deposit(index, 200)
        assert trail.get(1, 2) == 200

    def test_replace_shape_mismatch(self):
        trail = TrailMap(3, 3)
        with pytest.raises(ValueError):
            trail.replace(np.zeros((2, 3), dtype=np.uint8))


class TestTrailMapRender:
    """Tests for the RGBA render buffer."""

    def test_render_grayscale(self):
        trail = TrailMap(2, 1)
        trail.field[0, 1] = 77
        pixels = trail.render()
        assert pixels.shape == (1, 2, 4)
        assert pixels[0, 0].tolist() == [0, 0, 0, 255]
        assert pixels[0, 1].tolist() == [77, 77, 77, 255]

    def test_render_is_a_copy(self):
        trail = TrailMap(2, 2)
        pixels = trail.render()
        trail.field[0, 0] = 50
        assert pixels[0, 0, 0] == 0

    def test_metrics(self):
        trail = TrailMap(2, 2)
        trail.field[0, 0] = 100
        assert trail.mean() == pytest.approx(25.0)
        assert trail.coverage() == pytest.approx(0.25)
