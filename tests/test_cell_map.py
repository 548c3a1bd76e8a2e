"""Tests for model/cell_map.py"""

import numpy as np
import pytest

from physarum_ca.config import SensorConfig
from physarum_ca.model.cell_map import Cell, CellMap
from physarum_ca.model.point import Point
from physarum_ca.model.rng import SequenceSource


class TestCell:
    """Tests for the Cell agent record."""

    def test_advanced(self):
        cell = Cell(Point(2.0, 4.0), 0.0)
        assert cell.advanced(1) == Point(3.0, 4.0)

    def test_discrete_position(self):
        cell = Cell(Point(2.4, 3.6), 90.0)
        assert cell.discrete_position() == Point(2, 4)


class TestCellMap:
    """Tests for the agent slot arena."""

    def test_new_is_empty(self):
        cell_map = CellMap(20, 20, SensorConfig())
        assert cell_map.live_count() == 0
        assert cell_map.occupied_indices() == []

    def test_add_agent(self):
        cell_map = CellMap(20, 20, SensorConfig())
        cell_map.add_agent(Point(2.0, 4.0), 0.0)
        cell = cell_map.get(2, 4)
        assert cell is not None
        assert cell.position == Point(2.0, 4.0)
        assert cell_map.occupied_indices() == [4 * 20 + 2]

    def test_add_agent_replaces(self):
        """Adding onto an occupied slot overwrites the occupant."""
        cell_map = CellMap(20, 20, SensorConfig())
        cell_map.add_agent(Point(2.0, 4.0), 0.0)
        cell_map.add_agent(Point(2.3, 3.8), 90.0)
        assert cell_map.live_count() == 1
        assert cell_map.get(2, 4).heading == 90.0

    @pytest.mark.parametrize("position", [Point(25.0, 1.0), Point(-3.0, 1.0)])
    def test_add_agent_off_grid(self, position):
        cell_map = CellMap(20, 20, SensorConfig())
        with pytest.raises(ValueError):
            cell_map.add_agent(position, 0.0)

    def test_get_out_of_bounds(self):
        cell_map = CellMap(3, 3, SensorConfig())
        assert cell_map.get(3, 3) is None
        assert cell_map.get(-1, 0) is None

    def test_new_random_draw_order(self):
        """One placement draw per slot plus one heading draw per agent."""
        source = SequenceSource([0.1, 0.25, 0.9, 0.7, 0.2, 0.5])
        cell_map = CellMap.new_random(2, 2, SensorConfig(), source, 0.5)
        assert source.calls == 6
        assert cell_map.live_count() == 2
        assert cell_map.get(0, 0).heading == pytest.approx(90.0)
        assert cell_map.get(1, 0) is None
        assert cell_map.get(0, 1) is None
        assert cell_map.get(1, 1).heading == pytest.approx(180.0)
        assert cell_map.get(1, 1).position == Point(1.0, 1.0)

    def test_new_random_bad_probability(self):
        with pytest.raises(ValueError):
            CellMap.new_random(2, 2, SensorConfig(), SequenceSource([0.5]), 1.5)

    def test_render(self):
        cell_map = CellMap(3, 2, SensorConfig())
        cell_map.add_agent(Point(1.0, 1.0), 0.0)
        pixels = cell_map.render()
        assert pixels.shape == (2, 3, 4)
        assert pixels[1, 1].tolist() == [255, 255, 255, 255]
        assert pixels[0, 0].tolist() == [0, 0, 0, 255]
        assert int(np.count_nonzero(pixels[..., 0])) == 1
