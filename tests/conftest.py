import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from physarum_ca.config import SimulationConfig  # noqa: E402
from physarum_ca.model import CellMap, Simulation, SequenceSource, TrailMap  # noqa: E402


@pytest.fixture
def make_simulation():
    """Build an empty simulation of the given size with a replayed rng."""
    def _make(width=20, height=20, values=(0.0,), **overrides):
        config = SimulationConfig(width=width, height=height, **overrides)
        cell_map = CellMap(width, height, config.sensor)
        trail_map = TrailMap(width, height)
        return Simulation(config, cell_map, trail_map, SequenceSource(list(values)))
    return _make
