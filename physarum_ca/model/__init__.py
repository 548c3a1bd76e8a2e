"""Model package for the Physarum CA simulation."""

from .point import Point
from .grid import Grid
from .trail_map import TrailMap
from .cell_map import Cell, CellMap
from .rng import RandomSource, SequenceSource, seeded_source
from .state import SimulationState
from .simulation import Simulation

__all__ = [
    'Point',
    'Grid',
    'TrailMap',
    'Cell',
    'CellMap',
    'RandomSource',
    'SequenceSource',
    'seeded_source',
    'SimulationState',
    'Simulation',
]
