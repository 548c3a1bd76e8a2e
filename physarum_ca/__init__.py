"""Agent-based slime mould simulation on a 2-D grid."""

from .config import SensorConfig, SimulationConfig, RunConfig, load_config
from .model import CellMap, Simulation, TrailMap

__version__ = "0.1.0"

__all__ = [
    'SensorConfig',
    'SimulationConfig',
    'RunConfig',
    'load_config',
    'CellMap',
    'Simulation',
    'TrailMap',
]
