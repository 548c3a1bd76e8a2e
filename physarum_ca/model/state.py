"""State snapshot dataclass for the Physarum CA simulation."""

from dataclasses import dataclass
from typing import Dict
import numpy as np


@dataclass
class SimulationState:
    """Point-in-time copy of the rendered simulation buffers."""
    tick: int
    live_agents: int
    agents: np.ndarray   # RGBA occupancy pixels, (height, width, 4)
    trail: np.ndarray    # RGBA trail pixels, (height, width, 4)
    metrics: Dict[str, float]

    @property
    def width(self) -> int:
        return self.trail.shape[1]

    @property
    def height(self) -> int:
        return self.trail.shape[0]
