"""Agents and the slot arena that holds them."""

from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from .grid import Grid
from .point import Point
from ..config import SensorConfig
from .rng import RandomSource


@dataclass
class Cell:
    """
    A single agent.

    The heading is in degrees. It is reduced modulo 360 when the sensor
    stage rotates it, but is not otherwise normalised.
    """
    position: Point
    heading: float

    def heading_vector(self) -> Point:
        return Point.from_degrees(self.heading)

    def advanced(self, distance: float) -> Point:
        """Position after moving `distance` along the current heading."""
        return self.position + self.heading_vector() * distance

    def discrete_position(self) -> Point:
        return self.position.to_discrete()

    def __repr__(self) -> str:
        return (f"Cell(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"heading={self.heading:.1f})")


class CellMap(Grid):
    """
    Arena of width * height slots, each holding at most one Cell.

    Slots are addressed with the same row-major index as the TrailMap.
    """

    def __init__(self, width: int, height: int, sensor_config: SensorConfig):
        super().__init__(width, height)
        self.sensor_config = sensor_config
        self.slots: List[Optional[Cell]] = [None] * self.size

    @classmethod
    def new_random(cls, width: int, height: int, sensor_config: SensorConfig,
                   rng: RandomSource, probability: float) -> "CellMap":
        """
        Seed agents independently per slot in row-major order.

        Draws once per slot for placement and once more for the heading
        of each placed agent.
        """
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be in [0, 1], got {probability}")
        cell_map = cls(width, height, sensor_config)
        for index in range(cell_map.size):
            if rng() < probability:
                x, y = cell_map.coords_of(index)
                cell_map.slots[index] = Cell(Point(float(x), float(y)), rng() * 360.0)
        return cell_map

    def add_agent(self, position: Point, heading: float) -> None:
        """Insert an agent, replacing any occupant of the target slot."""
        discrete = position.to_discrete()
        index = self.index_of(discrete.x, discrete.y)
        if index is None:
            raise ValueError(
                f"Position {position} lies outside {self.width}x{self.height} grid")
        self.slots[index] = Cell(position, heading)

    def get(self, x: int, y: int) -> Optional[Cell]:
        """Return the agent at (x, y), or None if empty or out of bounds."""
        index = self.index_of(x, y)
        if index is None:
            return None
        return self.slots[index]

    def cell_at(self, index: int) -> Optional[Cell]:
        return self.slots[index]

    def is_occupied(self, index: int) -> bool:
        return self.slots[index] is not None

    def place(self, index: int, cell: Cell) -> None:
        self.slots[index] = cell

    def vacate(self, index: int) -> None:
        self.slots[index] = None

    def occupied_indices(self) -> List[int]:
        """Indices of occupied slots in ascending order."""
        return [i for i, cell in enumerate(self.slots) if cell is not None]

    def live_count(self) -> int:
        return sum(1 for cell in self.slots if cell is not None)

    def occupancy(self) -> np.ndarray:
        """Boolean mask of shape (height, width)."""
        mask = np.fromiter((cell is not None for cell in self.slots),
                           dtype=bool, count=self.size)
        return mask.reshape(self.height, self.width)

    def render(self) -> np.ndarray:
        """White RGBA pixels for occupied slots, black otherwise."""
        pixels = np.zeros((self.height, self.width, 4), dtype=np.uint8)
        pixels[self.occupancy(), :3] = 255
        pixels[..., 3] = 255
        return pixels
