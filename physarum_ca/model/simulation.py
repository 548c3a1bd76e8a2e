"""Simulation engine for the Physarum CA."""

import logging
from typing import Dict, List, TYPE_CHECKING

import numpy as np
from scipy.ndimage import convolve

from .cell_map import Cell, CellMap
from .trail_map import TrailMap
from .point import Point
from .rng import RandomSource
from .state import SimulationState

if TYPE_CHECKING:
    from ..config import SimulationConfig

logger = logging.getLogger(__name__)

# 3x3 box window; dividing by the convolved mask gives the in-bounds count
_WINDOW = np.ones((3, 3), dtype=np.int64)


def rotate(heading: float, angle: float) -> float:
    """Add angle to heading, wrapped into [0, 360)."""
    return (heading + angle) % 360.0


class Simulation:
    """
    Advances agents and trail one tick at a time.

    Each tick runs three phases in order:
    1. Motor: agents move in random order and deposit trail
    2. Sensor: agents turn toward the strongest trail reading
    3. Diffuse: trail is replaced by its 3x3 neighbourhood mean
    """

    def __init__(self, config: "SimulationConfig", cell_map: CellMap,
                 trail_map: TrailMap, rng: RandomSource):
        for name, grid in (("cell map", cell_map), ("trail map", trail_map)):
            if (grid.width, grid.height) != (config.width, config.height):
                raise ValueError(
                    f"{name} is {grid.width}x{grid.height}, "
                    f"config expects {config.width}x{config.height}")
        self.config = config
        self.cell_map = cell_map
        self.trail_map = trail_map
        self.rng = rng
        self.tick = 0

    @classmethod
    def from_config(cls, config: "SimulationConfig", rng: RandomSource,
                    density: float = 0.1, random_trail: bool = True) -> "Simulation":
        """Seed agents at `density` and, optionally, random trail noise."""
        cell_map = CellMap.new_random(config.width, config.height,
                                      config.sensor, rng, density)
        if random_trail:
            trail_map = TrailMap.new_random(config.width, config.height, rng)
        else:
            trail_map = TrailMap(config.width, config.height)
        logger.info("Seeded %d agents on %dx%d grid",
                    cell_map.live_count(), config.width, config.height)
        return cls(config, cell_map, trail_map, rng)

    def set_random_source(self, rng: RandomSource) -> None:
        """Swap the generator; takes effect from the next draw."""
        self.rng = rng

    def _random_heading(self) -> float:
        return self.rng() * 360.0

    def motor(self) -> None:
        """
        Give every agent one attempt to move, in random order.

        Occupancy is read from the live grid, so an agent processed early
        can free or take a slot that matters to one processed later.
        """
        remaining: List[int] = self.cell_map.occupied_indices()
        moved = blocked = 0

        while remaining:
            pick = min(int(self.rng() * len(remaining)), len(remaining) - 1)
            index = remaining[pick]
            remaining[pick] = remaining[-1]
            remaining.pop()

            cell = self.cell_map.cell_at(index)
            candidate = cell.advanced(self.config.step_size)
            target = self.cell_map.index_of_point(candidate)

            if target is None or self.cell_map.is_occupied(target):
                # Blocked by an agent (possibly itself) or the grid edge
                cell.heading = self._random_heading()
                blocked += 1
                continue

            cell.position = candidate
            self.cell_map.vacate(index)
            self.cell_map.place(target, cell)
            self.trail_map.deposit(target, self.config.deposition)
            moved += 1

        logger.debug("Motor tick %d: %d moved, %d blocked",
                     self.tick, moved, blocked)

    def _sense(self, cell: Cell) -> Dict[str, int]:
        """Trail readings of the forward, left and right sensors."""
        sensor = self.config.sensor
        offset = float(sensor.offset_distance)
        readings = {}
        for name, angle in (("forward", cell.heading),
                            ("left", cell.heading - sensor.angle),
                            ("right", cell.heading + sensor.angle)):
            point = cell.position + Point.from_degrees(angle) * offset
            readings[name] = self.trail_map.value_at(point)
        return readings

    def sensor(self) -> None:
        """Rotate each agent according to its three trail readings."""
        ra = self.config.rotation_angle
        for index in self.cell_map.occupied_indices():
            cell = self.cell_map.cell_at(index)
            r = self._sense(cell)
            fw, fl, fr = r["forward"], r["left"], r["right"]

            if fw > fl and fw > fr:
                continue
            elif fw < fl and fw < fr:
                if self.rng() > 0.5:
                    cell.heading = rotate(cell.heading, -ra)
                else:
                    cell.heading = rotate(cell.heading, ra)
            elif fl < fr:
                cell.heading = rotate(cell.heading, ra)
            elif fr < fl:
                cell.heading = rotate(cell.heading, -ra)

    def diffuse(self) -> None:
        """
        Replace every trail cell with the floor of the mean over its
        in-bounds 3x3 neighbourhood. Edge cells average over 4 or 6 cells.
        """
        source = self.trail_map.field.astype(np.int64)
        sums = convolve(source, _WINDOW, mode='constant', cval=0)
        counts = convolve(np.ones_like(source), _WINDOW, mode='constant', cval=0)
        self.trail_map.replace((sums // counts).astype(np.uint8))

    def step(self) -> None:
        """Execute one tick: motor, sensor, diffuse."""
        self.motor()
        self.sensor()
        self.diffuse()
        self.tick += 1

    def advance(self, ticks: int) -> None:
        """Run `ticks` whole ticks; 0 is a no-op."""
        if ticks < 0:
            raise ValueError(f"Tick count must be non-negative, got {ticks}")
        for _ in range(ticks):
            self.step()
        logger.debug("Advanced %d ticks, now at tick %d (%d live agents)",
                     ticks, self.tick, self.live_agent_count())

    def live_agent_count(self) -> int:
        return self.cell_map.live_count()

    def render_agents(self) -> np.ndarray:
        return self.cell_map.render()

    def render_trail(self) -> np.ndarray:
        return self.trail_map.render()

    def snapshot(self) -> SimulationState:
        """Create a copy of the current buffers for export."""
        live = self.live_agent_count()
        metrics = {
            'live_agents': live,
            'density': live / self.cell_map.size,
            'trail_mean': self.trail_map.mean(),
            'trail_coverage': self.trail_map.coverage(),
        }
        return SimulationState(
            tick=self.tick,
            live_agents=live,
            agents=self.render_agents(),
            trail=self.render_trail(),
            metrics=metrics
        )
