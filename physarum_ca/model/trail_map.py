"""Chemoattractant trail field for the Physarum CA simulation."""

import numpy as np

from .grid import Grid
from .point import Point, round_half_away
from .rng import RandomSource


class TrailMap(Grid):
    """
    Dense byte field of chemical concentration.

    Agents overwrite single cells with their deposition value; the
    simulation replaces the whole buffer on each diffusion pass.
    """

    def __init__(self, width: int, height: int):
        super().__init__(width, height)
        self.field = np.zeros((height, width), dtype=np.uint8)

    @classmethod
    def new_random(cls, width: int, height: int, rng: RandomSource) -> "TrailMap":
        """Field of uniform noise, one draw per cell in row-major order."""
        trail = cls(width, height)
        flat = trail.field.reshape(-1)
        for i in range(trail.size):
            flat[i] = round_half_away(rng() * 255)
        return trail

    def get(self, x: int, y: int):
        """Return concentration at (x, y), or None outside the grid."""
        if not self.contains(x, y):
            return None
        return int(self.field[y, x])

    def value_at(self, point: Point) -> int:
        """Concentration under a continuous point; 0 off the grid."""
        discrete = point.rounded()
        value = self.get(discrete.x, discrete.y)
        return 0 if value is None else value

    def deposit(self, index: int, value: int) -> None:
        """Overwrite one cell. Repeated deposits do not accumulate."""
        x, y = self.coords_of(index)
        self.field[y, x] = value

    def replace(self, field: np.ndarray) -> None:
        """Swap in a new buffer of the same shape."""
        if field.shape != self.field.shape:
            raise ValueError(
                f"Trail buffer shape {field.shape} does not match {self.field.shape}")
        self.field = field.astype(np.uint8, copy=False)

    def render(self) -> np.ndarray:
        """Opaque grayscale RGBA pixels, shape (height, width, 4)."""
        pixels = np.empty((self.height, self.width, 4), dtype=np.uint8)
        pixels[..., :3] = self.field[..., np.newaxis]
        pixels[..., 3] = 255
        return pixels

    def mean(self) -> float:
        return float(self.field.mean())

    def coverage(self) -> float:
        """Fraction of cells carrying any trail."""
        return float(np.count_nonzero(self.field)) / self.size
