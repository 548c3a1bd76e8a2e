"""Row-major grid addressing shared by the agent and trail layers."""

from typing import Optional, Tuple

from .point import Point


class Grid:
    """
    Fixed-size 2-D addressing scheme.

    Coordinate convention: (x, y) for API, index = y * width + x for flat
    storage, [y, x] for numpy arrays. Subclasses must use these helpers so
    that indices agree between layers.
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Grid must be at least 1x1, got {width}x{height}")
        self.width = width
        self.height = height

    @property
    def size(self) -> int:
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check if cell is within bounds."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index_of(self, x: int, y: int) -> Optional[int]:
        """Flat index of (x, y), or None when outside the grid."""
        if not self.contains(x, y):
            return None
        return y * self.width + x

    def index_of_point(self, point: Point) -> Optional[int]:
        """Flat index of the cell nearest to a continuous point, or None."""
        discrete = point.rounded()
        return self.index_of(discrete.x, discrete.y)

    def coords_of(self, index: int) -> Tuple[int, int]:
        """Inverse of index_of."""
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} outside grid of {self.size} cells")
        return index % self.width, index // self.width
