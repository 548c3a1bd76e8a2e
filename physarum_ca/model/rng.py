"""Random sources for the simulation.

A random source is any zero-argument callable returning a float in [0, 1).
The simulation never touches global random state, so a run is reproducible
exactly when its source is.
"""

from typing import Callable, Optional, Sequence

import numpy as np

RandomSource = Callable[[], float]


def seeded_source(seed: Optional[int] = None) -> RandomSource:
    """Uniform [0, 1) source backed by a numpy Generator."""
    rng = np.random.default_rng(seed)
    return lambda: float(rng.random())


class SequenceSource:
    """Replays a fixed list of values, cycling when exhausted."""

    def __init__(self, values: Sequence[float]):
        if not values:
            raise ValueError("SequenceSource needs at least one value")
        for v in values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Random values must be in [0, 1), got {v}")
        self.values = list(values)
        self.calls = 0

    def __call__(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value
