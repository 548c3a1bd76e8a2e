"""I/O package for the Physarum CA simulation."""

from .visualizer import Visualizer
from .reporter import Reporter

__all__ = ['Visualizer', 'Reporter']
