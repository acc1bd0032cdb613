"""Shortest 4-connected paths on bounded grids with A*."""

from .core.coordinate import Coordinate
from .core.grid import Grid, GridConfigurationError
from .pathfinding import find_path

__all__ = ["Coordinate", "Grid", "GridConfigurationError", "find_path"]
