# tests/conftest.py
import pytest

from grid_astar.core.coordinate import Coordinate
from grid_astar.core.grid import Grid


def coords(*pairs):
    return frozenset(Coordinate(x, y) for x, y in pairs)


@pytest.fixture
def open_grid() -> Grid:
    """5x5 grid without obstacles from the bottom-left to the top-right corner."""
    return Grid(5, 5, Coordinate(0, 0), Coordinate(4, 4))


@pytest.fixture
def detour_grid() -> Grid:
    return Grid(
        5,
        5,
        Coordinate(0, 0),
        Coordinate(4, 4),
        coords((0, 1), (1, 1), (2, 1), (3, 1), (1, 3), (2, 3), (3, 3), (4, 3)),
    )
