"""Grid-based A* path finding entry point."""

from __future__ import annotations

from typing import Any, Iterable, List

from .config import CONFIG
from .core.coordinate import Coordinate, to_coordinate, to_coordinates
from .core.grid import Grid
from .search.engine import SearchEngine


def find_path(
    width: int,
    height: int,
    start: Coordinate | tuple[int, int],
    goal: Coordinate | tuple[int, int],
    obstacles: Iterable[Any] | None = None,
    *,
    tie_break: str | None = None,
) -> List[Coordinate] | None:
    """Return the shortest 4-connected path from ``start`` to ``goal``.

    The path starts with ``start`` and ends with ``goal``. ``None`` means
    the goal is unreachable. :class:`~grid_astar.core.grid.GridConfigurationError`
    is raised for negative dimensions or endpoint components.
    """

    grid = Grid(
        width=width,
        height=height,
        start=to_coordinate(start),
        goal=to_coordinate(goal),
        obstacles=to_coordinates(obstacles),
    )
    rule = tie_break if tie_break is not None else CONFIG.search.tie_break
    return SearchEngine(grid, rule).run()


__all__ = ["find_path"]
