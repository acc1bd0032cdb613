"""Immutable description of the search space."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, Tuple

from .coordinate import Coordinate, Direction, to_coordinate


class GridConfigurationError(ValueError):
    """Raised when a :class:`Grid` is built from invalid dimensions or endpoints."""


# Each move only checks the bound it can cross: moving left or down can
# only fall below zero, moving right or up can only reach the far edge.
_BOUND_CHECKS: Dict[Direction, Callable[[Grid, Coordinate], bool]] = {
    Direction.LEFT: lambda grid, c: c.x > -1,
    Direction.UP: lambda grid, c: c.y < grid.height,
    Direction.RIGHT: lambda grid, c: c.x < grid.width,
    Direction.DOWN: lambda grid, c: c.y > -1,
}


@dataclass(frozen=True, slots=True)
class Grid:
    """Bounded rectangular grid with static obstacles.

    The grid only rejects negative dimensions and negative endpoint
    components. A start or goal lying beyond ``width``/``height`` or on an
    obstacle is accepted; a goal outside the grid is never reached, while a
    start outside it may still walk in along one axis.
    """

    width: int
    height: int
    start: Coordinate
    goal: Coordinate
    obstacles: frozenset[Coordinate] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        try:
            start = to_coordinate(self.start)
            goal = to_coordinate(self.goal)
        except ValueError as exc:
            raise GridConfigurationError(str(exc)) from exc
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "goal", goal)

        if self.width < 0:
            raise GridConfigurationError(
                f"width must be >= 0, got {self.width}"
            )
        if self.height < 0:
            raise GridConfigurationError(
                f"height must be >= 0, got {self.height}"
            )
        if start.x < 0 or start.y < 0:
            raise GridConfigurationError(
                f"start must have non-negative components, got {start}"
            )
        if goal.x < 0 or goal.y < 0:
            raise GridConfigurationError(
                f"goal must have non-negative components, got {goal}"
            )
        if not isinstance(self.obstacles, frozenset):
            object.__setattr__(self, "obstacles", frozenset(self.obstacles))

    # ------------------------------------------------------------------
    # Validity
    # ------------------------------------------------------------------
    def is_obstacle(self, coordinate: Coordinate) -> bool:
        return coordinate in self.obstacles

    def is_traversable(self, direction: Direction, coordinate: Coordinate) -> bool:
        """Return ``True`` if ``coordinate``, reached by moving ``direction``, may be entered.

        Only the bound on the axis of movement is checked, so from an
        in-bounds cell every accepted neighbour is in bounds too.
        """

        return _BOUND_CHECKS[direction](self, coordinate) and not self.is_obstacle(coordinate)

    def neighbours(self, coordinate: Coordinate) -> Iterator[Tuple[Direction, Coordinate]]:
        """Yield every traversable ``(direction, neighbour)`` pair of ``coordinate``."""

        for direction in Direction:
            neighbour = coordinate.step(direction)
            if self.is_traversable(direction, neighbour):
                yield direction, neighbour

    # ------------------------------------------------------------------
    # Endpoints and distances
    # ------------------------------------------------------------------
    def is_start(self, coordinate: Coordinate) -> bool:
        return coordinate == self.start

    def is_goal(self, coordinate: Coordinate) -> bool:
        return coordinate == self.goal

    def heuristic(self, coordinate: Coordinate) -> int:
        """Manhattan distance from ``coordinate`` to the goal."""
        return coordinate.manhattan(self.goal)


__all__ = ["Grid", "GridConfigurationError"]
