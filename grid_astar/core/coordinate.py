"""Coordinate value type and the four cardinal move directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Tuple


@dataclass(frozen=True, slots=True, order=True)
class Coordinate:
    """Integer grid cell. ``x`` grows to the right, ``y`` grows upwards."""

    x: int
    y: int

    def left(self) -> Coordinate:
        return Coordinate(self.x - 1, self.y)

    def right(self) -> Coordinate:
        return Coordinate(self.x + 1, self.y)

    def up(self) -> Coordinate:
        return Coordinate(self.x, self.y + 1)

    def down(self) -> Coordinate:
        return Coordinate(self.x, self.y - 1)

    def step(self, direction: Direction) -> Coordinate:
        """Return the neighbouring cell one unit towards ``direction``."""
        dx, dy = direction.offset
        return Coordinate(self.x + dx, self.y + dy)

    def manhattan(self, other: Coordinate) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Direction(Enum):
    """Cardinal directions in the order neighbours are expanded."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    @property
    def offset(self) -> Tuple[int, int]:
        return self.value


def to_coordinate(value: Any) -> Coordinate:
    """Coerce ``value`` (a :class:`Coordinate` or an ``(x, y)`` pair) into a :class:`Coordinate`."""

    if isinstance(value, Coordinate):
        return value
    try:
        x, y = value
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Expected an (x, y) pair, got {value!r}") from exc
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, int) or not isinstance(y, int):
        raise ValueError(f"Coordinate components must be integers, got {value!r}")
    return Coordinate(x, y)


def to_coordinates(values: Iterable[Any] | None) -> frozenset[Coordinate]:
    if values is None:
        return frozenset()
    return frozenset(to_coordinate(v) for v in values)


__all__ = ["Coordinate", "Direction", "to_coordinate", "to_coordinates"]
