"""Open (frontier) and closed (visited) collections used by the search."""

from __future__ import annotations

from heapq import heappop, heappush
from typing import Callable, Dict, Iterator, List, Tuple

from ..core.coordinate import Coordinate
from .nodes import NodeArena, SearchNode


TieBreakKey = Callable[[SearchNode, int], Tuple[int, ...]]

# Each rule maps (node, insertion sequence) to the priority tuple; the
# minimum tuple is extracted first.
TIE_BREAKS: Dict[str, TieBreakKey] = {
    "heuristic": lambda node, seq: (node.f, node.h, node.coordinate.x, node.coordinate.y),
    "coordinate": lambda node, seq: (node.f, node.coordinate.x, node.coordinate.y),
    "fifo": lambda node, seq: (node.f, seq),
}

DEFAULT_TIE_BREAK = "heuristic"


def resolve_tie_break(name: str | None) -> str:
    """Return a validated tie-break rule name, defaulting to ``heuristic``."""

    if name is None:
        return DEFAULT_TIE_BREAK
    key = str(name).strip().lower()
    if key not in TIE_BREAKS:
        raise ValueError(
            f"Unknown tie_break '{name}'. Expected one of: {', '.join(sorted(TIE_BREAKS))}"
        )
    return key


class Frontier:
    """Not-yet-finalized nodes, keyed by coordinate and ordered by score.

    The heap may hold superseded entries for a node whose cost was lowered
    in place; only the entry pushed last for a node still held by the
    frontier is considered live.
    """

    def __init__(self, arena: NodeArena, tie_break: str = DEFAULT_TIE_BREAK) -> None:
        self._arena = arena
        self._key = TIE_BREAKS[resolve_tie_break(tie_break)]
        self._heap: List[Tuple[Tuple[int, ...], int, int]] = []
        self._by_coordinate: Dict[Coordinate, int] = {}
        self._live_seq: Dict[int, int] = {}
        self._seq = 0

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _push(self, index: int) -> None:
        seq = self._seq
        self._seq += 1
        self._live_seq[index] = seq
        heappush(self._heap, (self._key(self._arena[index], seq), seq, index))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._by_coordinate)

    def __bool__(self) -> bool:
        return bool(self._by_coordinate)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._by_coordinate

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._by_coordinate)

    def get(self, coordinate: Coordinate) -> int | None:
        """Return the arena index held for ``coordinate`` or ``None``."""
        return self._by_coordinate.get(coordinate)

    def insert(self, index: int) -> None:
        """Add the arena node at ``index`` as a new frontier entry."""

        coordinate = self._arena[index].coordinate
        if coordinate in self._by_coordinate:
            raise ValueError(f"{coordinate} is already on the frontier")
        self._by_coordinate[coordinate] = index
        self._push(index)

    def reprioritise(self, index: int) -> None:
        """Re-rank the node at ``index`` after its cost was changed in place."""

        coordinate = self._arena[index].coordinate
        if self._by_coordinate.get(coordinate) != index:
            raise KeyError(f"{coordinate} is not on the frontier")
        self._push(index)

    def pop_best(self) -> int:
        """Remove and return the arena index of the best-scoring node."""

        while self._heap:
            _, seq, index = heappop(self._heap)
            if self._live_seq.get(index) != seq:
                continue
            del self._live_seq[index]
            del self._by_coordinate[self._arena[index].coordinate]
            return index
        raise IndexError("pop from an empty frontier")


class Visited:
    """Finalized nodes, keyed by coordinate."""

    def __init__(self) -> None:
        self._by_coordinate: Dict[Coordinate, int] = {}

    def __len__(self) -> int:
        return len(self._by_coordinate)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._by_coordinate

    def __iter__(self) -> Iterator[Coordinate]:
        return iter(self._by_coordinate)

    def get(self, coordinate: Coordinate) -> int | None:
        return self._by_coordinate.get(coordinate)

    def add(self, coordinate: Coordinate, index: int) -> None:
        self._by_coordinate[coordinate] = index

    def reopen(self, coordinate: Coordinate) -> int:
        """Remove ``coordinate`` so a cheaper route can be explored again."""
        return self._by_coordinate.pop(coordinate)


__all__ = [
    "DEFAULT_TIE_BREAK",
    "Frontier",
    "TIE_BREAKS",
    "Visited",
    "resolve_tie_break",
]
