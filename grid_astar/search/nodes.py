"""Search node records and the arena that owns them.

Nodes never hold references to each other. A node's ``parent`` is the
integer index of another node inside the same :class:`NodeArena`, so
rewriting a parent during an update is a plain field write.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List

from ..core.coordinate import Coordinate
from ..core.grid import Grid


@dataclass(slots=True)
class SearchNode:
    """One cell reached during the search.

    ``g`` counts the cells on the route including this one, so the seeded
    start node has ``g == 1``.
    """

    coordinate: Coordinate
    g: int
    h: int
    parent: int | None = None

    @property
    def f(self) -> int:
        return self.g + self.h

    def improves_on(self, other: SearchNode) -> bool:
        """Return ``True`` if this node reaches the same cell strictly cheaper."""
        return self.g < other.g

    def update_from(self, other: SearchNode) -> None:
        """Copy cost, heuristic and parent of ``other`` into this node."""
        self.g = other.g
        self.h = other.h
        self.parent = other.parent


class NodeArena:
    """Growable store of :class:`SearchNode` records addressed by index."""

    def __init__(self) -> None:
        self._nodes: List[SearchNode] = []

    def add(self, node: SearchNode) -> int:
        """Store ``node`` and return its index."""
        self._nodes.append(node)
        return len(self._nodes) - 1

    def __getitem__(self, index: int) -> SearchNode:
        return self._nodes[index]

    def __len__(self) -> int:
        return len(self._nodes)

    def lineage(self, index: int) -> Iterator[SearchNode]:
        """Yield the node at ``index`` followed by each ancestor up to the root."""

        current: int | None = index
        steps = 0
        while current is not None:
            if steps > len(self._nodes):
                raise RuntimeError("Parent chain contains a cycle")
            node = self._nodes[current]
            yield node
            current = node.parent
            steps += 1


def make_node(
    grid: Grid,
    coordinate: Coordinate,
    parent: int | None = None,
    arena: NodeArena | None = None,
) -> SearchNode:
    """Build a candidate node for ``coordinate``.

    ``g`` is the parent's ``g`` plus one (or 1 without a parent) and ``h`` is
    the grid heuristic. The node is not stored anywhere; callers decide
    whether it enters the arena.
    """

    parent_g = 0
    if parent is not None:
        if arena is None:
            raise ValueError("arena is required when a parent index is given")
        parent_g = arena[parent].g
    return SearchNode(
        coordinate=coordinate,
        g=parent_g + 1,
        h=grid.heuristic(coordinate),
        parent=parent,
    )


__all__ = ["SearchNode", "NodeArena", "make_node"]
