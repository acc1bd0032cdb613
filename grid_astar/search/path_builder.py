"""Back-reference walk from a finalized goal node to the start."""

from __future__ import annotations

from typing import List

from ..core.coordinate import Coordinate
from .nodes import NodeArena


def build_path(arena: NodeArena, goal_index: int) -> List[Coordinate]:
    """Return coordinates from the root of ``goal_index``'s chain to the goal, inclusive."""

    path = [node.coordinate for node in arena.lineage(goal_index)]
    path.reverse()
    return path


__all__ = ["build_path"]
