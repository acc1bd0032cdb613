"""A* main loop over a :class:`~grid_astar.core.grid.Grid`."""

from __future__ import annotations

from enum import Enum
from typing import List
import logging

from ..core.coordinate import Coordinate
from ..core.grid import Grid
from .frontier import DEFAULT_TIE_BREAK, Frontier, Visited
from .nodes import NodeArena, SearchNode, make_node
from .path_builder import build_path

logger = logging.getLogger(__name__)


class SearchState(Enum):
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SearchEngine:
    """Single-use A* search.

    All bookkeeping (arena, frontier, visited) belongs to one instance and
    :meth:`run` may only be called once, so no state leaks between
    searches.
    """

    def __init__(self, grid: Grid, tie_break: str = DEFAULT_TIE_BREAK) -> None:
        self.grid = grid
        self.arena = NodeArena()
        self.frontier = Frontier(self.arena, tie_break)
        self.visited = Visited()
        self.state = SearchState.RUNNING
        self.expanded = 0
        self.reopened = 0
        self._started = False

        start_index = self.arena.add(make_node(grid, grid.start))
        self.frontier.insert(start_index)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def run(self) -> List[Coordinate] | None:
        """Search until the goal is finalized or the frontier runs dry.

        Returns the start-to-goal path, or ``None`` when the goal cannot be
        reached.
        """

        if self._started:
            raise RuntimeError("SearchEngine.run() may only be called once; build a new engine")
        self._started = True

        while self.state is SearchState.RUNNING:
            self.step()

        if self.state is SearchState.FAILED:
            logger.info(
                "No path from %s to %s after expanding %d cells",
                self.grid.start,
                self.grid.goal,
                self.expanded,
            )
            return None

        goal_index = self.visited.get(self.grid.goal)
        if goal_index is None:
            raise RuntimeError(f"Search succeeded but {self.grid.goal} was not finalized")
        path = build_path(self.arena, goal_index)
        logger.info(
            "Path from %s to %s: %d cells, %d expanded, %d reopened",
            self.grid.start,
            self.grid.goal,
            len(path),
            self.expanded,
            self.reopened,
        )
        return path

    def step(self) -> SearchState:
        """Finalize the best frontier node and expand it; return the new state."""

        if self.state is not SearchState.RUNNING:
            return self.state

        if not self.frontier:
            self.state = SearchState.FAILED
            return self.state

        index = self.frontier.pop_best()
        current = self.arena[index]
        self.visited.add(current.coordinate, index)
        self.expanded += 1
        logger.debug(
            "Expanding %s g=%d h=%d f=%d", current.coordinate, current.g, current.h, current.f
        )

        for _, neighbour in self.grid.neighbours(current.coordinate):
            self.expand_neighbour(neighbour, index)

        if self.grid.goal in self.visited:
            self.state = SearchState.SUCCEEDED
        return self.state

    def expand_neighbour(self, coordinate: Coordinate, parent: int) -> None:
        """Offer a route to ``coordinate`` through the node at ``parent``."""

        candidate = make_node(self.grid, coordinate, parent, self.arena)

        closed_index = self.visited.get(coordinate)
        if closed_index is not None:
            if not candidate.improves_on(self.arena[closed_index]):
                return
            # Only reachable with an inconsistent heuristic.
            self.visited.reopen(coordinate)
            self.reopened += 1
            logger.debug("Reopening %s with g=%d", coordinate, candidate.g)

        open_index = self.frontier.get(coordinate)
        if open_index is not None:
            existing: SearchNode = self.arena[open_index]
            if candidate.improves_on(existing):
                existing.update_from(candidate)
                self.frontier.reprioritise(open_index)
            return

        self.frontier.insert(self.arena.add(candidate))


__all__ = ["SearchEngine", "SearchState"]
