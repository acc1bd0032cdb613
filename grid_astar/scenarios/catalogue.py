"""Named path-finding scenarios loaded from YAML."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence
import logging

import yaml

from ..core.coordinate import Coordinate, to_coordinate, to_coordinates
from ..pathfinding import find_path

logger = logging.getLogger(__name__)

BUILTIN_PATH = Path(__file__).resolve().with_name("builtin.yaml")


@dataclass(slots=True)
class Scenario:
    """One search problem with its expected shortest path length.

    ``expected_length`` of ``0`` marks the goal as unreachable.
    """

    name: str
    width: int
    height: int
    start: Coordinate
    goal: Coordinate
    obstacles: frozenset[Coordinate] = field(default_factory=frozenset)
    expected_length: int = 0

    @property
    def reachable(self) -> bool:
        return self.expected_length > 0

    def run(self, tie_break: str | None = None) -> ScenarioResult:
        path = find_path(
            self.width,
            self.height,
            self.start,
            self.goal,
            self.obstacles,
            tie_break=tie_break,
        )
        problems = self.check(path)
        for problem in problems:
            logger.warning("[Scenario %s] %s", self.name, problem)
        return ScenarioResult(scenario=self, path=path, problems=problems)

    def check(self, path: Sequence[Coordinate] | None) -> List[str]:
        """Return the expectations ``path`` violates for this scenario."""

        if not self.reachable:
            if path is not None:
                return [f"expected no path, got {len(path)} cells"]
            return []
        if path is None:
            return [f"expected a path of {self.expected_length} cells, got none"]
        problems = check_path(
            path, self.width, self.height, self.start, self.goal, self.obstacles
        )
        if len(path) != self.expected_length:
            problems.append(
                f"expected {self.expected_length} cells, got {len(path)}"
            )
        return problems


@dataclass(slots=True)
class ScenarioResult:
    scenario: Scenario
    path: List[Coordinate] | None
    problems: List[str] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.problems


def check_path(
    path: Sequence[Coordinate],
    width: int,
    height: int,
    start: Coordinate,
    goal: Coordinate,
    obstacles: Iterable[Coordinate] = (),
) -> List[str]:
    """Return a description of every structural rule ``path`` breaks.

    A valid path begins at ``start``, ends at ``goal``, stays inside the
    grid, avoids obstacles and moves exactly one cell along one axis per
    step. An empty list means the path is valid.
    """

    if not path:
        return ["path is empty"]

    blocked = set(obstacles)
    problems: List[str] = []
    if path[0] != start:
        problems.append(f"path starts at {path[0]}, not {start}")
    if path[-1] != goal:
        problems.append(f"path ends at {path[-1]}, not {goal}")
    for cell in path:
        if not (0 <= cell.x < width and 0 <= cell.y < height):
            problems.append(f"{cell} is outside the {width}x{height} grid")
        if cell in blocked:
            problems.append(f"{cell} is an obstacle")
    for a, b in zip(path, path[1:]):
        if a.manhattan(b) != 1:
            problems.append(f"{a} -> {b} is not a single cardinal step")
    return problems


def _parse_scenario(data: Dict[str, Any]) -> Scenario:
    try:
        name = str(data["name"])
        width = int(data["width"])
        height = int(data["height"])
        start = to_coordinate(data["start"])
        goal = to_coordinate(data["goal"])
    except KeyError as exc:
        raise ValueError(f"Scenario is missing required field {exc}") from exc
    expected = data.get("expected_length") or 0
    return Scenario(
        name=name,
        width=width,
        height=height,
        start=start,
        goal=goal,
        obstacles=to_coordinates(data.get("obstacles")),
        expected_length=int(expected),
    )


def load_scenarios(path: str | Path = BUILTIN_PATH) -> Dict[str, Scenario]:
    """Load the scenarios in ``path`` keyed by name, in file order."""

    path = Path(path)
    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or []
    if not isinstance(raw, list):
        raise ValueError(f"Scenario file {path} must contain a list")
    scenarios: Dict[str, Scenario] = {}
    for entry in raw:
        if not isinstance(entry, dict):
            raise ValueError(f"Scenario entries must be mappings, got {entry!r}")
        scenario = _parse_scenario(entry)
        if scenario.name in scenarios:
            raise ValueError(f"Duplicate scenario name '{scenario.name}' in {path}")
        scenarios[scenario.name] = scenario
    logger.debug("Loaded %d scenarios from %s", len(scenarios), path)
    return scenarios


__all__ = [
    "BUILTIN_PATH",
    "Scenario",
    "ScenarioResult",
    "check_path",
    "load_scenarios",
]
