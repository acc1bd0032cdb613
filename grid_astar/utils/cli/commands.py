"""Implementations of path-finding CLI commands."""

from __future__ import annotations

from typing import Any, Dict, List
import logging

from ...core.coordinate import Coordinate
from ...pathfinding import find_path
from ...scenarios.catalogue import Scenario, ScenarioResult, load_scenarios
from .command_parser import parse_coordinate

logger = logging.getLogger(__name__)


HELP_TEXT = """Available commands:
  /find W H x,y x,y [x,y ...]  shortest path from start to goal avoiding the listed obstacles
  /scenario NAME               run one catalogue scenario
  /scenarios                   run every catalogue scenario
  /help                        show this message
  /quit                        stop reading commands"""


def format_path(path: List[Coordinate] | None) -> str:
    if path is None:
        return "no path"
    return " -> ".join(str(cell) for cell in path)


def _scenarios(state: Dict[str, Any]) -> Dict[str, Scenario]:
    scenarios = state.get("scenarios")
    if scenarios is None:
        scenarios = load_scenarios()
        state["scenarios"] = scenarios
    return scenarios


def _record(result: ScenarioResult, state: Dict[str, Any]) -> None:
    state.setdefault("results", []).append(result)
    if result.passed:
        logger.info(
            "[Scenario %s] passed: %s", result.scenario.name, format_path(result.path)
        )
    else:
        state["failures"] = state.get("failures", 0) + 1
        logger.error(
            "[Scenario %s] FAILED: %s", result.scenario.name, "; ".join(result.problems)
        )


def find(args: List[str], state: Dict[str, Any]) -> List[Coordinate] | None:
    if len(args) < 4:
        raise ValueError("Usage: /find W H x,y x,y [x,y ...]")
    try:
        width, height = int(args[0]), int(args[1])
    except ValueError:
        raise ValueError("Width and height must be integers") from None
    start = parse_coordinate(args[2])
    goal = parse_coordinate(args[3])
    obstacles = [parse_coordinate(a) for a in args[4:]]

    path = find_path(width, height, start, goal, obstacles, tie_break=state.get("tie_break"))
    state["last_path"] = path
    if path is None:
        logger.info("No path from %s to %s.", start, goal)
    else:
        logger.info("Path (%d cells): %s", len(path), format_path(path))
    return path


def scenario(name: str, state: Dict[str, Any]) -> ScenarioResult:
    scenarios = _scenarios(state)
    if name not in scenarios:
        raise ValueError(
            f"Unknown scenario '{name}'. Known: {', '.join(scenarios)}"
        )
    result = scenarios[name].run(tie_break=state.get("tie_break"))
    _record(result, state)
    return result


def run_all(state: Dict[str, Any]) -> List[ScenarioResult]:
    results = []
    for item in _scenarios(state).values():
        result = item.run(tie_break=state.get("tie_break"))
        _record(result, state)
        results.append(result)
    passed = sum(1 for r in results if r.passed)
    logger.info("%d/%d scenarios passed.", passed, len(results))
    return results


def help_command(state: Dict[str, Any]) -> None:
    logger.info(HELP_TEXT)


def execute(command: str, args: list[str], state: Dict[str, Any]) -> Any:
    """Run ``command`` with ``args``; ``state`` carries results between commands."""

    if "running" not in state:
        state["running"] = True
    cmd_lower = command.lower()

    return_value: Any = None

    try:
        if cmd_lower == "find":
            return_value = find(args, state)
        elif cmd_lower == "scenario":
            if not args:
                raise ValueError("Usage: /scenario NAME")
            return_value = scenario(args[0], state)
        elif cmd_lower == "scenarios":
            return_value = run_all(state)
        elif cmd_lower == "help":
            help_command(state)
        elif cmd_lower == "quit":
            state["running"] = False
            logger.info("Quit command received.")
        else:
            logger.error("Unknown command: /%s. Type /help for available commands.", command)
    except ValueError as exc:
        logger.error("/%s: %s", cmd_lower, exc)

    return return_value


__all__ = ["HELP_TEXT", "execute", "find", "format_path", "run_all", "scenario"]
