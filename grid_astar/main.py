"""Command loop entry point for grid_astar."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, Sequence, TextIO
import logging
import sys

from .config import CONFIG_PATH, Config, load_config
from .scenarios.catalogue import load_scenarios
from .utils.cli.command_parser import parse_command
from .utils.cli.commands import execute

logger = logging.getLogger(__name__)


def configure_logging(cfg: Config) -> None:
    """Apply the root and per-module log levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.logging.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True
    )

    for module_name, level_str in cfg.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path = CONFIG_PATH) -> Dict[str, Any]:
    """Load configuration and scenarios and return a fresh command state."""

    cfg = load_config(Path(config_path))
    configure_logging(cfg)

    scenarios = load_scenarios()
    if cfg.scenarios.path is not None:
        extra = load_scenarios(cfg.scenarios.path)
        logger.info("[Bootstrap] Loaded %d extra scenarios from %s", len(extra), cfg.scenarios.path)
        scenarios.update(extra)

    return {
        "running": True,
        "tie_break": cfg.search.tie_break,
        "scenarios": scenarios,
        "failures": 0,
    }


def run_commands(lines: Iterable[str], state: Dict[str, Any]) -> int:
    """Execute each slash command in ``lines`` until ``/quit``; return the exit status."""

    for line in lines:
        line = line.strip()
        if not line:
            continue
        cmd = parse_command(line)
        if cmd is None:
            logger.error("Commands must start with '/': %r", line)
            continue
        execute(cmd.name, cmd.args, state)
        if not state["running"]:
            break
    return 1 if state.get("failures") else 0


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    state = bootstrap()
    if args:
        return run_commands(args, state)

    logger.info("Reading commands from stdin. Type /help for commands, /quit to exit.")
    try:
        return run_commands(stdin if stdin is not None else sys.stdin, state)
    except KeyboardInterrupt:
        logger.info("KeyboardInterrupt caught. Shutting down...")
        return 130


if __name__ == "__main__":
    sys.exit(main())
