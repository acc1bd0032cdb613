"""Simple configuration loader for grid_astar."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .search.frontier import DEFAULT_TIE_BREAK, resolve_tie_break


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class SearchConfig:
    """Configuration values for the search section."""

    tie_break: str = DEFAULT_TIE_BREAK


@dataclass
class LoggingConfig:
    """Root log level plus optional per-module overrides."""

    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class ScenarioConfig:
    """Where to find extra scenarios besides the packaged catalogue."""

    path: Optional[Path] = None


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    scenarios: ScenarioConfig = field(default_factory=ScenarioConfig)


def _parse_config(data: dict[str, Any], base_dir: Path | None = None) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search") or {}
    search = SearchConfig(
        tie_break=resolve_tie_break(search_data.get("tie_break", DEFAULT_TIE_BREAK)),
    )

    logging_data = data.get("logging") or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels={
            str(k): str(v).upper()
            for k, v in (logging_data.get("module_levels") or {}).items()
        },
    )

    scenario_data = data.get("scenarios") or {}
    raw_path = scenario_data.get("path")
    scenario_path: Path | None = None
    if raw_path:
        scenario_path = Path(raw_path)
        if not scenario_path.is_absolute() and base_dir is not None:
            scenario_path = base_dir / scenario_path
    scenarios = ScenarioConfig(path=scenario_path)

    return Config(search=search, logging=logging_cfg, scenarios=scenarios)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    else:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Configuration file {path} must contain a mapping")
    return _parse_config(raw, base_dir=path.parent)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "LoggingConfig",
    "ScenarioConfig",
    "SearchConfig",
    "load_config",
]
