from pathlib import Path

import pytest

from grid_astar.config import CONFIG_PATH, Config, load_config


def test_missing_file_gives_defaults(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "nope.yaml")
    assert isinstance(cfg, Config)
    assert cfg.search.tie_break == "heuristic"
    assert cfg.logging.global_level == "INFO"
    assert cfg.logging.module_levels == {}
    assert cfg.scenarios.path is None


def test_values_are_parsed(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n"
        "  tie_break: Coordinate\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    grid_astar.search.engine: warning\n"
        "scenarios:\n"
        "  path: extra.yaml\n"
    )
    cfg = load_config(path)
    assert cfg.search.tie_break == "coordinate"
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"grid_astar.search.engine": "WARNING"}
    assert cfg.scenarios.path == tmp_path / "extra.yaml"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(path).search.tie_break == "heuristic"


def test_unknown_tie_break_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("search:\n  tie_break: random\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_non_mapping_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_repository_config_loads() -> None:
    cfg = load_config(CONFIG_PATH)
    assert cfg.search.tie_break in {"heuristic", "coordinate", "fifo"}
