from pathlib import Path

import pytest

from gridpath import config as config_mod
from gridpath.config import load_config


def test_missing_file_gives_defaults(tmp_path: Path):
    cfg = load_config(tmp_path / "nope.yaml")
    assert cfg.search.default_algorithm == "astar"
    assert cfg.search.max_path_length == 10000
    assert cfg.logging.global_level == "INFO"
    assert cfg.benchmark.seed is None


def test_load_values(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "search:\n"
        "  default_algorithm: JPS\n"
        "  max_path_length: 500\n"
        "logging:\n"
        "  global_level: debug\n"
        "  module_levels:\n"
        "    gridpath.core.jps: WARNING\n"
        "benchmark:\n"
        "  iterations: 3\n"
        "  seed: 42\n"
    )
    cfg = load_config(path)

    assert cfg.search.default_algorithm == "jps"
    assert cfg.search.max_path_length == 500
    assert cfg.logging.global_level == "DEBUG"
    assert cfg.logging.module_levels == {"gridpath.core.jps": "WARNING"}
    assert cfg.benchmark.iterations == 3
    assert cfg.benchmark.seed == 42


def test_unknown_algorithm_rejected(tmp_path: Path):
    path = tmp_path / "config.yaml"
    path.write_text("search:\n  default_algorithm: bfs\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_repo_config_loads():
    cfg = load_config(config_mod.DEFAULT_CONFIG_PATH)
    assert cfg.search.default_algorithm in config_mod.ALGORITHMS


def test_env_var_overrides_path(monkeypatch, tmp_path: Path):
    target = tmp_path / "other.yaml"
    monkeypatch.setenv("GRIDPATH_CONFIG", str(target))
    assert config_mod._resolve_config_path() == target

    monkeypatch.delenv("GRIDPATH_CONFIG")
    assert config_mod._resolve_config_path() == config_mod.DEFAULT_CONFIG_PATH
