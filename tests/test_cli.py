import logging
from pathlib import Path

from gridpath.app.cli import EXIT_ERROR, EXIT_NO_PATH, EXIT_OK, configure_logging, main
from gridpath.config import BenchmarkConfig, Config, LoggingConfig, SearchConfig

MAP_DIR = Path(__file__).resolve().parents[1] / "maps"


def test_cli_prints_cost_and_path(capsys):
    code = main([str(MAP_DIR / "01_open_field.json"), "--algo", "jps"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "JPS: cost 56" in out
    assert "path: 0,0 1,1 2,2 3,3 4,4" in out


def test_cli_steps(capsys):
    code = main([str(MAP_DIR / "01_open_field.json"), "--algo", "dijkstra", "--steps"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "[running]" in out
    assert "[done]" in out


def test_cli_no_path(capsys):
    code = main([str(MAP_DIR / "03_sealed_goal.json"), "--algo", "astar"])
    assert code == EXIT_NO_PATH
    assert "no path" in capsys.readouterr().out


def test_cli_missing_map(tmp_path: Path):
    assert main([str(tmp_path / "missing.json")]) == EXIT_ERROR


def test_cli_unwalkable_goal(tmp_path: Path):
    path = tmp_path / "blocked_goal.json"
    path.write_text(
        '{"width": 2, "height": 1, "start": [0, 0], "goal": [1, 0], "cells": [[0, 1]]}'
    )
    assert main([str(path)]) == EXIT_ERROR


def test_cli_benchmark(capsys):
    code = main([str(MAP_DIR / "02_wall_gap.json"), "--benchmark", "3", "--seed", "1"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "iterations: 3  mismatches: 0" in out


def test_cli_uses_config_default_algorithm(tmp_path: Path, capsys):
    cfg = tmp_path / "config.yaml"
    cfg.write_text("search:\n  default_algorithm: dijkstra\n")
    code = main([str(MAP_DIR / "01_open_field.json"), "--config", str(cfg)])

    assert code == EXIT_OK
    assert "Dijkstra: cost 56" in capsys.readouterr().out


def test_invalid_global_level_warns(capsys):
    config = Config(SearchConfig(), LoggingConfig(global_level="LOUD"), BenchmarkConfig())
    configure_logging(config)

    assert logging.getLogger().level == logging.INFO
    assert "Invalid global log level 'LOUD'" in capsys.readouterr().err


def test_invalid_module_level_warns(capsys):
    config = Config(SearchConfig(), LoggingConfig(module_levels={"gridpath.core.jps": "CHATTY"}), BenchmarkConfig())
    configure_logging(config)

    assert "Invalid log level 'CHATTY' for module 'gridpath.core.jps'" in capsys.readouterr().err
