"""Simple configuration loader for gridpath."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"
ALGORITHMS = ("dijkstra", "astar", "jps")


def _resolve_config_path() -> Path:
    """``GRIDPATH_CONFIG`` overrides the repository default."""

    override = os.getenv("GRIDPATH_CONFIG")
    return Path(override) if override else DEFAULT_CONFIG_PATH


CONFIG_PATH = _resolve_config_path()


@dataclass
class SearchConfig:
    """Engine defaults."""

    default_algorithm: str = "astar"
    max_path_length: int = 10000


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class BenchmarkConfig:
    iterations: int = 10
    seed: Optional[int] = None


@dataclass
class Config:
    """Top level configuration dataclass."""

    search: SearchConfig
    logging: LoggingConfig
    benchmark: BenchmarkConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    search_data = data.get("search", {}) or {}
    algo = str(search_data.get("default_algorithm", "astar")).lower()
    if algo not in ALGORITHMS:
        raise ValueError(f"unknown default_algorithm '{algo}', expected one of {ALGORITHMS}")
    max_len = int(search_data.get("max_path_length", 10000))
    if max_len <= 0:
        raise ValueError("max_path_length must be positive")
    search = SearchConfig(default_algorithm=algo, max_path_length=max_len)

    logging_data = data.get("logging", {}) or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    bench_data = data.get("benchmark", {}) or {}
    seed = bench_data.get("seed")
    bench = BenchmarkConfig(
        iterations=int(bench_data.get("iterations", 10)),
        seed=int(seed) if seed is not None else None,
    )

    return Config(search=search, logging=log_cfg, benchmark=bench)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path)
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "ALGORITHMS",
    "CONFIG",
    "CONFIG_PATH",
    "Config",
    "SearchConfig",
    "LoggingConfig",
    "BenchmarkConfig",
    "load_config",
]
