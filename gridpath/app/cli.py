# gridpath/app/cli.py
#!/usr/bin/env python3
"""
Headless runner for the pathfinding engines.

    python -m gridpath.app.cli maps/01_open_field.json --algo jps
    python -m gridpath.app.cli maps/02_wall_gap.json --steps
    python -m gridpath.app.cli maps/02_wall_gap.json --benchmark 50 --seed 7

Exit codes: 0 path found, 2 no path, 1 error.
"""

# --- bootstrap import path so `from gridpath...` works when run as a script ---
import sys
from pathlib import Path
_REPO_ROOT = Path(__file__).resolve().parents[2]
if str(_REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(_REPO_ROOT))
# ------------------------------------------------------------------------------

import argparse
import logging
from typing import List, Optional

from gridpath.app.benchmark import ENGINES, run_benchmark
from gridpath.config import ALGORITHMS, Config, CONFIG, load_config
from gridpath.core.errors import PathfindingError
from gridpath.core.maps import load_map
from gridpath.core.search import expand_path

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_NO_PATH = 2


def configure_logging(config: Config) -> None:
    numeric_level = getattr(logging, config.logging.global_level, None)
    valid_global = isinstance(numeric_level, int)
    logging.basicConfig(
        level=numeric_level if valid_global else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        force=True,
    )
    if not valid_global:
        logger.warning("Invalid global log level '%s' in config, using INFO.", config.logging.global_level)
    for module_name, level_str in config.logging.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def build_parser(config: Config = CONFIG) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Grid shortest paths with Dijkstra, A* and JPS")
    parser.add_argument("map", type=Path, help="JSON map file")
    parser.add_argument("--algo", choices=ALGORITHMS, default=None,
                        help=f"engine to run (default: {config.search.default_algorithm})")
    parser.add_argument("--steps", action="store_true", help="print every search step")
    parser.add_argument("--benchmark", type=int, metavar="N", default=None,
                        help="cross-check all engines on N random endpoint pairs")
    parser.add_argument("--seed", type=int, default=None, help="seed for --benchmark")
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    return parser


def _format_path(cells) -> str:
    return " ".join(f"{x},{y}" for x, y in cells)


def run(args: argparse.Namespace, config: Config) -> int:
    grid, start, goal = load_map(args.map)

    if args.benchmark is not None:
        seed = args.seed if args.seed is not None else config.benchmark.seed
        report = run_benchmark(grid, args.benchmark, seed)
        for name, secs in report.avg_seconds.items():
            print(f"{name:<9} {secs * 1000:.3f} ms avg")
        print(f"iterations: {report.iterations}  mismatches: {len(report.mismatches)}")
        return EXIT_OK if report.ok else EXIT_ERROR

    algo_name = args.algo or config.search.default_algorithm
    algo = ENGINES[algo_name](grid, max_path_length=config.search.max_path_length)

    last = None
    for last in algo.iter_steps(start, goal):
        if args.steps:
            print(f"[{last.status}] current={last.current} opened={len(last.opened)} "
                  f"open={last.metrics['open_size']} closed={last.metrics['closed_count']}")

    if last is None or last.status != "done":
        print(f"{algo.name}: no path from {start} to {goal}")
        return EXIT_NO_PATH

    print(f"{algo.name}: cost {last.metrics['total_cost']}, "
          f"{last.metrics['popped']} nodes expanded")
    print("path:", _format_path(expand_path(last.path)))
    return EXIT_OK


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config(args.config) if args.config else CONFIG
    configure_logging(config)
    try:
        return run(args, config)
    except PathfindingError as exc:
        logger.error("Search failed: %s", exc)
    except (OSError, ValueError, KeyError) as exc:
        logger.error("Failed on map %s: %s", args.map, exc)
    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
