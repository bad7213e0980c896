"""Randomized cross-check and timing of the three engines on one grid."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from gridpath.core.astar import AStarAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.jps import JPSAlgo
from gridpath.core.types import Cell, Grid

logger = logging.getLogger(__name__)

ENGINES = {
    "dijkstra": DijkstraAlgo,
    "astar": AStarAlgo,
    "jps": JPSAlgo,
}


@dataclass
class Mismatch:
    algo: str
    start: Cell
    end: Cell
    cost: Optional[int]
    optimal: Optional[int]


@dataclass
class BenchmarkReport:
    iterations: int = 0
    avg_seconds: Dict[str, float] = field(default_factory=dict)
    mismatches: List[Mismatch] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.mismatches


def random_endpoints(grid: Grid, rng: random.Random) -> Tuple[Cell, Cell]:
    """Two walkable cells that share neither a row nor a column."""

    walkable = [(x, y) for y in range(grid.height) for x in range(grid.width) if grid.walkable((x, y))]
    if len({x for x, _ in walkable}) < 2 or len({y for _, y in walkable}) < 2:
        raise ValueError("grid has too few walkable cells to pick endpoints")

    start = rng.choice(walkable)
    candidates = [c for c in walkable if c[0] != start[0] and c[1] != start[1]]
    while not candidates:
        start = rng.choice(walkable)
        candidates = [c for c in walkable if c[0] != start[0] and c[1] != start[1]]
    return start, rng.choice(candidates)


def _timed_cost(algo, start: Cell, end: Cell) -> Tuple[float, Optional[int]]:
    t0 = time.perf_counter()
    path = algo.find_path(start, end)
    elapsed = time.perf_counter() - t0
    return elapsed, (path[0].cost_so_far if path else None)


def run_benchmark(grid: Grid, iterations: int, seed: Optional[int] = None) -> BenchmarkReport:
    """Run every engine on the same random endpoints; stop at the first cost disagreement.

    Dijkstra's cost is taken as the optimum that A* and JPS must match.
    """

    rng = random.Random(seed)
    engines = {name: cls(grid) for name, cls in ENGINES.items()}
    totals = {name: 0.0 for name in engines}
    report = BenchmarkReport()

    for _ in range(iterations):
        start, end = random_endpoints(grid, rng)
        results = {name: _timed_cost(algo, start, end) for name, algo in engines.items()}
        for name, (elapsed, _) in results.items():
            totals[name] += elapsed
        report.iterations += 1

        optimal = results["dijkstra"][1]
        for name in ("astar", "jps"):
            cost = results[name][1]
            if cost != optimal:
                logger.error("%s found path with cost %s but the optimal is %s (start: %s, end: %s)",
                             name, cost, optimal, start, end)
                report.mismatches.append(Mismatch(name, start, end, cost, optimal))
        if report.mismatches:
            break

    if report.iterations:
        report.avg_seconds = {name: t / report.iterations for name, t in totals.items()}
    logger.info(
        "Dijkstra took %.6f, A* took %.6f and JPS took %.6f seconds on average (%d iterations)",
        report.avg_seconds.get("dijkstra", 0.0),
        report.avg_seconds.get("astar", 0.0),
        report.avg_seconds.get("jps", 0.0),
        report.iterations,
    )
    return report


__all__ = ["ENGINES", "BenchmarkReport", "Mismatch", "random_endpoints", "run_benchmark"]
