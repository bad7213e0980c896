# gridpath/core/search.py
#!/usr/bin/env python3
"""
Shared search-run machinery for the grid engines.

Implements the Algorithm API used by every engine:
- find_path(start, end) -> goal..start list of SearchNode, or None
- iter_steps(start, end) -> one StepResult per outer-loop iteration

Each run builds its own nodes, open-set heap and closed set, so a Grid can
be searched any number of times (or by several engines) without leftover
costs or parents from an earlier run.

Subclasses provide:
- _heuristic(node): 0 for Dijkstra, octile-to-goal for A*/JPS
- _expand(node): relax successors of a freshly closed node and return the
  cells opened during the expansion
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterator, List, Optional, Sequence, Set

from gridpath.config import CONFIG
from gridpath.core.distance import direction
from gridpath.core.errors import OutOfBoundsError, PathTooLongError, UnwalkableEndpointError
from gridpath.core.heap import NodeHeap
from gridpath.core.types import (
    CLOSED,
    OPENED,
    UPDATED,
    Cell,
    Grid,
    SearchNode,
    StepResult,
)

logger = logging.getLogger(__name__)

Observer = Callable[[Cell, str], None]


def retrace_path(start: SearchNode, end: SearchNode, max_length: int) -> List[SearchNode]:
    """Follow parent links from ``end`` back to ``start``; result is goal -> start."""
    path: List[SearchNode] = []
    current = end
    while current is not start:
        path.append(current)
        current = current.parent
        if current is None:
            logger.error("Parent chain from %s never reaches start %s", end.cell, start.cell)
            raise PathTooLongError(f"parent chain from {end.cell} is broken")
        # The start still has to be appended
        if len(path) >= max_length:
            logger.error("Path was over %d nodes (possible parent loop) ending at %s", max_length, end.cell)
            raise PathTooLongError(f"path exceeds {max_length} nodes")
    path.append(start)
    return path


def expand_path(cells: Sequence[Cell]) -> List[Cell]:
    """Fill the gaps between consecutive waypoints lying on straight or diagonal lines."""
    if not cells:
        return []
    full: List[Cell] = [cells[0]]
    for a, b in zip(cells, cells[1:]):
        dx, dy = abs(b[0] - a[0]), abs(b[1] - a[1])
        if dx and dy and dx != dy:
            raise ValueError(f"{a} -> {b} is neither straight nor diagonal")
        step = direction(a, b)
        x, y = a
        while (x, y) != b:
            x += step[0]
            y += step[1]
            full.append((x, y))
    return full


@dataclass
class SearchAlgo:
    grid: Grid
    observer: Optional[Observer] = None
    max_path_length: int = field(default_factory=lambda: CONFIG.search.max_path_length)
    name: str = "search"

    # Per-run state, rebuilt by _reset()
    open_set: NodeHeap = field(init=False, repr=False)
    closed_set: Set[Cell] = field(default_factory=set, init=False, repr=False)
    nodes: Dict[Cell, SearchNode] = field(default_factory=dict, init=False, repr=False)
    start_node: Optional[SearchNode] = field(default=None, init=False, repr=False)
    goal_node: Optional[SearchNode] = field(default=None, init=False, repr=False)
    last_path: Optional[List[SearchNode]] = field(default=None, init=False, repr=False)
    popped_count: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        self.open_set = NodeHeap(self.grid.size)

    # -------------------- public API --------------------

    def find_path(self, start: Cell, end: Cell) -> Optional[List[SearchNode]]:
        """Run to completion. Returns nodes ordered goal -> start, or None when unreachable."""
        for _ in self.iter_steps(start, end):
            pass
        return self.last_path

    def iter_steps(self, start: Cell, end: Cell) -> Iterator[StepResult]:
        """Validate endpoints now, then search lazily one expansion per step."""
        self._check_endpoint(start)
        self._check_endpoint(end)
        return self._run(start, end)

    # -------------------- hooks --------------------

    def _heuristic(self, node: SearchNode) -> int:
        return 0

    def _expand(self, current: SearchNode) -> List[Cell]:
        raise NotImplementedError

    def _goal_on_top(self) -> bool:
        return False

    # -------------------- run lifecycle --------------------

    def _check_endpoint(self, c: Cell) -> None:
        if not self.grid.in_bounds(c):
            raise OutOfBoundsError(c, self.grid.width, self.grid.height)
        if self.grid.is_block(c):
            raise UnwalkableEndpointError(c)

    def _reset(self, start: Cell, end: Cell) -> None:
        self.open_set.clear()
        self.closed_set = set()
        self.nodes = {}
        self.popped_count = 0
        self.last_path = None
        self.start_node = self._node(start)
        self.goal_node = self._node(end)

    def _run(self, start: Cell, end: Cell) -> Iterator[StepResult]:
        self._reset(start, end)
        s = self.start_node
        s.cost_so_far = 0

        if s is self.goal_node:
            yield self._finish(s, current=s.cell)
            return

        s.heuristic = self._heuristic(s)
        self.open_set.insert(s)
        self._notify(s.cell, OPENED)

        while len(self.open_set) > 0:
            u = self.open_set.extract_min()
            self._close(u)

            if u is self.goal_node:
                yield self._finish(u, closed=[u.cell], current=u.cell)
                return

            opened_now = self._expand(u)

            if self._goal_on_top():
                goal = self.open_set.extract_min()
                self._close(goal)
                yield self._finish(goal, opened=opened_now, closed=[u.cell, goal.cell], current=u.cell)
                return

            logger.debug("%s expanded %s (g=%s, f=%s)", self.name, u.cell, u.cost_so_far, u.total_cost)
            yield StepResult(status="running", opened=opened_now, closed=[u.cell],
                             current=u.cell, metrics=self._metrics())

        logger.warning("%s: no path found from %s to %s", self.name, start, end)
        yield StepResult(status="no_path", metrics=self._metrics())

    def _finish(self, goal: SearchNode, opened: Optional[List[Cell]] = None,
                closed: Optional[List[Cell]] = None, current: Optional[Cell] = None) -> StepResult:
        path = retrace_path(self.start_node, goal, self.max_path_length)
        self.last_path = path
        logger.info("%s: %d nodes visited, path cost %s",
                    self.name, len(self.closed_set) + len(self.open_set), goal.cost_so_far)
        return StepResult(
            status="done",
            opened=opened or [],
            closed=closed or [],
            current=current,
            path=[n.cell for n in reversed(path)],
            metrics=self._metrics(path_len=len(path), total_cost=goal.cost_so_far),
        )

    # -------------------- helpers --------------------

    def _node(self, c: Cell) -> SearchNode:
        node = self.nodes.get(c)
        if node is None:
            node = SearchNode(c[0], c[1])
            self.nodes[c] = node
        return node

    def _notify(self, c: Cell, kind: str) -> None:
        if self.observer is not None:
            self.observer(c, kind)

    def _close(self, node: SearchNode) -> None:
        self.popped_count += 1
        self.closed_set.add(node.cell)
        self._notify(node.cell, CLOSED)

    def _relax(self, current: SearchNode, node: SearchNode, edge_cost: int) -> bool:
        """Offer ``current`` as a better parent for ``node``. True if ``node`` was newly opened."""
        alt = current.cost_so_far + edge_cost
        if alt >= node.cost_so_far:
            return False

        node.cost_so_far = alt
        node.parent = current

        if self.open_set.contains(node):
            self.open_set.decrease_key(node)
            self._notify(node.cell, UPDATED)
            return False

        # First discovery; the heuristic never changes after this
        node.heuristic = self._heuristic(node)
        self.open_set.insert(node)
        self._notify(node.cell, OPENED)
        return True

    def _metrics(self, path_len: int = 0, total_cost: Optional[int] = None) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": total_cost,
        }


__all__ = ["SearchAlgo", "Observer", "retrace_path", "expand_path"]
