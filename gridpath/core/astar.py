# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A* over an 8-connected grid.

Heuristic:
- Octile distance to the goal with the same 10/14 integer costs as the
  moves themselves, so it never overestimates (admissible) and never drops
  by more than a step costs (consistent). Closed nodes are therefore final.
- Computed once when a node is first discovered and reused afterwards.

Tie-breaking in the open set: lower f, then lower h (see NodeHeap).
"""

from dataclasses import dataclass
from typing import List

from gridpath.core.distance import octile
from gridpath.core.search import SearchAlgo
from gridpath.core.types import Cell, SearchNode


@dataclass
class AStarAlgo(SearchAlgo):
    name: str = "A*"

    def _heuristic(self, node: SearchNode) -> int:
        return octile(node.cell, self.goal_node.cell)

    def _expand(self, current: SearchNode) -> List[Cell]:
        opened_now: List[Cell] = []
        for v in self.grid.neighbors8(current.cell):
            if v in self.closed_set:
                continue
            node = self._node(v)
            # octile() of adjacent cells is exactly the 10/14 step cost
            if self._relax(current, node, octile(current.cell, v)):
                opened_now.append(v)
        return opened_now
