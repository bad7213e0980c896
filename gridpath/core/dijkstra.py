# gridpath/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass
from typing import List

from gridpath.core.distance import step_cost
from gridpath.core.search import SearchAlgo
from gridpath.core.types import Cell, SearchNode


@dataclass
class DijkstraAlgo(SearchAlgo):
    """Uniform-cost search. Heuristic stays 0, so nodes leave the heap in g order."""

    name: str = "Dijkstra"

    def _expand(self, current: SearchNode) -> List[Cell]:
        opened_now: List[Cell] = []
        for v in self.grid.neighbors8(current.cell):
            if v in self.closed_set:
                continue
            node = self._node(v)
            if self._relax(current, node, step_cost(current.cell, v)):
                opened_now.append(v)
        return opened_now


'''
How one expansion goes

Pop the cheapest node; it is final, so close it.

Stop when the goal is popped (not when it is first pushed).

Relaxation value: alt = g[u] + 10 for a straight step, + 14 for a diagonal.

Update: if better, record g and parent, then push (first time) or
decrease-key (already open). Never push a node twice.
'''
