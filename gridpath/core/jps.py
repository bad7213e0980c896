# gridpath/core/jps.py
#!/usr/bin/env python3
"""
Jump Point Search over an 8-connected grid.

Instead of opening every neighbour, JPS scans along straight lines and
diagonals and only opens the cells where the scan has to stop:
- the goal,
- a cell with a forced neighbour (blocked terrain next to the line makes a
  turn there necessary),
- for diagonal scans, a cell from which a straight scan along either axis
  finds one of the above.

Edges of the resulting graph are straight or diagonal runs, so their cost is
the octile distance between the two jump points and the returned path lists
jump points only (see search.expand_path for the cell-by-cell route).

The direction of travel into a node is always derived from its parent's
coordinates, never stored, so a node can't carry a stale or zero direction.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from gridpath.core.distance import DIRECTIONS, Direction, direction, octile
from gridpath.core.search import SearchAlgo
from gridpath.core.types import Cell, SearchNode

logger = logging.getLogger(__name__)


@dataclass
class JPSAlgo(SearchAlgo):
    name: str = "JPS"

    def _heuristic(self, node: SearchNode) -> int:
        return octile(node.cell, self.goal_node.cell)

    def _goal_on_top(self) -> bool:
        # Goal about to be popped anyway: finish in the same step it was found
        return self.open_set.peek() is self.goal_node

    def _expand(self, current: SearchNode) -> List[Cell]:
        opened_now: List[Cell] = []
        for d in self.successor_directions(current):
            jp = self.jump(current.cell, d)
            if jp is None or jp in self.closed_set:
                continue
            logger.debug("Jump point found at %s from %s", jp, current.cell)
            node = self._node(jp)
            if self._relax(current, node, octile(current.cell, jp)):
                opened_now.append(jp)
        return opened_now

    # -------------------- pruning --------------------

    def successor_directions(self, node: SearchNode) -> List[Direction]:
        """Natural plus forced neighbour directions for ``node``; all 8 for the start."""
        if node.parent is None:
            return list(DIRECTIONS)

        x, y = node.cell
        dx, dy = direction(node.parent.cell, node.cell)
        walkable = self.grid.walkable
        dirs: List[Direction] = []

        if dx != 0 and dy != 0:  # Moving diagonally
            if walkable((x, y + dy)):
                dirs.append((0, dy))
            if walkable((x + dx, y)):
                dirs.append((dx, 0))
            if walkable((x + dx, y + dy)):
                dirs.append((dx, dy))
            if not walkable((x - dx, y)) and walkable((x - dx, y + dy)):
                dirs.append((-dx, dy))
            if not walkable((x, y - dy)) and walkable((x + dx, y - dy)):
                dirs.append((dx, -dy))
        elif dy == 0:  # Moving horizontally
            if walkable((x + dx, y)):
                dirs.append((dx, 0))
            if not walkable((x, y - 1)) and walkable((x + dx, y - 1)):
                dirs.append((dx, -1))
            if not walkable((x, y + 1)) and walkable((x + dx, y + 1)):
                dirs.append((dx, 1))
        else:  # Moving vertically
            if walkable((x, y + dy)):
                dirs.append((0, dy))
            if not walkable((x - 1, y)) and walkable((x - 1, y + dy)):
                dirs.append((-1, dy))
            if not walkable((x + 1, y)) and walkable((x + 1, y + dy)):
                dirs.append((1, dy))

        return dirs

    def has_forced_neighbor(self, x: int, y: int, d: Direction) -> bool:
        dx, dy = d
        blocked = self.grid.is_block
        walkable = self.grid.walkable

        if dx != 0 and dy != 0:
            return ((blocked((x - dx, y)) and walkable((x - dx, y + dy)))
                    or (blocked((x, y - dy)) and walkable((x + dx, y - dy))))
        if dy == 0:
            return ((blocked((x, y - 1)) and walkable((x + dx, y - 1)))
                    or (blocked((x, y + 1)) and walkable((x + dx, y + 1))))
        return ((blocked((x - 1, y)) and walkable((x - 1, y + dy)))
                or (blocked((x + 1, y)) and walkable((x + 1, y + dy))))

    # -------------------- scanning --------------------

    def jump(self, cell: Cell, d: Direction) -> Optional[Cell]:
        """Scan from ``cell`` along ``d``; return the first jump point, or None at a wall."""
        x, y = cell
        dx, dy = d
        goal = self.goal_node.cell

        while True:
            x += dx
            y += dy
            if self.grid.is_block((x, y)):
                return None
            if (x, y) == goal:
                return (x, y)
            if self.has_forced_neighbor(x, y, d):
                return (x, y)
            if dx != 0 and dy != 0:
                # Straight sub-scans never recurse further
                if self.jump((x, y), (dx, 0)) is not None or self.jump((x, y), (0, dy)) is not None:
                    return (x, y)
