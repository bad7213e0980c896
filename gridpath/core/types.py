# gridpath/core/types.py
#!/usr/bin/env python3
import sys
from dataclasses import dataclass, field
from typing import List, Tuple, Optional, Dict, Any, Iterator

Cell = Tuple[int, int]  # (col, row)

BLOCK = 1

# g of a node no run has reached yet
UNREACHED = sys.maxsize

# Observer event kinds
OPENED = "opened"
UPDATED = "updated"
CLOSED = "closed"

# 8-connected neighbour order: row above, same row, row below
_NEIGHBOR_OFFSETS = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[int]]             # [row][col]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("grid must be at least 1x1")
        if len(self.cells) != self.height or any(len(r) != self.width for r in self.cells):
            raise ValueError("cells size mismatch")

    @classmethod
    def empty(cls, width: int, height: int) -> "Grid":
        return cls(width, height, [[0] * width for _ in range(height)])

    @property
    def size(self) -> int:
        return self.width * self.height

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.width and 0 <= y < self.height

    def is_block(self, c: Cell) -> bool:
        """Out-of-bounds cells count as blocked."""
        if not self.in_bounds(c):
            return True
        x, y = c
        return self.cells[y][x] == BLOCK

    def walkable(self, c: Cell) -> bool:
        return not self.is_block(c)

    def neighbors8(self, c: Cell) -> Iterator[Cell]:
        x, y = c
        for dx, dy in _NEIGHBOR_OFFSETS:
            n = (x + dx, y + dy)
            if self.walkable(n):
                yield n


@dataclass(eq=False)
class SearchNode:
    """Scratch record for one cell, owned by a single search run."""
    x: int
    y: int
    cost_so_far: int = UNREACHED        # g
    heuristic: int = 0                  # h
    parent: Optional["SearchNode"] = None
    heap_slot: int = -1

    @property
    def cell(self) -> Cell:
        return (self.x, self.y)

    @property
    def total_cost(self) -> int:
        return self.cost_so_far + self.heuristic

    def is_smaller_than(self, other: "SearchNode") -> bool:
        if self.total_cost != other.total_cost:
            return self.total_cost < other.total_cost
        return self.heuristic < other.heuristic


@dataclass
class StepResult:
    status: str                   # "running" | "done" | "no_path"
    opened: List[Cell] = field(default_factory=list)
    closed: List[Cell] = field(default_factory=list)
    current: Optional[Cell] = None
    path: Optional[List[Cell]] = None   # start -> goal once done
    metrics: Dict[str, Any] = field(default_factory=dict)
