# gridpath/core/distance.py
"""Integer cost model for 8-connected grids.

Costs are scaled by 10 so diagonal moves (10 * sqrt(2)) round to 14 and
every comparison in the open set stays exact.
"""

from typing import List, Tuple

from gridpath.core.types import Cell

Direction = Tuple[int, int]

ORTHOGONAL_COST = 10
DIAGONAL_COST = 14

# Clockwise starting east (y grows downward, row index)
DIRECTIONS: List[Direction] = [
    (1, 0), (1, 1), (0, 1), (-1, 1),
    (-1, 0), (-1, -1), (0, -1), (1, -1),
]


def octile(a: Cell, b: Cell) -> int:
    """Octile distance between two cells; exact cost of an unobstructed route."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    lo, hi = min(dx, dy), max(dx, dy)
    return DIAGONAL_COST * lo + ORTHOGONAL_COST * (hi - lo)


def step_cost(a: Cell, b: Cell) -> int:
    """Cost of a single move between adjacent cells."""
    if a[0] != b[0] and a[1] != b[1]:
        return DIAGONAL_COST
    return ORTHOGONAL_COST


def _sign(v: int) -> int:
    return (v > 0) - (v < 0)


def direction(a: Cell, b: Cell) -> Direction:
    """Unit step pointing from ``a`` toward ``b``."""
    return (_sign(b[0] - a[0]), _sign(b[1] - a[1]))


def is_diagonal(d: Direction) -> bool:
    return d[0] != 0 and d[1] != 0
