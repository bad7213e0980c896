# gridpath/core/maps.py
"""Loading grids from JSON map files and ASCII sketches."""

import json
from pathlib import Path
from typing import List, Tuple, Union

from gridpath.core.types import BLOCK, Cell, Grid

MapSpec = Tuple[Grid, Cell, Cell]  # (grid, start, goal)

OPEN_CHARS = ".SG"
BLOCK_CHARS = "#"


def _check_endpoint(name: str, c: Cell, width: int, height: int) -> None:
    x, y = c
    if not (0 <= x < width and 0 <= y < height):
        raise ValueError(f"{name} out of bounds")


def load_map(path: Union[str, Path]) -> MapSpec:
    """Read ``{"width", "height", "start", "goal", "cells"}`` JSON; cells are [row][col], 1 = blocked."""
    with open(path, "r") as f:
        data = json.load(f)
    width  = int(data["width"])
    height = int(data["height"])
    start  = tuple(data["start"])
    goal   = tuple(data["goal"])
    cells  = [[int(v) for v in row] for row in data["cells"]]
    grid = Grid(width, height, cells)
    _check_endpoint("start", start, width, height)
    _check_endpoint("goal", goal, width, height)
    return grid, start, goal


def parse_ascii(text: str) -> MapSpec:
    """Build a grid from rows of ``.`` (open), ``#`` (blocked), ``S`` (start) and ``G`` (goal)."""
    rows = [line.strip() for line in text.strip().splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty map")

    start = goal = None
    cells: List[List[int]] = []
    for y, line in enumerate(rows):
        row: List[int] = []
        for x, ch in enumerate(line):
            if ch in BLOCK_CHARS:
                row.append(BLOCK)
            elif ch in OPEN_CHARS:
                row.append(0)
            else:
                raise ValueError(f"unknown map character {ch!r} at {(x, y)}")
            if ch == "S":
                start = (x, y)
            elif ch == "G":
                goal = (x, y)
        cells.append(row)

    if start is None or goal is None:
        raise ValueError("map needs both an S and a G")
    return Grid(len(rows[0]), len(rows), cells), start, goal
