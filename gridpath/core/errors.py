# gridpath/core/errors.py
"""Errors raised by the pathfinding engines.

A search that simply finds no route is not an error: ``find_path`` returns
``None`` and the final step reports ``"no_path"``.
"""

from gridpath.core.types import Cell


class PathfindingError(Exception):
    """Base class for every error raised by gridpath."""


class OutOfBoundsError(PathfindingError):
    def __init__(self, cell: Cell, width: int, height: int):
        super().__init__(f"cell {cell} is outside the {width}x{height} grid")
        self.cell = cell


class UnwalkableEndpointError(PathfindingError):
    def __init__(self, cell: Cell):
        super().__init__(f"endpoint {cell} is not walkable")
        self.cell = cell


class PathTooLongError(PathfindingError):
    """Parent chain longer than the cap, or broken; the search state is corrupt."""


class EmptyHeapError(PathfindingError):
    """extract_min() on an empty heap. Check the size before popping."""
