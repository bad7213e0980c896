# gridpath/core/heap.py
"""
Indexed binary min-heap over SearchNode.

Each node remembers its slot (``heap_slot``), which gives O(1) membership
tests and lets a node be re-prioritized in place after its cost drops.

Ordering: lower total_cost first, then lower heuristic. The heuristic
tie-break pulls A*/JPS toward the goal when costs tie, so it decides which
of several equal-cost paths comes back.
"""

from typing import List, Optional

from gridpath.core.errors import EmptyHeapError
from gridpath.core.types import SearchNode


class NodeHeap:
    def __init__(self, capacity: int):
        # At most one entry per grid cell is ever open at once
        self._items: List[Optional[SearchNode]] = [None] * capacity
        self._count = 0

    def __len__(self) -> int:
        return self._count

    @property
    def capacity(self) -> int:
        return len(self._items)

    def insert(self, node: SearchNode) -> None:
        if self._count >= self.capacity:
            raise IndexError("heap is full")
        node.heap_slot = self._count
        self._items[self._count] = node
        self._count += 1
        self._sift_up(node)

    def extract_min(self) -> SearchNode:
        if self._count == 0:
            raise EmptyHeapError("extract_min() on an empty heap")
        first = self._items[0]
        self._count -= 1
        last = self._items[self._count]
        self._items[self._count] = None
        if self._count > 0:
            self._items[0] = last
            last.heap_slot = 0
            self._sift_down(last)
        first.heap_slot = -1
        return first

    def peek(self) -> Optional[SearchNode]:
        return self._items[0] if self._count else None

    def decrease_key(self, node: SearchNode) -> None:
        """Restore order after ``node``'s cost was lowered. Never sifts down."""
        self._sift_up(node)

    def contains(self, node: SearchNode) -> bool:
        slot = node.heap_slot
        return 0 <= slot < self._count and self._items[slot] is node

    def clear(self) -> None:
        for i in range(self._count):
            self._items[i].heap_slot = -1
            self._items[i] = None
        self._count = 0

    def nodes(self) -> List[SearchNode]:
        """Current entries in slot order."""
        return list(self._items[:self._count])

    # -------------------- internals --------------------

    def _sift_up(self, node: SearchNode) -> None:
        while node.heap_slot > 0:
            parent = self._items[(node.heap_slot - 1) // 2]
            if not node.is_smaller_than(parent):
                break
            self._swap(node, parent)

    def _sift_down(self, node: SearchNode) -> None:
        while True:
            left = node.heap_slot * 2 + 1
            right = left + 1
            smallest = node.heap_slot

            if left < self._count and self._items[left].is_smaller_than(self._items[smallest]):
                smallest = left
            if right < self._count and self._items[right].is_smaller_than(self._items[smallest]):
                smallest = right

            if smallest == node.heap_slot:
                return
            self._swap(node, self._items[smallest])

    def _swap(self, a: SearchNode, b: SearchNode) -> None:
        self._items[a.heap_slot] = b
        self._items[b.heap_slot] = a
        a.heap_slot, b.heap_slot = b.heap_slot, a.heap_slot
