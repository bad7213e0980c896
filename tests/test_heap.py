import random

import pytest

from gridpath.core.errors import EmptyHeapError
from gridpath.core.heap import NodeHeap
from gridpath.core.types import SearchNode


def _node(g: int, h: int = 0, x: int = 0, y: int = 0) -> SearchNode:
    n = SearchNode(x, y)
    n.cost_so_far = g
    n.heuristic = h
    return n


def _key(n: SearchNode):
    return (n.total_cost, n.heuristic)


def _assert_heap_property(heap: NodeHeap) -> None:
    items = heap.nodes()
    for i, n in enumerate(items):
        assert n.heap_slot == i
        if i:
            assert _key(items[(i - 1) // 2]) <= _key(n)


def test_extracts_in_cost_order():
    heap = NodeHeap(8)
    for g in [50, 10, 30, 20, 40]:
        heap.insert(_node(g))

    assert [heap.extract_min().cost_so_far for _ in range(5)] == [10, 20, 30, 40, 50]
    assert len(heap) == 0
    assert heap.peek() is None


def test_equal_total_cost_prefers_lower_heuristic():
    heap = NodeHeap(4)
    far = _node(20, 20)
    near = _node(30, 10)
    heap.insert(far)
    heap.insert(near)

    assert heap.extract_min() is near
    assert heap.extract_min() is far


def test_extract_from_empty_heap_raises():
    with pytest.raises(EmptyHeapError):
        NodeHeap(2).extract_min()


def test_insert_past_capacity_raises():
    heap = NodeHeap(1)
    assert heap.capacity == 1
    heap.insert(_node(1))
    with pytest.raises(IndexError):
        heap.insert(_node(2))


def test_contains_follows_slot():
    heap = NodeHeap(4)
    a, b = _node(10), _node(20)
    heap.insert(a)

    assert heap.contains(a)
    assert not heap.contains(b)

    assert heap.extract_min() is a
    assert a.heap_slot == -1
    assert not heap.contains(a)


def test_contains_rejects_node_from_another_heap():
    heap = NodeHeap(2)
    other = NodeHeap(2)
    mine, theirs = _node(5), _node(6)
    heap.insert(mine)
    other.insert(theirs)

    # Both sit in slot 0 of their own heap
    assert theirs.heap_slot == 0
    assert not heap.contains(theirs)


def test_decrease_key_moves_node_to_root():
    heap = NodeHeap(8)
    nodes = [_node(g) for g in (10, 20, 30, 40)]
    for n in nodes:
        heap.insert(n)

    nodes[3].cost_so_far = 5
    heap.decrease_key(nodes[3])

    assert heap.peek() is nodes[3]
    assert nodes[3].heap_slot == 0
    _assert_heap_property(heap)


def test_sift_down_prefers_left_child_on_ties():
    heap = NodeHeap(4)
    root, left, right, last = _node(1), _node(5), _node(5), _node(9)
    for n in (root, left, right, last):
        heap.insert(n)

    assert heap.extract_min() is root
    assert heap.peek() is left
    assert right.heap_slot == 2
    _assert_heap_property(heap)


def test_clear_resets_slots():
    heap = NodeHeap(4)
    nodes = [_node(g) for g in (3, 1, 2)]
    for n in nodes:
        heap.insert(n)

    heap.clear()

    assert len(heap) == 0
    assert all(n.heap_slot == -1 for n in nodes)


def test_randomized_operations_keep_invariants():
    rng = random.Random(1234)
    pool = [SearchNode(i, 0) for i in range(60)]
    heap = NodeHeap(len(pool))
    inside: list = []

    for _ in range(3000):
        outside = [n for n in pool if n not in inside]
        op = rng.random()

        if op < 0.4 and outside:
            n = rng.choice(outside)
            n.cost_so_far = rng.randint(0, 500)
            n.heuristic = rng.randint(0, 100)
            heap.insert(n)
            inside.append(n)
        elif op < 0.7 and inside:
            expected = min(_key(n) for n in inside)
            got = heap.extract_min()
            assert _key(got) == expected
            inside.remove(got)
        elif inside:
            n = rng.choice(inside)
            n.cost_so_far -= rng.randint(1, 50)
            heap.decrease_key(n)

        _assert_heap_property(heap)
        assert len(heap) == len(inside)
        for n in pool:
            assert heap.contains(n) == (n in inside)
