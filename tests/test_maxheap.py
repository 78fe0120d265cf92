import random

import pytest

from orbgeo.quadtree.maxheap import MaxHeap


def test_pops_in_non_increasing_order():
    r = random.Random(22)
    for size in range(1, 100):
        h = MaxHeap()
        for _ in range(size):
            h.push(None, r.random())

        current = h.pop().distance
        popped = 1
        while len(h) > 0:
            nxt = h.pop().distance
            assert nxt <= current
            current = nxt
            popped += 1
        assert popped == size


def test_peek_returns_greatest():
    h = MaxHeap()
    for d in [3.0, 1.0, 7.0, 5.0]:
        h.push(f"p{d}", d)
    top = h.peek()
    assert top.distance == 7.0
    assert top.point == "p7.0"
    assert len(h) == 4


def test_pop_returns_items_descending():
    h = MaxHeap()
    for d in [2.0, 9.0, 4.0, 1.0, 6.0]:
        h.push(d, d)
    assert [h.pop().point for _ in range(5)] == [9.0, 6.0, 4.0, 2.0, 1.0]


def test_empty_heap_raises():
    h = MaxHeap()
    with pytest.raises(IndexError):
        h.pop()
    with pytest.raises(IndexError):
        h.peek()