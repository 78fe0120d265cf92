"""A bounded-use max heap keyed on distance, used by k-nearest searches."""

from __future__ import annotations

from typing import Any, NamedTuple


class HeapItem(NamedTuple):
    """A pointer and its (squared) distance from the query point."""

    point: Any
    distance: float


class MaxHeap:
    """Keeps the item furthest from the query point on top.

    When a closer item is found the top one can be popped, leaving the
    k closest seen so far.
    """

    def __init__(self) -> None:
        self._items: list[HeapItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, point, distance: float) -> None:
        """Add an item and restore the heap order."""
        items = self._items
        item = HeapItem(point, distance)
        items.append(item)

        i = len(items) - 1
        while i > 0:
            up = ((i + 1) >> 1) - 1
            parent = items[up]
            if distance < parent.distance:
                break
            items[i] = parent
            items[up] = item
            i = up

    def peek(self) -> HeapItem:
        """Return the item with the greatest distance without removing it."""
        if not self._items:
            raise IndexError("peek from empty heap")
        return self._items[0]

    def pop(self) -> HeapItem:
        """Remove and return the item with the greatest distance."""
        items = self._items
        if not items:
            raise IndexError("pop from empty heap")

        top = items[0]
        last = items.pop()
        if not items:
            return top

        items[0] = last
        n = len(items)
        i = 0
        while True:
            right = (i + 1) << 1
            left = right - 1

            child_index = i
            child = items[child_index]
            if left < n and child.distance < items[left].distance:
                child_index = left
                child = items[left]
            if right < n and child.distance < items[right].distance:
                child_index = right
                child = items[right]

            if child_index == i:
                break

            items[i] = child
            items[child_index] = last
            i = child_index

        return top