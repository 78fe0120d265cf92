"""Visvalingam-Whyatt line simplification."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import Optional

from orbgeo.geometry import LineString
from orbgeo.simplify.base import Simplifier


def double_triangle_area(ls, i1: int, i2: int, i3: int) -> float:
    """Return twice the area of the triangle made by three points of the line."""
    a, b, c = ls[i1], ls[i2], ls[i3]
    return abs((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0]))


class _Item:
    """A point of the line, linked to its neighbours and placed in the heap."""

    __slots__ = ("area", "point_index", "previous", "next", "index")

    def __init__(self, area: float, point_index: int) -> None:
        self.area = area
        self.point_index = point_index
        self.previous: Optional[_Item] = None
        self.next: Optional[_Item] = None
        self.index = 0


class _MinHeap:
    """Min heap on triangle area that tracks each item's position."""

    def __init__(self) -> None:
        self._items: list[_Item] = []

    def __len__(self) -> int:
        return len(self._items)

    def push(self, item: _Item) -> None:
        item.index = len(self._items)
        self._items.append(item)
        self._up(item.index)

    def pop(self) -> _Item:
        items = self._items
        removed = items[0]
        last = items.pop()
        if items:
            last.index = 0
            items[0] = last
            self._down(0)
        return removed

    def update(self, item: _Item, area: float) -> None:
        smaller = area < item.area
        item.area = area
        if smaller:
            self._up(item.index)
        else:
            self._down(item.index)

    def _up(self, i: int) -> None:
        items = self._items
        obj = items[i]
        while i > 0:
            up = ((i + 1) >> 1) - 1
            parent = items[up]
            if parent.area <= obj.area:
                break
            parent.index = i
            items[i] = parent
            obj.index = up
            items[up] = obj
            i = up

    def _down(self, i: int) -> None:
        items = self._items
        n = len(items)
        obj = items[i]
        while True:
            right = (i + 1) << 1
            left = right - 1
            down = i
            child = items[down]
            if left < n and items[left].area < child.area:
                down = left
                child = items[down]
            if right < n and items[right].area < child.area:
                down = right
                child = items[down]
            if down == i:
                break
            child.index = i
            items[i] = child
            obj.index = down
            items[down] = obj
            i = down


@dataclass
class VisvalingamSimplifier(Simplifier):
    """Removes the points that form the smallest triangles.

    Points are removed while their triangle area is at most ``threshold``
    and more than ``to_keep`` points remain.
    """

    threshold: float
    to_keep: int = 0

    def reduce(self, ls) -> tuple[LineString, list[int]]:
        """Return the reduced line and the indexes of the kept points."""
        n = len(ls)
        if n <= self.to_keep or n < 3:
            return LineString(ls), list(range(n))

        # triangle areas are kept doubled, so double the threshold too
        threshold = self.threshold * 2
        heap = _MinHeap()

        start = _Item(math.inf, 0)
        heap.push(start)

        previous = start
        for i in range(1, n - 1):
            item = _Item(double_triangle_area(ls, i - 1, i, i + 1), i)
            item.previous = previous
            heap.push(item)
            previous.next = item
            previous = item

        end = _Item(math.inf, n - 1)
        end.previous = previous
        previous.next = end
        heap.push(end)

        removed = 0
        while heap:
            current = heap.pop()
            if current.area > threshold or n - removed <= self.to_keep:
                break

            prev_item, next_item = current.previous, current.next
            if prev_item is None or next_item is None:
                break

            prev_item.next = next_item
            next_item.previous = prev_item
            removed += 1

            if prev_item.previous is not None:
                a = double_triangle_area(
                    ls,
                    prev_item.previous.point_index,
                    prev_item.point_index,
                    next_item.point_index,
                )
                heap.update(prev_item, max(a, current.area))

            if next_item.next is not None:
                a = double_triangle_area(
                    ls,
                    prev_item.point_index,
                    next_item.point_index,
                    next_item.next.point_index,
                )
                heap.update(next_item, max(a, current.area))

        indices = []
        node: Optional[_Item] = start
        while node is not None:
            indices.append(node.point_index)
            node = node.next

        return LineString(ls[i] for i in indices), indices


def visvalingam_threshold(threshold: float) -> VisvalingamSimplifier:
    """Simplifier removing triangles whose area is below the threshold."""
    return VisvalingamSimplifier(threshold, 0)


def visvalingam_keep(to_keep: int) -> VisvalingamSimplifier:
    """Simplifier removing minimum-area triangles until ``to_keep`` points remain."""
    return VisvalingamSimplifier(sys.float_info.max, to_keep)