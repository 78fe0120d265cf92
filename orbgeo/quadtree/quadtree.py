"""A point quadtree using rectangular partitions."""

from __future__ import annotations

import math
import sys
from typing import Any, Callable, Optional

from orbgeo.geometry import Bound, Point
from orbgeo.planar.distance import distance_squared
from orbgeo.quadtree.maxheap import MaxHeap

FilterFunc = Callable[[Any], bool]

_MAX_FLOAT = sys.float_info.max
_ORIGIN = Point(0.0, 0.0)


class PointOutsideOfBoundsError(ValueError):
    """Raised when adding a point outside the bound of the tree."""


class _Node:
    __slots__ = ("value", "children")

    def __init__(self, value=None) -> None:
        self.value = value
        self.children: list[Optional[_Node]] = [None, None, None, None]

    def is_leaf(self) -> bool:
        return all(child is None for child in self.children)


def _child_index(cx: float, cy: float, point) -> int:
    i = 2 if point[1] <= cy else 0
    if point[0] >= cx:
        i += 1
    return i


def _square_around(center, d: float) -> Bound:
    return Bound(
        Point(center[0] - d, center[1] - d),
        Point(center[0] + d, center[1] + d),
    )


class _FindVisitor:
    def __init__(self, point, filter_func: Optional[FilterFunc], bound: Bound) -> None:
        self.point = point
        self.filter = filter_func
        self.bound = bound
        self.closest: Optional[_Node] = None
        self.min_dist_squared = _MAX_FLOAT

    def visit(self, node: _Node) -> None:
        if self.filter is not None and not self.filter(node.value):
            return
        d = distance_squared(node.value.point(), self.point)
        if d < self.min_dist_squared:
            self.min_dist_squared = d
            self.closest = node
            self.bound = _square_around(self.point, math.sqrt(d))


class _NearestVisitor:
    def __init__(
        self,
        point,
        filter_func: Optional[FilterFunc],
        k: int,
        bound: Bound,
        max_dist_squared: float,
    ) -> None:
        self.point = point
        self.filter = filter_func
        self.k = k
        self.heap = MaxHeap()
        self.bound = bound
        self.max_dist_squared = max_dist_squared

    def visit(self, node: _Node) -> None:
        if self.filter is not None and not self.filter(node.value):
            return
        d = distance_squared(node.value.point(), self.point)
        if d < self.max_dist_squared:
            self.heap.push(node.value, d)
            if len(self.heap) > self.k:
                self.heap.pop()
                top = self.heap.peek()
                self.max_dist_squared = top.distance
                self.bound = _square_around(self.point, math.sqrt(top.distance))


class _InBoundVisitor:
    point = _ORIGIN

    def __init__(self, bound: Bound, filter_func: Optional[FilterFunc]) -> None:
        self.bound = bound
        self.filter = filter_func
        self.pointers: list = []

    def visit(self, node: _Node) -> None:
        if self.filter is not None and not self.filter(node.value):
            return
        if self.bound.contains(node.value.point()):
            self.pointers.append(node.value)


def _remove_node(node: _Node) -> bool:
    """Pull a child value up into the emptied node.

    Returns True if the node has no children and may be dropped.
    """
    for i, child in enumerate(node.children):
        if child is not None:
            break
    else:
        return True

    node.value = child.value
    child.value = None
    if _remove_node(child):
        node.children[i] = None
    return False


class Quadtree:
    """Two-dimensional recursive spatial subdivision of pointers.

    A pointer is any object with a ``point()`` method returning a point.
    """

    def __init__(self, bound: Bound) -> None:
        self._bound = bound
        self._root: Optional[_Node] = None

    @property
    def bound(self) -> Bound:
        """The bound given when the tree was created."""
        return self._bound

    def _extent(self) -> tuple[float, float, float, float]:
        b = self._bound
        return b.min.x, b.max.x, b.min.y, b.max.y

    def add(self, p) -> None:
        """Insert a pointer; it must lie within the tree's bound."""
        if p is None:
            return

        point = p.point()
        if not self._bound.contains(point):
            raise PointOutsideOfBoundsError(
                f"quadtree: point outside of bounds: {tuple(point)}"
            )

        if self._root is None:
            self._root = _Node(p)
            return
        if self._root.value is None:
            self._root.value = p
            return

        node = self._root
        left, right, bottom, top = self._extent()
        while True:
            cy = (bottom + top) / 2.0
            if point[1] <= cy:
                top = cy
                i = 2
            else:
                bottom = cy
                i = 0

            cx = (left + right) / 2.0
            if point[0] >= cx:
                left = cx
                i += 1
            else:
                right = cx

            child = node.children[i]
            if child is None:
                node.children[i] = _Node(p)
                return
            if child.value is None:
                child.value = p
                return
            node = child

    def _walk(self, visitor, node: _Node, left, right, bottom, top) -> None:
        b = visitor.bound
        if left > b.max.x or right < b.min.x or bottom > b.max.y or top < b.min.y:
            return

        if node.value is not None:
            visitor.visit(node)

        if node.is_leaf():
            return

        cx = (left + right) / 2.0
        cy = (bottom + top) / 2.0
        quadrants = (
            (left, cx, cy, top),
            (cx, right, cy, top),
            (left, cx, bottom, cy),
            (cx, right, bottom, cy),
        )

        start = _child_index(cx, cy, visitor.point)
        for j in range(start, start + 4):
            k = j % 4
            child = node.children[k]
            if child is not None:
                self._walk(visitor, child, *quadrants[k])

    def _visit(self, visitor) -> None:
        self._walk(visitor, self._root, *self._extent())

    def remove(self, p, eq: Optional[FilterFunc] = None) -> bool:
        """Remove the pointer; matches on its point unless ``eq`` is given.

        Returns True if a pointer was found and removed.
        """
        if self._root is None:
            return False

        target = p.point()
        if eq is None:

            def eq(pointer) -> bool:
                q = pointer.point()
                return q[0] == target[0] and q[1] == target[1]

        visitor = _FindVisitor(target, eq, self._bound)
        self._visit(visitor)

        if visitor.closest is None:
            return False

        visitor.closest.value = None
        # An emptied leaf stays in place; later adds may reuse it.
        _remove_node(visitor.closest)
        return True

    def find(self, p):
        """Return the closest pointer, or None for an empty tree."""
        return self.matching(p, None)

    def matching(self, p, f: Optional[FilterFunc] = None):
        """Return the closest pointer accepted by ``f``, or None."""
        if self._root is None:
            return None
        visitor = _FindVisitor(p, f, self._bound)
        self._visit(visitor)
        if visitor.closest is None:
            return None
        return visitor.closest.value

    def k_nearest(self, p, k: int, max_distance: Optional[float] = None) -> list:
        """Return up to k closest pointers, nearest first."""
        return self.k_nearest_matching(p, k, None, max_distance)

    def k_nearest_matching(
        self,
        p,
        k: int,
        f: Optional[FilterFunc] = None,
        max_distance: Optional[float] = None,
    ) -> list:
        """Return up to k closest pointers accepted by ``f``, nearest first.

        Only pointers closer than ``max_distance``, if given, are considered.
        """
        if self._root is None:
            return []

        max_dist_squared = (
            _MAX_FLOAT if max_distance is None else max_distance * max_distance
        )
        visitor = _NearestVisitor(p, f, k, self._bound, max_dist_squared)
        self._visit(visitor)

        furthest_first = [visitor.heap.pop().point for _ in range(len(visitor.heap))]
        furthest_first.reverse()
        return furthest_first

    def in_bound(self, b: Bound) -> list:
        """Return all pointers within the bound."""
        return self.in_bound_matching(b, None)

    def in_bound_matching(self, b: Bound, f: Optional[FilterFunc] = None) -> list:
        """Return all pointers within the bound that are accepted by ``f``."""
        if self._root is None:
            return []
        visitor = _InBoundVisitor(b, f)
        self._visit(visitor)
        return visitor.pointers

    def node_count(self) -> int:
        """Return the number of nodes in the tree, empty ones included."""
        if self._root is None:
            return 0
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(c for c in node.children if c is not None)
        return count