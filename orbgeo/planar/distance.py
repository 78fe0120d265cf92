"""Euclidean distances between points and from points to geometries."""

from __future__ import annotations

import math

from orbgeo.geometry import (
    Bound,
    Collection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    Ring,
)


def distance(p1, p2) -> float:
    """Return the distance between two points in the 2d plane."""
    d0 = p1[0] - p2[0]
    d1 = p1[1] - p2[1]
    return math.sqrt(d0 * d0 + d1 * d1)


def distance_squared(p1, p2) -> float:
    """Return the squared distance between two points in the 2d plane."""
    d0 = p1[0] - p2[0]
    d1 = p1[1] - p2[1]
    return d0 * d0 + d1 * d1


def distance_from_segment(a, b, point) -> float:
    """Return the point's distance from the segment [a, b]."""
    return math.sqrt(distance_from_segment_squared(a, b, point))


def distance_from_segment_squared(a, b, point) -> float:
    """Return the point's squared distance from the segment [a, b]."""
    x, y = a[0], a[1]
    dx = b[0] - x
    dy = b[1] - y

    if dx != 0 or dy != 0:
        t = ((point[0] - x) * dx + (point[1] - y) * dy) / (dx * dx + dy * dy)
        if t > 1:
            x, y = b[0], b[1]
        elif t > 0:
            x += dx * t
            y += dy * t

    dx = point[0] - x
    dy = point[1] - y
    return dx * dx + dy * dy


def distance_from(g, p) -> float:
    """Return the distance from the boundary of the geometry."""
    return distance_from_with_index(g, p)[0]


def _closest(items, p, measure) -> tuple[float, int]:
    best, index = math.inf, -1
    for i, item in enumerate(items):
        d = measure(item, p)[0]
        if d < best:
            best, index = d, i
    return best, index


def distance_from_with_index(g, p) -> tuple[float, int]:
    """Return the minimum distance from the geometry's boundary and the
    index of the sub-geometry that was the match."""
    if g is None:
        return math.inf, -1
    if isinstance(g, Point):
        return distance(g, p), 0
    if isinstance(g, Bound):
        return distance_from_with_index(g.to_ring(), p)
    if isinstance(g, MultiPoint):
        return _multi_point_distance_from(g, p)
    if isinstance(g, (LineString, Ring)):
        return _line_string_distance_from(g, p)
    if isinstance(g, MultiLineString):
        return _closest(g, p, _line_string_distance_from)
    if isinstance(g, Polygon):
        return _polygon_distance_from(g, p)
    if isinstance(g, MultiPolygon):
        return _closest(g, p, _polygon_distance_from)
    if isinstance(g, Collection):
        return _closest(g, p, distance_from_with_index)
    raise TypeError(f"geometry type not supported: {type(g).__name__}")


def _multi_point_distance_from(mp, p) -> tuple[float, int]:
    best, index = math.inf, -1
    for i, q in enumerate(mp):
        d = distance_squared(q, p)
        if d < best:
            best, index = d, i
    return math.sqrt(best), index


def _line_string_distance_from(ls, p) -> tuple[float, int]:
    best, index = math.inf, -1
    for i, (a, b) in enumerate(zip(ls, ls[1:])):
        d = distance_from_segment_squared(a, b, p)
        if d < best:
            best, index = d, i
    return math.sqrt(best), index


def _polygon_distance_from(poly, point) -> tuple[float, int]:
    # The index reported is the segment index within the matching ring.
    if not poly:
        return math.inf, -1
    best, index = _line_string_distance_from(poly[0], point)
    for ring in poly[1:]:
        d, i = _line_string_distance_from(ring, point)
        if d < best:
            best, index = d, i
    return best, index