"""Area and centroid of geometries in the 2d plane."""

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
from orbgeo.planar.distance import distance

_ORIGIN = Point(0.0, 0.0)


def area(g) -> float:
    """Return the area of the geometry in the 2d plane."""
    return centroid_area(g)[1]


def centroid_area(g) -> tuple[Point, float]:
    """Return the centroid and the area of the geometry.

    Polygon area is always >= 0; a ring's area is negative when it is
    wound clockwise.
    """
    if g is None:
        return _ORIGIN, 0.0
    if isinstance(g, Point):
        return _multi_point_centroid([g]), 0.0
    if isinstance(g, Bound):
        return centroid_area(g.to_ring())
    if isinstance(g, MultiPoint):
        return _multi_point_centroid(g), 0.0
    if isinstance(g, LineString):
        return _multi_line_string_centroid([g]), 0.0
    if isinstance(g, MultiLineString):
        return _multi_line_string_centroid(g), 0.0
    if isinstance(g, Ring):
        return _ring_centroid_area(g)
    if isinstance(g, Polygon):
        return _polygon_centroid_area(g)
    if isinstance(g, MultiPolygon):
        return _weighted(_polygon_centroid_area(p) for p in g)
    if isinstance(g, Collection):
        top = max((item.dimensions() for item in g), default=0)
        top = max(top, 0)
        return _weighted(
            centroid_area(item) for item in g if item.dimensions() == top
        )
    raise TypeError(f"geometry type not supported: {type(g).__name__}")


def _multi_point_centroid(points) -> Point:
    if not points:
        return _ORIGIN
    x = y = 0.0
    for p in points:
        x += p[0]
        y += p[1]
    n = float(len(points))
    return Point(x / n, y / n)


def _multi_line_string_centroid(lines) -> Point:
    if not lines:
        return _ORIGIN

    x = y = 0.0
    total = 0.0
    valid = 0
    for ls in lines:
        c, d = _line_string_centroid_dist(ls)
        if d == math.inf:
            continue
        total += d
        valid += 1
        if d == 0:
            d = 1.0
        x += c[0] * d
        y += c[1] * d

    if valid == 0:
        return _ORIGIN
    if total == math.inf or total == 0.0:
        return Point(x / valid, y / valid)
    return Point(x / total, y / total)


def _line_string_centroid_dist(ls) -> tuple[Point, float]:
    if not ls:
        return _ORIGIN, math.inf

    ox, oy = ls[0]
    x = y = 0.0
    total = 0.0
    for a, b in zip(ls, ls[1:]):
        p1 = Point(a[0] - ox, a[1] - oy)
        p2 = Point(b[0] - ox, b[1] - oy)
        d = distance(p1, p2)
        x += (p1[0] + p2[0]) / 2.0 * d
        y += (p1[1] + p2[1]) / 2.0 * d
        total += d

    if total == 0:
        return Point(*ls[0]), 0.0

    x /= total
    y /= total
    return Point(x + ox, y + oy), total


def _ring_centroid_area(r) -> tuple[Point, float]:
    if not r:
        return _ORIGIN, 0.0

    ox, oy = r[0]
    cx = cy = 0.0
    total = 0.0
    for a, b in zip(r[1:-1], r[2:]):
        cross = (a[0] - ox) * (b[1] - oy) - (b[0] - ox) * (a[1] - oy)
        total += cross
        cx += (a[0] + b[0] - 2 * ox) * cross
        cy += (a[1] + b[1] - 2 * oy) * cross

    if total == 0:
        return Point(*r[0]), 0.0

    total /= 2
    cx /= 6 * total
    cy /= 6 * total
    return Point(cx + ox, cy + oy), total


def _polygon_centroid_area(poly) -> tuple[Point, float]:
    if not poly:
        return _ORIGIN, 0.0

    centroid, outer = _ring_centroid_area(poly[0])
    outer = abs(outer)
    if len(poly) == 1:
        if outer == 0:
            return _line_string_centroid_dist(poly[0])[0], 0.0
        return centroid, outer

    hole_area = 0.0
    hx = hy = 0.0
    for ring in poly[1:]:
        hc, ha = _ring_centroid_area(ring)
        ha = abs(ha)
        hole_area += ha
        hx += hc[0] * ha
        hy += hc[1] * ha

    total = outer - hole_area
    if total == 0:
        return _line_string_centroid_dist(poly[0])[0], 0.0

    return (
        Point(
            (outer * centroid[0] - hx) / total,
            (outer * centroid[1] - hy) / total,
        ),
        total,
    )


def _weighted(parts) -> tuple[Point, float]:
    x = y = 0.0
    total = 0.0
    for c, a in parts:
        x += c[0] * a
        y += c[1] * a
        total += a
    if total == 0:
        return _ORIGIN, 0.0
    return Point(x / total, y / total), total