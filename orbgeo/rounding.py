"""Rounding of geometry coordinates."""

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

DEFAULT_ROUNDING_FACTOR = 10**6


def _round_half_away(x: float) -> float:
    t = float(math.trunc(x))
    if abs(x - t) >= 0.5:
        t += math.copysign(1.0, x)
    return t


def _round_point(p, f: float) -> Point:
    return Point(_round_half_away(p[0] * f) / f, _round_half_away(p[1] * f) / f)


def _round_points(points: list, f: float) -> None:
    points[:] = [_round_point(p, f) for p in points]


def round_geometry(g, factor=None):
    """Round all coordinates to the given factor (default 1e6, 6 places).

    Lists of points are rounded in place and returned; points and bounds
    are returned as new values.
    """
    if g is None:
        return None

    f = float(DEFAULT_ROUNDING_FACTOR if factor is None else factor)

    if isinstance(g, Point):
        return _round_point(g, f)
    if isinstance(g, Bound):
        return Bound(_round_point(g.min, f), _round_point(g.max, f))
    if isinstance(g, (MultiPoint, LineString, Ring)):
        _round_points(g, f)
        return g
    if isinstance(g, (MultiLineString, Polygon)):
        for part in g:
            _round_points(part, f)
        return g
    if isinstance(g, MultiPolygon):
        for polygon in g:
            for ring in polygon:
                _round_points(ring, f)
        return g
    if isinstance(g, Collection):
        g[:] = [round_geometry(item, int(f)) for item in g]
        return g

    raise TypeError(f"geometry type not supported: {type(g).__name__}")