"""Spherical Mercator and WGS84 projections and helpers to apply them."""

from __future__ import annotations

import math
from typing import Callable

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

EARTH_RADIUS = 6378137.0
_EARTH_RADIUS_PI = EARTH_RADIUS * math.pi

Projection = Callable[[Point], Point]


def deg2rad(d: float) -> float:
    """Convert degrees to radians."""
    return d * math.pi / 180.0


def rad2deg(r: float) -> float:
    """Convert radians to degrees."""
    return 180.0 * r / math.pi


def mercator_to_wgs84(p) -> Point:
    """Project a spherical pseudo-Mercator point to lon/lat."""
    return Point(
        180.0 * p[0] / _EARTH_RADIUS_PI,
        180.0 / math.pi * (2 * math.atan(math.exp(p[1] / EARTH_RADIUS)) - math.pi / 2.0),
    )


def wgs84_to_mercator(p) -> Point:
    """Project a lon/lat point to spherical pseudo-Mercator, as used by web maps."""
    y = math.log(math.tan((90.0 + p[1]) * math.pi / 360.0)) * EARTH_RADIUS
    return Point(
        _EARTH_RADIUS_PI / 180.0 * p[0],
        max(-_EARTH_RADIUS_PI, min(y, _EARTH_RADIUS_PI)),
    )


def mercator_scale_factor(p) -> float:
    """Return the Mercator scaling factor at the point's latitude."""
    lat = p[1]
    if lat < -90.0 or lat > 90.0:
        raise ValueError(f"latitude out of range, given {lat:f}")
    return 1.0 / math.cos(lat / 180.0 * math.pi)


def project_geometry(g, proj: Projection):
    """Project any geometry; lists are projected in place and returned."""
    if g is None:
        return None
    if isinstance(g, Point):
        return project_point(g, proj)
    if isinstance(g, Bound):
        return project_bound(g, proj)
    if isinstance(g, MultiPoint):
        return project_multi_point(g, proj)
    if isinstance(g, LineString):
        return project_line_string(g, proj)
    if isinstance(g, Ring):
        return project_ring(g, proj)
    if isinstance(g, MultiLineString):
        return project_multi_line_string(g, proj)
    if isinstance(g, Polygon):
        return project_polygon(g, proj)
    if isinstance(g, MultiPolygon):
        return project_multi_polygon(g, proj)
    if isinstance(g, Collection):
        return project_collection(g, proj)
    raise TypeError(f"geometry type not supported: {type(g).__name__}")


def project_point(p, proj: Projection) -> Point:
    """Project a single point."""
    return proj(p)


def _project_points(points, proj: Projection):
    points[:] = [proj(p) for p in points]
    return points


def project_multi_point(mp: MultiPoint, proj: Projection) -> MultiPoint:
    """Project every point of the multi point in place."""
    return _project_points(mp, proj)


def project_line_string(ls: LineString, proj: Projection) -> LineString:
    """Project every point of the line string in place."""
    return _project_points(ls, proj)


def project_ring(r: Ring, proj: Projection) -> Ring:
    """Project every point of the ring in place."""
    return _project_points(r, proj)


def project_multi_line_string(mls: MultiLineString, proj: Projection) -> MultiLineString:
    """Project every line string in place."""
    for ls in mls:
        project_line_string(ls, proj)
    return mls


def project_polygon(p: Polygon, proj: Projection) -> Polygon:
    """Project every ring of the polygon in place."""
    for r in p:
        project_ring(r, proj)
    return p


def project_multi_polygon(mp: MultiPolygon, proj: Projection) -> MultiPolygon:
    """Project every polygon in place."""
    for p in mp:
        project_polygon(p, proj)
    return mp


def project_collection(c: Collection, proj: Projection) -> Collection:
    """Project every member of the collection in place."""
    c[:] = [project_geometry(g, proj) for g in c]
    return c


def project_bound(bound: Bound, proj: Projection) -> Bound:
    """Project the corners of the bound and return the bound around them."""
    low = proj(bound.min)
    return Bound(low, low).extend(proj(bound.max))