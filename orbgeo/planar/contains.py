"""Point in ring/polygon tests in the 2d plane."""

from __future__ import annotations

import math


def ring_contains(r, point) -> bool:
    """True if the point is inside the ring; the boundary counts as in."""
    if not r.bound().contains(point):
        return False

    inside, on = _ray_intersect(point, r[0], r[-1])
    if on:
        return True

    for a, b in zip(r, r[1:]):
        crosses, on = _ray_intersect(point, a, b)
        if on:
            return True
        if crosses:
            inside = not inside

    return inside


def polygon_contains(p, point) -> bool:
    """True if the point is in the outer ring and not in any hole."""
    if not ring_contains(p[0], point):
        return False
    return not any(ring_contains(hole, point) for hole in p[1:])


def multi_polygon_contains(mp, point) -> bool:
    """True if the point is within any of the polygons."""
    return any(polygon_contains(p, point) for p in mp)


def _ray_intersect(p, s, e) -> tuple[bool, bool]:
    """Return (intersects, on_segment) for a ray cast from p."""
    if s[0] > e[0]:
        s, e = e, s
    px, py = p[0], p[1]
    sx, sy = s[0], s[1]
    ex, ey = e[0], e[1]

    if px == sx:
        if py == sy:
            return False, True
        if sx == ex:
            if sy > ey and sy >= py >= ey:
                return False, True
            if ey > sy and ey >= py >= sy:
                return False, True
        px = math.nextafter(px, math.inf)
    elif px == ex:
        if py == ey:
            return False, True
        px = math.nextafter(px, math.inf)

    if px < sx or px > ex:
        return False, False

    if sy > ey:
        if py > sy:
            return False, False
        if py < ey:
            return True, False
    else:
        if py > ey:
            return False, False
        if py < sy:
            return True, False

    rs = (py - sy) / (px - sx)
    ds = (ey - sy) / (ex - sx)
    if rs == ds:
        return False, True
    return rs <= ds, False