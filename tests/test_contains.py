import pytest

from orbgeo.geometry import MultiPolygon, Point, Polygon, Ring
from orbgeo.planar.contains import (
    multi_polygon_contains,
    polygon_contains,
    ring_contains,
)


def _ring():
    return Ring(
        [(0, 0), (0, 1), (1, 1), (1, 0.5), (2, 0.5), (2, 1), (3, 1), (3, 0), (0, 0)]
    )


def _interpolate(a, b, percent):
    return Point(a[0] + percent * (b[0] - a[0]), a[1] + percent * (b[1] - a[1]))


@pytest.mark.parametrize(
    "point, result",
    [
        (Point(1.5, 0.25), True),
        (Point(0.5, 0.75), True),
        (Point(1.5, 0.75), False),
        (Point(2.5, 0.75), True),
        (Point(1.5, 1.0), False),
        (Point(2.5, 1.75), False),
        (Point(2.5, -1.75), False),
        (Point(-2.5, -0.75), False),
        (Point(3.5, 0.75), False),
    ],
)
def test_ring_contains(point, result):
    ring = _ring()
    ring.reverse()
    assert ring_contains(ring, point) is result
    ring.reverse()
    assert ring_contains(ring, point) is result


def test_ring_vertices_are_inside():
    ring = _ring()
    assert all(ring_contains(ring, p) for p in ring)


def test_segment_midpoints_are_inside():
    ring = _ring()
    mids = [_interpolate(b, a, 0.5) for a, b in zip(ring, ring[1:])]
    assert all(ring_contains(ring, m) for m in mids)


def test_colinear_outside_points_are_not_inside():
    ring = _ring()
    for a, b in zip(ring, ring[1:]):
        assert not ring_contains(ring, _interpolate(b, a, 5))
        assert not ring_contains(ring, _interpolate(b, a, -5))


def test_empty_ring_contains_nothing():
    assert ring_contains(Ring(), Point(0, 0)) is False


def test_polygon_contains():
    p = Polygon([[(0, 0), (3, 0), (3, 3), (0, 3), (0, 0)]])
    assert polygon_contains(p, Point(1.5, 1.5))

    p.append(Ring([(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)]))
    assert not polygon_contains(p, Point(1.5, 1.5))

    p[1].reverse()
    assert not polygon_contains(p, Point(1.5, 1.5))
    assert polygon_contains(p, Point(0.5, 0.5))


def test_multi_polygon_contains():
    mp = MultiPolygon([[[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]]])
    assert multi_polygon_contains(mp, Point(0.5, 0.5))
    assert not multi_polygon_contains(mp, Point(1.5, 1.5))

    mp.append(Polygon([[(2, 0), (3, 0), (3, 1), (2, 1), (2, 0)]]))
    assert multi_polygon_contains(mp, Point(2.5, 0.5))
    assert not multi_polygon_contains(mp, Point(1.5, 0.5))


def test_empty_multi_polygon():
    assert multi_polygon_contains(MultiPolygon(), Point(0, 0)) is False