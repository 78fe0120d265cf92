import math

import pytest

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
from orbgeo.planar.distance import (
    distance,
    distance_from,
    distance_from_segment,
    distance_from_segment_squared,
    distance_from_with_index,
    distance_squared,
)

EPSILON = 1e-6


def test_distance():
    assert distance(Point(0, 0), Point(3, 4)) == 5
    assert distance(Point(3, 4), Point(0, 0)) == 5


def test_distance_squared():
    assert distance_squared(Point(0, 0), Point(3, 4)) == 25


@pytest.mark.parametrize(
    "point, result",
    [
        (Point(1, 5), 1),
        (Point(0, 2), 0),
        (Point(0, -5), 5),
        (Point(0, 13), 3),
        (Point(3, 4), 3),
        (Point(3, -4), 5),
    ],
)
def test_distance_from_segment(point, result):
    assert distance_from_segment(Point(0, 0), Point(0, 10), point) == result


def test_distance_from_segment_squared_degenerate():
    assert distance_from_segment_squared(Point(1, 1), Point(1, 1), Point(4, 5)) == 25


def test_distance_from_multi_point():
    mp = MultiPoint([(0, 0), (1, 1), (2, 2)])
    assert distance_from(mp, Point(3, 2)) == 1
    assert distance_from_with_index(mp, Point(3, 2)) == (1, 2)


@pytest.mark.parametrize(
    "point, result",
    [
        (Point(4.5, 1.5), 0.5),
        (Point(0.4, 1.5), 0.4),
        (Point(-0.3, 1.5), 0.3),
        (Point(0.3, 2.8), 0.2),
    ],
)
def test_distance_from_line_string(point, result):
    ls = LineString([(0, 0), (0, 3), (4, 3), (4, 0)])
    assert abs(distance_from(ls, point) - result) <= EPSILON


def _poly():
    r1 = Ring([(0, 0), (3, 0), (3, 3), (0, 3), (0, 0)])
    r2 = Ring([(1, 1), (2, 1), (2, 2), (1, 2), (1, 1)])
    return Polygon([r1, r2])


@pytest.mark.parametrize(
    "point, result",
    [(Point(-1, 2), 1), (Point(0.4, 2), 0.4), (Point(1.3, 1.4), 0.3)],
)
def test_distance_from_polygon(point, result):
    assert abs(distance_from(_poly(), point) - result) <= EPSILON


def test_polygon_index_is_segment_of_matching_ring():
    d, index = distance_from_with_index(_poly(), Point(1.3, 1.4))
    assert abs(d - 0.3) <= EPSILON
    assert index == 3


def test_none_geometry():
    assert distance_from_with_index(None, Point(0, 0)) == (math.inf, -1)


def test_point_geometry():
    assert distance_from_with_index(Point(3, 4), Point(0, 0)) == (5, 0)


def test_multi_line_string_index():
    mls = MultiLineString([[(0, 0), (0, 1)], [(5, 0), (5, 1)]])
    d, index = distance_from_with_index(mls, Point(4, 0.5))
    assert d == 1
    assert index == 1


def test_multi_polygon_index():
    mp = MultiPolygon(
        [
            [[(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]],
            [[(10, 0), (11, 0), (11, 1), (10, 1), (10, 0)]],
        ]
    )
    d, index = distance_from_with_index(mp, Point(12, 0.5))
    assert d == 1
    assert index == 1


def test_collection_index():
    c = Collection([Point(10, 10), LineString([(0, 0), (0, 2)])])
    d, index = distance_from_with_index(c, Point(1, 1))
    assert d == 1
    assert index == 1


def test_bound_uses_ring():
    b = Bound(Point(0, 0), Point(2, 2))
    assert distance_from(b, Point(1, 1.5)) == pytest.approx(0.5)
    assert distance_from(b, Point(-3, 1)) == 3


def test_empty_line_string_is_infinite():
    assert distance_from_with_index(LineString(), Point(0, 0)) == (math.inf, -1)


def test_unsupported_type():
    with pytest.raises(TypeError):
        distance_from_with_index("nope", Point(0, 0))