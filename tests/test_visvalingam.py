import pytest

from orbgeo.geometry import LineString, Point
from orbgeo.simplify.visvalingam import (
    VisvalingamSimplifier,
    double_triangle_area,
    visvalingam_keep,
    visvalingam_threshold,
)

ZIGZAG = [(0, 0), (1, 1), (0, 2), (1, 3), (0, 4)]


@pytest.mark.parametrize(
    "threshold, ls, expected, index_map",
    [
        (0.9, ZIGZAG, ZIGZAG, [0, 1, 2, 3, 4]),
        (1.1, ZIGZAG, [(0, 0), (0, 4)], [0, 4]),
    ],
    ids=["no reduction", "reduction"],
)
def test_visvalingam_threshold(threshold, ls, expected, index_map):
    v, im = visvalingam_threshold(threshold).reduce(LineString(ls))
    assert v == LineString(expected)
    assert im == index_map


@pytest.mark.parametrize(
    "keep, expected, index_map",
    [
        (6, ZIGZAG, [0, 1, 2, 3, 4]),
        (5, ZIGZAG, [0, 1, 2, 3, 4]),
        (4, [(0, 0), (0, 2), (1, 3), (0, 4)], [0, 2, 3, 4]),
        (3, [(0, 0), (0, 2), (0, 4)], [0, 2, 4]),
        (2, [(0, 0), (0, 4)], [0, 4]),
    ],
)
def test_visvalingam_keep(keep, expected, index_map):
    v, im = visvalingam_keep(keep).reduce(LineString(ZIGZAG))
    assert v == LineString(expected)
    assert im == index_map


@pytest.mark.parametrize(
    "threshold, keep, ls, expected, index_map",
    [
        (1.1, 0, [(0, 0), (1, 1), (0, 2)], [(0, 0), (0, 2)], [0, 2]),
        (1.1, 3, [(0, 0), (1, 1), (0, 2)], [(0, 0), (1, 1), (0, 2)], [0, 1, 2]),
        (0.9, 0, [(0, 0), (1, 1), (0, 2)], [(0, 0), (1, 1), (0, 2)], [0, 1, 2]),
        (1.1, 0, ZIGZAG, [(0, 0), (0, 4)], [0, 4]),
        (1.1, 5, ZIGZAG, ZIGZAG, [0, 1, 2, 3, 4]),
        (1.1, 3, ZIGZAG, [(0, 0), (0, 2), (0, 4)], [0, 2, 4]),
        (0.1, 0, [(0, 0), (0, 1), (0, 2)], [(0, 0), (0, 2)], [0, 2]),
    ],
    ids=[
        "keep nothing",
        "keep everything",
        "not meeting threshold",
        "5 points keep nothing",
        "5 points keep everything",
        "5 points reduce to limit",
        "removes colinear points",
    ],
)
def test_visvalingam(threshold, keep, ls, expected, index_map):
    v, im = VisvalingamSimplifier(threshold, keep).reduce(LineString(ls))
    assert v == LineString(expected)
    assert im == index_map


@pytest.mark.parametrize(
    "i1, i2, i3",
    [(0, 1, 2), (0, 2, 1), (1, 2, 0), (1, 0, 2), (2, 0, 1), (2, 1, 0)],
)
def test_double_triangle_area(i1, i2, i3):
    ls = LineString([(2, 5), (5, 1), (-4, 3)])
    assert double_triangle_area(ls, i1, i2, i3) == 30.0


def test_line_string_through_simplifier_driver():
    result = visvalingam_threshold(1.1).line_string(LineString(ZIGZAG))
    assert result == LineString([(0, 0), (0, 4)])
    assert isinstance(result[0], Point)


def test_short_line_left_alone():
    result = visvalingam_keep(0).simplify(LineString([(0, 0), (1, 1)]))
    assert result == LineString([(0, 0), (1, 1)])


def test_constructors_set_fields():
    s = visvalingam_threshold(2.5)
    assert (s.threshold, s.to_keep) == (2.5, 0)
    k = visvalingam_keep(7)
    assert k.to_keep == 7
    assert k.threshold > 1e300