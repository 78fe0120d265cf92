"""Core planar geometry types: points, bounds, lines, rings and polygons."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Union


class Orientation(enum.IntEnum):
    """Winding order of a ring."""

    CW = -1
    DEGENERATE = 0
    CCW = 1


class Point(NamedTuple):
    """A lon/lat (x/y) 2d point."""

    x: float
    y: float

    @property
    def lon(self) -> float:
        return self.x

    @property
    def lat(self) -> float:
        return self.y

    def geojson_type(self) -> str:
        return "Point"

    def dimensions(self) -> int:
        return 0

    def bound(self) -> "Bound":
        return Bound(self, self)

    def point(self) -> "Point":
        return self


def _as_point(item) -> Point:
    if isinstance(item, Point):
        return item
    x, y = item
    return Point(x, y)


@dataclass(frozen=True)
class Bound:
    """An axis aligned rectangle given by its min and max corners."""

    min: Point
    max: Point

    def __post_init__(self) -> None:
        object.__setattr__(self, "min", _as_point(self.min))
        object.__setattr__(self, "max", _as_point(self.max))

    def geojson_type(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> "Bound":
        return self

    def is_empty(self) -> bool:
        """True if min is past max on either axis."""
        return self.min.x > self.max.x or self.min.y > self.max.y

    def contains(self, point) -> bool:
        """True if the point is inside or on the edge of the bound."""
        if point[1] < self.min.y or self.max.y < point[1]:
            return False
        if point[0] < self.min.x or self.max.x < point[0]:
            return False
        return True

    def extend(self, point) -> "Bound":
        """Return a bound grown to include the point."""
        if self.contains(point):
            return self
        return Bound(
            Point(min(self.min.x, point[0]), min(self.min.y, point[1])),
            Point(max(self.max.x, point[0]), max(self.max.y, point[1])),
        )

    def union(self, other: "Bound") -> "Bound":
        """Return a bound covering both bounds; empty bounds are ignored."""
        if other.is_empty():
            return self
        if self.is_empty():
            return other
        return self.extend(other.min).extend(other.max)

    def pad(self, d: float) -> "Bound":
        """Return the bound expanded by d in every direction."""
        return Bound(
            Point(self.min.x - d, self.min.y - d),
            Point(self.max.x + d, self.max.y + d),
        )

    def to_ring(self) -> "Ring":
        """Return the bound as a closed counter-clockwise ring."""
        return Ring(
            [
                self.min,
                Point(self.max.x, self.min.y),
                self.max,
                Point(self.min.x, self.max.y),
                self.min,
            ]
        )


EMPTY_BOUND = Bound(Point(1.0, 1.0), Point(-1.0, -1.0))


class _GeometryList(list):
    """A list that coerces its items and keeps its type when sliced."""

    def __init__(self, items: Iterable = ()):
        super().__init__(self._coerce(item) for item in items)

    @classmethod
    def _coerce(cls, item):
        return item

    def __getitem__(self, index):
        result = super().__getitem__(index)
        if isinstance(index, slice):
            return type(self)(result)
        return result

    def _union_bound(self) -> Bound:
        if not self:
            return EMPTY_BOUND
        result = self[0].bound()
        for item in self[1:]:
            result = result.union(item.bound())
        return result


def _points_bound(points) -> Bound:
    if not points:
        return EMPTY_BOUND
    xs = [p.x for p in points]
    ys = [p.y for p in points]
    return Bound(Point(min(xs), min(ys)), Point(max(xs), max(ys)))


class _PointList(_GeometryList):
    @classmethod
    def _coerce(cls, item):
        return _as_point(item)


class MultiPoint(_PointList):
    """A set of points."""

    def geojson_type(self) -> str:
        return "MultiPoint"

    def dimensions(self) -> int:
        return 0

    def bound(self) -> Bound:
        """Return the rectangle around all points."""
        return _points_bound(self)

    def clone(self) -> "MultiPoint":
        return MultiPoint(self)

    def reverse(self) -> None:
        """Reverse the order of the points in place."""
        super().reverse()


class LineString(_PointList):
    """A sequence of connected points."""

    def geojson_type(self) -> str:
        return "LineString"

    def dimensions(self) -> int:
        return 1

    def bound(self) -> Bound:
        """Return the rectangle around all points."""
        return _points_bound(self)

    def clone(self) -> "LineString":
        return LineString(self)

    def reverse(self) -> None:
        """Reverse the order of the points in place."""
        super().reverse()


class Ring(_PointList):
    """A closed line string: the boundary of an area."""

    def geojson_type(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> Bound:
        """Return the rectangle around all points."""
        return _points_bound(self)

    def clone(self) -> "Ring":
        return Ring(self)

    def reverse(self) -> None:
        """Reverse the order of the points in place."""
        super().reverse()

    def closed(self) -> bool:
        """True if there are 4+ points and the first matches the last."""
        return len(self) >= 4 and self[0] == self[-1]

    def orientation(self) -> Orientation:
        """Return CCW, CW or DEGENERATE for a ring with no area."""
        offset_x, offset_y = self[0]
        area = 0.0
        for a, b in zip(self[1:-1], self[2:]):
            area += (a.x - offset_x) * (b.y - offset_y) - (b.x - offset_x) * (
                a.y - offset_y
            )
        if area > 0:
            return Orientation.CCW
        if area < 0:
            return Orientation.CW
        return Orientation.DEGENERATE


class MultiLineString(_GeometryList):
    """A set of line strings."""

    @classmethod
    def _coerce(cls, item):
        return item if isinstance(item, LineString) else LineString(item)

    def geojson_type(self) -> str:
        return "MultiLineString"

    def dimensions(self) -> int:
        return 1

    def bound(self) -> Bound:
        return self._union_bound()

    def clone(self) -> "MultiLineString":
        return MultiLineString(ls.clone() for ls in self)


class Polygon(_GeometryList):
    """An area: the first ring is the outer ring, the others are holes."""

    @classmethod
    def _coerce(cls, item):
        return item if isinstance(item, Ring) else Ring(item)

    def geojson_type(self) -> str:
        return "Polygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> Bound:
        if not self:
            return EMPTY_BOUND
        return self[0].bound()

    def clone(self) -> "Polygon":
        return Polygon(r.clone() for r in self)


class MultiPolygon(_GeometryList):
    """A set of polygons."""

    @classmethod
    def _coerce(cls, item):
        return item if isinstance(item, Polygon) else Polygon(item)

    def geojson_type(self) -> str:
        return "MultiPolygon"

    def dimensions(self) -> int:
        return 2

    def bound(self) -> Bound:
        return self._union_bound()

    def clone(self) -> "MultiPolygon":
        return MultiPolygon(p.clone() for p in self)


class Collection(_GeometryList):
    """A heterogeneous set of geometries."""

    def geojson_type(self) -> str:
        return "GeometryCollection"

    def dimensions(self) -> int:
        """Return the largest dimension of the members, -1 if empty."""
        return max((g.dimensions() for g in self), default=-1)

    def bound(self) -> Bound:
        return self._union_bound()

    def clone(self) -> "Collection":
        return Collection(g.clone() if hasattr(g, "clone") else g for g in self)


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Ring,
    Polygon,
    MultiPolygon,
    Collection,
    Bound,
]