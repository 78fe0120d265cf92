# orbgeo

Two-dimensional geometry for longitude/latitude and planar data.

orbgeo gives you plain geometry types and a set of tools that work on them.
It has no dependencies outside the standard library and needs Python 3.10
or later.

## What is in it

- **Geometry types** (`orbgeo.geometry`): `Point` (a named tuple with `x`,
  `y` and the aliases `lon`, `lat`), `MultiPoint`, `LineString`,
  `MultiLineString`, `Ring`, `Polygon`, `MultiPolygon` and `Collection`
  (list types that convert plain pairs and nested lists into the right
  types), and `Bound`, an axis-aligned rectangle with `contains`, `extend`,
  `union`, `pad`, `is_empty` and `to_ring`. Every type has `bound()`,
  `dimensions()` and `geojson_type()`; the list types have `clone()`.
  `Ring` adds `closed()` and `orientation()`, which returns an
  `Orientation` (`CCW`, `CW` or `DEGENERATE`).
- **Rounding** (`orbgeo.rounding`): `round_geometry(g, factor=None)` rounds
  every coordinate to the given factor, `10**6` (six decimal places) by
  default, with halves rounded away from zero. Lists of points are rounded
  in place and returned; points and bounds come back as new values.
- **Planar measures** (`orbgeo.planar`):
  - `orbgeo.planar.distance`: `distance`, `distance_squared`,
    `distance_from_segment`, `distance_from_segment_squared`,
    `distance_from` and `distance_from_with_index` (distance from a
    geometry's boundary plus the index of the matching part).
  - `orbgeo.planar.area`: `area` and `centroid_area`. A ring's area is
    signed: counter-clockwise rings are positive and clockwise rings
    negative. Polygon areas are never negative, with holes subtracted.
  - `orbgeo.planar.contains`: `ring_contains`, `polygon_contains` and
    `multi_polygon_contains`. Points on a boundary count as inside; points
    inside a hole do not.
- **Projections** (`orbgeo.project.projections`): `wgs84_to_mercator` and
  `mercator_to_wgs84` for the spherical web-map Mercator projection,
  `mercator_scale_factor` (raises `ValueError` for latitudes outside
  -90..90), `deg2rad`, `rad2deg`, and `project_geometry` plus per-type
  helpers (`project_point`, `project_line_string`, `project_polygon`,
  `project_bound` and so on) to apply any point-to-point function to a
  geometry.
- **Simplification** (`orbgeo.simplify`): `DouglasPeuckerSimplifier`,
  `RadialSimplifier` (takes a distance function and a threshold) and
  `VisvalingamSimplifier` (also built with `visvalingam_threshold` or
  `visvalingam_keep`). Each one reduces a single line with `reduce`, which
  returns the reduced line and the indexes of the kept points, or any
  geometry with `simplify`. They share the base class `Simplifier` in
  `orbgeo.simplify.base`.
- **Quadtree** (`orbgeo.quadtree.quadtree`): `Quadtree` stores any object
  with a `point()` method inside a fixed bound and answers nearest
  (`find`, `matching`), k-nearest (`k_nearest`, `k_nearest_matching`,
  nearest first, with an optional `max_distance`) and box (`in_bound`,
  `in_bound_matching`) queries. `remove` takes an optional predicate to
  pick among values at the same point. Adding a point outside the bound
  raises `PointOutsideOfBoundsError`. The k-nearest search uses `MaxHeap`
  from `orbgeo.quadtree.maxheap`.

## Installation

```
pip install orbgeo
```

## A short tour

```python
from orbgeo.geometry import Point, Ring
from orbgeo.planar.area import area
from orbgeo.planar.contains import ring_contains
from orbgeo.planar.distance import distance

triangle = Ring([Point(0, 0), Point(3, 0), Point(0, 4), Point(0, 0)])

area(triangle)                          # 6.0
ring_contains(triangle, Point(1, 1))    # True
distance(Point(0, 0), Point(3, 4))      # 5.0
```

### Projecting

```python
from orbgeo.geometry import Point
from orbgeo.project.projections import (
    mercator_to_wgs84,
    project_geometry,
    wgs84_to_mercator,
)

merc = project_geometry(Point(-122.416667, 37.783333), wgs84_to_mercator)
back = mercator_to_wgs84(merc)
```

Projecting a line, ring or multi-part geometry updates it in place and
returns it; a point or bound comes back as a new value.

### Simplifying

```python
from orbgeo.geometry import LineString, Point
from orbgeo.simplify.douglas_peucker import DouglasPeuckerSimplifier

line = LineString([Point(0, 0), Point(2, 0), Point(1, 1), Point(0, 2)])
DouglasPeuckerSimplifier(0.0).simplify(line)
# LineString([Point(0, 0), Point(2, 0), Point(0, 2)])
```

`simplify` on a single line or ring returns a new line and leaves the input
alone. Multi-line strings, polygons, multi-polygons and collections are
updated in place: their members are replaced by the simplified ones, holes
that shrink to two points or fewer are dropped, and so are polygons whose
outer ring does. `simplify` returns `None` when nothing is left.

### Searching points

```python
from orbgeo.geometry import Bound, Point
from orbgeo.quadtree.quadtree import Quadtree

tree = Quadtree(Bound(Point(0, 0), Point(1, 1)))
for p in (Point(0.1, 0.1), Point(0.5, 0.5), Point(0.9, 0.2)):
    tree.add(p)

tree.find(Point(0.4, 0.4))              # Point(0.5, 0.5)
tree.k_nearest(Point(0, 0), 2)          # [Point(0.1, 0.1), Point(0.5, 0.5)]
tree.in_bound(Bound(Point(0, 0), Point(0.5, 0.5)))
```

## What it does not do

orbgeo is a library only: it has no command-line tool. It does not read or
write GeoJSON, WKT or any other file format (`geojson_type()` only names
the type), and every measure works in the flat plane; there are no
great-circle distances or spherical areas.

## Running the tests

```
pip install -e ".[test]"
pytest
```