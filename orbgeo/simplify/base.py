"""Shared driver that applies a line simplifier to any geometry type."""

from __future__ import annotations

import abc

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


class Simplifier(abc.ABC):
    """Base for simplifiers; subclasses implement ``reduce`` on one line."""

    @abc.abstractmethod
    def reduce(self, ls) -> tuple[LineString, list[int]]:
        """Return the reduced line and the indexes of the kept points."""

    def simplify(self, g):
        """Simplify any geometry; returns None if nothing is left."""
        if g is None:
            return None
        if isinstance(g, (Point, Bound, MultiPoint)):
            return g
        if isinstance(g, LineString):
            result = self.line_string(g)
        elif isinstance(g, Ring):
            result = self.ring(g)
        elif isinstance(g, MultiLineString):
            result = self.multi_line_string(g)
        elif isinstance(g, Polygon):
            result = self.polygon(g)
        elif isinstance(g, MultiPolygon):
            result = self.multi_polygon(g)
        elif isinstance(g, Collection):
            result = self.collection(g)
        else:
            raise TypeError(f"unsupported type: {type(g).__name__}")
        return result if result else None

    def _run(self, ls):
        if len(ls) <= 2:
            return ls
        return self.reduce(ls)[0]

    def line_string(self, ls) -> LineString:
        """Simplify a line string."""
        result = self._run(ls)
        return result if isinstance(result, LineString) else LineString(result)

    def multi_line_string(self, mls: MultiLineString) -> MultiLineString:
        """Simplify each line string in place."""
        mls[:] = [self.line_string(ls) for ls in mls]
        return mls

    def ring(self, r) -> Ring:
        """Simplify a ring."""
        result = self._run(r)
        return result if isinstance(result, Ring) else Ring(result)

    def polygon(self, p: Polygon) -> Polygon:
        """Simplify each ring in place, dropping holes that collapse."""
        kept = []
        for i, ring in enumerate(p):
            r = self.ring(ring)
            if i != 0 and len(r) <= 2:
                continue
            kept.append(r)
        p[:] = kept
        return p

    def multi_polygon(self, mp: MultiPolygon) -> MultiPolygon:
        """Simplify each polygon in place, dropping those that collapse."""
        kept = []
        for polygon in mp:
            p = self.polygon(polygon)
            if not p or len(p[0]) <= 2:
                continue
            kept.append(p)
        mp[:] = kept
        return mp

    def collection(self, c: Collection) -> Collection:
        """Simplify each member of the collection in place."""
        c[:] = [self.simplify(g) for g in c]
        return c