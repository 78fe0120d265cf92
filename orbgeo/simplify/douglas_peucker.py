"""Douglas-Peucker line simplification."""

from __future__ import annotations

from dataclasses import dataclass

from orbgeo.geometry import LineString
from orbgeo.planar.distance import distance_from_segment_squared
from orbgeo.simplify.base import Simplifier


@dataclass
class DouglasPeuckerSimplifier(Simplifier):
    """Keeps points further than ``threshold`` from the simplified line."""

    threshold: float

    def reduce(self, ls) -> tuple[LineString, list[int]]:
        """Return the reduced line and the indexes of the kept points."""
        n = len(ls)
        if n == 0:
            return LineString(), []

        keep = [False] * n
        keep[0] = keep[-1] = True
        limit = self.threshold * self.threshold

        stack = [(0, n - 1)]
        while stack:
            start, end = stack.pop()
            a, b = ls[start], ls[end]
            max_dist = 0.0
            max_index = 0
            for i in range(start + 1, end):
                d = distance_from_segment_squared(a, b, ls[i])
                if d > max_dist:
                    max_dist = d
                    max_index = i

            if max_dist > limit:
                keep[max_index] = True
                stack.append((start, max_index))
                stack.append((max_index, end))

        indices = [i for i, kept in enumerate(keep) if kept]
        return LineString(ls[i] for i in indices), indices