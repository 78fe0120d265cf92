"""Radial distance line simplification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from orbgeo.geometry import LineString
from orbgeo.simplify.base import Simplifier


@dataclass
class RadialSimplifier(Simplifier):
    """Drops points within ``threshold`` of the last kept point."""

    distance_func: Callable[[object, object], float]
    threshold: float

    def reduce(self, ls) -> tuple[LineString, list[int]]:
        """Return the reduced line and the indexes of the kept points."""
        if not ls:
            return LineString(), []

        indices = [0]
        current = 0
        for i, p in enumerate(ls[1:], start=1):
            if self.distance_func(ls[current], p) > self.threshold:
                current = i
                indices.append(i)

        last = len(ls) - 1
        if current != last:
            indices.append(last)

        return LineString(ls[i] for i in indices), indices