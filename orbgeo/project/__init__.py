"""Mercator and WGS84 projections and helpers to apply them to geometries."""

__all__ = ["projections"]