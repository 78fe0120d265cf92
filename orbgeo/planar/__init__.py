"""Distances, areas, centroids and containment in the 2D euclidean plane."""

__all__ = ["distance", "area", "contains"]