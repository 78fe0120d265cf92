"""A point quadtree using rectangular partitions, and the max heap behind its k-nearest search."""

__all__ = ["maxheap", "quadtree"]