"""Two-dimensional geometry types with planar measures, rounding, projections, simplification and a quadtree."""

__version__ = "0.1.0"
__all__ = ["geometry", "rounding", "planar", "project", "simplify", "quadtree"]