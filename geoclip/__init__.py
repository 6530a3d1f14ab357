"""Geometry algorithms for polygon clipping, mesh connectivity and spatial queries."""

__version__ = "1.0.0"

__all__ = [
    "vec",
    "edge",
    "segment",
    "plane",
    "poly2d",
    "clipped_poly",
    "connectivity",
    "clip2d",
    "add_points",
    "octree",
]