"""2D polygon predicates, signed area and generalised barycentric coordinates."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from . import vec
from .segment import LineSegment2

_EPSILON = sys.float_info.epsilon

Point2 = Sequence[float]


def _neighbours(points: Sequence[Point2]):
    """Yield (prev, current, next) for every vertex of a closed polygon."""
    n = len(points)
    for i, p in enumerate(points):
        yield points[(i - 1) % n], p, points[(i + 1) % n]


def is_convex(points: Sequence[Point2]) -> bool:
    """Return True if the polygon is convex."""
    if len(points) <= 3:
        return True
    pos = True
    neg = True
    for pprev, p, pnext in _neighbours(points):
        c = vec.cross2(vec.sub(pprev, p), vec.sub(pnext, p))
        pos &= c >= 0
        neg &= c <= 0
        if not (pos or neg):
            break
    return pos or neg


def is_inside_polygon(points: Sequence[Point2], p: Point2) -> bool:
    """Return True if p lies inside the polygon (even-odd crossing test)."""
    inside = False
    px, py = p[0], p[1]
    for pj, pi in zip([points[-1], *points[:-1]], points):
        if (pi[1] > py) != (pj[1] > py) and px < (pj[0] - pi[0]) * (py - pi[1]) / (
            pj[1] - pi[1]
        ) + pi[0]:
            inside = not inside
    return inside


def signed_area(points: Sequence[Point2]) -> float:
    """Signed area of the polygon: positive if clockwise, negative if anticlockwise."""
    n = len(points)
    area = sum(vec.cross2(points[(i + 1) % n], p) for i, p in enumerate(points))
    return area / 2


def is_clockwise(points: Sequence[Point2]) -> bool:
    """Return True if the polygon winds clockwise."""
    return signed_area(points) >= 0


def _triangle_coords(a: Point2, b: Point2, c: Point2, p: Point2) -> list[float]:
    denom = vec.cross2(vec.sub(b, a), vec.sub(c, a))
    if denom == 0:
        raise ValueError("degenerate triangle has no barycentric coordinates")
    ca = vec.cross2(vec.sub(b, p), vec.sub(c, p)) / denom
    cb = vec.cross2(vec.sub(c, p), vec.sub(a, p)) / denom
    return [ca, cb, 1.0 - ca - cb]


def barycentric_coords(
    points: Sequence[Point2], p: Point2, assume_convex: bool = True
) -> list[float]:
    """Return the generalised barycentric coordinates of p within the polygon.

    One weight is returned per vertex, in vertex order. Wachspress coordinates
    are used, which are valid for convex polygons; the result is undefined if
    p lies outside the polygon. Polygons with fewer than three vertices yield
    all-zero weights.
    """
    n = len(points)
    if n < 3:
        return [0.0] * n
    if n == 3:
        return _triangle_coords(points[0], points[1], points[2], p)

    triarea = []
    for i, pi in enumerate(points):
        j = (i + 1) % n
        pj = points[j]
        edge = vec.sub(pj, pi)
        to_p = vec.sub(p, pi)
        area = abs(vec.cross2(to_p, edge))
        triarea.append(area)
        if area < _EPSILON and LineSegment2(tuple(pi), tuple(pj)).closest_distance(p) < _EPSILON:
            # p lies on this vertex or edge
            coords = [0.0] * n
            edge_len2 = vec.dot(edge, edge)
            if edge_len2 < _EPSILON * _EPSILON:
                coords[i] = 1.0
            else:
                frac = min(max(vec.dot(to_p, edge) / edge_len2, 0.0), 1.0)
                coords[j] = frac
                coords[i] = 1.0 - frac
            return coords
        # Otherwise p may be colinear with an edge it does not lie on; that
        # vertex's contribution is simply dropped below.

    coords = []
    for i, (pprev, pcur, pnext) in enumerate(_neighbours(points)):
        area = abs(vec.cross2(vec.sub(pnext, pprev), vec.sub(pnext, pcur)))
        a1_a2 = triarea[i] * triarea[i - 1]
        coords.append(area / a1_a2 if a1_a2 > _EPSILON else 0.0)

    total = sum(coords)
    if total < _EPSILON:
        return [1.0] + [0.0] * (n - 1)
    return [c / total for c in coords]