"""Inserting new points into the edges of a polygon mesh."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .clipped_poly import EdgeIntersection
from .edge import BidirectionalEdge


@dataclass
class SimpleMesh:
    """A mesh of point positions and polygons given as point-index lists."""

    points: list[tuple[float, ...]] = field(default_factory=list)
    polys: list[list[int]] = field(default_factory=list)


def add_mesh_points(
    mesh: Any, intersections: Iterable[EdgeIntersection]
) -> tuple[SimpleMesh, int, list[int], list[int]]:
    """Add points along the edges of a mesh.

    ``mesh`` is any object with ``points`` and ``polys``. Each intersection
    names an edge by its two point indices and a fraction along it;
    intersections that refer to missing points are skipped. New points are
    appended after the existing ones and poly order is unchanged.

    Returns ``(result, added, point_remapping, poly_remapping)``: the new
    mesh, how many points were added, each result point's source point
    (-1 for new points), and each poly's id - ``i+1`` if unchanged, ``-1-i``
    if it gained points.
    """
    src_points = list(mesh.points)
    npoints = len(src_points)

    result = SimpleMesh(points=[tuple(p) for p in src_points])
    point_remapping = list(range(npoints))
    new_pts: dict[BidirectionalEdge, list[tuple[float, int]]] = {}
    added = 0

    for it in intersections:
        if it.point1 >= npoints or it.point2 >= npoints:
            continue
        new_index = len(result.points)
        result.points.append(it.position(src_points))
        e = BidirectionalEdge(it.point1, it.point2)
        frac = it.u if e.first == it.point1 else 1 - it.u
        new_pts.setdefault(e, []).append((frac, new_index))
        point_remapping.append(-1)
        added += 1

    for entries in new_pts.values():
        entries.sort()

    poly_remapping = []
    for i, poly in enumerate(mesh.polys):
        dest: list[int] = []
        added_verts = False
        n = len(poly)
        for j, pt1 in enumerate(poly):
            pt2 = poly[(j + 1) % n]
            dest.append(pt1)
            e = BidirectionalEdge(pt1, pt2)
            entries = new_pts.get(e)
            if entries:
                added_verts = True
                ordered = reversed(entries) if e.first != pt1 else entries
                dest.extend(idx for _, idx in ordered)
        result.polys.append(dest)
        poly_remapping.append(-1 - i if added_verts else i + 1)

    return result, added, point_remapping, poly_remapping