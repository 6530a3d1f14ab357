"""Clipping a 2D polygon against a line, keeping the part on its right."""

from __future__ import annotations

from collections.abc import Sequence

from .clipped_poly import ClippedPoly, EdgeIntersection
from .plane import ClippingContext, IntersectType
from . import vec
from .segment import Line2

# Point indices at or above this value are aliases for repeated points.
_SHARED_OFFSET = (2**32 - 1) // 2


def _add_edge(edges: dict[int, list[int]], a: int, b: int) -> None:
    edges.setdefault(a, []).append(b)


def _pop_edge(edges: dict[int, list[int]], a: int) -> int:
    targets = edges[a]
    b = targets.pop(0)
    if not targets:
        del edges[a]
    return b


def clip_poly_2d(
    points: Sequence[Sequence[float]],
    line: Line2,
    ctxt: ClippingContext | None = None,
    indices: Sequence[int] | None = None,
) -> tuple[IntersectType, list[ClippedPoly]]:
    """Clip a clockwise polygon against a line.

    Vertices on the line or to its right (looking along its direction) are
    kept. If ``indices`` is given, the polygon's vertices are
    ``points[indices[i]]`` and results refer to those indices; otherwise the
    polygon is ``points`` itself. If ``ctxt`` is given, its inside flags
    (looked up by point index) decide which points are kept, and its current
    polygon id is recorded on the results.

    Returns the kind of intersection and the polygons produced. Keyholes and
    a little self-intersection are handled.
    """
    poly_indices = list(indices) if indices is not None else list(range(len(points)))
    poly_points = [points[i] for i in poly_indices]
    npoints = len(poly_points)
    if npoints <= 2:
        raise ValueError("a polygon needs at least 3 points to be clipped")

    def inside(k: int) -> bool:
        if ctxt is not None:
            return ctxt.is_point_inside(poly_indices[k])
        return line.is_right(poly_points[k])

    shared_vert_check = npoints > 4
    visited: set[int] = set()
    shared_remap: dict[int, int] = {}

    index1 = poly_indices[0]
    if shared_vert_check:
        visited.add(index1)

    onplane_points: list[EdgeIntersection] = []
    inside_points: list[int] = []
    line_dir = line.unit_dir()
    any_outside = False
    pt_inside = inside(0)

    intersections_out: list[tuple[float, int]] = []
    intersections_in: list[tuple[float, int]] = []
    edges: dict[int, list[int]] = {}

    # On-plane points are numbered from npoints and adjusted afterwards.
    for i in range(npoints):
        j = (i + 1) % npoints
        pt_i = poly_points[i]
        pt_j = poly_points[j]
        index2 = poly_indices[j]
        any_outside |= not pt_inside
        pt_inside_next = inside(j)

        if j > 0 and shared_vert_check:
            if index2 in visited:
                alias = _SHARED_OFFSET + len(shared_remap)
                shared_remap[alias] = index2
                index2 = alias
            else:
                visited.add(index2)

        if pt_inside_next != pt_inside:
            u = line.intersect(pt_i, pt_j)
            if u is None:
                u = 0.0
            u = min(max(u, 0.0), 1.0)

            pt_int = vec.add(pt_i, vec.scale(vec.sub(pt_j, pt_i), u))
            dist = vec.dot(pt_int, line_dir)

            vert_int = len(onplane_points) + npoints
            onplane_points.append(EdgeIntersection(index1, index2, u))

            if pt_inside:
                intersections_out.append((dist, vert_int))
                _add_edge(edges, len(inside_points), vert_int)
                inside_points.append(index1)
            else:
                intersections_in.append((dist, vert_int))
                _add_edge(edges, vert_int, 0 if j == 0 else len(inside_points))
        elif pt_inside:
            vert1 = len(inside_points)
            _add_edge(edges, vert1, 0 if j == 0 else vert1 + 1)
            inside_points.append(index1)

        pt_inside = pt_inside_next
        index1 = index2

    if not inside_points:
        return IntersectType.OUTSIDE, []

    if not any_outside:
        pclip = ClippedPoly()
        pclip.make_inside(poly_indices)
        if ctxt is not None:
            pclip.poly_id = ctxt.current_poly_id
        return IntersectType.INSIDE, [pclip]

    # Each pair of intersections, ordered along the line, becomes an edge.
    by_dist = lambda item: item[0]  # noqa: E731
    for (_, out_vert), (_, in_vert) in zip(
        sorted(intersections_out, key=by_dist), sorted(intersections_in, key=by_dist)
    ):
        _add_edge(edges, out_vert, in_vert)

    result: list[ClippedPoly] = []
    while edges:
        pclip = ClippedPoly()
        if ctxt is not None:
            pclip.poly_id = -abs(ctxt.current_poly_id)

        vert: int | None = next(iter(edges))
        raw_vertices: list[int] = []
        while vert is not None and vert in edges:
            if vert >= npoints:
                raw_vertices.append(len(pclip.onplane_points) + npoints)
                pclip.onplane_points.append(onplane_points[vert - npoints])
            else:
                raw_vertices.append(len(pclip.inside_points))
                pclip.inside_points.append(inside_points[vert])
            vert = _pop_edge(edges, vert)

        if shared_remap:
            pclip.inside_points = [shared_remap.get(p, p) for p in pclip.inside_points]
            pclip.onplane_points = [
                EdgeIntersection(
                    shared_remap.get(e.point1, e.point1),
                    shared_remap.get(e.point2, e.point2),
                    e.u,
                )
                for e in pclip.onplane_points
            ]

        adjust = npoints - len(pclip.inside_points)
        pclip.vertices = [v - adjust if v >= npoints else v for v in raw_vertices]
        result.append(pclip)

    return IntersectType.INTERSECTS, result