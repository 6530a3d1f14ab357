"""Point, edge and face adjacency tables for a polygon mesh."""

from __future__ import annotations

from typing import Any

from .edge import BidirectionalEdge


def _edges(poly):
    """Yield (index, point, next point) around a closed polygon."""
    n = len(poly)
    for j, pt in enumerate(poly):
        yield j, pt, poly[(j + 1) % n]


class MeshConnectivity:
    """Connectivity data gathered from a mesh.

    The mesh is any object with ``points`` (a sequence of positions) and
    ``polys`` (a sequence of point-index sequences). Point indices outside the
    range of ``points`` are ignored. Each table is only filled in when asked
    for, and the matching ``*_valid`` flag records whether it was built.
    """

    def __init__(
        self,
        mesh: Any = None,
        pt_face: bool = False,
        face_face: bool = False,
        edge_face: bool = False,
        pt_vert: bool = False,
    ) -> None:
        self.clear()
        if mesh is not None:
            self.set(mesh, pt_face, face_face, edge_face, pt_vert)

    def clear(self) -> None:
        """Empty every table and mark it invalid."""
        self.pt_face: dict[int, set[int]] = {}
        self.face_face: dict[int, set[int]] = {}
        self.edge_face: dict[BidirectionalEdge, set[int]] = {}
        self.pt_vert: dict[int, set[tuple[int, int]]] = {}
        self.pt_face_valid = False
        self.face_face_valid = False
        self.edge_face_valid = False
        self.pt_vert_valid = False

    def set(
        self,
        mesh: Any,
        pt_face: bool = False,
        face_face: bool = False,
        edge_face: bool = False,
        pt_vert: bool = False,
    ) -> None:
        """Rebuild the requested tables from the mesh.

        ``face_face`` needs the edge table, so asking for it builds that too.
        """
        self.clear()
        npoints = len(mesh.points)
        polys = mesh.polys

        if pt_face or pt_vert:
            for i, poly in enumerate(polys):
                for j, ptnum in enumerate(poly):
                    if ptnum >= npoints:
                        continue
                    if pt_face:
                        self.pt_face.setdefault(ptnum, set()).add(i)
                    if pt_vert:
                        self.pt_vert.setdefault(ptnum, set()).add((i, j))
            self.pt_face_valid = pt_face
            self.pt_vert_valid = pt_vert

        if edge_face or face_face:
            for i, poly in enumerate(polys):
                for _, pt1, pt2 in _edges(poly):
                    if pt1 < npoints and pt2 < npoints:
                        self.edge_face.setdefault(BidirectionalEdge(pt1, pt2), set()).add(i)
            self.edge_face_valid = True

        if face_face:
            for i, poly in enumerate(polys):
                faces: set[int] = set()
                for _, pt1, pt2 in _edges(poly):
                    faces |= self.edge_face.get(BidirectionalEdge(pt1, pt2), set())
                faces.discard(i)
                self.face_face[i] = faces
            self.face_face_valid = True