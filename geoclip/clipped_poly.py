"""The result of clipping a polygon, stored as indices into the original points."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from . import vec


@dataclass
class EdgeIntersection:
    """A point on the edge from ``point1`` to ``point2`` at fraction ``u``."""

    point1: int
    point2: int
    u: float

    def position(self, points: Sequence[Sequence[float]]) -> tuple[float, ...]:
        """The interpolated position, given the original point list."""
        p1 = points[self.point1]
        p2 = points[self.point2]
        return vec.add(p1, vec.scale(vec.sub(p2, p1), self.u))

    def __str__(self) -> str:
        return f"({self.point1},{self.point2}:{self.u:g})"


@dataclass
class ClippedPoly:
    """A clipped polygon that refers back to the points it was clipped from.

    ``vertices`` holds one entry per polygon vertex. An entry smaller than
    ``len(inside_points)`` indexes ``inside_points`` (an original point index);
    otherwise it indexes ``onplane_points`` after subtracting that length.
    ``poly_id`` is 0 for a new face, id > 0 for an unclipped copy of polygon
    id-1, and id < 0 for a clipped part of polygon -1-id.
    """

    inside_points: list[int] = field(default_factory=list)
    onplane_points: list[EdgeIntersection] = field(default_factory=list)
    vertices: list[int] = field(default_factory=list)
    poly_id: int = 0

    @property
    def num_inside_vertices(self) -> int:
        return len(self.inside_points)

    @property
    def num_intersection_vertices(self) -> int:
        return len(self.onplane_points)

    def __len__(self) -> int:
        return len(self.vertices)

    def is_inside(self, vert: int) -> bool:
        """True if the vertex is an original point, False if it is an intersection."""
        return self.vertices[vert] < len(self.inside_points)

    def inside_index(self, vert: int) -> int:
        """The original point index of an inside vertex."""
        if not self.is_inside(vert):
            raise ValueError(f"vertex {vert} is an intersection, not an inside point")
        return self.inside_points[self.vertices[vert]]

    def intersection(self, vert: int) -> EdgeIntersection:
        """The edge intersection of an on-plane vertex."""
        if self.is_inside(vert):
            raise ValueError(f"vertex {vert} is an inside point, not an intersection")
        return self.onplane_points[self.vertices[vert] - len(self.inside_points)]

    def clear(self) -> None:
        """Remove all points and vertices."""
        self.inside_points.clear()
        self.onplane_points.clear()
        self.vertices.clear()

    def make_inside(self, indices: Iterable[int]) -> None:
        """Represent the whole, unclipped polygon made of the given point indices."""
        self.onplane_points.clear()
        self.inside_points = list(indices)
        self.vertices = list(range(len(self.inside_points)))

    def position(self, points: Sequence[Sequence[float]], vert: int) -> tuple[float, ...]:
        """The position of a vertex, given the point list originally clipped."""
        if not 0 <= vert < len(self.vertices):
            raise IndexError(f"vertex {vert} out of range")
        i = self.vertices[vert]
        if i < len(self.inside_points):
            return tuple(points[self.inside_points[i]])
        return self.onplane_points[i - len(self.inside_points)].position(points)

    def __str__(self) -> str:
        parts = []
        for v in range(len(self.vertices)):
            if self.is_inside(v):
                parts.append(str(self.inside_index(v)))
            else:
                is_ = self.intersection(v)
                parts.append(f"({is_.point1}->{is_.point2}:{is_.u:g})")
        return " -> ".join(parts)