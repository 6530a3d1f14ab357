"""3D planes: point location, projection, intersection and clip tests."""

from __future__ import annotations

import enum
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from . import vec

_EPSILON = sys.float_info.epsilon


class IntersectType(enum.Enum):
    """How a set of points relates to a clipping region."""

    INSIDE = "inside"
    OUTSIDE = "outside"
    INTERSECTS = "intersects"


@dataclass(frozen=True)
class Plane:
    """A plane of points p with dot(normal, p) == distance."""

    normal: tuple[float, float, float]
    distance: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "normal", tuple(float(c) for c in self.normal))
        object.__setattr__(self, "distance", float(self.distance))

    @classmethod
    def from_point_normal(cls, origin: Sequence[float], normal: Sequence[float]) -> "Plane":
        """Build the plane through origin with the given (normalised) normal."""
        n = vec.normalize(normal)
        return cls(n, vec.dot(n, origin))

    def distance_to(self, p: Sequence[float]) -> float:
        """Signed distance from p to the plane, positive on the normal side."""
        return vec.dot(self.normal, p) - self.distance


def is_inside(plane: Plane, p: Sequence[float]) -> bool:
    """True if p is on the plane or in its positive halfspace."""
    return plane.distance_to(p) >= 0


def locate_point(plane: Plane, p: Sequence[float], epsilon: float) -> int:
    """Return 0 if p is within epsilon of the plane, else 1 or -1 for its side."""
    dist = plane.distance_to(p)
    if dist < -epsilon:
        return -1
    return 1 if dist > epsilon else 0


def project_point(plane: Plane, p: Sequence[float]) -> tuple[float, ...]:
    """Project a point onto the plane."""
    d = vec.dot(p, plane.normal)
    return vec.sub(p, vec.scale(plane.normal, d - plane.distance))


def project_vector(plane: Plane, v: Sequence[float]) -> tuple[float, ...]:
    """Project a vector onto the plane."""
    return vec.sub(v, vec.scale(plane.normal, vec.dot(v, plane.normal)))


def reverse(plane: Plane) -> Plane:
    """The same plane facing the opposite way."""
    return Plane(vec.scale(plane.normal, -1.0), -plane.distance)


def intersect_planes(
    pl1: Plane, pl2: Plane
) -> tuple[tuple[float, ...], tuple[float, ...]] | None:
    """Return (point, unit direction) of the line shared by two planes, or None."""
    d = vec.dot(pl1.normal, pl2.normal)
    determinant = 1 - d * d
    if determinant < _EPSILON:
        return None
    c1 = (pl1.distance - pl2.distance * d) / determinant
    c2 = (pl2.distance - pl1.distance * d) / determinant
    pos = vec.add(vec.scale(pl1.normal, c1), vec.scale(pl2.normal, c2))
    direction = vec.normalize(vec.cross3(pl2.normal, pl1.normal))
    return pos, direction


def intersect_segment(
    plane: Plane, p1: Sequence[float], p2: Sequence[float]
) -> tuple[float, ...] | None:
    """Return where the line through p1 and p2 meets the plane, or None if parallel."""
    p1_2 = vec.sub(p2, p1)
    d = vec.dot(p1_2, plane.normal)
    if abs(d) < _EPSILON:
        return None
    frac = (plane.distance - vec.dot(p1, plane.normal)) / d
    return vec.add(p1, vec.scale(p1_2, frac))


def _classify(flags: Iterable[bool]) -> IntersectType:
    all_inside = True
    all_outside = True
    for inside in flags:
        all_inside &= inside
        all_outside &= not inside
        if not (all_inside or all_outside):
            break
    if all_inside:
        return IntersectType.INSIDE
    return IntersectType.OUTSIDE if all_outside else IntersectType.INTERSECTS


def clip_test(plane: Plane, points: Iterable[Sequence[float]]) -> IntersectType:
    """Classify points as all inside, all outside, or split by the plane."""
    return _classify(is_inside(plane, p) for p in points)


@dataclass
class ClippingContext:
    """Precomputed inside/outside flags for points, plus the polygon being clipped."""

    inside_flags: list[bool] = field(default_factory=list)
    current_poly_id: int = 0

    def is_point_inside(self, index: int) -> bool:
        """Whether the point with this index lies inside the clip."""
        return self.inside_flags[index]


def clip_test_context(ctxt: ClippingContext, indices: Iterable[int]) -> IntersectType:
    """Classify the points with the given indices using a context's flags."""
    return _classify(ctxt.is_point_inside(i) for i in indices)