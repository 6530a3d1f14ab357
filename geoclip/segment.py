"""2D line segments and infinite lines."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from . import vec

_EPSILON = sys.float_info.epsilon


@dataclass(frozen=True)
class LineSegment2:
    """A 2D line segment from ``start`` to ``end``."""

    start: tuple[float, float]
    end: tuple[float, float]

    def closest_distance(self, p: Sequence[float]) -> float:
        """Return the distance from p to the nearest point on the segment."""
        d = vec.sub(self.end, self.start)
        len2 = vec.dot(d, d)
        to_p = vec.sub(p, self.start)
        if len2 == 0:
            return vec.length(to_p)
        t = min(max(vec.dot(to_p, d) / len2, 0.0), 1.0)
        return vec.length(vec.sub(to_p, vec.scale(d, t)))


def segments_intersect(l1: LineSegment2, l2: LineSegment2) -> bool:
    """Return True if the two segments intersect; parallel segments never do."""
    r = vec.sub(l1.end, l1.start)
    s = vec.sub(l2.end, l2.start)
    rxs = vec.cross2(r, s)
    if abs(rxs) < _EPSILON:
        return False
    qp = vec.sub(l2.start, l1.start)
    t = vec.cross2(qp, s) / rxs
    if t < 0 or t > 1:
        return False
    u = vec.cross2(qp, r) / rxs
    return 0 <= u <= 1


@dataclass(frozen=True)
class Line2:
    """An infinite 2D line through ``pos`` running along ``direction``."""

    pos: tuple[float, float]
    direction: tuple[float, float]

    def unit_dir(self) -> tuple[float, ...]:
        """The line's direction at unit length."""
        return vec.normalize(self.direction)

    def is_right(self, p: Sequence[float]) -> bool:
        """True if p lies on the line or to its right, looking along its direction."""
        return vec.cross2(self.direction, vec.sub(p, self.pos)) <= 0

    def intersect(self, p1: Sequence[float], p2: Sequence[float]) -> float | None:
        """Return u such that p1 + u*(p2 - p1) lies on the line, or None if parallel."""
        s = vec.sub(p2, p1)
        denom = vec.cross2(s, self.direction)
        if denom == 0:
            return None
        return vec.cross2(vec.sub(self.pos, p1), self.direction) / denom