"""Axis-aligned cubes and normalised point sets for spatial acceleration."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from . import vec
from .plane import Plane, locate_point

Vec3 = tuple[float, float, float]
Box = tuple[Sequence[float], Sequence[float]]

_CONTAINS_EPSILON = 1e-4
_SHAPE_TOLERANCE = 1e-4


@dataclass
class Cube:
    """An axis-aligned cube given by its minimum corner and edge length."""

    pmin: Vec3 = (0.0, 0.0, 0.0)
    size: float = 0.0

    def __post_init__(self) -> None:
        self.pmin = tuple(float(c) for c in self.pmin)
        self.size = float(self.size)

    @classmethod
    def from_corners(cls, pmin: Sequence[float], pmax: Sequence[float]) -> "Cube":
        """Build a cube from opposite corners, which must span equal lengths."""
        dx, dy, dz = vec.sub(pmax, pmin)
        if abs(dx - dy) >= _SHAPE_TOLERANCE or abs(dx - dz) >= _SHAPE_TOLERANCE:
            raise ValueError("corners do not describe a cube")
        return cls(tuple(pmin), dx)

    @property
    def pmax(self) -> Vec3:
        """The maximum corner."""
        return tuple(c + self.size for c in self.pmin)

    def contains_point(self, p: Sequence[float]) -> bool:
        """True if p lies inside the cube, allowing a small tolerance."""
        return all(
            lo - _CONTAINS_EPSILON <= c <= lo + self.size + _CONTAINS_EPSILON
            for c, lo in zip(p, self.pmin)
        )

    def contains_cube(self, other: "Cube") -> bool:
        """True if the other cube lies wholly inside this one."""
        return self.contains_point(other.pmin) and self.contains_point(other.pmax)

    def contains_box(self, box: Box) -> bool:
        """True if the (min, max) box lies wholly inside the cube."""
        bmin, bmax = box
        return self.contains_point(bmin) and self.contains_point(bmax)

    def intersects_box(self, box: Box) -> bool:
        """True if the (min, max) box overlaps the cube."""
        bmin, bmax = box
        pmin, pmax = self.pmin, self.pmax
        return not any(b > p for b, p in zip(bmin, pmax)) and not any(
            b < p for b, p in zip(bmax, pmin)
        )

    def _corners(self):
        s = self.size
        for dx in (0.0, s):
            for dy in (0.0, s):
                for dz in (0.0, s):
                    yield vec.add(self.pmin, (dx, dy, dz))

    def classify_plane(self, plane: Plane, epsilon: float) -> int:
        """Return 1 if every corner is above the plane, -1 if every corner is
        below it, and 0 otherwise."""
        total = sum(locate_point(plane, c, epsilon) for c in self._corners())
        if total == -8:
            return -1
        return 1 if total == 8 else 0

    def intersects_ray(self, start: Sequence[float], axis: int, forward: bool) -> bool:
        """True if a ray cast from start along an axis passes through the cube."""
        if not 0 <= axis < 3:
            raise ValueError(f"axis must be 0, 1 or 2, not {axis}")
        pmin, pmax = self.pmin, self.pmax
        if forward:
            if start[axis] > pmax[axis]:
                return False
        elif start[axis] < pmin[axis]:
            return False
        return all(
            pmin[ax] <= start[ax] <= pmax[ax] for ax in ((axis + 1) % 3, (axis - 1) % 3)
        )

    def translate(self, v: Sequence[float]) -> None:
        """Move the cube by v."""
        self.pmin = vec.add(self.pmin, v)

    def scale(self, s: float) -> None:
        """Scale the cube's edge length, keeping its minimum corner."""
        self.size *= s


class PointSet:
    """A set of 3D points, also held mapped into the unit cube of their bounds."""

    def __init__(self, points: Sequence[Sequence[float]]) -> None:
        self._points = [tuple(float(c) for c in p) for p in points]
        self._bbox = self._compute_bounding_box()
        cube = self.bounding_cube()
        if self._points and cube.size == 0:
            raise ValueError("points have no spatial extent to normalise against")
        inv = 1.0 / cube.size if self._points else 1.0
        self._normalised = [vec.scale(vec.sub(p, cube.pmin), inv) for p in self._points]

    def _compute_bounding_box(self) -> tuple[Vec3, Vec3]:
        if not self._points:
            return (math.inf,) * 3, (-math.inf,) * 3
        lo = tuple(min(cs) for cs in zip(*self._points))
        hi = tuple(max(cs) for cs in zip(*self._points))
        return lo, hi

    def __len__(self) -> int:
        return len(self._points)

    def set_bounding_box(self, box: Box) -> None:
        """Replace the stored bounding box."""
        bmin, bmax = box
        self._bbox = (tuple(bmin), tuple(bmax))

    def bounding_cube(self) -> Cube:
        """The cube at the box's minimum corner with its longest side."""
        bmin, bmax = self._bbox
        return Cube(bmin, max(vec.sub(bmax, bmin)))

    def size_range(self) -> tuple[float, float, float]:
        """Element size statistics (min, max, average); points have no size."""
        return 0.0, 0.0, 0.0

    def bounds(self, index: int) -> tuple[Vec3, Vec3]:
        """The normalised bounding box of one point: the point itself twice."""
        p = self._normalised[index]
        return p, p

    def barycenter(self, index: int) -> Vec3:
        """The normalised position of one point."""
        return self._normalised[index]

    def intersects(self, index: int, box: Box) -> bool:
        """True if the normalised point lies inside the (min, max) box."""
        bmin, bmax = box
        p = self._normalised[index]
        return all(lo <= c <= hi for c, lo, hi in zip(p, bmin, bmax))