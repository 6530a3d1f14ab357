"""Small vector helpers operating on tuples of floats (2D or 3D)."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vec = tuple[float, ...]


def smallest_axis(v: Sequence[float]) -> int:
    """Return the index of the component of a 3D vector with the smallest magnitude."""
    x, y, z = (c * c for c in v)
    if x < y:
        return 0 if x < z else 2
    return 1 if y < z else 2


def largest_axis(v: Sequence[float]) -> int:
    """Return the index of the component of a 3D vector with the largest magnitude."""
    x, y, z = (c * c for c in v)
    if x > y:
        return 0 if x > z else 2
    return 1 if y > z else 2


def axis_vector(axis: int) -> Vec:
    """Return the unit vector along the given axis (taken modulo 3)."""
    return tuple(1.0 if i == axis % 3 else 0.0 for i in range(3))


def add(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise sum."""
    return tuple(x + y for x, y in zip(a, b))


def sub(a: Sequence[float], b: Sequence[float]) -> Vec:
    """Component-wise difference a - b."""
    return tuple(x - y for x, y in zip(a, b))


def scale(v: Sequence[float], s: float) -> Vec:
    """Multiply every component by a scalar."""
    return tuple(c * s for c in v)


def dot(a: Sequence[float], b: Sequence[float]) -> float:
    """Dot product."""
    return sum(x * y for x, y in zip(a, b))


def cross2(a: Sequence[float], b: Sequence[float]) -> float:
    """The scalar cross product of two 2D vectors."""
    return a[0] * b[1] - a[1] * b[0]


def cross3(a: Sequence[float], b: Sequence[float]) -> Vec:
    """The cross product of two 3D vectors."""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(v: Sequence[float]) -> float:
    """Euclidean length."""
    return math.sqrt(dot(v, v))


def normalize(v: Sequence[float]) -> Vec:
    """Return v scaled to unit length; a zero vector is returned unchanged."""
    n = length(v)
    if n == 0:
        return tuple(float(c) for c in v)
    return tuple(c / n for c in v)