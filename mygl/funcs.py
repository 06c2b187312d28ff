"""Geometric helper functions on vectors and matrices."""

from __future__ import annotations

import math
from typing import Any

from mygl.matrix import Matrix
from mygl.vector import Vec3, Vector

PI = 3.1415927


def dot(a: Vector, b: Vector) -> Any:
    """Return the dot product of two vectors of equal length."""
    if len(a) != len(b):
        raise ValueError(f"vector lengths differ: {len(a)} and {len(b)}")
    return sum(x * y for x, y in zip(a, b))


def length(v: Vector) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(sum(c * c for c in v))


def normalize(v: Vector) -> Vector:
    """Return the vector scaled to unit length."""
    return v / length(v)


def transpose(m: Matrix) -> Matrix:
    """Return the transpose of a matrix."""
    return Matrix(zip(*m))


def cross(a: Vector, b: Vector) -> Vec3:
    """Return the cross product of two 3-component vectors."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("the cross product needs two 3-component vectors")
    ax, ay, az = a
    bx, by, bz = b
    return Vec3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)


def reflect(pos: Vector, normal: Vector) -> Vector:
    """Reflect ``pos`` about ``normal``; both are normalized first."""
    i = normalize(pos)
    n = normalize(normal)
    return n * 2 * dot(n, i) - i


def radians(angle: float) -> float:
    """Convert degrees to radians."""
    return PI / 180.0 * angle