"""Model, view and projection matrix builders."""

from __future__ import annotations

from mygl.funcs import cross, dot, normalize
from mygl.matrix import Matrix, mat4
from mygl.vector import Vector


def scale(m: Matrix, v: Vector) -> Matrix:
    """Return ``m`` followed by a scale of ``v`` along each axis."""
    sx, sy, sz = v
    return mat4(
        sx, 0.0, 0.0, 0.0,
        0.0, sy, 0.0, 0.0,
        0.0, 0.0, sz, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ) * m


def translate(m: Matrix, v: Vector) -> Matrix:
    """Return ``m`` followed by a translation by ``v``."""
    tx, ty, tz = v
    return mat4(
        1.0, 0.0, 0.0, tx,
        0.0, 1.0, 0.0, ty,
        0.0, 0.0, 1.0, tz,
        0.0, 0.0, 0.0, 1.0,
    ) * m


def look_at(position: Vector, focus: Vector, up: Vector) -> Matrix:
    """Return a view matrix for an eye at ``position`` looking towards ``focus``."""
    front = normalize(focus - position)
    right = normalize(cross(front, up))
    rx, ry, rz = right
    ux, uy, uz = up
    fx, fy, fz = front
    return mat4(
        rx, ry, rz, -dot(position, right),
        ux, uy, uz, -dot(position, up),
        -fx, -fy, -fz, dot(position, front),
        0.0, 0.0, 0.0, 1.0,
    )


def ortho(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Matrix:
    """Return an orthographic projection onto the unit cube."""
    return mat4(
        2.0 / (right - left), 0.0, 0.0, -(right + left) / (right - left),
        0.0, 2.0 / (top - bottom), 0.0, -(top + bottom) / (top - bottom),
        0.0, 0.0, 2.0 / (near - far), -(near + far) / (near - far),
        0.0, 0.0, 0.0, 1.0,
    )


def perspective(fovy: float, aspect: float, z_near: float, z_far: float) -> Matrix:
    """Return the perspective projection; currently the identity matrix."""
    return mat4(1.0)