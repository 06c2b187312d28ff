"""A free-look camera that looks along its front vector."""

from __future__ import annotations

from dataclasses import dataclass, field

from mygl.matrix import Matrix
from mygl.transform import look_at
from mygl.vector import Vec3, Vector


@dataclass
class Camera:
    """Camera at ``position`` facing ``front`` (default: down -z) with ``up``."""

    position: Vector = field(default_factory=lambda: Vec3(0.0, 0.0, 0.0))
    front: Vector = field(default_factory=lambda: Vec3(0.0, 0.0, -1.0))
    up: Vector = field(default_factory=lambda: Vec3(0.0, 1.0, 0.0))

    def view_matrix(self) -> Matrix:
        """Return the view matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)