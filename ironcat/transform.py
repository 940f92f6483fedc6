"""Position, rotation and scale of an object, with optional parent."""

from __future__ import annotations

import math
from typing import Optional

import numpy as np

_X_AXIS = np.array([1.0, 0.0, 0.0])
_Y_AXIS = np.array([0.0, 1.0, 0.0])
_Z_AXIS = np.array([0.0, 0.0, 1.0])


def _vec3(value) -> np.ndarray:
    """Return a fresh float vector of three components; a scalar fills all three."""
    return np.broadcast_to(np.asarray(value, dtype=float), (3,)).copy()


def _translation(offset: np.ndarray) -> np.ndarray:
    matrix = np.identity(4)
    matrix[:3, 3] = offset
    return matrix


def _scaling(factors: np.ndarray) -> np.ndarray:
    return np.diag([*factors, 1.0])


def _rotation(angle: float, axis) -> np.ndarray:
    """Rotation by ``angle`` radians about ``axis`` (right-handed)."""
    axis = np.asarray(axis, dtype=float)
    norm = float(np.linalg.norm(axis))
    if norm == 0.0:
        raise ValueError("rotation axis must be non-zero")
    x, y, z = axis / norm
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    matrix = np.identity(4)
    matrix[:3, :3] = [
        [t * x * x + c, t * x * y - s * z, t * x * z + s * y],
        [t * x * y + s * z, t * y * y + c, t * y * z - s * x],
        [t * x * z - s * y, t * y * z + s * x, t * z * z + c],
    ]
    return matrix


class Transform:
    """Local position, rotation (degrees) and scale, relative to an optional owner."""

    def __init__(
        self,
        position=(0.0, 0.0, 0.0),
        rotation=(0.0, 0.0, 0.0),
        scale=(1.0, 1.0, 1.0),
        owner: Optional["Transform"] = None,
    ) -> None:
        self._position = _vec3(position)
        self._rotation = _vec3(rotation)
        self._scale = _vec3(scale)
        self._owner = owner
        self._world_matrix = np.identity(4)
        self._recalculate_world_matrix()

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = _vec3(value)
        self._recalculate_world_matrix()

    @property
    def rotation(self) -> np.ndarray:
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value) -> None:
        self._rotation = _vec3(value)
        self._recalculate_world_matrix()

    @property
    def scale(self) -> np.ndarray:
        return self._scale.copy()

    @scale.setter
    def scale(self, value) -> None:
        self._scale = _vec3(value)
        self._recalculate_world_matrix()

    @property
    def owner(self) -> Optional["Transform"]:
        return self._owner

    @owner.setter
    def owner(self, value: Optional["Transform"]) -> None:
        self._owner = value
        self._recalculate_world_matrix()

    @property
    def world_matrix(self) -> np.ndarray:
        """The matrix computed at the last change of this transform."""
        return self._world_matrix.copy()

    def local_matrix(self) -> np.ndarray:
        """Translate, scale, then rotate one degree about the rotation vector."""
        matrix = _translation(self.world_position()) @ _scaling(self.world_scale())
        return matrix @ _rotation(math.radians(1.0), self._rotation)

    def world_position(self) -> np.ndarray:
        result = self._position.copy()
        if self._owner is not None:
            result += self._owner.world_position()
        return result

    def world_rotation(self) -> np.ndarray:
        result = self._rotation.copy()
        if self._owner is not None:
            result += self._owner.world_rotation()
        return result

    def world_scale(self) -> np.ndarray:
        result = self._scale.copy()
        if self._owner is not None:
            result += self._owner.world_scale()
        return result

    def _recalculate_world_matrix(self) -> None:
        base = _translation(self.world_position()) @ _scaling(self.world_scale())
        rx, ry, rz = (math.radians(angle) for angle in self._rotation)
        # Each axis rotation is composed onto the full base matrix.
        self._world_matrix = (
            (base @ _rotation(rx, _X_AXIS))
            @ (base @ _rotation(ry, _Y_AXIS))
            @ (base @ _rotation(rz, _Z_AXIS))
        )