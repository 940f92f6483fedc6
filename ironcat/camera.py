"""Orthographic camera with a position and a rotation about the view axis."""

from __future__ import annotations

import math

import numpy as np


def _ortho(left: float, right: float, bottom: float, top: float, near: float, far: float) -> np.ndarray:
    width = float(right) - float(left)
    height = float(top) - float(bottom)
    depth = float(far) - float(near)
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / width
    matrix[1, 1] = 2.0 / height
    matrix[2, 2] = -2.0 / depth
    matrix[0, 3] = -(right + left) / width
    matrix[1, 3] = -(top + bottom) / height
    matrix[2, 3] = -(far + near) / depth
    return matrix


def _camera_transform(position: np.ndarray, angle: float) -> np.ndarray:
    c = math.cos(angle)
    s = math.sin(angle)
    matrix = np.identity(4)
    matrix[:2, :2] = [[c, -s], [s, c]]
    matrix[:3, 3] = position
    return matrix


class OrthographicCamera:
    """A 2D camera; the rotation is in radians about the z axis."""

    def __init__(self, left: float, right: float, bottom: float, top: float) -> None:
        self._projection = _ortho(left, right, bottom, top, -1.0, 1.0)
        self._view = np.identity(4)
        self._view_projection = self._projection @ self._view
        self._position = np.zeros(3)
        self._rotation = 0.0

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    @position.setter
    def position(self, value) -> None:
        self._position = np.broadcast_to(np.asarray(value, dtype=float), (3,)).copy()
        self._recalculate_view_matrix()

    @property
    def rotation(self) -> float:
        return self._rotation

    @rotation.setter
    def rotation(self, value: float) -> None:
        self._rotation = float(value)
        self._recalculate_view_matrix()

    @property
    def projection_matrix(self) -> np.ndarray:
        return self._projection.copy()

    @property
    def view_matrix(self) -> np.ndarray:
        return self._view.copy()

    @property
    def view_projection_matrix(self) -> np.ndarray:
        return self._view_projection.copy()

    def _recalculate_view_matrix(self) -> None:
        self._view = np.linalg.inv(_camera_transform(self._position, self._rotation))
        self._view_projection = self._projection @ self._view