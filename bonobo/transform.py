"""Translation-rotation-scale transforms, composed as M = T * R * S."""

from __future__ import annotations

import math
from typing import Iterable, Union

import numpy as np

Vec3Like = Union[Iterable[float], np.ndarray]

_PARALLEL_LIMIT = 0.99999


def _vec3(v: Vec3Like) -> np.ndarray:
    arr = np.asarray(v, dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected a 3-component vector, got shape {arr.shape}")
    return arr.copy()


def _normalized(v: Vec3Like) -> np.ndarray:
    arr = _vec3(v)
    length = float(np.linalg.norm(arr))
    if length == 0.0:
        raise ValueError("cannot normalise a zero-length vector")
    return arr / length


def axis_rotation(angle: float, axis: Vec3Like) -> np.ndarray:
    """3x3 right-handed rotation of ``angle`` radians about ``axis``."""
    x, y, z = _normalized(axis)
    c = math.cos(angle)
    s = math.sin(angle)
    t = 1.0 - c
    return np.array(
        [
            [c + t * x * x, t * x * y - s * z, t * x * z + s * y],
            [t * x * y + s * z, c + t * y * y, t * y * z - s * x],
            [t * x * z - s * y, t * y * z + s * x, c + t * z * z],
        ]
    )


def _homogeneous(upper: np.ndarray, translation: np.ndarray | None = None) -> np.ndarray:
    m = np.identity(4)
    m[:3, :3] = upper
    if translation is not None:
        m[:3, 3] = translation
    return m


class TRSTransform:
    """A transform made of a translation, a rotation and a per-axis scale.

    Matrices follow the column-vector convention: ``matrix() @ p`` maps a
    homogeneous point from local to parent space.
    """

    def __init__(self) -> None:
        self.translation = np.zeros(3)
        self.rotation = np.identity(3)
        self.scale = np.ones(3)

    def reset(self) -> None:
        """Return to the identity transform."""
        self.translation = np.zeros(3)
        self.rotation = np.identity(3)
        self.scale = np.ones(3)

    # Relative transformations

    def translate(self, v: Vec3Like) -> None:
        self.translation = self.translation + _vec3(v)

    def scale_by(self, v: Union[float, Vec3Like]) -> None:
        """Multiply the scale by a vector or by a uniform factor."""
        if np.isscalar(v):
            self.scale = self.scale * float(v)
        else:
            self.scale = self.scale * _vec3(v)

    def rotate(self, angle: float, axis: Vec3Like) -> None:
        """Set the rotation to ``current @ rotation(angle, axis)``."""
        self.rotation = self.rotation @ axis_rotation(angle, axis)

    def rotate_x(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        r = self.rotation
        y, z = r[1].copy(), r[2].copy()
        r[1] = c * y - s * z
        r[2] = c * z + s * y

    def rotate_y(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        r = self.rotation
        x, z = r[0].copy(), r[2].copy()
        r[0] = c * x + s * z
        r[2] = c * z - s * x

    def rotate_z(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        r = self.rotation
        x, y = r[0].copy(), r[1].copy()
        r[0] = c * x - s * y
        r[1] = c * y + s * x

    def pre_rotate(self, angle: float, axis: Vec3Like) -> None:
        """Set the rotation to ``rotation(angle, axis) @ current``."""
        self.rotation = axis_rotation(angle, axis) @ self.rotation

    def pre_rotate_x(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        r = self.rotation
        c1, c2 = r[:, 1].copy(), r[:, 2].copy()
        r[:, 1] = c * c1 + s * c2
        r[:, 2] = c * c2 - s * c1

    def pre_rotate_y(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        r = self.rotation
        c0, c2 = r[:, 0].copy(), r[:, 2].copy()
        r[:, 0] = c * c0 - s * c2
        r[:, 2] = c * c2 + s * c0

    def pre_rotate_z(self, angle: float) -> None:
        c, s = math.cos(angle), math.sin(angle)
        r = self.rotation
        c0, c1 = r[:, 0].copy(), r[:, 1].copy()
        r[:, 0] = c * c0 + s * c1
        r[:, 1] = c * c1 - s * c0

    # Absolute transformations

    def set_translate(self, v: Vec3Like) -> None:
        self.translation = _vec3(v)

    def set_scale(self, v: Union[float, Vec3Like]) -> None:
        """Replace the scale by a vector or by a uniform factor."""
        if np.isscalar(v):
            self.scale = np.full(3, float(v))
        else:
            self.scale = _vec3(v)

    def set_rotate(self, angle: float, axis: Vec3Like) -> None:
        self.rotation = axis_rotation(angle, axis)

    def set_rotate_x(self, angle: float) -> None:
        self.rotation = axis_rotation(angle, (1.0, 0.0, 0.0))

    def set_rotate_y(self, angle: float) -> None:
        self.rotation = axis_rotation(angle, (0.0, 1.0, 0.0))

    def set_rotate_z(self, angle: float) -> None:
        self.rotation = axis_rotation(angle, (0.0, 0.0, 1.0))

    def look_towards(self, front: Vec3Like, up: Vec3Like = (0.0, 1.0, 0.0)) -> None:
        """Orient so that ``front()`` points along ``front``; no-op if ``up`` is parallel."""
        front_n = _normalized(front)
        up_n = _normalized(up)
        if abs(float(np.dot(up_n, front_n))) > _PARALLEL_LIMIT:
            return
        right = np.cross(front_n, up_n)
        new_up = np.cross(right, front_n)
        right = right / np.linalg.norm(right)
        new_up = new_up / np.linalg.norm(new_up)
        self.rotation = np.column_stack((right, new_up, -front_n))

    def look_at(self, point: Vec3Like, up: Vec3Like = (0.0, 1.0, 0.0)) -> None:
        self.look_towards(_vec3(point) - self.translation, up)

    # Matrices

    def matrix(self) -> np.ndarray:
        return _homogeneous(self.rotation * self.scale[np.newaxis, :], self.translation)

    def matrix_inverse(self) -> np.ndarray:
        upper = self.rotation.T / self.scale[:, np.newaxis]
        return _homogeneous(upper, -(upper @ self.translation))

    def translation_matrix(self) -> np.ndarray:
        return _homogeneous(np.identity(3), self.translation)

    def rotation_matrix(self) -> np.ndarray:
        return _homogeneous(self.rotation)

    def scale_matrix(self) -> np.ndarray:
        return _homogeneous(np.diag(self.scale))

    def translation_matrix_inverse(self) -> np.ndarray:
        return _homogeneous(np.identity(3), -self.translation)

    def rotation_matrix_inverse(self) -> np.ndarray:
        return _homogeneous(self.rotation.T)

    def scale_matrix_inverse(self) -> np.ndarray:
        return _homogeneous(np.diag(1.0 / self.scale))

    def translation_rotation_matrix(self) -> np.ndarray:
        return _homogeneous(self.rotation, self.translation)

    # Directions

    def up(self) -> np.ndarray:
        return self.rotation[:, 1] * self.scale[1]

    def down(self) -> np.ndarray:
        return -self.up()

    def left(self) -> np.ndarray:
        return -self.right()

    def right(self) -> np.ndarray:
        return self.rotation[:, 0] * self.scale[0]

    def front(self) -> np.ndarray:
        return -self.back()

    def back(self) -> np.ndarray:
        return self.rotation[:, 2] * self.scale[2]

    # Text serialisation

    def dumps(self) -> str:
        """Three lines: translation, rotation columns, scale."""

        def fmt(values: Iterable[float]) -> str:
            return " ".join(repr(float(x)) for x in values)

        return "\n".join(
            (
                fmt(self.translation),
                fmt(self.rotation.T.reshape(9)),
                fmt(self.scale),
            )
        ) + "\n"

    def loads(self, text: str) -> None:
        """Restore a transform written by :meth:`dumps`."""
        try:
            values = [float(tok) for tok in text.split()]
        except ValueError as err:
            raise ValueError(f"malformed transform text: {err}") from err
        if len(values) != 15:
            raise ValueError(f"expected 15 numbers, got {len(values)}")
        self.translation = np.array(values[0:3])
        self.rotation = np.array(values[3:12]).reshape(3, 3).T.copy()
        self.scale = np.array(values[12:15])