"""Geometry and pixel data built on the CPU for the rendering helpers."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

DEBUG_TEXTURE_COLOR = 0xFFE935DA

_BASIS_INDICES = (
    # Body: left
    (0, 1, 2),
    (0, 2, 3),
    # Body: back
    (4, 0, 3),
    (4, 3, 7),
    # Body: bottom
    (0, 4, 5),
    (0, 5, 1),
    # Body: front
    (1, 5, 6),
    (1, 6, 2),
    # Body: top
    (2, 6, 7),
    (2, 7, 3),
    # Tip: left
    (8, 9, 10),
    (8, 10, 11),
    # Tip: back
    (12, 8, 11),
    # Tip: bottom
    (8, 12, 9),
    # Tip: front
    (9, 12, 10),
    # Tip: top
    (10, 12, 11),
)


@dataclass(frozen=True)
class BasisGeometry:
    """An arrow along +X: 13 vertices and 16 triangles."""

    vertices: np.ndarray
    indices: np.ndarray

    @property
    def index_count(self) -> int:
        return int(self.indices.size)


def basis_geometry(half_thickness: float = 0.1) -> BasisGeometry:
    """Build the arrow used to draw one axis of an orthonormal basis."""
    h = float(half_thickness)
    t = 2.0 * h
    vertices = np.array(
        [
            # Body of the arrow
            (0.0, -h, -h),
            (0.0, -h, h),
            (0.0, h, h),
            (0.0, h, -h),
            (1.0, -h, -h),
            (1.0, -h, h),
            (1.0, h, h),
            (1.0, h, -h),
            # Tip of the arrow
            (1.0, -t, -t),
            (1.0, -t, t),
            (1.0, t, t),
            (1.0, t, -t),
            (1.0 + 4.0 * h, 0.0, 0.0),
        ],
        dtype=np.float32,
    )
    indices = np.array(_BASIS_INDICES, dtype=np.uint32)
    return BasisGeometry(vertices=vertices, indices=indices)


def viewport_for(lower_left, upper_right, window_size) -> tuple[tuple[int, int], tuple[int, int]]:
    """Pixel origin and size of a rectangle given in [-1, 1] window coordinates."""
    (llx, lly), (urx, ury), (width, height) = lower_left, upper_right, window_size

    def to_absolute(coord: float, size: int) -> int:
        return int((float(coord) + 1.0) / 2.0 * int(size))

    origin = (to_absolute(llx, width), to_absolute(lly, height))
    corner = (to_absolute(urx, width), to_absolute(ury, height))
    return origin, (corner[0] - origin[0], corner[1] - origin[1])


def debug_texture_pixels(width: int = 16, height: int = 16) -> np.ndarray:
    """Pixels of the placeholder texture: ``height`` rows of packed RGBA values."""
    if width <= 0 or height <= 0:
        raise ValueError("texture dimensions must be positive")
    return np.full((height, width), DEBUG_TEXTURE_COLOR, dtype=np.uint32)