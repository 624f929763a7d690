"""Perspective projection matrices.

Matrices use the column-vector convention (``clip = P @ [x, y, z, 1]``) with an
OpenGL clip volume: eye space looks down -Z and visible depth maps to
``-w <= z <= w``.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]

NEAR_PLANE = 0.1


def perspective_transform(
    left: float,
    right: float,
    bottom: float,
    top: float,
    near: float,
    far: float,
) -> ArrayF:
    """Frustum projection for the given near-plane rectangle."""
    width = right - left
    height = top - bottom
    depth = far - near
    mat = np.zeros((4, 4), dtype=np.float64)
    mat[0, 0] = 2.0 * near / width
    mat[0, 2] = (right + left) / width
    mat[1, 1] = 2.0 * near / height
    mat[1, 2] = (top + bottom) / height
    mat[2, 2] = -(far + near) / depth
    mat[2, 3] = -2.0 * far * near / depth
    mat[3, 2] = -1.0
    return mat


def fov_perspective_transform(
    field_of_view: float,
    aspect_ratio: float,
    far: float,
    near: float = NEAR_PLANE,
) -> ArrayF:
    """Symmetric projection from a vertical field of view in radians.

    Inputs are not validated: ``0 < field_of_view < pi``, ``aspect_ratio > 0``
    and ``far > near > 0`` are the caller's responsibility.
    """
    top = near * math.tan(0.5 * field_of_view)
    right = top * aspect_ratio
    return perspective_transform(-right, right, -top, top, near, far)
