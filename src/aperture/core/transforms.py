"""Homogeneous 4x4 transform helpers (column-vector convention)."""

from __future__ import annotations

import numpy as np

from .math.vector import ArrayF, as_vec


def translation_matrix(offset: ArrayF) -> ArrayF:
    t = as_vec(offset, 3, "offset")
    mat = np.eye(4, dtype=np.float64)
    mat[:3, 3] = t
    return mat


def rotation_matrix(rot: ArrayF) -> ArrayF:
    r = np.asarray(rot, dtype=np.float64)
    if r.shape != (3, 3):
        raise ValueError("rot must have shape (3, 3)")
    mat = np.eye(4, dtype=np.float64)
    mat[:3, :3] = r
    return mat


def scale_matrix(factor: float) -> ArrayF:
    mat = np.eye(4, dtype=np.float64)
    mat[0, 0] = mat[1, 1] = mat[2, 2] = factor
    return mat


def transform_point(matrix: ArrayF, point: ArrayF) -> ArrayF:
    """Apply a 4x4 matrix to a 3D point, returning the homogeneous (4,) result."""
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError("matrix must have shape (4, 4)")
    p = as_vec(point, 3, "point")
    return m @ np.append(p, 1.0)


def to_column_major(matrix: ArrayF) -> list[float]:
    """Flatten a 4x4 matrix column by column, as GL uniforms expect."""
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (4, 4):
        raise ValueError("matrix must have shape (4, 4)")
    return [float(v) for v in m.ravel(order="F")]
