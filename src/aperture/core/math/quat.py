"""Quaternion helpers.

Conventions:
- Storage order: [w, x, y, z]
- A quaternion maps camera-local vectors to world vectors: v_world = R(q) * v_local
- Composition: applying q1 then q2 is q = quat_mul(q2, q1)
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from .vector import cross, dot, unit


ArrayF = NDArray[np.float64]


def quat_identity() -> ArrayF:
    return np.array([1.0, 0.0, 0.0, 0.0], dtype=np.float64)


def quat_normalize(q: ArrayF) -> ArrayF:
    """Scale quaternion(s) to unit length, leaving zero quaternions alone."""
    q = np.asarray(q, dtype=np.float64)
    n = np.linalg.norm(q, axis=-1, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.where(n > 0.0, q / n, q)


def quat_conj(q: ArrayF) -> ArrayF:
    q = np.asarray(q, dtype=np.float64)
    return np.concatenate([q[..., :1], -q[..., 1:]], axis=-1)


def quat_mul(q1: ArrayF, q2: ArrayF) -> ArrayF:
    """Hamilton product q1 * q2 (broadcasts over leading axes)."""
    q1 = np.asarray(q1, dtype=np.float64)
    q2 = np.asarray(q2, dtype=np.float64)
    w1, v1 = q1[..., :1], q1[..., 1:]
    w2, v2 = q2[..., :1], q2[..., 1:]
    w = w1 * w2 - dot(v1, v2)[..., np.newaxis]
    v = w1 * v2 + w2 * v1 + cross(v1, v2)
    return np.concatenate([w, v], axis=-1)


def quat_rotate(q: ArrayF, v: ArrayF) -> ArrayF:
    """Rotate vector(s) by quaternion(s)."""
    q = quat_normalize(q)
    v = np.asarray(v, dtype=np.float64)
    w, u = q[..., :1], q[..., 1:]
    t = 2.0 * cross(u, v)
    return v + w * t + cross(u, t)


def quat_to_rotmat(q: ArrayF) -> ArrayF:
    """Convert quaternion(s) to 3x3 rotation matrices (column-vector convention)."""
    w, x, y, z = np.moveaxis(quat_normalize(q), -1, 0)
    rows = [
        [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - w * z), 2.0 * (x * z + w * y)],
        [2.0 * (x * y + w * z), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - w * x)],
        [2.0 * (x * z - w * y), 2.0 * (y * z + w * x), 1.0 - 2.0 * (x * x + y * y)],
    ]
    return np.stack([np.stack(r, axis=-1) for r in rows], axis=-2)


def quat_from_axis_angle(axis: ArrayF, angle_rad: ArrayF) -> ArrayF:
    axis = np.asarray(axis, dtype=np.float64)
    angle_rad = np.asarray(angle_rad, dtype=np.float64)
    half = 0.5 * angle_rad
    w = np.cos(half)[..., np.newaxis]
    xyz = unit(axis, axis=-1) * np.sin(half)[..., np.newaxis]
    return np.concatenate([w, xyz], axis=-1)


def quat_from_arc(a: ArrayF, b: ArrayF) -> ArrayF:
    """Arcball rotation between two points on the unit sphere.

    Builds ``[a . b, a x b]``, which rotates by twice the angle between ``a``
    and ``b`` about their common normal. For unit inputs the result already
    has unit length; it is normalized anyway to absorb rounding.
    """
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    scalar = dot(a, b)[..., np.newaxis]
    return quat_normalize(np.concatenate([scalar, cross(a, b)], axis=-1))
