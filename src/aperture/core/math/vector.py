"""Vector helpers for NumPy arrays.

Vectors are shaped (..., N); most callers pass N == 3, the arcball code also
works on 2D pointer coordinates.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


ArrayF = NDArray[np.float64]


def as_vec(v: ArrayF, size: int, name: str = "vector") -> ArrayF:
    """Coerce to a float64 vector of the given length."""
    out = np.asarray(v, dtype=np.float64)
    if out.shape != (size,):
        raise ValueError(f"{name} must have shape ({size},)")
    return out


def unit(v: ArrayF, axis: int = -1) -> ArrayF:
    """Return unit vectors; zero vectors stay zero."""
    v = np.asarray(v, dtype=np.float64)
    n = np.linalg.norm(v, axis=axis, keepdims=True)
    with np.errstate(divide="ignore", invalid="ignore"):
        u = np.where(n > 0.0, v / n, 0.0)
    return u


def dot(a: ArrayF, b: ArrayF) -> ArrayF:
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return np.asarray(np.sum(a * b, axis=-1))


def cross(a: ArrayF, b: ArrayF) -> ArrayF:
    return np.cross(a, b)
