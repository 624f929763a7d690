from __future__ import annotations

import math

import numpy as np

from aperture.core.perspective import (
    NEAR_PLANE,
    fov_perspective_transform,
    perspective_transform,
)


def test_fov_perspective_entries() -> None:
    near, far = NEAR_PLANE, 100.0
    mat = fov_perspective_transform(0.5 * math.pi, 2.0, far)

    assert math.isclose(mat[0, 0], 0.5)
    assert math.isclose(mat[1, 1], 1.0)
    assert math.isclose(mat[2, 2], -(far + near) / (far - near))
    assert math.isclose(mat[2, 3], -2.0 * far * near / (far - near))
    assert mat[3, 2] == -1.0
    assert mat[3, 3] == 0.0


def test_fov_matches_symmetric_frustum() -> None:
    fov, aspect, near, far = 1.1, 4.0 / 3.0, 0.5, 40.0
    top = near * math.tan(fov / 2.0)
    right = top * aspect
    assert np.allclose(
        fov_perspective_transform(fov, aspect, far, near),
        perspective_transform(-right, right, -top, top, near, far),
    )


def test_near_and_far_map_to_clip_bounds() -> None:
    near, far = 0.1, 100.0
    mat = fov_perspective_transform(1.0, 1.0, far, near)

    clip_near = mat @ np.array([0.0, 0.0, -near, 1.0])
    clip_far = mat @ np.array([0.0, 0.0, -far, 1.0])
    assert math.isclose(clip_near[2] / clip_near[3], -1.0)
    assert math.isclose(clip_far[2] / clip_far[3], 1.0)


def test_asymmetric_frustum_shifts_center() -> None:
    mat = perspective_transform(0.0, 2.0, -1.0, 1.0, 1.0, 10.0)
    clip = mat @ np.array([1.0, 0.0, -1.0, 1.0])
    assert math.isclose(clip[0] / clip[3], 0.0, abs_tol=1e-12)
