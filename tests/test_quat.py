from __future__ import annotations

import numpy as np

from aperture.core.math.quat import (
    quat_from_arc,
    quat_from_axis_angle,
    quat_mul,
    quat_rotate,
    quat_to_rotmat,
)
from aperture.core.math.vector import unit


def test_quat_rotate_preserves_norm() -> None:
    rng = np.random.default_rng(123)
    v = rng.normal(size=(100, 3))
    axis = rng.normal(size=(100, 3))
    angle = rng.uniform(low=-np.pi, high=np.pi, size=(100,))
    q = quat_from_axis_angle(axis, angle)

    v_rot = quat_rotate(q, v)
    assert np.allclose(np.linalg.norm(v, axis=-1), np.linalg.norm(v_rot, axis=-1))


def test_quat_composition() -> None:
    rng = np.random.default_rng(456)
    v = rng.normal(size=(10, 3))
    q1 = quat_from_axis_angle(rng.normal(size=(10, 3)), rng.normal(size=(10,)))
    q2 = quat_from_axis_angle(rng.normal(size=(10, 3)), rng.normal(size=(10,)))

    v_seq = quat_rotate(q2, quat_rotate(q1, v))
    v_comp = quat_rotate(quat_mul(q2, q1), v)
    assert np.allclose(v_seq, v_comp, rtol=1e-12, atol=1e-12)


def test_rotmat_matches_quat_rotate() -> None:
    rng = np.random.default_rng(7)
    q = quat_from_axis_angle(rng.normal(size=3), 1.234)
    v = rng.normal(size=3)
    assert np.allclose(quat_to_rotmat(q) @ v, quat_rotate(q, v))


def test_quarter_turn_about_y() -> None:
    q = quat_from_axis_angle([0.0, 1.0, 0.0], -0.5 * np.pi)
    assert np.allclose(quat_rotate(q, [0.0, 0.0, 1.0]), [-1.0, 0.0, 0.0])


def test_arc_quat_doubles_angle_about_normal() -> None:
    t = 0.3
    a = np.array([0.0, 0.0, 1.0])
    b = np.array([np.sin(t), 0.0, np.cos(t)])
    q = quat_from_arc(a, b)
    expected = quat_from_axis_angle([0.0, 1.0, 0.0], 2.0 * t)
    assert np.allclose(q, expected)


def test_arc_quat_is_unit_for_sphere_points() -> None:
    rng = np.random.default_rng(99)
    a = unit(rng.normal(size=(50, 3)))
    b = unit(rng.normal(size=(50, 3)))
    q = quat_from_arc(a, b)
    assert np.allclose(np.linalg.norm(q, axis=-1), 1.0, atol=1e-12)
