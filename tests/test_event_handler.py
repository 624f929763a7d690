from __future__ import annotations

from types import SimpleNamespace

import numpy as np

from aperture.app.event_handler import WHEEL_PIXELS_PER_STEP, camera_event_handler
from aperture.core.camera import Camera, CamState


def _camera() -> Camera:
    cam = Camera()
    cam.update(0.0, 800, 600)
    return cam


def test_wheel_up_zooms_in() -> None:
    cam = _camera()
    event = SimpleNamespace(type="mouse_wheel", delta=np.array([0.0, 1.0]))
    assert camera_event_handler(cam, event)
    assert np.isclose(cam.distance, 50.0 * (1.0 - WHEEL_PIXELS_PER_STEP / 200.0))


def test_move_and_buttons_drive_tumble() -> None:
    cam = _camera()
    start = cam.rotation.copy()
    events = [
        SimpleNamespace(type="mouse_move", pos=np.array([400.0, 300.0])),
        SimpleNamespace(type="mouse_press", pos=np.array([400.0, 300.0]), button=1),
        SimpleNamespace(type="mouse_move", pos=np.array([400.0, 200.0])),
    ]
    for event in events:
        assert camera_event_handler(cam, event)
    assert cam.state is CamState.TUMBLE
    assert not np.allclose(cam.rotation, start)

    release = SimpleNamespace(type="mouse_release", pos=np.array([400.0, 200.0]), button=1)
    assert camera_event_handler(cam, release)
    assert cam.state is CamState.IDLE


def test_unhandled_events_are_reported() -> None:
    cam = _camera()
    middle = SimpleNamespace(type="mouse_press", pos=np.array([0.0, 0.0]), button=3)
    assert not camera_event_handler(cam, middle)
    assert not camera_event_handler(cam, SimpleNamespace(type="key_press", text="x"))
    assert not camera_event_handler(cam, SimpleNamespace(type="resize"))
    assert cam.state is CamState.IDLE


def test_key_shortcuts_save_and_restore_pose() -> None:
    cam = _camera()
    cam.translate([0.0, 1.0, 0.0])
    assert camera_event_handler(cam, SimpleNamespace(type="key_press", text="s"))
    saved = cam.get_position()

    cam.handle_scroll(100.0)
    assert camera_event_handler(cam, SimpleNamespace(type="key_press", text="d"))
    assert np.allclose(cam.get_position(), saved)
