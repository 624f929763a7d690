"""Headless arcball gesture: drag the pointer and report the eye position."""

from __future__ import annotations

import numpy as np

from aperture import ButtonState, Camera, MouseButton
from aperture.core.transforms import transform_point


if __name__ == "__main__":
    cam = Camera()
    cam.update(16.6, 800, 600)

    cam.handle_mouse_move(400, 300)
    cam.handle_mouse_input(MouseButton.LEFT, ButtonState.PRESSED)
    for step in range(0, 101, 20):
        cam.handle_mouse_move(400, 300 - step)
        eye = cam.get_position()
        print(
            f"drag {step:3d}px | eye=({eye[0]:8.3f}, {eye[1]:8.3f}, {eye[2]:8.3f}) "
            f"| |q|={np.linalg.norm(cam.rotation):.12f}"
        )
    cam.handle_mouse_input(MouseButton.LEFT, ButtonState.RELEASED)

    for delta in (100.0, -50.0):
        cam.handle_scroll(delta)
        print(f"scroll {delta:+.0f}px | distance={cam.distance:.3f}")

    clip = transform_point(cam.get_clipspace_transform(), np.zeros(3))
    print(f"origin in clipspace: {np.round(clip, 4)}")
