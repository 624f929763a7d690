"""Demo viewport: nested wireframe cubes drawn through the arcball camera."""

from __future__ import annotations

import time

import numpy as np
from PySide6 import QtCore, QtWidgets
from vispy import app, gloo

from ..core.camera import Camera
from ..core.config import CameraConfig
from ..core.transforms import scale_matrix
from .event_handler import camera_event_handler

app.use_app("pyside6")


VERTEX_SHADER = """
attribute vec3 position;
uniform mat4 u_transform;
void main() {
    gl_Position = u_transform * vec4(position, 1.0);
}
"""

FRAGMENT_SHADER = """
uniform vec4 u_color;
void main() {
    gl_FragColor = u_color;
}
"""

SEGMENTS = 50


def cube_outline() -> tuple[np.ndarray, np.ndarray]:
    """Corners of the [-1, 1] cube and the index pairs of its 12 edges."""
    vertices = np.array(
        [[x, y, z] for x in (-1.0, 1.0) for y in (-1.0, 1.0) for z in (-1.0, 1.0)],
        dtype=np.float32,
    )
    edges = np.array(
        [0, 1, 1, 3, 3, 2, 2, 0,
         4, 5, 5, 7, 7, 6, 6, 4,
         0, 4, 1, 5, 3, 7, 2, 6],
        dtype=np.uint32,
    )
    return vertices, edges


def cube_color(frac: float) -> tuple[float, float, float, float]:
    return (frac, 0.134 * frac, 1.0 - frac, 0.5)


class CameraCanvas(app.Canvas):
    def __init__(self, camera: Camera, **kwargs: object) -> None:
        super().__init__(keys="interactive", size=(800, 600), **kwargs)
        self.camera = camera
        vertices, edges = cube_outline()
        self._program = gloo.Program(VERTEX_SHADER, FRAGMENT_SHADER)
        self._program["position"] = vertices
        self._edges = gloo.IndexBuffer(edges)
        self._last_frame = time.perf_counter()
        gloo.set_state(clear_color=(0.7654, 0.567, 0.1245, 1.0), blend=True,
                       blend_func=("src_alpha", "one_minus_src_alpha"))

    def on_resize(self, event: object) -> None:
        gloo.set_viewport(0, 0, *self.physical_size)

    def on_draw(self, event: object) -> None:
        now = time.perf_counter()
        elapsed = now - self._last_frame
        self._last_frame = now
        width, height = self.size
        self.camera.update(elapsed, max(width, 1), max(height, 1))

        world = self.camera.get_clipspace_transform()
        gloo.clear()
        for i in range(1, SEGMENTS):
            frac = i / SEGMENTS
            # GL reads uniforms column-major; numpy storage is row-major.
            self._program["u_transform"] = (world @ scale_matrix(frac)).T.astype(np.float32)
            self._program["u_color"] = cube_color(frac)
            self._program.draw("lines", self._edges)

    def on_mouse_press(self, event: object) -> None:
        camera_event_handler(self.camera, event)

    def on_mouse_release(self, event: object) -> None:
        camera_event_handler(self.camera, event)

    def on_mouse_move(self, event: object) -> None:
        if camera_event_handler(self.camera, event):
            self.update()

    def on_mouse_wheel(self, event: object) -> None:
        if camera_event_handler(self.camera, event):
            self.update()

    def on_key_press(self, event: object) -> None:
        if camera_event_handler(self.camera, event):
            self.update()


class ViewportWidget(QtWidgets.QWidget):
    camera_changed = QtCore.Signal(str)

    def __init__(
        self,
        parent: QtWidgets.QWidget | None = None,
        config: CameraConfig | None = None,
    ) -> None:
        super().__init__(parent)
        self.camera = Camera(config)
        self._canvas = CameraCanvas(self.camera)
        self._canvas.events.draw.connect(self._on_drawn)

        layout = QtWidgets.QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self._canvas.native)

    def tick(self) -> None:
        self._canvas.update()

    def reset_view(self) -> None:
        self.camera.transition_to_default()
        self._canvas.update()

    def _on_drawn(self, event: object) -> None:
        x, y, z = self.camera.get_position()
        self.camera_changed.emit(
            f"eye ({x:.2f}, {y:.2f}, {z:.2f})  distance {self.camera.distance:.2f}"
            f"  mode {self.camera.state.value}"
        )
