"""Camera handle safe to share between threads.

Each method takes the lock for the duration of its own call only. Hosts that
need several calls to observe one consistent camera use ``locked()``.
"""

from __future__ import annotations

from contextlib import contextmanager
from threading import Lock
from typing import Iterator

from ..core.camera import ButtonState, Camera, MouseButton
from ..core.transforms import to_column_major


class LockedCamera:
    def __init__(self, camera: Camera | None = None) -> None:
        self._camera = camera or Camera()
        self._lock = Lock()

    @contextmanager
    def locked(self) -> Iterator[Camera]:
        with self._lock:
            yield self._camera

    def update(self, elapsed_millis: float, window_width: float, window_height: float) -> None:
        with self._lock:
            self._camera.update(elapsed_millis / 1000.0, window_width, window_height)

    def get_clipspace_transform(self) -> list[float]:
        """Current world to clipspace matrix as 16 column-major floats."""
        with self._lock:
            matrix = self._camera.get_clipspace_transform()
        return to_column_major(matrix)

    def handle_scroll(self, pixel_delta: float) -> None:
        with self._lock:
            self._camera.handle_scroll(pixel_delta)

    def handle_mouse_move(self, x: float, y: float) -> None:
        with self._lock:
            self._camera.handle_mouse_move(x, y)

    def handle_mouse_input(self, button: MouseButton, action: ButtonState) -> None:
        with self._lock:
            self._camera.handle_mouse_input(button, action)
