"""Orbiting arcball camera.

The camera orbits ``target`` at ``distance`` along its rotated +Z axis. Input
handlers drive a small state machine:

- Idle: no gesture in progress.
- Tumble: left drag, rotates the camera with an arcball.
- Pan: right drag, slides the target in the view plane (only when enabled).

Call ``update`` once per frame before reading transforms so the aspect ratio
and arcball radius follow the viewport.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

import numpy as np

from .config import CameraConfig, default_config
from .math.quat import (
    quat_conj,
    quat_from_arc,
    quat_from_axis_angle,
    quat_mul,
    quat_normalize,
    quat_rotate,
    quat_to_rotmat,
)
from .math.vector import ArrayF, as_vec
from .perspective import fov_perspective_transform
from .transforms import rotation_matrix, translation_matrix

logger = logging.getLogger(__name__)

UNIT_X = np.array([1.0, 0.0, 0.0], dtype=np.float64)
UNIT_Y = np.array([0.0, 1.0, 0.0], dtype=np.float64)
UNIT_Z = np.array([0.0, 0.0, 1.0], dtype=np.float64)


class CamState(Enum):
    IDLE = "idle"
    TUMBLE = "tumble"
    PAN = "pan"


class MouseButton(Enum):
    LEFT = "left"
    RIGHT = "right"


class ButtonState(Enum):
    PRESSED = "pressed"
    RELEASED = "released"


@dataclass(frozen=True, slots=True)
class CameraPose:
    target: ArrayF
    distance: float
    rotation: ArrayF


class Camera:
    def __init__(self, config: CameraConfig | None = None) -> None:
        cfg = config or default_config()
        self.config = cfg
        self.state = CamState.IDLE
        self.window_width = 1.0
        self.window_height = 1.0
        self.aspect_ratio = 1.0

        self._target = as_vec(cfg.target, 3, "target").copy()
        self._rotation = quat_from_axis_angle(UNIT_Y, cfg.yaw)
        self.distance = float(cfg.distance)
        self.field_of_view = float(cfg.field_of_view)
        self.near = float(cfg.near)
        self.far = float(cfg.far)
        self.scroll_modifier = float(cfg.scroll_modifier)
        self.min_distance = cfg.min_distance
        self.pan_enabled = cfg.pan_enabled

        self.prev_mouse_coords = np.zeros(2, dtype=np.float64)
        self.original_rotation = self._rotation.copy()
        self.original_sphere_point = UNIT_Z.copy()
        self.original_target = self._target.copy()
        self.pan_start_coords = np.zeros(2, dtype=np.float64)

        self.default_pose = self.current_pose()

    @property
    def target(self) -> ArrayF:
        return self._target

    @target.setter
    def target(self, value: ArrayF) -> None:
        self.translate(as_vec(value, 3, "target") - self._target)

    @property
    def rotation(self) -> ArrayF:
        """Copy of the unit quaternion; assign to change it."""
        return self._rotation.copy()

    @rotation.setter
    def rotation(self, value: ArrayF) -> None:
        self._rotation = quat_normalize(as_vec(value, 4, "rotation"))

    def update(self, elapsed_time: float, window_width: float, window_height: float) -> None:
        """Per-frame refresh of viewport size and aspect ratio.

        ``elapsed_time`` is accepted for frame-timed behavior but nothing
        consumes it yet.
        """
        self.window_width = float(window_width)
        self.window_height = float(window_height)
        self.aspect_ratio = self.window_width / self.window_height

    def mouse_to_sphere_point(self, coords: ArrayF) -> ArrayF:
        """Project pixel coordinates onto the arcball hemisphere.

        The control circle is inscribed in the shorter viewport side. Points
        outside it are clamped onto its rim (the sphere's equator).
        """
        mouse_pixels = as_vec(coords, 2, "coords")
        if self.aspect_ratio >= 1.0:
            pixel_radius = self.window_height / 2.0
        else:
            pixel_radius = self.window_width / 2.0
        screen_center = np.array([self.window_width, self.window_height]) * 0.5
        mouse_point = (mouse_pixels - screen_center) / pixel_radius

        radius_sq = float(mouse_point @ mouse_point)
        if radius_sq > 1.0:
            edge = mouse_point / math.sqrt(radius_sq)
            return np.array([edge[0], edge[1], 0.0], dtype=np.float64)
        z = math.sqrt(1.0 - radius_sq)
        return np.array([mouse_point[0], mouse_point[1], z], dtype=np.float64)

    def handle_mouse_move(self, x: float, y: float) -> None:
        self.prev_mouse_coords = np.array([x, y], dtype=np.float64)
        if self.state is CamState.TUMBLE:
            sphere_point = self.mouse_to_sphere_point(self.prev_mouse_coords)
            move_rotation = quat_from_arc(self.original_sphere_point, sphere_point)
            # Compose against the gesture's starting orientation, not the last frame.
            self._rotation = quat_normalize(quat_mul(move_rotation, self.original_rotation))
        elif self.state is CamState.PAN:
            self._pan_to(self.prev_mouse_coords)

    def handle_mouse_input(self, button: MouseButton, action: ButtonState) -> None:
        previous = self.state
        if action is ButtonState.RELEASED:
            self.state = CamState.IDLE
        elif self.state is CamState.IDLE and button is MouseButton.LEFT:
            self.original_sphere_point = self.mouse_to_sphere_point(self.prev_mouse_coords)
            self.original_rotation = self._rotation.copy()
            self.state = CamState.TUMBLE
        elif self.state is CamState.IDLE and button is MouseButton.RIGHT and self.pan_enabled:
            self.original_target = self._target.copy()
            self.pan_start_coords = self.prev_mouse_coords.copy()
            self.state = CamState.PAN
        if self.state is not previous:
            logger.debug("camera state %s -> %s", previous.value, self.state.value)

    def handle_scroll(self, pixel_delta: float) -> None:
        """Zoom by scaling the distance multiplicatively."""
        self.distance *= 1.0 + pixel_delta * self.scroll_modifier
        if self.min_distance is not None:
            self.distance = max(self.distance, self.min_distance)

    def translate(self, delta: ArrayF) -> None:
        delta = as_vec(delta, 3, "delta")
        self._target = self._target + delta
        # Pan offsets are measured from original_target; keep it in step.
        self.original_target = self.original_target + delta

    def _pan_to(self, coords: ArrayF) -> None:
        # World units per pixel at the target's depth.
        view_height = 2.0 * self.distance * math.tan(0.5 * self.field_of_view)
        scale = view_height / self.window_height
        dx, dy = (coords - self.pan_start_coords) * scale
        right = quat_rotate(self._rotation, UNIT_X)
        up = quat_rotate(self._rotation, UNIT_Y)
        self._target = self.original_target - right * dx + up * dy

    def get_position(self) -> ArrayF:
        return self._target + quat_rotate(self._rotation, UNIT_Z * self.distance)

    def get_view_transform(self) -> ArrayF:
        """World to eye-space transform."""
        inverse_rotation = rotation_matrix(quat_to_rotmat(quat_conj(self._rotation)))
        return inverse_rotation @ translation_matrix(-self.get_position())

    def get_projection_transform(self) -> ArrayF:
        return fov_perspective_transform(
            self.field_of_view, self.aspect_ratio, self.far, self.near
        )

    def get_clipspace_transform(self) -> ArrayF:
        """World to clipspace transform; usually the matrix a renderer wants."""
        return self.get_projection_transform() @ self.get_view_transform()

    def current_pose(self) -> CameraPose:
        return CameraPose(
            target=self._target.copy(),
            distance=self.distance,
            rotation=self._rotation.copy(),
        )

    def set_current_as_default(self) -> None:
        self.default_pose = self.current_pose()
        logger.debug("saved default pose at distance %.3f", self.distance)

    def transition_to_default(self) -> None:
        """Jump back to the saved default pose and end any gesture."""
        pose = self.default_pose
        self._target = pose.target.copy()
        self.distance = pose.distance
        self._rotation = pose.rotation.copy()
        self.state = CamState.IDLE
        logger.debug("restored default pose")
