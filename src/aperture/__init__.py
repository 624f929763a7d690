"""Orbiting arcball camera for interactive 3D viewers."""

from .core import (  # noqa: F401
    ButtonState,
    Camera,
    CameraConfig,
    CameraPose,
    CamState,
    MouseButton,
    fov_perspective_transform,
    perspective_transform,
)

__version__ = "0.1.0"
