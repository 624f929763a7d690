"""Core camera math, independent of any windowing toolkit."""

from .camera import ButtonState, Camera, CameraPose, CamState, MouseButton  # noqa: F401
from .config import CameraConfig, config_from_dict, default_config  # noqa: F401
from .perspective import NEAR_PLANE, fov_perspective_transform, perspective_transform  # noqa: F401
