"""Camera defaults and construction from plain mappings."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Mapping

from .perspective import NEAR_PLANE


@dataclass(frozen=True, slots=True)
class CameraConfig:
    target: tuple[float, float, float] = (0.0, 0.0, 0.0)
    distance: float = 50.0
    # Rotation about +Y giving the initial orbit position, radians.
    yaw: float = -0.5 * math.pi
    field_of_view: float = 0.5 * math.pi
    near: float = NEAR_PLANE
    far: float = 100.0
    scroll_modifier: float = 1.0 / 200.0
    min_distance: float | None = None
    pan_enabled: bool = False


def default_config() -> CameraConfig:
    return CameraConfig()


def config_from_dict(data: Mapping[str, Any]) -> CameraConfig:
    """Build a config from a mapping; missing keys keep their defaults."""
    known = {f.name for f in fields(CameraConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"unknown camera config keys: {', '.join(unknown)}")
    values: dict[str, Any] = {}
    for key, value in data.items():
        if key == "target":
            target = tuple(float(v) for v in value)
            if len(target) != 3:
                raise ValueError("target must have 3 components")
            values[key] = target
        elif key == "pan_enabled":
            if not isinstance(value, bool):
                raise ValueError("pan_enabled must be a bool")
            values[key] = value
        elif key == "min_distance":
            values[key] = None if value is None else float(value)
        else:
            values[key] = float(value)
    return replace(default_config(), **values)


def config_to_dict(cfg: CameraConfig) -> dict[str, Any]:
    data = asdict(cfg)
    data["target"] = list(cfg.target)
    return data
