"""Open the nested-cube demo window (requires the `app` extra)."""

from __future__ import annotations

from aperture.app.main import main
from aperture.core.config import CameraConfig


if __name__ == "__main__":
    raise SystemExit(main(config=CameraConfig(distance=4.0, field_of_view=1.0, far=20.0, pan_enabled=True)))
