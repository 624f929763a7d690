"""Launch the demo viewer."""

from __future__ import annotations

import logging
import sys

from PySide6 import QtWidgets

from ..core.config import CameraConfig
from .window import MainWindow


def main(argv: list[str] | None = None, config: CameraConfig | None = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    qt_app = QtWidgets.QApplication.instance() or QtWidgets.QApplication(
        sys.argv if argv is None else argv
    )
    window = MainWindow(config or CameraConfig(distance=5.0, far=20.0, pan_enabled=True))
    window.show()
    return qt_app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
