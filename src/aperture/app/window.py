"""Main window hosting the camera viewport."""

from __future__ import annotations

from PySide6 import QtCore, QtGui, QtWidgets

from ..core.config import CameraConfig
from .viewport import ViewportWidget


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, config: CameraConfig | None = None) -> None:
        super().__init__()
        self.resize(1024, 1024)
        self.setWindowTitle("Aperture - Cube Example")

        self._viewport = ViewportWidget(self, config=config)
        self._viewport.camera_changed.connect(self.statusBar().showMessage)
        self.setCentralWidget(self._viewport)

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(16)
        self._timer.timeout.connect(self._viewport.tick)
        self._timer.start()

        reset = QtGui.QAction("Reset View", self)
        reset.setShortcut(QtGui.QKeySequence("Ctrl+R"))
        reset.triggered.connect(self._viewport.reset_view)
        self.menuBar().addMenu("&View").addAction(reset)

    @property
    def viewport(self) -> ViewportWidget:
        return self._viewport
