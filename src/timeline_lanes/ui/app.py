"""Desktop shell: zoom and lane controls around a scrollable timeline."""

from __future__ import annotations

import logging
import sys
from datetime import datetime

from PySide6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from timeline_lanes.config import TimelineSettings
from timeline_lanes.interaction.drag import PointerReleaseHub
from timeline_lanes.sample import SAMPLE_ITEMS
from timeline_lanes.timeline.service import TimelineService
from timeline_lanes.ui.timeline_view import GlobalReleaseFilter, TimelineView


class TimelineWindow(QMainWindow):
    def __init__(self, service: TimelineService | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Timeline")
        self.resize(1200, 640)
        self.release_hub = PointerReleaseHub()
        self.service = service or TimelineService(
            SAMPLE_ITEMS,
            settings=TimelineSettings.from_env(),
            release_hub=self.release_hub,
        )
        self._build_ui()

    def _build_ui(self) -> None:
        root = QWidget(self)
        layout = QVBoxLayout(root)

        controls = QHBoxLayout()
        for label, handler in (
            ("Zoom In", self._on_zoom_in),
            ("Zoom Out", self._on_zoom_out),
            ("Reset Lanes", self._on_reset_lanes),
        ):
            button = QPushButton(label)
            button.clicked.connect(handler)
            controls.addWidget(button)
        controls.addStretch(1)
        self.status_label = QLabel("")
        controls.addWidget(self.status_label)
        layout.addLayout(controls)

        self.view = TimelineView(self.service)
        scroll = QScrollArea()
        scroll.setWidget(self.view)
        layout.addWidget(scroll, 1)

        self.setCentralWidget(root)

    def _on_zoom_in(self) -> None:
        self.service.zoom_in()
        self.view.refresh()
        self._set_status(f"scale {self.service.scale:.2f}")

    def _on_zoom_out(self) -> None:
        self.service.zoom_out()
        self.view.refresh()
        self._set_status(f"scale {self.service.scale:.2f}")

    def _on_reset_lanes(self) -> None:
        self.service.reset_lanes()
        self.view.refresh()
        self._set_status("lanes reset")

    def _set_status(self, message: str) -> None:
        now = datetime.now().strftime("%H:%M:%S")
        self.status_label.setText(f"[{now}] {message}")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = QApplication(sys.argv)
    window = TimelineWindow()
    release_filter = GlobalReleaseFilter(window.service.drag.release_hub, window.view.refresh, app)
    app.installEventFilter(release_filter)
    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
