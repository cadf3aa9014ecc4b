"""Timeline widget: draws positioned items and forwards pointer/keyboard events."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QEvent, QObject, QRectF, Qt
from PySide6.QtGui import QColor, QKeyEvent, QMouseEvent, QPainter, QPen
from PySide6.QtWidgets import QLineEdit, QWidget

from timeline_lanes.interaction.drag import RESIZER_WIDTH, PointerReleaseHub, grip_for_offset
from timeline_lanes.layout.models import PositionedItem, format_date
from timeline_lanes.timeline.service import TimelineService

HEADER_HEIGHT = 36
ITEM_MARGIN = 5


class GlobalReleaseFilter(QObject):
    """Application-wide event filter that feeds mouse releases into the hub."""

    def __init__(
        self,
        hub: PointerReleaseHub,
        after_release: Callable[[], None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._hub = hub
        self._after_release = after_release

    def eventFilter(self, _watched: QObject, event: QEvent) -> bool:  # type: ignore[override]
        if event.type() == QEvent.Type.MouseButtonRelease and self._hub.listener_count:
            self._hub.dispatch()
            if self._after_release is not None:
                self._after_release()
        return False


class _RenameField(QLineEdit):
    def __init__(self, view: TimelineView) -> None:
        super().__init__(view)
        self._view = view

    def keyPressEvent(self, event: QKeyEvent) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Escape:
            self._view.finish_rename("Escape")
            return
        if event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter):
            self._view.finish_rename("Enter")
            return
        super().keyPressEvent(event)


class TimelineView(QWidget):
    def __init__(self, service: TimelineService, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._service = service
        self._rename_field: _RenameField | None = None
        self.setMouseTracking(True)
        self.refresh()

    @property
    def service(self) -> TimelineService:
        return self._service

    def refresh(self) -> None:
        mapper = self._service.mapper()
        self._service.set_viewport_width(mapper.timeline_width)
        lane_height = self._service.settings.lane_height
        self.setFixedSize(
            max(int(mapper.timeline_width), 200),
            HEADER_HEIGHT + int(self._service.lane_rows() * lane_height),
        )
        self.update()

    def _item_rect(self, item: PositionedItem) -> QRectF:
        settings = self._service.settings
        left, width, top = item.pixel_rect(self._service.scale, settings.day_pixel_unit, settings.lane_height)
        return QRectF(left, HEADER_HEIGHT + top + ITEM_MARGIN, width, settings.lane_height - 2 * ITEM_MARGIN)

    def _item_at(self, x: float, y: float) -> tuple[PositionedItem, QRectF] | None:
        for item in self._service.positioned_items():
            rect = self._item_rect(item)
            if rect.contains(x, y):
                return item, rect
        return None

    def mousePressEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if event.button() != Qt.MouseButton.LeftButton:
            return
        pos = event.position()
        hit = self._item_at(pos.x(), pos.y())
        if hit is None:
            return
        item, rect = hit
        kind = grip_for_offset(pos.x() - rect.left(), rect.width())
        if self._service.pointer_down(item.item_id, kind, pos.x(), pos.y() - HEADER_HEIGHT):
            self.update()

    def mouseMoveEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        if self._service.drag.session is None:
            return
        pos = event.position()
        if self._service.pointer_move(pos.x(), pos.y() - HEADER_HEIGHT) is not None:
            self.refresh()

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        self._service.pointer_up()
        self.refresh()

    def mouseDoubleClickEvent(self, event: QMouseEvent) -> None:  # type: ignore[override]
        pos = event.position()
        hit = self._item_at(pos.x(), pos.y())
        if hit is None:
            return
        item, rect = hit
        self._close_rename_field()
        session = self._service.begin_rename(item.item_id)
        field = _RenameField(self)
        field.setText(session.buffer)
        field.setGeometry(rect.toRect())
        field.textEdited.connect(self._service.update_rename_buffer)
        field.editingFinished.connect(lambda: self.finish_rename("Enter"))
        field.show()
        field.setFocus()
        self._rename_field = field

    def finish_rename(self, key: str) -> None:
        if self._service.edit_session is None:
            return
        self._service.handle_rename_key(key)
        self._close_rename_field()
        self.refresh()

    def _close_rename_field(self) -> None:
        if self._rename_field is not None:
            field, self._rename_field = self._rename_field, None
            field.blockSignals(True)
            field.deleteLater()

    def paintEvent(self, _event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.fillRect(self.rect(), QColor(250, 250, 252))

        settings = self._service.settings
        day_width = self._service.scale * settings.day_pixel_unit

        painter.setPen(QPen(QColor(90, 96, 110), 1))
        for index, header_day in enumerate(self._service.header_days()):
            x = int(index * day_width)
            painter.drawLine(x, HEADER_HEIGHT - 6, x, HEADER_HEIGHT)
            if header_day.label is not None:
                painter.drawText(x + 2, 4, int(day_width * 2), HEADER_HEIGHT - 10, Qt.AlignmentFlag.AlignLeft, header_day.label)

        # Lane guides.
        painter.setPen(QPen(QColor(225, 228, 235), 1))
        for lane in range(self._service.lane_rows()):
            y = HEADER_HEIGHT + int(lane * settings.lane_height)
            painter.drawLine(0, y, self.width(), y)

        editing_id = self._service.editor.editing_item_id()
        for item in self._service.positioned_items():
            rect = self._item_rect(item)
            dragging = self._service.is_dragging(item.item_id)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QColor(52, 120, 246, 160 if dragging else 230))
            painter.drawRoundedRect(rect, 4, 4)
            painter.setBrush(QColor(30, 80, 190))
            painter.drawRect(QRectF(rect.left(), rect.top(), RESIZER_WIDTH, rect.height()))
            painter.drawRect(QRectF(rect.right() - RESIZER_WIDTH, rect.top(), RESIZER_WIDTH, rect.height()))
            if item.item_id == editing_id:
                continue
            painter.setPen(QPen(QColor(255, 255, 255), 1))
            text_rect = rect.adjusted(RESIZER_WIDTH + 2, 2, -RESIZER_WIDTH - 2, -2)
            painter.drawText(
                text_rect,
                Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignTop,
                f"{item.name}\n{format_date(item.start)} - {format_date(item.end)}",
            )
