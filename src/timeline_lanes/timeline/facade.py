"""Timeline public facade for rendering layers and hosts."""

from __future__ import annotations

from datetime import date

from timeline_lanes.interaction.drag import DragKind
from timeline_lanes.interaction.rename import EditSession
from timeline_lanes.layout.models import DateWindow, PositionedItem, TimelineItem
from timeline_lanes.timeline.service import TimelineService


class Timeline:
    def __init__(self, service: TimelineService) -> None:
        self._service = service

    def positioned_items(self) -> list[PositionedItem]:
        return self._service.positioned_items()

    def window(self) -> DateWindow:
        return self._service.window()

    def get_scale(self) -> float:
        return self._service.scale

    def get_edit_session(self) -> EditSession | None:
        return self._service.edit_session

    def set_viewport_width(self, width: float | None) -> None:
        self._service.set_viewport_width(width)

    def zoom_in(self) -> float:
        return self._service.zoom_in()

    def zoom_out(self) -> float:
        return self._service.zoom_out()

    def reset_lanes(self) -> None:
        self._service.reset_lanes()

    def reposition_item(self, item_id: int, start: date | str, end: date | str) -> TimelineItem:
        return self._service.reposition_item(item_id, start, end)

    def rename_item(self, item_id: int, name: str) -> TimelineItem:
        return self._service.rename_item(item_id, name)

    def start_drag(self, item_id: int, kind: DragKind | str, pointer_x: float, pointer_y: float) -> bool:
        return self._service.pointer_down(item_id, kind, pointer_x, pointer_y)

    def drag_to(self, pointer_x: float, pointer_y: float) -> None:
        self._service.pointer_move(pointer_x, pointer_y)

    def end_drag(self) -> None:
        self._service.pointer_up()
