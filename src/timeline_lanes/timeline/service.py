"""Timeline service: working item copy, lane overrides, zoom and interaction state."""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Mapping

from timeline_lanes.config import TimelineSettings
from timeline_lanes.interaction.drag import DragKind, DragStateMachine, DragUpdate, PointerReleaseHub
from timeline_lanes.interaction.rename import CANCEL_KEYS, COMMIT_KEYS, EditSession, InlineRenameEditor
from timeline_lanes.layout.coords import CoordinateMapper, ZoomScale
from timeline_lanes.layout.lanes import assign_lanes, visible_lane_rows
from timeline_lanes.layout.models import (
    DateWindow,
    InvalidItemError,
    PositionedItem,
    TimelineItem,
    ingest_items,
    parse_date,
)
from timeline_lanes.layout.window import HeaderDay, compute_date_window, window_days

logger = logging.getLogger(__name__)


class TimelineService:
    def __init__(
        self,
        items: Iterable[TimelineItem | Mapping[str, Any]] = (),
        settings: TimelineSettings | None = None,
        release_hub: PointerReleaseHub | None = None,
        today: date | None = None,
    ) -> None:
        self.settings = settings or TimelineSettings()
        self._items: list[TimelineItem] = ingest_items(items)
        self._manual_lanes: dict[int, int] = {}
        self._zoom = ZoomScale(self.settings)
        self._viewport_width: float | None = None
        self._today = today
        self.drag = DragStateMachine(release_hub)
        self.editor = InlineRenameEditor()

    @property
    def items(self) -> list[TimelineItem]:
        return [TimelineItem(item.item_id, item.start, item.end, item.name) for item in self._items]

    @property
    def manual_lanes(self) -> dict[int, int]:
        return dict(self._manual_lanes)

    @property
    def scale(self) -> float:
        return self._zoom.value

    @property
    def viewport_width(self) -> float:
        if self._viewport_width is None:
            return self.mapper().timeline_width
        return self._viewport_width

    def set_viewport_width(self, width: float | None) -> None:
        if width is not None and width < 0:
            raise ValueError("viewport width must be >= 0")
        self._viewport_width = width

    def window(self) -> DateWindow:
        return compute_date_window(self._items, padding_days=self.settings.padding_days, today=self._today)

    def mapper(self) -> CoordinateMapper:
        return CoordinateMapper(self.window(), self.scale, self.settings)

    def positioned_items(self) -> list[PositionedItem]:
        if not self._items:
            return []
        return assign_lanes(self._items, self.window(), self._manual_lanes)

    def lane_rows(self) -> int:
        return visible_lane_rows(self.positioned_items())

    def header_days(self) -> list[HeaderDay]:
        return window_days(self.window())

    def get_item(self, item_id: int) -> TimelineItem:
        return self._items[self._index_of(item_id)]

    def is_dragging(self, item_id: int) -> bool:
        return self.drag.is_dragging(item_id)

    @property
    def edit_session(self) -> EditSession | None:
        return self.editor.session

    def zoom_in(self) -> float:
        return self._zoom.zoom_in()

    def zoom_out(self) -> float:
        return self._zoom.zoom_out()

    def reset_lanes(self) -> None:
        if self._manual_lanes:
            logger.info("Clearing %d manual lane overrides", len(self._manual_lanes))
        self._manual_lanes.clear()

    def reposition_item(
        self,
        item_id: int,
        start: date | str,
        end: date | str,
    ) -> TimelineItem:
        new_start = parse_date(start)
        new_end = parse_date(end)
        if new_end < new_start:
            raise InvalidItemError(f"item {item_id}: end {new_end} is before start {new_start}")
        index = self._index_of(item_id)
        current = self._items[index]
        self._items[index] = TimelineItem(item_id, new_start, new_end, current.name)
        return self._items[index]

    def rename_item(self, item_id: int, name: str) -> TimelineItem:
        self.begin_rename(item_id)
        self.update_rename_buffer(name)
        return self.commit_rename() or self.get_item(item_id)

    def pointer_down(self, item_id: int, kind: DragKind | str, pointer_x: float, pointer_y: float) -> bool:
        item = self.get_item(item_id)
        day_offset = self.mapper().pixels_to_day_offset(pointer_x, self.viewport_width)
        lane = next((entry.lane for entry in self.positioned_items() if entry.item_id == item_id), None)
        return self.drag.pointer_down(item, DragKind(kind), day_offset, pointer_y, lane=lane)

    def pointer_move(self, pointer_x: float, pointer_y: float) -> DragUpdate | None:
        session = self.drag.session
        if session is None:
            return None
        mapper = self.mapper()
        update = self.drag.pointer_move(
            self.get_item(session.item_id),
            mapper.pixels_to_day_offset(pointer_x, self.viewport_width),
            mapper.pixel_y_to_lane(pointer_y),
        )
        if update is not None:
            self._apply_drag_update(update)
        return update

    def pointer_up(self) -> bool:
        return self.drag.pointer_up()

    def _apply_drag_update(self, update: DragUpdate) -> None:
        index = self._index_of(update.item_id)
        current = self._items[index]
        self._items[index] = TimelineItem(update.item_id, update.start, update.end, current.name)
        if update.lane is not None and self._manual_lanes.get(update.item_id) != update.lane:
            logger.debug("Item %d moved to manual lane %d", update.item_id, update.lane)
            self._manual_lanes[update.item_id] = update.lane

    def begin_rename(self, item_id: int) -> EditSession:
        return self.editor.begin(item_id, self.get_item(item_id).name)

    def update_rename_buffer(self, text: str) -> None:
        self.editor.update(text)

    def commit_rename(self) -> TimelineItem | None:
        session = self.editor.commit()
        if session is None:
            return None
        index = self._index_of(session.item_id)
        current = self._items[index]
        self._items[index] = TimelineItem(current.item_id, current.start, current.end, session.buffer)
        logger.debug("Renamed item %d", session.item_id)
        return self._items[index]

    def cancel_rename(self) -> None:
        self.editor.cancel()

    def handle_rename_key(self, key: str) -> TimelineItem | None:
        if key in COMMIT_KEYS:
            return self.commit_rename()
        if key in CANCEL_KEYS:
            self.cancel_rename()
        return None

    def _index_of(self, item_id: int) -> int:
        for index, item in enumerate(self._items):
            if item.item_id == item_id:
                return index
        raise KeyError(f"TimelineItem '{item_id}' not found")
