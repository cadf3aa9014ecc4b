"""Pointer drag state machine for resizing and moving timeline items."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from typing import Callable

from timeline_lanes.layout.models import TimelineItem

logger = logging.getLogger(__name__)

ReleaseListener = Callable[[], None]

RESIZER_WIDTH = 6


def snap_days(delta: float) -> int:
    """Round a fractional day delta half-up to whole days."""
    return math.floor(delta + 0.5)


class DragKind(str, Enum):
    RESIZE_START = "start"
    RESIZE_END = "end"
    MOVE = "move"


def grip_for_offset(x_in_item: float, item_width: float, resizer_width: float = RESIZER_WIDTH) -> DragKind:
    """Pick the gesture for a press ``x_in_item`` pixels into a bar of ``item_width``.

    The start grip wins on bars narrower than two grips.
    """
    if x_in_item <= resizer_width:
        return DragKind.RESIZE_START
    if x_in_item >= item_width - resizer_width:
        return DragKind.RESIZE_END
    return DragKind.MOVE


@dataclass(frozen=True, slots=True)
class DragSession:
    item_id: int
    kind: DragKind
    anchor_day_offset: float
    anchor_pointer_y: float
    anchor_date: date
    anchor_lane: int | None = None
    duration_days: int = 0


@dataclass(frozen=True, slots=True)
class DragUpdate:
    """Dates to write back for one pointer-move tick, plus an optional manual lane."""

    item_id: int
    start: date
    end: date
    lane: int | None = None


class PointerReleaseHub:
    """Process-wide pointer-up dispatch, fed by whatever owns the event loop."""

    def __init__(self) -> None:
        self._listeners: list[ReleaseListener] = []

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def add_listener(self, listener: ReleaseListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: ReleaseListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self) -> None:
        for listener in list(self._listeners):
            listener()


class DragStateMachine:
    """``Idle`` when :attr:`session` is ``None``, otherwise ``Dragging``.

    Entering ``Dragging`` subscribes to the release hub; every exit path goes
    through :meth:`_end_session`, which unsubscribes.
    """

    def __init__(self, release_hub: PointerReleaseHub | None = None) -> None:
        self.release_hub = release_hub or PointerReleaseHub()
        self.session: DragSession | None = None
        self._subscribed = False

    @property
    def is_active(self) -> bool:
        return self.session is not None

    def is_dragging(self, item_id: int) -> bool:
        return self.session is not None and self.session.item_id == item_id

    def pointer_down(
        self,
        item: TimelineItem,
        kind: DragKind,
        day_offset: float | None,
        pointer_y: float,
        lane: int | None = None,
    ) -> bool:
        if self.session is not None or day_offset is None:
            return False
        kind = DragKind(kind)
        self.session = DragSession(
            item_id=item.item_id,
            kind=kind,
            anchor_day_offset=day_offset,
            anchor_pointer_y=pointer_y,
            anchor_date=item.end if kind is DragKind.RESIZE_END else item.start,
            anchor_lane=lane if kind is DragKind.MOVE else None,
            duration_days=item.duration_days,
        )
        self.release_hub.add_listener(self._on_global_release)
        self._subscribed = True
        logger.debug("Drag %s started on item %d at day %.2f", kind.value, item.item_id, day_offset)
        return True

    def pointer_move(
        self,
        item: TimelineItem,
        day_offset: float | None,
        lane_under_pointer: int | None = None,
    ) -> DragUpdate | None:
        session = self.session
        if session is None or day_offset is None or item.item_id != session.item_id:
            return None

        day_delta = snap_days(day_offset - session.anchor_day_offset)
        candidate = session.anchor_date + timedelta(days=day_delta)

        if session.kind is DragKind.RESIZE_START:
            if candidate > item.end:
                logger.debug("Rejected start %s past end %s for item %d", candidate, item.end, item.item_id)
                return None
            return DragUpdate(item_id=item.item_id, start=candidate, end=item.end)

        if session.kind is DragKind.RESIZE_END:
            if candidate < item.start:
                logger.debug("Rejected end %s before start %s for item %d", candidate, item.start, item.item_id)
                return None
            return DragUpdate(item_id=item.item_id, start=item.start, end=candidate)

        lane: int | None = None
        if lane_under_pointer is not None and lane_under_pointer != session.anchor_lane:
            lane = lane_under_pointer
        return DragUpdate(
            item_id=item.item_id,
            start=candidate,
            end=candidate + timedelta(days=session.duration_days),
            lane=lane,
        )

    def pointer_up(self) -> bool:
        return self._end_session("pointer-up")

    def cancel(self) -> bool:
        return self._end_session("cancel")

    def _on_global_release(self) -> None:
        self._end_session("global pointer-up")

    def _end_session(self, reason: str) -> bool:
        if self._subscribed:
            self.release_hub.remove_listener(self._on_global_release)
            self._subscribed = False
        if self.session is None:
            return False
        logger.debug("Drag on item %d ended (%s)", self.session.item_id, reason)
        self.session = None
        return True
