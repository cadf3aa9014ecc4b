"""Conversions between date space, day offsets and pixel space."""

from __future__ import annotations

import math
from datetime import date

from timeline_lanes.config import TimelineSettings
from timeline_lanes.layout.models import DateWindow


class ZoomScale:
    def __init__(self, settings: TimelineSettings | None = None) -> None:
        self._settings = settings or TimelineSettings()
        self.value = self._settings.clamp_scale(self._settings.initial_scale)

    def zoom_in(self) -> float:
        self.value = self._settings.clamp_scale(self.value * self._settings.zoom_step)
        return self.value

    def zoom_out(self) -> float:
        self.value = self._settings.clamp_scale(self.value / self._settings.zoom_step)
        return self.value


class CoordinateMapper:
    """Maps a :class:`DateWindow` onto pixels at a given zoom scale.

    Horizontal offsets are real-valued days from ``window.start``; nothing
    here rounds. Vertical positions map onto lane rows of ``lane_height``.
    """

    def __init__(self, window: DateWindow, scale: float, settings: TimelineSettings | None = None) -> None:
        self.window = window
        self.scale = scale
        self.settings = settings or TimelineSettings()

    @property
    def day_width(self) -> float:
        return self.scale * self.settings.day_pixel_unit

    @property
    def timeline_width(self) -> float:
        return self.window.total_days * self.day_width

    def date_to_offset_days(self, value: date) -> float:
        return float((value - self.window.start).days)

    def offset_days_to_pixels(self, offset: float) -> float:
        return offset * self.day_width

    def pixels_to_day_offset(self, pixel_x: float, viewport_width: float) -> float | None:
        """Day offset under ``pixel_x``, or ``None`` outside ``[0, viewport_width]``.

        ``viewport_width`` is the rendered timeline width, so one day spans
        ``viewport_width / total_days`` pixels. Zoom is already in the
        rendered width, so scale is not divided out again; this departs from
        the older ``viewport_width / (total_days * scale)`` mapping whenever
        scale != 1 and keeps it the inverse of :meth:`offset_days_to_pixels`.
        """
        if self.window.total_days <= 0 or viewport_width <= 0:
            return None
        if pixel_x < 0 or pixel_x > viewport_width:
            return None
        return pixel_x / (viewport_width / self.window.total_days)

    def pixel_y_to_lane(self, pixel_y: float) -> int | None:
        if pixel_y < 0:
            return None
        return max(0, math.floor(pixel_y / self.settings.lane_height))

    def lane_to_pixel_y(self, lane: int) -> float:
        return lane * self.settings.lane_height
