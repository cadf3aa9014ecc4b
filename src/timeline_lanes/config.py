"""Timeline geometry settings with environment overrides."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

DAY_PIXEL_UNIT = 30
LANE_HEIGHT = 50
PADDING_DAYS = 2
MIN_SCALE = 0.5
MAX_SCALE = 5.0
ZOOM_STEP = 1.5


@dataclass(frozen=True, slots=True)
class TimelineSettings:
    day_pixel_unit: float = DAY_PIXEL_UNIT
    lane_height: float = LANE_HEIGHT
    padding_days: int = PADDING_DAYS
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    zoom_step: float = ZOOM_STEP
    initial_scale: float = 1.0

    def __post_init__(self) -> None:
        if not _is_positive(self.day_pixel_unit):
            raise ValueError("day_pixel_unit must be finite and positive")
        if not _is_positive(self.lane_height):
            raise ValueError("lane_height must be finite and positive")
        if self.padding_days < 0:
            raise ValueError("padding_days must be >= 0")
        if not (_is_positive(self.min_scale) and _is_positive(self.max_scale) and self.min_scale <= self.max_scale):
            raise ValueError("scale bounds must satisfy 0 < min_scale <= max_scale")
        if not (math.isfinite(self.zoom_step) and self.zoom_step > 1.0):
            raise ValueError("zoom_step must be finite and > 1")
        if not _is_positive(self.initial_scale):
            raise ValueError("initial_scale must be finite and positive")

    def clamp_scale(self, scale: float) -> float:
        return min(max(scale, self.min_scale), self.max_scale)

    @staticmethod
    def from_env() -> TimelineSettings:
        return TimelineSettings(
            day_pixel_unit=_positive_float("TIMELINE_LANES_DAY_PIXEL_UNIT", DAY_PIXEL_UNIT),
            lane_height=_positive_float("TIMELINE_LANES_LANE_HEIGHT", LANE_HEIGHT),
            padding_days=int(_positive_float("TIMELINE_LANES_PADDING_DAYS", PADDING_DAYS, allow_zero=True)),
            initial_scale=min(max(_positive_float("TIMELINE_LANES_INITIAL_SCALE", 1.0), MIN_SCALE), MAX_SCALE),
        )


def _is_positive(value: float) -> bool:
    return math.isfinite(value) and value > 0


def _positive_float(name: str, default: float, allow_zero: bool = False) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not math.isfinite(value) or value < 0 or (value == 0 and not allow_zero):
        return default
    return value
