"""FastAPI request/response schemas."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel


class WindowModel(BaseModel):
    start: date
    end: date
    total_days: int


class PositionedItemModel(BaseModel):
    id: int
    start: date
    end: date
    name: str
    lane: int
    start_offset_days: float
    width_days: float
    left_px: float
    width_px: float
    top_px: float
    dragging: bool = False


class TimelineResponse(BaseModel):
    window: WindowModel
    scale: float
    day_width_px: float
    timeline_width_px: float
    viewport_width_px: float
    lane_rows: int
    lane_height_px: float
    items: list[PositionedItemModel]
    manual_lanes: dict[int, int]
    editing_item_id: int | None = None


class ScaleResponse(BaseModel):
    scale: float


class RenameRequest(BaseModel):
    name: str


class RepositionRequest(BaseModel):
    start: date
    end: date


class ItemModel(BaseModel):
    id: int
    start: date
    end: date
    name: str
