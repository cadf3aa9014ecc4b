"""Layout domain exports."""

from timeline_lanes.layout.coords import CoordinateMapper, ZoomScale
from timeline_lanes.layout.lanes import assign_lanes, max_lane, max_overlap, visible_lane_rows
from timeline_lanes.layout.models import (
    DateWindow,
    InvalidItemError,
    PositionedItem,
    TimelineItem,
    format_date,
    ingest_items,
    parse_date,
    parse_item,
)
from timeline_lanes.layout.window import HeaderDay, compute_date_window, window_days

__all__ = [
    "CoordinateMapper",
    "DateWindow",
    "HeaderDay",
    "InvalidItemError",
    "PositionedItem",
    "TimelineItem",
    "ZoomScale",
    "assign_lanes",
    "compute_date_window",
    "format_date",
    "ingest_items",
    "max_lane",
    "max_overlap",
    "parse_date",
    "parse_item",
    "visible_lane_rows",
    "window_days",
]
