"""Greedy interval partitioning of timeline items into lanes."""

from __future__ import annotations

import logging
from datetime import date
from typing import Mapping, Sequence

from timeline_lanes.layout.models import DateWindow, PositionedItem, TimelineItem

logger = logging.getLogger(__name__)


def assign_lanes(
    items: Sequence[TimelineItem],
    window: DateWindow,
    manual_lanes: Mapping[int, int] | None = None,
) -> list[PositionedItem]:
    """Place each item in the first lane whose last occupant ended before it starts.

    Items are visited in ascending start order; equal starts keep input order.
    An item with a manual lane is emitted at that lane and does not update the
    end date tracked for any automatic lane.
    """
    overrides = manual_lanes or {}
    lane_ends: list[date] = []
    result: list[PositionedItem] = []

    for item in sorted(items, key=lambda entry: entry.start):
        start_offset = float((item.start - window.start).days)
        end_offset = float((item.end - window.start).days)
        width = max(1.0, end_offset - start_offset + 1)

        lane = overrides.get(item.item_id)
        if lane is None:
            lane = _first_free_lane(lane_ends, item.start)
            if lane == len(lane_ends):
                lane_ends.append(item.end)
            else:
                lane_ends[lane] = item.end

        result.append(
            PositionedItem(
                item_id=item.item_id,
                start=item.start,
                end=item.end,
                name=item.name,
                lane=lane,
                start_offset_days=start_offset,
                width_days=width,
            )
        )

    logger.debug("Packed %d items into %d automatic lanes (%d manual)", len(result), len(lane_ends), len(overrides))
    return result


def _first_free_lane(lane_ends: list[date], start: date) -> int:
    for index, end in enumerate(lane_ends):
        if end < start:
            return index
    return len(lane_ends)


def max_lane(positioned: Sequence[PositionedItem]) -> int:
    if not positioned:
        return 0
    return max(item.lane for item in positioned)


def visible_lane_rows(positioned: Sequence[PositionedItem]) -> int:
    # One spare row below the last lane gives "move" drags a target.
    return max_lane(positioned) + 2


def max_overlap(items: Sequence[TimelineItem]) -> int:
    """Largest number of end-inclusive date ranges covering a single day."""
    events: list[tuple[date, int]] = []
    for item in items:
        events.append((item.start, 0))
        events.append((item.end, 1))
    # Starts sort before ends on the same day so touching ranges count as overlapping.
    events.sort()
    active = 0
    peak = 0
    for _, kind in events:
        if kind == 0:
            active += 1
            peak = max(peak, active)
        else:
            active -= 1
    return peak
