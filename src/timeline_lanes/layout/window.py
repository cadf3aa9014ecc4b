"""Visible date window derived from the item set."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Sequence

from timeline_lanes.config import PADDING_DAYS
from timeline_lanes.layout.models import DateWindow, TimelineItem


@dataclass(frozen=True, slots=True)
class HeaderDay:
    day: date
    label: str | None


def compute_date_window(
    items: Sequence[TimelineItem],
    padding_days: int = PADDING_DAYS,
    today: date | None = None,
) -> DateWindow:
    """Pad the earliest start and latest end by ``padding_days``.

    An empty item set yields a zero-span window anchored at ``today``;
    callers treat ``total_days == 0`` as nothing to render.
    """
    if not items:
        anchor = today or date.today()
        return DateWindow(start=anchor, end=anchor, total_days=0)

    padding = timedelta(days=padding_days)
    start = min(item.start for item in items) - padding
    end = max(item.end for item in items) + padding
    return DateWindow(start=start, end=end, total_days=(end - start).days)


def window_days(window: DateWindow) -> list[HeaderDay]:
    """Every calendar day of the window, labelled on every other day."""
    if window.is_empty:
        return []
    days: list[HeaderDay] = []
    for index in range((window.end - window.start).days + 1):
        day = window.start + timedelta(days=index)
        label = f"{day:%b} {day.day}" if index % 2 == 0 else None
        days.append(HeaderDay(day=day, label=label))
    return days
