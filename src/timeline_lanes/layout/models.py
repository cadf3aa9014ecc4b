"""Timeline layout domain models."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Mapping

DATE_FORMAT = "%Y-%m-%d"


class InvalidItemError(ValueError):
    """Raised when an item cannot be ingested into the timeline."""


def parse_date(value: object) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidItemError(f"date must be a YYYY-MM-DD string, got {type(value).__name__}")
    try:
        return datetime.strptime(value.strip(), DATE_FORMAT).date()
    except ValueError as exc:
        raise InvalidItemError(f"invalid date '{value}'") from exc


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


@dataclass(slots=True)
class TimelineItem:
    item_id: int
    start: date
    end: date
    name: str

    def validate(self) -> None:
        if isinstance(self.item_id, bool) or not isinstance(self.item_id, int):
            raise InvalidItemError("id must be an integer")
        if not isinstance(self.start, date) or not isinstance(self.end, date):
            raise InvalidItemError(f"item {self.item_id}: start and end must be dates")
        if self.end < self.start:
            raise InvalidItemError(
                f"item {self.item_id}: end {format_date(self.end)} is before start {format_date(self.start)}"
            )
        if not isinstance(self.name, str):
            raise InvalidItemError(f"item {self.item_id}: name must be a string")

    @property
    def duration_days(self) -> int:
        return (self.end - self.start).days

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.item_id,
            "start": format_date(self.start),
            "end": format_date(self.end),
            "name": self.name,
        }


@dataclass(frozen=True, slots=True)
class PositionedItem:
    item_id: int
    start: date
    end: date
    name: str
    lane: int
    start_offset_days: float
    width_days: float

    def pixel_rect(self, scale: float, day_pixel_unit: float, lane_height: float) -> tuple[float, float, float]:
        """Return ``(left, width, top)`` in pixels for the rendering layer."""
        unit = scale * day_pixel_unit
        return self.start_offset_days * unit, self.width_days * unit, self.lane * lane_height


@dataclass(frozen=True, slots=True)
class DateWindow:
    start: date
    end: date
    total_days: int

    @property
    def is_empty(self) -> bool:
        return self.total_days == 0


def parse_item(raw: TimelineItem | Mapping[str, Any]) -> TimelineItem:
    if isinstance(raw, TimelineItem):
        item = TimelineItem(item_id=raw.item_id, start=raw.start, end=raw.end, name=raw.name)
    elif isinstance(raw, Mapping):
        for key in ("id", "start", "end", "name"):
            if key not in raw:
                raise InvalidItemError(f"item is missing '{key}'")
        item = TimelineItem(
            item_id=raw["id"],
            start=parse_date(raw["start"]),
            end=parse_date(raw["end"]),
            name=raw["name"],
        )
    else:
        raise InvalidItemError(f"unsupported item type {type(raw).__name__}")
    item.validate()
    return item


def ingest_items(raw_items: Iterable[TimelineItem | Mapping[str, Any]]) -> list[TimelineItem]:
    items: list[TimelineItem] = []
    seen: set[int] = set()
    for raw in raw_items:
        item = parse_item(raw)
        if item.item_id in seen:
            raise InvalidItemError(f"duplicate item id {item.item_id}")
        seen.add(item.item_id)
        items.append(item)
    return items
