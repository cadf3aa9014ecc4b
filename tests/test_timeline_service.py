from datetime import date

import pytest

from timeline_lanes.config import TimelineSettings
from timeline_lanes.layout.models import InvalidItemError
from timeline_lanes.sample import SAMPLE_ITEMS
from timeline_lanes.timeline import Timeline, TimelineService

ITEMS = [
    {"id": 1, "start": "2021-01-01", "end": "2021-01-10", "name": "A"},
    {"id": 2, "start": "2021-01-05", "end": "2021-01-15", "name": "B"},
    {"id": 3, "start": "2021-01-08", "end": "2021-01-20", "name": "C"},
]


def test_service_rejects_invalid_items_at_ingestion() -> None:
    with pytest.raises(InvalidItemError):
        TimelineService([{"id": 1, "start": "2021-02-30", "end": "2021-03-01", "name": "x"}])


def test_empty_service_renders_nothing() -> None:
    service = TimelineService([], today=date(2024, 1, 1))
    assert service.window().total_days == 0
    assert service.positioned_items() == []
    assert service.header_days() == []
    assert service.lane_rows() == 2


def test_reposition_item_changes_dates_without_lane_override() -> None:
    service = TimelineService(ITEMS)
    item = service.reposition_item(3, "2021-01-21", "2021-01-25")
    assert (item.start, item.end) == (date(2021, 1, 21), date(2021, 1, 25))
    assert service.manual_lanes == {}
    assert {entry.item_id: entry.lane for entry in service.positioned_items()}[3] == 0

    with pytest.raises(InvalidItemError):
        service.reposition_item(3, "2021-01-25", "2021-01-21")
    with pytest.raises(KeyError):
        service.reposition_item(99, "2021-01-21", "2021-01-25")
    with pytest.raises(TypeError):
        service.reposition_item(3, "2021-01-21", "2021-01-25", lane=1)  # type: ignore[call-arg]


def test_reset_lanes_restores_automatic_layout() -> None:
    service = TimelineService(ITEMS)
    automatic = service.positioned_items()
    service.pointer_down(1, "move", 90, 10)
    service.pointer_move(90, 360)
    service.pointer_up()
    assert service.manual_lanes == {1: 7}
    assert service.positioned_items() != automatic
    service.reset_lanes()
    assert service.positioned_items() == automatic


def test_items_property_returns_copies() -> None:
    service = TimelineService(ITEMS)
    service.items[0].name = "mutated"
    assert service.get_item(1).name == "A"


def test_viewport_width_defaults_to_timeline_width() -> None:
    service = TimelineService(ITEMS)
    assert service.viewport_width == service.window().total_days * 30
    service.zoom_in()
    assert service.viewport_width == pytest.approx(service.window().total_days * 45)
    service.set_viewport_width(1000)
    assert service.viewport_width == 1000
    with pytest.raises(ValueError):
        service.set_viewport_width(-1)


def test_facade_exposes_host_operations() -> None:
    timeline = Timeline(TimelineService(ITEMS))
    assert [entry.lane for entry in timeline.positioned_items()] == [0, 1, 2]
    assert timeline.zoom_out() == pytest.approx(1 / 1.5)
    assert timeline.get_scale() == pytest.approx(1 / 1.5)
    timeline.reset_lanes()
    assert timeline.rename_item(2, "Renamed").name == "Renamed"
    assert timeline.get_edit_session() is None

    assert timeline.start_drag(1, "move", 60, 10)
    timeline.drag_to(60, 160)
    timeline.end_drag()
    assert {entry.item_id: entry.lane for entry in timeline.positioned_items()}[1] == 3


def test_sample_items_ingest() -> None:
    service = TimelineService(SAMPLE_ITEMS)
    assert len(service.positioned_items()) == len(SAMPLE_ITEMS)
    assert service.window().start == date(2020, 12, 30)
    assert service.window().end == date(2021, 2, 18)


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMELINE_LANES_LANE_HEIGHT", "40")
    monkeypatch.setenv("TIMELINE_LANES_DAY_PIXEL_UNIT", "oops")
    monkeypatch.setenv("TIMELINE_LANES_PADDING_DAYS", "0")
    monkeypatch.setenv("TIMELINE_LANES_INITIAL_SCALE", "12")
    settings = TimelineSettings.from_env()
    assert settings.lane_height == 40
    assert settings.day_pixel_unit == 30
    assert settings.padding_days == 0
    assert settings.initial_scale == 5.0

    service = TimelineService(ITEMS, settings=settings)
    assert service.window().start == date(2021, 1, 1)
    assert service.scale == 5.0


def test_settings_validate_bounds() -> None:
    with pytest.raises(ValueError):
        TimelineSettings(lane_height=0)
    with pytest.raises(ValueError):
        TimelineSettings(min_scale=2.0, max_scale=1.0)


def test_settings_from_env_ignores_non_finite_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TIMELINE_LANES_DAY_PIXEL_UNIT", "nan")
    monkeypatch.setenv("TIMELINE_LANES_LANE_HEIGHT", "inf")
    monkeypatch.setenv("TIMELINE_LANES_PADDING_DAYS", "-inf")
    monkeypatch.setenv("TIMELINE_LANES_INITIAL_SCALE", "NaN")
    settings = TimelineSettings.from_env()
    assert settings == TimelineSettings()

    service = TimelineService(ITEMS, settings=settings)
    assert service.scale == 1.0
    assert service.viewport_width == 690.0


def test_settings_reject_non_finite_geometry() -> None:
    for field in ("day_pixel_unit", "lane_height", "initial_scale", "max_scale", "zoom_step"):
        for bad in (float("nan"), float("inf")):
            with pytest.raises(ValueError):
                TimelineSettings(**{field: bad})
