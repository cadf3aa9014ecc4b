from datetime import date

import pytest

from timeline_lanes.config import TimelineSettings
from timeline_lanes.layout.coords import CoordinateMapper, ZoomScale
from timeline_lanes.layout.models import DateWindow

WINDOW = DateWindow(start=date(2021, 1, 1), end=date(2021, 1, 11), total_days=10)


def test_date_and_pixel_offsets() -> None:
    mapper = CoordinateMapper(WINDOW, scale=2.0)
    assert mapper.date_to_offset_days(date(2021, 1, 4)) == 3.0
    assert mapper.date_to_offset_days(date(2020, 12, 31)) == -1.0
    assert mapper.offset_days_to_pixels(3.0) == 180.0
    assert mapper.timeline_width == 600.0


def test_pixels_round_trip_through_day_offsets() -> None:
    for scale in (0.5, 1.0, 2.25, 5.0):
        mapper = CoordinateMapper(WINDOW, scale=scale)
        for offset in (0.0, 0.25, 3.7, 9.99, 10.0):
            pixels = mapper.offset_days_to_pixels(offset)
            assert mapper.pixels_to_day_offset(pixels, mapper.timeline_width) == pytest.approx(offset)


def test_pixels_outside_viewport_are_undefined() -> None:
    mapper = CoordinateMapper(WINDOW, scale=1.0)
    assert mapper.pixels_to_day_offset(-0.1, 300.0) is None
    assert mapper.pixels_to_day_offset(300.1, 300.0) is None
    assert mapper.pixels_to_day_offset(300.0, 300.0) == 10.0
    empty = CoordinateMapper(DateWindow(date(2021, 1, 1), date(2021, 1, 1), 0), scale=1.0)
    assert empty.pixels_to_day_offset(0.0, 300.0) is None


def test_pixel_y_to_lane() -> None:
    mapper = CoordinateMapper(WINDOW, scale=1.0)
    assert mapper.pixel_y_to_lane(-1) is None
    assert mapper.pixel_y_to_lane(0) == 0
    assert mapper.pixel_y_to_lane(49.9) == 0
    assert mapper.pixel_y_to_lane(50) == 1
    for lane in range(6):
        assert mapper.pixel_y_to_lane(mapper.lane_to_pixel_y(lane)) == lane


def test_zoom_is_multiplicative_and_clamped() -> None:
    zoom = ZoomScale()
    assert zoom.value == 1.0
    assert zoom.zoom_in() == pytest.approx(1.5)
    assert zoom.zoom_in() == pytest.approx(2.25)
    zoom.zoom_in()
    assert zoom.zoom_in() == 5.0
    assert zoom.zoom_in() == 5.0

    zoom = ZoomScale()
    assert zoom.zoom_out() == pytest.approx(1 / 1.5)
    assert zoom.zoom_out() == 0.5
    assert zoom.zoom_out() == 0.5


def test_initial_scale_is_clamped() -> None:
    assert ZoomScale(TimelineSettings(initial_scale=9.0)).value == 5.0
