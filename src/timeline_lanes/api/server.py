"""HTTP control surface for a timeline instance."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import Response

from timeline_lanes.api.schemas import (
    ItemModel,
    PositionedItemModel,
    RenameRequest,
    RepositionRequest,
    ScaleResponse,
    TimelineResponse,
    WindowModel,
)
from timeline_lanes.layout.models import TimelineItem
from timeline_lanes.sample import SAMPLE_ITEMS
from timeline_lanes.timeline.service import TimelineService


def create_app(timeline_service: TimelineService | None = None) -> FastAPI:
    app = FastAPI(title="timeline-lanes API", version="0.1.0")
    service = timeline_service or TimelineService(SAMPLE_ITEMS)

    @app.get("/")
    def root() -> dict[str, str]:
        return {
            "service": "timeline-lanes API",
            "status": "ok",
            "docs": "/docs",
        }

    @app.get("/favicon.ico", include_in_schema=False)
    def favicon() -> Response:
        return Response(status_code=204)

    @app.get("/v1/timeline", response_model=TimelineResponse)
    def get_timeline(viewport_width: float | None = Query(default=None, ge=0)) -> TimelineResponse:
        return _timeline_response(service, viewport_width)

    @app.post("/v1/timeline/zoom-in", response_model=ScaleResponse)
    def zoom_in() -> ScaleResponse:
        return ScaleResponse(scale=service.zoom_in())

    @app.post("/v1/timeline/zoom-out", response_model=ScaleResponse)
    def zoom_out() -> ScaleResponse:
        return ScaleResponse(scale=service.zoom_out())

    @app.post("/v1/timeline/reset-lanes", response_model=TimelineResponse)
    def reset_lanes() -> TimelineResponse:
        service.reset_lanes()
        return _timeline_response(service)

    @app.patch("/v1/items/{item_id}", response_model=ItemModel)
    def rename_item(item_id: int, payload: RenameRequest) -> ItemModel:
        try:
            item = service.rename_item(item_id, payload.name)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return _item_model(item)

    @app.post("/v1/items/{item_id}/reposition", response_model=ItemModel)
    def reposition_item(item_id: int, payload: RepositionRequest) -> ItemModel:
        try:
            item = service.reposition_item(item_id, payload.start, payload.end)
        except KeyError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _item_model(item)

    return app


def _item_model(item: TimelineItem) -> ItemModel:
    return ItemModel(id=item.item_id, start=item.start, end=item.end, name=item.name)


def _timeline_response(service: TimelineService, viewport_width: float | None = None) -> TimelineResponse:
    mapper = service.mapper()
    settings = service.settings
    window = mapper.window
    items: list[PositionedItemModel] = []
    for item in service.positioned_items():
        left, width, top = item.pixel_rect(service.scale, settings.day_pixel_unit, settings.lane_height)
        items.append(
            PositionedItemModel(
                id=item.item_id,
                start=item.start,
                end=item.end,
                name=item.name,
                lane=item.lane,
                start_offset_days=item.start_offset_days,
                width_days=item.width_days,
                left_px=left,
                width_px=width,
                top_px=top,
                dragging=service.is_dragging(item.item_id),
            )
        )
    return TimelineResponse(
        window=WindowModel(start=window.start, end=window.end, total_days=window.total_days),
        scale=service.scale,
        day_width_px=mapper.day_width,
        timeline_width_px=mapper.timeline_width,
        viewport_width_px=service.viewport_width if viewport_width is None else viewport_width,
        lane_rows=service.lane_rows(),
        lane_height_px=settings.lane_height,
        items=items,
        manual_lanes=service.manual_lanes,
        editing_item_id=service.editor.editing_item_id(),
    )


app = create_app()
