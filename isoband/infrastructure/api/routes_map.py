"""Map endpoints — catalog, clicks, view changes, state and the rendered page."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from isoband.adapters.map.folium_map import FoliumMapWidget
from isoband.adapters.ui.web_panel import WebControlPanel
from isoband.application.use_cases.isochrone_controller import IsochroneController
from isoband.domain.catalog import KNOWN_LOCATIONS
from isoband.domain.value_objects.geo_point import GeoPoint
from isoband.infrastructure.api.dependencies import (
    get_controller,
    get_map_widget,
    get_panel,
)
from isoband.infrastructure.api.schemas import PointRequest, ViewRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["map"])


@router.get("/locations")
async def list_locations():
    """Named locations the location field understands."""
    return {
        "locations": [
            {
                "name": loc.name,
                "latitude": loc.center.latitude,
                "longitude": loc.center.longitude,
                "default_zoom": loc.default_zoom,
            }
            for loc in KNOWN_LOCATIONS.values()
        ]
    }


@router.post("/map/click")
async def map_click(
    payload: PointRequest,
    controller: IsochroneController = Depends(get_controller),
    panel: WebControlPanel = Depends(get_panel),
):
    """Select a new centre, as a click on the map does."""
    controller.handle_map_click(GeoPoint(latitude=payload.latitude, longitude=payload.longitude))
    return {"status": "ok", "panel": panel.snapshot()}


@router.post("/map/view")
async def set_map_view(
    payload: ViewRequest,
    map_widget: FoliumMapWidget = Depends(get_map_widget),
):
    """Pan/zoom the map without touching drawn layers."""
    map_widget.set_view(GeoPoint(latitude=payload.latitude, longitude=payload.longitude), payload.zoom)
    return {"status": "ok", "view": _serialize_view(map_widget)}


@router.get("/state")
async def get_state(
    controller: IsochroneController = Depends(get_controller),
    map_widget: FoliumMapWidget = Depends(get_map_widget),
    panel: WebControlPanel = Depends(get_panel),
):
    state = controller.state
    selected = state.selected_center
    return {
        "panel": panel.snapshot(),
        "selected_center": _serialize_point(selected) if selected else None,
        "view": _serialize_view(map_widget),
        "layers": map_widget.to_geojson(),
    }


def _serialize_point(p: GeoPoint) -> dict:
    return {"latitude": p.latitude, "longitude": p.longitude}


def _serialize_view(map_widget: FoliumMapWidget) -> dict:
    fitted = map_widget.fitted
    return {
        "center": _serialize_point(map_widget.get_center()),
        "zoom": map_widget.get_zoom(),
        "fitted_bounds": fitted.bounds.as_corners() if fitted else None,
    }


page_router = APIRouter(tags=["pages"])


@page_router.get("/", response_class=HTMLResponse)
async def render_map_page(
    map_widget: FoliumMapWidget = Depends(get_map_widget),
    panel: WebControlPanel = Depends(get_panel),
):
    """Current map as a Leaflet page, with legend and status banner."""
    message = panel.message if panel.message_visible else None
    return HTMLResponse(
        content=map_widget.render_html(panel.legend, message, panel.message_level)
    )
