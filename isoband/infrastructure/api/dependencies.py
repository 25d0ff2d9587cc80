"""FastAPI dependency injection — wires adapters into the controller."""

from __future__ import annotations

import logging
import random

from isoband.adapters.map.folium_map import FoliumMapWidget
from isoband.adapters.ui.web_panel import WebControlPanel
from isoband.application.use_cases.isochrone_controller import IsochroneController
from isoband.config import settings
from isoband.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

# Single shared session: one map, one panel, one controller per process.
_map_widget = FoliumMapWidget(
    center=GeoPoint(latitude=settings.initial_latitude, longitude=settings.initial_longitude),
    zoom=settings.initial_zoom,
    tile_url=settings.tile_url,
    attribution=settings.tile_attribution,
)
_panel = WebControlPanel()

if settings.random_seed is not None:
    logger.info("Seeding polygon perturbation with %d", settings.random_seed)

_controller = IsochroneController(
    map_widget=_map_widget,
    panel=_panel,
    rng=random.Random(settings.random_seed),
    settle_delay_s=settings.settle_delay_ms / 1000,
    vertices=settings.polygon_vertices,
    irregularity=settings.polygon_irregularity,
    fit_padding_px=settings.fit_padding_px,
)


def get_map_widget() -> FoliumMapWidget:
    return _map_widget


def get_panel() -> WebControlPanel:
    return _panel


def get_controller() -> IsochroneController:
    return _controller
