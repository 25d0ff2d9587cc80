"""Folium map adapter — implements MapWidgetPort.

The widget state (layers, view, last fit) lives in memory. ``render_html``
turns it into a Leaflet page with folium and ``to_geojson`` gives the same
state as a FeatureCollection for API clients.
"""

from __future__ import annotations

import html
import itertools
import logging
import math
from dataclasses import dataclass

import folium
from folium import Element

from isoband.application.ports.map_widget_port import MapWidgetPort, PolygonStyle
from isoband.config import settings
from isoband.domain.policies.legend import LegendRow
from isoband.domain.value_objects.bounds import LatLngBounds
from isoband.domain.value_objects.enums import MessageLevel
from isoband.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

TILE_SIZE_PX = 256
MAX_ZOOM = 19
# Web Mercator stops here.
MAX_MERCATOR_LAT = 85.0511287798

MESSAGE_COLORS = {
    MessageLevel.INFO: ("#31708f", "#d9edf7", "#bce8f1"),
    MessageLevel.ERROR: ("#a94442", "#f2dede", "#ebccd1"),
}


@dataclass
class _PolygonLayer:
    points: list[GeoPoint]
    style: PolygonStyle


@dataclass
class _MarkerLayer:
    position: GeoPoint
    popup: str | None
    popup_open: bool


@dataclass(frozen=True)
class FittedBounds:
    bounds: LatLngBounds
    padding_px: int
    max_zoom: int


def _mercator_y(latitude: float) -> float:
    lat = max(-MAX_MERCATOR_LAT, min(MAX_MERCATOR_LAT, latitude))
    return math.log(math.tan(math.pi / 4 + math.radians(lat) / 2))


class FoliumMapWidget(MapWidgetPort):
    """In-memory Leaflet widget rendered through folium."""

    def __init__(
        self,
        center: GeoPoint,
        zoom: int,
        tile_url: str | None = None,
        attribution: str | None = None,
        viewport_px: tuple[int, int] = (1024, 768),
    ):
        self._center = center
        self._zoom = zoom
        self._tile_url = tile_url or settings.tile_url
        self._attribution = attribution or settings.tile_attribution
        self._viewport_px = viewport_px
        self._layers: dict[str, _PolygonLayer | _MarkerLayer] = {}
        self._ids = itertools.count(1)
        self._fitted: FittedBounds | None = None

    # ─── MapWidgetPort ──────────────────────────────────────────────

    def add_polygon(self, points: list[GeoPoint], style: PolygonStyle) -> str:
        layer_id = f"polygon-{next(self._ids)}"
        self._layers[layer_id] = _PolygonLayer(points=list(points), style=style)
        return layer_id

    def add_marker(self, position: GeoPoint, popup: str | None = None, open_popup: bool = False) -> str:
        layer_id = f"marker-{next(self._ids)}"
        self._layers[layer_id] = _MarkerLayer(position=position, popup=popup, popup_open=open_popup)
        return layer_id

    def remove_layer(self, layer_id: str) -> None:
        self._layers.pop(layer_id, None)

    def get_bounds(self, layer_id: str) -> LatLngBounds | None:
        layer = self._layers.get(layer_id)
        if layer is None:
            return None
        if isinstance(layer, _MarkerLayer):
            return LatLngBounds.from_points([layer.position])
        return LatLngBounds.from_points(layer.points)

    def set_view(self, center: GeoPoint, zoom: int) -> None:
        self._center = center
        self._zoom = zoom
        self._fitted = None

    def fit_bounds(self, bounds: LatLngBounds, padding_px: int, max_zoom: int) -> None:
        self._center = bounds.center()
        self._zoom = min(max_zoom, self._zoom_to_fit(bounds, padding_px))
        self._fitted = FittedBounds(bounds=bounds, padding_px=padding_px, max_zoom=max_zoom)
        logger.debug("Fitted view to %s at zoom %d", bounds, self._zoom)

    def get_center(self) -> GeoPoint:
        return self._center

    def get_zoom(self) -> int:
        return self._zoom

    # ─── Inspection ─────────────────────────────────────────────────

    @property
    def layer_ids(self) -> list[str]:
        return list(self._layers)

    @property
    def fitted(self) -> FittedBounds | None:
        return self._fitted

    def _zoom_to_fit(self, bounds: LatLngBounds, padding_px: int) -> int:
        """Largest integer zoom at which ``bounds`` fits the padded viewport."""
        width = max(self._viewport_px[0] - 2 * padding_px, 1)
        height = max(self._viewport_px[1] - 2 * padding_px, 1)

        lon_fraction = (bounds.east - bounds.west) / 360.0
        lat_fraction = (_mercator_y(bounds.north) - _mercator_y(bounds.south)) / (2 * math.pi)

        candidates = [MAX_ZOOM]
        if lon_fraction > 0:
            candidates.append(math.log2(width / TILE_SIZE_PX / lon_fraction))
        if lat_fraction > 0:
            candidates.append(math.log2(height / TILE_SIZE_PX / lat_fraction))
        return max(0, min(MAX_ZOOM, math.floor(min(candidates))))

    # ─── Output ─────────────────────────────────────────────────────

    def to_geojson(self) -> dict:
        features = []
        for layer_id, layer in self._layers.items():
            if isinstance(layer, _PolygonLayer):
                ring = [[p.longitude, p.latitude] for p in layer.points]
                if ring:
                    ring.append(ring[0])
                features.append({
                    "type": "Feature",
                    "id": layer_id,
                    "geometry": {"type": "Polygon", "coordinates": [ring]},
                    "properties": {
                        "kind": "band",
                        "color": layer.style.color,
                        "fill_color": layer.style.fill_color,
                        "fill_opacity": layer.style.fill_opacity,
                        "weight": layer.style.weight,
                    },
                })
            else:
                features.append({
                    "type": "Feature",
                    "id": layer_id,
                    "geometry": {
                        "type": "Point",
                        "coordinates": [layer.position.longitude, layer.position.latitude],
                    },
                    "properties": {
                        "kind": "marker",
                        "popup": layer.popup,
                        "popup_open": layer.popup_open,
                    },
                })
        return {"type": "FeatureCollection", "features": features}

    def build_map(
        self,
        legend: list[LegendRow] | None = None,
        message: str | None = None,
        level: MessageLevel = MessageLevel.INFO,
    ) -> folium.Map:
        m = folium.Map(
            location=[self._center.latitude, self._center.longitude],
            zoom_start=self._zoom,
            tiles=None,
            control_scale=True,
        )
        folium.TileLayer(tiles=self._tile_url, attr=self._attribution, name="Base map").add_to(m)

        # Insertion order is draw order: outer bands first.
        for layer in self._layers.values():
            if isinstance(layer, _PolygonLayer):
                folium.Polygon(
                    locations=[(p.latitude, p.longitude) for p in layer.points],
                    color=layer.style.color,
                    weight=layer.style.weight,
                    fill=True,
                    fill_color=layer.style.fill_color,
                    fill_opacity=layer.style.fill_opacity,
                ).add_to(m)
            else:
                popup = None
                if layer.popup:
                    popup = folium.Popup(html.escape(layer.popup), show=layer.popup_open, max_width=300)
                folium.Marker(
                    location=[layer.position.latitude, layer.position.longitude],
                    popup=popup,
                ).add_to(m)

        if self._fitted is not None:
            m.fit_bounds(
                self._fitted.bounds.as_corners(),
                padding=(self._fitted.padding_px, self._fitted.padding_px),
                max_zoom=self._fitted.max_zoom,
            )

        overlay = _legend_html(legend or []) + _message_html(message, level)
        if overlay:
            m.get_root().html.add_child(Element(overlay))
        return m

    def render_html(
        self,
        legend: list[LegendRow] | None = None,
        message: str | None = None,
        level: MessageLevel = MessageLevel.INFO,
    ) -> str:
        return self.build_map(legend, message, level).get_root().render()


def _legend_html(rows: list[LegendRow]) -> str:
    if not rows:
        return ""
    items = "".join(
        f'<div class="legend-item" style="display:flex;align-items:center;margin:2px 0;">'
        f'<div class="legend-color-swatch" style="width:14px;height:14px;margin-right:6px;'
        f'background-color:{html.escape(row.color)};border:1px solid #666;"></div>'
        f"<span>{html.escape(row.label)}</span></div>"
        for row in rows
    )
    return f"""
    <div id="legend" style="
      position: fixed; bottom: 24px; right: 12px; z-index: 9999;
      background: white; border: 1px solid #999; border-radius: 6px;
      padding: 8px 10px; font: 13px/1.35 sans-serif;
      box-shadow: 0 1px 8px rgba(0,0,0,0.25);">
      <b>Legend</b>
      <div id="legend-items">{items}</div>
    </div>
    """


def _message_html(message: str | None, level: MessageLevel) -> str:
    if not message:
        return ""
    color, background, border = MESSAGE_COLORS[level]
    return f"""
    <div id="info-message" class="message message-{level.value}" style="
      position: fixed; top: 12px; left: 60px; z-index: 9999; max-width: 420px;
      color: {color}; background-color: {background}; border: 1px solid {border};
      border-radius: 4px; padding: 8px 10px; font: 13px/1.35 sans-serif;">
      {html.escape(message)}
    </div>
    """
