"""IsochroneController — handles map clicks, mode changes and generate presses.

The controller owns the SessionState. Every mutation happens on the event
loop, and every redraw clears what was drawn before so at most one centre
marker and one set of bands are ever on the map.
"""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import Mapping

from isoband.application.ports.control_panel_port import ControlPanelPort
from isoband.application.ports.map_widget_port import MapWidgetPort, PolygonStyle
from isoband.domain.catalog import KNOWN_LOCATIONS
from isoband.domain.entities.band import BandSpec
from isoband.domain.entities.known_location import KnownLocation
from isoband.domain.entities.session_state import SessionState
from isoband.domain.exceptions import InvalidInputError
from isoband.domain.policies.band_geometry import (
    DEFAULT_IRREGULARITY,
    DEFAULT_VERTICES,
    generate_bands,
    ring_extent_km,
)
from isoband.domain.policies.center_resolution import CenterResolution, resolve_center
from isoband.domain.policies.input_validation import (
    RawValue,
    effective_mode,
    validate_generation_inputs,
)
from isoband.domain.policies.legend import LegendRow, build_legend
from isoband.domain.value_objects.bounds import LatLngBounds
from isoband.domain.value_objects.enums import CenterSource, MessageLevel, TravelMode
from isoband.domain.value_objects.geo_point import GeoPoint

logger = logging.getLogger(__name__)

CLICK_POPUP = "New center selected. Press 'Generate'."
CLICK_MESSAGE = (
    "New center selected on map. Adjust parameters and click 'Generate Isochrone'."
)
BAND_FILL_OPACITY = 0.35
BAND_STROKE_WEIGHT = 1.5
FIT_PADDING_PX = 50


@dataclass
class GenerationForm:
    """Raw values of the control panel at the moment Generate is pressed."""

    location_name: str = ""
    mode: TravelMode | str | None = TravelMode.TIME
    distance_value: RawValue = None
    time_value: RawValue = None
    num_bands: RawValue = None


@dataclass
class GenerationOutcome:
    ok: bool
    message: str
    level: MessageLevel
    error_field: str | None = None  # offending input when ok is False
    mode: TravelMode | None = None
    resolution: CenterResolution | None = None
    bands: list[BandSpec] = field(default_factory=list)
    legend: list[LegendRow] = field(default_factory=list)
    outer_extent_km: float | None = None  # great-circle reach of the outermost ring


class IsochroneController:
    """Single controller behind the map page."""

    def __init__(
        self,
        map_widget: MapWidgetPort,
        panel: ControlPanelPort,
        rng: random.Random | None = None,
        catalog: Mapping[str, KnownLocation] = KNOWN_LOCATIONS,
        settle_delay_s: float = 0.1,
        vertices: int = DEFAULT_VERTICES,
        irregularity: float = DEFAULT_IRREGULARITY,
        fit_padding_px: int = FIT_PADDING_PX,
    ):
        self._map = map_widget
        self._panel = panel
        self._rng = rng or random.Random()
        self._catalog = catalog
        self._settle_delay_s = settle_delay_s
        self._vertices = vertices
        self._irregularity = irregularity
        self._fit_padding_px = fit_padding_px
        self._state = SessionState()

    @property
    def state(self) -> SessionState:
        return self._state

    # ─── Event handlers ─────────────────────────────────────────────

    def handle_map_click(self, point: GeoPoint) -> None:
        """A click selects a new centre; the typed name no longer applies."""
        logger.info("Map clicked, new potential center: (%f, %f)", point.latitude, point.longitude)
        self._state.selected_center = point
        self._panel.clear_location_input()
        self.clear_features()

        # Provisional marker, replaced on the next Generate.
        self._state.center_marker = self._map.add_marker(point, popup=CLICK_POPUP, open_popup=True)
        self._state.center_marker_position = point
        self._panel.show_message(CLICK_MESSAGE, MessageLevel.INFO)

    def handle_mode_change(self, mode: TravelMode | str | None) -> TravelMode:
        active = effective_mode(mode)
        self._panel.show_mode_controls(active)
        return active

    def clear_features(self) -> None:
        """Remove the centre marker, every band and the legend. Safe to repeat."""
        if self._state.center_marker is not None:
            self._map.remove_layer(self._state.center_marker)
            self._state.center_marker = None
            self._state.center_marker_position = None
        for layer_id in self._state.active_layers:
            self._map.remove_layer(layer_id)
        self._state.active_layers = []
        self._panel.clear_legend()

    async def handle_generate(self, form: GenerationForm) -> GenerationOutcome:
        """Validate the form, then clear and redraw the bands.

        Invalid input is reported and leaves whatever is drawn untouched.
        """
        logger.info("Starting isochrone generation")
        try:
            request = validate_generation_inputs(
                form.mode, form.distance_value, form.time_value, form.num_bands
            )
        except InvalidInputError as e:
            logger.warning("Rejected generation input (%s): %s", e.field, e.message)
            self._panel.show_message(e.message, MessageLevel.ERROR)
            return GenerationOutcome(
                ok=False, message=e.message, level=MessageLevel.ERROR, error_field=e.field
            )

        self._panel.set_busy(True)
        try:
            self.clear_features()
            # Lets the working indicator render; no correctness role.
            await asyncio.sleep(self._settle_delay_s)

            resolution = resolve_center(
                form.location_name,
                self._state.selected_center,
                self._map.get_center(),
                self._map.get_zoom(),
                self._catalog,
            )
            if resolution.source is CenterSource.NAMED_LOCATION:
                self._map.set_view(resolution.center, resolution.zoom_hint)
            if resolution.source is not CenterSource.CLICKED_POINT:
                self._state.selected_center = None
            logger.info(
                "Center from %s: (%f, %f), zoom hint %d",
                resolution.source.value,
                resolution.center.latitude,
                resolution.center.longitude,
                resolution.zoom_hint,
            )

            bands = generate_bands(
                resolution.center,
                request.total_value,
                request.num_bands,
                request.mode,
                rng=self._rng,
                vertices=self._vertices,
                irregularity=self._irregularity,
            )
            legend = self.regenerate(
                resolution.center,
                bands,
                resolution.label,
                request.mode,
                resolution.zoom_hint,
            )
            self._panel.show_message(resolution.message, MessageLevel.INFO)
        finally:
            self._panel.set_busy(False)

        outer = max(bands, key=lambda b: b.index)
        outer_extent_km = ring_extent_km(resolution.center, outer.polygon)
        logger.info(
            "Isochrone generation complete: %d bands, outermost ring reaches %.2f km",
            len(bands), outer_extent_km,
        )
        return GenerationOutcome(
            ok=True,
            message=resolution.message,
            level=MessageLevel.INFO,
            mode=request.mode,
            resolution=resolution,
            bands=bands,
            legend=legend,
            outer_extent_km=outer_extent_km,
        )

    # ─── Rendering ──────────────────────────────────────────────────

    def regenerate(
        self,
        center: GeoPoint,
        bands: list[BandSpec],
        label: str,
        mode: TravelMode,
        zoom_hint: int,
    ) -> list[LegendRow]:
        """Replace whatever is drawn with ``bands`` and fit the view to them.

        Bands are drawn outermost first so inner rings stay visible on top.
        """
        self.clear_features()

        cumulative: LatLngBounds | None = None
        for band in sorted(bands, key=lambda b: b.index, reverse=True):
            style = PolygonStyle(
                color=band.color,
                fill_color=band.color,
                fill_opacity=BAND_FILL_OPACITY,
                weight=BAND_STROKE_WEIGHT,
            )
            layer_id = self._map.add_polygon(band.polygon, style)
            self._state.active_layers.append(layer_id)

            layer_bounds = self._map.get_bounds(layer_id)
            if layer_bounds is None or not layer_bounds.is_valid():
                logger.debug("Band %d has degenerate bounds, excluded from fit", band.index)
                continue
            cumulative = layer_bounds if cumulative is None else cumulative.extend(layer_bounds)

        self._state.center_marker = self._map.add_marker(center, popup=f"Center: {label}", open_popup=True)
        self._state.center_marker_position = center

        legend = build_legend(bands, mode)
        self._panel.set_legend(legend)

        if cumulative is not None:
            self._map.fit_bounds(cumulative, padding_px=self._fit_padding_px, max_zoom=zoom_hint)
        else:
            logger.info("No valid band bounds, centering view at zoom %d", zoom_hint)
            self._map.set_view(center, zoom_hint)
        return legend
