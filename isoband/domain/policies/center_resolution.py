"""CenterResolutionPolicy — decide where the bands are centred.

Priority, first match wins:
1. a typed name found in the catalog,
2. the last point clicked on the map,
3. the current centre of the map view.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from isoband.domain.catalog import KNOWN_LOCATIONS, lookup
from isoband.domain.entities.known_location import KnownLocation
from isoband.domain.value_objects.enums import CenterSource
from isoband.domain.value_objects.geo_point import GeoPoint

# Below this zoom a fit would show half a continent.
MIN_USEFUL_ZOOM = 10
FALLBACK_ZOOM = 13

CLICKED_POINT_LABEL = "Clicked Point"
MAP_CENTER_LABEL = "Current Map Center"


@dataclass(frozen=True)
class CenterResolution:
    """Result of the center resolution policy."""

    center: GeoPoint
    zoom_hint: int
    label: str
    message: str
    source: CenterSource


def zoom_hint_for(current_zoom: int) -> int:
    return current_zoom if current_zoom >= MIN_USEFUL_ZOOM else FALLBACK_ZOOM


def resolve_center(
    typed_name: str | None,
    last_clicked: GeoPoint | None,
    current_map_center: GeoPoint,
    current_map_zoom: int,
    catalog: Mapping[str, KnownLocation] = KNOWN_LOCATIONS,
) -> CenterResolution:
    """Pick the generation centre.

    An unrecognized name never blocks generation: it falls through to the
    map centre and the message says the name was not recognized.
    """
    raw_name = (typed_name or "").strip()
    known = lookup(raw_name, catalog)

    if known is not None:
        return CenterResolution(
            center=known.center,
            zoom_hint=known.default_zoom,
            label=raw_name,
            message=f'Showing isochrones for "{raw_name}". This is a visual approximation.',
            source=CenterSource.NAMED_LOCATION,
        )

    if last_clicked is not None:
        return CenterResolution(
            center=last_clicked,
            zoom_hint=zoom_hint_for(current_map_zoom),
            label=CLICKED_POINT_LABEL,
            message=(
                "Generating isochrones around the point selected on the map. "
                "This is a visual approximation."
            ),
            source=CenterSource.CLICKED_POINT,
        )

    if raw_name:
        message = (
            f'Location "{raw_name}" not recognized. Generating around current map center. '
            "Pan/zoom map or click to select a point."
        )
    else:
        message = (
            "Generating isochrones around the current map center. "
            "Pan/zoom map or click to select a point."
        )
    return CenterResolution(
        center=current_map_center,
        zoom_hint=zoom_hint_for(current_map_zoom),
        label=MAP_CENTER_LABEL,
        message=message,
        source=CenterSource.MAP_CENTER,
    )
