"""Read-only catalog of named locations the location field understands."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from isoband.domain.entities.known_location import KnownLocation
from isoband.domain.value_objects.geo_point import GeoPoint

_ENTRIES = (
    KnownLocation("Eiffel Tower", GeoPoint(latitude=48.8584, longitude=2.2945), 14),
    KnownLocation("Statue of Liberty", GeoPoint(latitude=40.6892, longitude=-74.0445), 15),
    KnownLocation("Brandenburg Gate", GeoPoint(latitude=52.5163, longitude=13.3777), 15),
    KnownLocation("Colosseum", GeoPoint(latitude=41.8902, longitude=12.4922), 15),
    KnownLocation("Sydney Opera House", GeoPoint(latitude=-33.8568, longitude=151.2153), 16),
)

KNOWN_LOCATIONS: Mapping[str, KnownLocation] = MappingProxyType(
    {entry.key: entry for entry in _ENTRIES}
)


def lookup(
    name: str | None,
    catalog: Mapping[str, KnownLocation] = KNOWN_LOCATIONS,
) -> KnownLocation | None:
    """Case-insensitive lookup; surrounding whitespace is ignored."""
    if not name:
        return None
    return catalog.get(name.strip().lower())
