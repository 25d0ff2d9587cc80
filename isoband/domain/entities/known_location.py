"""KnownLocation entity — a named place the location field can resolve."""

from dataclasses import dataclass

from isoband.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class KnownLocation:
    name: str
    center: GeoPoint
    default_zoom: int

    @property
    def key(self) -> str:
        return self.name.strip().lower()
