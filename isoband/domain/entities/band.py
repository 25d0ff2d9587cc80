"""BandSpec entity — one ring of the nested approximation."""

from dataclasses import dataclass, field

from isoband.domain.value_objects.geo_point import GeoPoint


@dataclass
class BandSpec:
    index: int  # 0 = innermost
    range_start: float
    range_end: float
    radius_meters: float
    color: str
    polygon: list[GeoPoint] = field(default_factory=list)
