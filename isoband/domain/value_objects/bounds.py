"""LatLngBounds value object — axis-aligned box in degrees."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from isoband.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class LatLngBounds:
    south: float
    west: float
    north: float
    east: float

    @classmethod
    def from_points(cls, points: Iterable[GeoPoint]) -> LatLngBounds | None:
        """Smallest box containing all points, or None for an empty sequence."""
        points = list(points)
        if not points:
            return None
        lats = [p.latitude for p in points]
        lons = [p.longitude for p in points]
        return cls(south=min(lats), west=min(lons), north=max(lats), east=max(lons))

    def extend(self, other: LatLngBounds) -> LatLngBounds:
        return LatLngBounds(
            south=min(self.south, other.south),
            west=min(self.west, other.west),
            north=max(self.north, other.north),
            east=max(self.east, other.east),
        )

    def is_valid(self) -> bool:
        """Finite edges and positive extent on both axes.

        A ring collapsed onto a point or a line is degenerate.
        """
        edges = (self.south, self.west, self.north, self.east)
        if not all(math.isfinite(e) for e in edges):
            return False
        return self.north > self.south and self.east > self.west

    def center(self) -> GeoPoint:
        return GeoPoint(
            latitude=(self.south + self.north) / 2,
            longitude=(self.west + self.east) / 2,
        )

    def as_corners(self) -> list[list[float]]:
        """[[south, west], [north, east]] — the corner pair Leaflet expects."""
        return [[self.south, self.west], [self.north, self.east]]
