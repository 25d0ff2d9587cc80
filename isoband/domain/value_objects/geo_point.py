"""GeoPoint value object — immutable (lat, lon) pair."""

import math
from dataclasses import dataclass

# Flat-earth approximation: metres spanned by one degree of latitude.
METERS_PER_DEGREE_LAT = 111111.0


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float

    def offset_by_meters(self, north_m: float, east_m: float) -> "GeoPoint":
        """Shift the point by a planar offset in metres.

        Uses the flat-earth approximation (one degree of longitude shrinks with
        cos(latitude)). Good enough for a few kilometres away from the poles.
        """
        meters_per_degree_lon = METERS_PER_DEGREE_LAT * math.cos(math.radians(self.latitude))
        return GeoPoint(
            latitude=self.latitude + north_m / METERS_PER_DEGREE_LAT,
            longitude=self.longitude + east_m / meters_per_degree_lon,
        )

    def planar_distance_m(self, other: "GeoPoint") -> float:
        """Distance in metres under the same flat-earth approximation, measured from self."""
        meters_per_degree_lon = METERS_PER_DEGREE_LAT * math.cos(math.radians(self.latitude))
        north_m = (other.latitude - self.latitude) * METERS_PER_DEGREE_LAT
        east_m = (other.longitude - self.longitude) * meters_per_degree_lon
        return math.hypot(north_m, east_m)

    def haversine_km(self, other: "GeoPoint") -> float:
        """Calculate distance in km between two points using the Haversine formula."""
        earth_radius_km = 6371.0

        lat1 = math.radians(self.latitude)
        lat2 = math.radians(other.latitude)
        dlat = math.radians(other.latitude - self.latitude)
        dlon = math.radians(other.longitude - self.longitude)

        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

        return earth_radius_km * c
