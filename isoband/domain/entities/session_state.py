"""SessionState entity — what the controller has currently drawn."""

from dataclasses import dataclass, field

from isoband.domain.value_objects.geo_point import GeoPoint


@dataclass
class SessionState:
    selected_center: GeoPoint | None = None
    active_layers: list[str] = field(default_factory=list)  # map layer ids
    center_marker: str | None = None  # marker layer id
    center_marker_position: GeoPoint | None = None

    def has_drawn_features(self) -> bool:
        return bool(self.active_layers) or self.center_marker is not None
