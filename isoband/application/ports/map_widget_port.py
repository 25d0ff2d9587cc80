"""Port interface for the interactive map widget."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from isoband.domain.value_objects.bounds import LatLngBounds
from isoband.domain.value_objects.geo_point import GeoPoint


@dataclass(frozen=True)
class PolygonStyle:
    color: str
    fill_color: str
    fill_opacity: float = 0.35
    weight: float = 1.5


class MapWidgetPort(ABC):
    """Layers are addressed by the opaque ids the add_* methods return."""

    @abstractmethod
    def add_polygon(self, points: list[GeoPoint], style: PolygonStyle) -> str:
        ...

    @abstractmethod
    def add_marker(self, position: GeoPoint, popup: str | None = None, open_popup: bool = False) -> str:
        ...

    @abstractmethod
    def remove_layer(self, layer_id: str) -> None:
        """Remove a layer; unknown ids are ignored."""
        ...

    @abstractmethod
    def get_bounds(self, layer_id: str) -> LatLngBounds | None:
        """Bounds of a drawn layer, None if it has no points."""
        ...

    @abstractmethod
    def set_view(self, center: GeoPoint, zoom: int) -> None:
        ...

    @abstractmethod
    def fit_bounds(self, bounds: LatLngBounds, padding_px: int, max_zoom: int) -> None:
        ...

    @abstractmethod
    def get_center(self) -> GeoPoint:
        ...

    @abstractmethod
    def get_zoom(self) -> int:
        ...
