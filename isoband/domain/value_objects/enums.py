"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class TravelMode(str, Enum):
    DISTANCE = "distance"
    TIME = "time"

    @property
    def unit(self) -> str:
        return "km" if self is TravelMode.DISTANCE else "min"


class MessageLevel(str, Enum):
    INFO = "info"
    ERROR = "error"


class CenterSource(str, Enum):
    NAMED_LOCATION = "named_location"
    CLICKED_POINT = "clicked_point"
    MAP_CENTER = "map_center"
