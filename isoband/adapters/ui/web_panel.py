"""Web control panel adapter — implements ControlPanelPort in memory.

Holds what the browser form would show so HTTP clients can read it back.
"""

from __future__ import annotations

from isoband.application.ports.control_panel_port import ControlPanelPort
from isoband.domain.policies.legend import LegendRow
from isoband.domain.value_objects.enums import MessageLevel, TravelMode


class WebControlPanel(ControlPanelPort):
    def __init__(self, mode: TravelMode = TravelMode.TIME, location_text: str = ""):
        self.message: str | None = None
        self.message_level: MessageLevel = MessageLevel.INFO
        self.message_visible = False
        self.busy = False
        self.legend: list[LegendRow] = []
        self.visible_mode = mode
        self.location_text = location_text

    def show_message(self, text: str, level: MessageLevel = MessageLevel.INFO) -> None:
        self.message = text
        self.message_level = level
        self.message_visible = True

    def set_busy(self, busy: bool) -> None:
        self.busy = busy
        if busy:
            self.message_visible = False

    def set_legend(self, rows: list[LegendRow]) -> None:
        self.legend = list(rows)

    def clear_legend(self) -> None:
        self.legend = []

    def show_mode_controls(self, mode: TravelMode) -> None:
        self.visible_mode = mode

    def clear_location_input(self) -> None:
        self.location_text = ""

    @property
    def distance_controls_visible(self) -> bool:
        return self.visible_mode is TravelMode.DISTANCE

    @property
    def time_controls_visible(self) -> bool:
        return self.visible_mode is TravelMode.TIME

    def snapshot(self) -> dict:
        return {
            "message": self.message if self.message_visible else None,
            "message_level": self.message_level.value,
            "busy": self.busy,
            "generate_enabled": not self.busy,
            "mode": self.visible_mode.value,
            "distance_controls_visible": self.distance_controls_visible,
            "time_controls_visible": self.time_controls_visible,
            "location_text": self.location_text,
            "legend": [{"color": row.color, "label": row.label} for row in self.legend],
        }
