"""Port interface for the form controls, status banner and legend."""

from abc import ABC, abstractmethod

from isoband.domain.policies.legend import LegendRow
from isoband.domain.value_objects.enums import MessageLevel, TravelMode


class ControlPanelPort(ABC):
    @abstractmethod
    def show_message(self, text: str, level: MessageLevel = MessageLevel.INFO) -> None:
        ...

    @abstractmethod
    def set_busy(self, busy: bool) -> None:
        """Show the working indicator and disable the generate button (or undo it)."""
        ...

    @abstractmethod
    def set_legend(self, rows: list[LegendRow]) -> None:
        ...

    @abstractmethod
    def clear_legend(self) -> None:
        ...

    @abstractmethod
    def show_mode_controls(self, mode: TravelMode) -> None:
        """Show the entry controls for ``mode`` and hide the other mode's."""
        ...

    @abstractmethod
    def clear_location_input(self) -> None:
        ...
