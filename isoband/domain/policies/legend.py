"""LegendPolicy — one row per band, innermost first."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from isoband.domain.entities.band import BandSpec
from isoband.domain.value_objects.enums import TravelMode


@dataclass(frozen=True)
class LegendRow:
    color: str
    label: str


def format_range_value(value: float) -> str:
    """Whole numbers without decimals, anything else with exactly one.

    Exact ties round up (1.25 -> "1.3"), like JavaScript's toFixed.
    """
    if float(value).is_integer():
        return f"{value:.0f}"
    return str(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def build_legend(bands: list[BandSpec], mode: TravelMode) -> list[LegendRow]:
    ordered = sorted(bands, key=lambda b: b.index)
    return [
        LegendRow(
            color=band.color,
            label=(
                f"{format_range_value(band.range_start)}-"
                f"{format_range_value(band.range_end)} {mode.unit}"
            ),
        )
        for band in ordered
    ]
