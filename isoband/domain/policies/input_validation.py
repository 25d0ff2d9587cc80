"""InputValidationPolicy — turn raw form values into a generation request."""

from __future__ import annotations

import math
from dataclasses import dataclass

from isoband.domain.exceptions import InvalidInputError
from isoband.domain.policies.band_geometry import MAX_BANDS, radius_meters
from isoband.domain.value_objects.enums import TravelMode

RawValue = str | int | float | None


@dataclass(frozen=True)
class GenerationRequest:
    mode: TravelMode
    total_value: float
    num_bands: int


def effective_mode(mode: TravelMode | str | None) -> TravelMode:
    """Exactly one mode is active; anything unrecognized counts as time."""
    if mode is None:
        return TravelMode.TIME
    try:
        return TravelMode(mode)
    except ValueError:
        return TravelMode.TIME


def _parse_float(raw: RawValue) -> float | None:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(str(raw).strip()) if isinstance(raw, str) else float(raw)
    except ValueError:
        return None


def _parse_int(raw: RawValue) -> int | None:
    """Whole numbers only, whether typed as "4", "4.0" or sent as 4.0."""
    if isinstance(raw, int) and not isinstance(raw, bool):
        return raw
    value = _parse_float(raw)
    if value is None or not value.is_integer():
        return None
    return int(value)


def validate_generation_inputs(
    mode: TravelMode | str | None,
    distance_raw: RawValue,
    time_raw: RawValue,
    num_bands_raw: RawValue,
) -> GenerationRequest:
    """Validate the active total field and the band count.

    Only the field belonging to the active mode is read.

    Raises:
        InvalidInputError: naming the offending field.
    """
    active = effective_mode(mode)
    field = active.value
    total = _parse_float(distance_raw if active is TravelMode.DISTANCE else time_raw)
    # Perturbed radii reach up to twice the nominal radius.
    if (
        total is None
        or not math.isfinite(total)
        or total <= 0
        or not math.isfinite(2 * radius_meters(total, active))
    ):
        raise InvalidInputError(field, f"Please enter a valid positive total {field}.")

    num_bands = _parse_int(num_bands_raw)
    if num_bands is None or not 1 <= num_bands <= MAX_BANDS:
        raise InvalidInputError(
            "num_bands",
            f"Number of bands must be between 1 and {MAX_BANDS} (due to color palette).",
        )

    return GenerationRequest(mode=active, total_value=total, num_bands=num_bands)
