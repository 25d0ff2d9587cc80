"""BandGeometryPolicy — radii and irregular rings for each band.

None of this is routing. Radii come from a fixed conversion rate and ring
shapes are random perturbations of a circle, meant as a visual approximation.
"""

from __future__ import annotations

import math
import random

from isoband.domain.entities.band import BandSpec
from isoband.domain.value_objects.enums import TravelMode
from isoband.domain.value_objects.geo_point import GeoPoint

# Near (green) to far (purple/indigo).
PALETTE: tuple[str, ...] = (
    "#66BB6A",
    "#FFEE58",
    "#FFA726",
    "#EF5350",
    "#D81B60",
    "#B71C1C",
    "#880E4F",
    "#4A148C",
    "#311B92",
    "#1A237E",
)

# One colour per band; grow PALETTE to raise this.
MAX_BANDS = len(PALETTE)

METERS_PER_KM = 1000.0
# Assumed travel rate for time budgets: 200 m per minute, roughly 12 km/h.
METERS_PER_MINUTE = 200.0

DEFAULT_VERTICES = 16
DEFAULT_IRREGULARITY = 0.35


def radius_meters(value: float, mode: TravelMode) -> float:
    """Convert a budget (km or minutes) to a nominal radius in metres."""
    if mode is TravelMode.DISTANCE:
        return value * METERS_PER_KM
    return value * METERS_PER_MINUTE


def band_color(index: int) -> str:
    return PALETTE[index % len(PALETTE)]


def irregular_polygon(
    center: GeoPoint,
    radius_m: float,
    vertices: int = DEFAULT_VERTICES,
    irregularity: float = DEFAULT_IRREGULARITY,
    rng: random.Random | None = None,
) -> list[GeoPoint]:
    """Build a closed ring of ``vertices`` points around ``center``.

    Vertices sit at equal angular steps. Each one gets an independent radius
    factor drawn uniformly from [1 - irregularity, 1 + irregularity], so every
    vertex lies within radius_m * (1 ± irregularity) of the centre. Angle 0
    points east and angles grow counter-clockwise.

    Raises:
        ValueError: on fewer than 3 vertices, a non-positive radius or an
            irregularity outside [0, 1).
    """
    if vertices < 3:
        raise ValueError(f"A polygon needs at least 3 vertices, got {vertices}")
    if not radius_m > 0 or not math.isfinite(radius_m):
        raise ValueError(f"Radius must be a positive finite number, got {radius_m}")
    if not 0 <= irregularity < 1:
        raise ValueError(f"Irregularity must be in [0, 1), got {irregularity}")

    rng = rng or random.Random()
    angle_step = 2 * math.pi / vertices

    points = []
    for i in range(vertices):
        angle = i * angle_step
        factor = rng.uniform(1 - irregularity, 1 + irregularity)
        perturbed = radius_m * factor
        points.append(
            center.offset_by_meters(
                north_m=perturbed * math.sin(angle),
                east_m=perturbed * math.cos(angle),
            )
        )
    return points


def generate_bands(
    center: GeoPoint,
    total_value: float,
    num_bands: int,
    mode: TravelMode,
    rng: random.Random | None = None,
    vertices: int = DEFAULT_VERTICES,
    irregularity: float = DEFAULT_IRREGULARITY,
) -> list[BandSpec]:
    """Split ``total_value`` into ``num_bands`` equal contiguous ranges.

    Band i covers [i * step, (i + 1) * step) and its ring uses the radius of
    the range end. Returned innermost first.

    Raises:
        ValueError: if total_value is not positive and finite or num_bands is
            outside [1, MAX_BANDS].
    """
    if not math.isfinite(total_value) or total_value <= 0:
        raise ValueError(f"Total value must be a positive finite number, got {total_value}")
    if not 1 <= num_bands <= MAX_BANDS:
        raise ValueError(f"Number of bands must be between 1 and {MAX_BANDS}, got {num_bands}")

    rng = rng or random.Random()
    step = total_value / num_bands

    bands = []
    for i in range(num_bands):
        range_end = (i + 1) * step
        radius = radius_meters(range_end, mode)
        bands.append(
            BandSpec(
                index=i,
                range_start=i * step,
                range_end=range_end,
                radius_meters=radius,
                color=band_color(i),
                polygon=irregular_polygon(center, radius, vertices, irregularity, rng),
            )
        )
    return bands


def ring_extent_km(center: GeoPoint, ring: list[GeoPoint]) -> float:
    """Great-circle distance from ``center`` to the farthest vertex of ``ring``.

    Shows how far the flat-earth ring really reaches, which drifts from the
    nominal radius at high latitudes and over large radii.
    """
    return max((center.haversine_km(p) for p in ring), default=0.0)
