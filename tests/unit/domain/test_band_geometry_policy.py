"""Tests for BandGeometryPolicy."""

import math
import random

import pytest

from isoband.domain.policies.band_geometry import (
    MAX_BANDS,
    PALETTE,
    generate_bands,
    irregular_polygon,
    radius_meters,
    ring_extent_km,
)
from isoband.domain.value_objects.enums import TravelMode
from isoband.domain.value_objects.geo_point import GeoPoint

# ─── radius_meters ───────────────────────────────────────────────────


def test_distance_radius_is_kilometres_to_metres():
    assert radius_meters(2.5, TravelMode.DISTANCE) == 2500


def test_time_radius_assumes_200_m_per_minute():
    assert radius_meters(15, TravelMode.TIME) == 3000


# ─── irregular_polygon ───────────────────────────────────────────────


@pytest.mark.parametrize("vertices", [3, 8, 16, 40])
def test_polygon_has_requested_vertex_count(eiffel_tower, seeded_rng, vertices):
    ring = irregular_polygon(eiffel_tower, 1000, vertices=vertices, rng=seeded_rng)
    assert len(ring) == vertices


@pytest.mark.parametrize("irregularity", [0.0, 0.1, 0.35, 0.9])
def test_vertices_stay_within_perturbation_bounds(eiffel_tower, irregularity):
    rng = random.Random(7)
    radius = 2500.0
    for _ in range(20):
        ring = irregular_polygon(eiffel_tower, radius, irregularity=irregularity, rng=rng)
        for p in ring:
            d = eiffel_tower.planar_distance_m(p)
            assert radius * (1 - irregularity) - 1e-6 <= d <= radius * (1 + irregularity) + 1e-6


def test_extreme_draws_hit_the_bounds_exactly(eiffel_tower, sequence_random):
    ring = irregular_polygon(eiffel_tower, 1000, vertices=4, irregularity=0.35, rng=sequence_random([0.0, 1.0]))
    distances = [eiffel_tower.planar_distance_m(p) for p in ring]
    assert distances == pytest.approx([650, 1350, 650, 1350])


def test_unperturbed_vertices_start_east_and_turn_counter_clockwise(eiffel_tower, midpoint_rng):
    ring = irregular_polygon(eiffel_tower, 1000, vertices=4, rng=midpoint_rng)
    east, north, west, south = ring
    assert east.longitude > eiffel_tower.longitude
    assert east.latitude == pytest.approx(eiffel_tower.latitude)
    assert north.latitude > eiffel_tower.latitude
    assert west.longitude < eiffel_tower.longitude
    assert south.latitude < eiffel_tower.latitude


def test_one_draw_per_vertex(eiffel_tower, sequence_random):
    rng = sequence_random([0.25])
    irregular_polygon(eiffel_tower, 1000, vertices=16, rng=rng)
    assert rng.calls == 16


def test_same_seed_gives_same_ring(eiffel_tower):
    a = irregular_polygon(eiffel_tower, 1000, rng=random.Random(99))
    b = irregular_polygon(eiffel_tower, 1000, rng=random.Random(99))
    assert a == b


@pytest.mark.parametrize(
    "kwargs",
    [
        {"vertices": 2},
        {"irregularity": 1.0},
        {"irregularity": -0.1},
    ],
)
def test_bad_polygon_parameters_raise(eiffel_tower, kwargs):
    with pytest.raises(ValueError):
        irregular_polygon(eiffel_tower, 1000, **kwargs)


@pytest.mark.parametrize("radius", [0, -5, math.inf, math.nan])
def test_bad_radius_raises(eiffel_tower, radius):
    with pytest.raises(ValueError):
        irregular_polygon(eiffel_tower, radius)


# ─── generate_bands ──────────────────────────────────────────────────


@pytest.mark.parametrize("num_bands", range(1, MAX_BANDS + 1))
@pytest.mark.parametrize("total", [0.5, 7.0, 30.0])
def test_bands_are_equal_and_contiguous(eiffel_tower, seeded_rng, num_bands, total):
    bands = generate_bands(eiffel_tower, total, num_bands, TravelMode.DISTANCE, rng=seeded_rng)
    assert [b.index for b in bands] == list(range(num_bands))
    assert bands[0].range_start == 0
    assert bands[-1].range_end == pytest.approx(total)
    for b in bands:
        assert b.range_end - b.range_start == pytest.approx(total / num_bands)
    for inner, outer in zip(bands, bands[1:]):
        assert outer.range_start == inner.range_end
        assert outer.radius_meters > inner.radius_meters


def test_eiffel_tower_five_km_in_five_bands(eiffel_tower, seeded_rng):
    bands = generate_bands(eiffel_tower, 5, 5, TravelMode.DISTANCE, rng=seeded_rng)
    assert [b.range_end for b in bands] == pytest.approx([1, 2, 3, 4, 5])
    assert [b.radius_meters for b in bands] == pytest.approx([1000, 2000, 3000, 4000, 5000])


def test_thirty_minutes_in_three_bands(paris, seeded_rng):
    bands = generate_bands(paris, 30, 3, TravelMode.TIME, rng=seeded_rng)
    assert [b.range_end for b in bands] == pytest.approx([10, 20, 30])
    assert [b.radius_meters for b in bands] == pytest.approx([2000, 4000, 6000])


def test_band_colors_follow_palette(eiffel_tower, seeded_rng):
    bands = generate_bands(eiffel_tower, 10, MAX_BANDS, TravelMode.TIME, rng=seeded_rng)
    assert [b.color for b in bands] == list(PALETTE)


def test_each_band_has_a_ring(eiffel_tower, seeded_rng):
    bands = generate_bands(eiffel_tower, 3, 3, TravelMode.DISTANCE, rng=seeded_rng, vertices=12)
    assert all(len(b.polygon) == 12 for b in bands)


@pytest.mark.parametrize("num_bands", [0, 11, -1])
def test_band_count_out_of_range_raises(eiffel_tower, num_bands):
    with pytest.raises(ValueError):
        generate_bands(eiffel_tower, 5, num_bands, TravelMode.DISTANCE)


@pytest.mark.parametrize("total", [0, -3, math.inf, math.nan])
def test_non_positive_total_raises(eiffel_tower, total):
    with pytest.raises(ValueError):
        generate_bands(eiffel_tower, total, 3, TravelMode.DISTANCE)


# ─── ring_extent_km ──────────────────────────────────────────────────


def test_ring_extent_matches_nominal_radius_near_center(eiffel_tower, midpoint_rng):
    ring = irregular_polygon(eiffel_tower, 2000, rng=midpoint_rng)
    assert ring_extent_km(eiffel_tower, ring) == pytest.approx(2.0, rel=0.01)


def test_ring_extent_takes_farthest_vertex(eiffel_tower, sequence_random):
    ring = irregular_polygon(eiffel_tower, 1000, vertices=4, irregularity=0.35, rng=sequence_random([0.0, 1.0]))
    assert ring_extent_km(eiffel_tower, ring) == pytest.approx(1.35, rel=0.01)


def test_ring_extent_of_empty_ring(eiffel_tower):
    assert ring_extent_km(eiffel_tower, []) == 0.0
