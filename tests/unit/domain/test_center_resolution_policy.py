"""Tests for CenterResolutionPolicy."""

from isoband.domain.policies.center_resolution import (
    CLICKED_POINT_LABEL,
    MAP_CENTER_LABEL,
    resolve_center,
)
from isoband.domain.value_objects.enums import CenterSource
from isoband.domain.value_objects.geo_point import GeoPoint

MAP_CENTER = GeoPoint(latitude=48.8566, longitude=2.3522)
CLICKED = GeoPoint(latitude=45.0, longitude=5.0)


def test_known_name_wins_over_click():
    r = resolve_center("Eiffel Tower", CLICKED, MAP_CENTER, 12)
    assert r.source is CenterSource.NAMED_LOCATION
    assert r.center == GeoPoint(latitude=48.8584, longitude=2.2945)
    assert r.zoom_hint == 14
    assert r.label == "Eiffel Tower"
    assert "Eiffel Tower" in r.message


def test_label_keeps_typed_spelling():
    r = resolve_center("  colosseum ", None, MAP_CENTER, 6)
    assert r.label == "colosseum"
    assert r.zoom_hint == 15


def test_click_used_when_no_known_name():
    r = resolve_center("", CLICKED, MAP_CENTER, 12)
    assert r.source is CenterSource.CLICKED_POINT
    assert r.center == CLICKED
    assert r.label == CLICKED_POINT_LABEL
    assert r.zoom_hint == 12


def test_click_at_wide_zoom_uses_fallback_zoom():
    r = resolve_center("", CLICKED, MAP_CENTER, 6)
    assert r.zoom_hint == 13


def test_zoom_ten_is_kept():
    r = resolve_center("", None, MAP_CENTER, 10)
    assert r.zoom_hint == 10


def test_unknown_name_with_click_uses_click():
    r = resolve_center("Big Ben", CLICKED, MAP_CENTER, 6)
    assert r.source is CenterSource.CLICKED_POINT


def test_map_center_when_nothing_entered():
    r = resolve_center("", None, MAP_CENTER, 6)
    assert r.source is CenterSource.MAP_CENTER
    assert r.center == MAP_CENTER
    assert r.label == MAP_CENTER_LABEL
    assert r.zoom_hint == 13
    assert "not recognized" not in r.message


def test_unrecognized_name_says_so():
    r = resolve_center("Big Ben", None, MAP_CENTER, 14)
    assert r.source is CenterSource.MAP_CENTER
    assert r.zoom_hint == 14
    assert 'Location "Big Ben" not recognized' in r.message


def test_whitespace_only_name_counts_as_nothing_entered():
    r = resolve_center("   ", None, MAP_CENTER, 14)
    assert "not recognized" not in r.message
