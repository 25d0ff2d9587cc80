"""Tests for the known-location catalog."""

import pytest

from isoband.domain.catalog import KNOWN_LOCATIONS, lookup


def test_catalog_has_five_entries():
    assert len(KNOWN_LOCATIONS) == 5


@pytest.mark.parametrize("name", ["Eiffel Tower", "eiffel tower", "  EIFFEL TOWER  "])
def test_lookup_is_case_and_whitespace_insensitive(name):
    loc = lookup(name)
    assert loc is not None
    assert loc.center.latitude == 48.8584
    assert loc.center.longitude == 2.2945
    assert loc.default_zoom == 14


def test_lookup_sydney_opera_house():
    loc = lookup("sydney opera house")
    assert loc.center.latitude == -33.8568
    assert loc.default_zoom == 16


def test_lookup_unknown_or_empty():
    assert lookup("Big Ben") is None
    assert lookup("") is None
    assert lookup(None) is None


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        KNOWN_LOCATIONS["big ben"] = KNOWN_LOCATIONS["colosseum"]
