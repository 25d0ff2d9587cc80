"""Tests for domain enums."""

from isoband.domain.value_objects.enums import CenterSource, MessageLevel, TravelMode


def test_travel_mode_values():
    assert TravelMode("distance") is TravelMode.DISTANCE
    assert TravelMode("time") is TravelMode.TIME


def test_travel_mode_units():
    assert TravelMode.DISTANCE.unit == "km"
    assert TravelMode.TIME.unit == "min"


def test_message_levels():
    assert {level.value for level in MessageLevel} == {"info", "error"}


def test_center_sources():
    assert len(CenterSource) == 3
