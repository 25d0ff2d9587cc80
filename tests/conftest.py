"""Pytest configuration and shared fixtures."""

import random

import pytest

from isoband.domain.value_objects.geo_point import GeoPoint


class SequenceRandom:
    """Stand-in for random.Random that replays fixed positions in [0, 1].

    ``uniform(a, b)`` returns ``a + (b - a) * t`` for the next t, cycling.
    """

    def __init__(self, positions):
        self._positions = list(positions)
        self._i = 0
        self.calls = 0

    def uniform(self, a, b):
        t = self._positions[self._i % len(self._positions)]
        self._i += 1
        self.calls += 1
        return a + (b - a) * t


@pytest.fixture
def eiffel_tower():
    return GeoPoint(latitude=48.8584, longitude=2.2945)


@pytest.fixture
def paris():
    return GeoPoint(latitude=48.8566, longitude=2.3522)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)


@pytest.fixture
def midpoint_rng():
    """Every perturbation factor is exactly 1.0."""
    return SequenceRandom([0.5])


@pytest.fixture
def sequence_random():
    """Factory: sequence_random([0.0, 1.0]) -> SequenceRandom."""
    return SequenceRandom
