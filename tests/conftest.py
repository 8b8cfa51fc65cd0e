"""Pytest configuration for path tracer tests.

Provides seeded random streams and small helpers shared by the test modules.
"""

import random

import pytest


class FixedRandom:
    """Stand-in random stream returning the midpoint of every requested range."""

    def __init__(self, value=0.5):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value


class SequenceRandom:
    """Stand-in random stream that replays fixed uniform() draws."""

    def __init__(self, uniforms, value=0.5):
        self.uniforms = list(uniforms)
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return self.uniforms.pop(0)


class RecordingSink:
    """Pixel sink remembering every write so tests can check coverage and order."""

    def __init__(self):
        self.writes = []

    def set_at(self, x, y, color):
        self.writes.append((x, y, color))

    def pixels(self):
        return {(x, y): color for x, y, color in self.writes}


@pytest.fixture
def rng():
    """A deterministic random stream, fresh for every test."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    return FixedRandom()


@pytest.fixture
def recording_sink():
    return RecordingSink()
