"""
Shared fixtures: deterministic random sources, a settable clock and
fighters in their usual starting spots.
"""

import os

import pytest

# Headless pygame for the input and presentation tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from stick_duel.fighters.fighter import Fighter


class ScriptedRandom:
    """Returns the given values from random() in order."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        assert self.values, "opponent drew more random numbers than scripted"
        self.calls += 1
        return self.values.pop(0)


class ConstantRandom:
    """
    random() always returns the same value. 0.5 means the opponent
    never wanders, never fires and never panic-blocks.
    """

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self) -> float:
        return self.value


class FakeClock:
    def __init__(self, now: float = 0.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def passive_rng() -> ConstantRandom:
    return ConstantRandom(0.5)


@pytest.fixture
def player_a() -> Fighter:
    return Fighter("Player A", 0, 100, 300)


@pytest.fixture
def player_b() -> Fighter:
    return Fighter("Player B", 1, 700, 300)


@pytest.fixture
def fighters(player_a, player_b):
    return [player_a, player_b]
