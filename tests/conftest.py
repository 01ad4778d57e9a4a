import os

# pygame must not try to open a real window while tests run.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pytest

from snake_arcade.engine import GameEngine
from snake_arcade.prefs import PreferenceStore


class ScriptedRng:
    """randrange() replays a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randrange(self, stop):
        value = self.values[self.calls]
        self.calls += 1
        assert 0 <= value < stop
        return value


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def engine():
    """5x5 engine, head at (2, 2), food parked in the corner."""
    eng = GameEngine(grid_size=5, rng=random.Random(1234))
    eng.food = (0, 0)
    return eng


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(tmp_path / "prefs.json")


@pytest.fixture(scope="session")
def pygame_display():
    """Headless pygame for the drawing tests, initialised once."""
    import pygame

    pygame.init()
    yield pygame
    pygame.quit()
