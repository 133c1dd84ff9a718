import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from asteroids.audio import SoundEffects
from asteroids.game import Game
from asteroids.highscore import HighScoreStore
from asteroids.settings import Settings


class RecordingSoundEffects(SoundEffects):
    """Silent sound effects that remember what would have played"""

    def __init__(self, settings: Settings) -> None:
        self.played = []
        super().__init__(settings, synthesize=False)

    def _play(self, sound_name: str) -> None:
        self.played.append(sound_name)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sound_effects(settings):
    return RecordingSoundEffects(settings)


@pytest.fixture
def store():
    return HighScoreStore()


@pytest.fixture
def game(settings, sound_effects, store, rng):
    return Game(settings, sound_effects, store, rng)
