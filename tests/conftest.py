import os
import random

import pytest

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from flappy.config import DESKTOP
from flappy.session import GameSession, MemoryScoreStore


class RecordingListener:
    def __init__(self):
        self.events = []

    def on_jump(self):
        self.events.append(('jump',))

    def on_score(self, score):
        self.events.append(('score', score))

    def on_game_over(self, score):
        self.events.append(('game_over', score))


@pytest.fixture
def config():
    return DESKTOP


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def session(config, store, listener, rng):
    return GameSession(config, store=store, listeners=[listener], rng=rng)
