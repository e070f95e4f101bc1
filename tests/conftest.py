import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from retro_pong.config import Config
from retro_pong.game import Game


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def game(config, rng):
    return Game(config, rng=rng)
