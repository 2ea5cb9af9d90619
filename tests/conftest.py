import os
import random

# Headless SDL before anything imports pygame
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from core.high_score import HighScoreStore
from core.stats import Stats


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store(tmp_path):
    return HighScoreStore(tmp_path / "high_score.txt")


@pytest.fixture
def stats(store):
    return Stats(store)


@pytest.fixture
def broken_store(tmp_path):
    # A directory can't be opened for writing
    return HighScoreStore(tmp_path)
