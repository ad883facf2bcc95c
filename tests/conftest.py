"""Shared fixtures: a hand-driven clock and seeded randomness."""
import random
import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from term_flappy.config import GameConfig  # noqa: E402
from term_flappy.game_engine import GameEngine  # noqa: E402


class FakeClock:
    """Monotonic clock that only moves when a test says so."""

    def __init__(self, start: float = 0.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def engine(clock, rng):
    return GameEngine(config=GameConfig(), clock=clock, rng=rng)
