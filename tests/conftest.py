import random

import pytest

from snake_arcade.config import RIGHT
from snake_arcade.controller import GameController
from snake_arcade.game import GameState
from snake_arcade.highscore import MemoryStorage
from snake_arcade.scheduler import Scheduler


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock)


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def controller(scheduler, storage):
    return GameController(scheduler, storage, rng=random.Random(7))


@pytest.fixture
def initial_state():
    """The start position with food parked out of the way."""
    return GameState(
        snake=((10, 10), (9, 10), (8, 10)),
        food=(0, 0),
        direction=RIGHT,
    )
