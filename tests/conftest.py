import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

from fxsnake.grid import Grid
from fxsnake.scheduler import Scheduler


class FakeClock:
    """Millisecond clock the tests move by hand."""

    def __init__(self):
        self.now = 0

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms
        return self.now


@pytest.fixture
def grid():
    # 20 x 15 cells of 16px
    return Grid(320, 240, 16)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return Scheduler(clock)


@pytest.fixture
def rng():
    return random.Random(1234)
