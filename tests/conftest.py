import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import numpy as np
import pytest

from roster_jump.cues import LoggingCuePlayer
from roster_jump.world import World


class StubRng:
    """Deterministic stand-in for numpy's Generator."""

    def __init__(self, value=0.0):
        self.value = value

    def random(self):
        return self.value

    def integers(self, low, high=None):
        return low if high is not None else 0


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def events():
    return {"scores": [], "ended": []}


@pytest.fixture
def world(rng, events):
    return World(
        rng=rng,
        cues=LoggingCuePlayer(),
        on_score=events["scores"].append,
        on_session_end=events["ended"].append,
    )


@pytest.fixture
def bare_world(events):
    """A running session with an empty level; tests place entities by hand.

    Rolls of 0.99 never spawn monsters, obstacles or power-ups, and any
    platform generated above lands at the far right, clear of the player.
    """
    world = World(
        rng=StubRng(0.99),
        cues=LoggingCuePlayer(),
        on_score=events["scores"].append,
        on_session_end=events["ended"].append,
    )
    world.start_session([])
    world.platforms.clear()
    world.obstacles.clear()
    world.power_ups.clear()
    return world
