"""Shared fixtures: a seeded world wired to a fresh event bus."""
from __future__ import annotations

import random

import pytest

from neonflap.core.events import EventBus, EventType
from neonflap.game.controller import GameController
from neonflap.game.scoring import MemoryScoreStore, Score
from neonflap.game.world import World


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def store():
    return MemoryScoreStore()


@pytest.fixture
def world(rng, store):
    return World(score=Score(store), rng=rng)


@pytest.fixture
def bus():
    return EventBus(history_limit=1000)


@pytest.fixture
def controller(world, bus):
    ctrl = GameController(world, bus)
    yield ctrl
    ctrl.close()


@pytest.fixture
def cues(bus):
    """Callable returning the sound cues emitted so far, oldest first."""
    return lambda: [e.data["cue"] for e in bus.get_history(EventType.SOUND_PLAY, limit=1000)]
