import random

import pytest


class FixedRandom:
    """
    Deterministic stand-in for random.Random.

    random() always returns `value`, randint() the lower bound,
    choice() the first element, shuffle() leaves order alone.
    """

    def __init__(self, value=0.0):
        self.value = value

    def random(self):
        return self.value

    def randint(self, a, b):
        return a

    def choice(self, seq):
        return seq[0]

    def shuffle(self, seq):
        pass


@pytest.fixture
def fixed_rng():
    """Factory for FixedRandom with a chosen random() value."""
    return FixedRandom


@pytest.fixture
def rng():
    """Seeded Random so runs are repeatable."""
    return random.Random(1234)


@pytest.fixture
def event_bus():
    """Fresh EventBus for each test."""
    from dungeon_engine.core.events import EventBus
    return EventBus()


@pytest.fixture
def scheduler():
    from dungeon_engine.core.scheduler import Scheduler
    return Scheduler()


@pytest.fixture
def memory_store():
    from dungeon_engine.storage import MemoryStore
    return MemoryStore()


@pytest.fixture
def hero():
    """Hero with the standard new-game stats (100 HP, 15 ATK, 8 DEF)."""
    from math_dungeon.battle import Hero
    return Hero.create()
