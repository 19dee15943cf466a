import pytest

from domino_shuffle import RandomSource, ScriptedRandom, ShuffleEngine


@pytest.fixture
def vertical_engine():
    """Engine whose every draw (0.99) loses against the 0.5 bias."""
    return ShuffleEngine(bias=0.5, rng=ScriptedRandom([0.99]))


@pytest.fixture
def seeded_engine():
    return ShuffleEngine(rng=RandomSource(seed=2024))
