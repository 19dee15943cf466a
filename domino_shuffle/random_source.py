"""
Randomness for the shuffling engine.

The engine only needs an object with a `random()` method returning floats in
[0, 1). `random.Random` and `numpy.random.Generator` both fit; RandomSource
adds seeding and a draw counter on top of numpy's generator so batch runs can
be replayed.
"""

from typing import Optional, Protocol, Sequence

import numpy as np


class SupportsRandom(Protocol):
    def random(self) -> float: ...


class RandomSource:
    """Seedable uniform source backed by numpy's default generator."""

    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self.draws = 0

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def reseed(self, seed: Optional[int]) -> None:
        """Restart the stream (None -> fresh non-deterministic stream)."""
        self._seed = seed
        self._rng = np.random.default_rng(seed)
        self.draws = 0

    def random(self) -> float:
        self.draws += 1
        return float(self._rng.random())


class ScriptedRandom:
    """Replays a fixed sequence of values, cycling when exhausted.

    Useful to drive the engine deterministically (e.g. always 0.99).
    """

    def __init__(self, values: Sequence[float]):
        if not values:
            raise ValueError("Need at least one value to replay")
        for v in values:
            if not 0.0 <= v < 1.0:
                raise ValueError(f"Random value {v} is outside [0, 1)")
        self.values = list(values)
        self.draws = 0

    def random(self) -> float:
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value
