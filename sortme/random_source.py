"""
Seeded uniform random source.
"""

import random
from typing import List, Optional

from .interfaces import RandomSource

DEFAULT_LOW = 10
DEFAULT_HIGH = 500


class UniformRandomSource(RandomSource):
    """
    Integers drawn uniformly from [low, high] (both inclusive).

    Pass a seed to get the same sequences on every run.
    """

    def __init__(self, low: int = DEFAULT_LOW, high: int = DEFAULT_HIGH, seed: Optional[int] = None) -> None:
        if low < 1 or high < low:
            raise ValueError(f"invalid value range [{low}, {high}]")
        self.low = low
        self.high = high
        self._rng = random.Random(seed)

    def generate(self, n: int) -> List[int]:
        if n < 0:
            raise ValueError(f"cannot generate {n} values")
        return [self._rng.randint(self.low, self.high) for _ in range(n)]
