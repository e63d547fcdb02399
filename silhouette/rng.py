"""Seedable random number helpers."""

from __future__ import annotations

import random
from typing import MutableSequence, Optional, Sequence, Union


class Rng:
    """A Mersenne Twister generator with game-oriented helpers.

    Without a seed it is seeded from the operating system's entropy source.
    """

    def __init__(self, seed: Optional[int] = None):
        self._generator = random.Random()
        self.seed(seed)

    def seed(self, seed: Optional[int] = None) -> None:
        self._generator.seed(seed)

    def int_in_range(self, low: int, high: int) -> int:
        """A uniform integer in [low, high], both ends included."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high}]")
        return self._generator.randint(low, high)

    def float_in_range(self, low: float, high: float) -> float:
        """A uniform float in [low, high)."""
        if low > high:
            raise ValueError(f"empty range [{low}, {high})")
        return low + (high - low) * self._generator.random()

    def index(self, size: Union[int, Sequence]) -> int:
        """A uniform index into a sequence, or into a sequence of that size."""
        if not isinstance(size, int):
            size = len(size)
        if size <= 0:
            raise ValueError("cannot pick an index from an empty range")
        return self._generator.randint(0, size - 1)

    def weighted_index(self, weights: Sequence[int]) -> int:
        """An index chosen with probability proportional to its positive weight."""
        if not weights:
            raise ValueError("weights must not be empty")
        if any(w <= 0 for w in weights):
            raise ValueError("every weight must be positive")
        x = self.int_in_range(0, sum(weights) - 1)
        for i, weight in enumerate(weights):
            x -= weight
            if x < 0:
                return i
        return 0

    def coinflip(self) -> bool:
        return self._generator.randint(0, 1) == 1

    def one_in(self, x: int) -> bool:
        """True with probability 1/x."""
        if x < 1:
            raise ValueError("x must be at least 1")
        return self._generator.randint(1, x) == 1

    def shuffle(self, items: MutableSequence) -> None:
        """Shuffle items in place."""
        self._generator.shuffle(items)