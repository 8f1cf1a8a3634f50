"""Randomness sources for path sampling and generation."""

from __future__ import annotations

import random
from typing import List, Optional, Protocol, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def next_below(self, n: int) -> int:
        """Return a uniformly chosen integer in ``[0, n)``."""


class SeededRandom:
    """``RandomSource`` backed by :class:`random.Random`.

    The same seed (a string or an int) always gives the same puzzles.
    """

    def __init__(self, seed: Optional[str | int] = None):
        self.seed = seed
        self._random = random.Random(seed)

    def next_below(self, n: int) -> int:
        return self._random.randrange(n)


def shuffle(items: List[T], rng: RandomSource) -> None:
    """Fisher-Yates shuffle of ``items`` in place."""
    for i in range(len(items) - 1, 0, -1):
        j = rng.next_below(i + 1)
        items[i], items[j] = items[j], items[i]
