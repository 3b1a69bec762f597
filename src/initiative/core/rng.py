"""Seedable RNG wrapper used for initiative rolls."""
from __future__ import annotations

from random import Random

D20 = 20


class RNG:
    """Wrapper around random.Random that provides dice helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = Random(seed)

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def roll(self, sides: int = D20) -> int:
        """Roll a single die with the given number of sides."""
        if sides < 1:
            raise ValueError("A die needs at least one side.")
        return self.randint(1, sides)
