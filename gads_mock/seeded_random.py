"""
Deterministic random source keyed by a string seed.

Usage:
    from gads_mock.seeded_random import SeededRandom, create_seed

    rng = SeededRandom(create_seed("structure", "123-456-7890"))
    budget = rng.int_range(50, 500) * 10
    status = rng.pick(["ENABLED", "PAUSED"])

The same seed always yields the same sequence, across runs and restarts.
"""

import math
import random
from typing import List, Sequence, TypeVar

T = TypeVar("T")

SEED_DELIMITER = ":"


class SeededRandom:
    """Seeded pseudo-random stream with the draws the generators need."""

    def __init__(self, seed: str):
        """
        Args:
            seed: Arbitrary string seed (build it with create_seed)
        """
        self.seed = seed
        # str seeds are hashed with sha512 by random.Random (stable, not PYTHONHASHSEED dependent)
        self._rnd = random.Random(seed)

    def uniform(self) -> float:
        """Float in [0, 1)."""
        return self._rnd.random()

    def int_range(self, min_value: int, max_value: int) -> int:
        """Integer in [min_value, max_value], both ends inclusive."""
        return math.floor(self.uniform() * (max_value - min_value + 1)) + min_value

    def float_range(self, min_value: float, max_value: float) -> float:
        """Float between min_value and max_value."""
        return self.uniform() * (max_value - min_value) + min_value

    def pick(self, items: Sequence[T]) -> T:
        """Pick one element uniformly."""
        return items[self.int_range(0, len(items) - 1)]

    def pick_many(self, items: Sequence[T], n: int) -> List[T]:
        """
        Pick n elements without replacement.

        Args:
            items: Source sequence (not modified)
            n: Number of elements wanted; capped at len(items)

        Returns:
            Picked elements in draw order
        """
        pool = list(items)
        picked = []
        for _ in range(min(n, len(pool))):
            idx = self.int_range(0, len(pool) - 1)
            picked.append(pool.pop(idx))
        return picked

    def gaussian(self, mean: float, std_dev: float) -> float:
        """Normal draw via Box-Muller (two uniform draws)."""
        u1 = self.uniform()
        u2 = self.uniform()
        # log(0) guard
        z = math.sqrt(-2 * math.log(u1 or 0.0001)) * math.cos(2 * math.pi * u2)
        return mean + z * std_dev

    @staticmethod
    def with_weekday_variance(
        value: float, day_of_week: int, weekday_multiplier: float = 1.2
    ) -> float:
        """
        Scale a value up on weekdays and down on weekends.

        Args:
            value: Base value
            day_of_week: date.weekday() numbering (Mon=0 ... Sun=6)
            weekday_multiplier: Weekday factor; weekends get its inverse

        Returns:
            Adjusted value
        """
        is_weekend = day_of_week >= 5
        multiplier = 1 / weekday_multiplier if is_weekend else weekday_multiplier
        return value * multiplier


def create_seed(*parts) -> str:
    """
    Build a seed string from ordered parts.

    Example:
        >>> create_seed("account", "123", "campaign", 456)
        'account:123:campaign:456'
    """
    return SEED_DELIMITER.join(str(part) for part in parts)
