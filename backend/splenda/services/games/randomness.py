"""Injectable random sources used when dealing a new game."""
import random
import secrets
from typing import Optional, Sequence


class RandomSource:
    """Anything that can return an int in ``[0, n)``."""

    def next(self, n: int) -> int:
        raise NotImplementedError


class SeededRandom(RandomSource):
    def __init__(self, seed):
        self._random = random.Random(seed)

    def next(self, n: int) -> int:
        return self._random.randrange(n)


class SystemRandomSource(RandomSource):
    def next(self, n: int) -> int:
        return secrets.randbelow(n)


def make_random_source(seed: Optional[int] = None) -> RandomSource:
    if seed is None:
        return SystemRandomSource()
    return SeededRandom(seed)


def pick(items: Sequence, n: int, rng: RandomSource) -> list:
    """Draw ``n`` items without replacement, in draw order."""
    pool = list(items)
    if n > len(pool):
        raise ValueError(f'cannot pick {n} from {len(pool)} items')
    chosen = []
    for _ in range(n):
        chosen.append(pool.pop(rng.next(len(pool))))
    return chosen


def shuffle(items: Sequence, rng: RandomSource) -> list:
    return pick(items, len(items), rng)
