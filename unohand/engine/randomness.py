"""Injectable randomness: shufflers for piles and randomizers for seat picks.

Nothing in the engine touches the global ``random`` state directly; callers
hand in one of these so that a fixed seed reproduces a whole match.
"""

import random
from typing import Callable, List, Optional, Sequence

from unohand.engine.card import Card

Shuffler = Callable[[Sequence[Card]], List[Card]]
Randomizer = Callable[[int], int]


def standard_shuffler(cards: Sequence[Card]) -> List[Card]:
    return random.sample(list(cards), len(cards))


def standard_randomizer(bound: int) -> int:
    return random.randrange(bound)


def seeded_shuffler(seed: Optional[int]) -> Shuffler:
    """Return a shuffler driven by its own ``random.Random(seed)``."""
    rng = random.Random(seed)

    def shuffle(cards: Sequence[Card]) -> List[Card]:
        shuffled = list(cards)
        rng.shuffle(shuffled)
        return shuffled

    return shuffle


def seeded_randomizer(seed: Optional[int]) -> Randomizer:
    """Return a randomizer yielding ints in ``[0, bound)`` from ``random.Random(seed)``."""
    rng = random.Random(seed)
    return rng.randrange
