import random
from typing import List, Optional, Protocol, Sequence, TypeVar

T = TypeVar("T")

class RandomSource(Protocol):
    # Anything random.Random-shaped; the generator only needs these two.
    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...

def make_random(seed: Optional[int] = None) -> random.Random:
    """
    Fresh generator per call. seed=None draws from OS entropy,
    so only seeded runs are reproducible.
    """
    return random.Random(seed)

def shuffle(items: List[T], rng: RandomSource) -> None:
    # Fisher–Yates, in place, walking down from the last slot.
    for i in range(len(items) - 1, 0, -1):
        j = rng.randrange(i + 1)
        items[i], items[j] = items[j], items[i]

def pick(rng: RandomSource, items: Sequence[T]) -> T:
    assert len(items) > 0
    return items[rng.randrange(len(items))]
