from __future__ import annotations
import random
from typing import Optional, Protocol


class RandomSource(Protocol):
    def pick_index(self, n: int) -> int:
        """Return an integer drawn uniformly from [0, n)."""
        ...


class PyRandomSource:
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(int(seed)) if seed is not None else random.Random()

    def pick_index(self, n: int) -> int:
        return self.rng.randrange(n)
