from __future__ import annotations

import random
from typing import List, Optional, TypeVar

T = TypeVar("T")


class DeterministicRng:
    def __init__(self, seed: Optional[int] = None):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> Optional[int]:
        return self._seed

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)

    def chance(self, probability: float) -> bool:
        # random() is in [0, 1), so 0.0 never fires and 1.0 always does.
        return self._random.random() < probability

    def shuffle(self, items: List[T]) -> None:
        self._random.shuffle(items)
