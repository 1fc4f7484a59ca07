from __future__ import annotations

import random

from ...domain.shared.repositories import MIN_RAND_MAX, Randomizer

# Native range of the C library generator on common platforms.
RAND_MAX = 2**31 - 1


class SystemRandomizer(Randomizer):
    def __init__(self, source: random.Random | None = None, *, max_value: int = RAND_MAX):
        if max_value < MIN_RAND_MAX:
            raise ValueError(f"max_value must be at least {MIN_RAND_MAX}, got {max_value}")
        self._random = source or random.Random()
        self.max_value = max_value

    def seed(self, value: int) -> None:
        self._random.seed(value)

    def next(self) -> int:
        return self._random.randint(0, self.max_value)
