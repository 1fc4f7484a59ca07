from __future__ import annotations

from typing import Protocol

# Smallest native range a generator may have; wider draws are combined by the shuffler.
MIN_RAND_MAX = 32767


class Randomizer(Protocol):
    max_value: int

    def seed(self, value: int) -> None: ...

    def next(self) -> int: ...
