from __future__ import annotations

import logging
import time
from typing import Callable, MutableSequence

from .shared.repositories import Randomizer

logger = logging.getLogger(__name__)

_UINT_MASK = 0xFFFFFFFF


def monotonic_us() -> int:
    return time.monotonic_ns() // 1000


class Shuffler:
    """
    Partial Fisher-Yates shuffle walking from the end of the sequence.

    Only ``outlines`` swaps are made: afterwards the last ``outlines`` slots
    hold the random sample and the prefix is left in arbitrary order.
    The reduction ``r % numlines`` is biased towards small values when
    ``numlines`` gets close to 2**32; that distribution is kept as is.
    """

    def __init__(self, randomizer: Randomizer, *, clock: Callable[[], int] = monotonic_us):
        self._randomizer = randomizer
        self._clock = clock

    def shuffle(self, lines: MutableSequence, numlines: int, outlines: int) -> None:
        if numlines > len(lines):
            raise ValueError(f"numlines {numlines} exceeds sequence length {len(lines)}")
        if not 0 <= outlines <= numlines:
            raise ValueError(f"outlines must be within 0..{numlines}, got {outlines}")

        seed = self._clock()
        self._randomizer.seed(seed)
        logger.debug("Shuffling %s of %s lines (seed=%s)", outlines, numlines, seed)

        rng = self._randomizer
        while outlines:
            r = rng.next()
            if numlines > rng.max_value:
                r = (r ^ (rng.next() << 15)) & _UINT_MASK
            r %= numlines
            numlines -= 1
            lines[numlines], lines[r] = lines[r], lines[numlines]
            outlines -= 1
