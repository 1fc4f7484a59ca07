from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

# Largest count of lines a sequence may hold (unsigned 32-bit index).
MAX_LINES = 2**32 - 1
# Range endpoints are unsigned 64-bit numbers.
MAX_RANGE_VALUE = 2**64 - 1


class SourceMode(Enum):
    FILE = "file"
    ARGUMENTS = "arguments"
    RANGE = "range"


@dataclass(frozen=True)
class RangeSpec:
    lo: int
    hi: int

    @property
    def count(self) -> int:
        return self.hi - self.lo + 1

    def value_of(self, offset: int) -> int:
        return self.lo + offset

    def __str__(self) -> str:
        return f"{self.lo}-{self.hi}"


@dataclass
class LineSequence:
    """
    Lines to shuffle, all of one kind.
    FILE and ARGUMENTS hold text; RANGE holds integer offsets from ``range.lo``.
    """

    mode: SourceMode
    lines: list = field(default_factory=list)
    range: Optional[RangeSpec] = None

    @property
    def numlines(self) -> int:
        return len(self.lines)
