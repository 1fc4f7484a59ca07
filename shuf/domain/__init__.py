from .errors import BadRangeError, InvalidNumberError, ShufError, UsageError
from .models import MAX_LINES, MAX_RANGE_VALUE, LineSequence, RangeSpec, SourceMode
from .shared.repositories import MIN_RAND_MAX, Randomizer
from .shuffler import Shuffler, monotonic_us

__all__ = [
    "BadRangeError",
    "InvalidNumberError",
    "ShufError",
    "UsageError",
    "MAX_LINES",
    "MAX_RANGE_VALUE",
    "LineSequence",
    "RangeSpec",
    "SourceMode",
    "MIN_RAND_MAX",
    "Randomizer",
    "Shuffler",
    "monotonic_us",
]
