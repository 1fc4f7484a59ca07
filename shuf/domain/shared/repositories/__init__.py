from .randomizer import MIN_RAND_MAX, Randomizer

__all__ = ["MIN_RAND_MAX", "Randomizer"]
