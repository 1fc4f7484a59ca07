from .randomizer import RAND_MAX, SystemRandomizer

__all__ = ["RAND_MAX", "SystemRandomizer"]
