"""Write a random permutation of input lines to standard output."""

__version__ = "0.1.0"
