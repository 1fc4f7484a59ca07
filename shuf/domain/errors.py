from __future__ import annotations


class ShufError(Exception):
    """Base class for errors that abort a run before any output."""


class UsageError(ShufError):
    pass


class BadRangeError(ShufError):
    def __init__(self, text: str):
        super().__init__(f"bad range '{text}'")
        self.text = text


class InvalidNumberError(ShufError):
    def __init__(self, text: str):
        super().__init__(f"invalid number '{text}'")
        self.text = text
