"""
Error Types

Exceptions raised by the dictionary and the board.
"""

from typing import Optional


class WordleError(Exception):
    """Base class for all wordle_engine errors."""


class LoadError(WordleError):
    """A dictionary or snapshot could not be read or is malformed."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class NoCandidateError(WordleError):
    """No dictionary word has the requested length."""

    def __init__(self, length: int):
        super().__init__(f"No word of length {length} in the dictionary")
        self.length = length


class GuessError(WordleError):
    """A guess was rejected. The board is left unchanged."""

    def __init__(self, message: str, guess: str):
        super().__init__(message)
        self.guess = guess


class WrongSizeError(GuessError):
    def __init__(self, guess: str, expected: int):
        super().__init__(f"Guess must be exactly {expected} letters", guess)
        self.expected = expected


class WordNotFoundError(GuessError):
    def __init__(self, guess: str):
        super().__init__("Word not in word list", guess)
