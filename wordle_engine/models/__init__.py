"""
Data Models Package

Contains the board-state data models and error types.
"""

from .errors import (
    GuessError,
    LoadError,
    NoCandidateError,
    WordleError,
    WordNotFoundError,
    WrongSizeError,
)
from .game import BoardState, BoardStateCharacter, CharacterState, WinCondition, state_sort_key

__all__ = [
    'BoardState', 'BoardStateCharacter', 'CharacterState', 'WinCondition', 'state_sort_key',
    'WordleError', 'LoadError', 'NoCandidateError', 'GuessError', 'WrongSizeError', 'WordNotFoundError'
]
