"""
Wordle Engine Package

Secret-word guessing game core: a weighted word dictionary, the board holding
the secret word and guesses, and per-character feedback evaluation.
"""

from .config import Config
from .models import (
    BoardState,
    BoardStateCharacter,
    CharacterState,
    GuessError,
    LoadError,
    NoCandidateError,
    WordNotFoundError,
    WrongSizeError,
)
from .services import Board, DuplicateLetterPolicy, WordStore, initialize_word_store


def create_board(config_class=Config, length=None):
    """
    Factory for a board backed by the dictionary described by `config_class`.

    Args:
        config_class: Configuration class to use
        length: Secret word length, config_class.DEFAULT_WORD_LENGTH when omitted

    Returns:
        Board sharing the global word store
    """
    store = initialize_word_store(config_class)
    policy = DuplicateLetterPolicy(config_class.DUPLICATE_LETTER_POLICY)
    if length is None:
        length = config_class.DEFAULT_WORD_LENGTH
    return Board.new(length, store=store, policy=policy)


__all__ = [
    'create_board', 'Config',
    'Board', 'BoardState', 'BoardStateCharacter', 'CharacterState', 'DuplicateLetterPolicy', 'WordStore',
    'GuessError', 'LoadError', 'NoCandidateError', 'WordNotFoundError', 'WrongSizeError'
]
