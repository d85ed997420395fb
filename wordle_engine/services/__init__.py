"""
Services Package

Contains the dictionary store, the guess evaluator and the board.
"""

from .word_store import WordStore, get_word_store, initialize_word_store, set_word_store
from .evaluator import DuplicateLetterPolicy, aggregate_key_state, build_board_state, evaluate_guess
from .board import Board

__all__ = [
    'WordStore', 'get_word_store', 'initialize_word_store', 'set_word_store',
    'DuplicateLetterPolicy', 'aggregate_key_state', 'build_board_state', 'evaluate_guess',
    'Board'
]
