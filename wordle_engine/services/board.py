"""
Board Service

A single game: the secret word, the accepted guesses and the dictionary
they are checked against. Feedback is derived from those on every request.
"""

from typing import Dict, List, Optional, Tuple

from ..config import ALPHABET, Config
from ..models.errors import GuessError, WordNotFoundError, WrongSizeError
from ..models.game import BoardState, CharacterState, WinCondition
from ..utils.game_logger import game_logger
from .evaluator import DuplicateLetterPolicy, aggregate_key_state, build_board_state
from .word_store import WordStore, get_word_store, initialize_word_store


def _default_store() -> WordStore:
    store = get_word_store()
    if store is None:
        store = initialize_word_store()
    return store


class Board(WinCondition):
    """
    One Wordle board.

    This class handles:
    - Secret word selection and registration into the dictionary
    - Guess validation (dictionary membership, then length)
    - Feedback and keyboard hints, recomputed from the guesses each time
    """

    def __init__(self, store: Optional[WordStore] = None,
                 policy: Optional[DuplicateLetterPolicy] = None):
        self.store = store if store is not None else _default_store()
        self.policy = policy or DuplicateLetterPolicy(Config.DUPLICATE_LETTER_POLICY)
        self.word = ""
        self.guesses: List[str] = []

    @classmethod
    def new(cls, length: Optional[int] = None, store: Optional[WordStore] = None,
            policy: Optional[DuplicateLetterPolicy] = None, rng=None) -> 'Board':
        """
        Creates a board with a random secret word.

        Args:
            length: Secret word length, Config.DEFAULT_WORD_LENGTH when omitted

        Raises:
            NoCandidateError: If the dictionary has no word of `length`
        """
        board = cls(store, policy)
        if length is None:
            length = Config.DEFAULT_WORD_LENGTH
        board.reset_with_length(length, rng=rng)
        game_logger.log_game_event('board_created', word_length=len(board.word), policy=board.policy.value)
        return board

    @classmethod
    def new_with_word(cls, word: str, store: Optional[WordStore] = None,
                      policy: Optional[DuplicateLetterPolicy] = None) -> 'Board':
        board = cls(store, policy)
        board.reset_with_word(word)
        game_logger.log_game_event('board_created', word_length=len(board.word), policy=board.policy.value)
        return board

    def reset(self, rng=None) -> None:
        """Picks a new secret word of the current length and clears the guesses."""
        self.reset_with_length(len(self.word), rng=rng)

    def reset_with_length(self, length: int, rng=None) -> None:
        self.reset_with_word(self.store.get_random_word(length, rng=rng))

    def reset_with_word(self, word: str) -> None:
        word = word.strip().lower()
        if not word:
            raise ValueError("Secret word cannot be empty")
        self.store.register(word)
        self.word = word
        self.guesses = []
        game_logger.log_game_event('board_reset', word_length=len(word))

    def _normalize(self, guess: str) -> str:
        if not isinstance(guess, str):
            raise TypeError(f"Guess must be a string, got {type(guess).__name__}")
        return guess.strip().lower()

    def _validate(self, guess: str) -> None:
        if not self.store.contains(guess):
            raise WordNotFoundError(guess)
        if len(guess) != len(self.word):
            raise WrongSizeError(guess, len(self.word))

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess without recording it.

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            self._validate(self._normalize(guess))
        except (GuessError, TypeError) as e:
            return False, str(e)
        return True, ""

    def add_guess(self, guess: str) -> None:
        """
        Records a guess. The board is unchanged when the guess is rejected.

        Raises:
            WordNotFoundError: If the word is not in the dictionary
            WrongSizeError: If the word length differs from the secret word
        """
        normalized = self._normalize(guess)
        try:
            self._validate(normalized)
        except GuessError as e:
            game_logger.log_game_event('guess_rejected', guess=normalized, reason=str(e))
            raise

        self.guesses.append(normalized)
        game_logger.log_game_event('guess_accepted', guess=normalized, guess_count=len(self.guesses))
        if normalized == self.word:
            game_logger.log_game_event('game_won', guess_count=len(self.guesses))

    @property
    def guess_count(self) -> int:
        return len(self.guesses)

    def get_state(self) -> BoardState:
        return build_board_state(self.word, self.guesses, self.policy)

    def has_won(self) -> bool:
        return self.word in self.guesses

    def get_key_state(self, character: str) -> Optional[CharacterState]:
        return aggregate_key_state(self.get_state(), character)

    def get_key_states(self, alphabet: str = ALPHABET) -> Dict[str, Optional[CharacterState]]:
        """Key state of every letter in `alphabet`, for keyboard displays."""
        state = self.get_state()
        return {letter: aggregate_key_state(state, letter) for letter in alphabet}
