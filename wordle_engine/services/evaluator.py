"""
Guess Evaluator

Pure functions turning (secret word, guesses) into per-character feedback,
plus the keyboard-hint aggregation over that feedback.
"""

from enum import Enum
from typing import Iterable, List, Optional

from ..models.game import BoardState, BoardStateCharacter, CharacterState


class DuplicateLetterPolicy(Enum):
    """
    How repeated letters are scored.

    FIRST_MATCH marks exact positions CORRECT, then only asks whether the
    letter occurs anywhere in the secret. Nothing is consumed, so a guess
    with more copies of a letter than the secret still gets a hint for every
    copy. CONSUME is the usual
    Wordle rule where each secret letter can satisfy only one guessed letter.
    """
    FIRST_MATCH = "first_match"
    CONSUME = "consume"


def _evaluate_first_match(guess: str, secret: str) -> List[BoardStateCharacter]:
    result = []
    for index, character in enumerate(guess):
        if character == secret[index]:
            state = CharacterState.CORRECT
        elif character in secret:
            state = CharacterState.WRONG_POSITION
        else:
            state = CharacterState.NOT_FOUND
        result.append(BoardStateCharacter(character, state))
    return result


def _evaluate_consume(guess: str, secret: str) -> List[BoardStateCharacter]:
    states: List[Optional[CharacterState]] = [None] * len(guess)
    remaining: List[Optional[str]] = list(secret)

    # First pass: exact position matches
    for i, character in enumerate(guess):
        if character == secret[i]:
            states[i] = CharacterState.CORRECT
            remaining[i] = None

    # Second pass: misplaced letters consume what is left
    for i, character in enumerate(guess):
        if states[i] is not None:
            continue
        if character in remaining:
            states[i] = CharacterState.WRONG_POSITION
            remaining[remaining.index(character)] = None
        else:
            states[i] = CharacterState.NOT_FOUND

    return [BoardStateCharacter(character, state) for character, state in zip(guess, states)]


def evaluate_guess(guess: str, secret: str,
                   policy: DuplicateLetterPolicy = DuplicateLetterPolicy.FIRST_MATCH) -> List[BoardStateCharacter]:
    """
    Score one guess against the secret word.

    Raises:
        ValueError: If the guess and the secret differ in length
    """
    if len(guess) != len(secret):
        raise ValueError(f"Guess '{guess}' and secret differ in length")
    if policy == DuplicateLetterPolicy.CONSUME:
        return _evaluate_consume(guess, secret)
    return _evaluate_first_match(guess, secret)


def build_board_state(secret: str, guesses: Iterable[str],
                      policy: DuplicateLetterPolicy = DuplicateLetterPolicy.FIRST_MATCH) -> BoardState:
    return BoardState([evaluate_guess(guess, secret, policy) for guess in guesses])


def aggregate_key_state(state: BoardState, character: str) -> Optional[CharacterState]:
    """
    Best known state of one letter across all guesses, for keyboard hints.

    Status can only progress in priority order: CORRECT over WRONG_POSITION
    over NOT_FOUND. Under CONSUME a letter scored NOT_FOUND in one slot may
    still be in the secret, so NOT_FOUND never hides a better state.
    """
    character = character.lower()
    best: Optional[CharacterState] = None
    for row in state:
        for cell in row:
            if cell.character != character or cell.state is None:
                continue
            if cell.state == CharacterState.CORRECT:
                return cell.state
            if cell.state == CharacterState.WRONG_POSITION or best is None:
                best = cell.state
    return best
