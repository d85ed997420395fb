"""
Game Data Models

Contains all board-state data structures and enums.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple


class CharacterState(Enum):
    """Relationship of a guessed character to the secret word."""
    CORRECT = "CORRECT"
    WRONG_POSITION = "WRONG_POSITION"
    NOT_FOUND = "NOT_FOUND"


# Display order only. Game logic never compares states.
_STATE_ORDER = {
    CharacterState.CORRECT: 0,
    CharacterState.WRONG_POSITION: 1,
    CharacterState.NOT_FOUND: 2,
}


def state_sort_key(state: Optional[CharacterState]) -> int:
    """Stable sort key for states; unevaluated (None) sorts last."""
    if state is None:
        return len(_STATE_ORDER)
    return _STATE_ORDER[state]


class WinCondition(ABC):
    """Anything that can tell whether the secret word has been found."""

    @abstractmethod
    def has_won(self) -> bool:
        ...


@dataclass(frozen=True)
class BoardStateCharacter:
    """One evaluated character of a guess. `state` is None until evaluated."""
    character: str
    state: Optional[CharacterState] = None


@dataclass
class BoardState(WinCondition):
    """Per-guess feedback rows, in guess order."""
    rows: List[List[BoardStateCharacter]] = field(default_factory=list)

    def has_won(self) -> bool:
        for row in self.rows:
            if row and all(cell.state == CharacterState.CORRECT for cell in row):
                return True
        return False

    def as_results(self) -> List[List[Tuple[str, Optional[str]]]]:
        """Letter status as strings for JSON serialization."""
        return [
            [(cell.character, cell.state.value if cell.state else None) for cell in row]
            for row in self.rows
        ]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[List[BoardStateCharacter]]:
        return iter(self.rows)
