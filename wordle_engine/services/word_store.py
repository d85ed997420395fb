"""
Word Store Service

Holds the weighted dictionary of valid words: loading from JSON, random
secret-word selection by length, membership checks and best-effort saving.
"""

import json
import random
import threading
from typing import Dict, List, Mapping, Optional

from ..config import Config, DEFAULT_WORD_WEIGHT
from ..models.errors import LoadError, NoCandidateError
from ..utils.game_logger import game_logger


def _validate_entry(word, weight) -> None:
    if not isinstance(word, str) or not word:
        raise ValueError(f"Dictionary keys must be non-empty strings, got {word!r}")
    if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
        raise ValueError(f"Weight for '{word}' must be a non-negative integer, got {weight!r}")


class WordStore:
    """
    Dictionary of valid words mapped to usage weights.

    Keys are stored lowercase and every lookup is case-insensitive. A store is
    usually shared by several boards; all access goes through an internal
    lock so that concurrent reads and registrations stay consistent.
    """

    def __init__(self, words: Optional[Mapping[str, int]] = None):
        self._lock = threading.RLock()
        self._words: Dict[str, int] = {}
        for word, weight in (words or {}).items():
            try:
                _validate_entry(word, weight)
            except ValueError as e:
                raise LoadError(str(e)) from e
            self._words[word.lower()] = weight

    @classmethod
    def load(cls, path: str) -> 'WordStore':
        """
        Load a store from a JSON object of word -> weight.

        Raises:
            LoadError: If the file is unreadable, not JSON, or not a valid mapping
        """
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except OSError as e:
            raise LoadError(f"Cannot read word list {path}: {e}", path) from e
        except json.JSONDecodeError as e:
            raise LoadError(f"Invalid JSON in {path}: {e}", path) from e

        if not isinstance(data, dict):
            raise LoadError(f"{path} must contain a JSON object of word -> weight", path)

        try:
            store = cls(data)
        except LoadError as e:
            e.path = path
            raise

        game_logger.log_store_event('load', True, path=path, words=len(store))
        return store

    @classmethod
    def from_config(cls, config_class=Config) -> 'WordStore':
        """
        Default construction: the saved snapshot if it loads, else the canonical list.

        Raises:
            LoadError: If neither source can be loaded
        """
        try:
            return cls.load(config_class.WORDS_SAVED_PATH)
        except LoadError as e:
            game_logger.log_store_event(
                'fallback', False,
                path=config_class.WORDS_SAVED_PATH,
                fallback=config_class.WORDS_PATH,
                reason=str(e)
            )

        try:
            return cls.load(config_class.WORDS_PATH)
        except LoadError as e:
            game_logger.log_error(e, 'load', path=config_class.WORDS_PATH)
            raise

    def words_of_length(self, length: int) -> List[str]:
        """All words of the given length, sorted."""
        with self._lock:
            return sorted(word for word in self._words if len(word) == length)

    def get_random_word(self, length: int, rng=None) -> str:
        """
        Pick a word of `length` uniformly at random.

        Args:
            length: Required word length
            rng: Object with a randrange() method; defaults to the random module

        Raises:
            NoCandidateError: If no word has that length
        """
        candidates = self.words_of_length(length)
        if not candidates:
            raise NoCandidateError(length)
        rng = rng or random
        return candidates[rng.randrange(len(candidates))]

    def contains(self, word: str) -> bool:
        with self._lock:
            return word.lower() in self._words

    def __contains__(self, word) -> bool:
        return isinstance(word, str) and self.contains(word)

    def get_weight(self, word: str) -> Optional[int]:
        with self._lock:
            return self._words.get(word.lower())

    def insert(self, word: str, weight: int = DEFAULT_WORD_WEIGHT) -> None:
        """Add or overwrite an entry."""
        _validate_entry(word, weight)
        with self._lock:
            self._words[word.lower()] = weight

    def register(self, word: str) -> bool:
        """
        Make sure `word` is a legal guess. Existing weights are left alone.

        Returns:
            bool: True if the word was added
        """
        with self._lock:
            if self.contains(word):
                return False
            self.insert(word, DEFAULT_WORD_WEIGHT)
            return True

    def save(self, path: Optional[str] = None, config_class=Config) -> bool:
        """
        Write the whole mapping as JSON. Persistence is best-effort: failures
        are logged and never raised.

        Returns:
            bool: True if the snapshot was written
        """
        path = path or config_class.WORDS_SAVED_PATH
        snapshot = self.as_dict()
        try:
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(snapshot, f, indent=2, sort_keys=True, ensure_ascii=False)
        except (OSError, TypeError, ValueError) as e:
            game_logger.log_store_event('save', False, path=path, reason=str(e))
            return False

        game_logger.log_store_event('save', True, path=path, words=len(snapshot))
        return True

    def copy(self) -> 'WordStore':
        """Independent clone, for boards that should not share registrations."""
        return WordStore(self.as_dict())

    def as_dict(self) -> Dict[str, int]:
        with self._lock:
            return dict(self._words)

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    def get_statistics(self) -> dict:
        """
        Analyzes the dictionary and returns statistical information.

        Returns:
            dict: Statistical analysis including:
                - total_words: Number of words in the store
                - words_by_length: Word count per length
                - avg_weight: Average usage weight
                - letter_frequency: Distribution of letters across all words
                - most_common_letters: Five most frequent letters
        """
        words = self.as_dict()
        if not words:
            return {"error": "Word list is empty"}

        words_by_length: Dict[int, int] = {}
        letter_frequency: Dict[str, int] = {}
        for word in words:
            words_by_length[len(word)] = words_by_length.get(len(word), 0) + 1
            for char in word:
                letter_frequency[char] = letter_frequency.get(char, 0) + 1

        return {
            "total_words": len(words),
            "words_by_length": dict(sorted(words_by_length.items())),
            "avg_weight": round(sum(words.values()) / len(words), 2),
            "letter_frequency": letter_frequency,
            "most_common_letters": sorted(letter_frequency.items(), key=lambda x: (-x[1], x[0]))[:5]
        }


# Global store instance
_word_store = None


def get_word_store() -> Optional[WordStore]:
    """Get the global word store instance."""
    return _word_store


def initialize_word_store(config_class=Config) -> WordStore:
    """Initialize the global word store instance."""
    global _word_store
    _word_store = WordStore.from_config(config_class)
    return _word_store


def set_word_store(store: Optional[WordStore]) -> None:
    """Install (or clear, with None) the global word store."""
    global _word_store
    _word_store = store
