"""
Dictionary check: python -m wordle_engine

Loads the configured word store and prints its statistics.
"""

import sys

from .config import Config
from .models.errors import LoadError
from .services.word_store import WordStore


def main(config_class=Config) -> int:
    try:
        store = WordStore.from_config(config_class)
    except LoadError as e:
        print(f" Word list validation failed: {e}")
        return 1

    stats = store.get_statistics()
    if 'error' in stats:
        print(f" Word list validation failed: {stats['error']}")
        return 1

    print(" Word list validation passed")
    print(f" Total words: {stats['total_words']}")
    for length, count in stats['words_by_length'].items():
        print(f"   {length} letters: {count}")
    print(f" Most common letters: {stats['most_common_letters']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
