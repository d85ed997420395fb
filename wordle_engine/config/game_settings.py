"""
Game Configuration Constants Module

Game rules that are not environment dependent. Anything an operator may want
to change per deployment belongs in app_config.py instead.
"""

import string
from typing import Final

DEFAULT_WORD_LENGTH: Final[int] = 5
"""
Length of the secret word when a board is created without one.
"""

DEFAULT_WORD_WEIGHT: Final[int] = 1
"""
Usage weight given to a secret word registered into the dictionary.
"""

ALPHABET: Final[str] = string.ascii_lowercase
"""
Letters reported by keyboard-hint lookups.
"""
