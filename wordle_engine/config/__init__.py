"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: paths, logging and defaults (environment-based)
- game_settings.py: game rules and constants
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import ALPHABET, DEFAULT_WORD_LENGTH, DEFAULT_WORD_WEIGHT

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'DEFAULT_WORD_LENGTH', 'DEFAULT_WORD_WEIGHT'
]
