"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

from .game_settings import DEFAULT_WORD_LENGTH
from ..utils.paths import get_path_dir, get_path_package, get_project_root

# Load environment variables from config.env
load_dotenv(get_path_dir('config.env'))


class Config:
    """Base configuration class with all settings."""

    # Path Settings
    PROJECT_ROOT = get_project_root()
    WORDS_PATH = get_path_dir(os.getenv('WORDS_PATH', get_path_package('data/words.json')))
    WORDS_SAVED_PATH = get_path_dir(os.getenv('WORDS_SAVED_PATH', 'words_saved.json'))

    # Game Settings
    DEFAULT_WORD_LENGTH = int(os.getenv('DEFAULT_WORD_LENGTH', DEFAULT_WORD_LENGTH))
    DUPLICATE_LETTER_POLICY = os.getenv('DUPLICATE_LETTER_POLICY', 'first_match').lower()

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR')


class DevelopmentConfig(Config):
    """Development configuration."""
    LOG_LEVEL = 'DEBUG'


class ProductionConfig(Config):
    """Production configuration."""
    LOG_LEVEL = 'WARNING'


class TestingConfig(Config):
    """Testing configuration. Never touches the snapshot in the project root."""
    TESTING = True
    WORDS_SAVED_PATH = get_path_dir('tests/words_saved.json')


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': Config
}
