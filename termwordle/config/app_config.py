"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import find_dotenv, load_dotenv

from ..models.errors import ConfigurationError
from .game_settings import MAX_GUESSES as DEFAULT_MAX_GUESSES, WORD_LENGTH as DEFAULT_WORD_LENGTH

# Load environment variables from a .env file next to where the game is run
load_dotenv(find_dotenv(usecwd=True))


class Config:
    """Base configuration class with all settings."""

    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Game Settings (numeric values are parsed by parse_int_setting when a game is built)
    WORD_LENGTH = os.getenv('WORD_LENGTH', DEFAULT_WORD_LENGTH)
    MAX_GUESSES = os.getenv('MAX_GUESSES', DEFAULT_MAX_GUESSES)
    STRICT_WORDS = os.getenv('STRICT_WORDS', 'True').lower() == 'true'
    WORD_LIST_FILE = os.getenv('WORD_LIST_FILE') or None
    SECRET_WORD = os.getenv('SECRET_WORD') or None
    RANDOM_SEED = os.getenv('RANDOM_SEED') or None

    # Display Settings
    COLOR = os.getenv('COLOR', 'True').lower() == 'true'
    SHOW_KEYBOARD = os.getenv('SHOW_KEYBOARD', 'False').lower() == 'true'

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration: any word of the right length is accepted."""
    DEBUG = True
    STRICT_WORDS = False


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    STRICT_WORDS = False
    RANDOM_SEED = 0
    COLOR = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': ProductionConfig
}


def get_config(name=None):
    """Return the config class named by ``name`` or the WORDLE_ENV variable."""
    name = name or os.getenv('WORDLE_ENV', 'default')
    try:
        return config[name.lower()]
    except KeyError:
        raise ConfigurationError(f"Unknown configuration '{name}'. Choose from: {', '.join(sorted(config))}")


def parse_int_setting(name, value):
    """Convert a numeric setting read from the environment; None passes through."""
    if value is None or isinstance(value, int):
        return value
    try:
        return int(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be an integer, got '{value}'")
