"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: runtime configuration (environment-based)
- game_settings.py: game defaults and the bundled word list
"""

from .app_config import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    config,
    get_config,
    parse_int_setting,
)
from .game_settings import (
    MAX_GUESSES,
    WORD_LENGTH,
    WORD_LIST,
    get_word_statistics,
    load_word_list,
    normalize_words,
    validate_word_list_integrity,
)

__all__ = [
    # Runtime configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    'parse_int_setting',
    # Game defaults
    'WORD_LENGTH', 'MAX_GUESSES', 'WORD_LIST', 'load_word_list', 'normalize_words',
    'validate_word_list_integrity', 'get_word_statistics'
]
