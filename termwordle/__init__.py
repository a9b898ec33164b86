"""
Terminal Wordle Package

A terminal word-guessing game. The package is split into configuration,
data models, game services and terminal utilities.
"""

import random

from .config import Config, load_word_list, parse_int_setting
from .models import ConfigurationError, WordleSettings
from .services import Game


def settings_from_config(config_class=Config) -> WordleSettings:
    """
    Build game settings from a configuration class.

    Raises:
        ConfigurationError: If a numeric setting is malformed or the word
            list file cannot be used
    """
    word_list = None
    if config_class.WORD_LIST_FILE:
        try:
            word_list = load_word_list(config_class.WORD_LIST_FILE)
        except (OSError, ValueError) as e:
            raise ConfigurationError(str(e)) from e

    return WordleSettings(
        word_length=parse_int_setting('WORD_LENGTH', config_class.WORD_LENGTH),
        max_guesses=parse_int_setting('MAX_GUESSES', config_class.MAX_GUESSES),
        word_list=word_list,
        secret_word=config_class.SECRET_WORD,
        strict=config_class.STRICT_WORDS
    )


def create_game(config_class=Config, game_logger=None, rng=None) -> Game:
    """
    Factory for creating Game instances from configuration.

    Args:
        config_class: Configuration class to use
        game_logger: Optional GameLogger receiving game events
        rng: Random source; seeded from RANDOM_SEED when omitted

    Returns:
        A new Game ready for its first guess
    """
    if rng is None:
        rng = random.Random(parse_int_setting('RANDOM_SEED', config_class.RANDOM_SEED))

    return Game(settings_from_config(config_class), rng=rng, game_logger=game_logger)


__all__ = ['create_game', 'settings_from_config', 'Game', 'WordleSettings']
