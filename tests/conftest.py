import random

import pytest

from termwordle.config import TestingConfig
from termwordle.models import WordleSettings
from termwordle.services import Game
from termwordle.utils.game_logger import GameLogger


@pytest.fixture
def words():
    return ["rises", "sises", "crabs", "clone"]


@pytest.fixture
def new_game(words):
    """Build a game whose secret is the first word unless overridden."""
    def _new_game(**overrides):
        options = {
            'max_guesses': 5,
            'word_list': words,
            'word_length': 5,
            'secret_word': words[0],
            'strict': False,
        }
        options.update(overrides)
        rng = options.pop('rng', random.Random(0))
        game_logger = options.pop('game_logger', None)
        return Game(WordleSettings(**options), rng=rng, game_logger=game_logger)
    return _new_game


@pytest.fixture
def game_logger(tmp_path):
    logger = GameLogger(tmp_path / "logs")
    yield logger
    logger.close()


@pytest.fixture
def config_class(tmp_path):
    """TestingConfig with a fixed secret and logs kept under tmp_path."""
    class Config(TestingConfig):
        SECRET_WORD = "rises"
        LOG_DIR = str(tmp_path / "logs")
    return Config
