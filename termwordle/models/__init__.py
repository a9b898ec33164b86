"""
Data Models Package

Contains all data models and error types used throughout the game.
"""

from .game import ClassifiedGuess, GameState, LetterStatus, ScoredLetter, WordleSettings
from .errors import (
    AlreadySolved,
    ConfigurationError,
    NoGuessesLeft,
    NotAWord,
    WordleError,
    WrongLength,
)

__all__ = [
    'ClassifiedGuess', 'GameState', 'LetterStatus', 'ScoredLetter', 'WordleSettings',
    'WordleError', 'WrongLength', 'NotAWord', 'NoGuessesLeft', 'AlreadySolved',
    'ConfigurationError'
]
