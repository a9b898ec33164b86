"""
Services Package

Contains the scorer and the game state machine.
"""

from .scorer import score_guess
from .game_service import Game

__all__ = ['score_guess', 'Game']
