"""
Utilities Package

Contains logging and terminal rendering helpers.
"""

from .game_logger import GameLogger
from .render import render_board, render_keyboard, render_win

__all__ = [
    'GameLogger',
    'render_board', 'render_keyboard', 'render_win'
]
