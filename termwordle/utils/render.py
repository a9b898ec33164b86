"""
Board Rendering

Turns game state into terminal text. Colors come from colorama so the same
escape codes work on Windows consoles.
"""

from typing import Optional

from colorama import Fore, Style

from ..models.game import LetterStatus, ScoredLetter

STATUS_COLORS = {
    LetterStatus.WRONG: Fore.RED,
    LetterStatus.PRESENT: Fore.YELLOW,
    LetterStatus.CORRECT: Fore.GREEN,
}

KEYBOARD_ROWS = ["qwertyuiop", "asdfghjkl", "zxcvbnm"]


def paint(letter: str, status: Optional[LetterStatus], color: bool = True) -> str:
    """Return ``letter`` wrapped in the color for ``status``."""
    if status is None or not color:
        return letter
    return f"{STATUS_COLORS[status]}{letter}{Style.RESET_ALL}"


def render_cell(cell: Optional[ScoredLetter], color: bool = True) -> str:
    if cell is None:
        return "[ ]"
    return f"[{paint(cell.letter, cell.status, color)}]"


def render_board(game, color: bool = True) -> str:
    """
    Render a max_guesses x word_length grid.

    Unplayed cells are blank; played cells show the guessed letter, colored
    by its classification when ``color`` is set.
    """
    lines = []
    for row in range(game.max_guesses):
        lines.append("".join(
            render_cell(game.get_cell(row, col), color)
            for col in range(game.word_length)
        ))
    return "\n".join(lines)


def render_keyboard(game, color: bool = True) -> str:
    """Render the keyboard with every guessed letter in its best known color."""
    statuses = game.letter_status()
    lines = []
    for indent, row in enumerate(KEYBOARD_ROWS):
        keys = " ".join(paint(key, statuses.get(key), color) for key in row)
        lines.append(" " * indent + keys)
    return "\n".join(lines)


def render_win(game) -> str:
    return (
        f"you won!\n"
        f"the word was: {game.word}\n"
        f"guessed in {game.guess_count}/{game.max_guesses}"
    )
