"""
Terminal Wordle - Main Entry Point

Builds a game from the environment configuration and runs the
read-guess-render loop until the word is found or the guesses run out.
"""

import sys

import colorama

from termwordle import create_game
from termwordle.config import get_config
from termwordle.models import ConfigurationError, NoGuessesLeft, WordleError
from termwordle.utils.game_logger import GameLogger
from termwordle.utils.render import render_board, render_keyboard, render_win


def print_board(game, out, config_class):
    print(render_board(game, color=config_class.COLOR), file=out)
    if config_class.SHOW_KEYBOARD:
        print(render_keyboard(game, color=config_class.COLOR), file=out)


def run(game, stdin, stdout, stderr, config_class):
    """
    Play one game over line-oriented streams.

    Rejected guesses are reported on ``stderr`` and do not use a turn.
    Returns when the game is won or lost, or when ``stdin`` is exhausted.
    """
    print_board(game, stdout, config_class)

    while True:
        if game.failed:
            print(NoGuessesLeft(game.word), file=stdout)
            return

        line = stdin.readline()
        if not line:
            if game.game_logger:
                game.game_logger.log_game_event(game.game_id, 'game_abandoned', guess_count=game.guess_count)
            return

        try:
            game.submit(line)
        except WordleError as e:
            print(e, file=stderr)
            continue

        print_board(game, stdout, config_class)

        if game.solved:
            print(render_win(game), file=stdout)
            return


def main(stdin=None, stdout=None, stderr=None, config_class=None):
    """Main function to configure logging, create the game and play it."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    colorama.just_fix_windows_console()

    try:
        config_class = config_class or get_config()
        game_logger = GameLogger(config_class.LOG_DIR, config_class.LOG_LEVEL, stream=stderr)
    except (ConfigurationError, ValueError, OSError) as e:
        print(f"Error starting game: {e}", file=stderr)
        return 1

    try:
        game = create_game(config_class, game_logger=game_logger)
    except ConfigurationError as e:
        game_logger.log_error(e, 'create_game', echo=False)
        print(f"Error starting game: {e}", file=stderr)
        game_logger.close()
        return 1

    try:
        run(game, stdin, stdout, stderr, config_class)
    except KeyboardInterrupt:
        print(file=stdout)
        game_logger.log_game_event(game.game_id, 'game_abandoned', guess_count=game.guess_count)
    finally:
        game_logger.close()

    return 0


if __name__ == '__main__':
    sys.exit(main())
