"""
Game Errors

User-facing error kinds raised by the game core. Each error keeps its own
copy of the values it reports so it can outlive the input that caused it.
"""


class WordleError(Exception):
    """Base class for every error a player can trigger."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class WrongLength(WordleError):
    """Guess length does not match the configured word length."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"your guess should be {expected} characters long")
        self.expected = expected
        self.actual = actual


class NotAWord(WordleError):
    """Guess is not in the configured word list (strict mode only)."""

    def __init__(self, word: str):
        super().__init__(f'"{word}" is not a valid word')
        self.word = word


class NoGuessesLeft(WordleError):
    """The guess budget is exhausted without solving."""

    def __init__(self, word: str):
        super().__init__(f"you have no guesses left\nthe word was: {word}")
        self.word = word


class AlreadySolved(WordleError):
    """The game was already won; further guesses are rejected."""

    def __init__(self, word: str):
        super().__init__(f"you already solved it\nthe word was: {word}")
        self.word = word


class ConfigurationError(ValueError):
    """Unrecoverable setup failure (bad word list, settings or override)."""
