"""
Game Service

Contains the game state machine: secret selection, guess validation,
turn accounting and win/loss detection.
"""

import random
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import WORD_LIST, get_word_statistics, normalize_words
from ..models.errors import AlreadySolved, ConfigurationError, NoGuessesLeft, NotAWord, WrongLength
from ..models.game import ClassifiedGuess, GameState, LetterStatus, ScoredLetter, WordleSettings
from ..utils.game_logger import GameLogger
from .scorer import score_guess


class Game:
    """
    A single round of play.

    This class handles:
    - Secret word selection from an injected random source
    - Guess validation in a fixed order (length, budget, dictionary)
    - Scoring through the scorer and append-only guess history
    - Solved/failed detection; ``failed`` is derived from the guess count
    """

    def __init__(self,
                 settings: Optional[WordleSettings] = None,
                 rng: Optional[random.Random] = None,
                 game_logger: Optional[GameLogger] = None):
        self.settings = settings or WordleSettings()
        self.game_id = str(uuid.uuid4())
        self.game_logger = game_logger

        # Fixed at creation
        self._word_length = self.settings.word_length
        self._max_guesses = self.settings.max_guesses
        self._strict = self.settings.strict

        if self._word_length < 1:
            raise ConfigurationError(f"Word length must be positive, got {self._word_length}")
        if self._max_guesses < 1:
            raise ConfigurationError(f"Max guesses must be positive, got {self._max_guesses}")

        # Duplicates dropped so the secret is uniform over distinct words
        source = WORD_LIST if self.settings.word_list is None else self.settings.word_list
        self._word_list: Tuple[str, ...] = tuple(dict.fromkeys(normalize_words(source)))
        self._validate_word_list()

        self._word = self._choose_word(rng or random.Random())
        # The secret is always an accepted guess, even when pinned outside the list
        self._words = frozenset(self._word_list) | {self._word}
        self._guesses: List[ClassifiedGuess] = []
        self._solved = False
        self._letter_status: Dict[str, LetterStatus] = {}

        if self.game_logger:
            stats = get_word_statistics(list(self._word_list))
            self.game_logger.log_game_started(
                self.game_id,
                word_length=self.word_length,
                max_guesses=self.max_guesses,
                strict=self._strict,
                word_count=stats['total_words'],
                avg_vowel_count=stats['avg_vowel_count']
            )

    def _validate_word_list(self) -> None:
        if not self._word_list:
            raise ConfigurationError("Word list cannot be empty")

        for word in self._word_list:
            if len(word) != self.word_length:
                raise ConfigurationError(
                    f"Word list entry '{word}' is not {self.word_length} characters long"
                )

    def _choose_word(self, rng: random.Random) -> str:
        if self.settings.secret_word is None:
            return rng.choice(self._word_list)

        word = self.settings.secret_word.strip().lower()
        if len(word) != self.word_length:
            raise ConfigurationError(
                f"Secret word '{word}' is not {self.word_length} characters long"
            )
        return word

    # Queries

    @property
    def word(self) -> str:
        """The secret word, for the end-of-game reveal."""
        return self._word

    @property
    def word_list(self) -> Tuple[str, ...]:
        return self._word_list

    @property
    def word_length(self) -> int:
        return self._word_length

    @property
    def max_guesses(self) -> int:
        return self._max_guesses

    @property
    def guess_count(self) -> int:
        return len(self._guesses)

    @property
    def guesses_left(self) -> int:
        return self.max_guesses - self.guess_count

    @property
    def history(self) -> Tuple[ClassifiedGuess, ...]:
        return tuple(self._guesses)

    @property
    def solved(self) -> bool:
        return self._solved

    @property
    def failed(self) -> bool:
        return not self._solved and self.guess_count >= self.max_guesses

    @property
    def game_over(self) -> bool:
        return self.solved or self.failed

    def is_valid_word(self, word: str) -> bool:
        """Dictionary check; always true in permissive mode."""
        return not self._strict or word in self._words

    def get_cell(self, row: int, col: int) -> Optional[ScoredLetter]:
        """Return the scored letter at (row, col), or None if not yet played."""
        if not 0 <= row < len(self._guesses):
            return None
        guess = self._guesses[row]
        if not 0 <= col < len(guess):
            return None
        return guess[col]

    def letter_status(self) -> Dict[str, LetterStatus]:
        """Best status seen so far for every guessed letter."""
        return dict(self._letter_status)

    def get_state(self) -> GameState:
        """
        Returns a snapshot of the game (without revealing the answer).

        Returns:
            GameState with the answer filled in only once the game is over
        """
        return GameState(
            game_id=self.game_id,
            guess_count=self.guess_count,
            max_guesses=self.max_guesses,
            word_length=self.word_length,
            solved=self.solved,
            failed=self.failed,
            game_over=self.game_over,
            guesses=[guess.word for guess in self._guesses],
            guess_results=[
                [(scored.letter, scored.status.value) for scored in guess]
                for guess in self._guesses
            ],
            letter_status={letter: status.value for letter, status in self._letter_status.items()},
            answer=self._word if self.game_over else None
        )

    # Commands

    def submit(self, raw_guess: str) -> ClassifiedGuess:
        """
        Validate, score and record a guess.

        Args:
            raw_guess: Player input; surrounding whitespace and case are ignored

        Returns:
            The ClassifiedGuess appended to the history

        Raises:
            WrongLength: Guess has the wrong number of characters
            NoGuessesLeft: The guess budget is already exhausted
            AlreadySolved: The game was already won
            NotAWord: Strict mode and the guess is not in the word list
        """
        guess = raw_guess.strip().lower()

        try:
            self._check_guess(guess)
        except (WrongLength, NotAWord, NoGuessesLeft, AlreadySolved) as error:
            if self.game_logger:
                self.game_logger.log_rejected_guess(self.game_id, guess, error)
            raise

        classified = score_guess(self._word, guess)
        self._guesses.append(classified)
        self._update_letter_status(classified)

        if guess == self._word:
            self._solved = True

        if self.game_logger:
            self.game_logger.log_guess(self.game_id, guess, classified.pattern(), self.guess_count)
            if self.solved:
                self.game_logger.log_game_event(
                    self.game_id, 'game_won',
                    word=self._word, guess_count=self.guess_count, max_guesses=self.max_guesses
                )
            elif self.failed:
                self.game_logger.log_game_event(
                    self.game_id, 'game_lost',
                    word=self._word, max_guesses=self.max_guesses
                )

        return classified

    def _check_guess(self, guess: str) -> None:
        if len(guess) != self.word_length:
            raise WrongLength(self.word_length, len(guess))

        if self.failed:
            raise NoGuessesLeft(self._word)

        if self.solved:
            raise AlreadySolved(self._word)

        if not self.is_valid_word(guess):
            raise NotAWord(guess)

    def _update_letter_status(self, classified: ClassifiedGuess) -> None:
        # Status can only progress in priority order
        for scored in classified:
            current = self._letter_status.get(scored.letter)
            if current is None or scored.status.priority > current.priority:
                self._letter_status[scored.letter] = scored.status
