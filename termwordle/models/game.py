"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Optional, Sequence, Tuple


class LetterStatus(Enum):
    """Per-letter feedback for a scored guess."""
    WRONG = "WRONG"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"

    @property
    def priority(self) -> int:
        # Only used to aggregate keyboard colors, never for scoring
        return _PRIORITY[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_PRIORITY = {LetterStatus.WRONG: 0, LetterStatus.PRESENT: 1, LetterStatus.CORRECT: 2}
_SYMBOLS = {LetterStatus.WRONG: "-", LetterStatus.PRESENT: "Y", LetterStatus.CORRECT: "G"}


@dataclass(frozen=True)
class ScoredLetter:
    """A single guessed letter and its classification."""
    letter: str
    status: LetterStatus


@dataclass(frozen=True)
class ClassifiedGuess:
    """An immutable, fully scored guess."""
    word: str
    letters: Tuple[ScoredLetter, ...]

    def __len__(self) -> int:
        return len(self.letters)

    def __iter__(self) -> Iterator[ScoredLetter]:
        return iter(self.letters)

    def __getitem__(self, index: int) -> ScoredLetter:
        return self.letters[index]

    @property
    def statuses(self) -> List[LetterStatus]:
        return [scored.status for scored in self.letters]

    def pattern(self) -> str:
        """Compact feedback string, e.g. ``-GYG-``."""
        return "".join(scored.status.symbol for scored in self.letters)

    def is_solved(self) -> bool:
        return all(scored.status is LetterStatus.CORRECT for scored in self.letters)


@dataclass(frozen=True)
class WordleSettings:
    """
    Configuration for a single game.

    ``word_list`` of None selects the bundled list. ``secret_word`` pins the
    answer for deterministic play; ``strict`` controls whether guesses must be
    members of the word list.
    """
    word_length: int = 5
    max_guesses: int = 6
    word_list: Optional[Sequence[str]] = None
    secret_word: Optional[str] = None
    strict: bool = True


@dataclass
class GameState:
    """Read-only snapshot of a game, safe to hand to presentation code."""
    game_id: str
    guess_count: int
    max_guesses: int
    word_length: int
    solved: bool
    failed: bool
    game_over: bool
    guesses: List[str] = field(default_factory=list)
    guess_results: List[List[Tuple[str, str]]] = field(default_factory=list)  # Status as string for JSON
    letter_status: Dict[str, str] = field(default_factory=dict)
    answer: Optional[str] = None  # Only included when game is over
