"""
Guess Scorer

Implements the Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..models.game import ClassifiedGuess, LetterStatus, ScoredLetter


def score_guess(secret: str, guess: str) -> ClassifiedGuess:
    """
    Classify every letter of ``guess`` against ``secret``.

    Exact position matches are resolved first and consume their secret
    letter. The remaining positions are then checked left to right against
    the unconsumed secret letters, so a guess never earns more CORRECT and
    PRESENT marks for a letter than the secret contains.

    Args:
        secret: The target word
        guess: The guessed word, same length as ``secret``

    Returns:
        ClassifiedGuess with one ScoredLetter per position

    Raises:
        ValueError: If the words differ in length
    """
    secret = secret.lower()
    guess = guess.lower()

    if len(secret) != len(guess):
        raise ValueError(f"Cannot score '{guess}' against a {len(secret)}-letter word")

    # Secret letters still available for matching; None once consumed
    remaining: List[Optional[str]] = list(secret)
    statuses: List[Optional[LetterStatus]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if letter == secret[i]:
            statuses[i] = LetterStatus.CORRECT
            remaining[i] = None

    # Second pass: present letters and misses
    for i, letter in enumerate(guess):
        if statuses[i] is not None:
            continue

        if letter in remaining:
            statuses[i] = LetterStatus.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            statuses[i] = LetterStatus.WRONG

    return ClassifiedGuess(
        word=guess,
        letters=tuple(ScoredLetter(letter, status) for letter, status in zip(guess, statuses))
    )
