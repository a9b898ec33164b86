"""
Game Configuration Constants Module

This module defines the game defaults and the bundled word list.
All game parameters are centralized here to enable easy modification.
"""

import os
from typing import Dict, Final, Iterable, List, Optional

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""
Number of letters in every secret word and guess.
"""

MAX_GUESSES: Final[int] = 6
"""
Maximum number of guess attempts allowed per game.
"""

WORD_LIST_PATH: Final[str] = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'words.txt')


def normalize_words(words: Iterable[str]) -> List[str]:
    """Strip, lower-case and drop blank entries, preserving order."""
    normalized = []
    for word in words:
        word = word.strip().lower()
        if word:
            normalized.append(word)
    return normalized


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load a newline-delimited word list.

    Args:
        path: File to read; the bundled ``words.txt`` when omitted

    Returns:
        List[str]: Lower-case words in file order

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the word list is empty
    """
    path = path or WORD_LIST_PATH

    try:
        with open(path, 'r', encoding='utf-8') as f:
            word_list = normalize_words(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")

    if not word_list:
        raise ValueError("Word list cannot be empty")

    return word_list


def validate_word_list_integrity(words: List[str], word_length: int = WORD_LENGTH) -> bool:
    """
    Validates the integrity and consistency of a word database.

    This function performs validation to ensure:
    1. Length validation: All words must be exactly ``word_length`` characters
    2. Character validation: Only alphabetic characters allowed
    3. Uniqueness validation: No duplicate entries
    4. Format validation: Consistent lowercase formatting

    Returns:
        bool: True if word list passes all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != word_length:
            raise ValueError(f"Word at index {index} '{word}' is not {word_length} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


# Curated word database loaded from the bundled text file
WORD_LIST: Final[List[str]] = load_word_list()
validate_word_list_integrity(WORD_LIST)


def get_word_statistics(words: List[str]) -> Dict:
    """
    Analyzes a word list and returns statistical information.

    Returns:
        dict: Statistical analysis including:
            - total_words: Number of words in database
            - avg_vowel_count: Average vowels per word
            - letter_frequency: Distribution of letters across all words
            - most_common_letters: Five most frequent letters with counts
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency: Dict[str, int] = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity(WORD_LIST)
        print(" Word list validation passed")

        stats = get_word_statistics(WORD_LIST)
        print(f" Word list statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
