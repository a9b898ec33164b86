import dataclasses

import pytest

from termwordle.models import LetterStatus
from termwordle.services import score_guess

W = LetterStatus.WRONG
P = LetterStatus.PRESENT
C = LetterStatus.CORRECT


@pytest.mark.parametrize("secret,guess,expected", [
    ("rises", "sises", [W, C, C, C, C]),
    ("rises", "sibel", [P, C, W, C, W]),
    ("crane", "eerie", [W, W, P, W, C]),
    ("crane", "array", [P, C, W, W, W]),
    ("level", "belle", [W, C, P, P, P]),
    ("scoop", "cools", [P, P, C, W, P]),
])
def test_score_guess_fixtures(secret, guess, expected):
    assert score_guess(secret, guess).statuses == expected


@pytest.mark.parametrize("word", ["rises", "crabs", "level", "aaaaa"])
def test_exact_match_is_all_correct(word):
    result = score_guess(word, word)
    assert result.statuses == [C] * 5
    assert result.is_solved()


def test_disjoint_letters_are_all_wrong():
    assert score_guess("crabs", "queen").statuses == [W] * 5


def test_duplicates_never_exceed_secret_count():
    # One 's' in "sauce"; only the leftmost unmatched 's' may claim it
    result = score_guess("sauce", "asses")
    assert result.statuses == [P, P, W, P, W]


def test_case_is_normalized():
    assert score_guess("RISES", "Sibel") == score_guess("rises", "sibel")
    assert score_guess("RISES", "Sibel").word == "sibel"


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        score_guess("rises", "rise")


def test_pattern_and_letters():
    result = score_guess("rises", "sibel")
    assert result.pattern() == "YG-G-"
    assert len(result) == 5
    assert [scored.letter for scored in result] == list("sibel")
    assert result[1].status is C
    assert not result.is_solved()


def test_classified_guess_is_immutable():
    result = score_guess("rises", "sibel")
    with pytest.raises(dataclasses.FrozenInstanceError):
        result.word = "rises"
    with pytest.raises(dataclasses.FrozenInstanceError):
        result[0].status = C
