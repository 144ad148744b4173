"""
Testing pure game logic.
"""

import random
from collections import Counter

import pytest

from mastermind.config import COLORS
from mastermind.engine import (
    count_results,
    generate_code,
    is_win,
    score_guess,
    score_guess_positional,
)


def test_score_guess_exact_match_is_all_correct():
    secret = ("red", "blue", "green", "yellow")

    result = score_guess(secret, secret)

    assert result == ("correct", "correct", "correct", "correct")

def test_score_guess_no_shared_colors_is_all_incorrect():
    secret = ("red", "red", "blue", "blue")
    guess = ("green", "yellow", "purple", "orange")

    result = score_guess(secret, guess)

    assert result == ("incorrect",) * 4

def test_score_guess_groups_correct_then_wrong_position():
    secret = ("red", "blue", "green", "yellow")
    guess = ("red", "green", "blue", "purple")

    result = score_guess(secret, guess)

    # red is exact; green and blue are in the secret elsewhere; purple is not
    assert result == ("correct", "wrong_position", "wrong_position", "incorrect")

def test_score_guess_with_duplicates():
    secret = ("red", "red", "blue", "green")
    guess = ("red", "blue", "red", "yellow")

    result = score_guess(secret, guess)

    # First red is exact (red 2 -> 1), then blue and the second red are misplaced
    assert result == ("correct", "wrong_position", "wrong_position", "incorrect")

def test_exact_match_is_not_also_counted_as_misplaced():
    # Only one red in the secret, and the guess already has it in place
    secret = ("blue", "red", "green", "green")
    guess = ("red", "red", "yellow", "yellow")

    result = score_guess(secret, guess)

    assert result == ("correct", "incorrect", "incorrect", "incorrect")

def test_misplaced_count_is_capped_by_secret():
    secret = ("red", "blue", "blue", "blue")
    guess = ("green", "red", "red", "red")

    result = score_guess(secret, guess)

    # Three reds guessed, only one in the secret
    assert result == ("wrong_position", "incorrect", "incorrect", "incorrect")

def test_score_guess_rejects_length_mismatch():
    with pytest.raises(ValueError):
        score_guess(("red", "blue"), ("red", "blue", "green"))
    with pytest.raises(ValueError):
        score_guess((), ())

def test_score_guess_counts_never_exceed_shared_colors():
    rng = random.Random(7)
    for _ in range(200):
        secret = generate_code(4, COLORS, rng)
        guess = generate_code(4, COLORS, rng)

        result = score_guess(secret, guess)

        shared = sum((Counter(secret) & Counter(guess)).values())
        correct, wrong_position = count_results(result)
        assert len(result) == 4
        assert correct + wrong_position <= shared
        assert result == score_guess(secret, guess)

def test_positional_scorer_keeps_peg_order():
    secret = ("red", "blue", "green", "yellow")
    guess = ("purple", "green", "blue", "yellow")

    result = score_guess_positional(secret, guess)

    assert result == ("incorrect", "wrong_position", "wrong_position", "correct")
    # Same counts as the bag scorer, just laid out per position
    assert count_results(result) == count_results(score_guess(secret, guess))

def test_is_win_true_and_false():
    assert is_win(("correct",) * 4) is True
    assert is_win(("correct", "correct", "correct", "wrong_position")) is False
    assert is_win(()) is False

def test_count_results():
    assert count_results(("correct", "wrong_position", "wrong_position", "incorrect")) == (1, 2)

def test_generate_code_uses_given_source():
    first = generate_code(4, COLORS, random.Random(42))
    second = generate_code(4, COLORS, random.Random(42))

    assert first == second
    assert len(first) == 4
    for color in first:
        assert color in COLORS

def test_generate_code_allows_repeats():
    assert generate_code(5, ["red"], random.Random(0)) == ("red",) * 5

def test_generate_code_rejects_bad_input():
    with pytest.raises(ValueError):
        generate_code(0, COLORS)
    with pytest.raises(ValueError):
        generate_code(4, [])

def test_generate_code_without_source():
    code = generate_code(4, COLORS)
    assert len(code) == 4
    assert set(code) <= set(COLORS)
