"""
Pure game logic (no HTTP, no storage).

- generate_code: draws the secret, one color per position, repeats allowed
- score_guess: turns (secret, guess) into feedback pegs
    "correct"        -> right color, right place (black peg)
    "wrong_position" -> right color, wrong place (white peg)
    "incorrect"      -> no match left for this peg

The feedback is a bag, not one peg per position: all "correct" first, then
all "wrong_position", then "incorrect" padding. The player only learns the
counts, never which of their pegs earned them.
"""

import logging
from collections import Counter
from secrets import SystemRandom
from typing import List, Optional, Sequence, Tuple

from .types import Code, Color, PegResult

logger = logging.getLogger(__name__)

CORRECT: PegResult = "correct"
WRONG_POSITION: PegResult = "wrong_position"
INCORRECT: PegResult = "incorrect"

# process-wide fallback when no random source is passed in
_system_random = SystemRandom()


def generate_code(length: int, palette: Sequence[Color], rng=None) -> Code:
    """
    rng is anything with a .choice() (random.Random in tests).
    Each position is drawn independently, so the same color can show up twice.
    """
    if length < 1:
        raise ValueError("Code length must be at least 1.")
    if len(palette) == 0:
        raise ValueError("Palette must contain at least one color.")

    source = rng if rng is not None else _system_random
    palette = list(palette)

    colors: List[Color] = []
    i = 0
    while i < length:
        colors.append(source.choice(palette))
        i += 1
    return tuple(colors)


def _check_lengths(secret: Code, guess: Code) -> int:
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    return n


def score_guess(secret: Code, guess: Code) -> Tuple[PegResult, ...]:
    """
    Example:
      secret = (red, blue, green, yellow)
      guess  = (red, green, blue, purple)
      pass 1 -> red is exact                        -> correct
      pass 2 -> green and blue are left in secret   -> wrong_position x2
      purple matches nothing                        -> incorrect
      Returns: (correct, wrong_position, wrong_position, incorrect)
    """
    n = _check_lengths(secret, guess)

    # 1. How many of each color the secret still has to give out
    remaining = Counter(secret)
    results: List[PegResult] = []

    # 2. Exact matches first, so they can never be counted twice
    i = 0
    while i < n:
        if guess[i] == secret[i]:
            results.append(CORRECT)
            remaining[guess[i]] -= 1
        i += 1

    # 3. Right color, wrong place, only while the secret has that color left
    i = 0
    while i < n:
        color = guess[i]
        if color != secret[i] and remaining[color] > 0:
            results.append(WRONG_POSITION)
            remaining[color] -= 1
        i += 1

    # 4. Everything else is incorrect
    while len(results) < n:
        results.append(INCORRECT)

    return tuple(results)


def score_guess_positional(secret: Code, guess: Code) -> Tuple[PegResult, ...]:
    """
    Same accounting as score_guess, but results[i] describes guess[i].
    Drop-in replacement for score_guess when the board should show which
    peg earned which result.
    """
    n = _check_lengths(secret, guess)

    remaining = Counter(secret)
    results: List[Optional[PegResult]] = [None] * n

    for i in range(n):
        if guess[i] == secret[i]:
            results[i] = CORRECT
            remaining[guess[i]] -= 1

    for i in range(n):
        if results[i] is not None:
            continue
        color = guess[i]
        if remaining[color] > 0:
            results[i] = WRONG_POSITION
            remaining[color] -= 1
        else:
            results[i] = INCORRECT

    return tuple(results)


def is_win(results: Sequence[PegResult]) -> bool:
    """Win = every feedback peg is correct."""
    if len(results) == 0:
        return False
    for result in results:
        if result != CORRECT:
            return False
    return True


def count_results(results: Sequence[PegResult]) -> Tuple[int, int]:
    """Returns (black pegs, white pegs) = (correct, wrong_position)."""
    correct = 0
    wrong_position = 0
    for result in results:
        if result == CORRECT:
            correct += 1
        elif result == WRONG_POSITION:
            wrong_position += 1
    return (correct, wrong_position)
