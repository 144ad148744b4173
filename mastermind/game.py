"""
Game state machine.

Every function takes a GameState and returns a new one; nothing is mutated
in place, so a game can be replayed from its list of actions.

Guard conditions (submitting an incomplete guess, playing after the game is
over, picking a color when the guess is full) return the state unchanged.
Caller bugs (unknown color, slot index out of range) raise.
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config import DEFAULT_CONFIG, GameConfig
from .engine import generate_code, is_win, score_guess
from .types import Code, Color, GameStatus, PegResult, Scorer, Slot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GuessRecord:
    guess: Code
    results: Tuple[PegResult, ...]


@dataclass(frozen=True)
class GameState:
    config: GameConfig
    secret: Code
    history: Tuple[GuessRecord, ...] = ()
    current_guess: Tuple[Slot, ...] = ()
    is_over: bool = False
    is_won: bool = False

    @property
    def status(self) -> GameStatus:
        if self.is_won:
            return "won"
        if self.is_over:
            return "lost"
        return "in_progress"

    @property
    def attempts_used(self) -> int:
        return len(self.history)

    @property
    def attempts_left(self) -> int:
        return self.config.max_attempts - len(self.history)

    @property
    def is_guess_complete(self) -> bool:
        return None not in self.current_guess


def _empty_guess(config: GameConfig) -> Tuple[Slot, ...]:
    return (None,) * config.code_length


def new_game(config: Optional[GameConfig] = None, rng=None) -> GameState:
    config = config or DEFAULT_CONFIG
    secret = generate_code(config.code_length, config.palette, rng)
    logger.debug("Drew secret %s", secret)
    return GameState(
        config=config,
        secret=secret,
        current_guess=_empty_guess(config),
    )


def select_color(state: GameState, color: Color) -> GameState:
    """Drop the color into the first empty slot, left to right."""
    if color not in state.config.palette:
        raise ValueError(f"Unknown color {color!r}. Pick one of: {', '.join(state.config.palette)}.")
    if state.is_over:
        return state

    guess = list(state.current_guess)
    if None not in guess:
        return state

    guess[guess.index(None)] = color
    return replace(state, current_guess=tuple(guess))


def clear_slot(state: GameState, index: int) -> GameState:
    n = len(state.current_guess)
    if index < 0 or index >= n:
        raise IndexError(f"Slot index must be between 0 and {n - 1}.")
    if state.is_over or state.current_guess[index] is None:
        return state

    guess = list(state.current_guess)
    guess[index] = None
    return replace(state, current_guess=tuple(guess))


def clear_current_guess(state: GameState) -> GameState:
    if state.is_over:
        return state
    return replace(state, current_guess=_empty_guess(state.config))


def submit_guess(state: GameState, scorer: Scorer = score_guess) -> GameState:
    """
    Scores the current guess and appends it to the history.
    Won  -> every peg correct (checked first, so a last-attempt win is a win)
    Lost -> history reached max_attempts
    """
    if state.is_over or not state.is_guess_complete:
        return state

    guess: Code = tuple(state.current_guess)
    results = scorer(state.secret, guess)
    history = state.history + (GuessRecord(guess=guess, results=results),)

    won = is_win(results)
    over = won or len(history) >= state.config.max_attempts

    if over:
        logger.info(
            "Game %s after %d attempt(s)", "won" if won else "lost", len(history)
        )

    return replace(
        state,
        history=history,
        current_guess=_empty_guess(state.config),
        is_over=over,
        is_won=won,
    )


def revealed_secret(state: GameState) -> Optional[Code]:
    """The secret, but only once the game has ended."""
    if state.is_over:
        return state.secret
    return None
