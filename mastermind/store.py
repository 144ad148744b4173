"""
In-memory store
Holds one Session per browser tab: the game plus the flags the page needs
(dark mode, which modal is open). Nothing is written to disk.

The game logic in game.py is pure; this is the one place that keeps the
current state around, and every change goes through the lock.
Methods hand back a copy of the Session, so callers can read it after the
lock is released without seeing half-applied changes.
"""

import logging
from dataclasses import dataclass, replace
from threading import RLock
from typing import Callable, Dict, Optional
from uuid import uuid4

from . import game as rules
from .config import DEFAULT_CONFIG, GameConfig
from .game import GameState
from .types import Color

logger = logging.getLogger(__name__)


@dataclass
class Session:
    id: str
    game: GameState
    # Presentation only; the game never reads these
    dark_mode: bool = False
    show_help: bool = False
    show_result: bool = False


class GameStore:
    def __init__(self, config: Optional[GameConfig] = None, rng=None) -> None:
        self._sessions: Dict[str, Session] = {}
        self._lock = RLock()
        self._config = config or DEFAULT_CONFIG
        self._rng = rng

    @property
    def config(self) -> GameConfig:
        return self._config

    def create(self) -> Session:
        new_id = str(uuid4())
        with self._lock:
            session = Session(id=new_id, game=rules.new_game(self._config, self._rng))
            self._sessions[new_id] = session
            copy = replace(session)
        logger.info("Created session %s", new_id)
        return copy

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            session = self._sessions.get(session_id)
            return replace(session) if session is not None else None

    def delete(self, session_id: str) -> bool:
        with self._lock:
            removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Deleted session %s", session_id)
        return removed is not None

    def new_game(self, session_id: str) -> Optional[Session]:
        """Replace the game wholesale; dark mode and help stay as they were."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            session.game = rules.new_game(self._config, self._rng)
            session.show_result = False
            copy = replace(session)
        logger.info("New game in session %s", session_id)
        return copy

    # --- Peg edits and guesses ---

    def _apply(self, session_id: str, action: Callable[[GameState], GameState]) -> Optional[Session]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None

            was_over = session.game.is_over
            session.game = action(session.game)

            # Open the result modal exactly once, on the finishing guess
            if not was_over and session.game.is_over:
                session.show_result = True
            return replace(session)

    def select_color(self, session_id: str, color: Color) -> Optional[Session]:
        return self._apply(session_id, lambda state: rules.select_color(state, color))

    def clear_slot(self, session_id: str, index: int) -> Optional[Session]:
        return self._apply(session_id, lambda state: rules.clear_slot(state, index))

    def clear_current_guess(self, session_id: str) -> Optional[Session]:
        return self._apply(session_id, rules.clear_current_guess)

    def submit_guess(self, session_id: str) -> Optional[Session]:
        return self._apply(session_id, rules.submit_guess)

    # --- Presentation flags ---

    def update_prefs(
        self,
        session_id: str,
        dark_mode: Optional[bool] = None,
        show_help: Optional[bool] = None,
        show_result: Optional[bool] = None,
    ) -> Optional[Session]:
        """Only the flags that are passed (not None) change."""
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if dark_mode is not None:
                session.dark_mode = dark_mode
            if show_help is not None:
                session.show_help = show_help
            if show_result is not None:
                # can't open the result modal for a game still in progress
                session.show_result = show_result and session.game.is_over
            return replace(session)
