'''
Mastermind API (one game per browser session)

Endpoints:
POST   /games                     -> start a session with a fresh game
GET    /games/{id}                -> read state & history
POST   /games/{id}/new            -> new game, same session
POST   /games/{id}/colors         -> drop a color into the next empty slot
DELETE /games/{id}/slots/{index}  -> clear one slot of the current guess
DELETE /games/{id}/guess          -> clear the whole current guess
POST   /games/{id}/guess          -> submit the current guess
PATCH  /games/{id}/prefs          -> dark mode / modal flags
DELETE /games/{id}                -> drop the session

Extras:
GET  /config                      -> palette, code length, attempts
GET  /help                        -> "How to Play" text

Sessions live in memory only (GameStore); restarting the server forgets them.
'''

import logging
import random
from pathlib import Path
from fastapi import FastAPI, HTTPException, Depends
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from . import config
from .game import revealed_secret
from .engine import count_results
from .howto import build_help
from .store import GameStore, Session

from .schemas import (
    ColorRequest,
    PrefsUpdate,
    GuessRecordOut,
    SessionOut,
    ConfigOut,
    HelpOut,
)

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Mastermind API", version="3.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"]
)

# --- One store for the whole process ---
# MASTERMIND_SEED -> reproducible secrets in dev; otherwise the engine's system random
_seed = config.get_seed()
_store = GameStore(rng=random.Random(_seed) if _seed is not None else None)
if _seed is not None:
    logger.warning("MASTERMIND_SEED is set; secrets are predictable (APP_ENV=%s)", config.APP_ENV)

def get_store() -> GameStore:
    return _store

# --- Response builder ---

def _result_message(session: Session) -> str | None:
    game = session.game
    if not game.is_over:
        return None
    if game.is_won:
        used = game.attempts_used
        return f"You guessed the secret code in {used} attempt{'' if used == 1 else 's'}!"
    return "You've run out of attempts."

def _to_session_out(session: Session) -> SessionOut:
    game = session.game
    history = []
    for record in game.history:
        correct, wrong_position = count_results(record.results)
        history.append(GuessRecordOut(
            guess=list(record.guess),
            results=list(record.results),
            correct=correct,
            wrong_position=wrong_position,
        ))

    secret = revealed_secret(game)
    return SessionOut(
        session_id=session.id,
        status=game.status,
        is_over=game.is_over,
        is_won=game.is_won,
        attempts_used=game.attempts_used,
        attempts_left=game.attempts_left,
        current_guess=list(game.current_guess),
        can_submit=game.is_guess_complete and not game.is_over,
        history=history,
        secret=list(secret) if secret is not None else None,
        message=_result_message(session),
        dark_mode=session.dark_mode,
        show_help=session.show_help,
        show_result=session.show_result,
    )

def _found(session: Session | None) -> SessionOut:
    if session is None:
        raise HTTPException(status_code=404, detail="Game not found")
    return _to_session_out(session)

# ---------------- Routes ----------------

@app.post("/games", response_model=SessionOut, summary="Start a new session")
def start_session(store: GameStore = Depends(get_store)) -> SessionOut:
    return _to_session_out(store.create())

@app.get("/games/{session_id}", response_model=SessionOut, summary="Get current game state")
def get_session(session_id: str, store: GameStore = Depends(get_store)) -> SessionOut:
    return _found(store.get(session_id))

@app.delete("/games/{session_id}", summary="Forget a session")
def delete_session(session_id: str, store: GameStore = Depends(get_store)) -> dict:
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="Game not found")
    return {"message": "Session deleted."}

@app.post("/games/{session_id}/new", response_model=SessionOut, summary="Start a new game")
def restart_game(session_id: str, store: GameStore = Depends(get_store)) -> SessionOut:
    return _found(store.new_game(session_id))

@app.post("/games/{session_id}/colors", response_model=SessionOut, summary="Pick a color for the next empty slot")
def pick_color(
    session_id: str,
    payload: ColorRequest,
    store: GameStore = Depends(get_store),
) -> SessionOut:
    # Full guess or finished game -> returned unchanged
    try:
        session = store.select_color(session_id, payload.color)
    except ValueError as ve:
        raise HTTPException(status_code=400, detail=str(ve))
    return _found(session)

@app.delete("/games/{session_id}/slots/{index}", response_model=SessionOut, summary="Clear one peg")
def clear_peg(session_id: str, index: int, store: GameStore = Depends(get_store)) -> SessionOut:
    try:
        session = store.clear_slot(session_id, index)
    except IndexError as ie:
        raise HTTPException(status_code=400, detail=str(ie))
    return _found(session)

@app.delete("/games/{session_id}/guess", response_model=SessionOut, summary="Clear the current guess")
def clear_guess(session_id: str, store: GameStore = Depends(get_store)) -> SessionOut:
    return _found(store.clear_current_guess(session_id))

@app.post("/games/{session_id}/guess", response_model=SessionOut, summary="Submit the current guess")
def submit_guess(session_id: str, store: GameStore = Depends(get_store)) -> SessionOut:
    # Incomplete guess or finished game -> returned unchanged, check can_submit
    return _found(store.submit_guess(session_id))

@app.patch("/games/{session_id}/prefs", response_model=SessionOut, summary="Toggle dark mode / modals")
def update_prefs(
    session_id: str,
    payload: PrefsUpdate,
    store: GameStore = Depends(get_store),
) -> SessionOut:
    return _found(store.update_prefs(
        session_id,
        dark_mode=payload.dark_mode,
        show_help=payload.show_help,
        show_result=payload.show_result,
    ))

@app.get("/config", response_model=ConfigOut, summary="Game rules")
def get_config(store: GameStore = Depends(get_store)) -> ConfigOut:
    rules = store.config
    return ConfigOut(
        palette=list(rules.palette),
        code_length=rules.code_length,
        max_attempts=rules.max_attempts,
    )

@app.get("/help", response_model=HelpOut, summary="How to play")
def get_help(store: GameStore = Depends(get_store)) -> HelpOut:
    return build_help(store.config)

# ---- Static hosting for the frontend ----
HERE = Path(__file__).resolve().parent
STATIC_DIR = HERE / "static"

if STATIC_DIR.is_dir():
    app.mount("/", StaticFiles(directory=str(STATIC_DIR), html=True), name="static")
