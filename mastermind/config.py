"""
Single place to:
- Hold the game rules (code length, palette, attempts)
- Read app settings from env (APP_ENV, LOG_LEVEL, MASTERMIND_SEED, CORS_ORIGINS)

The rules are constants on purpose; GameConfig only exists so tests can
play with a smaller palette or fewer attempts.
"""

import os
from dataclasses import dataclass
from typing import List, Optional, Tuple

from dotenv import load_dotenv

from .types import Color

# 1) Load env vars from .env if present
load_dotenv()

# 2) Game rules
COLORS: Tuple[Color, ...] = ("red", "blue", "green", "yellow", "purple", "orange")
CODE_LENGTH = 4
MAX_ATTEMPTS = 10


@dataclass(frozen=True)
class GameConfig:
    code_length: int = CODE_LENGTH
    palette: Tuple[Color, ...] = COLORS
    max_attempts: int = MAX_ATTEMPTS

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple so the config stays hashable
        object.__setattr__(self, "palette", tuple(self.palette))

        if self.code_length < 1:
            raise ValueError("code_length must be at least 1.")
        if not self.palette:
            raise ValueError("palette must contain at least one color.")
        if len(set(self.palette)) != len(self.palette):
            raise ValueError("palette colors must be unique.")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")


DEFAULT_CONFIG = GameConfig()

# 3) App settings
APP_ENV = os.getenv("APP_ENV", "local")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_seed() -> Optional[int]:
    """MASTERMIND_SEED makes secrets reproducible in dev. Unset -> None."""
    raw = os.getenv("MASTERMIND_SEED")
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"MASTERMIND_SEED must be an integer, got {raw!r}.")


def get_cors_origins() -> List[str]:
    raw = os.getenv("CORS_ORIGINS", "*")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]
