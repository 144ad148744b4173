"""
Labels for clarity.
"""

from typing import Callable, Literal, Optional, Tuple

Color = str  # "red", "blue", ...
Code = Tuple[Color, ...]  # 4 color secret or guess
Slot = Optional[Color]  # None = empty peg in the guess being built
PegResult = Literal["correct", "wrong_position", "incorrect"]
GameStatus = Literal["in_progress", "won", "lost"]

# (secret, guess) -> feedback pegs
Scorer = Callable[[Code, Code], Tuple[PegResult, ...]]
