"""
Explicit validation & Pydantic models
- Models are used to validate and serialize/deserialize data
  exchanged between the page and the server.
- Defines the structure of API requests and responses.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, field_validator

from .config import COLORS

PegResultOut = Literal["correct", "wrong_position", "incorrect"]
Status = Literal["in_progress", "won", "lost"]

# 1. Validates a color pick from the palette
class ColorRequest(BaseModel):
    color: str = Field(..., description="One of the palette colors, ex. 'red'")

    @field_validator("color")
    @classmethod
    def validate_color(cls, color: str) -> str:
        """
        Normalize case and whitespace, then make sure the color is in the palette.
        """
        cleaned = color.strip().lower()
        if cleaned not in COLORS:
            raise ValueError("Color must be one of: " + ", ".join(COLORS) + ".")
        return cleaned

    model_config = {
        "json_schema_extra": {
            "examples": [
                { "color": "red" },
                { "color": "purple" },
            ]
        }
    }

# 2. Page flags the player can toggle; omitted fields stay as they are
class PrefsUpdate(BaseModel):
    dark_mode: Optional[bool] = Field(None, description="Dark or light theme")
    show_help: Optional[bool] = Field(None, description="'How to Play' modal open")
    show_result: Optional[bool] = Field(None, description="Won/Game Over modal open")

# 3. One scored guess
class GuessRecordOut(BaseModel):
    guess: List[str] = Field(..., description="The submitted colors")
    results: List[PegResultOut] = Field(..., description="Feedback pegs: correct first, then wrong_position, then incorrect")
    correct: int = Field(..., description="Black pegs: right color, right place")
    wrong_position: int = Field(..., description="White pegs: right color, wrong place")

# 4. Everything the page needs to draw itself
class SessionOut(BaseModel):
    session_id: str = Field(..., description="Unique ID for this browser session")
    status: Status = Field(..., description="Current state of the game")
    is_over: bool = Field(..., description="No more guesses accepted")
    is_won: bool = Field(..., description="The secret was guessed")
    attempts_used: int = Field(..., description="How many guesses were submitted")
    attempts_left: int = Field(..., description="How many guesses remain")
    current_guess: List[Optional[str]] = Field(..., description="Guess being built; null = empty slot")
    can_submit: bool = Field(..., description="All slots filled and game still running")
    history: List[GuessRecordOut] = Field(..., description="All guesses made so far with feedback")
    secret: Optional[List[str]] = Field(None, description="The secret code (only revealed if game is over)")
    message: Optional[str] = Field(None, description="Result text once the game is over")
    dark_mode: bool = Field(..., description="Dark theme on")
    show_help: bool = Field(..., description="'How to Play' modal open")
    show_result: bool = Field(..., description="Won/Game Over modal open")

# 5. Game rules for drawing the board and palette
class ConfigOut(BaseModel):
    palette: List[str] = Field(..., description="Colors the player can pick")
    code_length: int = Field(..., description="Pegs per code")
    max_attempts: int = Field(..., description="Guesses per game")

# 6. "How to Play" text
class HelpSection(BaseModel):
    heading: str
    paragraphs: List[str] = Field(default_factory=list)
    bullets: List[str] = Field(default_factory=list)

class HelpOut(BaseModel):
    title: str
    sections: List[HelpSection]
