"""
"How to Play" text shown in the help modal.
Numbers come from the config so the text never disagrees with the rules.
"""

from .config import DEFAULT_CONFIG, GameConfig
from .schemas import HelpOut, HelpSection


def build_help(config: GameConfig = DEFAULT_CONFIG) -> HelpOut:
    return HelpOut(
        title="How to Play Mastermind",
        sections=[
            HelpSection(
                heading="Objective",
                paragraphs=[
                    "Guess the secret code set by the computer. "
                    f"The code is a sequence of {config.code_length} colored pegs."
                ],
            ),
            HelpSection(
                heading="Game Rules",
                bullets=[
                    f"You have {config.max_attempts} attempts to guess the secret code.",
                    "For each guess, the computer will provide feedback on how many pegs are the "
                    "correct color and in the correct position (black pegs), and how many are the "
                    "correct color but in the wrong position (white pegs).",
                    "Clear pegs by clicking on them individually or use the clear button to clear "
                    "the whole current guess.",
                    "If you guess the secret code correctly, you win! If you run out of attempts, you lose.",
                ],
            ),
            HelpSection(
                heading="Game Interface",
                paragraphs=["The game interface consists of the following elements:"],
                bullets=[
                    "The secret code (hidden from you)",
                    "Your current guess, with clear buttons for individual pegs",
                    "Feedback on your previous guesses, showing the correct and misplaced pegs",
                    "Buttons to submit your guess, clear the current guess, and start a new game",
                ],
            ),
            HelpSection(
                heading="Good luck",
                paragraphs=["Good luck and have fun playing Mastermind!"],
            ),
        ],
    )
