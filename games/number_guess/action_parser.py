"""
Input parsers for the number guessing prompts.

Guess text itself is judged by the engine (a malformed guess is a game
outcome, not a parse error). These parsers handle the driver's other
prompts: the difficulty menu and the play-again question.
"""

from typing import Dict

from core.action_parser import InputParser, InputParseError
from games.number_guess.tiers import MENU_CHOICES, TIER_NAMES, DifficultyTier


class DifficultyParser(InputParser):
    """Parses the difficulty menu answer: "1"/"2"/"3" or a tier name."""

    def __init__(self):
        self._choices: Dict[str, DifficultyTier] = {**MENU_CHOICES, **TIER_NAMES}

    @property
    def error_message(self) -> str:
        return "Invalid input. Please enter a valid difficulty level (1, 2, 3)."

    def parse(self, raw_input: str) -> DifficultyTier:
        return self.match_choice(raw_input, self._choices)


class PlayAgainParser(InputParser):
    """Parses a yes/no answer."""

    _CHOICES = {"y": True, "yes": True, "n": False, "no": False}

    @property
    def error_message(self) -> str:
        return "Please enter 'y' or 'n'"

    def parse(self, raw_input: str) -> bool:
        return self.match_choice(raw_input, self._CHOICES)


__all__ = ["DifficultyParser", "PlayAgainParser", "InputParseError"]
