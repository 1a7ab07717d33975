"""
Abstract InputParser interface for turning raw player text into values.

Input parsers sit between a front end (terminal prompt, text box) and
the game engine. They never touch game state; they only normalize text
and map it onto the values the engine or driver expects.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


# Sentinel commands that abandon the current round. Detected by the
# driver layer before any text reaches the engine.
QUIT_COMMANDS = frozenset({"q", "quit"})


class InputParseError(Exception):
    """
    Raised when player input cannot be parsed into the expected value.

    Attributes:
        message: Human-readable error description
        raw_input: The original text that failed to parse
    """

    def __init__(self, message: str, raw_input: Optional[str] = None):
        super().__init__(message)
        self.raw_input = raw_input


def is_quit(raw_input: Optional[str]) -> bool:
    """Return True if *raw_input* is a quit sentinel ("q" / "quit", any case)."""
    if raw_input is None:
        return False
    return raw_input.strip().lower() in QUIT_COMMANDS


class InputParser(ABC):
    """
    Abstract base class for parsing raw player text.

    Each prompt the driver shows (difficulty menu, play-again question)
    has a parser subclass that knows the accepted answers. The parser is
    responsible for:

    1. Normalizing the text (whitespace, case)
    2. Mapping it to a value
    3. Raising InputParseError with a re-prompt message otherwise

    Example:
        class ColorParser(InputParser):
            def parse(self, raw_input):
                return self.match_choice(raw_input, {"r": "red", "b": "blue"})
    """

    @abstractmethod
    def parse(self, raw_input: str) -> Any:
        """
        Parse player text into a value.

        Args:
            raw_input: Text exactly as the player typed it

        Returns:
            Parsed value

        Raises:
            InputParseError: If the text is not an accepted answer
        """
        pass

    @property
    def error_message(self) -> str:
        """Message shown to the player when parse() fails."""
        return "Invalid input."

    def normalize(self, raw_input: Optional[str]) -> str:
        """Strip surrounding whitespace and lower-case the input."""
        return (raw_input or "").strip().lower()

    def match_choice(self, raw_input: str, choices: Dict[str, Any]) -> Any:
        """
        Look up normalized input in a mapping of accepted answers.

        Args:
            raw_input: Text exactly as the player typed it
            choices: Mapping of normalized answer to value

        Returns:
            The mapped value

        Raises:
            InputParseError: If the answer is not in *choices*
        """
        key = self.normalize(raw_input)
        if key in choices:
            return choices[key]
        raise InputParseError(self.error_message, raw_input=raw_input)
