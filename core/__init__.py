"""
Core interfaces shared by the games and the front ends.

This module provides the input-parsing base classes every prompt in the
game is built on.
"""

from core.action_parser import InputParser, InputParseError, QUIT_COMMANDS, is_quit

__all__ = [
    "InputParser",
    "InputParseError",
    "QUIT_COMMANDS",
    "is_quit",
]
