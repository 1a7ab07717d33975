"""
Play layer for the number guessing game.

Components:
- session: the interface front ends call (start_round, submit_guess,
  current_leaderboard, record_win)
- leaderboard: top-5 score storage and rendering
- config: session configuration
- cli: terminal front end
"""

from play.config import PlayConfig, create_config, load_config
from play.session import GameSession, WinReport

__all__ = [
    "PlayConfig",
    "create_config",
    "load_config",
    "GameSession",
    "WinReport",
]
