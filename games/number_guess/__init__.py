"""
Number guessing game implementation.

A single-player game: the engine picks a secret integer between 1 and the
tier's upper bound, and the player guesses until correct, getting
"Higher!" / "Lower!" feedback after each guess.

Tiers:
  - Easy   (1 - 50)
  - Medium (1 - 100)
  - Hard   (1 - 200)

Attempts and elapsed time of each won round go to the leaderboard in
play.leaderboard.
"""

from games.number_guess.game import (
    GuessOutcome,
    Outcome,
    Phase,
    Round,
    RoundEngine,
    parse_guess,
)
from games.number_guess.tiers import DifficultyTier, tier_from_bound, tier_from_name
from games.number_guess.config import NumberGuessConfig
from games.number_guess.action_parser import DifficultyParser, PlayAgainParser

__all__ = [
    "RoundEngine",
    "Round",
    "GuessOutcome",
    "Outcome",
    "Phase",
    "DifficultyTier",
    "NumberGuessConfig",
    "DifficultyParser",
    "PlayAgainParser",
    "parse_guess",
    "tier_from_bound",
    "tier_from_name",
    "create_game",
]

def create_game(game_config=None, randint=None, clock=None):
    """
    Factory: create a RoundEngine from a NumberGuessConfig (or a plain dict).

    Returns:
        (engine, default_tier)
    """
    if game_config is None:
        game_config = NumberGuessConfig()
    elif isinstance(game_config, dict):
        game_config = NumberGuessConfig(**game_config)

    engine = RoundEngine(seed=game_config.seed, randint=randint, clock=clock)
    return engine, tier_from_name(game_config.difficulty)
