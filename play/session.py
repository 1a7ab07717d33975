"""
Game session: the interface front ends call into.

A session composes the round engine and the leaderboard store:

    session = GameSession.from_config(config)
    round = session.start_round(DifficultyTier.MEDIUM)
    outcome = session.submit_guess(round, "50")
    if outcome.is_correct:
        report = session.record_win(round)

Front ends own everything else: the tier menu, reading text, spotting
the quit command before calling submit_guess(), rendering, and looping.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from games.number_guess import create_game
from games.number_guess.game import GuessOutcome, Round, RoundEngine
from games.number_guess.tiers import DifficultyTier
from play.config import PlayConfig
from play.leaderboard.data import Leaderboard, ScoreRecord
from play.leaderboard.store import LeaderboardError, LeaderboardStore, PersistFailedError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WinReport:
    """Result of recording a won round."""

    record: ScoreRecord
    leaderboard: Optional[Leaderboard]
    warning: Optional[str] = None

    @property
    def persisted(self) -> bool:
        return self.warning is None

    @property
    def rank(self) -> Optional[int]:
        """Rank of the new record, or None if it did not make the board."""
        if self.leaderboard is None:
            return None
        return self.leaderboard.rank_of(self.record)


class GameSession:
    """Plays rounds and records wins."""

    def __init__(
        self,
        engine: RoundEngine,
        store: LeaderboardStore,
        now: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            engine: Round engine
            store: Leaderboard store
            now: Wall-clock provider for score timestamps
        """
        self.engine = engine
        self.store = store
        self._now = now

    @classmethod
    def from_config(cls, config: PlayConfig, **engine_kwargs) -> "GameSession":
        """Build a session from a PlayConfig; engine_kwargs go to create_game()."""
        game_config = {"seed": config.seed}
        if config.difficulty:
            game_config["difficulty"] = config.difficulty
        engine, _ = create_game(game_config, **engine_kwargs)
        return cls(engine, LeaderboardStore(config.leaderboard_path))

    def start_round(self, tier: DifficultyTier) -> Round:
        return self.engine.start(tier)

    def submit_guess(self, round: Round, text: str) -> GuessOutcome:
        return self.engine.submit_guess(round, text)

    def current_leaderboard(self) -> Leaderboard:
        """
        Load the leaderboard.

        Raises:
            LeaderboardError: If the store is corrupt or unreadable
        """
        return self.store.load()

    def record_win(self, round: Round) -> WinReport:
        """
        Hand a won round's score to the leaderboard.

        Store failures never propagate: a failed write still returns the
        computed leaderboard, an unavailable store returns none, and both
        carry a warning for the player.

        Raises:
            ValueError: If the round is not won or was already recorded
        """
        if round.score is not None:
            raise ValueError("This round has already been recorded")

        record = ScoreRecord.from_round(round, now=self._now)
        round.score = record

        try:
            leaderboard = self.store.record(record)
        except PersistFailedError as e:
            return WinReport(
                record=record,
                leaderboard=e.leaderboard,
                warning=f"Your score could not be saved: {e}",
            )
        except LeaderboardError as e:
            return WinReport(
                record=record,
                leaderboard=None,
                warning=f"Leaderboard unavailable: {e}",
            )

        logger.info("Recorded win: %d attempts, %.2fs", record.attempts, record.elapsed_seconds)
        return WinReport(record=record, leaderboard=leaderboard)
