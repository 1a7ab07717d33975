"""
Durable leaderboard storage.

The leaderboard lives in a single JSON file holding an array of up to
five records:

    [
      {"attempts": 3, "seconds": 12.5, "difficulty": 100,
       "date": "2026-10-17T14:02:11.532190+02:00"},
      ...
    ]

A missing file is an empty leaderboard. Every record() is a fresh
load-modify-persist cycle.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import List, Union

from pydantic import TypeAdapter, ValidationError

from play.leaderboard.data import (
    MAX_ENTRIES,
    Leaderboard,
    ScoreRecord,
    rank_scores,
)

logger = logging.getLogger(__name__)

_RECORDS = TypeAdapter(List[ScoreRecord])


class LeaderboardError(Exception):
    """Base class for leaderboard storage failures."""


class CorruptStoreError(LeaderboardError):
    """Persisted leaderboard data could not be deserialized."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class StoreReadError(LeaderboardError):
    """The leaderboard file exists but could not be read."""

    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.path = path


class PersistFailedError(LeaderboardError):
    """
    Writing the leaderboard failed.

    Attributes:
        leaderboard: The leaderboard computed before the failed write
        path: File that could not be written
    """

    def __init__(self, message: str, leaderboard: Leaderboard, path: Path):
        super().__init__(message)
        self.leaderboard = leaderboard
        self.path = path


class LeaderboardStore:
    """
    Ranked top-5 score storage backed by a JSON file.

    Example:
        store = LeaderboardStore("highscores.json")
        board = store.record(score)
        for rank, entry in board.ranked():
            ...
    """

    def __init__(self, path: Union[str, Path]):
        """
        Args:
            path: Leaderboard file. Parent directories are created on write.
        """
        self.path = Path(path)

    def load(self) -> Leaderboard:
        """
        Read the persisted leaderboard.

        Returns:
            Leaderboard (empty if the file does not exist yet)

        Raises:
            CorruptStoreError: If the file contents are not a valid leaderboard
            StoreReadError: If the file exists but cannot be read
        """
        try:
            content = self.path.read_bytes()
        except FileNotFoundError:
            logger.debug("No leaderboard at %s, starting empty", self.path)
            return Leaderboard()
        except OSError as e:
            logger.warning("Could not read leaderboard %s: %s", self.path, e)
            raise StoreReadError(f"Could not read leaderboard {self.path}: {e}", self.path) from e

        try:
            records = _RECORDS.validate_json(content.decode("utf-8"))
        except UnicodeDecodeError as e:
            logger.warning("Corrupt leaderboard %s: %s", self.path, e)
            raise CorruptStoreError(
                f"Leaderboard {self.path} is corrupt: not valid UTF-8", self.path
            ) from e
        except ValidationError as e:
            logger.warning("Corrupt leaderboard %s: %s", self.path, e)
            raise CorruptStoreError(
                f"Leaderboard {self.path} is corrupt: {e.error_count()} invalid field(s)",
                self.path,
            ) from e

        # Hand-edited files may be out of order or too long
        return rank_scores(records)

    def record(self, score: ScoreRecord) -> Leaderboard:
        """
        Merge *score* into the leaderboard and persist it.

        Args:
            score: Record of a won round

        Returns:
            The persisted leaderboard

        Raises:
            CorruptStoreError / StoreReadError: If the current leaderboard
                cannot be loaded (nothing is written)
            PersistFailedError: If the write fails; carries the computed
                leaderboard
        """
        current = self.load()
        updated = rank_scores([*current.entries, score], limit=MAX_ENTRIES)
        logger.debug(
            "Recording score attempts=%d seconds=%.2f difficulty=%d (%d entries)",
            score.attempts, score.elapsed_seconds, score.difficulty.bound, len(updated),
        )

        try:
            self._write(updated)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not persist leaderboard %s: %s", self.path, e)
            raise PersistFailedError(
                f"Could not save leaderboard to {self.path}: {e}",
                leaderboard=updated,
                path=self.path,
            ) from e

        return updated

    def _write(self, leaderboard: Leaderboard) -> None:
        """Write to a sibling temp file, then replace the target."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(leaderboard.to_json_list(), indent=2)

        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
