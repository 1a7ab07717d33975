"""
Leaderboard data structures and ranking.

Ranking is lexicographic on (attempts, elapsed seconds): fewer attempts
wins, ties go to the faster round. Records that tie on both keep their
insertion order. Only the top MAX_ENTRIES records are kept.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from games.number_guess.game import Round
from games.number_guess.tiers import DifficultyTier, tier_from_bound

MAX_ENTRIES = 5


# ---------------------------------------------------------------------------
# Data structures
# ---------------------------------------------------------------------------


class ScoreRecord(BaseModel):
    """The durable outcome of one won round."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    # Strict: "3" or "12.5" in the file is a corrupt record, not a number
    attempts: int = Field(..., ge=0, strict=True)
    elapsed_seconds: float = Field(..., ge=0.0, alias="seconds", strict=True)
    difficulty: DifficultyTier
    recorded_at: datetime = Field(..., alias="date")

    @field_validator("difficulty", mode="before")
    @classmethod
    def validate_difficulty(cls, v):
        if isinstance(v, DifficultyTier):
            return v
        # bool is an int subclass; true/false is never a valid bound
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"difficulty must be an integer bound, got {v!r}")
        return tier_from_bound(v)

    @field_serializer("difficulty")
    def serialize_difficulty(self, tier: DifficultyTier) -> int:
        return tier.bound

    @property
    def sort_key(self) -> Tuple[int, float]:
        return (self.attempts, self.elapsed_seconds)

    @classmethod
    def from_round(
        cls,
        round: Round,
        now: Optional[Callable[[], datetime]] = None,
    ) -> "ScoreRecord":
        """
        Build the record for a won round.

        Args:
            round: A round whose winning guess has been submitted
            now: Wall-clock provider returning an aware local datetime

        Raises:
            ValueError: If the round has not been won
        """
        if not round.won or round.winning_outcome is None:
            raise ValueError("Cannot build a score record for a round that is not won")
        recorded_at = now() if now else datetime.now().astimezone()
        return cls(
            attempts=round.attempts,
            elapsed_seconds=round.winning_outcome.elapsed_seconds,
            difficulty=round.tier,
            recorded_at=recorded_at,
        )

    def to_json_dict(self) -> dict:
        """Persisted form: attempts, seconds, difficulty, date."""
        return self.model_dump(mode="json", by_alias=True)


@dataclass(frozen=True)
class Leaderboard:
    """Ranked top scores, best first."""

    entries: Tuple[ScoreRecord, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ScoreRecord]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> ScoreRecord:
        return self.entries[index]

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def ranked(self) -> List[Tuple[int, ScoreRecord]]:
        """(rank, record) pairs, rank starting at 1."""
        return list(enumerate(self.entries, start=1))

    def rank_of(self, record: ScoreRecord) -> Optional[int]:
        """Rank of *record* (by identity), or None if it is not on the board."""
        for rank, entry in self.ranked():
            if entry is record:
                return rank
        return None

    def to_json_list(self) -> List[dict]:
        return [entry.to_json_dict() for entry in self.entries]


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------


def rank_scores(records: Iterable[ScoreRecord], limit: int = MAX_ENTRIES) -> Leaderboard:
    """
    Sort records best-first and keep the top *limit*.

    sorted() is stable, so records equal on (attempts, seconds) stay in
    the order they were given.
    """
    ordered = sorted(records, key=lambda r: r.sort_key)
    return Leaderboard(entries=tuple(ordered[:limit]))
