"""
Number guessing round engine.

One round: the engine draws a secret integer in [1, tier.bound], then
accepts guesses one at a time and answers each with an outcome.

Guess handling:
  1. Text that is not a well-formed integer is rejected (no attempt charged)
  2. A well-formed integer outside [1, bound] is rejected (attempt charged)
  3. Otherwise the attempt is charged and compared to the secret:
     lower -> TOO_LOW ("Higher!"), higher -> TOO_HIGH ("Lower!"),
     equal -> CORRECT and the round is won

Once a round is won it stays won; further guesses return the winning
outcome unchanged. Quit commands never reach the engine.
"""

import logging
import random
import re
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional

from games.number_guess.tiers import LOWER_BOUND, DifficultyTier

logger = logging.getLogger(__name__)

# Optional "+" followed by ASCII digits, up to the 32-bit unsigned maximum.
# Negative numbers, "1_000" and non-ASCII digits are not guesses.
_INTEGER_RE = re.compile(r"\+?[0-9]+")
MAX_GUESS = 4294967295

RandomInt = Callable[[int, int], int]
Clock = Callable[[], float]


class Phase(Enum):
    """Round lifecycle."""

    IN_PROGRESS = "in_progress"
    WON = "won"


class Outcome(Enum):
    """Result kinds for a single guess submission."""

    INVALID_FORMAT = "invalid_format"
    OUT_OF_RANGE = "out_of_range"
    TOO_LOW = "too_low"
    TOO_HIGH = "too_high"
    CORRECT = "correct"


@dataclass(frozen=True)
class GuessOutcome:
    """What happened to one guess."""

    kind: Outcome
    attempts: int
    bound: int
    value: Optional[int] = None
    elapsed_seconds: Optional[float] = None

    @property
    def is_correct(self) -> bool:
        return self.kind is Outcome.CORRECT

    @property
    def charged(self) -> bool:
        """True if this guess cost the player an attempt."""
        return self.kind is not Outcome.INVALID_FORMAT

    @property
    def message(self) -> str:
        if self.kind is Outcome.INVALID_FORMAT:
            return "Please enter a valid number!"
        if self.kind is Outcome.OUT_OF_RANGE:
            return f"Please enter a number between {LOWER_BOUND} and {self.bound}!"
        if self.kind is Outcome.TOO_LOW:
            return "Higher!"
        if self.kind is Outcome.TOO_HIGH:
            return "Lower!"
        return (
            f"Correct! You won in {self.attempts} attempts "
            f"and {self.elapsed_seconds:.2f} seconds!"
        )


@dataclass
class Round:
    """State of one play session, from secret generation to the winning guess."""

    tier: DifficultyTier
    secret: int
    started_at: float
    attempts: int = 0
    won: bool = False
    winning_outcome: Optional[GuessOutcome] = None
    # Set by the session once the win has been handed to the leaderboard
    score: Optional[Any] = None

    @property
    def phase(self) -> Phase:
        return Phase.WON if self.won else Phase.IN_PROGRESS

    @property
    def bound(self) -> int:
        return self.tier.bound


def parse_guess(raw_input: str) -> Optional[int]:
    """Return the integer in *raw_input*, or None if it is not well-formed."""
    text = (raw_input or "").strip()
    if not _INTEGER_RE.fullmatch(text):
        return None
    value = int(text)
    if value > MAX_GUESS:
        return None
    return value


class RoundEngine:
    """Starts rounds and judges guesses."""

    def __init__(
        self,
        seed: Optional[int] = None,
        randint: Optional[RandomInt] = None,
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            seed: Seed for the default random source (ignored if randint given)
            randint: "Random integer in [a, b]" provider, inclusive on both ends
            clock: Monotonic clock returning seconds
        """
        self._randint = randint or random.Random(seed).randint
        self._clock = clock or time.monotonic

    def start(self, tier: DifficultyTier) -> Round:
        """Begin a new round for *tier*."""
        secret = self._randint(LOWER_BOUND, tier.bound)
        logger.debug("Round started: difficulty=%s bound=%d", tier.name, tier.bound)
        return Round(tier=tier, secret=secret, started_at=self._clock())

    def submit_guess(self, round: Round, raw_input: str) -> GuessOutcome:
        """
        Judge one guess and update the round.

        Args:
            round: Round returned by start()
            raw_input: Guess text exactly as typed

        Returns:
            GuessOutcome for this guess. On a won round, the original
            winning outcome is returned and nothing changes.
        """
        if round.won:
            return round.winning_outcome

        value = parse_guess(raw_input)
        if value is None:
            return GuessOutcome(Outcome.INVALID_FORMAT, round.attempts, round.bound)

        round.attempts += 1

        if not round.tier.contains(value):
            return GuessOutcome(Outcome.OUT_OF_RANGE, round.attempts, round.bound, value)

        if value < round.secret:
            return GuessOutcome(Outcome.TOO_LOW, round.attempts, round.bound, value)
        if value > round.secret:
            return GuessOutcome(Outcome.TOO_HIGH, round.attempts, round.bound, value)

        elapsed = max(self._clock() - round.started_at, 0.0)
        round.won = True
        round.winning_outcome = GuessOutcome(
            Outcome.CORRECT,
            round.attempts,
            round.bound,
            value,
            elapsed_seconds=elapsed,
        )
        logger.debug(
            "Round won: difficulty=%s attempts=%d elapsed=%.2fs",
            round.tier.name, round.attempts, elapsed,
        )
        return round.winning_outcome
