"""Difficulty tiers and their static tables.

Every tier binds the upper bound of the guessable range. The lower bound
is always 1. Persisted score records store the bound, so lookups by bound
live here next to the menu and name lookups used by the front end.
"""

from enum import Enum
from typing import Dict

LOWER_BOUND = 1


class DifficultyTier(Enum):
    """The three fixed difficulty presets."""

    EASY = 50
    MEDIUM = 100
    HARD = 200

    @property
    def bound(self) -> int:
        """Inclusive upper bound of the guessable range."""
        return self.value

    @property
    def label(self) -> str:
        return f"{self.name.title()} ({LOWER_BOUND} - {self.bound})"

    def contains(self, value: int) -> bool:
        return LOWER_BOUND <= value <= self.bound


# ── lookups ───────────────────────────────────────────────────────────────────

# Menu numbering from the console flow: 1. Easy  2. Medium  3. Hard
MENU_CHOICES: Dict[str, DifficultyTier] = {
    "1": DifficultyTier.EASY,
    "2": DifficultyTier.MEDIUM,
    "3": DifficultyTier.HARD,
}

TIER_NAMES: Dict[str, DifficultyTier] = {t.name.lower(): t for t in DifficultyTier}


def tier_from_bound(bound: int) -> DifficultyTier:
    """Return the tier whose upper bound is *bound*."""
    try:
        return DifficultyTier(bound)
    except ValueError:
        raise ValueError(
            f"Unknown difficulty bound: {bound}. "
            f"Available: {[t.bound for t in DifficultyTier]}"
        ) from None


def tier_from_name(name: str) -> DifficultyTier:
    """Return the tier named *name* (case-insensitive)."""
    key = name.strip().lower()
    if key not in TIER_NAMES:
        raise ValueError(
            f"Unknown difficulty: {name}. Available: {list(TIER_NAMES)}"
        )
    return TIER_NAMES[key]
