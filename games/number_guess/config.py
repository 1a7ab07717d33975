"""Number guessing game configuration."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from games.number_guess.tiers import TIER_NAMES


class NumberGuessConfig(BaseModel):
    """Configuration for number guessing game parameters."""

    model_config = ConfigDict(extra="forbid")

    difficulty: str = Field(
        default="medium",
        description="Difficulty tier: easy (1-50), medium (1-100) or hard (1-200)",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the secret-number generator",
    )

    @field_validator("difficulty")
    @classmethod
    def validate_difficulty(cls, v: str) -> str:
        key = v.strip().lower()
        if key not in TIER_NAMES:
            raise ValueError(
                f"Unknown difficulty: {v}. Available: {list(TIER_NAMES)}"
            )
        return key
