"""Configuration models for the guessing game front ends."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from games.number_guess.tiers import TIER_NAMES


class PlayConfig(BaseModel):
    """
    Main configuration for a play session.

    File values can be overridden by command-line flags.
    """

    model_config = ConfigDict(extra="forbid")

    leaderboard_path: str = Field(
        default="highscores.json",
        description="JSON file holding the top-5 leaderboard",
    )
    difficulty: Optional[str] = Field(
        default=None,
        description="Difficulty tier (easy, medium, hard); prompt if unset",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Random seed for reproducible secrets",
    )
    verbose: bool = Field(
        default=False,
        description="Enable verbose logging",
    )

    @field_validator("difficulty")
    @classmethod
    def validate_difficulty(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        key = v.strip().lower()
        if key not in TIER_NAMES:
            raise ValueError(
                f"Unknown difficulty: {v}. Available: {list(TIER_NAMES)}"
            )
        return key

    def merged(self, **overrides: Any) -> "PlayConfig":
        """Return a copy with every non-None override applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return PlayConfig(**{**self.model_dump(), **updates})


def load_config(filepath: str) -> PlayConfig:
    """
    Load configuration from YAML or JSON file.

    Args:
        filepath: Path to config file

    Returns:
        PlayConfig instance
    """
    import json
    from pathlib import Path

    path = Path(filepath)
    content = path.read_text()

    if path.suffix in ['.yaml', '.yml']:
        try:
            import yaml
        except ImportError:
            raise ImportError("PyYAML required for YAML config files: pip install pyyaml")
        data = yaml.safe_load(content) or {}
    else:
        data = json.loads(content)

    return PlayConfig(**data)


def create_config(**kwargs) -> PlayConfig:
    """
    Create a PlayConfig from simple parameters.

    Args:
        **kwargs: PlayConfig fields

    Returns:
        PlayConfig instance
    """
    return PlayConfig(**kwargs)
