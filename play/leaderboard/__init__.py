"""
High-score leaderboard: ranked top-5 records, JSON persistence and a Rich
terminal renderer.

Programmatic
------------
    from play.leaderboard import LeaderboardStore, render_leaderboard

    store = LeaderboardStore("highscores.json")
    render_leaderboard(store.load())
"""

from play.leaderboard.data import (
    MAX_ENTRIES,
    Leaderboard,
    ScoreRecord,
    rank_scores,
)
from play.leaderboard.store import (
    CorruptStoreError,
    LeaderboardError,
    LeaderboardStore,
    PersistFailedError,
    StoreReadError,
)
from play.leaderboard.display import render_leaderboard

__all__ = [
    "MAX_ENTRIES",
    "Leaderboard",
    "ScoreRecord",
    "rank_scores",
    "LeaderboardStore",
    "LeaderboardError",
    "CorruptStoreError",
    "StoreReadError",
    "PersistFailedError",
    "render_leaderboard",
]
