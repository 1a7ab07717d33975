"""
Rich terminal display for the high-score leaderboard.
"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich import box

from play.leaderboard.data import Leaderboard, ScoreRecord

DATE_FORMAT = "%Y-%m-%d %H:%M"


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def _rank_badge(rank: int) -> str:
    if rank == 1:
        return "[bold gold1]#1[/]"
    if rank == 2:
        return "[bold bright_white]#2[/]"
    if rank == 3:
        return "[bold orange1]#3[/]"
    return f"[dim]#{rank}[/]"


def _difficulty_label(entry: ScoreRecord) -> str:
    return f"{entry.difficulty.name.title()} ({entry.difficulty.bound})"


def format_seconds(seconds: float) -> str:
    return f"{seconds:.2f}s"


def format_date(entry: ScoreRecord) -> str:
    return entry.recorded_at.strftime(DATE_FORMAT)


# ---------------------------------------------------------------------------
# Renderers
# ---------------------------------------------------------------------------


def build_table(
    leaderboard: Leaderboard,
    highlight: Optional[ScoreRecord] = None,
) -> Table:
    """Build the high-score table; *highlight* marks the player's new entry."""
    table = Table(
        box=box.ROUNDED,
        show_header=True,
        header_style="bold dim",
        title="[bold]High Scores[/]",
    )
    table.add_column("Rank", width=4, justify="right")
    table.add_column("Attempts", width=8, justify="right")
    table.add_column("Time", width=9, justify="right")
    table.add_column("Difficulty", width=12)
    table.add_column("Date", width=16, style="dim")

    for rank, entry in leaderboard.ranked():
        table.add_row(
            _rank_badge(rank),
            str(entry.attempts),
            format_seconds(entry.elapsed_seconds),
            _difficulty_label(entry),
            format_date(entry),
            style="bold green" if entry is highlight else None,
        )

    return table


def render_leaderboard(
    leaderboard: Leaderboard,
    console: Optional[Console] = None,
    highlight: Optional[ScoreRecord] = None,
) -> None:
    """Render the leaderboard to the terminal."""
    if console is None:
        console = Console()

    if leaderboard.is_empty:
        console.print("[dim]No high scores yet![/]")
        return

    console.print()
    console.print(build_table(leaderboard, highlight=highlight))
    console.print()
