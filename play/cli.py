#!/usr/bin/env python3
"""
Command-line interface for the number guessing game.

Usage:
    guessing-game play
    guessing-game play --difficulty hard --leaderboard ~/.guess/highscores.json
    guessing-game play --config play.yaml --verbose
    guessing-game scores
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.text import Text

from core.action_parser import InputParseError, InputParser, is_quit
from games.number_guess.action_parser import DifficultyParser, PlayAgainParser
from games.number_guess.game import Outcome, Round
from games.number_guess.tiers import MENU_CHOICES, DifficultyTier, tier_from_name
from play.config import PlayConfig, load_config
from play.leaderboard.display import render_leaderboard
from play.leaderboard.store import LeaderboardError
from play.session import GameSession

ReadFn = Callable[[str], str]

_OUTCOME_STYLES = {
    Outcome.INVALID_FORMAT: "yellow",
    Outcome.OUT_OF_RANGE: "yellow",
    Outcome.TOO_LOW: "cyan",
    Outcome.TOO_HIGH: "magenta",
    Outcome.CORRECT: "bold green",
}


class ConsoleDriver:
    """
    Terminal front end: menus, the guess loop and leaderboard rendering.

    All reads go through *read* so the driver can be scripted in tests.
    Quit commands and end of input end the session by returning, never by
    exiting the process.
    """

    def __init__(
        self,
        session: GameSession,
        console: Optional[Console] = None,
        read: Optional[ReadFn] = None,
        difficulty: Optional[DifficultyTier] = None,
    ):
        self.session = session
        self.console = console or Console()
        self._read = read or self.console.input
        self.difficulty = difficulty
        self._difficulty_parser = DifficultyParser()
        self._play_again_parser = PlayAgainParser()

    def run(self) -> int:
        """Play rounds until the player quits or declines another round."""
        self._header()
        self.show_scores()

        while True:
            tier = self.difficulty or self.choose_difficulty()
            if tier is None:
                break

            round = self.play_round(tier)
            if round is None:
                break

            self._report_win(round)

            if not self.ask_play_again():
                break

        self.console.print("Goodbye!")
        return 0

    # ── prompts ───────────────────────────────────────────────────────────────

    def _prompt(self, text: str) -> Optional[str]:
        """Read one line; None on end of input."""
        try:
            return self._read(text)
        except EOFError:
            return None

    def _ask(self, text: str, parser: InputParser):
        """Re-prompt until *parser* accepts; None on quit or end of input."""
        while True:
            answer = self._prompt(text)
            if answer is None or is_quit(answer):
                return None
            try:
                return parser.parse(answer)
            except InputParseError as e:
                self.console.print(f"[yellow]{escape(str(e))}[/]")

    def choose_difficulty(self) -> Optional[DifficultyTier]:
        self.console.print("Choose a difficulty level:")
        for key, tier in MENU_CHOICES.items():
            self.console.print(f"{key}. {tier.label}")
        return self._ask("> ", self._difficulty_parser)

    def ask_play_again(self) -> bool:
        answer = self._ask("\nWould you like to play again? (y/n): ", self._play_again_parser)
        return bool(answer)

    # ── round loop ────────────────────────────────────────────────────────────

    def play_round(self, tier: DifficultyTier) -> Optional[Round]:
        """Run one round; returns the won round, or None if abandoned."""
        round = self.session.start_round(tier)
        self.console.print(
            f"\nGuess a number between 1 and {tier.bound}! "
            "[dim](type 'q' to quit)[/]"
        )

        while not round.won:
            text = self._prompt(f"Attempt #{round.attempts + 1}: ")
            if text is None or is_quit(text):
                return None

            outcome = self.session.submit_guess(round, text)
            style = _OUTCOME_STYLES[outcome.kind]
            self.console.print(f"[{style}]{escape(outcome.message)}[/]")

        return round

    def _report_win(self, round: Round) -> None:
        report = self.session.record_win(round)
        if report.warning:
            self.console.print(f"[bold red]Warning:[/] {escape(report.warning)}")
        if report.leaderboard is None:
            return
        if report.rank is not None:
            self.console.print(f"[bold green]New high score! Rank #{report.rank}[/]")
        render_leaderboard(report.leaderboard, self.console, highlight=report.record)

    def show_scores(self) -> bool:
        """Render the stored leaderboard; False if it is unavailable."""
        try:
            leaderboard = self.session.current_leaderboard()
        except LeaderboardError as e:
            self.console.print(f"[bold red]Leaderboard unavailable:[/] {escape(str(e))}")
            return False
        render_leaderboard(leaderboard, self.console)
        return True

    def _header(self) -> None:
        self.console.print(Panel(
            Text("Number Guessing Game", style="bold bright_white"),
            border_style="cyan",
            expand=False,
            padding=(0, 2),
        ))


def build_config(args) -> PlayConfig:
    """Config file (if any) overridden by command-line flags."""
    config = load_config(args.config) if args.config else PlayConfig()
    return config.merged(
        leaderboard_path=args.leaderboard,
        difficulty=getattr(args, "difficulty", None),
        seed=getattr(args, "seed", None),
        verbose=True if args.verbose else None,
    )


def setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def cmd_play(args, console: Optional[Console] = None, read: Optional[ReadFn] = None) -> int:
    """Play rounds."""
    config = build_config(args)
    setup_logging(config.verbose)
    session = GameSession.from_config(config)
    difficulty = tier_from_name(config.difficulty) if config.difficulty else None
    driver = ConsoleDriver(session, console=console, read=read, difficulty=difficulty)
    return driver.run()


def cmd_scores(args, console: Optional[Console] = None) -> int:
    """Show the leaderboard."""
    config = build_config(args)
    setup_logging(config.verbose)
    driver = ConsoleDriver(GameSession.from_config(config), console=console)
    return 0 if driver.show_scores() else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Number guessing game with a persistent top-5 leaderboard"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--config", "-c", help="Config file (YAML or JSON)")
    common.add_argument("--leaderboard", "-l", help="Leaderboard file (default: highscores.json)")
    common.add_argument("--verbose", "-v", action="store_true")

    # Play command
    play_parser = subparsers.add_parser("play", parents=[common], help="Play the game")
    play_parser.add_argument(
        "--difficulty", "-d",
        choices=["easy", "medium", "hard"],
        help="Skip the difficulty menu",
    )
    play_parser.add_argument("--seed", type=int, help="Random seed")

    # Scores command
    subparsers.add_parser("scores", parents=[common], help="Show high scores")

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    # No subcommand means play
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in ("play", "scores", "-h", "--help"):
        argv.insert(0, "play")
    args = parser.parse_args(argv)

    if args.command == "scores":
        return cmd_scores(args)
    return cmd_play(args)


if __name__ == "__main__":
    sys.exit(main())
