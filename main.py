import argparse
import logging
import random
import signal
import sys
import time
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from config import (
    DEFAULT_DIFFICULTY,
    DEFAULT_MATCH_SECONDS,
    DEFAULT_PLAYERS,
    DEFAULT_ROUND_SECONDS,
    MAX_ROPE,
    MatchConfig,
)
from match import MatchStateMachine
from models import MatchState, RoundPhase
from problems import ProblemFactory, get_difficulty_label, get_max_difficulty
from problems.base import parse_letter_input
from simulate import DEFAULT_MAX_ROUNDS
from ui import DEFAULT_THEME, GameUI


def configure_logging(verbose: bool, console: Console | None = None) -> None:
    """Route log records through rich so they do not break the layout."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(description="Tug of Math")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    levels = range(1, get_max_difficulty() + 1)

    parser.add_argument(
        "--difficulty",
        "-d",
        type=int,
        choices=levels,
        default=DEFAULT_DIFFICULTY,
        help=f"Problem level 1-{get_max_difficulty()} (default: {DEFAULT_DIFFICULTY})",
    )
    parser.add_argument(
        "--mixed",
        action="store_true",
        help="Draw every problem from a random level",
    )
    parser.add_argument(
        "--players",
        "-p",
        nargs=2,
        metavar=("PLAYER1", "PLAYER2"),
        default=[p["name"] for p in DEFAULT_PLAYERS],
        help="Player names",
    )
    parser.add_argument(
        "--max-rope",
        type=int,
        default=MAX_ROPE,
        help=f"Steps from the center to win (default: {MAX_ROPE})",
    )
    parser.add_argument(
        "--round-seconds",
        type=float,
        default=None,
        metavar="SECONDS",
        help=f"Per-round timer, off unless given (e.g. {DEFAULT_ROUND_SECONDS})",
    )
    parser.add_argument(
        "--match-seconds",
        type=float,
        default=None,
        metavar="SECONDS",
        help=f"Match timer, off unless given (e.g. {DEFAULT_MATCH_SECONDS})",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible problems",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    # Simulate subcommand
    sim_parser = subparsers.add_parser("simulate", help="Run bot-vs-bot matches")
    sim_parser.add_argument(
        "--matches",
        "-m",
        type=int,
        default=100,
        help="Number of matches to simulate (default: 100)",
    )
    sim_parser.add_argument(
        "--accuracy",
        "-a",
        type=float,
        nargs=2,
        default=[0.7, 0.7],
        metavar=("P1", "P2"),
        help="Answer accuracy 0.0-1.0 per player (default: 0.7 0.7)",
    )
    sim_parser.add_argument(
        "--timeout-rate",
        "-t",
        type=float,
        nargs=2,
        default=[0.0, 0.0],
        metavar=("P1", "P2"),
        help="Timeout probability 0.0-1.0 per player (default: 0 0)",
    )
    sim_parser.add_argument(
        "--max-rounds",
        type=int,
        default=DEFAULT_MAX_ROUNDS,
        help=f"Rounds before a match is ended (default: {DEFAULT_MAX_ROUNDS})",
    )
    sim_parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Output JSON file path",
    )

    return parser


def build_config(args) -> MatchConfig:
    return MatchConfig(
        difficulty=None if args.mixed else args.difficulty,
        max_rope=args.max_rope,
        round_seconds=args.round_seconds,
        match_seconds=args.match_seconds,
    )


def handle_quit(ui: GameUI) -> None:
    """Print quit message and exit."""
    ui.show_quit_message()
    sys.exit(0)


def create_sigint_handler(ui: GameUI):
    """Create a SIGINT handler that exits with a goodbye message."""

    def sigint_handler(signum, frame):
        handle_quit(ui)

    return sigint_handler


def run_simulation(args, console: Console) -> None:
    """Run the simulation subcommand."""
    from simulate import run_simulation_and_report
    from simulator_models import SimulatedPlayerConfig

    try:
        config = build_config(args)
        players = [
            SimulatedPlayerConfig(name=name, accuracy=accuracy, timeout_rate=timeout)
            for name, accuracy, timeout in zip(
                args.players, args.accuracy, args.timeout_rate
            )
        ]
    except ValidationError as e:
        GameUI(console).show_error(str(e))
        return

    console.print("=" * 40, style="bold magenta")
    console.print("    Match Simulator", style="bold magenta")
    console.print("=" * 40, style="bold magenta")
    console.print()
    console.print(
        f"Simulating {args.matches} matches at level "
        f"{get_difficulty_label(config.difficulty)}..."
    )
    if args.seed is not None:
        console.print(f"Random seed: {args.seed}")
    console.print()

    run_simulation_and_report(
        players=players,
        matches=args.matches,
        difficulty=config.difficulty,
        max_rope=config.max_rope,
        max_rounds=args.max_rounds,
        output_path=Path(args.output) if args.output else None,
        seed=args.seed,
        console=console,
    )


def run_interactive(
    config: MatchConfig,
    player_names: list[str],
    factory: ProblemFactory | None = None,
    console: Console | None = None,
) -> MatchState | None:
    """Run an interactive match in the terminal.

    The time each answer takes is forwarded to the match as a tick, so an
    answer slower than the round timer counts as a timeout.

    Returns the final match state, or None if the players quit.
    """
    console = console or Console(theme=DEFAULT_THEME)
    ui = GameUI(console)

    ui.clear_screen()
    signal.signal(signal.SIGINT, create_sigint_handler(ui))

    machine = MatchStateMachine(factory or ProblemFactory())

    ui.show_welcome(
        players=player_names,
        difficulty_label=get_difficulty_label(config.difficulty),
        max_rope=config.max_rope,
        round_seconds=config.round_seconds,
        match_seconds=config.match_seconds,
    )

    state = machine.start_match(
        player_names,
        difficulty=config.difficulty,
        max_rope=config.max_rope,
        round_seconds=config.round_seconds,
        match_seconds=config.match_seconds,
    )

    while not state.is_finished:
        ui.clear_screen()
        ui.show_round(state)

        problem = state.problem
        assert problem is not None

        started = time.monotonic()
        user_input = ui.ask_answer(problem)
        if user_input == "quit":
            ui.show_quit_message()
            return None

        state = machine.tick(time.monotonic() - started)
        if not state.is_finished and state.round_phase == RoundPhase.AWAITING_ANSWER:
            if problem.is_multiple_choice:
                state = machine.submit_answer(parse_letter_input(user_input))
            else:
                state = machine.submit_answer(user_input)

        if state.feedback is not None:
            ui.show_feedback(state.feedback)

        if state.is_finished:
            break

        ui.wait_for_continue()
        state = machine.next_round()

    ui.show_winner(state)
    return state


def main():
    """Main entry point with CLI routing."""
    parser = create_parser()
    args = parser.parse_args()

    console = Console(theme=DEFAULT_THEME)
    configure_logging(args.verbose, console)

    if args.command == "simulate":
        run_simulation(args, console)
        return

    if args.seed is not None:
        factory = ProblemFactory(random.Random(args.seed))
    else:
        factory = ProblemFactory()

    # Default to interactive mode
    try:
        config = build_config(args)
    except ValidationError as e:
        GameUI(console).show_error(str(e))
        return

    run_interactive(config, args.players, factory=factory, console=console)


if __name__ == "__main__":
    main()
