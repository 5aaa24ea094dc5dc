from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from typing import Optional, List

from models import AnswerFeedback, MatchState, Problem
from problems.base import parse_letter_input
from ui.components import (
    FeedbackPanel,
    ProblemPanel,
    ScoreBoard,
    WelcomeScreen,
    WinnerScreen,
)
from ui.styles import (
    ERROR_RED,
    MUTED_GRAY,
)


class GameUI:
    """Main UI orchestrator for the tug-of-war game."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def show_welcome(
        self,
        players: List[str],
        difficulty_label: str,
        max_rope: int,
        round_seconds: Optional[float] = None,
        match_seconds: Optional[float] = None,
    ) -> None:
        """Display the welcome screen and wait for the players to press Enter."""
        welcome = WelcomeScreen(
            players=players,
            difficulty_label=difficulty_label,
            max_rope=max_rope,
            round_seconds=round_seconds,
            match_seconds=match_seconds,
        )
        self.console.print(welcome)
        self.console.print()
        self.console.input(Text("Press Enter to start...", style=f"bold {MUTED_GRAY}"))

    def show_round(self, state: MatchState) -> None:
        """Display the scoreboard and the current problem."""
        self.console.print(ScoreBoard(state))
        if state.problem is not None and state.current_player is not None:
            self.console.print(
                ProblemPanel(state.problem, state.current_player, state.turn)
            )
        self.console.print()

    def ask_answer(self, problem: Problem) -> str:
        """Get an answer for the problem.

        Returns:
            "quit" if the player quits. Otherwise the typed text for numeric
            problems, or the 1-based choice number for multiple choice.
        """
        if problem.is_multiple_choice:
            return self._get_choice_input(len(problem.choices or ()))
        return self._get_numeric_input()

    def _get_choice_input(self, num_options: int) -> str:
        """Get A/B/C/D choice input from the player."""
        while True:
            user_input = self.console.input(
                Text("Your answer: ", style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return "quit"

            index = parse_letter_input(user_input, num_options)
            if index is not None:
                return str(index + 1)

            self.console.print(
                Text("Please enter A, B, C, or D (or 'q' to quit)\n", style=ERROR_RED)
            )

    def _get_numeric_input(self) -> str:
        """Get a typed answer; empty input is asked again."""
        while True:
            user_input = self.console.input(
                Text("Your answer: ", style=f"bold {MUTED_GRAY}")
            ).strip()

            if user_input.lower() == "q":
                return "quit"

            if user_input:
                return user_input

            self.console.print(
                Text("Please type an answer (or 'q' to quit)\n", style=ERROR_RED)
            )

    def show_feedback(self, feedback: AnswerFeedback) -> None:
        """Display feedback for the resolved round."""
        panel = FeedbackPanel(
            is_correct=feedback.correct,
            correct_answer=feedback.correct_markup,
            user_answer=feedback.submitted,
            timed_out=feedback.timed_out,
        )
        self.console.print(panel)
        self.console.print()

    def show_winner(self, state: MatchState) -> None:
        """Display the end-of-match summary."""
        self.console.print(ScoreBoard(state))
        self.console.print(WinnerScreen(state))

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.console.print(
            Panel(
                Text(f"Error: {message}", style=ERROR_RED),
                title="Error",
                border_style=ERROR_RED,
            )
        )

    def show_quit_message(self) -> None:
        """Display the quit message."""
        self.console.print()
        self.console.print(Text("👋 Goodbye! Thanks for playing.", style=MUTED_GRAY))

    def clear_screen(self) -> None:
        """Clear the terminal screen."""
        self.console.clear()

    def wait_for_continue(self) -> None:
        """Wait for the players to press Enter before the next round."""
        self.console.input(
            Text("Press Enter for the next round...", style=f"bold {MUTED_GRAY}")
        )
