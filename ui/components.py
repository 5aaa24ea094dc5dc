from rich import box
from rich.align import Align
from rich.columns import Columns
from rich.console import Group
from rich.panel import Panel
from rich.style import Style
from rich.table import Table
from rich.text import Text
from typing import Optional, List

from models import FinishReason, MatchState, Player, PlayerStats, Problem
from ui.mathtext import to_plain
from ui.styles import (
    ERROR_RED,
    INFO_BLUE,
    MUTED_GRAY,
    ROPE_GOLD,
    SUCCESS_GREEN,
    TEAM_VIOLET,
    TEXT_WHITE,
    create_welcome_banner,
    get_accuracy_style,
    get_player_color,
    get_player_style,
)


class RopeBar:
    """The rope drawn as a track with a knot at the current position."""

    def __init__(self, rope_position: int, max_rope: int, players: List[Player]):
        self.rope_position = rope_position
        self.max_rope = max_rope
        self.players = players

    def render(self) -> Text:
        left, right = self.players
        content = Text()
        content.append(f"{left.name} ", get_player_style(left.color_id, 0))
        content.append("◀ ", Style(color=MUTED_GRAY))

        for cell in range(-self.max_rope, self.max_rope + 1):
            if cell == self.rope_position:
                content.append("●", Style(color=ROPE_GOLD, bold=True))
            elif cell == 0:
                content.append("┃", Style(color=MUTED_GRAY))
            else:
                content.append("─", Style(color=ROPE_GOLD))
            if cell < self.max_rope:
                content.append(" ")

        content.append(" ▶", Style(color=MUTED_GRAY))
        content.append(f" {right.name}", get_player_style(right.color_id, 1))
        return content

    def __rich__(self) -> Text:
        return self.render()


class ScoreBoard:
    """Scores, turn, round and timers above the rope."""

    def __init__(self, state: MatchState):
        self.state = state

    def render(self) -> Panel:
        state = self.state

        scores = Table(show_header=False, box=None, padding=(0, 2))
        scores.add_column("Player")
        scores.add_column("Score", justify="right")
        for index, player in enumerate(state.players):
            marker = "▸ " if index == state.turn and not state.is_finished else "  "
            scores.add_row(
                Text(f"{marker}{player.name}", get_player_style(player.color_id, index)),
                Text(str(player.score), Style(color=TEXT_WHITE, bold=True)),
            )

        info = Text()
        info.append(f"Round {state.round}", Style(color=MUTED_GRAY))
        if state.streak >= 2:
            info.append(f"   Streak ×{state.streak}", Style(color=ROPE_GOLD, bold=True))
        if state.round_time_left is not None:
            info.append(
                f"   Round timer {state.round_time_left:.0f}s", Style(color=INFO_BLUE)
            )
        if state.match_time_left is not None:
            minutes, seconds = divmod(int(state.match_time_left), 60)
            info.append(
                f"   Match {minutes}:{seconds:02d}", Style(color=INFO_BLUE)
            )

        return Panel(
            Group(
                Align.center(scores),
                Text(),
                Align.center(RopeBar(state.rope_position, state.max_rope, state.players)),
                Text(),
                Align.center(info),
            ),
            title="Tug of Math",
            border_style=TEAM_VIOLET,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class ProblemPanel:
    """A styled panel for displaying the current problem."""

    def __init__(self, problem: Problem, player: Player, player_index: int = 0):
        self.problem = problem
        self.player = player
        self.player_index = player_index

    def render(self) -> Panel:
        problem = self.problem
        content = Text()

        content.append(
            f"{problem.category} · level {problem.difficulty}\n",
            Style(color=MUTED_GRAY),
        )
        if problem.prompt:
            content.append(f"{problem.prompt}\n", Style(color=TEXT_WHITE))
        content.append("\n")
        content.append(to_plain(problem.expression), Style(color=TEXT_WHITE, bold=True))
        content.append("\n")

        if problem.choices:
            content.append("\n")
            for i, choice in enumerate(problem.choices):
                content.append(f"{chr(65 + i)}. ", Style(color=ROPE_GOLD, bold=True))
                content.append(to_plain(choice.markup), Style(color=TEXT_WHITE))
                content.append("\n")
            subtitle = "Type A, B, C, or D (or 'q' to quit)"
        else:
            subtitle = "Type your answer (or 'q' to quit)"

        color = get_player_color(self.player.color_id, self.player_index)
        return Panel(
            Align.left(content),
            title=f"{self.player.name}'s turn",
            subtitle=subtitle,
            border_style=color,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class FeedbackPanel:
    """A styled panel for displaying answer feedback."""

    def __init__(
        self,
        is_correct: bool,
        correct_answer: str,
        user_answer: Optional[str] = None,
        timed_out: bool = False,
    ):
        self.is_correct = is_correct
        self.correct_answer = correct_answer
        self.user_answer = user_answer
        self.timed_out = timed_out

    def render(self) -> Panel:
        content = Text()

        if self.is_correct:
            content.append("✓ ", Style(color=SUCCESS_GREEN, bold=True))
            content.append("Correct!\n", Style(color=SUCCESS_GREEN, bold=True))
        elif self.timed_out:
            content.append("⏱ ", Style(color=ERROR_RED, bold=True))
            content.append("Time's up!\n", Style(color=ERROR_RED, bold=True))
        else:
            content.append("✗ ", Style(color=ERROR_RED, bold=True))
            content.append("Not quite!\n", Style(color=ERROR_RED, bold=True))
            if self.user_answer:
                content.append(
                    f"You answered: {to_plain(self.user_answer)}\n",
                    Style(color=MUTED_GRAY),
                )

        content.append("\n")
        content.append("Correct answer: ", Style(color=MUTED_GRAY))
        content.append(
            to_plain(self.correct_answer), Style(color=SUCCESS_GREEN, bold=True)
        )

        return Panel(
            Align.left(content),
            title="Result",
            border_style=SUCCESS_GREEN if self.is_correct else ERROR_RED,
            box=box.HEAVY,
            padding=(1, 2),
        )

    def __rich__(self) -> Panel:
        return self.render()


class WelcomeScreen:
    """Welcome screen with banner and match settings."""

    def __init__(
        self,
        players: List[str],
        difficulty_label: str,
        max_rope: int,
        round_seconds: Optional[float] = None,
        match_seconds: Optional[float] = None,
    ):
        self.players = players
        self.difficulty_label = difficulty_label
        self.max_rope = max_rope
        self.round_seconds = round_seconds
        self.match_seconds = match_seconds

    def render(self) -> Panel:
        banner = create_welcome_banner()
        banner.append("\n\n")
        banner.append(
            "Take turns answering. A right answer pulls the rope your way,\n"
            "a wrong one gives your opponent a step.\n\n",
            Style(color=TEXT_WHITE),
        )
        banner.append("Type 'q' at any time to quit.\n", Style(color=MUTED_GRAY))

        settings = Table(show_header=False, border_style=MUTED_GRAY, box=box.ROUNDED)
        settings.add_column("Label", justify="center")
        settings.add_column("Value", justify="center")

        value_style = Style(color=ROPE_GOLD, bold=True)
        settings.add_row(
            Text("Players", style=Style(color=MUTED_GRAY)),
            Text(" vs ".join(self.players), style=value_style),
        )
        settings.add_row(
            Text("Level", style=Style(color=MUTED_GRAY)),
            Text(self.difficulty_label, style=value_style),
        )
        settings.add_row(
            Text("Rope length", style=Style(color=MUTED_GRAY)),
            Text(str(self.max_rope), style=value_style),
        )
        settings.add_row(
            Text("Round timer", style=Style(color=MUTED_GRAY)),
            Text(
                f"{self.round_seconds:.0f}s" if self.round_seconds else "off",
                style=value_style,
            ),
        )
        settings.add_row(
            Text("Match timer", style=Style(color=MUTED_GRAY)),
            Text(
                f"{self.match_seconds:.0f}s" if self.match_seconds else "off",
                style=value_style,
            ),
        )

        return Panel(
            Columns(
                [Align.center(banner), Align.center(settings)],
                align="center",
                padding=(3, 3),
            ),
            border_style=TEAM_VIOLET,
            box=box.HEAVY,
            padding=(2, 3),
        )

    def __rich__(self) -> Panel:
        return self.render()


class WinnerScreen:
    """End-of-match summary with per-player statistics."""

    REASON_TEXT = {
        FinishReason.ROPE: "pulled the rope all the way!",
        FinishReason.TIMEOUT: "was ahead when time ran out!",
        FinishReason.FORCED: "was ahead when the match ended!",
    }

    def __init__(self, state: MatchState):
        self.state = state

    def render(self) -> Panel:
        state = self.state
        winner = state.players[state.winner] if state.winner is not None else None

        content = Text()
        if winner is not None:
            content.append("🏆 ", Style(color=ROPE_GOLD))
            content.append(winner.name, get_player_style(winner.color_id, state.winner))
            reason = self.REASON_TEXT.get(state.finish_reason, "wins!")
            content.append(f" {reason}\n", Style(color=TEXT_WHITE, bold=True))
        content.append(f"Rounds played: {state.round}", Style(color=MUTED_GRAY))

        stats = Table(
            show_header=True,
            header_style=Style(color=TEAM_VIOLET, bold=True),
            border_style=MUTED_GRAY,
            box=box.SIMPLE,
        )
        stats.add_column("Player")
        stats.add_column("Score", justify="right")
        stats.add_column("Correct", justify="right")
        stats.add_column("Wrong", justify="right")
        stats.add_column("Accuracy", justify="right")
        stats.add_column("Best streak", justify="right")

        for index, (player, player_stats) in enumerate(zip(state.players, state.stats)):
            stats.add_row(
                Text(player.name, get_player_style(player.color_id, index)),
                str(player.score),
                Text(str(player_stats.correct), style=Style(color=SUCCESS_GREEN)),
                Text(str(player_stats.wrong), style=Style(color=ERROR_RED)),
                self._accuracy_text(player_stats),
                str(player_stats.max_streak),
            )

        return Panel(
            Group(Align.center(content), Text(), Align.center(stats)),
            title="Match Over",
            border_style=ROPE_GOLD,
            box=box.HEAVY,
            padding=(1, 3),
        )

    @staticmethod
    def _accuracy_text(stats: PlayerStats) -> Text:
        if stats.answered == 0:
            return Text("-", style=Style(color=MUTED_GRAY))
        return Text(f"{stats.accuracy:.0%}", style=get_accuracy_style(stats.accuracy))

    def __rich__(self) -> Panel:
        return self.render()
