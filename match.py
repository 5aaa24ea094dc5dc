"""Match state machine for the tug-of-war game.

Phases: menu -> playing -> finished. While playing, each round cycles
awaitingAnswer -> feedback -> (next round | finished).

The machine never schedules time. The host calls ``tick`` with elapsed
seconds, calls ``next_round`` after its feedback delay, and listens for
events to drive sound and animation.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from config import DEFAULT_PLAYERS, MAX_ROPE
from countdown import Countdown
from models import (
    AnswerFeedback,
    AnswerResolved,
    FinishReason,
    MatchEvent,
    MatchFinished,
    MatchPhase,
    MatchState,
    Player,
    PlayerStats,
    RoundPhase,
    RoundStarted,
)
from problems.factory import ProblemFactory

logger = logging.getLogger(__name__)

Listener = Callable[[MatchEvent], None]


def pull_direction(player: int) -> int:
    """Rope step in favor of ``player``. Player 0 pulls toward negative."""
    return -1 if player == 0 else 1


def clamp_rope(position: int, max_rope: int) -> int:
    return max(-max_rope, min(max_rope, position))


def rope_winner(position: int, max_rope: int) -> int | None:
    """Return the player the rope has reached, or None if it is inside."""
    if position <= -max_rope:
        return 0
    if position >= max_rope:
        return 1
    return None


def decide_forced_winner(position: int, players: Sequence[Player]) -> int:
    """
    Decide the winner of a match that ends before the rope reaches an extreme.

    The rope side decides. A centered rope goes to the higher score, and
    equal scores go to player 0.
    """
    if position < 0:
        return 0
    if position > 0:
        return 1
    return 0 if players[0].score >= players[1].score else 1


def default_players() -> list[Player]:
    return [Player(**player) for player in DEFAULT_PLAYERS]


class MatchStateMachine:
    """Drives turns, scoring and the rope for a two-player match.

    Every public operation returns a deep copy of the match state, so
    callers can keep snapshots without seeing later changes.
    """

    def __init__(
        self,
        factory: ProblemFactory | None = None,
        listeners: Iterable[Listener] = (),
    ):
        self.factory = factory or ProblemFactory()
        self.listeners: list[Listener] = list(listeners)
        self.state = self._fresh_state()
        self._round_clock: Countdown | None = None
        self._match_clock: Countdown | None = None

    @staticmethod
    def _fresh_state() -> MatchState:
        return MatchState(
            players=default_players(),
            stats=[PlayerStats(), PlayerStats()],
        )

    def subscribe(self, listener: Listener) -> None:
        self.listeners.append(listener)

    def snapshot(self) -> MatchState:
        return self.state.model_copy(deep=True)

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start_match(
        self,
        players: Sequence[Player | str],
        difficulty: int | None = None,
        max_rope: int = MAX_ROPE,
        *,
        round_seconds: float | None = None,
        match_seconds: float | None = None,
    ) -> MatchState:
        """Start a match and draw the first problem.

        Args:
            players: Exactly two players (or names). Scores start at 0.
            difficulty: Difficulty for every round; None draws at random.
            max_rope: Rope extreme that ends the match.
            round_seconds: Per-round countdown, disabled when None.
            match_seconds: Match-wide countdown, disabled when None.
        """
        if len(players) != 2:
            raise ValueError(f"a match needs exactly 2 players, got {len(players)}")
        if max_rope < 1:
            raise ValueError(f"max_rope must be at least 1, got {max_rope}")

        defaults = default_players()
        fresh_players = []
        for index, player in enumerate(players):
            if isinstance(player, str):
                fresh_players.append(
                    Player(name=player, color_id=defaults[index].color_id)
                )
            else:
                fresh_players.append(
                    Player(name=player.name, color_id=player.color_id)
                )

        self._round_clock = Countdown(round_seconds) if round_seconds else None
        self._match_clock = Countdown(match_seconds) if match_seconds else None

        self.state = MatchState(
            phase=MatchPhase.PLAYING,
            players=fresh_players,
            stats=[PlayerStats(), PlayerStats()],
            max_rope=max_rope,
            difficulty=difficulty,
        )
        logger.info(
            "Match started: %s vs %s (difficulty %s, max rope %d)",
            fresh_players[0].name,
            fresh_players[1].name,
            difficulty if difficulty is not None else "mixed",
            max_rope,
        )

        self._begin_round()
        return self.snapshot()

    def submit_answer(self, value: Any) -> MatchState:
        """Submit the current player's answer.

        Numeric problems take the typed text; it is trimmed and compared
        verbatim with the answer string, so "+5" or "05" do not match "5".
        Multiple choice problems take a 0-based choice index.

        Ignored when no problem is pending or the match is over, and for
        empty numeric input or an invalid choice index.
        """
        if not self._awaiting_answer():
            logger.debug("Ignoring answer %r: no problem is pending", value)
            return self.snapshot()

        problem = self.state.problem
        assert problem is not None

        if problem.is_multiple_choice:
            index = self._choice_index(value, len(problem.choices or ()))
            if index is None:
                logger.debug("Ignoring invalid choice %r", value)
                return self.snapshot()
            choice = problem.choices[index]
            self._resolve(choice.correct, submitted=choice.markup)
        else:
            submitted = "" if value is None else str(value).strip()
            if not submitted:
                logger.debug("Ignoring empty numeric answer")
                return self.snapshot()
            self._resolve(submitted == problem.answer, submitted=submitted)

        return self.snapshot()

    def force_timeout(self) -> MatchState:
        """Resolve the current round as if answered incorrectly."""
        if not self._awaiting_answer():
            logger.debug("Ignoring timeout: no problem is pending")
            return self.snapshot()

        self._resolve(False, timed_out=True)
        return self.snapshot()

    def next_round(self) -> MatchState:
        """Pass the turn and draw a new problem after the feedback delay."""
        state = self.state
        if state.phase != MatchPhase.PLAYING or state.round_phase != RoundPhase.FEEDBACK:
            logger.debug("Ignoring next_round in %s/%s", state.phase, state.round_phase)
            return self.snapshot()

        state.turn = 1 - state.turn
        state.round += 1
        self._begin_round()
        return self.snapshot()

    def force_match_end(self, reason: FinishReason = FinishReason.TIMEOUT) -> MatchState:
        """End a running match early, e.g. when the match countdown expires."""
        state = self.state
        if state.phase != MatchPhase.PLAYING:
            logger.debug("Ignoring forced end in phase %s", state.phase)
            return self.snapshot()

        winner = decide_forced_winner(state.rope_position, state.players)
        self._finish(winner, reason)
        return self.snapshot()

    def tick(self, seconds: float = 1) -> MatchState:
        """Deliver elapsed time to the countdowns.

        The match countdown runs for the whole match and takes priority;
        the round countdown only runs while an answer is awaited.
        """
        state = self.state
        if state.phase != MatchPhase.PLAYING:
            return self.snapshot()

        match_expired = self._match_clock is not None and self._match_clock.tick(
            seconds
        )
        round_expired = (
            not match_expired
            and self._round_clock is not None
            and state.round_phase == RoundPhase.AWAITING_ANSWER
            and self._round_clock.tick(seconds)
        )
        self._sync_clocks()

        if match_expired:
            logger.info("Match countdown expired")
            return self.force_match_end(FinishReason.TIMEOUT)
        if round_expired:
            logger.debug("Round %d countdown expired", state.round)
            return self.force_timeout()
        return self.snapshot()

    def reset_match(self) -> MatchState:
        """Discard the match and go back to the menu."""
        self.state = self._fresh_state()
        self._round_clock = None
        self._match_clock = None
        return self.snapshot()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _awaiting_answer(self) -> bool:
        state = self.state
        return (
            state.phase == MatchPhase.PLAYING
            and state.round_phase == RoundPhase.AWAITING_ANSWER
            and state.problem is not None
        )

    @staticmethod
    def _choice_index(value: Any, choice_count: int) -> int | None:
        if isinstance(value, bool) or not isinstance(value, int):
            return None
        if 0 <= value < choice_count:
            return value
        return None

    def _begin_round(self) -> None:
        state = self.state
        state.problem = self.factory.generate_problem(state.difficulty)
        state.round_phase = RoundPhase.AWAITING_ANSWER
        state.feedback = None
        if self._round_clock is not None:
            self._round_clock.reset()
        self._sync_clocks()

        self._emit(RoundStarted(round=state.round, turn=state.turn, problem=state.problem))

    def _resolve(
        self,
        correct: bool,
        submitted: str | None = None,
        timed_out: bool = False,
    ) -> None:
        state = self.state
        player = state.turn
        problem = state.problem
        assert problem is not None

        state.stats[player].record(correct)
        if correct:
            state.players[player].score += 1
            state.streak += 1
            step = pull_direction(player)
        else:
            state.streak = 0
            step = pull_direction(1 - player)

        state.rope_position = clamp_rope(state.rope_position + step, state.max_rope)
        state.round_phase = RoundPhase.FEEDBACK
        state.feedback = AnswerFeedback(
            correct=correct,
            correct_markup=problem.answer_markup,
            submitted=submitted,
            timed_out=timed_out,
        )

        self._emit(
            AnswerResolved(
                player=player,
                correct=correct,
                timed_out=timed_out,
                rope_position=state.rope_position,
                streak=state.streak,
            )
        )

        winner = rope_winner(state.rope_position, state.max_rope)
        if winner is not None:
            self._finish(winner, FinishReason.ROPE)

    def _finish(self, winner: int, reason: FinishReason) -> None:
        state = self.state
        state.winner = winner
        state.finish_reason = reason
        state.phase = MatchPhase.FINISHED
        logger.info(
            "Match finished after %d rounds: %s wins (%s)",
            state.round,
            state.players[winner].name,
            reason.value,
        )

        self._emit(
            MatchFinished(
                winner=winner,
                reason=reason,
                players=[p.model_copy() for p in state.players],
                stats=[s.model_copy() for s in state.stats],
                rope_position=state.rope_position,
                rounds=state.round,
            )
        )

    def _sync_clocks(self) -> None:
        state = self.state
        state.round_time_left = self._round_clock.remaining if self._round_clock else None
        state.match_time_left = self._match_clock.remaining if self._match_clock else None

    def _emit(self, event: MatchEvent) -> None:
        for listener in list(self.listeners):
            listener(event)
