"""Core simulation logic for bot-vs-bot matches."""

import json
import logging
import random
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.table import Table

from config import MAX_ROPE
from match import MatchStateMachine
from models import FinishReason, MatchEvent, MatchFinished, Player, Problem, RoundStarted
from problems.catalogue import get_difficulty_label
from problems.factory import ProblemFactory
from simulator_models import (
    DifficultySummary,
    MatchResult,
    SimulatedPlayerConfig,
    SimulationResults,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ROUNDS = 200  # Evenly matched players can pull back and forth forever


class ResponseGenerator:
    """Generates simulated answers for a player."""

    def __init__(self, config: SimulatedPlayerConfig, rng: random.Random):
        self.config = config
        self.rng = rng

    def times_out(self) -> bool:
        return self.rng.random() < self.config.timeout_rate

    def generate_response(self, problem: Problem) -> int | str:
        """
        Produce the value to submit for a problem.

        Correct with probability ``accuracy``. A wrong numeric answer is the
        correct value shifted by a small nonzero offset; a wrong choice is a
        random incorrect slot.
        """
        correct = self.rng.random() < self.config.accuracy

        if problem.is_multiple_choice:
            assert problem.choices is not None
            if correct:
                return problem.correct_index
            wrong = [i for i, c in enumerate(problem.choices) if not c.correct]
            return self.rng.choice(wrong)

        if correct:
            return problem.answer
        return str(int(problem.answer) + self.rng.choice([-2, -1, 1, 2]))


class Simulator:
    """Plays matches between two simulated players."""

    def __init__(
        self,
        players: list[SimulatedPlayerConfig],
        difficulty: int | None = None,
        max_rope: int = MAX_ROPE,
        max_rounds: int = DEFAULT_MAX_ROUNDS,
        rng: random.Random | None = None,
    ):
        if len(players) != 2:
            raise ValueError(f"simulation needs exactly 2 players, got {len(players)}")

        self.players = players
        self.difficulty = difficulty
        self.max_rope = max_rope
        self.max_rounds = max_rounds
        self.rng = rng or random.Random()

        self.machine = MatchStateMachine(ProblemFactory(self.rng))
        self.machine.subscribe(self._on_event)
        self.responders = [ResponseGenerator(p, self.rng) for p in players]

        # Results tracking
        self.match_results: list[MatchResult] = []
        self.by_difficulty: dict[int, DifficultySummary] = {}
        self._current_problem: Problem | None = None
        self._finished: MatchFinished | None = None

    def _on_event(self, event: MatchEvent) -> None:
        if isinstance(event, RoundStarted):
            self._current_problem = event.problem
        elif isinstance(event, MatchFinished):
            self._finished = event

    def run(self, matches: int) -> SimulationResults:
        """Run ``matches`` matches and compile the results."""
        start_time = datetime.now()

        for match_number in range(1, matches + 1):
            self.match_results.append(self._simulate_match(match_number))

        end_time = datetime.now()
        return self._compile_results(start_time, end_time)

    def _simulate_match(self, match_number: int) -> MatchResult:
        self._finished = None
        self.machine.start_match(
            [Player(name=p.name) for p in self.players],
            difficulty=self.difficulty,
            max_rope=self.max_rope,
        )

        while self._finished is None:
            state = self.machine.state
            if state.round > self.max_rounds:
                self.machine.force_match_end(FinishReason.FORCED)
                break

            problem = self._current_problem
            assert problem is not None
            responder = self.responders[state.turn]

            if responder.times_out():
                state = self.machine.force_timeout()
            else:
                state = self.machine.submit_answer(responder.generate_response(problem))

            assert state.feedback is not None
            self._record_answer(problem, state.feedback.correct)
            self.machine.next_round()

        finished = self._finished
        assert finished is not None
        logger.debug(
            "Match %d: %s won after %d rounds",
            match_number,
            finished.players[finished.winner].name,
            finished.rounds,
        )

        return MatchResult(
            match_number=match_number,
            winner=finished.winner,
            reason=finished.reason,
            rounds=finished.rounds,
            rope_position=finished.rope_position,
            scores=[p.score for p in finished.players],
            stats=finished.stats,
        )

    def _record_answer(self, problem: Problem, correct: bool) -> None:
        summary = self.by_difficulty.get(problem.difficulty)
        if summary is None:
            summary = DifficultySummary(
                difficulty=problem.difficulty,
                label=get_difficulty_label(problem.difficulty),
            )
            self.by_difficulty[problem.difficulty] = summary

        summary.answered += 1
        if correct:
            summary.correct += 1

    def _compile_results(
        self, start_time: datetime, end_time: datetime
    ) -> SimulationResults:
        """Compile all results into final output."""
        wins = [0, 0]
        finish_reasons: dict[str, int] = {}
        for result in self.match_results:
            wins[result.winner] += 1
            finish_reasons[result.reason.value] = (
                finish_reasons.get(result.reason.value, 0) + 1
            )

        total_rounds = sum(r.rounds for r in self.match_results)

        return SimulationResults(
            players=self.players,
            difficulty=self.difficulty,
            max_rope=self.max_rope,
            max_rounds=self.max_rounds,
            random_seed=None,  # Will be set by caller if applicable
            start_time=start_time,
            end_time=end_time,
            matches=self.match_results,
            wins=wins,
            finish_reasons=finish_reasons,
            average_rounds=total_rounds / len(self.match_results)
            if self.match_results
            else 0.0,
            by_difficulty=dict(sorted(self.by_difficulty.items())),
        )


def print_console_summary(results: SimulationResults, console: Console) -> None:
    """Print formatted console summary of simulation results."""
    matches = len(results.matches)

    table = Table(title="Simulation Complete")
    table.add_column("Player", style="cyan")
    table.add_column("Accuracy", justify="right")
    table.add_column("Timeouts", justify="right")
    table.add_column("Wins", justify="right", style="green")
    table.add_column("Win rate", justify="right")

    for index, player in enumerate(results.players):
        wins = results.wins[index]
        table.add_row(
            player.name,
            f"{player.accuracy:.0%}",
            f"{player.timeout_rate:.0%}",
            str(wins),
            f"{wins / matches:.1%}" if matches else "-",
        )
    console.print(table)

    console.print(f"Matches played:  {matches}")
    console.print(f"Average rounds:  {results.average_rounds:.1f}")
    for reason, count in sorted(results.finish_reasons.items()):
        console.print(f"Finished by {reason}: {count}")
    console.print()

    breakdown = Table(title="By difficulty")
    breakdown.add_column("Level", justify="right")
    breakdown.add_column("Template")
    breakdown.add_column("Answered", justify="right")
    breakdown.add_column("Correct", justify="right")
    breakdown.add_column("Accuracy", justify="right")

    for summary in results.by_difficulty.values():
        breakdown.add_row(
            str(summary.difficulty),
            summary.label,
            str(summary.answered),
            str(summary.correct),
            f"{summary.accuracy:.1%}",
        )
    console.print(breakdown)


def save_json_results(results: SimulationResults, output_path: Path) -> None:
    """Save simulation results to JSON file."""
    data = json.loads(results.model_dump_json())

    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)


def run_simulation_and_report(
    players: list[SimulatedPlayerConfig],
    matches: int,
    difficulty: int | None = None,
    max_rope: int = MAX_ROPE,
    max_rounds: int = DEFAULT_MAX_ROUNDS,
    output_path: Path | None = None,
    seed: int | None = None,
    console: Console | None = None,
) -> SimulationResults:
    """Run simulation and generate all outputs."""
    console = console or Console()
    rng = random.Random(seed)

    simulator = Simulator(
        players,
        difficulty=difficulty,
        max_rope=max_rope,
        max_rounds=max_rounds,
        rng=rng,
    )
    results = simulator.run(matches)
    results.random_seed = seed

    print_console_summary(results, console)

    if output_path is not None:
        save_json_results(results, output_path)
        console.print(f"Results saved to: {output_path}")

    return results
