"""Shared pytest fixtures for the Tug of Math test suite."""

import random
import pytest

import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from models import Choice, InputType, Player, Problem, TemplateKind
from problems.factory import ProblemFactory
from simulator_models import SimulatedPlayerConfig


class ScriptedFactory(ProblemFactory):
    """Factory that hands out the same problem every round."""

    def __init__(self, problem: Problem):
        super().__init__(random.Random(0))
        self.problem = problem
        self.calls: list[int | None] = []

    def generate_problem(self, difficulty=None, rng=None) -> Problem:
        self.calls.append(difficulty)
        return self.problem


@pytest.fixture
def rng() -> random.Random:
    """Create a seeded random source."""
    return random.Random(1234)


@pytest.fixture
def players() -> list[Player]:
    """Create the two default-colored players."""
    return [
        Player(name="Ana", color_id="violet"),
        Player(name="Ben", color_id="pink"),
    ]


@pytest.fixture
def numeric_problem() -> Problem:
    """Create a numeric problem whose answer is '4'."""
    return Problem(
        kind=TemplateKind.ARITHMETIC,
        category="Arithmetic",
        label="Basic Arithmetic",
        expression="2 + 2",
        input_type=InputType.NUMERIC,
        answer="4",
        answer_markup="4",
        difficulty=1,
    )


@pytest.fixture
def choice_problem() -> Problem:
    """Create a multiple choice problem with the correct answer at index 2."""
    return Problem(
        kind=TemplateKind.MONOMIAL_ADD_SUB,
        category="Monomials",
        label="Monomial Addition/Subtraction",
        expression="3x + 2x",
        input_type=InputType.MULTIPLE_CHOICE,
        answer="5x",
        answer_markup="5x",
        difficulty=3,
        choices=(
            Choice(markup="6x"),
            Choice(markup="5x^{2}"),
            Choice(markup="5x", correct=True),
            Choice(markup="8x"),
        ),
    )


@pytest.fixture
def numeric_factory(numeric_problem) -> ScriptedFactory:
    return ScriptedFactory(numeric_problem)


@pytest.fixture
def choice_factory(choice_problem) -> ScriptedFactory:
    return ScriptedFactory(choice_problem)


@pytest.fixture
def perfect_player_config() -> SimulatedPlayerConfig:
    """Create a simulated player who always answers correctly."""
    return SimulatedPlayerConfig(name="Perfect", accuracy=1.0)


@pytest.fixture
def hopeless_player_config() -> SimulatedPlayerConfig:
    """Create a simulated player who never answers correctly."""
    return SimulatedPlayerConfig(name="Hopeless", accuracy=0.0)
