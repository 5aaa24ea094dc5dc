"""Abstract base class and shared utilities for problem templates."""

import random
from abc import ABC, abstractmethod

from pydantic import BaseModel, Field

from config import CHOICE_COUNT
from models import Choice, InputType, Problem, TemplateKind


class TemplateDraw(BaseModel):
    """Parameters drawn by a template and the markup derived from them."""

    expression: str
    answer: str
    answer_markup: str
    params: dict[str, int] = Field(default_factory=dict)


class ProblemTemplate(ABC):
    """Abstract base class for the problem templates.

    Each template implements:
    - Parameter drawing and answer computation (``draw``)
    - A distractor rule for multiple choice templates (``distractors``)

    ``generate`` combines both into a finished Problem. Every random draw
    goes through the ``rng`` argument so callers can seed generation.
    """

    kind: TemplateKind
    difficulty: int
    category: str  # Shown with the problem
    label: str  # Shown in the difficulty selector
    prompt: str | None = None
    input_type: InputType = InputType.MULTIPLE_CHOICE

    @abstractmethod
    def draw(self, rng: random.Random) -> TemplateDraw:
        """Draw parameters and compute the question and its answer."""
        ...

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        """Return the wrong answers for a draw.

        Wrong answers misapply one step of the computation. They are not
        guaranteed to differ from each other or from the correct answer.
        Numeric templates have none.
        """
        return []

    def generate(self, rng: random.Random) -> Problem:
        draw = self.draw(rng)

        choices = None
        if self.input_type == InputType.MULTIPLE_CHOICE:
            choices = assemble_choices(
                draw.answer_markup, self.distractors(draw, rng), rng
            )

        return Problem(
            kind=self.kind,
            category=self.category,
            label=self.label,
            prompt=self.prompt,
            expression=draw.expression,
            input_type=self.input_type,
            answer=draw.answer,
            answer_markup=draw.answer_markup,
            difficulty=self.difficulty,
            choices=choices,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} difficulty={self.difficulty}>"


def assemble_choices(
    correct_markup: str,
    wrong_markups: list[str],
    rng: random.Random,
) -> tuple[Choice, ...]:
    """Combine the correct answer with its distractors in random order.

    ``rng.shuffle`` is a Fisher-Yates shuffle, so every slot is equally
    likely to hold the correct answer.
    """
    if len(wrong_markups) != CHOICE_COUNT - 1:
        raise ValueError(
            f"expected {CHOICE_COUNT - 1} distractors, got {len(wrong_markups)}"
        )

    choices = [Choice(markup=correct_markup, correct=True)]
    choices.extend(Choice(markup=markup, correct=False) for markup in wrong_markups)
    rng.shuffle(choices)
    return tuple(choices)


def parse_letter_input(user_input: str, max_options: int = CHOICE_COUNT) -> int | None:
    """Parse letter (A-F) or number (1-6) input to 0-based index.

    Args:
        user_input: Raw user input string.
        max_options: Maximum number of valid options.

    Returns:
        0-based index or None if input is invalid or out of bounds.
    """
    user_input = user_input.strip().upper()
    letter_map = {"A": 0, "B": 1, "C": 2, "D": 3, "E": 4, "F": 5}

    if user_input in letter_map:
        index = letter_map[user_input]
    elif user_input.isdigit():
        index = int(user_input) - 1
    else:
        return None

    if index < 0 or index >= max_options:
        return None

    return index
