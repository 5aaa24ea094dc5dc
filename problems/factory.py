"""Problem factory: picks a template by difficulty and generates a problem."""

import logging
import random

from models import Problem
from problems.base import ProblemTemplate
from problems.catalogue import CATALOGUE

logger = logging.getLogger(__name__)


class ProblemFactory:
    """Generates problems from the template catalogue.

    The factory owns its random source; pass a seeded ``random.Random``
    for reproducible problems.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        catalogue: dict[int, ProblemTemplate] | None = None,
    ):
        self.rng = rng or random.Random()
        self.catalogue = catalogue if catalogue is not None else CATALOGUE

    def get_max_difficulty(self) -> int:
        """Number of templates, i.e. the highest selectable difficulty."""
        return len(self.catalogue)

    def select_template(
        self, difficulty: int | None = None, rng: random.Random | None = None
    ) -> ProblemTemplate:
        """Select the template for ``difficulty``.

        Anything that is not a known difficulty (including None) falls back
        to a uniform choice over the whole catalogue.
        """
        rng = rng or self.rng
        if (
            isinstance(difficulty, int)
            and not isinstance(difficulty, bool)
            and difficulty in self.catalogue
        ):
            return self.catalogue[difficulty]

        if difficulty is not None:
            logger.debug("Unknown difficulty %r, choosing at random", difficulty)

        return self.catalogue[rng.choice(sorted(self.catalogue))]

    def generate_problem(
        self, difficulty: int | None = None, rng: random.Random | None = None
    ) -> Problem:
        rng = rng or self.rng
        template = self.select_template(difficulty, rng)
        problem = template.generate(rng)
        logger.debug(
            "Generated %s problem (difficulty %d): %s",
            template.kind.value,
            problem.difficulty,
            problem.expression,
        )
        return problem


_factory = ProblemFactory()


def get_factory() -> ProblemFactory:
    """Get the global problem factory instance."""
    return _factory


def generate_problem(
    difficulty: int | None = None, rng: random.Random | None = None
) -> Problem:
    """Generate a problem with the global factory."""
    return _factory.generate_problem(difficulty, rng)


def get_max_difficulty() -> int:
    return _factory.get_max_difficulty()
