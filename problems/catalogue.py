"""Difficulty -> template lookup table.

The mapping is fixed: difficulty d always produces the d-th template.
"""

from problems.arithmetic import ArithmeticTemplate, LinearEquationTemplate
from problems.base import ProblemTemplate
from problems.factoring import BinomialSquareTemplate, DifferenceOfSquaresTemplate
from problems.monomials import (
    MonomialAddSubTemplate,
    MonomialDivideTemplate,
    MonomialMultiplyTemplate,
)
from problems.polynomials import (
    PolynomialAddTemplate,
    PolynomialSubtractTemplate,
    PolynomialTimesMonomialTemplate,
)

_TEMPLATES: list[ProblemTemplate] = [
    ArithmeticTemplate(),
    LinearEquationTemplate(),
    MonomialAddSubTemplate(),
    MonomialMultiplyTemplate(),
    MonomialDivideTemplate(),
    PolynomialAddTemplate(),
    PolynomialSubtractTemplate(),
    PolynomialTimesMonomialTemplate(),
    BinomialSquareTemplate(),
    DifferenceOfSquaresTemplate(),
]

CATALOGUE: dict[int, ProblemTemplate] = {t.difficulty: t for t in _TEMPLATES}

DIFFICULTY_LABELS: list[str] = [CATALOGUE[d].label for d in sorted(CATALOGUE)]


def get_template(difficulty: int) -> ProblemTemplate | None:
    """Get the template for a difficulty level, or None if there is none."""
    return CATALOGUE.get(difficulty)


def get_difficulty_label(difficulty: int | None) -> str:
    """Label for a difficulty selector entry; None means mixed."""
    if difficulty is None:
        return "Mixed"
    template = get_template(difficulty)
    return template.label if template else "Mixed"
