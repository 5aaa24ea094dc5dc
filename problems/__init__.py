"""Problem generation engine for the tug-of-war math game.

Architecture:
- Formatter turns coefficients and terms into LaTeX-style markup
- Templates draw random parameters and compute the answer (one per level)
- Each multiple choice template owns a distractor rule
- The factory selects a template by difficulty and returns a Problem

Templates (difficulty 1-10):
- ArithmeticTemplate, LinearEquationTemplate (numeric input)
- MonomialAddSubTemplate, MonomialMultiplyTemplate, MonomialDivideTemplate
- PolynomialAddTemplate, PolynomialSubtractTemplate,
  PolynomialTimesMonomialTemplate
- BinomialSquareTemplate, DifferenceOfSquaresTemplate
"""

from problems.arithmetic import ArithmeticTemplate, LinearEquationTemplate
from problems.base import (
    ProblemTemplate,
    TemplateDraw,
    assemble_choices,
    parse_letter_input,
)
from problems.catalogue import (
    CATALOGUE,
    DIFFICULTY_LABELS,
    get_difficulty_label,
    get_template,
)
from problems.factoring import BinomialSquareTemplate, DifferenceOfSquaresTemplate
from problems.factory import (
    ProblemFactory,
    generate_problem,
    get_factory,
    get_max_difficulty,
)
from problems.formatting import (
    format_monomial,
    format_polynomial,
    format_term,
    format_variable,
)
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

__all__ = [
    # Formatting
    "format_term",
    "format_polynomial",
    "format_monomial",
    "format_variable",
    # Base
    "ProblemTemplate",
    "TemplateDraw",
    "assemble_choices",
    "parse_letter_input",
    # Templates
    "ArithmeticTemplate",
    "LinearEquationTemplate",
    "MonomialAddSubTemplate",
    "MonomialMultiplyTemplate",
    "MonomialDivideTemplate",
    "PolynomialAddTemplate",
    "PolynomialSubtractTemplate",
    "PolynomialTimesMonomialTemplate",
    "BinomialSquareTemplate",
    "DifferenceOfSquaresTemplate",
    # Catalogue
    "CATALOGUE",
    "DIFFICULTY_LABELS",
    "get_template",
    "get_difficulty_label",
    # Factory
    "ProblemFactory",
    "generate_problem",
    "get_factory",
    "get_max_difficulty",
]
