"""Markup formatting for coefficients, monomials and polynomials.

Markup is LaTeX-style (``x^{2}``) so a math renderer can typeset it; the
terminal UI converts it to plain text on display.
"""

from collections.abc import Iterable

from models import Term


def format_variable(exponent: int) -> str:
    """Return the variable part for an exponent: '', 'x' or 'x^{e}'."""
    if exponent == 0:
        return ""
    if exponent == 1:
        return "x"
    return f"x^{{{exponent}}}"


def format_term(coefficient: int, exponent: int) -> str:
    """Format a single signed term, e.g. (3, 2) -> '+3x^{2}'.

    Positive terms carry a leading '+' so they can be concatenated; the
    minus of a negative term is part of the numeral. A coefficient of
    +/-1 is omitted unless the term is a constant. Zero terms vanish.
    """
    if coefficient == 0:
        return ""

    sign = "+" if coefficient > 0 else ""
    if exponent == 0:
        return f"{sign}{coefficient}"

    variable = format_variable(exponent)
    if coefficient == 1:
        return f"{sign}{variable}"
    if coefficient == -1:
        return f"-{variable}"
    return f"{sign}{coefficient}{variable}"


def format_polynomial(terms: Iterable[Term]) -> str:
    """Concatenate terms in the given order; '0' if nothing is left."""
    markup = "".join(format_term(t.coefficient, t.exponent) for t in terms)
    markup = markup.removeprefix("+")
    return markup or "0"


def format_monomial(coefficient: int, exponent: int) -> str:
    return format_polynomial([Term(coefficient=coefficient, exponent=exponent)])


def trinomial(a: int, b: int, c: int, shift: int = 0) -> list[Term]:
    """Build a*x^2 + b*x + c with every exponent raised by ``shift``."""
    return [
        Term(coefficient=a, exponent=2 + shift),
        Term(coefficient=b, exponent=1 + shift),
        Term(coefficient=c, exponent=shift),
    ]
