"""Polynomial templates: addition, subtraction and monomial products."""

import random

from models import TemplateKind
from problems.base import ProblemTemplate, TemplateDraw
from problems.formatting import format_monomial, format_polynomial, trinomial


def _draw_trinomial(
    rng: random.Random, a_range: tuple[int, int], c_range: tuple[int, int] = (-5, 5)
) -> tuple[int, int, int]:
    return rng.randint(*a_range), rng.randint(-5, 5), rng.randint(*c_range)


def _trinomial_params(
    first: tuple[int, int, int], second: tuple[int, int, int]
) -> dict[str, int]:
    a1, b1, c1 = first
    a2, b2, c2 = second
    return {"a1": a1, "b1": b1, "c1": c1, "a2": a2, "b2": b2, "c2": c2}


class PolynomialAddTemplate(ProblemTemplate):
    """(a1x^2 + b1x + c1) + (a2x^2 + b2x + c2), summed term by term."""

    kind = TemplateKind.POLYNOMIAL_ADD
    difficulty = 6
    category = "Polynomial Addition"
    label = "Polynomial Addition"

    def draw(self, rng: random.Random) -> TemplateDraw:
        first = _draw_trinomial(rng, (1, 5))
        second = _draw_trinomial(rng, (1, 5))
        ra, rb, rc = (x + y for x, y in zip(first, second))

        answer = format_polynomial(trinomial(ra, rb, rc))
        return TemplateDraw(
            expression=(
                f"({format_polynomial(trinomial(*first))}) + "
                f"({format_polynomial(trinomial(*second))})"
            ),
            answer=answer,
            answer_markup=answer,
            params={**_trinomial_params(first, second), "ra": ra, "rb": rb, "rc": rc},
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        ra, rb, rc = p["ra"], p["rb"], p["rc"]
        return [
            format_polynomial(trinomial(ra + rng.randint(1, 3), rb, rc)),
            format_polynomial(trinomial(ra, rb - rng.randint(1, 4), rc)),
            # Like terms multiplied instead of added
            format_polynomial(
                trinomial(p["a1"] * p["a2"], p["b1"] * p["b2"], p["c1"] * p["c2"])
            ),
        ]


class PolynomialSubtractTemplate(ProblemTemplate):
    """(a1x^2 + b1x + c1) - (a2x^2 + b2x + c2), subtracted term by term."""

    kind = TemplateKind.POLYNOMIAL_SUBTRACT
    difficulty = 7
    category = "Polynomial Subtraction"
    label = "Polynomial Subtraction"

    def draw(self, rng: random.Random) -> TemplateDraw:
        first = _draw_trinomial(rng, (2, 7))
        second = _draw_trinomial(rng, (1, 4))
        ra, rb, rc = (x - y for x, y in zip(first, second))

        answer = format_polynomial(trinomial(ra, rb, rc))
        return TemplateDraw(
            expression=(
                f"({format_polynomial(trinomial(*first))}) - "
                f"({format_polynomial(trinomial(*second))})"
            ),
            answer=answer,
            answer_markup=answer,
            params={**_trinomial_params(first, second), "ra": ra, "rb": rb, "rc": rc},
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        ra, rb, rc = p["ra"], p["rb"], p["rc"]
        return [
            # Sign of the second polynomial not distributed
            format_polynomial(
                trinomial(p["a1"] + p["a2"], p["b1"] + p["b2"], p["c1"] + p["c2"])
            ),
            format_polynomial(trinomial(ra, rb + rng.randint(2, 5), rc)),
            format_polynomial(trinomial(ra - 1, rb, rc + 2)),
        ]


class PolynomialTimesMonomialTemplate(ProblemTemplate):
    """mx^me (ax^2 + bx + c), distributed over the trinomial."""

    kind = TemplateKind.POLYNOMIAL_TIMES_MONOMIAL
    difficulty = 8
    category = "Polynomial × Monomial"
    label = "Polynomial × Monomial"

    def draw(self, rng: random.Random) -> TemplateDraw:
        m = rng.randint(2, 4)
        me = rng.randint(1, 2)
        a, b, c = _draw_trinomial(rng, (1, 5), c_range=(-4, 4))
        ra, rb, rc = m * a, m * b, m * c

        answer = format_polynomial(trinomial(ra, rb, rc, shift=me))
        return TemplateDraw(
            expression=f"{format_monomial(m, me)}({format_polynomial(trinomial(a, b, c))})",
            answer=answer,
            answer_markup=answer,
            params={
                "m": m,
                "me": me,
                "a": a,
                "b": b,
                "c": c,
                "ra": ra,
                "rb": rb,
                "rc": rc,
            },
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        m, me = p["m"], p["me"]
        return [
            # Exponents left unshifted
            format_polynomial(trinomial(p["ra"], p["rb"], p["rc"])),
            # Coefficients added instead of multiplied
            format_polynomial(trinomial(m + p["a"], m + p["b"], m + p["c"], shift=me)),
            format_polynomial(trinomial(p["ra"] + 2, p["rb"], p["rc"] - 1, shift=me)),
        ]
