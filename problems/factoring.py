"""Notable products and factoring templates."""

import random

from models import Term, TemplateKind
from problems.base import ProblemTemplate, TemplateDraw
from problems.formatting import format_monomial, format_polynomial, trinomial


class BinomialSquareTemplate(ProblemTemplate):
    """(ax +/- b)^2 = a^2x^2 +/- 2abx + b^2."""

    kind = TemplateKind.BINOMIAL_SQUARE
    difficulty = 9
    category = "Notable Products"
    label = "Notable Products"

    def draw(self, rng: random.Random) -> TemplateDraw:
        a = rng.randint(1, 5)
        b = rng.randint(1, 6)
        sign = 1 if rng.random() > 0.5 else -1
        a2 = a * a
        ab2 = sign * 2 * a * b
        b2 = b * b

        op = "+" if sign > 0 else "-"
        answer = format_polynomial(trinomial(a2, ab2, b2))
        return TemplateDraw(
            expression=f"({format_monomial(a, 1)} {op} {b})^{{2}}",
            answer=answer,
            answer_markup=answer,
            params={"a": a, "b": b, "sign": sign, "a2": a2, "ab2": ab2, "b2": b2},
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        a2, ab2, b2 = p["a2"], p["ab2"], p["b2"]
        return [
            # Middle term forgotten
            format_polynomial(
                [Term(coefficient=a2, exponent=2), Term(coefficient=b2, exponent=0)]
            ),
            format_polynomial(trinomial(a2, ab2 * 2, b2)),
            format_polynomial(trinomial(a2, -ab2, -b2)),
        ]


class DifferenceOfSquaresTemplate(ProblemTemplate):
    """a^2x^2 - b^2 factored as (ax + b)(ax - b)."""

    kind = TemplateKind.DIFFERENCE_OF_SQUARES
    difficulty = 10
    category = "Factoring"
    label = "Factoring"
    prompt = "Factor:"

    def draw(self, rng: random.Random) -> TemplateDraw:
        a = rng.randint(1, 6)
        b = rng.randint(1, 6)
        a2 = a * a
        b2 = b * b

        ax = format_monomial(a, 1)
        answer = f"({ax}+{b})({ax}-{b})"
        return TemplateDraw(
            expression=f"{format_monomial(a2, 2)} - {b2}",
            answer=answer,
            answer_markup=answer,
            params={"a": a, "b": b, "a2": a2, "b2": b2},
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        ax = format_monomial(draw.params["a"], 1)
        b = draw.params["b"]
        return [
            f"({ax}+{b})^{{2}}",
            f"({ax}-{b})^{{2}}",
            f"({ax}+{b * 2})({ax}-{b * 2})",
        ]
