"""Monomial templates: addition/subtraction, multiplication and division."""

import random

from models import TemplateKind
from problems.base import ProblemTemplate, TemplateDraw
from problems.formatting import format_monomial, format_variable


class MonomialAddSubTemplate(ProblemTemplate):
    """c1x^e +/- c2x^e for like terms."""

    kind = TemplateKind.MONOMIAL_ADD_SUB
    difficulty = 3
    category = "Monomials"
    label = "Monomial Addition/Subtraction"

    def draw(self, rng: random.Random) -> TemplateDraw:
        exponent = rng.randint(1, 4)
        c1 = rng.randint(2, 9)
        c2 = rng.randint(2, 9)
        sign = 1 if rng.random() > 0.5 else -1
        result = c1 + sign * c2

        variable = format_variable(exponent)
        op = "+" if sign > 0 else "-"
        answer = format_monomial(result, exponent)

        return TemplateDraw(
            expression=f"{c1}{variable} {op} {c2}{variable}",
            answer=answer,
            answer_markup=answer,
            params={
                "c1": c1,
                "c2": c2,
                "exponent": exponent,
                "sign": sign,
                "result": result,
            },
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        return [
            # Always added, plus noise
            format_monomial(p["c1"] + p["c2"] + rng.randint(1, 3), p["exponent"]),
            # Exponent bumped as if the variables were multiplied
            f"{p['result']}{format_variable(p['exponent'] + 1)}",
            # Coefficients multiplied
            format_monomial(p["c1"] * p["c2"], p["exponent"]),
        ]


class MonomialMultiplyTemplate(ProblemTemplate):
    """(c1x^e1)(c2x^e2) = c1c2 x^(e1+e2)."""

    kind = TemplateKind.MONOMIAL_MULTIPLY
    difficulty = 4
    category = "Monomial Multiplication"
    label = "Monomial Multiplication"

    def draw(self, rng: random.Random) -> TemplateDraw:
        c1 = rng.randint(2, 6)
        c2 = rng.randint(2, 6)
        e1 = rng.randint(1, 3)
        e2 = rng.randint(1, 3)
        result_c = c1 * c2
        result_e = e1 + e2

        answer = format_monomial(result_c, result_e)
        return TemplateDraw(
            expression=f"({format_monomial(c1, e1)})({format_monomial(c2, e2)})",
            answer=answer,
            answer_markup=answer,
            params={
                "c1": c1,
                "c2": c2,
                "e1": e1,
                "e2": e2,
                "result_c": result_c,
                "result_e": result_e,
            },
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        return [
            format_monomial(p["c1"] + p["c2"], p["result_e"]),
            format_monomial(p["result_c"], p["e1"] * p["e2"]),
            format_monomial(p["result_c"] + rng.randint(1, 5), p["result_e"]),
        ]


class MonomialDivideTemplate(ProblemTemplate):
    """(c1x^e1) / (c2x^e2) with an exact quotient.

    The divisor and the quotient are drawn first and the dividend is
    derived from them, so the division never leaves a remainder or a
    negative exponent.
    """

    kind = TemplateKind.MONOMIAL_DIVIDE
    difficulty = 5
    category = "Monomial Division"
    label = "Monomial Division"

    def draw(self, rng: random.Random) -> TemplateDraw:
        c2 = rng.randint(2, 5)
        result_c = rng.randint(2, 6)
        c1 = c2 * result_c
        e2 = rng.randint(1, 3)
        result_e = rng.randint(1, 3)
        e1 = e2 + result_e

        answer = format_monomial(result_c, result_e)
        dividend = format_monomial(c1, e1)
        divisor = format_monomial(c2, e2)
        return TemplateDraw(
            expression=f"\\frac{{{dividend}}}{{{divisor}}}",
            answer=answer,
            answer_markup=answer,
            params={
                "c1": c1,
                "c2": c2,
                "e1": e1,
                "e2": e2,
                "result_c": result_c,
                "result_e": result_e,
            },
        )

    def distractors(self, draw: TemplateDraw, rng: random.Random) -> list[str]:
        p = draw.params
        return [
            # Coefficients subtracted instead of divided
            format_monomial(p["c1"] - p["c2"], p["result_e"]),
            format_monomial(p["result_c"], p["e1"] - p["e2"] + 1),
            format_monomial(p["c1"] // p["c2"] + 1, p["result_e"]),
        ]
