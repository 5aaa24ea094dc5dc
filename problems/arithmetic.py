"""Numeric-answer templates: basic arithmetic and linear equations."""

import operator
import random

from models import InputType, TemplateKind
from problems.base import ProblemTemplate, TemplateDraw

# (markup symbol, operation)
OPERATIONS = [
    ("+", operator.add),
    ("-", operator.sub),
    ("\\times", operator.mul),
]

LINEAR_COEFFICIENTS = [2, 3, 4, 5, -2, -3]


class ArithmeticTemplate(ProblemTemplate):
    """a op b with a, b in [1, 20] and op one of +, -, x."""

    kind = TemplateKind.ARITHMETIC
    difficulty = 1
    category = "Arithmetic"
    label = "Basic Arithmetic"
    input_type = InputType.NUMERIC

    def draw(self, rng: random.Random) -> TemplateDraw:
        a = rng.randint(1, 20)
        b = rng.randint(1, 20)
        symbol, apply = rng.choice(OPERATIONS)
        result = apply(a, b)

        return TemplateDraw(
            expression=f"{a} {symbol} {b}",
            answer=str(result),
            answer_markup=str(result),
            params={"a": a, "b": b, "result": result},
        )


class LinearEquationTemplate(ProblemTemplate):
    """ax + b = c, solved for x.

    x is drawn first and c derived from it, so the solution is always
    an integer.
    """

    kind = TemplateKind.LINEAR_EQUATION
    difficulty = 2
    category = "Linear Equation"
    label = "Linear Equations"
    prompt = "Solve for x:"
    input_type = InputType.NUMERIC

    def draw(self, rng: random.Random) -> TemplateDraw:
        x = rng.randint(-5, 8)
        a = rng.choice(LINEAR_COEFFICIENTS)
        b = rng.randint(-10, 10)
        c = a * x + b

        sign = "+" if b >= 0 else "-"
        return TemplateDraw(
            expression=f"{a}x {sign} {abs(b)} = {c}",
            answer=str(x),
            answer_markup=f"x = {x}",
            params={"x": x, "a": a, "b": b, "c": c},
        )
