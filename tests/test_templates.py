"""Unit tests for the ten problem templates."""

import random
import re

import pytest

from models import InputType, TemplateKind, Term
from problems.arithmetic import ArithmeticTemplate, LinearEquationTemplate
from problems.catalogue import CATALOGUE
from problems.factoring import BinomialSquareTemplate, DifferenceOfSquaresTemplate
from problems.formatting import (
    format_monomial,
    format_polynomial,
    format_variable,
    trinomial,
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

DRAWS = 200

LINEAR_PATTERN = re.compile(r"^(-?\d+)x ([+-]) (\d+) = (-?\d+)$")
ARITHMETIC_PATTERN = re.compile(r"^(\d+) (\+|-|\\times) (\d+)$")


class ScriptedRandom(random.Random):
    """Random source whose randint (and optionally random) return queued values."""

    def __init__(self, values, floats=()):
        super().__init__(0)
        self.values = list(values)
        self.floats = list(floats)

    def random(self):
        if self.floats:
            return self.floats.pop(0)
        return super().random()

    def randint(self, a, b):
        value = self.values.pop(0)
        assert a <= value <= b
        return value


def draws(template, seed=7, count=DRAWS):
    rng = random.Random(seed)
    return [template.draw(rng) for _ in range(count)]


class TestArithmetic:
    def test_operands_and_result(self):
        for draw in draws(ArithmeticTemplate()):
            match = ARITHMETIC_PATTERN.match(draw.expression)
            assert match, draw.expression
            a, op, b = int(match.group(1)), match.group(2), int(match.group(3))
            assert 1 <= a <= 20 and 1 <= b <= 20
            expected = {"+": a + b, "-": a - b, "\\times": a * b}[op]
            assert draw.answer == str(expected)
            assert draw.answer_markup == draw.answer

    def test_generates_numeric_problem(self, rng):
        problem = ArithmeticTemplate().generate(rng)
        assert problem.input_type == InputType.NUMERIC
        assert problem.choices is None
        assert problem.correct_index is None
        assert problem.difficulty == 1
        assert problem.category == "Arithmetic"


class TestLinearEquation:
    def test_expression_shape_and_solution(self):
        for draw in draws(LinearEquationTemplate()):
            match = LINEAR_PATTERN.match(draw.expression)
            assert match, draw.expression
            a = int(match.group(1))
            b = int(match.group(3)) * (1 if match.group(2) == "+" else -1)
            c = int(match.group(4))
            x = int(draw.answer)
            assert a * x + b == c
            assert a in (2, 3, 4, 5, -2, -3)
            assert -5 <= x <= 8
            assert -10 <= b <= 10
            assert draw.answer_markup == f"x = {x}"

    def test_zero_offset_uses_plus(self):
        template = LinearEquationTemplate()
        found = [d for d in draws(template, count=1000) if d.params["b"] == 0]
        assert found
        assert all(" + 0 = " in d.expression for d in found)

    def test_prompt(self, rng):
        problem = LinearEquationTemplate().generate(rng)
        assert problem.prompt == "Solve for x:"
        assert problem.input_type == InputType.NUMERIC


class TestMonomialAddSub:
    def test_result_is_signed_sum(self):
        for draw in draws(MonomialAddSubTemplate()):
            p = draw.params
            assert 2 <= p["c1"] <= 9 and 2 <= p["c2"] <= 9
            assert 1 <= p["exponent"] <= 4
            assert p["result"] == p["c1"] + p["sign"] * p["c2"]
            assert draw.answer == format_monomial(p["result"], p["exponent"])

    def test_expression(self):
        for draw in draws(MonomialAddSubTemplate(), count=20):
            p = draw.params
            op = "+" if p["sign"] > 0 else "-"
            var = "x" if p["exponent"] == 1 else f"x^{{{p['exponent']}}}"
            assert draw.expression == f"{p['c1']}{var} {op} {p['c2']}{var}"

    def test_cancelled_terms_render_zero(self):
        zero = [
            d
            for d in draws(MonomialAddSubTemplate(), count=2000)
            if d.params["result"] == 0
        ]
        assert zero
        assert all(d.answer == "0" for d in zero)


class TestMonomialMultiply:
    def test_coefficients_multiply_exponents_add(self):
        for draw in draws(MonomialMultiplyTemplate()):
            p = draw.params
            assert p["result_c"] == p["c1"] * p["c2"]
            assert p["result_e"] == p["e1"] + p["e2"]
            assert draw.answer == format_monomial(p["result_c"], p["result_e"])
            assert draw.expression == (
                f"({format_monomial(p['c1'], p['e1'])})"
                f"({format_monomial(p['c2'], p['e2'])})"
            )


class TestMonomialDivide:
    def test_division_is_always_exact(self):
        for draw in draws(MonomialDivideTemplate(), count=1000):
            p = draw.params
            assert p["c1"] % p["c2"] == 0
            assert p["c1"] // p["c2"] == p["result_c"]
            assert p["e1"] - p["e2"] == p["result_e"]
            assert p["result_e"] >= 1

    def test_expression_is_fraction(self):
        for draw in draws(MonomialDivideTemplate(), count=20):
            p = draw.params
            assert draw.expression == (
                f"\\frac{{{format_monomial(p['c1'], p['e1'])}}}"
                f"{{{format_monomial(p['c2'], p['e2'])}}}"
            )


class TestPolynomialAdd:
    def test_sum_is_term_wise(self):
        for draw in draws(PolynomialAddTemplate()):
            p = draw.params
            assert (p["ra"], p["rb"], p["rc"]) == (
                p["a1"] + p["a2"],
                p["b1"] + p["b2"],
                p["c1"] + p["c2"],
            )
            assert 1 <= p["a1"] <= 5 and 1 <= p["a2"] <= 5
            assert draw.answer == format_polynomial(trinomial(p["ra"], p["rb"], p["rc"]))


class TestPolynomialSubtract:
    def test_difference_is_term_wise(self):
        for draw in draws(PolynomialSubtractTemplate()):
            p = draw.params
            assert (p["ra"], p["rb"], p["rc"]) == (
                p["a1"] - p["a2"],
                p["b1"] - p["b2"],
                p["c1"] - p["c2"],
            )
            assert 2 <= p["a1"] <= 7 and 1 <= p["a2"] <= 4
            assert " - (" in draw.expression


class TestPolynomialTimesMonomial:
    def test_distribution_shifts_exponents(self):
        for draw in draws(PolynomialTimesMonomialTemplate()):
            p = draw.params
            assert (p["ra"], p["rb"], p["rc"]) == (
                p["m"] * p["a"],
                p["m"] * p["b"],
                p["m"] * p["c"],
            )
            assert draw.answer == format_polynomial(
                trinomial(p["ra"], p["rb"], p["rc"], shift=p["me"])
            )
            assert -4 <= p["c"] <= 4

    def test_example(self):
        # m, me, a, b, c
        rng = ScriptedRandom([3, 2, 2, 1, -3])
        draw = PolynomialTimesMonomialTemplate().draw(rng)
        assert draw.expression == "3x^{2}(2x^{2}+x-3)"
        assert draw.answer == "6x^{4}+3x^{3}-9x^{2}"


class TestBinomialSquare:
    def test_expansion(self):
        for draw in draws(BinomialSquareTemplate()):
            p = draw.params
            assert p["a2"] == p["a"] ** 2
            assert p["b2"] == p["b"] ** 2
            assert p["ab2"] == p["sign"] * 2 * p["a"] * p["b"]
            assert draw.answer == format_polynomial(trinomial(p["a2"], p["ab2"], p["b2"]))
            assert draw.expression.endswith(")^{2}")


class TestDifferenceOfSquares:
    def test_factored_form(self):
        for draw in draws(DifferenceOfSquaresTemplate()):
            p = draw.params
            ax = format_monomial(p["a"], 1)
            assert draw.answer == f"({ax}+{p['b']})({ax}-{p['b']})"
            assert draw.expression == f"{format_monomial(p['a2'], 2)} - {p['b2']}"

    def test_prompt(self, rng):
        assert DifferenceOfSquaresTemplate().generate(rng).prompt == "Factor:"


class TestDistractors:
    @pytest.mark.parametrize("difficulty", range(3, 11))
    def test_three_distractors_per_draw(self, difficulty):
        template = CATALOGUE[difficulty]
        rng = random.Random(difficulty)
        for _ in range(50):
            draw = template.draw(rng)
            assert len(template.distractors(draw, rng)) == 3

    @pytest.mark.parametrize("difficulty", [1, 2])
    def test_numeric_templates_have_none(self, difficulty, rng):
        template = CATALOGUE[difficulty]
        assert template.distractors(template.draw(rng), rng) == []

    def test_monomial_add_sub_rules(self):
        rng = random.Random(3)
        template = MonomialAddSubTemplate()
        draw = template.draw(rng)
        p = draw.params
        wrong = template.distractors(draw, rng)
        assert wrong[1] == f"{p['result']}{format_variable(p['exponent'] + 1)}"
        assert wrong[2] == format_monomial(p["c1"] * p["c2"], p["exponent"])

    def test_monomial_add_sub_cancelled_sum_keeps_bumped_exponent(self):
        # 5x^{2} - 5x^{2}, noise 1
        rng = ScriptedRandom([2, 5, 5, 1], floats=[0.1])
        template = MonomialAddSubTemplate()
        draw = template.draw(rng)
        assert draw.answer == "0"
        wrong = template.distractors(draw, rng)
        assert wrong == ["11x^{2}", "0x^{3}", "25x^{2}"]
        assert draw.answer_markup not in wrong

    def test_monomial_add_sub_unit_result_keeps_coefficient(self):
        # 4x - 3x = x
        rng = ScriptedRandom([1, 4, 3, 2], floats=[0.1])
        template = MonomialAddSubTemplate()
        draw = template.draw(rng)
        assert draw.answer == "x"
        assert template.distractors(draw, rng)[1] == "1x^{2}"

    def test_monomial_multiply_rules(self):
        # (2x)(3x^{2}) = 6x^{3}, noise 5
        rng = ScriptedRandom([2, 3, 1, 2, 5])
        template = MonomialMultiplyTemplate()
        draw = template.draw(rng)
        assert draw.answer == "6x^{3}"
        assert template.distractors(draw, rng) == ["5x^{3}", "6x^{2}", "11x^{3}"]

    def test_monomial_divide_rules(self):
        # 12x^{3} / 3x = 4x^{2}
        rng = ScriptedRandom([3, 4, 1, 2])
        template = MonomialDivideTemplate()
        draw = template.draw(rng)
        assert draw.expression == "\\frac{12x^{3}}{3x}"
        assert template.distractors(draw, rng) == ["9x^{2}", "4x^{3}", "5x^{2}"]

    def test_polynomial_add_rules(self):
        # (2x^2 - x + 3) + (x^2 + 4x - 5), noise 1 then 2
        rng = ScriptedRandom([2, -1, 3, 1, 4, -5, 1, 2])
        template = PolynomialAddTemplate()
        draw = template.draw(rng)
        assert draw.answer == "3x^{2}+3x-2"
        assert template.distractors(draw, rng) == [
            "4x^{2}+3x-2",
            "3x^{2}+x-2",
            "2x^{2}-4x-15",
        ]

    def test_polynomial_subtract_rules(self):
        # (5x^2 + 2x - 1) - (2x^2 - 3x + 4), noise 2
        rng = ScriptedRandom([5, 2, -1, 2, -3, 4, 2])
        template = PolynomialSubtractTemplate()
        draw = template.draw(rng)
        assert draw.answer == "3x^{2}+5x-5"
        assert template.distractors(draw, rng) == [
            "7x^{2}-x+3",
            "3x^{2}+7x-5",
            "2x^{2}+5x-3",
        ]

    def test_polynomial_times_monomial_rules(self):
        # 2x(x^2 - 2x + 3)
        rng = ScriptedRandom([2, 1, 1, -2, 3])
        template = PolynomialTimesMonomialTemplate()
        draw = template.draw(rng)
        assert draw.answer == "2x^{3}-4x^{2}+6x"
        assert template.distractors(draw, rng) == [
            "2x^{2}-4x+6",
            "3x^{3}+5x",
            "4x^{3}-4x^{2}+5x",
        ]

    def test_binomial_square_rules(self):
        # (2x + 3)^2
        rng = ScriptedRandom([2, 3], floats=[0.9])
        template = BinomialSquareTemplate()
        draw = template.draw(rng)
        assert draw.answer == "4x^{2}+12x+9"
        assert template.distractors(draw, rng) == [
            "4x^{2}+9",
            "4x^{2}+24x+9",
            "4x^{2}-12x-9",
        ]

    def test_binomial_square_rules_hold_for_both_signs(self):
        rng = random.Random(5)
        template = BinomialSquareTemplate()
        for _ in range(DRAWS):
            draw = template.draw(rng)
            p = draw.params
            assert template.distractors(draw, rng) == [
                format_polynomial(
                    [
                        Term(coefficient=p["a2"], exponent=2),
                        Term(coefficient=p["b2"], exponent=0),
                    ]
                ),
                format_polynomial(trinomial(p["a2"], p["ab2"] * 2, p["b2"])),
                format_polynomial(trinomial(p["a2"], -p["ab2"], -p["b2"])),
            ]

    def test_difference_of_squares_rules(self):
        rng = random.Random(3)
        template = DifferenceOfSquaresTemplate()
        draw = template.draw(rng)
        ax = format_monomial(draw.params["a"], 1)
        b = draw.params["b"]
        assert template.distractors(draw, rng) == [
            f"({ax}+{b})^{{2}}",
            f"({ax}-{b})^{{2}}",
            f"({ax}+{2 * b})({ax}-{2 * b})",
        ]


class TestGenerate:
    @pytest.mark.parametrize("difficulty", range(1, 11))
    def test_problem_matches_template(self, difficulty):
        template = CATALOGUE[difficulty]
        problem = template.generate(random.Random(difficulty))
        assert problem.difficulty == difficulty
        assert problem.kind == template.kind
        assert problem.category == template.category
        assert problem.expression

    @pytest.mark.parametrize("difficulty", range(3, 11))
    def test_choice_problems_have_one_correct(self, difficulty):
        template = CATALOGUE[difficulty]
        rng = random.Random(difficulty)
        for _ in range(50):
            problem = template.generate(rng)
            assert len(problem.choices) == 4
            assert sum(c.correct for c in problem.choices) == 1
            assert problem.choices[problem.correct_index].markup == problem.answer_markup

    def test_kinds_cover_every_template(self):
        assert {t.kind for t in CATALOGUE.values()} == set(TemplateKind)
