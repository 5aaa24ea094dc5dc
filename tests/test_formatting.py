"""Unit tests for markup formatting of terms and polynomials."""

import pytest

from models import Term
from problems.formatting import (
    format_monomial,
    format_polynomial,
    format_term,
    format_variable,
    trinomial,
)
from ui.mathtext import to_plain


class TestFormatVariable:
    @pytest.mark.parametrize(
        "exponent,expected",
        [(0, ""), (1, "x"), (2, "x^{2}"), (12, "x^{12}")],
    )
    def test_variable_part(self, exponent, expected):
        assert format_variable(exponent) == expected


class TestFormatTerm:
    def test_zero_coefficient_vanishes(self):
        assert format_term(0, 3) == ""
        assert format_term(0, 0) == ""

    def test_positive_term_carries_plus(self):
        assert format_term(3, 2) == "+3x^{2}"

    def test_negative_term_keeps_minus(self):
        assert format_term(-4, 1) == "-4x"

    def test_unit_coefficient_is_omitted(self):
        assert format_term(1, 2) == "+x^{2}"
        assert format_term(-1, 1) == "-x"

    def test_unit_constant_is_kept(self):
        assert format_term(1, 0) == "+1"
        assert format_term(-1, 0) == "-1"


class TestFormatPolynomial:
    def test_monomial_from_single_term(self):
        assert format_polynomial([Term(coefficient=3, exponent=1)]) == "3x"

    def test_all_zero_terms_render_zero(self):
        assert format_polynomial([Term(coefficient=0, exponent=2)]) == "0"
        assert format_polynomial([]) == "0"

    def test_terms_concatenate_in_order(self):
        terms = trinomial(2, -3, 1)
        assert format_polynomial(terms) == "2x^{2}-3x+1"

    def test_leading_negative_term(self):
        assert format_polynomial(trinomial(-1, 0, -5)) == "-x^{2}-5"

    def test_zero_middle_term_is_skipped(self):
        assert format_polynomial(trinomial(4, 0, 9)) == "4x^{2}+9"

    def test_shifted_trinomial(self):
        assert format_polynomial(trinomial(6, 3, -9, shift=2)) == "6x^{4}+3x^{3}-9x^{2}"


class TestFormatMonomial:
    def test_examples(self):
        assert format_monomial(3, 1) == "3x"
        assert format_monomial(0, 4) == "0"
        assert format_monomial(1, 1) == "x"
        assert format_monomial(-1, 3) == "-x^{3}"
        assert format_monomial(7, 0) == "7"


class TestToPlain:
    def test_powers_become_superscripts(self):
        assert to_plain("4x^{2}+9") == "4x²+9"

    def test_fraction(self):
        assert to_plain("\\frac{6x^{3}}{2x}") == "(6x³) / (2x)"

    def test_times_symbol(self):
        assert to_plain("3 \\times 4") == "3 × 4"

    def test_squared_binomial(self):
        assert to_plain("(2x-3)^{2}") == "(2x-3)²"
