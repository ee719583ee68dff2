"""
Unit tests for calculator detection, evaluation and formatting.
"""

import time

import pytest

from poppi_launcher.core.calculator import (
    calculate,
    evaluate,
    format_result,
    looks_like_calculation,
    normalize_expression,
)
from poppi_launcher.errors import ErrorCode, EvaluationError


class TestLooksLikeCalculation:
    """Test the arithmetic heuristic."""

    @pytest.mark.parametrize("query", ["2+2", "10 / 4", "(1)", "2^8", "3 x 4", "7 % 3", "42", "3.14"])
    def test_accepts_arithmetic(self, query):
        """Test digits with operators or plain numbers qualify."""
        assert looks_like_calculation(query)

    @pytest.mark.parametrize("query", ["firefox", "+", "v2", "mp3 player", ""])
    def test_rejects_text(self, query):
        """Test ordinary search text is not treated as arithmetic."""
        assert not looks_like_calculation(query)

    def test_accepts_text_with_digit_and_operator(self):
        """Test the heuristic is permissive; evaluation decides."""
        assert looks_like_calculation("x264")


class TestNormalizeExpression:
    """Test alternate operator glyphs."""

    def test_unicode_operators(self):
        """Test the multiplication and division signs are rewritten."""
        assert normalize_expression("2 × 3 ÷ 4") == "2 * 3 / 4"

    def test_caret_is_power(self):
        """Test ^ means exponentiation."""
        assert normalize_expression("2^10") == "2**10"

    def test_letter_x_between_operands(self):
        """Test x between operands means multiplication."""
        assert normalize_expression("3x4") == "3*4"
        assert normalize_expression("3 X (4)") == "3 * (4)"

    def test_letter_x_inside_names_kept(self):
        """Test function names containing x are left alone."""
        assert normalize_expression("exp(1)") == "exp(1)"


class TestEvaluate:
    """Test restricted evaluation."""

    @pytest.mark.parametrize("expression,expected", [
        ("2+2", 4.0),
        ("2 × (3 + 4)", 14.0),
        ("2^10", 1024.0),
        ("10 ÷ 4", 2.5),
        ("3x4", 12.0),
        ("10 % 3", 1.0),
        ("-5 + 2", -3.0),
        ("sqrt(16)", 4.0),
        ("abs(-3)", 3.0),
    ])
    def test_arithmetic(self, expression, expected):
        """Test supported arithmetic evaluates to the expected value."""
        assert evaluate(expression) == pytest.approx(expected)

    def test_constants(self):
        """Test the named constants are available."""
        assert evaluate("2 * pi") == pytest.approx(6.283185307179586)

    @pytest.mark.parametrize("expression", [
        "1/0",
        "2 +",
        "sqrt(-1)",
        "__import__('os')",
        "foo(2)",
        "2 ** 99999",
        "'a' * 3",
        "round(2, ndigits=1)",
    ])
    def test_rejected_expressions(self, expression):
        """Test invalid or unsafe input raises EvaluationError."""
        with pytest.raises(EvaluationError) as exc_info:
            evaluate(expression)
        assert exc_info.value.code == ErrorCode.EVALUATION_FAILED

    def test_division_by_zero_reason(self):
        """Test division by zero is named in the error."""
        with pytest.raises(EvaluationError) as exc_info:
            evaluate("5 / (2 - 2)")
        assert "division by zero" in exc_info.value.message

    def test_non_finite_result(self):
        """Test overflowing results are rejected."""
        with pytest.raises(EvaluationError):
            evaluate("exp(1000)")

    def test_oversized_power_rejected_quickly(self):
        """Test powers too large for a float fail before any big-int arithmetic runs."""
        started = time.perf_counter()
        with pytest.raises(EvaluationError) as exc_info:
            evaluate("(9^9999)^999")
        assert time.perf_counter() - started < 1.0
        assert "too large" in exc_info.value.message

    @pytest.mark.parametrize("expression, expected", [
        ("10^308", 1e308),
        ("2^-10", 0.0009765625),
        ("(-1)^9999", -1.0),
        ("0^5000", 0.0),
    ])
    def test_powers_within_float_range(self, expression, expected):
        """Test powers whose result fits a float still evaluate."""
        assert evaluate(expression) == pytest.approx(expected)

    def test_power_just_past_float_range(self):
        """Test 2^1024 is one step past the largest float."""
        with pytest.raises(EvaluationError):
            evaluate("2^1024")


class TestFormatResult:
    """Test display formatting."""

    def test_integers(self):
        """Test whole numbers print without a fraction."""
        assert format_result(4.0) == "4"
        assert format_result(-12.0) == "-12"

    def test_fractions(self):
        """Test fractions are cut to the configured precision."""
        assert format_result(2.5) == "2.5"
        assert format_result(1 / 3) == "0.3333333333"
        assert format_result(1 / 3, precision=3) == "0.333"

    def test_float_noise_removed(self):
        """Test binary float noise does not reach the display."""
        assert calculate("0.1 + 0.2") == "0.3"

    def test_negative_zero(self):
        """Test values that round to zero print as 0."""
        assert format_result(-0.0) == "0"
        assert format_result(-1e-12) == "0"

    def test_calculate_rounds_to_precision(self):
        """Test calculate honours the precision argument."""
        assert calculate("2 * pi") == "6.2831853072"
        assert calculate("2 * pi", precision=2) == "6.28"
