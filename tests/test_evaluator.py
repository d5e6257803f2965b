# =============================================================================
# test_evaluator.py - Postfix Evaluator Unit Tests
# =============================================================================
# Tests for the postfix expression evaluator.
#
# Test coverage includes:
#   - Arithmetic on each operator
#   - Number formats accepted and rejected
#   - Insufficient operands and leftover values
#   - Division by zero
#   - Unsupported tokens
#   - Structured EvalResult values
# =============================================================================

import math

import pytest

from stacklab.errors import (
    DivisionByZeroError,
    ErrorKind,
    InvalidExpressionError,
    UnsupportedTokenError,
)
from stacklab.evaluator import EvalResult, PostfixEvaluator, evaluate_postfix


# =============================================================================
# Helper Functions
# =============================================================================

def evaluate(expr: str) -> float:
    """Evaluate expr, raising on error."""
    return PostfixEvaluator().evaluate(expr)


# =============================================================================
# Arithmetic Tests
# =============================================================================

class TestArithmetic:
    """Test each operator."""

    def test_addition(self):
        assert evaluate("1 2 +") == 3

    def test_subtraction_order(self):
        """The first operand pushed is the left operand."""
        assert evaluate("10 3 -") == 7

    def test_multiplication(self):
        assert evaluate("3 4 *") == 12

    def test_division_is_true_division(self):
        assert evaluate("10 4 /") == 2.5

    def test_power(self):
        assert evaluate("2 10 ^") == 1024

    def test_classic_examples(self):
        assert evaluate("2 3 + 4 *") == 20
        assert evaluate("2 3 2 ^ ^") == 512

    def test_single_number(self):
        assert evaluate("42") == 42

    def test_extra_whitespace(self):
        assert evaluate("  2\t3\n+  ") == 5

    def test_result_is_float(self):
        assert isinstance(evaluate("2 3 +"), float)


# =============================================================================
# Number Format Tests
# =============================================================================

class TestNumberFormats:
    """Test which tokens count as numbers."""

    def test_negative_number(self):
        assert evaluate("-2 3 *") == -6

    def test_decimal_number(self):
        assert evaluate("1.5 2.25 +") == 3.75

    @pytest.mark.parametrize("token", [".5", "5.", "+1", "1e3", "1.2.3", "--1", "0x10"])
    def test_rejected_number_forms(self, token):
        with pytest.raises(UnsupportedTokenError) as exc_info:
            evaluate(f"{token} 1 +")
        assert exc_info.value.token == token

    def test_non_ascii_digits_rejected(self):
        with pytest.raises(UnsupportedTokenError):
            evaluate("٣ 1 +")


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Test error detection."""

    def test_insufficient_operands(self):
        with pytest.raises(InvalidExpressionError):
            evaluate("2 +")

    def test_operator_first(self):
        with pytest.raises(InvalidExpressionError):
            evaluate("+")

    def test_leftover_operands(self):
        with pytest.raises(InvalidExpressionError):
            evaluate("1 2 3 +")

    def test_empty_expression(self):
        with pytest.raises(InvalidExpressionError):
            evaluate("")

    def test_whitespace_only_expression(self):
        with pytest.raises(InvalidExpressionError):
            evaluate("   ")

    def test_division_by_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate("5 0 /")

    def test_division_by_negative_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate("5 -0.0 /")

    def test_division_by_computed_zero(self):
        with pytest.raises(DivisionByZeroError):
            evaluate("1 2 2 - /")

    def test_zero_numerator_is_fine(self):
        assert evaluate("0 5 /") == 0

    def test_unsupported_identifier(self):
        with pytest.raises(UnsupportedTokenError) as exc_info:
            evaluate("2 3 x")
        assert exc_info.value.token == "x"
        assert exc_info.value.kind is ErrorKind.UNSUPPORTED_TOKEN

    def test_glued_operator_is_unsupported(self):
        """Input is split on whitespace only."""
        with pytest.raises(UnsupportedTokenError) as exc_info:
            evaluate("2 3+")
        assert exc_info.value.token == "3+"

    def test_first_error_wins(self):
        """Evaluation stops at the first failing token."""
        with pytest.raises(DivisionByZeroError):
            evaluate("1 0 / x")
        with pytest.raises(UnsupportedTokenError):
            evaluate("x 1 0 /")


# =============================================================================
# Floating Point Tests
# =============================================================================

class TestFloatSemantics:
    """Test IEEE-style results where Python would raise."""

    def test_power_overflow_is_infinity(self):
        assert evaluate("10 400 ^") == math.inf

    def test_negative_power_overflow(self):
        assert evaluate("-10 401 ^") == -math.inf
        assert evaluate("-10 400 ^") == math.inf

    def test_negative_base_fractional_exponent_is_nan(self):
        assert math.isnan(evaluate("-8 0.5 ^"))

    def test_zero_to_negative_power_is_infinity(self):
        assert evaluate("0 -1 ^") == math.inf

    def test_multiplication_overflow(self):
        assert evaluate("1" + "0" * 300 + " " + "1" + "0" * 300 + " *") == math.inf


# =============================================================================
# Structured Result Tests
# =============================================================================

class TestEvalResult:
    """Test the result-returning interface."""

    def test_value(self):
        result = evaluate_postfix("2 3 + 4 *")
        assert result.ok
        assert result.value == 20
        assert result.error is None

    def test_division_by_zero(self):
        result = evaluate_postfix("5 0 /")
        assert result == EvalResult(error=ErrorKind.DIVISION_BY_ZERO)
        assert result.value is None

    def test_invalid_expression(self):
        assert evaluate_postfix("2 +").error is ErrorKind.INVALID_EXPRESSION

    def test_unsupported_token_carries_token(self):
        result = evaluate_postfix("2 3 x")
        assert result.error is ErrorKind.UNSUPPORTED_TOKEN
        assert result.token == "x"

    def test_needs_exactly_one_of_value_or_error(self):
        with pytest.raises(ValueError):
            EvalResult()
        with pytest.raises(ValueError):
            EvalResult(value=1.0, error=ErrorKind.DIVISION_BY_ZERO)

    def test_repr(self):
        assert repr(evaluate_postfix("1 1 +")) == "EvalResult(value=2.0)"
        assert repr(evaluate_postfix("2 y")) == "EvalResult(error=UNSUPPORTED_TOKEN, token='y')"
