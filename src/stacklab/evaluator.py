"""
Postfix Expression Evaluator
============================

This module evaluates postfix (Reverse Polish) expressions given as
whitespace-separated text.

Tokens
------
- Numbers: an optional leading minus, digits, and an optional fraction
  (``42``, ``-7``, ``3.25``). Forms like ``.5``, ``+1`` or ``1e3`` are not
  numbers here.
- Operators: exactly one of ``+ - * / ^``.
- Anything else is an unsupported token.

The input is split on whitespace only; it does not go through the infix
tokenizer. So ``"2 3+"`` is the two tokens ``2`` and ``3+``, and fails.

Errors
------
Evaluation stops at the first error:

- InvalidExpressionError: an operator with fewer than two operands, or a
  final stack that does not hold exactly one value
- DivisionByZeroError: ``/`` with a zero right operand
- UnsupportedTokenError: any other token

Example Usage
-------------
>>> from stacklab.evaluator import evaluate_postfix
>>> evaluate_postfix("2 3 + 4 *")
EvalResult(value=20.0)
>>> evaluate_postfix("5 0 /").error
<ErrorKind.DIVISION_BY_ZERO: 'division_by_zero'>
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional

from stacklab.errors import (
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    InvalidExpressionError,
    UnsupportedTokenError,
)
from stacklab.operators import apply, is_operator
from stacklab.stack import BoundedStack

logger = logging.getLogger(__name__)

NUMBER_PATTERN = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)


# =============================================================================
# Result Type
# =============================================================================

@dataclass(frozen=True)
class EvalResult:
    """
    Outcome of evaluate_postfix: a value or an error kind, never both.

    Attributes:
        value: The numeric result on success
        error: The ErrorKind on failure
        token: The offending token for UNSUPPORTED_TOKEN
    """
    value: Optional[float] = None
    error: Optional[ErrorKind] = None
    token: Optional[str] = None

    def __post_init__(self):
        if (self.value is None) == (self.error is None):
            raise ValueError("EvalResult needs exactly one of value or error")

    def __repr__(self) -> str:
        if self.error is None:
            return f"EvalResult(value={self.value!r})"
        if self.token is not None:
            return f"EvalResult(error={self.error.name}, token={self.token!r})"
        return f"EvalResult(error={self.error.name})"

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: float) -> "EvalResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: EvaluationError) -> "EvalResult":
        return cls(error=error.kind, token=getattr(error, "token", None))


# =============================================================================
# Evaluator
# =============================================================================

class PostfixEvaluator:
    """
    Evaluates postfix text with an operand stack.

    The operand stack is a BoundedStack sized to the token count, so it can
    never overflow on valid input.
    """

    def evaluate(self, expr: str) -> float:
        """
        Evaluate a postfix expression.

        Args:
            expr: Whitespace-separated postfix tokens

        Returns:
            The single value left on the stack

        Raises:
            InvalidExpressionError: Wrong number of operands
            DivisionByZeroError: Division by zero
            UnsupportedTokenError: Token is neither number nor operator
        """
        tokens = expr.split()
        operands: BoundedStack[float] = BoundedStack(max(1, len(tokens)))

        for token in tokens:
            if NUMBER_PATTERN.fullmatch(token):
                operands.push(float(token))
            elif len(token) == 1 and is_operator(token):
                operands.push(self._apply_operator(token, operands))
            else:
                logger.debug(f"unsupported token {token!r}")
                raise UnsupportedTokenError(token)

        if len(operands) != 1:
            logger.debug(f"{len(operands)} values left on the stack, expected 1")
            raise InvalidExpressionError(
                hint=f"expression left {len(operands)} values on the stack"
            )

        return operands.pop()

    def _apply_operator(self, op: str, operands: BoundedStack[float]) -> float:
        if len(operands) < 2:
            raise InvalidExpressionError(hint=f"'{op}' needs two operands")

        b = operands.pop()
        a = operands.pop()

        if op == "/" and b == 0:
            raise DivisionByZeroError()

        result = apply(op, a, b)
        logger.debug(f"{a!r} {op} {b!r} = {result!r}")
        return result


def evaluate_postfix(expr: str) -> EvalResult:
    """
    Evaluate a postfix expression into a structured result.

    Never raises for bad expressions; the error kind is returned instead.
    """
    try:
        return EvalResult.success(PostfixEvaluator().evaluate(expr))
    except EvaluationError as e:
        return EvalResult.failure(e)
