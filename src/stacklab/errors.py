"""
Stack Lab Error Hierarchy
=========================

This module defines the exception hierarchy for the whole package.
All exceptions inherit from StackLabError, allowing callers to catch all
Stack Lab errors with a single except clause if desired.

Exception Hierarchy
-------------------
StackLabError (base)
├── StackError (bounded stack operations)
│   ├── StackOverflowError - push onto a full stack
│   ├── StackUnderflowError - pop from an empty stack
│   ├── EmptyStackError - peek at an empty stack
│   └── InvalidCapacityError - capacity is not a positive integer
└── EvaluationError (postfix evaluation)
    ├── InvalidExpressionError - wrong number of operands
    ├── DivisionByZeroError - right operand of '/' is zero
    └── UnsupportedTokenError - token is neither a number nor an operator

Every exception carries an ErrorKind. The kind is what the result-returning
surfaces (evaluate_postfix, LabSession) hand back to their callers, so that
presentation code can build its own messages without parsing exception text.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from enum import Enum
from typing import Optional


# =============================================================================
# Error Kinds
# =============================================================================

class ErrorKind(Enum):
    """Structured error categories reported by the core operations."""
    OVERFLOW = "overflow"
    UNDERFLOW = "underflow"
    EMPTY_STACK = "empty_stack"
    INVALID_CAPACITY = "invalid_capacity"
    INVALID_EXPRESSION = "invalid_expression"
    DIVISION_BY_ZERO = "division_by_zero"
    UNSUPPORTED_TOKEN = "unsupported_token"


# =============================================================================
# Base Exception Class
# =============================================================================

class StackLabError(Exception):
    """
    Base exception for all Stack Lab errors.

    This class provides common message formatting with an optional hint.
    Subclasses set the class attribute ``kind``.

        try:
            evaluator.evaluate("2 +")
        except StackLabError as e:
            print(f"{e.kind.name}: {e.message}")

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    kind: Optional[ErrorKind] = None

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: stack overflow (capacity 10)
            hint: pop an element or raise the capacity
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


# =============================================================================
# Stack Exceptions
# =============================================================================

class StackError(StackLabError):
    """Base exception for bounded stack operations."""
    pass


class StackOverflowError(StackError):
    """
    Push onto a stack whose length already equals its capacity.

    The rejected value is kept for diagnostics; the stack itself is left
    exactly as it was.
    """

    kind = ErrorKind.OVERFLOW

    def __init__(self, capacity: int, value: object = None):
        self.capacity = capacity
        self.value = value
        super().__init__(
            f"stack overflow (capacity {capacity})",
            hint="pop an element or raise the capacity",
        )


class StackUnderflowError(StackError):
    """Pop from an empty stack."""

    kind = ErrorKind.UNDERFLOW

    def __init__(self):
        super().__init__("stack underflow: nothing to pop")


class EmptyStackError(StackError):
    """Peek at an empty stack."""

    kind = ErrorKind.EMPTY_STACK

    def __init__(self):
        super().__init__("stack is empty")


class InvalidCapacityError(StackError):
    """
    Capacity is not a positive integer.

    Raised for zero, negative and non-integer capacities, and for capacities
    above a configured maximum. The stack keeps its previous capacity and
    contents.
    """

    kind = ErrorKind.INVALID_CAPACITY

    def __init__(self, capacity: object, max_capacity: Optional[int] = None):
        self.capacity = capacity
        self.max_capacity = max_capacity

        if max_capacity is not None:
            hint = f"capacity must be an integer between 1 and {max_capacity}"
        else:
            hint = "capacity must be a positive integer"

        super().__init__(f"invalid capacity {capacity!r}", hint=hint)


# =============================================================================
# Evaluation Exceptions
# =============================================================================

class EvaluationError(StackLabError):
    """
    Base exception for postfix evaluation errors.

    Evaluation stops at the first error; no partial result is produced.
    """
    pass


class InvalidExpressionError(EvaluationError):
    """
    Malformed postfix expression.

    Raised when an operator finds fewer than two operands, or when the
    expression does not reduce to exactly one value.
    """

    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, message: str = "invalid postfix expression", hint: Optional[str] = None):
        super().__init__(message, hint=hint)


class DivisionByZeroError(EvaluationError):
    """Right operand of '/' is zero."""

    kind = ErrorKind.DIVISION_BY_ZERO

    def __init__(self):
        super().__init__("division by zero")


class UnsupportedTokenError(EvaluationError):
    """
    Token that is neither a decimal number nor a single-character operator.

    Identifiers and stray symbols that the converter passes through end up
    here when the postfix text is evaluated.
    """

    kind = ErrorKind.UNSUPPORTED_TOKEN

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"unsupported token '{token}'",
            hint="only numbers and the operators + - * / ^ can be evaluated",
        )
