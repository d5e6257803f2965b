"""
Stack Lab Session
=================

Application state for an interactive lab: one bounded stack, its capacity
controller, and the last message, postfix output and result shown to the
user.

Every action returns an ActionResult and never raises for user errors.
Messages are built here from the structured error kinds; the core modules
never produce display text.

Example Usage
-------------
>>> from stacklab.session import LabSession
>>> lab = LabSession(capacity=2)
>>> lab.push("7").message
'7 pushed to stack.'
>>> lab.convert("(2+3)*4").value
'2 3 + 4 *'
>>> lab.evaluate("2 3 + 4 *").message
'Result: 20'
"""

import logging
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from stacklab.capacity import CapacityController
from stacklab.config import LabConfig, get_config
from stacklab.converter import convert_infix_to_postfix
from stacklab.errors import ErrorKind, StackError
from stacklab.evaluator import EvalResult, evaluate_postfix
from stacklab.stack import BoundedStack

logger = logging.getLogger(__name__)

READY_MESSAGE = "Ready."
EMPTY_STACK_TEXT = "[Empty Stack]"


# =============================================================================
# Formatting
# =============================================================================

def format_number(value: float) -> str:
    """
    Render a result the way a person expects to read it.

    Whole numbers drop the fractional part (20.0 -> "20"); infinities and
    NaN use the names Infinity, -Infinity and NaN.
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        # shortest round-trip digits, padded with zeros (2.0**60 -> "1152921504606847000")
        return format(Decimal(repr(value)).to_integral_value(), "f")
    return repr(value)


def describe_error(kind: ErrorKind, detail: Any = None) -> str:
    """Build the user-facing message for an error kind."""
    if kind is ErrorKind.OVERFLOW:
        return "Stack Overflow! Cannot push more elements."
    if kind is ErrorKind.UNDERFLOW:
        return "Stack Underflow! Nothing to pop."
    if kind is ErrorKind.EMPTY_STACK:
        return "Stack is empty."
    if kind is ErrorKind.INVALID_CAPACITY:
        return f"Invalid capacity: {detail}"
    if kind is ErrorKind.INVALID_EXPRESSION:
        return "Invalid postfix expression"
    if kind is ErrorKind.DIVISION_BY_ZERO:
        return "Division by zero"
    if kind is ErrorKind.UNSUPPORTED_TOKEN:
        return f"Unsupported token: {detail}"
    raise ValueError(f"unknown error kind {kind!r}")


# =============================================================================
# Action Result
# =============================================================================

@dataclass(frozen=True)
class ActionResult:
    """
    Outcome of one session action.

    Attributes:
        message: Text to show the user
        value: Returned value (popped/peeked element, postfix text, number)
        error: ErrorKind when the action failed
    """
    message: str
    value: Any = None
    error: Optional[ErrorKind] = None

    @property
    def ok(self) -> bool:
        return self.error is None


# =============================================================================
# Session
# =============================================================================

class LabSession:
    """
    The state behind one interactive lab.

    Attributes:
        stack: The user's bounded stack of strings
        capacity: The capacity controller for that stack
        message: Last message shown to the user
        postfix_output: Last conversion result
        result_text: Last evaluation result or error message
    """

    def __init__(self, capacity: Optional[int] = None, config: Optional[LabConfig] = None):
        """
        Create a session with an empty stack.

        Raises:
            InvalidCapacityError: If capacity is invalid or above max_capacity
        """
        self.config = config or get_config()
        self.stack: BoundedStack[str] = BoundedStack(self.config.default_capacity)
        self.capacity = CapacityController(self.stack, self.config.max_capacity)
        if capacity is not None:
            # starting capacity obeys the same bounds as later changes
            self.capacity.set_capacity(capacity)
        self.message = READY_MESSAGE
        self.postfix_output = ""
        self.result_text = ""

    def _finish(self, result: ActionResult) -> ActionResult:
        self.message = result.message
        return result

    def _fail(self, kind: ErrorKind, detail: Any = None) -> ActionResult:
        logger.debug(f"action failed: {kind.name}")
        return self._finish(ActionResult(describe_error(kind, detail), error=kind))

    # =========================================================================
    # Stack Actions
    # =========================================================================

    def push(self, value: str) -> ActionResult:
        try:
            self.stack.push(value)
        except StackError as e:
            return self._fail(e.kind)
        return self._finish(ActionResult(f"{value} pushed to stack.", value=value))

    def pop(self) -> ActionResult:
        try:
            value = self.stack.pop()
        except StackError as e:
            return self._fail(e.kind)
        return self._finish(ActionResult(f"{value} popped from stack.", value=value))

    def peek(self) -> ActionResult:
        try:
            value = self.stack.peek()
        except StackError as e:
            return self._fail(e.kind)
        return self._finish(ActionResult(f"Top element: {value}", value=value))

    def clear(self) -> ActionResult:
        self.stack.clear()
        return self._finish(ActionResult("Stack cleared."))

    def set_capacity(self, capacity: int | str) -> ActionResult:
        """
        Set the stack capacity from an int or from user-entered text.

        The stack is cleared on success and untouched on failure.
        """
        try:
            if isinstance(capacity, str):
                value = self.capacity.apply(capacity)
            else:
                value = self.capacity.set_capacity(capacity)
        except StackError as e:
            return self._fail(e.kind, str(capacity).strip() or repr(capacity))
        return self._finish(ActionResult(f"Capacity set to {value}. Stack cleared.", value=value))

    def render_stack(self) -> list[str]:
        """Lines for drawing the stack, top first."""
        items = self.stack.items()
        return [str(item) for item in items] if items else [EMPTY_STACK_TEXT]

    # =========================================================================
    # Expression Actions
    # =========================================================================

    def convert(self, infix: str) -> ActionResult:
        """Convert infix text to postfix. Never fails."""
        self.postfix_output = convert_infix_to_postfix(infix)
        return self._finish(
            ActionResult("Infix converted to Postfix.", value=self.postfix_output)
        )

    def evaluate(self, postfix: str) -> ActionResult:
        result: EvalResult = evaluate_postfix(postfix)
        if not result.ok:
            failure = self._fail(result.error, result.token)
            self.result_text = failure.message
            return failure

        self.result_text = format_number(result.value)
        return self._finish(ActionResult(f"Result: {self.result_text}", value=result.value))
