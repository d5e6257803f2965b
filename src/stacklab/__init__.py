"""
Stack Lab - Bounded Stack and Expression Teaching Toolkit
=========================================================

This package provides a bounded stack data structure together with the
classic stack-based expression pipeline:

    infix text -> tokens -> postfix (shunting-yard) -> value

Main Components
---------------
- **stack**: BoundedStack, a fixed-capacity LIFO with overflow/underflow errors
- **tokenizer**: infix text to tokens
- **converter**: shunting-yard infix to postfix conversion
- **evaluator**: postfix evaluation with structured results
- **capacity**: capacity validation and reset policy
- **session**: application state for interactive front ends

Quick Start
-----------
    >>> from stacklab import convert_infix_to_postfix, evaluate_postfix
    >>> postfix = convert_infix_to_postfix("(2+3)*4")
    >>> postfix
    '2 3 + 4 *'
    >>> evaluate_postfix(postfix).value
    20.0

Or use the command-line tool:
    $ stacklab calc "(2+3)*4"
    $ stacklab shell
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from stacklab.errors import (
    ErrorKind,
    StackLabError,
    StackError,
    StackOverflowError,
    StackUnderflowError,
    EmptyStackError,
    InvalidCapacityError,
    EvaluationError,
    InvalidExpressionError,
    DivisionByZeroError,
    UnsupportedTokenError,
)
from stacklab.stack import BoundedStack
from stacklab.operators import Associativity, OperatorInfo, OPERATORS, precedence
from stacklab.tokenizer import Token, TokenType, Tokenizer, tokenize
from stacklab.converter import InfixToPostfixConverter, convert_infix_to_postfix
from stacklab.evaluator import EvalResult, PostfixEvaluator, evaluate_postfix
from stacklab.capacity import CapacityController
from stacklab.config import LabConfig
from stacklab.session import ActionResult, LabSession

__all__ = [
    "__version__",
    # Errors
    "ErrorKind",
    "StackLabError",
    "StackError",
    "StackOverflowError",
    "StackUnderflowError",
    "EmptyStackError",
    "InvalidCapacityError",
    "EvaluationError",
    "InvalidExpressionError",
    "DivisionByZeroError",
    "UnsupportedTokenError",
    # Stack
    "BoundedStack",
    "CapacityController",
    # Expressions
    "Associativity",
    "OperatorInfo",
    "OPERATORS",
    "precedence",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
    "InfixToPostfixConverter",
    "convert_infix_to_postfix",
    "EvalResult",
    "PostfixEvaluator",
    "evaluate_postfix",
    # Session
    "LabConfig",
    "LabSession",
    "ActionResult",
]
