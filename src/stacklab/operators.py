"""
Operator Table
==============

Precedence and associativity of the binary operators understood by the
converter and the evaluator.

| Operator | Precedence | Associativity |
|----------|------------|---------------|
| ^        | 4          | right         |
| * /      | 3          | left          |
| + -      | 2          | left          |

Any other symbol has precedence 0.
"""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Optional


class Associativity(Enum):
    """Grouping direction for chains of equal-precedence operators."""
    LEFT = auto()
    RIGHT = auto()


@dataclass(frozen=True)
class OperatorInfo:
    """Precedence and associativity of one operator symbol."""
    symbol: str
    precedence: int
    associativity: Associativity = Associativity.LEFT

    @property
    def is_right_associative(self) -> bool:
        return self.associativity is Associativity.RIGHT


OPERATORS: dict[str, OperatorInfo] = {
    "^": OperatorInfo("^", 4, Associativity.RIGHT),
    "*": OperatorInfo("*", 3),
    "/": OperatorInfo("/", 3),
    "+": OperatorInfo("+", 2),
    "-": OperatorInfo("-", 2),
}

OPERATOR_CHARS = frozenset(OPERATORS)


def is_operator(symbol: str) -> bool:
    """Check if symbol is exactly one of the five operator characters."""
    return symbol in OPERATORS


def precedence(symbol: str) -> int:
    """Return the precedence of symbol, or 0 for anything unknown."""
    info = OPERATORS.get(symbol)
    return info.precedence if info else 0


def operator_info(symbol: str) -> Optional[OperatorInfo]:
    return OPERATORS.get(symbol)


# =============================================================================
# Arithmetic
# =============================================================================
# Division by zero is checked by the evaluator before apply() is called.
# =============================================================================

def _power(a: float, b: float) -> float:
    # IEEE results instead of exceptions: overflow is inf, and a negative
    # base with a fractional exponent is nan rather than a complex number
    try:
        return math.pow(a, b)
    except OverflowError:
        negative = a < 0 and float(b).is_integer() and b % 2 == 1
        return -math.inf if negative else math.inf
    except ValueError:
        if a == 0:
            # zero to a negative power
            return math.inf
        return math.nan


_ARITHMETIC: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b,
    "^": _power,
}


def apply(symbol: str, a: float, b: float) -> float:
    """
    Apply a binary operator to two operands.

    Args:
        symbol: One of + - * / ^
        a: Left operand (pushed first)
        b: Right operand (pushed last)

    Raises:
        KeyError: If symbol is not an operator
    """
    return _ARITHMETIC[symbol](a, b)
