"""
Bounded Stack
=============

A fixed-capacity LIFO container with explicit overflow and underflow
reporting. It is used on its own by the interactive session, and
internally as the operator stack of the converter and the operand stack
of the evaluator.

Invariants
----------
- capacity >= 1
- 0 <= len(stack) <= capacity
- Changing the capacity always empties the stack, even when the new
  capacity could hold the current contents.
- A failed operation leaves contents and capacity untouched.

Example Usage
-------------
>>> from stacklab.stack import BoundedStack
>>> stack = BoundedStack(capacity=2)
>>> stack.push("a")
>>> stack.push("b")
>>> stack.items()
['b', 'a']
>>> stack.pop()
'b'
"""

import logging
from typing import Generic, Iterator, TypeVar

from stacklab.errors import (
    EmptyStackError,
    InvalidCapacityError,
    StackOverflowError,
    StackUnderflowError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def validate_capacity(capacity: object) -> int:
    """
    Check that a capacity is a positive integer.

    Booleans are rejected even though they are ints in Python.

    Raises:
        InvalidCapacityError: If capacity is not an integer or is <= 0
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacityError(capacity)
    if capacity <= 0:
        raise InvalidCapacityError(capacity)
    return capacity


class BoundedStack(Generic[T]):
    """
    Fixed-capacity last-in first-out container.

    The elements are kept in a Python list whose end is the top of the
    stack. Views returned by items() and iteration are top-first, matching
    the way the stack is drawn.

    Attributes:
        capacity: Maximum number of elements (read-only; use set_capacity)
    """

    def __init__(self, capacity: int = 10):
        self._capacity = validate_capacity(capacity)
        self._items: list[T] = []

    # =========================================================================
    # Mutating Operations
    # =========================================================================

    def push(self, value: T) -> None:
        """
        Push a value onto the top of the stack.

        Raises:
            StackOverflowError: If the stack is already full
        """
        if len(self._items) >= self._capacity:
            logger.debug(f"push rejected: stack full ({self._capacity})")
            raise StackOverflowError(self._capacity, value)
        self._items.append(value)
        logger.debug(f"pushed {value!r}, length {len(self._items)}")

    def pop(self) -> T:
        """
        Remove and return the top value.

        Raises:
            StackUnderflowError: If the stack is empty
        """
        if not self._items:
            raise StackUnderflowError()
        value = self._items.pop()
        logger.debug(f"popped {value!r}, length {len(self._items)}")
        return value

    def clear(self) -> None:
        """Remove all elements. Always succeeds."""
        self._items.clear()

    def set_capacity(self, capacity: int) -> None:
        """
        Change the capacity and empty the stack.

        The stack is cleared even if the new capacity is large enough for
        the current contents; resizing is always a full reset.

        Raises:
            InvalidCapacityError: If capacity is not a positive integer
        """
        self._capacity = validate_capacity(capacity)
        self._items.clear()
        logger.debug(f"capacity set to {capacity}, stack cleared")

    # =========================================================================
    # Queries
    # =========================================================================

    def peek(self) -> T:
        """
        Return the top value without removing it.

        Raises:
            EmptyStackError: If the stack is empty
        """
        if not self._items:
            raise EmptyStackError()
        return self._items[-1]

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def items(self) -> list[T]:
        """Return a copy of the contents, top of stack first."""
        return list(reversed(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return reversed(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self._capacity}, items={self.items()!r})"
