"""
Capacity Controller
===================

Governs the maximum size of a BoundedStack and its reset policy.

Setting a capacity is always a full reset: the stack is emptied even when
the new capacity could hold everything on it. Invalid requests leave both
the capacity and the contents as they were.

The controller also accepts capacity text as typed by a user, so that the
interactive layers do not parse numbers themselves.
"""

import logging
import re
from typing import Optional

from stacklab.errors import InvalidCapacityError
from stacklab.stack import BoundedStack, validate_capacity

logger = logging.getLogger(__name__)

_INTEGER_TEXT = re.compile(r"[+-]?\d+", re.ASCII)


class CapacityController:
    """
    Applies capacity changes to one stack.

    Attributes:
        stack: The stack being governed
        max_capacity: Optional upper bound for new capacities
    """

    def __init__(self, stack: BoundedStack, max_capacity: Optional[int] = None):
        self.stack = stack
        self.max_capacity = max_capacity

    @property
    def capacity(self) -> int:
        return self.stack.capacity

    def validate(self, capacity: object) -> int:
        """
        Check a requested capacity without applying it.

        Raises:
            InvalidCapacityError: If not a positive integer or above max_capacity
        """
        try:
            value = validate_capacity(capacity)
        except InvalidCapacityError:
            raise InvalidCapacityError(capacity, self.max_capacity) from None

        if self.max_capacity is not None and value > self.max_capacity:
            raise InvalidCapacityError(capacity, self.max_capacity)
        return value

    def set_capacity(self, capacity: int) -> int:
        """
        Set a new capacity and clear the stack.

        Returns:
            The capacity now in effect

        Raises:
            InvalidCapacityError: If the capacity is rejected (stack unchanged)
        """
        value = self.validate(capacity)
        discarded = len(self.stack)
        self.stack.set_capacity(value)
        logger.debug(f"capacity {value} applied, {discarded} element(s) discarded")
        return value

    def parse(self, text: str) -> int:
        """
        Parse user-entered capacity text.

        Surrounding whitespace is ignored. The rest must be a decimal
        integer; "12", " 7 " and "+3" parse, "abc", "2.5" and "" do not.

        Raises:
            InvalidCapacityError: If text is not a valid capacity
        """
        stripped = text.strip()
        if not _INTEGER_TEXT.fullmatch(stripped):
            raise InvalidCapacityError(text, self.max_capacity)
        return self.validate(int(stripped))

    def apply(self, text: str) -> int:
        """Parse capacity text and apply it. See parse() and set_capacity()."""
        return self.set_capacity(self.parse(text))
