# =============================================================================
# test_capacity.py - Capacity Controller Unit Tests
# =============================================================================
# Tests for capacity validation, parsing of user-entered text, the optional
# maximum, and the clear-on-resize policy.
# =============================================================================

import pytest

from stacklab.capacity import CapacityController
from stacklab.errors import ErrorKind, InvalidCapacityError
from stacklab.stack import BoundedStack


@pytest.fixture
def filled():
    """A capacity-5 stack holding three elements, and its controller."""
    stack = BoundedStack(5)
    for value in ("a", "b", "c"):
        stack.push(value)
    return stack, CapacityController(stack)


class TestSetCapacity:
    """Test applying integer capacities."""

    def test_valid_capacity_clears(self, filled):
        stack, controller = filled
        assert controller.set_capacity(8) == 8
        assert controller.capacity == 8
        assert len(stack) == 0

    @pytest.mark.parametrize("capacity", [0, -1, 3.0, None])
    def test_invalid_capacity_keeps_state(self, filled, capacity):
        stack, controller = filled
        with pytest.raises(InvalidCapacityError) as exc_info:
            controller.set_capacity(capacity)
        assert exc_info.value.kind is ErrorKind.INVALID_CAPACITY
        assert stack.capacity == 5
        assert stack.items() == ["c", "b", "a"]


class TestMaxCapacity:
    """Test the configured upper bound."""

    def test_above_maximum_rejected(self):
        stack = BoundedStack(5)
        stack.push("kept")
        controller = CapacityController(stack, max_capacity=10)

        with pytest.raises(InvalidCapacityError, match="between 1 and 10"):
            controller.set_capacity(11)
        assert stack.items() == ["kept"]

    def test_maximum_itself_allowed(self):
        controller = CapacityController(BoundedStack(5), max_capacity=10)
        assert controller.set_capacity(10) == 10


class TestParse:
    """Test parsing of user-entered capacity text."""

    @pytest.mark.parametrize("text, expected", [
        ("12", 12),
        (" 7 ", 7),
        ("+3", 3),
        ("1", 1),
    ])
    def test_valid_text(self, text, expected):
        assert CapacityController(BoundedStack()).parse(text) == expected

    @pytest.mark.parametrize("text", ["", "   ", "abc", "2.5", "0", "-4", "12abc", "1 2"])
    def test_invalid_text(self, text):
        with pytest.raises(InvalidCapacityError):
            CapacityController(BoundedStack()).parse(text)

    def test_apply_parses_and_clears(self, filled):
        stack, controller = filled
        assert controller.apply("2") == 2
        assert stack.capacity == 2
        assert stack.is_empty()

    def test_apply_invalid_keeps_state(self, filled):
        stack, controller = filled
        with pytest.raises(InvalidCapacityError):
            controller.apply("none")
        assert len(stack) == 3
