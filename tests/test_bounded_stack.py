import pytest

from linkstack.bounded_stack import BoundedStack, StackOverflowError
from linkstack.dynamic_stack import StackUnderflowError


def test_default_capacity_is_four():
    assert BoundedStack().capacity == 4


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack().peek()


def test_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack().pop()


def test_push_and_peek():
    stack = BoundedStack()
    stack.push(3)
    assert stack.peek() == 3
    assert len(stack) == 1


def test_overflow_raises():
    stack = BoundedStack()
    for value in (1, 2, 3, 4):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(5)
    assert list(stack) == [4, 3, 2, 1]


def test_pop_returns_lifo():
    stack = BoundedStack()
    for value in (3, 4, 2):
        stack.push(value)
    assert stack.pop() == 2
    assert stack.pop() == 4
    assert stack.pop() == 3
    assert stack.is_empty()


def test_remove_upper_keeps_small_values_in_order():
    stack = BoundedStack()
    for value in (3, 4, 2):
        stack.push(value)
    stack.remove_upper(3)
    assert stack.peek() == 2
    assert len(stack) == 2
    assert list(stack) == [2, 3]


def test_remove_lower_keeps_large_values_in_order():
    stack = BoundedStack()
    for value in (3, 4, 2, 5):
        stack.push(value)
    stack.remove_lower(3)
    assert list(stack) == [5, 4, 3]


def test_remove_on_empty_stack_stays_empty():
    stack = BoundedStack()
    stack.remove_lower(0)
    stack.remove_upper(0)
    assert stack.is_empty()


def test_filters_partition_contents():
    values = [6, 1, 9, 4]
    low = BoundedStack()
    high = BoundedStack()
    for value in values:
        low.push(value)
        high.push(value)
    low.remove_upper(5)
    high.remove_lower(6)
    assert sorted(list(low) + list(high)) == sorted(values)
    assert all(item <= 5 for item in low)
    assert all(item >= 6 for item in high)


def test_space_freed_after_filtering():
    stack = BoundedStack(2)
    stack.push(10)
    stack.push(1)
    stack.remove_upper(5)
    stack.push(2)
    assert list(stack) == [2, 1]


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        BoundedStack(capacity)