"""A fixed-capacity LIFO stack with threshold filtering."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from linkstack.dynamic_stack import StackUnderflowError


class StackOverflowError(IndexError):
    """Raised when a value is pushed onto a full stack."""


class BoundedStack:
    """A last-in, first-out stack holding at most ``capacity`` values."""

    DEFAULT_CAPACITY = 4

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        if self.is_full():
            raise StackOverflowError("Stack Overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflowError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        return reversed(self._items)

    def _keep(self, predicate: Callable[[Any], bool]) -> None:
        self._items = [item for item in self._items if predicate(item)]

    def remove_lower(self, threshold: Any) -> None:
        """Drop every value below ``threshold``, keeping the order of the rest."""
        self._keep(lambda item: item >= threshold)

    def remove_upper(self, threshold: Any) -> None:
        """Drop every value above ``threshold``, keeping the order of the rest."""
        self._keep(lambda item: item <= threshold)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self._capacity})"