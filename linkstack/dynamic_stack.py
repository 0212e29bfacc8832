"""An unbounded LIFO stack built from linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Optional


class StackUnderflowError(IndexError):
    """Raised when a value is taken from an empty stack."""


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class DynamicStack:
    """A last-in, first-out stack that grows without limit."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        self._head = _Node(value, self._head)
        self._size += 1

    def pop(self) -> Any:
        """Remove and return the top value."""
        if self._head is None:
            raise StackUnderflowError("Stack Underflow")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if self._head is None:
            raise StackUnderflowError("Stack is empty")
        return self._head.value

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the values from top to bottom."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"