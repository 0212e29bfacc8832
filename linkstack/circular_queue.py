"""A fixed-capacity FIFO queue stored in a ring buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any


class QueueOverflowError(IndexError):
    """Raised when a value is added to a full queue."""


class QueueUnderflowError(IndexError):
    """Raised when a value is taken from an empty queue."""


class CircularQueue:
    """A first-in, first-out queue with a fixed number of slots."""

    DEFAULT_CAPACITY = 4

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        """The number of values the queue can hold at once."""
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear of the queue."""
        if self.is_full():
            raise QueueOverflowError("Queue Overflow")
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        if self.is_empty():
            raise QueueUnderflowError("Queue underflow")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the value at the front without removing it."""
        if self.is_empty():
            raise QueueUnderflowError("Empty")
        return self._slots[self._front]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size >= self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        """Yield the queued values from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"