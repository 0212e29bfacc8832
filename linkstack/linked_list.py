"""Singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class _Node:
    value: Any
    next: Optional["_Node"] = None


class SinglyLinkedList:
    """A list of values linked forward from a head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def reverse(self) -> None:
        """Reverse the list in place."""
        previous: Optional[_Node] = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the values separated by spaces, or a note that the list is empty."""
        if self._head is None:
            return "Empty list"
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyNode:
    """A node of a doubly linked list, linked both ways."""

    __slots__ = ("value", "prev", "next", "_owner")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[DoublyNode] = None
        self.next: Optional[DoublyNode] = None
        self._owner: Optional[DoublyLinkedList] = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class DoublyLinkedList:
    """A list of nodes linked in both directions, with head and tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> DoublyNode:
        """Add a value at the end of the list and return its node."""
        node = DoublyNode(value)
        self.append_node(node)
        return node

    def append_node(self, node: DoublyNode) -> None:
        """Link an existing, detached node at the end of the list."""
        if node._owner is not None:
            raise ValueError("node already belongs to a list")
        node.prev = self.tail
        node.next = None
        if self.tail is None:
            self.head = node
        else:
            self.tail.next = node
        self.tail = node
        node._owner = self
        self._size += 1

    def remove_node(self, node: DoublyNode) -> None:
        """Unlink a node of this list."""
        if node._owner is not self:
            raise ValueError("node does not belong to this list")
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        node.prev = node.next = None
        node._owner = None
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def render(self, reverse: bool = False) -> str:
        """Return the values separated by spaces, tail first if ``reverse``."""
        if self.head is None:
            return "Empty List"
        values = reversed(self) if reverse else iter(self)
        return " ".join(str(value) for value in values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"