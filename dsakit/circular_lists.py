"""Circular singly and doubly linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from dsakit.linked_list import Node


class CircularLinkedList:
    """A singly linked list whose last node links back to the first."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _nodes(self) -> Iterator[Node]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def append(self, value: int) -> None:
        """Add a value after the last node."""
        node = Node(value)
        if self._tail is None:
            node.next = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_head(self) -> int:
        """Remove the first node and return its value."""
        if self._tail is None:
            raise IndexError("pop from an empty list")
        head = self._tail.next
        if head is self._tail:
            self._tail = None
        else:
            self._tail.next = head.next
        self._size -= 1
        return head.data

    def remove(self, value: int) -> None:
        """Unlink the first node holding ``value``."""
        previous = self._tail
        for _ in range(self._size):
            target = previous.next
            if target.data == value:
                if target is previous:
                    self._tail = None
                else:
                    previous.next = target.next
                    if target is self._tail:
                        self._tail = previous
                self._size -= 1
                return
            previous = target
        raise ValueError(f"{value!r} is not in the list")


@dataclass(eq=False)
class _DoubleNode:
    data: int
    prev: _DoubleNode | None = field(default=None, repr=False)
    next: _DoubleNode | None = field(default=None, repr=False)


class CircularDoublyLinkedList:
    """A doubly linked list whose ends link to each other."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __iter__(self) -> Iterator[int]:
        node = self._head
        for _ in range(self._size):
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def _link_before_head(self, value: int) -> _DoubleNode:
        node = _DoubleNode(value)
        if self._head is None:
            node.prev = node.next = node
            self._head = node
        else:
            tail = self._head.prev
            node.prev = tail
            node.next = self._head
            tail.next = node
            self._head.prev = node
        self._size += 1
        return node

    def append(self, value: int) -> None:
        """Add a value after the last node."""
        self._link_before_head(value)

    def prepend(self, value: int) -> None:
        """Add a value before the first node."""
        self._head = self._link_before_head(value)