"""Queues on a plain array, a circular array, linked nodes and two stacks."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from dsakit.stacks import LinkedStack


class QueueFull(Exception):
    """Raised when adding to a queue that has no free slot."""


class QueueEmpty(Exception):
    """Raised when removing from a queue that holds nothing."""


class ArrayQueue:
    """A queue on an array whose rear only moves forward.

    Slots freed at the front are reused only once the queue has been emptied.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = -1
        self._rear = -1

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={list(self)!r})"

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        if self._rear == self.size - 1:
            raise QueueFull("queue full")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == -1:
            raise QueueEmpty("queue empty")
        value = self._slots[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        if self._front == -1:
            return iter(())
        return iter(self._slots[self._front : self._rear + 1])


class CircularQueue:
    """A queue on a ring of ``size`` slots, one of which always stays free."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self.size = size
        self._slots: list[Any] = [None] * size
        self._front = 0
        self._rear = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={list(self)!r})"

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        following = (self._rear + 1) % self.size
        if following == self._front:
            raise QueueFull("queue full")
        self._rear = following
        self._slots[following] = value

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front == self._rear:
            raise QueueEmpty("queue empty")
        self._front = (self._front + 1) % self.size
        value = self._slots[self._front]
        self._slots[self._front] = None
        return value

    def __iter__(self) -> Iterator[Any]:
        index = self._front
        while index != self._rear:
            index = (index + 1) % self.size
            yield self._slots[index]


@dataclass(eq=False)
class _Link:
    data: Any
    next: _Link | None = field(default=None, repr=False)


class LinkedQueue:
    """An unbounded queue kept as a chain of nodes."""

    def __init__(self) -> None:
        self._front: _Link | None = None
        self._rear: _Link | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def is_empty(self) -> bool:
        """True when the queue holds nothing."""
        return self._front is None

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        node = _Link(value)
        if self._rear is None:
            self._front = node
        else:
            self._rear.next = node
        self._rear = node

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front is None:
            raise QueueEmpty("queue empty")
        node = self._front
        self._front = node.next
        if self._front is None:
            self._rear = None
        return node.data

    def __iter__(self) -> Iterator[Any]:
        node = self._front
        while node is not None:
            yield node.data
            node = node.next


class TwoStackQueue:
    """A queue made of an inbox stack and an outbox stack."""

    def __init__(self) -> None:
        self._inbox: LinkedStack[Any] = LinkedStack()
        self._outbox: LinkedStack[Any] = LinkedStack()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def enqueue(self, value: Any) -> None:
        """Add a value at the rear."""
        self._inbox.push(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._outbox.is_empty():
            if self._inbox.is_empty():
                raise QueueEmpty("queue empty")
            while not self._inbox.is_empty():
                self._outbox.push(self._inbox.pop())
        return self._outbox.pop()

    def __iter__(self) -> Iterator[Any]:
        yield from self._outbox
        yield from reversed(list(self._inbox))