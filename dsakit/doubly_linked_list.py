"""A doubly linked list of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class _DoubleNode:
    data: int
    prev: _DoubleNode | None = field(default=None, repr=False)
    next: _DoubleNode | None = field(default=None, repr=False)


class DoublyLinkedList:
    """A list whose nodes link both to the next and to the previous node."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def append(self, value: int) -> None:
        """Add a value after the last node."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: int) -> None:
        """Add a value before the first node."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def _node_at(self, index: int) -> _DoubleNode:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert(self, index: int, value: int) -> None:
        """Insert a value at ``index``; an index past the end appends."""
        if index < 0:
            raise IndexError("index must be non-negative")
        if index == 0:
            self.prepend(value)
            return
        if index >= self._size:
            self.append(value)
            return
        after = self._node_at(index)
        before = after.prev
        node = _DoubleNode(value, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def _unlink(self, node: _DoubleNode) -> int:
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.data

    def pop_head(self) -> int:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        return self._unlink(self._head)

    def delete(self, index: int) -> int:
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._size:
            raise IndexError("invalid index")
        return self._unlink(self._node_at(index))

    def reverse(self) -> None:
        """Reverse the list in place by swapping every node's links."""
        node = self._head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self._head, self._tail = self._tail, self._head