"""Stacks backed by a fixed-size array and by a chain of linked nodes."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class StackOverflow(OverflowError):
    """Raised when pushing onto a stack that has no free capacity."""


class StackUnderflow(IndexError):
    """Raised when popping or reading the top of an empty stack."""


class ArrayStack:
    """A stack with a fixed capacity, stored bottom first."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must be non-negative")
        self.size = size
        self._items: list[Any] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size}, items={self._items!r})"

    def push(self, value: Any) -> None:
        """Put a value on top of the stack."""
        if self.is_full():
            raise StackOverflow("stack overflow")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise StackUnderflow("stack underflow")
        return self._items.pop()

    def peek(self, index: int) -> Any:
        """The value at ``index``, counting from the bottom of the stack."""
        if not 0 <= index < len(self._items):
            raise IndexError("peek index out of range")
        return self._items[index]

    def top(self) -> Any:
        """The top value, left in place."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """True when the stack holds no values."""
        return not self._items

    def is_full(self) -> bool:
        """True when the stack has reached its capacity."""
        return len(self._items) >= self.size

    def __iter__(self) -> Iterator[Any]:
        """Values from the bottom of the stack to the top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)


@dataclass(eq=False)
class _Link(Generic[T]):
    data: T
    next: _Link[T] | None = field(default=None, repr=False)


class LinkedStack(Generic[T]):
    """An unbounded stack kept as a chain of nodes, the top node first."""

    def __init__(self) -> None:
        self._top: _Link[T] | None = None
        self._size = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def push(self, value: T) -> None:
        """Put a value on top of the stack."""
        self._top = _Link(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._top is None:
            raise StackUnderflow("stack underflow")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self, index: int) -> T:
        """The value ``index`` places below the top (0 is the top)."""
        if not 0 <= index < self._size:
            raise IndexError("peek index out of range")
        node = self._top
        for _ in range(index):
            node = node.next
        return node.data

    def top(self) -> T:
        """The top value, left in place."""
        if self._top is None:
            raise StackUnderflow("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        """True when the stack holds no values."""
        return self._top is None

    def __iter__(self) -> Iterator[T]:
        """Values from the top of the stack to the bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size