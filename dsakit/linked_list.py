"""A singly linked list of integers and helpers that work on chains of nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from functools import reduce
from itertools import pairwise


@dataclass(eq=False)
class Node:
    """One link of a chain: a value and the node after it."""

    data: int
    next: Node | None = field(default=None, repr=False)


def _iter_nodes(head: Node | None) -> Iterator[Node]:
    node = head
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A singly linked list; ``head`` is the first node or None when empty."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in _iter_nodes(self.head))

    def __len__(self) -> int:
        return sum(1 for _ in _iter_nodes(self.head))

    def _tail(self) -> Node | None:
        last = None
        for last in _iter_nodes(self.head):
            pass
        return last

    def append(self, value: int) -> None:
        """Add a value after the last node."""
        node = Node(value)
        tail = self._tail()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def prepend(self, value: int) -> None:
        """Add a value before the first node."""
        self.head = Node(value, self.head)

    def insert(self, position: int, value: int) -> None:
        """Insert a value so that it ends up at ``position`` (0 to ``len``)."""
        if not 0 <= position <= len(self):
            raise IndexError("invalid position")
        if position == 0:
            self.prepend(value)
            return
        previous = self.head
        for _ in range(position - 1):
            previous = previous.next
        previous.next = Node(value, previous.next)

    def insert_sorted(self, value: int) -> None:
        """Insert a value before the first node that is not smaller than it."""
        if self.head is None or self.head.data >= value:
            self.prepend(value)
            return
        previous = self.head
        while previous.next is not None and previous.next.data < value:
            previous = previous.next
        previous.next = Node(value, previous.next)

    def remove(self, value: int) -> None:
        """Unlink the first node holding ``value``."""
        if self.head is not None and self.head.data == value:
            self.head = self.head.next
            return
        for node in _iter_nodes(self.head):
            if node.next is not None and node.next.data == value:
                node.next = node.next.next
                return
        raise ValueError(f"{value!r} is not in the list")

    def sum(self) -> int:
        """Sum of all values."""
        return sum(self)

    def _require_nodes(self) -> None:
        if self.head is None:
            raise ValueError("list is empty")

    def max(self) -> int:
        """Largest value."""
        self._require_nodes()
        return max(self)

    def min(self) -> int:
        """Smallest value."""
        self._require_nodes()
        return min(self)

    def search(self, key: int) -> Node | None:
        """The first node holding ``key``, or None."""
        return next((node for node in _iter_nodes(self.head) if node.data == key), None)

    def move_to_front(self, key: int) -> Node | None:
        """Find ``key`` and move its node to the head; return the node or None."""
        previous: Node | None = None
        for node in _iter_nodes(self.head):
            if node.data == key:
                if previous is not None:
                    previous.next = node.next
                    node.next = self.head
                    self.head = node
                return node
            previous = node
        return None

    def is_sorted(self) -> bool:
        """True when no value is smaller than the one before it."""
        return all(a <= b for a, b in pairwise(self))

    def remove_duplicates(self) -> None:
        """Drop nodes equal to the node just before them."""
        node = self.head
        while node is not None and node.next is not None:
            if node.data == node.next.data:
                node.next = node.next.next
            else:
                node = node.next

    def reverse(self) -> None:
        """Reverse the links in place, iteratively."""
        previous: Node | None = None
        current = self.head
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the links in place, recursively."""

        def flip(node: Node | None) -> Node | None:
            if node is None or node.next is None:
                return node
            new_head = flip(node.next)
            node.next.next = node
            node.next = None
            return new_head

        self.head = flip(self.head)

    def concat(self, other: LinkedList) -> None:
        """Attach the nodes of ``other`` after the last node; ``other`` is left empty."""
        if other is self:
            raise ValueError("cannot concatenate a list with itself")
        tail = self._tail()
        if tail is None:
            self.head = other.head
        else:
            tail.next = other.head
        other.head = None

    def merge(self, other: LinkedList) -> None:
        """Merge the sorted nodes of ``other`` into this sorted list; ``other`` is left empty."""
        if other is self:
            raise ValueError("cannot merge a list with itself")
        self.head = merge_nodes(self.head, other.head)
        other.head = None

    def middle(self) -> Node | None:
        """The middle node (the later one for an even length), or None when empty."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
        return slow


def has_loop(head: Node | None) -> bool:
    """True when following ``next`` from ``head`` comes back to a node already seen."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def intersection(first: Node | None, second: Node | None) -> Node | None:
    """The first node shared by two chains that end in a common tail, or None."""
    first_nodes = list(_iter_nodes(first))
    second_nodes = list(_iter_nodes(second))
    joint: Node | None = None
    for a, b in zip(reversed(first_nodes), reversed(second_nodes)):
        if a is not b:
            break
        joint = a
    return joint


def merge_nodes(first: Node | None, second: Node | None) -> Node | None:
    """Relink two sorted chains into one sorted chain and return its head."""
    anchor = Node(0)
    last = anchor
    while first is not None and second is not None:
        if first.data < second.data:
            last.next = first
            first = first.next
        else:
            last.next = second
            second = second.next
        last = last.next
    last.next = first if first is not None else second
    return anchor.next


def merge_k(lists: Iterable[Node | None]) -> Node | None:
    """Merge any number of sorted chains, one after another, into one sorted chain."""
    return reduce(merge_nodes, lists, None)