"""A self-balancing AVL search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class AVLNode:
    """A tree node that records the height of the subtree it roots."""

    data: Any
    left: AVLNode | None = field(default=None, repr=False)
    right: AVLNode | None = field(default=None, repr=False)
    height: int = 1


def _height(node: AVLNode | None) -> int:
    return 0 if node is None else node.height


def _update(node: AVLNode) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _balance(node: AVLNode | None) -> int:
    if node is None:
        return 0
    return _height(node.left) - _height(node.right)


def _rotate_right(node: AVLNode) -> AVLNode:
    pivot = node.left
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_left(node: AVLNode) -> AVLNode:
    pivot = node.right
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _rebalance(node: AVLNode) -> AVLNode:
    _update(node)
    balance = _balance(node)
    if balance > 1:
        if _balance(node.left) < 0:
            node.left = _rotate_left(node.left)
        return _rotate_right(node)
    if balance < -1:
        if _balance(node.right) > 0:
            node.right = _rotate_right(node.right)
        return _rotate_left(node)
    return node


class AVLTree:
    """A search tree kept balanced by rotations; duplicates are ignored."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: AVLNode | None = None
        for value in values:
            self.insert(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"

    def insert(self, value: Any) -> None:
        """Add a value, ignoring it when it is already present."""
        self.root = self._insert(self.root, value)

    def _insert(self, node: AVLNode | None, value: Any) -> AVLNode:
        if node is None:
            return AVLNode(value)
        if value < node.data:
            node.left = self._insert(node.left, value)
        elif value > node.data:
            node.right = self._insert(node.right, value)
        else:
            return node
        return _rebalance(node)

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present.

        The removed node takes the value of its in-order predecessor when its
        left subtree is taller, otherwise of its in-order successor.
        """
        self.root = self._delete(self.root, key)

    def _delete(self, node: AVLNode | None, key: Any) -> AVLNode | None:
        if node is None:
            return None
        if key < node.data:
            node.left = self._delete(node.left, key)
        elif key > node.data:
            node.right = self._delete(node.right, key)
        elif node.left is None and node.right is None:
            return None
        elif _height(node.left) > _height(node.right):
            predecessor = node.left
            while predecessor.right is not None:
                predecessor = predecessor.right
            node.data = predecessor.data
            node.left = self._delete(node.left, predecessor.data)
        else:
            successor = node.right
            while successor.left is not None:
                successor = successor.left
            node.data = successor.data
            node.right = self._delete(node.right, successor.data)
        return _rebalance(node)

    def search(self, key: Any) -> AVLNode | None:
        """The node holding ``key``, or None."""
        node = self.root
        while node is not None:
            if key == node.data:
                return node
            node = node.left if key < node.data else node.right
        return None

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def inorder(self) -> list[Any]:
        """Values in ascending order, collected with an explicit stack."""
        result: list[Any] = []
        stack: list[AVLNode] = []
        current = self.root
        while current is not None or stack:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.data)
            current = current.right
        return result

    def inorder_recursive(self) -> list[Any]:
        """Values in ascending order, collected recursively."""

        def walk(node: AVLNode | None) -> list[Any]:
            if node is None:
                return []
            return [*walk(node.left), node.data, *walk(node.right)]

        return walk(self.root)

    def level_order(self) -> list[list[Any]]:
        """Values grouped by level, each level listed from right to left."""
        levels: list[list[Any]] = []
        if self.root is None:
            return levels
        pending: deque[AVLNode] = deque([self.root])
        while pending:
            level: list[Any] = []
            for _ in range(len(pending)):
                node = pending.popleft()
                level.append(node.data)
                if node.right is not None:
                    pending.append(node.right)
                if node.left is not None:
                    pending.append(node.left)
            levels.append(level)
        return levels