"""A binary search tree of distinct, comparable values."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from dsakit.binary_tree import TreeNode, height, inorder, postorder, preorder


def _require_distinct(items: list[Any]) -> None:
    if len(set(items)) != len(items):
        raise ValueError("values must be distinct")


class BinarySearchTree:
    """A binary search tree; ``root`` is the top node or None when empty.

    Inserting a value already present leaves the tree unchanged.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: TreeNode | None = None
        for value in values:
            self.insert(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.inorder()!r})"

    def insert(self, value: Any) -> None:
        """Add a value, ignoring it when it is already present."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value == node.data:
                return
            if value < node.data:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right

    def __contains__(self, key: Any) -> bool:
        node = self.root
        while node is not None:
            if key == node.data:
                return True
            node = node.left if key < node.data else node.right
        return False

    def delete(self, key: Any) -> None:
        """Remove ``key`` if present.

        A node with two children takes the value of its in-order predecessor
        when its left subtree is taller, otherwise of its in-order successor.
        """
        self.root = self._delete(self.root, key)

    def _delete(self, node: TreeNode | None, key: Any) -> TreeNode | None:
        if node is None:
            return None
        if key < node.data:
            node.left = self._delete(node.left, key)
        elif key > node.data:
            node.right = self._delete(node.right, key)
        elif node.left is None:
            return node.right
        elif node.right is None:
            return node.left
        elif height(node.left) > height(node.right):
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
        return node

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path; 0 when empty."""
        return height(self.root)

    def inorder(self) -> list[Any]:
        """Values in ascending order."""
        return inorder(self.root)

    def preorder(self) -> list[Any]:
        """Values in node, left, right order."""
        return preorder(self.root)

    def postorder(self) -> list[Any]:
        """Values in left, right, node order."""
        return postorder(self.root)

    @classmethod
    def from_preorder(cls, values: Iterable[Any]) -> BinarySearchTree:
        """Rebuild the tree whose preorder traversal is ``values``."""
        items = list(values)
        _require_distinct(items)
        tree = cls()
        if not items:
            return tree
        tree.root = TreeNode(items[0])
        stack = [tree.root]
        for value in items[1:]:
            node = TreeNode(value)
            if value < stack[-1].data:
                stack[-1].left = node
            else:
                parent = stack.pop()
                while stack and value > stack[-1].data:
                    parent = stack.pop()
                parent.right = node
            stack.append(node)
        return tree

    @classmethod
    def from_postorder(cls, values: Iterable[Any]) -> BinarySearchTree:
        """Rebuild the tree whose postorder traversal is ``values``."""
        items = list(values)
        _require_distinct(items)
        tree = cls()
        if not items:
            return tree
        tree.root = TreeNode(items[-1])
        stack = [tree.root]
        for value in reversed(items[:-1]):
            node = TreeNode(value)
            if value > stack[-1].data:
                stack[-1].right = node
            else:
                parent = stack.pop()
                while stack and value < stack[-1].data:
                    parent = stack.pop()
                parent.left = node
            stack.append(node)
        return tree