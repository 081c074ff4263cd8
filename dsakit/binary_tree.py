"""A linked binary tree node and the classic traversals and counts over it."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A tree node holding a value and links to its left and right children."""

    data: Any
    left: TreeNode | None = field(default=None, repr=False)
    right: TreeNode | None = field(default=None, repr=False)


def inorder(root: TreeNode | None) -> list[Any]:
    """Values in left, node, right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def preorder(root: TreeNode | None) -> list[Any]:
    """Values in node, left, right order."""
    if root is None:
        return []
    return [root.data, *preorder(root.left), *preorder(root.right)]


def postorder(root: TreeNode | None) -> list[Any]:
    """Values in left, right, node order."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.data]


def level_order(root: TreeNode | None) -> list[list[Any]]:
    """Values grouped by level, each level from left to right."""
    levels: list[list[Any]] = []
    if root is None:
        return levels
    pending: deque[TreeNode] = deque([root])
    while pending:
        level: list[Any] = []
        for _ in range(len(pending)):
            node = pending.popleft()
            level.append(node.data)
            if node.left is not None:
                pending.append(node.left)
            if node.right is not None:
                pending.append(node.right)
        levels.append(level)
    return levels


def count(root: TreeNode | None) -> int:
    """Number of nodes."""
    if root is None:
        return 0
    return count(root.left) + count(root.right) + 1


def count_leaves(root: TreeNode | None) -> int:
    """Number of nodes without children."""
    if root is None:
        return 0
    if root.left is None and root.right is None:
        return 1
    return count_leaves(root.left) + count_leaves(root.right)


def count_internal(root: TreeNode | None) -> int:
    """Number of nodes with at least one child."""
    if root is None or (root.left is None and root.right is None):
        return 0
    return count_internal(root.left) + count_internal(root.right) + 1


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path; 0 for an empty tree."""
    if root is None:
        return 0
    return max(height(root.left), height(root.right)) + 1