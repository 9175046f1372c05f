"""Binary tree nodes and the standard depth-first and breadth-first traversals."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class TreeNode:
    """A binary tree node holding a value and its two subtrees."""

    value: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def level_order(root: TreeNode | None) -> list[Any]:
    """Return the values level by level, left to right."""
    if root is None:
        return []
    result: list[Any] = []
    pending = deque([root])
    while pending:
        node = pending.popleft()
        result.append(node.value)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return result


def preorder(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order (recursive)."""
    if root is None:
        return []
    return [root.value, *preorder(root.left), *preorder(root.right)]


def preorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return the values in node, left, right order using an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    pending = [root]
    while pending:
        node = pending.pop()
        result.append(node.value)
        if node.right is not None:
            pending.append(node.right)
        if node.left is not None:
            pending.append(node.left)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order (recursive)."""
    if root is None:
        return []
    return [*inorder(root.left), root.value, *inorder(root.right)]


def inorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return the values in left, node, right order using an explicit stack."""
    result: list[Any] = []
    pending: list[TreeNode] = []
    node = root
    while node is not None or pending:
        while node is not None:
            pending.append(node)
            node = node.left
        node = pending.pop()
        result.append(node.value)
        node = node.right
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order (recursive)."""
    if root is None:
        return []
    return [*postorder(root.left), *postorder(root.right), root.value]


def postorder_iterative(root: TreeNode | None) -> list[Any]:
    """Return the values in left, right, node order using two stacks."""
    if root is None:
        return []
    pending = [root]
    output: list[TreeNode] = []
    while pending:
        node = pending.pop()
        output.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.value for node in reversed(output)]