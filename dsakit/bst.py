"""Binary search tree of distinct values with search, ceil and floor."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any


@dataclass
class BSTNode:
    """A tree node holding a value and its two subtrees."""

    value: Any
    left: BSTNode | None = None
    right: BSTNode | None = None


def is_bst(root: BSTNode | None) -> bool:
    """Return True if every left descendant is smaller and every right one larger."""

    def _check(node: BSTNode | None, low: Any, high: Any) -> bool:
        if node is None:
            return True
        if low is not None and node.value <= low:
            return False
        if high is not None and node.value >= high:
            return False
        return _check(node.left, low, node.value) and _check(
            node.right, node.value, high
        )

    return _check(root, None, None)


class BinarySearchTree:
    """Binary search tree; inserting a value already present has no effect."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: BSTNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless it is already in the tree."""
        if self.root is None:
            self.root = BSTNode(value)
            return
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = BSTNode(value)
                    return
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = BSTNode(value)
                    return
                node = node.right
            else:
                return

    def inorder(self) -> list[Any]:
        """Return the values in ascending order."""
        result: list[Any] = []
        pending: list[BSTNode] = []
        node = self.root
        while node is not None or pending:
            while node is not None:
                pending.append(node)
                node = node.left
            node = pending.pop()
            result.append(node.value)
            node = node.right
        return result

    def __contains__(self, value: Any) -> bool:
        node = self.root
        while node is not None:
            if value == node.value:
                return True
            node = node.left if value < node.value else node.right
        return False

    def ceil(self, value: Any) -> Any | None:
        """Return the smallest stored value not below ``value``, or None."""
        best = None
        node = self.root
        while node is not None:
            if node.value == value:
                return node.value
            if value < node.value:
                best = node.value
                node = node.left
            else:
                node = node.right
        return best

    def floor(self, value: Any) -> Any | None:
        """Return the largest stored value not above ``value``, or None."""
        best = None
        node = self.root
        while node is not None:
            if node.value == value:
                return node.value
            if value < node.value:
                node = node.left
            else:
                best = node.value
                node = node.right
        return best

    def is_valid(self) -> bool:
        """Return True if the tree satisfies the search-tree ordering."""
        return is_bst(self.root)