"""Shape properties and views of binary trees."""

from __future__ import annotations

from typing import Any

from dsakit.binary_tree import TreeNode


def _is_leaf(node: TreeNode) -> bool:
    return node.left is None and node.right is None


def height(root: TreeNode | None) -> int:
    """Return the number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def is_balanced(root: TreeNode | None) -> bool:
    """Return True if at every node the subtree heights differ by at most one."""

    def _checked_height(node: TreeNode | None) -> int:
        if node is None:
            return 0
        left = _checked_height(node.left)
        if left < 0:
            return -1
        right = _checked_height(node.right)
        if right < 0 or abs(left - right) > 1:
            return -1
        return 1 + max(left, right)

    return _checked_height(root) >= 0


def diameter(root: TreeNode | None) -> int:
    """Return the number of edges on the longest path between any two nodes."""
    best = 0

    def _height(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = _height(node.left)
        right = _height(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    _height(root)
    return best


def boundary_traversal(root: TreeNode | None) -> list[Any]:
    """Return the root, the left edge, the leaves, then the right edge bottom-up."""
    if root is None:
        return []
    result = [root.value]
    if _is_leaf(root):
        return result

    node = root.left
    while node is not None:
        if not _is_leaf(node):
            result.append(node.value)
        node = node.left if node.left is not None else node.right

    def _leaves(node: TreeNode | None) -> None:
        if node is None:
            return
        if _is_leaf(node):
            result.append(node.value)
        _leaves(node.left)
        _leaves(node.right)

    _leaves(root)

    right_edge: list[Any] = []
    node = root.right
    while node is not None:
        if not _is_leaf(node):
            right_edge.append(node.value)
        node = node.right if node.right is not None else node.left
    result.extend(reversed(right_edge))
    return result


def root_to_node_path(root: TreeNode | None, target: Any) -> list[Any] | None:
    """Return the values from the root down to the first node holding ``target``.

    Right subtrees are searched before left ones. Returns None if not found.
    """
    path: list[Any] = []

    def _search(node: TreeNode | None) -> bool:
        if node is None:
            return False
        path.append(node.value)
        if node.value == target or _search(node.right) or _search(node.left):
            return True
        path.pop()
        return False

    return path if _search(root) else None


def are_identical(first: TreeNode | None, second: TreeNode | None) -> bool:
    """Return True if both trees have the same shape and values."""
    if first is None or second is None:
        return first is second
    return (
        first.value == second.value
        and are_identical(first.left, second.left)
        and are_identical(first.right, second.right)
    )


def is_symmetric(root: TreeNode | None) -> bool:
    """Return True if the tree is a mirror image of itself."""

    def _mirrored(a: TreeNode | None, b: TreeNode | None) -> bool:
        if a is None or b is None:
            return a is b
        return (
            a.value == b.value
            and _mirrored(a.left, b.right)
            and _mirrored(a.right, b.left)
        )

    return root is None or _mirrored(root.left, root.right)


def _columns(root: TreeNode | None) -> dict[int, list[Any]]:
    columns: dict[int, list[Any]] = {}

    def _walk(node: TreeNode | None, distance: int) -> None:
        if node is None:
            return
        columns.setdefault(distance, []).append(node.value)
        _walk(node.left, distance - 1)
        _walk(node.right, distance + 1)

    _walk(root, 0)
    return {distance: columns[distance] for distance in sorted(columns)}


def vertical_order(root: TreeNode | None) -> dict[int, list[Any]]:
    """Map each horizontal distance from the root, ascending, to its values in preorder."""
    return _columns(root)


def top_view(root: TreeNode | None) -> list[Any]:
    """Return, per column from left to right, the first value met in preorder."""
    return [values[0] for values in _columns(root).values()]


def bottom_view(root: TreeNode | None) -> list[Any]:
    """Return, per column from left to right, the last value met in preorder."""
    return [values[-1] for values in _columns(root).values()]


def _first_per_level(root: TreeNode | None, right_first: bool) -> list[Any]:
    seen: list[Any] = []

    def _walk(node: TreeNode | None, level: int) -> None:
        if node is None:
            return
        if level == len(seen):
            seen.append(node.value)
        first, second = (node.right, node.left) if right_first else (node.left, node.right)
        _walk(first, level + 1)
        _walk(second, level + 1)

    _walk(root, 0)
    return seen


def left_view(root: TreeNode | None) -> list[Any]:
    """Return the leftmost value of each level."""
    return _first_per_level(root, right_first=False)


def right_view(root: TreeNode | None) -> list[Any]:
    """Return the rightmost value of each level."""
    return _first_per_level(root, right_first=True)