"""Segment tree answering inclusive range queries under an associative combine."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

T = TypeVar("T")


class SegmentTree(Generic[T]):
    """Range-query tree built over a fixed sequence of values."""

    def __init__(self, values: Iterable[T], combine: Callable[[T, T], T]) -> None:
        self._values = list(values)
        if not self._values:
            raise ValueError("a segment tree needs at least one value")
        self._combine = combine
        self._tree: list[T | None] = [None] * (4 * len(self._values))
        self._build(0, 0, len(self._values) - 1)

    def __len__(self) -> int:
        return len(self._values)

    def _build(self, node: int, low: int, high: int) -> None:
        if low == high:
            self._tree[node] = self._values[low]
            return
        mid = (low + high) // 2
        self._build(2 * node + 1, low, mid)
        self._build(2 * node + 2, mid + 1, high)
        self._tree[node] = self._combine(
            self._tree[2 * node + 1], self._tree[2 * node + 2]
        )

    def query(self, left: int, right: int) -> T:
        """Combine the values from index ``left`` to ``right``, both inclusive."""
        if not 0 <= left <= right < len(self._values):
            raise IndexError(
                f"range [{left}, {right}] is outside 0..{len(self._values) - 1}"
            )
        return self._query(0, 0, len(self._values) - 1, left, right)

    def _query(self, node: int, low: int, high: int, left: int, right: int) -> T:
        if left <= low and high <= right:
            return self._tree[node]
        mid = (low + high) // 2
        if right <= mid:
            return self._query(2 * node + 1, low, mid, left, right)
        if left > mid:
            return self._query(2 * node + 2, mid + 1, high, left, right)
        return self._combine(
            self._query(2 * node + 1, low, mid, left, right),
            self._query(2 * node + 2, mid + 1, high, left, right),
        )


def max_segment_tree(values: Iterable[int]) -> SegmentTree[int]:
    """Build a tree answering range-maximum queries."""
    return SegmentTree(values, max)


def min_segment_tree(values: Iterable[int]) -> SegmentTree[int]:
    """Build a tree answering range-minimum queries."""
    return SegmentTree(values, min)