"""Binary search over sorted sequences and row-major sorted grids."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Sequence


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            return mid
        if target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return None


def count_greater_or_equal(values: Sequence[int], k: int) -> int:
    """Count the values of a sorted sequence that are at least ``k``."""
    return len(values) - bisect_left(values, k)


def count_less_or_equal(values: Sequence[int], k: int) -> int:
    """Count the values of a sorted sequence that are at most ``k``."""
    return bisect_right(values, k)


def first_occurrence(values: Sequence[int], target: int) -> int | None:
    """Return the lowest index of ``target`` in sorted ``values``, or None."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return None


def last_occurrence(values: Sequence[int], target: int) -> int | None:
    """Return the highest index of ``target`` in sorted ``values``, or None."""
    index = bisect_right(values, target) - 1
    if index >= 0 and values[index] == target:
        return index
    return None


def count_occurrences(values: Sequence[int], k: int) -> int:
    """Count how often ``k`` appears in sorted ``values``."""
    return bisect_right(values, k) - bisect_left(values, k)


def grid_search(
    grid: Sequence[Sequence[int]], target: int
) -> tuple[int, int] | None:
    """Find ``target`` in a grid sorted in row-major order.

    Returns the (row, column) position, or None if the value is absent.
    """
    if not grid or not grid[0]:
        return None
    low, high = 0, len(grid) - 1
    while low <= high:
        mid = (low + high) // 2
        row = grid[mid]
        if target < row[0]:
            high = mid - 1
        elif target > row[-1]:
            low = mid + 1
        else:
            column = binary_search(row, target)
            return None if column is None else (mid, column)
    return None