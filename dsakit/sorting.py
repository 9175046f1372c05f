"""Comparison sorts. Each returns a new sorted list and leaves its input alone."""

from __future__ import annotations

from collections.abc import Iterable


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Sort by repeatedly swapping adjacent out-of-order values."""
    items = list(values)
    for done in range(len(items)):
        for j in range(len(items) - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[int]) -> list[int]:
    """Sort by inserting each value into the sorted prefix before it."""
    items = list(values)
    for i in range(1, len(items)):
        current = items[i]
        j = i - 1
        while j >= 0 and current < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = current
    return items


def merge_sort(values: Iterable[int]) -> list[int]:
    """Sort by splitting in half, sorting each half and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def _merge(left: list[int], right: list[int]) -> list[int]:
    merged: list[int] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def quick_sort(values: Iterable[int]) -> list[int]:
    """Sort by partitioning around the last value of each range."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def _quick_sort(items: list[int], low: int, high: int) -> None:
    if low < high:
        pivot = _partition(items, low, high)
        _quick_sort(items, low, pivot - 1)
        _quick_sort(items, pivot + 1, high)


def _partition(items: list[int], low: int, high: int) -> int:
    pivot_value = items[high]
    store = low
    for j in range(low, high):
        if items[j] < pivot_value:
            items[store], items[j] = items[j], items[store]
            store += 1
    items[store], items[high] = items[high], items[store]
    return store


def selection_sort(values: Iterable[int]) -> list[int]:
    """Sort by moving the smallest remaining value to the front each pass."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items