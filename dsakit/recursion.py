"""Recursive solutions to counting, enumeration and classic puzzles."""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence
from functools import lru_cache


def binary_representation(n: int) -> str:
    """Return the binary digits of ``n``; zero gives an empty string."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return ""
    return binary_representation(n // 2) + str(n % 2)


def count_subsequences_with_sum(values: Sequence[int], k: int) -> int:
    """Count the subsequences of ``values`` whose elements add up to ``k``."""

    def _count(index: int, total: int) -> int:
        if index == len(values):
            return int(total == k)
        value = values[index]
        return _count(index + 1, total + value) + _count(index + 1, total)

    return _count(0, 0)


def digit_sum(n: int) -> int:
    """Return the sum of the decimal digits of ``n``."""
    n = abs(n)
    if n == 0:
        return 0
    return digit_sum(n // 10) + n % 10


def factorial(n: int) -> int:
    """Return n! computed recursively, with 0! = 1."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n == 0:
        return 1
    return n * factorial(n - 1)


def combination_sum(values: Sequence[int], target: int) -> list[list[int]]:
    """Return every combination of ``values`` (each usable repeatedly) summing to ``target``."""
    if any(value <= 0 for value in values):
        raise ValueError("values must be positive")
    found: list[list[int]] = []
    chosen: list[int] = []

    def _search(index: int, remaining: int) -> None:
        if index == len(values):
            if remaining == 0:
                found.append(list(chosen))
            return
        value = values[index]
        if value <= remaining:
            chosen.append(value)
            _search(index, remaining - value)
            chosen.pop()
        _search(index + 1, remaining)

    _search(0, target)
    return found


def josephus(n: int, k: int) -> int:
    """Return the 0-based position of the survivor when every k-th of n is removed."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return 0
    return (josephus(n - 1, k) + k) % n


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number by plain recursion."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 1:
        return n
    return fibonacci(n - 1) + fibonacci(n - 2)


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same in both directions."""

    def _check(low: int, high: int) -> bool:
        if low >= high:
            return True
        return text[low] == text[high] and _check(low + 1, high - 1)

    return _check(0, len(text) - 1)


def permutations(values: Sequence[int]) -> list[list[int]]:
    """Return all orderings of ``values``, picking unused positions left to right."""
    result: list[list[int]] = []
    current: list[int] = []
    used = [False] * len(values)

    def _build() -> None:
        if len(current) == len(values):
            result.append(list(current))
            return
        for index, value in enumerate(values):
            if not used[index]:
                used[index] = True
                current.append(value)
                _build()
                current.pop()
                used[index] = False

    _build()
    return result


def count_down(n: int) -> list[int]:
    """Return n, n-1, ..., 1."""
    if n <= 0:
        return []
    return [n, *count_down(n - 1)]


def count_up(n: int) -> list[int]:
    """Return 1, 2, ..., n."""
    if n <= 0:
        return []
    return [*count_up(n - 1), n]


def repeat_name(start: int, end: int) -> list[str]:
    """Return "Name" once for every counter value from ``start`` to ``end``."""
    if start > end:
        return []
    return ["Name", *repeat_name(start + 1, end)]


def recursion_trace(limit: int) -> list[int]:
    """Return the values seen before and after each call of a counter up to ``limit``."""

    def _trace(n: int) -> list[int]:
        if n >= limit:
            return []
        return [n, *_trace(n + 1), n + 1]

    return _trace(0)


def reverse_in_place(values: MutableSequence[int]) -> None:
    """Reverse ``values`` in place by swapping its ends inwards."""

    def _swap(low: int, high: int) -> None:
        if low >= high:
            return
        values[low], values[high] = values[high], values[low]
        _swap(low + 1, high - 1)

    _swap(0, len(values) - 1)


def rope_cutting(length: int, first: int, second: int, third: int) -> int | None:
    """Return the most pieces a rope can be cut into using the three piece lengths.

    Returns None if the rope cannot be cut exactly.
    """
    pieces = (first, second, third)
    if min(pieces) <= 0:
        raise ValueError("piece lengths must be positive")

    @lru_cache(maxsize=None)
    def _best(remaining: int) -> int:
        if remaining == 0:
            return 0
        if remaining < 0:
            return -1
        result = max(_best(remaining - piece) for piece in pieces)
        return -1 if result == -1 else result + 1

    best = _best(length)
    return None if best == -1 else best


def string_permutations(text: str) -> list[str]:
    """Return the permutations of ``text`` generated by swapping each position in turn."""
    result: list[str] = []

    def _permute(chars: list[str], position: int) -> None:
        if position == len(chars) - 1:
            result.append("".join(chars))
        for other in range(position, len(chars)):
            swapped = list(chars)
            swapped[position], swapped[other] = swapped[other], swapped[position]
            _permute(swapped, position + 1)

    _permute(list(text), 0)
    return result


def count_subset_sums(values: Sequence[int], total: int) -> int:
    """Count the subsets of ``values`` whose sum is ``total``."""

    def _count(n: int, remaining: int) -> int:
        if n == 0:
            return int(remaining == 0)
        return _count(n - 1, remaining) + _count(n - 1, remaining - values[n - 1])

    return _count(len(values), total)


def subset_sums(values: Sequence[int]) -> list[int]:
    """Return the sums of all subsets of ``values``, sorted ascending."""
    sums: list[int] = []

    def _collect(index: int, total: int) -> None:
        if index == len(values):
            sums.append(total)
            return
        _collect(index + 1, total + values[index])
        _collect(index + 1, total)

    _collect(0, 0)
    return sorted(sums)


def subsets(text: str) -> list[str]:
    """Return every subsequence of ``text``, leaving characters out before taking them."""

    def _build(current: str, index: int) -> list[str]:
        if index == len(text):
            return [current]
        return _build(current, index + 1) + _build(current + text[index], index + 1)

    return _build("", 0)


def subsequences(values: Sequence[int]) -> list[list[int]]:
    """Return every subsequence of ``values``, taking elements before leaving them out."""
    result: list[list[int]] = []
    chosen: list[int] = []

    def _build(index: int) -> None:
        if index == len(values):
            result.append(list(chosen))
            return
        chosen.append(values[index])
        _build(index + 1)
        chosen.pop()
        _build(index + 1)

    _build(0)
    return result


def subsequences_with_sum(values: Sequence[int], k: int) -> list[list[int]]:
    """Return every subsequence of ``values`` whose elements add up to ``k``."""
    result: list[list[int]] = []
    chosen: list[int] = []

    def _build(index: int, total: int) -> None:
        if index == len(values):
            if total == k:
                result.append(list(chosen))
            return
        chosen.append(values[index])
        _build(index + 1, total + values[index])
        chosen.pop()
        _build(index + 1, total)

    _build(0, 0)
    return result


def first_subsequence_with_sum(values: Sequence[int], k: int) -> list[int] | None:
    """Return the first subsequence summing to ``k``, or None if there is none."""
    chosen: list[int] = []

    def _find(index: int, total: int) -> bool:
        if index == len(values):
            return total == k
        chosen.append(values[index])
        if _find(index + 1, total + values[index]):
            return True
        chosen.pop()
        return _find(index + 1, total)

    return list(chosen) if _find(0, 0) else None


def sum_of_naturals(n: int) -> int:
    """Return 1 + 2 + ... + n; zero or less gives 0."""
    if n < 1:
        return 0
    return n + sum_of_naturals(n - 1)


def towers_of_hanoi(
    n: int, source: str = "a", auxiliary: str = "b", target: str = "c"
) -> list[tuple[int, str, str]]:
    """Return the moves (disk, from peg, to peg) that carry n disks to ``target``."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n == 0:
        return []
    return [
        *towers_of_hanoi(n - 1, source, target, auxiliary),
        (n, source, target),
        *towers_of_hanoi(n - 1, auxiliary, source, target),
    ]