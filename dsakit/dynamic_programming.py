"""Dynamic programming: memoised and tabulated recurrences."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache


def _stone_heights(n: int, heights: Sequence[int] | None) -> list[int]:
    if n < 0:
        raise ValueError("n must not be negative")
    if heights is None:
        return [index + 10 for index in range(n + 1)]
    result = list(heights)
    if len(result) < n + 1:
        raise ValueError(f"need {n + 1} heights, got {len(result)}")
    return result


def _require_k(k: int) -> None:
    if k < 1:
        raise ValueError("k must be at least 1")


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number with memoisation."""
    if n < 0:
        raise ValueError("n must not be negative")

    @lru_cache(maxsize=None)
    def _fib(i: int) -> int:
        if i <= 1:
            return i
        return _fib(i - 1) + _fib(i - 2)

    return _fib(n)


def frog_jump(n: int, heights: Sequence[int] | None = None) -> int:
    """Return the least energy to reach stone ``n`` with jumps of 1 or 2 (memoised).

    Energy is the height difference of each jump; by default stone i has height i + 10.
    """
    stones = _stone_heights(n, heights)

    @lru_cache(maxsize=None)
    def _cost(i: int) -> int:
        if i == 0:
            return 0
        best = _cost(i - 1) + abs(stones[i] - stones[i - 1])
        if i > 1:
            best = min(best, _cost(i - 2) + abs(stones[i] - stones[i - 2]))
        return best

    return _cost(n)


def frog_jump_tabulation(n: int, heights: Sequence[int] | None = None) -> int:
    """Return the least energy to reach stone ``n`` with jumps of 1 or 2 (tabulated)."""
    stones = _stone_heights(n, heights)
    cost = [0] * (n + 1)
    for i in range(1, n + 1):
        best = cost[i - 1] + abs(stones[i] - stones[i - 1])
        if i > 1:
            best = min(best, cost[i - 2] + abs(stones[i] - stones[i - 2]))
        cost[i] = best
    return cost[n]


def frog_jump_k(n: int, k: int, heights: Sequence[int] | None = None) -> int:
    """Return the least energy to reach stone ``n`` with jumps of 1..k (memoised)."""
    _require_k(k)
    stones = _stone_heights(n, heights)

    @lru_cache(maxsize=None)
    def _cost(i: int) -> int:
        if i == 0:
            return 0
        return min(
            _cost(i - step) + abs(stones[i] - stones[i - step])
            for step in range(1, min(k, i) + 1)
        )

    return _cost(n)


def frog_jump_k_tabulation(n: int, k: int, heights: Sequence[int] | None = None) -> int:
    """Return the least energy to reach stone ``n`` with jumps of 1..k (tabulated)."""
    _require_k(k)
    stones = _stone_heights(n, heights)
    cost = [0] * (n + 1)
    for i in range(1, n + 1):
        cost[i] = min(
            cost[i - step] + abs(stones[i] - stones[i - step])
            for step in range(1, min(k, i) + 1)
        )
    return cost[n]


def step_jump(n: int) -> int:
    """Count step sequences of 1 or 2 with bases 0 -> 0 and 1 -> 1 (memoised)."""
    return jump_k_steps(n, 2)


def step_jump_tabulation(n: int) -> int:
    """Count step sequences of 1 or 2 with bases 0 -> 0 and 1 -> 1 (tabulated)."""
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 1:
        return n
    previous, current = 0, 1
    for _ in range(2, n + 1):
        previous, current = current, previous + current
    return current


def jump_k_steps(n: int, k: int) -> int:
    """Count step sequences of 1..k with bases 0 -> 0 and 1 -> 1 (memoised)."""
    _require_k(k)
    if n < 0:
        raise ValueError("n must not be negative")

    @lru_cache(maxsize=None)
    def _ways(i: int) -> int:
        if i <= 1:
            return i
        return sum(_ways(i - step) for step in range(1, min(k, i) + 1))

    return _ways(n)


def jump_k_steps_tabulation(n: int, k: int) -> int:
    """Count step sequences of 1..k with bases 0 -> 0 and 1 -> 1 (tabulated)."""
    _require_k(k)
    if n < 0:
        raise ValueError("n must not be negative")
    if n <= 1:
        return n
    ways = [0, 1] + [0] * (n - 1)
    for i in range(2, n + 1):
        ways[i] = sum(ways[i - step] for step in range(1, min(k, i) + 1))
    return ways[n]


def max_subsequence_sum(values: Sequence[int]) -> int:
    """Return the largest sum of any subsequence; the empty one counts as 0."""
    return max(sum(subsequence) for subsequence in subsequences(values))


def subsequences(values: Sequence[int]) -> list[list[int]]:
    """Return every subsequence, leaving each element out before taking it."""
    result: list[list[int]] = []
    chosen: list[int] = []

    def _build(index: int) -> None:
        if index == len(values):
            result.append(list(chosen))
            return
        _build(index + 1)
        chosen.append(values[index])
        _build(index + 1)
        chosen.pop()

    _build(0)
    return result


def grid_paths(rows: int, cols: int) -> int:
    """Count the right/down paths from the top-left to the bottom-right cell."""
    if rows < 1 or cols < 1:
        raise ValueError("grid dimensions must be positive")
    counts = [[1] * cols for _ in range(rows)]
    for row in range(1, rows):
        for col in range(1, cols):
            counts[row][col] = counts[row - 1][col] + counts[row][col - 1]
    return counts[rows - 1][cols - 1]