"""Classic array exercises: searching, summing, rearranging and building."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate, pairwise


def can_make_all_equal(values: Sequence[int]) -> bool:
    """Return True if every value is within one of the first value."""
    if not values:
        return True
    first = values[0]
    return all(abs(value - first) <= 1 for value in values[1:])


def is_sorted(values: Sequence[int]) -> bool:
    """Return True if the values are in non-decreasing order (single pass)."""
    return all(prev <= curr for prev, curr in pairwise(values))


def is_sorted_naive(values: Sequence[int]) -> bool:
    """Return True if no value is followed by a smaller one (pairwise check)."""
    return not any(
        later < value
        for position, value in enumerate(values)
        for later in values[position + 1:]
    )


def delete_element(values: Sequence[int], element: int) -> list[int]:
    """Return the values without the first occurrence of ``element``.

    If ``element`` is absent the values are returned unchanged.
    """
    result = list(values)
    try:
        result.remove(element)
    except ValueError:
        pass
    return result


def two_sum_indices(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Find original indices of two values adding up to ``target``.

    The index of the smaller value comes first. Returns None if no pair exists.
    """
    order = sorted(enumerate(values), key=lambda pair: pair[1])
    low, high = 0, len(order) - 1
    while low < high:
        total = order[low][1] + order[high][1]
        if total == target:
            return order[low][0], order[high][0]
        if total > target:
            high -= 1
        else:
            low += 1
    return None


def insert_element(
    values: Sequence[int], element: int, position: int, capacity: int
) -> list[int]:
    """Insert ``element`` at the 1-based ``position`` of a fixed-capacity array."""
    if len(values) >= capacity:
        raise ValueError("array is already at capacity")
    if not 1 <= position <= len(values) + 1:
        raise ValueError(f"position {position} is out of range")
    result = list(values)
    result.insert(position - 1, element)
    return result


def largest(values: Sequence[int]) -> int:
    """Return the largest value in a single pass."""
    if not values:
        raise ValueError("largest() of an empty sequence")
    best = values[0]
    for value in values:
        if value > best:
            best = value
    return best


def largest_naive(values: Sequence[int]) -> int:
    """Return the value that no other value exceeds, checking every pair."""
    if not values:
        raise ValueError("largest_naive() of an empty sequence")
    return next(
        value for value in values if all(value >= other for other in values)
    )


def max_subarray_sum(values: Sequence[int]) -> int:
    """Return the largest sum of a contiguous run; an empty run counts as 0."""
    best = 0
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        if running < 0:
            running = 0
    return best


def linear_search(values: Sequence[int], element: int) -> int | None:
    """Return the index of the first occurrence of ``element``, or None."""
    return next(
        (index for index, value in enumerate(values) if value == element), None
    )


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest values."""
    if not values:
        raise ValueError("min_max() of an empty sequence")
    low = high = values[0]
    for value in values:
        if value > high:
            high = value
        if value < low:
            low = value
    return low, high


def missing_number(values: Sequence[int], n: int) -> int:
    """Return the number from 1..n that is absent from ``values``."""
    return n * (n + 1) // 2 - sum(values)


def move_zeros_to_end(values: Sequence[int]) -> list[int]:
    """Return the values with zeros moved to the end, keeping the rest in order."""
    non_zero = [value for value in values if value != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError("num_rows must not be negative")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
        else:
            previous = rows[-1]
            rows.append([1, *(a + b for a, b in pairwise(previous)), 1])
    return rows


def peak_element(values: Sequence[int]) -> int | None:
    """Return the first interior value larger than both neighbours, or None."""
    for left, middle, right in zip(values, values[1:], values[2:]):
        if middle > left and middle > right:
            return middle
    return None


def prefix_sums(values: Sequence[int]) -> list[int]:
    """Return running totals from the front."""
    return list(accumulate(values))


def suffix_sums(values: Sequence[int]) -> list[int]:
    """Return, for each index, the total of the values from there to the end."""
    return list(accumulate(reversed(values)))[::-1]


def reverse(values: Sequence[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(reversed(values))


def second_largest(values: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, in one pass."""
    best: int | None = None
    second: int | None = None
    for value in values:
        if best is None or value > best:
            if best is not None:
                second = best
            best = value
        elif value != best and (second is None or value > second):
            second = value
    if second is None:
        raise ValueError("no second largest value")
    return second


def second_largest_naive(values: Sequence[int]) -> int:
    """Return the largest value strictly below the maximum, in two passes."""
    top = largest(values)
    rest = [value for value in values if value != top]
    if not rest:
        raise ValueError("no second largest value")
    return largest(rest)


def sliding_window_sums(values: Sequence[int], size: int) -> list[int]:
    """Return the sum of every window of ``size`` consecutive values."""
    if not values:
        return []
    if not 1 <= size <= len(values):
        raise ValueError(f"window size {size} does not fit {len(values)} values")
    total = sum(values[:size])
    sums = [total]
    for leaving, entering in zip(values, values[size:]):
        total += entering - leaving
        sums.append(total)
    return sums


def special_element_count(values: Sequence[int]) -> int:
    """Count the indices whose removal makes even- and odd-index sums equal."""
    total_even = sum(values[0::2])
    total_odd = sum(values[1::2])
    even_before = odd_before = 0
    count = 0
    for index, value in enumerate(values):
        if index % 2 == 0:
            even_after = total_even - even_before - value
            odd_after = total_odd - odd_before
        else:
            even_after = total_even - even_before
            odd_after = total_odd - odd_before - value
        # Elements after the removed one switch parity.
        if even_before + odd_after == odd_before + even_after:
            count += 1
        if index % 2 == 0:
            even_before += value
        else:
            odd_before += value
    return count


def spiral_matrix(rows: int, cols: int) -> list[list[int]]:
    """Return a rows x cols matrix filled with 1, 2, ... in clockwise spiral order."""
    if rows < 0 or cols < 0:
        raise ValueError("dimensions must not be negative")
    matrix = [[0] * cols for _ in range(rows)]
    top, bottom, left, right = 0, rows - 1, 0, cols - 1
    count = 1
    while top <= bottom and left <= right:
        for col in range(left, right + 1):
            matrix[top][col] = count
            count += 1
        top += 1
        for row in range(top, bottom + 1):
            matrix[row][right] = count
            count += 1
        right -= 1
        if top <= bottom:
            for col in range(right, left - 1, -1):
                matrix[bottom][col] = count
                count += 1
            bottom -= 1
        if left <= right:
            for row in range(bottom, top - 1, -1):
                matrix[row][left] = count
                count += 1
            left += 1
    return matrix


def max_stock_profit(prices: Sequence[int]) -> int:
    """Return the best profit from any number of buy/sell transactions."""
    return sum(max(curr - prev, 0) for prev, curr in pairwise(prices))