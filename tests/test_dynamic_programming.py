import math
from itertools import combinations

import pytest

from dsakit import dynamic_programming as dp


def test_fibonacci_recurrence():
    assert dp.fibonacci(0) == 0
    assert dp.fibonacci(1) == 1
    for n in range(2, 40):
        assert dp.fibonacci(n) == dp.fibonacci(n - 1) + dp.fibonacci(n - 2)


def test_fibonacci_negative():
    with pytest.raises(ValueError):
        dp.fibonacci(-1)


@pytest.mark.parametrize("n", range(0, 10))
def test_frog_jump_default_heights_cost_equals_n(n):
    # Default heights rise by one per stone, so every route costs n.
    assert dp.frog_jump(n) == n
    assert dp.frog_jump_tabulation(n) == n
    assert dp.frog_jump_k(n, 2) == n
    assert dp.frog_jump_k_tabulation(n, 2) == n


def test_frog_jump_custom_heights():
    heights = [10, 20, 30, 10]
    assert dp.frog_jump(3, heights) == 20
    assert dp.frog_jump_tabulation(3, heights) == dp.frog_jump(3, heights)


@pytest.mark.parametrize("heights", [[5, 1, 9, 3, 7, 2, 8], [30, 10, 60, 10, 60, 50]])
@pytest.mark.parametrize("k", [1, 2, 3, 4])
def test_frog_jump_k_memo_and_tabulation_agree(heights, k):
    n = len(heights) - 1
    assert dp.frog_jump_k(n, k, heights) == dp.frog_jump_k_tabulation(n, k, heights)


@pytest.mark.parametrize("heights", [[5, 1, 9, 3, 7, 2, 8], [30, 10, 60, 10, 60, 50]])
def test_frog_jump_k_special_cases(heights):
    n = len(heights) - 1
    assert dp.frog_jump_k(n, 2, heights) == dp.frog_jump(n, heights)
    single_steps = sum(abs(b - a) for a, b in zip(heights, heights[1:]))
    assert dp.frog_jump_k(n, 1, heights) == single_steps
    assert dp.frog_jump_k(n, 3, heights) <= dp.frog_jump_k(n, 2, heights)


def test_frog_jump_errors():
    with pytest.raises(ValueError):
        dp.frog_jump(3, [1, 2])
    with pytest.raises(ValueError):
        dp.frog_jump(-1)
    with pytest.raises(ValueError):
        dp.frog_jump_k(3, 0)


@pytest.mark.parametrize("n", range(0, 25))
def test_step_jump_follows_fibonacci(n):
    assert dp.step_jump(n) == dp.fibonacci(n)
    assert dp.step_jump_tabulation(n) == dp.fibonacci(n)


@pytest.mark.parametrize("n", range(0, 20))
@pytest.mark.parametrize("k", [1, 2, 3, 5])
def test_jump_k_steps_memo_and_tabulation_agree(n, k):
    assert dp.jump_k_steps(n, k) == dp.jump_k_steps_tabulation(n, k)


@pytest.mark.parametrize("n", range(0, 20))
def test_jump_k_steps_two_matches_step_jump(n):
    assert dp.jump_k_steps(n, 2) == dp.step_jump(n)


def test_jump_k_steps_errors():
    with pytest.raises(ValueError):
        dp.jump_k_steps(4, 0)
    with pytest.raises(ValueError):
        dp.jump_k_steps_tabulation(-2, 2)


@pytest.mark.parametrize("values", [[1, 2, 3], [4, -1, 5, -7], [-3, -2], []])
def test_max_subsequence_sum_takes_all_positives(values):
    assert dp.max_subsequence_sum(values) == sum(v for v in values if v > 0)


def test_subsequences():
    values = [1, 2, 3]
    result = dp.subsequences(values)
    assert result[0] == []
    assert result[-1] == values
    assert len(result) == 2 ** len(values)
    expected = sorted(c for size in range(4) for c in combinations(values, size))
    assert sorted(map(tuple, result)) == expected


@pytest.mark.parametrize("rows,cols", [(1, 1), (2, 3), (3, 3), (4, 6), (1, 9)])
def test_grid_paths(rows, cols):
    assert dp.grid_paths(rows, cols) == math.comb(rows + cols - 2, rows - 1)


def test_grid_paths_symmetry_and_errors():
    assert dp.grid_paths(3, 5) == dp.grid_paths(5, 3)
    with pytest.raises(ValueError):
        dp.grid_paths(0, 3)