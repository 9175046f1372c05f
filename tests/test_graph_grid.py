import copy
import math

import pytest

from dsakit.graph_grid import count_islands, floyd_warshall

SOURCE_WEIGHTS = [
    [0, 4, None, None, 2],
    [4, 0, 5, None, 7],
    [None, 5, 0, 6, None],
    [None, None, 6, 0, 3],
    [2, 7, None, 3, 0],
]


def test_count_islands_source_grid():
    grid = [[0, 1, 1, 0], [0, 1, 1, 0], [0, 0, 0, 1], [0, 0, 1, 1]]
    assert count_islands(grid) == 2


def test_count_islands_does_not_mutate():
    grid = [[1, 0], [1, 1]]
    before = copy.deepcopy(grid)
    count_islands(grid)
    assert grid == before


def test_count_islands_single_block():
    assert count_islands([[1, 1, 1], [1, 1, 1]]) == 1


def test_count_islands_empty_and_water():
    assert count_islands([]) == count_islands([[0, 0], [0, 0]])
    assert count_islands([[0, 0], [0, 0]]) == 0


def test_diagonal_cells_are_separate_islands():
    grid = [[1, 0, 1], [0, 1, 0], [1, 0, 1]]
    assert count_islands(grid) == sum(map(sum, grid))


def test_floyd_warshall_path_through_middle():
    matrix = [[0, 4, 10], [None, 0, 1], [None, None, 0]]
    dist = floyd_warshall(matrix)
    assert dist[0][2] == matrix[0][1] + matrix[1][2]
    assert dist[2][0] == math.inf
    assert dist[1][0] == math.inf


def test_floyd_warshall_invariants():
    dist = floyd_warshall(SOURCE_WEIGHTS)
    size = len(SOURCE_WEIGHTS)
    for i in range(size):
        assert dist[i][i] == 0
        for j in range(size):
            assert dist[i][j] == dist[j][i]
            if SOURCE_WEIGHTS[i][j] is not None:
                assert dist[i][j] <= SOURCE_WEIGHTS[i][j]
            for k in range(size):
                assert dist[i][j] <= dist[i][k] + dist[k][j]


def test_floyd_warshall_connected_graph_is_finite():
    dist = floyd_warshall(SOURCE_WEIGHTS)
    assert dist[0] == [0, 4, 9, 5, 2]
    assert max(max(row) for row in dist) < math.inf


def test_floyd_warshall_does_not_mutate():
    matrix = copy.deepcopy(SOURCE_WEIGHTS)
    floyd_warshall(matrix)
    assert matrix == SOURCE_WEIGHTS


def test_floyd_warshall_missing_diagonal_becomes_zero():
    dist = floyd_warshall([[None, 3], [None, None]])
    assert dist[0][0] == 0
    assert dist[1][1] == 0
    assert dist[0][1] == 3


def test_floyd_warshall_rejects_non_square():
    with pytest.raises(ValueError):
        floyd_warshall([[0, 1], [1]])