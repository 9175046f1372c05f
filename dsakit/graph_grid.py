"""Graph algorithms over matrices and grids."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Sequence


def floyd_warshall(
    matrix: Sequence[Sequence[float | None]],
) -> list[list[float]]:
    """Return all-pairs shortest distances for a square weight matrix.

    ``None`` or ``math.inf`` marks a missing edge; unreachable pairs come back
    as ``math.inf`` and every vertex is at distance 0 from itself.
    """
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("the weight matrix must be square")
    dist = [[math.inf if weight is None else weight for weight in row] for row in matrix]
    for index, row in enumerate(dist):
        row[index] = min(row[index], 0)
    for via_index, via_row in enumerate(dist):
        for row in dist:
            to_via = row[via_index]
            if to_via == math.inf:
                continue
            for target, onward in enumerate(via_row):
                if to_via + onward < row[target]:
                    row[target] = to_via + onward
    return dist


def count_islands(grid: Sequence[Sequence[int]]) -> int:
    """Count groups of 1-cells joined up, down, left or right."""
    seen: set[tuple[int, int]] = set()
    count = 0
    for row_index, row in enumerate(grid):
        for col_index, cell in enumerate(row):
            if cell != 1 or (row_index, col_index) in seen:
                continue
            count += 1
            seen.add((row_index, col_index))
            pending = deque([(row_index, col_index)])
            while pending:
                r, c = pending.popleft()
                for nr, nc in ((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)):
                    if (
                        0 <= nr < len(grid)
                        and 0 <= nc < len(grid[nr])
                        and grid[nr][nc] == 1
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        pending.append((nr, nc))
    return count