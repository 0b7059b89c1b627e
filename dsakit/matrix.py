"""Queries over integer matrices given as lists of rows."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

Matrix = Sequence[Sequence[int]]


def median(matrix: Matrix) -> int:
    """Median of a matrix whose rows are each sorted ascending.

    Raises ValueError for an empty matrix.
    """
    if not matrix or not matrix[0]:
        raise ValueError("matrix is empty")
    low = min(row[0] for row in matrix)
    high = max(row[-1] for row in matrix)
    desired = (len(matrix) * len(matrix[0]) + 1) // 2
    while low < high:
        mid = low + (high - low) // 2
        placed = sum(bisect_right(row, mid) for row in matrix)
        if placed < desired:
            low = mid + 1
        else:
            high = mid
    return low


def common_in_all_rows(matrix: Matrix) -> list[int]:
    """Distinct values found in every row, in their order in the last row.

    A matrix of fewer than two rows yields nothing.
    """
    seen_in = {value: 1 for value in matrix[0]} if matrix else {}
    last = len(matrix) - 1
    found: list[int] = []
    for depth, row in enumerate(matrix[1:], start=1):
        for value in row:
            if seen_in.get(value, 0) == depth:
                seen_in[value] = depth + 1
                if depth == last:
                    found.append(value)
    return found


def max_pair_difference(matrix: Matrix) -> int:
    """Largest ``m[c][d] - m[a][b]`` with ``c > a`` and ``d > b``.

    Raises ValueError for fewer than two rows or columns.
    """
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    if rows < 2 or cols < 2:
        raise ValueError("matrix needs at least two rows and two columns")
    best_below = [[0] * cols for _ in range(rows)]
    best_below[-1][-1] = matrix[-1][-1]
    for j in range(cols - 2, -1, -1):
        best_below[-1][j] = max(matrix[-1][j], best_below[-1][j + 1])
    for i in range(rows - 2, -1, -1):
        best_below[i][-1] = max(matrix[i][-1], best_below[i + 1][-1])
    result: int | None = None
    for i in range(rows - 2, -1, -1):
        for j in range(cols - 2, -1, -1):
            candidate = best_below[i + 1][j + 1] - matrix[i][j]
            if result is None or candidate > result:
                result = candidate
            best_below[i][j] = max(matrix[i][j], best_below[i][j + 1], best_below[i + 1][j])
    assert result is not None
    return result


def max_histogram_area(heights: Sequence[int]) -> int:
    """Largest rectangle under a histogram of the given bar heights."""
    stack: list[int] = []
    best = 0

    def pop_area(right: int) -> int:
        height = heights[stack.pop()]
        width = right - stack[-1] - 1 if stack else right
        return height * width

    i = 0
    while i < len(heights):
        if not stack or heights[stack[-1]] <= heights[i]:
            stack.append(i)
            i += 1
        else:
            best = max(best, pop_area(i))
    while stack:
        best = max(best, pop_area(i))
    return best


def max_rectangle_area(matrix: Matrix) -> int:
    """Area of the largest rectangle made only of ones in a 0/1 matrix."""
    if not matrix:
        return 0
    heights = list(matrix[0])
    best = max_histogram_area(heights)
    for row in matrix[1:]:
        heights = [cell + above if cell == 1 else cell for cell, above in zip(row, heights)]
        best = max(best, max_histogram_area(heights))
    return best


def spiral_order(matrix: Matrix) -> list[int]:
    """Elements read clockwise in a spiral from the top-left corner."""
    rows = len(matrix)
    cols = len(matrix[0]) if rows else 0
    i = j = 0
    max_r, min_r, max_c, min_c = rows - 1, 1, cols - 1, 0
    direction = "down" if max_c == 0 else "right"
    result: list[int] = []
    for _ in range(rows * cols):
        result.append(matrix[i][j])
        if direction == "right":
            j += 1
            if j == max_c:
                direction, max_c = "down", max_c - 1
        elif direction == "left":
            j -= 1
            if j == min_c:
                direction, min_c = "up", min_c + 1
        elif direction == "up":
            i -= 1
            if i == min_r:
                direction, min_r = "right", min_r + 1
        else:
            i += 1
            if i == max_r:
                direction, max_r = "left", max_r - 1
    return result