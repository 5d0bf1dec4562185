"""Core algorithms: selection, digit-string products, slopes, pawn paths, jobs."""

from __future__ import annotations

from bisect import bisect_right
from typing import Iterable, Sequence

_KNIGHT_MOVES = ((1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1), (-2, 1), (-1, 2))
_NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def quick_select(nums: Iterable[int], k: int) -> int:
    """Return the k-th smallest value (1-based) of ``nums`` by divide and conquer.

    The input is not modified.
    """
    values = list(nums)
    if not 1 <= k <= len(values):
        raise ValueError(f"k must satisfy 1 <= k <= {len(values)}, got {k}")
    target = k - 1
    low, high = 0, len(values) - 1
    while True:
        pivot = low + (high - low) // 2
        values[pivot], values[high] = values[high], values[pivot]
        store = low
        for i in range(low, high):
            if values[i] < values[high]:
                values[store], values[i] = values[i], values[store]
                store += 1
        values[store], values[high] = values[high], values[store]
        if target == store:
            return values[target]
        if target < store:
            high = store - 1
        else:
            low = store + 1


def _number(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def max_product(digits: str, multipliers: int) -> int:
    """Largest product from inserting ``multipliers`` signs into a digit string."""
    if multipliers < 0:
        raise ValueError("the number of multipliers cannot be negative")
    n = len(digits)
    if multipliers >= n - 1:
        return _number(digits)
    dp = [[0] * (multipliers + 1) for _ in range(n)]
    for i in range(n):
        dp[i][0] = _number(digits[: i + 1])
    for j in range(1, multipliers + 1):
        for i in range(j, n):
            dp[i][j] = max(
                [dp[i][j]]
                + [dp[k][j - 1] * _number(digits[k + 1 : i + 1]) for k in range(j - 1, i)]
            )
    return dp[n - 1][multipliers]


def longest_slope(heights: Sequence[Sequence[int]]) -> int:
    """Length of the longest strictly descending path through a height grid."""
    grid = [list(row) for row in heights]
    if not grid:
        return 0
    cols = len(grid[0])
    if any(len(row) != cols for row in grid):
        raise ValueError("all rows of the height grid must have the same length")
    cells = sorted(
        (value, i, j) for i, row in enumerate(grid) for j, value in enumerate(row)
    )
    best: dict[tuple[int, int], int] = {}
    for value, i, j in cells:
        lower = (
            best[ni, nj]
            for di, dj in _NEIGHBOURS
            for ni, nj in [(i + di, j + dj)]
            if 0 <= ni < len(grid) and 0 <= nj < cols and grid[ni][nj] < value
        )
        best[i, j] = 1 + max(lower, default=0)
    return max(best.values(), default=0)


def in_horse_control(x: int, y: int, horse_x: int, horse_y: int) -> bool:
    """Whether square (x, y) is the horse's square or one it attacks."""
    if (x, y) == (horse_x, horse_y):
        return True
    return any((x, y) == (horse_x + dx, horse_y + dy) for dx, dy in _KNIGHT_MOVES)


def count_paths(n: int, m: int, horse_x: int, horse_y: int) -> int:
    """Number of monotone paths from (0, 0) to (n, m) avoiding the horse's squares."""
    if n < 0 or m < 0:
        raise ValueError("board size cannot be negative")
    dp = [[0] * (m + 1) for _ in range(n + 1)]
    dp[0][0] = 1
    for i in range(n + 1):
        for j in range(m + 1):
            if i == 0 and j == 0:
                continue
            if in_horse_control(i, j, horse_x, horse_y):
                dp[i][j] = 0
            else:
                dp[i][j] = (dp[i - 1][j] if i > 0 else 0) + (dp[i][j - 1] if j > 0 else 0)
    return dp[n][m]


def max_profit(
    difficulty: Sequence[int], profit: Sequence[int], workers: Iterable[int]
) -> int:
    """Total profit of giving each worker the hardest job they can do.

    Difficulties and profits are each sorted on their own before matching.
    """
    if len(difficulty) != len(profit):
        raise ValueError("difficulty and profit must have the same length")
    levels = sorted(difficulty)
    gains = sorted(profit)
    total = 0
    for worker in sorted(workers):
        index = bisect_right(levels, worker)
        if index:
            total += gains[index - 1]
    return total