"""Interval dynamic programming over sequences and grids."""

from __future__ import annotations

from collections.abc import Sequence
from functools import lru_cache
from itertools import accumulate

_ARRANGEMENT_MOD = 998244353
_DOUBLING_LEVELS = 60


def circular_merge_costs(piles: Sequence[int]) -> tuple[int, int]:
    """Minimum and maximum total cost of merging piles arranged in a circle.

    Merging two adjacent piles costs their combined size; the piles are merged
    until one remains.
    """
    n = len(piles)
    if n == 0:
        raise ValueError("at least one pile is required")
    doubled = [*piles, *piles]
    size = len(doubled)
    prefix = list(accumulate(doubled, initial=0))
    low = [[0] * size for _ in range(size)]
    high = [[0] * size for _ in range(size)]
    for length in range(2, n + 1):
        for left in range(size - length + 1):
            right = left + length - 1
            total = prefix[right + 1] - prefix[left]
            splits = range(left, right)
            low[left][right] = total + min(low[left][k] + low[k + 1][right] for k in splits)
            high[left][right] = max(
                0, total + max(high[left][k] + high[k + 1][right] for k in splits)
            )
    return (
        min(low[i][i + n - 1] for i in range(n)),
        max(high[i][i + n - 1] for i in range(n)),
    )


def min_strokes(values: Sequence[int]) -> int:
    """Fewest removals of palindromic runs needed to clear the whole sequence."""
    n = len(values)
    if n == 0:
        raise ValueError("the sequence must not be empty")
    dp = [[0] * n for _ in range(n)]
    for i in range(n):
        dp[i][i] = 1
    for i in range(n - 1):
        dp[i][i + 1] = 1 if values[i] == values[i + 1] else 2
    for length in range(3, n + 1):
        for left in range(n - length + 1):
            right = left + length - 1
            best = dp[left + 1][right - 1] if values[left] == values[right] else float("inf")
            best = min(best, min(dp[left][k] + dp[k + 1][right] for k in range(left, right)))
            dp[left][right] = int(best)
    return dp[0][n - 1]


def count_arrangements(values: Sequence[int]) -> int:
    """Count arrangements split around each interval's first minimum, mod 998244353."""
    n = len(values)
    a = [0, *values]
    table = [[1] * (n + 2) for _ in range(n + 2)]

    def get(left: int, right: int) -> int:
        return 1 if left >= right else table[left][right]

    for length in range(2, n + 1):
        for left in range(1, n - length + 2):
            right = left + length - 1
            pivot = min(range(left, right + 1), key=a.__getitem__)
            before = sum(get(left, i - 1) * get(i, pivot - 1) for i in range(left, pivot + 1))
            after = sum(get(i + 1, right) * get(pivot + 1, i) for i in range(pivot, right + 1))
            table[left][right] = (before % _ARRANGEMENT_MOD) * (after % _ARRANGEMENT_MOD) % _ARRANGEMENT_MOD
    return get(1, n) % _ARRANGEMENT_MOD


def min_cover_cost(grid: Sequence[str]) -> int:
    """Cheapest way to whiten every '#' cell by painting rectangles.

    Painting an h-by-w rectangle costs max(h, w); a rectangle may also be
    split into two parts that are handled separately.
    """
    rows = [str(row) for row in grid]
    if not rows or not rows[0]:
        raise ValueError("the grid must not be empty")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all grid rows must have the same length")
    black = [[c == "#" for c in row] for row in rows]

    @lru_cache(maxsize=None)
    def cost(r1: int, c1: int, r2: int, c2: int) -> int:
        if r1 == r2 and c1 == c2:
            return int(black[r1][c1])
        best = max(r2 - r1 + 1, c2 - c1 + 1)
        for i in range(r1, r2):
            best = min(best, cost(r1, c1, i, c2) + cost(i + 1, c1, r2, c2))
        for j in range(c1, c2):
            best = min(best, cost(r1, c1, r2, j) + cost(r1, j + 1, r2, c2))
        return best

    return cost(0, 0, len(rows) - 1, width - 1)


def max_merged_value(values: Sequence[int]) -> int:
    """Largest value reachable by merging adjacent equal values v, v into v + 1.

    Zero values never merge. Returns 0 for an empty sequence.
    """
    n = len(values)
    best = max([0, *values])
    dp = [[0] * n for _ in range(n)]
    for i, v in enumerate(values):
        dp[i][i] = v
    for length in range(2, n + 1):
        for left in range(n - length + 1):
            right = left + length - 1
            for k in range(left, right):
                first, second = dp[left][k], dp[k + 1][right]
                if first == second and first:
                    dp[left][right] = max(dp[left][right], first + 1)
                    best = max(best, dp[left][right])
    return best


def max_merged_value_fast(values: Sequence[int]) -> int:
    """Same game as :func:`max_merged_value`, by doubling jumps over value levels.

    Values must be non-negative; here two zeros do merge into a 1.
    Merged values are tracked up to level 60.
    """
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    n = len(values)
    best = max([0, *values])
    width = max([_DOUBLING_LEVELS, *values]) + 1
    jump = [[0] * width for _ in range(n + 2)]
    for i, v in enumerate(values, start=1):
        jump[i][v] = i + 1
    for level in range(1, _DOUBLING_LEVELS + 1):
        for i in range(1, n + 1):
            if not jump[i][level]:
                jump[i][level] = jump[jump[i][level - 1]][level - 1]
            if jump[i][level]:
                best = max(best, level)
    return best