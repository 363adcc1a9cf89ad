"""Small counting and verdict tasks over sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations, islice


def count_1324_patterns(values: Sequence[int]) -> int:
    """Count index quadruples i<j<k<l with a[i] < a[k] < a[j] < a[l]."""
    return sum(1 for a, b, c, d in combinations(values, 4) if a < c < b < d)


def peak_alternating_sums(
    values: Sequence[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Sum of local maxima minus local minima, before and after each swap.

    Positions are 1-based and the sequence is padded with 0 on both ends.
    The first entry is the initial sum; one more follows for each swap.
    """
    n = len(values)
    a = [0, *values, 0]

    def contribution(i: int) -> int:
        if not 1 <= i <= n:
            return 0
        if a[i] > a[i - 1] and a[i] > a[i + 1]:
            return a[i]
        if a[i] < a[i - 1] and a[i] < a[i + 1]:
            return -a[i]
        return 0

    total = sum(contribution(i) for i in range(1, n + 1))
    results = [total]
    for left, right in swaps:
        if not (1 <= left <= n and 1 <= right <= n):
            raise ValueError(f"swap ({left}, {right}) is outside 1..{n}")
        touched = [
            *range(max(left - 1, 1), left + 2),
            *range(max(left + 2, right - 1), min(right + 1, n) + 1),
        ]
        total -= sum(contribution(i) for i in touched)
        a[left], a[right] = a[right], a[left]
        total += sum(contribution(i) for i in touched)
        results.append(total)
    return results


def nine_verdict(values: Iterable[int]) -> str:
    """'F' if a 9 appears among the first eight values, otherwise 'S'."""
    return "F" if any(v == 9 for v in islice(values, 8)) else "S"


def split_average(values: Sequence[int]) -> list[float]:
    """Split the total into n+1 equal shares: the first gets two, the rest one each."""
    share = sum(values) / (len(values) + 1)
    return [share * 2] + [share] * (len(values) - 1)


def series_winner(results: Iterable[str]) -> str:
    """'T1' if at least three of the first five games are 'T', otherwise 'DRX'."""
    games = [c for c in "".join(results) if not c.isspace()][:5]
    if len(games) < 5:
        raise ValueError("five game results are required")
    return "T1" if games.count("T") >= 3 else "DRX"