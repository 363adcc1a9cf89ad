"""Coordinate compression and a maximum-weight rectangle search built on it."""

from __future__ import annotations

from bisect import bisect_left
from collections import defaultdict
from collections.abc import Iterable


class Compressor:
    """Maps values to their 1-based rank among the distinct values pushed."""

    def __init__(self) -> None:
        self._values: list = []
        self._ready = True

    def _prepare(self) -> None:
        if not self._ready:
            self._values = sorted(set(self._values))
            self._ready = True

    def push(self, value) -> None:
        """Add a value to the set being compressed."""
        self._values.append(value)
        self._ready = False

    def rank(self, value) -> int:
        """Return the 1-based position of the first stored value not less than ``value``."""
        self._prepare()
        return bisect_left(self._values, value) + 1

    def value_at(self, index: int):
        """Return the value with 1-based rank ``index``."""
        self._prepare()
        if not 1 <= index <= len(self._values):
            raise IndexError(f"rank {index} is outside 1..{len(self._values)}")
        return self._values[index - 1]

    def __len__(self) -> int:
        self._prepare()
        return len(self._values)

    def clear(self) -> None:
        """Forget every value."""
        self._values.clear()
        self._ready = True


def max_rectangle_weight(points: Iterable[tuple[int, int, int]]) -> int:
    """Largest total weight of points with x in some interval and y up to some bound.

    The interval ends and the bound are taken among the points' own coordinates;
    an empty choice scores 0, so the result is never negative.
    """
    points = list(points)
    if not points:
        return 0
    comp = Compressor()
    for x, y, _ in points:
        comp.push(x)
        comp.push(y)
    cells: defaultdict[tuple[int, int], int] = defaultdict(int)
    xs: set[int] = set()
    ys: set[int] = set()
    for x, y, w in points:
        cx, cy = comp.rank(x), comp.rank(y)
        cells[cx, cy] += w
        xs.add(cx)
        ys.add(cy)

    size = len(comp)
    prefix = [[0] * (size + 1)]
    for cx in range(1, size + 1):
        previous = prefix[-1]
        row = [0] * (size + 1)
        running = 0
        for cy in range(1, size + 1):
            running += cells.get((cx, cy), 0)
            row[cy] = previous[cy] + running
        prefix.append(row)

    sorted_xs = sorted(xs)
    sorted_ys = sorted(ys)
    best = 0
    for i, low in enumerate(sorted_xs):
        below = prefix[low - 1]
        for high in sorted_xs[i:]:
            top = prefix[high]
            best = max(best, max(top[y] - below[y] for y in sorted_ys))
    return best