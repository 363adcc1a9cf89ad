"""Assigning points to capacitated holes on a line at least total distance."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Sequence
from itertools import accumulate

_INF = 1 << 62


def min_total_distance(mice: Sequence[int], holes: Iterable[tuple[int, int]]) -> int:
    """Least total distance for every mouse to enter a hole.

    Each hole is ``(position, capacity)``. Returns -1 when the holes cannot
    take every mouse.
    """
    xs = sorted(mice)
    hole_list = sorted(holes)
    n = len(xs)
    if n > sum(capacity for _, capacity in hole_list):
        return -1

    previous = [0] + [_INF] * n
    capacity_so_far = 0
    for position, capacity in hole_list:
        capacity_so_far += capacity
        cost = list(accumulate((abs(x - position) for x in xs), initial=0))
        window: deque[tuple[int, int]] = deque()
        current = [0] * (n + 1)
        for j in range(n + 1):
            while window and window[0][0] < j - capacity:
                window.popleft()
            value = previous[j] - cost[j]
            while window and value <= window[-1][1]:
                window.pop()
            window.append((j, value))
            current[j] = _INF if capacity_so_far < j else cost[j] + window[0][1]
        previous = current
    return -1 if previous[n] >= _INF else previous[n]