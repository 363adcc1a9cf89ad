"""Transitive closure of a directed graph given as an adjacency matrix."""

from __future__ import annotations

from collections.abc import Sequence


def transitive_closure(matrix: Sequence[Sequence[int]]) -> list[list[int]]:
    """Return the reachability matrix: entry (i, j) is 1 if j is reachable from i.

    A node reaches itself only through a cycle or an explicit self-loop.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("the adjacency matrix must be square")
    rows = [sum(1 << j for j, cell in enumerate(row) if cell) for row in matrix]
    for j in range(n):
        bit = 1 << j
        for i in range(n):
            if rows[i] & bit:
                rows[i] |= rows[j]
    return [[(row >> j) & 1 for j in range(n)] for row in rows]