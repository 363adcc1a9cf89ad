"""Adjacency and induced-edge queries on a tree."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


class Tree:
    """An undirected tree on nodes 1..n."""

    def __init__(self, n: int, edges: Iterable[tuple[int, int]]) -> None:
        self.n = n
        self._adj: list[list[int]] = [[] for _ in range(n + 1)]
        for u, v in edges:
            self._check(u)
            self._check(v)
            self._adj[u].append(v)
            self._adj[v].append(u)

    def _check(self, node: int) -> None:
        if not 1 <= node <= self.n:
            raise ValueError(f"node {node} is outside 1..{self.n}")

    def adjacent(self, a: int, b: int) -> bool:
        """Return whether an edge joins ``a`` and ``b``."""
        self._check(a)
        self._check(b)
        a, b = min(a, b), max(a, b)
        return b in self._adj[a]

    def edges_within(self, nodes: Iterable[int]) -> int:
        """Count the edges whose two ends both lie in ``nodes``."""
        pending: Counter[int] = Counter()
        total = 0
        for node in sorted(nodes):
            self._check(node)
            total += pending.pop(node, 0)
            pending.update(self._adj[node])
        return total


def answer_queries(
    n: int, edges: Iterable[tuple[int, int]], queries: Iterable[Sequence[int]]
) -> list[int]:
    """Answer each query: a pair asks for adjacency (1/0), any other set for its edge count."""
    tree = Tree(n, edges)
    results = []
    for query in queries:
        nodes = list(query)
        if len(nodes) == 2:
            results.append(int(tree.adjacent(*nodes)))
        else:
            results.append(tree.edges_within(nodes))
    return results