"""Single-source shortest paths on a directed graph with non-negative weights."""

from __future__ import annotations

import heapq
from collections.abc import Iterable

# Distance reported for nodes the source cannot reach.
UNREACHABLE = (2**31 - 1) * 100


def dijkstra(n: int, edges: Iterable[tuple[int, int, int]], source: int) -> list[int]:
    """Shortest distances from ``source`` to nodes 1..n.

    Each edge is ``(u, v, w)``, a directed edge from u to v of weight w.
    Nodes the source cannot reach get :data:`UNREACHABLE`.
    """
    if not 1 <= source <= n:
        raise ValueError(f"source {source} is outside 1..{n}")
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in edges:
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside 1..{n}")
        if w < 0:
            raise ValueError(f"edge ({u}, {v}) has negative weight {w}")
        adj[u].append((v, w))

    dist = [UNREACHABLE] * (n + 1)
    dist[source] = 0
    done = [False] * (n + 1)
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, w in adj[u]:
            candidate = d + w
            if dist[v] > candidate:
                dist[v] = candidate
                heapq.heappush(heap, (candidate, v))
    return dist[1:]