"""Dynamic programming on trees."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from math import fsum


def _adjacency(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    if n < 1:
        raise ValueError("a tree needs at least one node")
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        for node in (u, v):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside 1..{n}")
        adj[u].append(v)
        adj[v].append(u)
    return adj


def _preorder(adj: list[list[int]], root: int = 1) -> tuple[list[int], list[int]]:
    """Nodes reachable from ``root`` with parents listed before children."""
    parent = [0] * len(adj)
    seen = [False] * len(adj)
    seen[root] = True
    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        for child in reversed(adj[node]):
            if not seen[child]:
                seen[child] = True
                parent[child] = node
                stack.append(child)
    return order, parent


def _children(adj: list[list[int]], parent: list[int], node: int) -> list[int]:
    return [c for c in adj[node] if c != parent[node] and parent[c] == node]


def max_party_rating(ratings: Sequence[int], edges: Iterable[tuple[int, int]]) -> int:
    """Best total rating of guests when no one comes together with a direct boss.

    Each edge is ``(employee, boss)``; nodes are numbered 1..len(ratings).
    """
    n = len(ratings)
    if n == 0:
        raise ValueError("at least one person is required")
    children: list[list[int]] = [[] for _ in range(n + 1)]
    has_boss = [False] * (n + 1)
    for employee, boss in edges:
        for node in (employee, boss):
            if not 1 <= node <= n:
                raise ValueError(f"node {node} is outside 1..{n}")
        children[boss].append(employee)
        has_boss[employee] = True
    for kids in children:
        kids.reverse()
    root = next((i for i in range(1, n + 1) if not has_boss[i]), None)
    if root is None:
        raise ValueError("no one is free of a boss")

    order = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(reversed(children[node]))

    take = [0, *ratings]
    skip = [0] * (n + 1)
    for node in reversed(order):
        for child in children[node]:
            skip[node] = max(skip[node], skip[child], take[child], take[child] + skip[node])
            take[node] = max(take[node], skip[child], skip[child] + take[node])
    return max(skip[root], take[root])


def min_balance_operations(
    n: int, edges: Iterable[tuple[int, int]], weights: Sequence[int]
) -> int:
    """Fewest subtree-wide +1/-1 operations, rooted at node 1, to zero every weight."""
    if len(weights) != n:
        raise ValueError("one weight per node is required")
    adj = _adjacency(n, edges)
    order, parent = _preorder(adj)
    down = [0] * (n + 1)
    up = [0] * (n + 1)
    for node in reversed(order):
        for child in _children(adj, parent, node):
            down[node] = max(down[node], down[child])
            up[node] = max(up[node], up[child])
        w = weights[node - 1]
        if down[node] + w > up[node]:
            up[node] = down[node] + w
        else:
            down[node] = up[node] - w
    return down[1] + up[1]


def connected_black_counts(n: int, mod: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """For every node, the number of connected node sets containing it, modulo ``mod``."""
    if mod < 1:
        raise ValueError("the modulus must be positive")
    adj = _adjacency(n, edges)
    order, parent = _preorder(adj)
    kids = {node: _children(adj, parent, node) for node in order}
    down = [0] * (n + 1)
    before = [0] * (n + 1)
    after = [0] * (n + 1)
    for node in reversed(order):
        down[node] = 1
        for child in kids[node]:
            down[node] = down[node] * (down[child] + 1) % mod
        running = 1
        for child in kids[node]:
            before[child] = running
            running = running * (down[child] + 1) % mod
        running = 1
        for child in reversed(kids[node]):
            after[child] = running
            running = running * (down[child] + 1) % mod

    up = [0] * (n + 1)
    up[1] = 1
    for node in order:
        for child in kids[node]:
            up[child] = (up[node] * (before[child] * after[child] % mod) + 1) % mod
    return [down[i] * up[i] % mod for i in range(1, n + 1)]


def expected_operations(n: int, edges: Iterable[tuple[int, int]]) -> float:
    """Sum over nodes of 1 / depth, with node 1 at depth 1."""
    adj = _adjacency(n, edges)
    order, parent = _preorder(adj)
    depth = [0] * (n + 1)
    depth[1] = 1
    for node in order[1:]:
        depth[node] = depth[parent[node]] + 1
    return fsum(1.0 / depth[node] for node in order)