"""Biconnected and strongly connected components by Tarjan's algorithm."""

from __future__ import annotations

from collections.abc import Iterable


def _check_nodes(n: int, u: int, v: int) -> None:
    for node in (u, v):
        if not 1 <= node <= n:
            raise ValueError(f"node {node} is outside 1..{n}")


def _pop_until(stack: list[int], node: int) -> list[int]:
    popped = []
    while True:
        top = stack.pop()
        popped.append(top)
        if top == node:
            return popped


def vertex_biconnected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Vertex-biconnected components of an undirected graph, in discovery order.

    Self-loops are ignored; a vertex with no other edge is a component of its
    own. Each component is a sorted list of its vertices.
    """
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_nodes(n, u, v)
        if u != v:
            adj[u].append(v)
            adj[v].append(u)

    dfn = [0] * (n + 1)
    low = [0] * (n + 1)
    clock = 0
    stack: list[int] = []
    components: list[list[int]] = []

    def visit(node: int) -> None:
        nonlocal clock
        clock += 1
        dfn[node] = low[node] = clock
        stack.append(node)
        if not adj[node]:
            components.append([node])

    for root in range(1, n + 1):
        if dfn[root]:
            continue
        visit(root)
        work = [[root, 0]]
        while work:
            frame = work[-1]
            node, i = frame
            if i < len(adj[node]):
                frame[1] += 1
                y = adj[node][i]
                if not dfn[y]:
                    visit(y)
                    work.append([y, 0])
                else:
                    low[node] = min(low[node], dfn[y])
                continue
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[node])
                if low[node] >= dfn[parent]:
                    members = [parent, *_pop_until(stack, node)]
                    components.append(sorted(set(members)))
    return components


def edge_biconnected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Edge-biconnected components of an undirected graph.

    Components cut off by a bridge come out as the search finishes them; the
    component holding each search root comes last for its tree. Parallel edges
    are kept, so a doubled edge is never a bridge. Each component is sorted.
    """
    adj: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for edge_id, (u, v) in enumerate(edges):
        _check_nodes(n, u, v)
        if u != v:
            adj[u].append((v, edge_id))
            adj[v].append((u, edge_id))

    dfn = [0] * (n + 1)
    low = [0] * (n + 1)
    clock = 0
    stack: list[int] = []
    components: list[list[int]] = []

    def visit(node: int) -> None:
        nonlocal clock
        clock += 1
        dfn[node] = low[node] = clock
        stack.append(node)

    for root in range(1, n + 1):
        if dfn[root]:
            continue
        visit(root)
        work: list[list] = [[root, None, 0]]
        while work:
            frame = work[-1]
            node, parent_edge, i = frame
            if i < len(adj[node]):
                frame[2] += 1
                y, edge_id = adj[node][i]
                if not dfn[y]:
                    visit(y)
                    work.append([y, edge_id, 0])
                elif edge_id != parent_edge:
                    low[node] = min(low[node], dfn[y])
                continue
            work.pop()
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[node])
                if low[node] > dfn[parent]:
                    components.append(sorted(set(_pop_until(stack, node))))
            else:
                components.append(sorted(set(_pop_until(stack, node))))
    return components


def strongly_connected(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Strongly connected components of a directed graph, in the order Tarjan finds them.

    That order is a reverse topological order of the condensation. Each
    component is a sorted list of its vertices.
    """
    adj: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        _check_nodes(n, u, v)
        adj[u].append(v)

    dfn = [0] * (n + 1)
    low = [0] * (n + 1)
    on_stack = [False] * (n + 1)
    clock = 0
    stack: list[int] = []
    components: list[list[int]] = []

    def visit(node: int) -> None:
        nonlocal clock
        clock += 1
        dfn[node] = low[node] = clock
        on_stack[node] = True
        stack.append(node)

    for root in range(1, n + 1):
        if dfn[root]:
            continue
        visit(root)
        work = [[root, 0]]
        while work:
            frame = work[-1]
            node, i = frame
            if i < len(adj[node]):
                frame[1] += 1
                y = adj[node][i]
                if not dfn[y]:
                    visit(y)
                    work.append([y, 0])
                elif on_stack[y]:
                    low[node] = min(low[node], dfn[y])
                continue
            work.pop()
            if low[node] == dfn[node]:
                members = _pop_until(stack, node)
                for member in members:
                    on_stack[member] = False
                components.append(sorted(set(members)))
            if work:
                parent = work[-1][0]
                low[parent] = min(low[parent], low[node])
    return components


def scc_listing(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Strongly connected components ordered by their smallest vertex."""
    components = strongly_connected(n, edges)
    owner = {member: index for index, comp in enumerate(components) for member in comp}
    listed: list[list[int]] = []
    seen: set[int] = set()
    for node in range(1, n + 1):
        index = owner[node]
        if index not in seen:
            seen.add(index)
            listed.append(components[index])
    return listed