import random

import pytest

from cpkit.shortest import UNREACHABLE, dijkstra


def _random_graph(seed, n, m):
    rng = random.Random(seed)
    return [(rng.randint(1, n), rng.randint(1, n), rng.randint(0, 20)) for _ in range(m)]


def test_worked_example():
    edges = [(1, 2, 2), (2, 3, 2), (2, 4, 1), (1, 3, 5), (3, 4, 3), (1, 4, 4)]
    assert dijkstra(4, edges, 1) == [0, 2, 4, 3]


def test_source_is_zero_and_unreachable_marked():
    dist = dijkstra(3, [(1, 2, 4)], 1)
    assert dist[0] == 0
    assert dist[2] == UNREACHABLE


def test_edges_are_directed():
    assert dijkstra(2, [(2, 1, 1)], 1) == [0, UNREACHABLE]


def test_parallel_edges_take_lightest():
    assert dijkstra(2, [(1, 2, 9), (1, 2, 4)], 1)[1] == 4


@pytest.mark.parametrize("seed", range(5))
def test_triangle_inequality_holds(seed):
    n = 12
    edges = _random_graph(seed, n, 40)
    dist = dijkstra(n, edges, 1)
    for u, v, w in edges:
        if dist[u - 1] != UNREACHABLE:
            assert dist[v - 1] <= dist[u - 1] + w


@pytest.mark.parametrize("seed", range(5))
def test_every_distance_is_attained_by_an_edge(seed):
    n = 12
    edges = _random_graph(seed, n, 40)
    dist = dijkstra(n, edges, 1)
    for v in range(2, n + 1):
        if dist[v - 1] != UNREACHABLE:
            assert any(
                b == v and dist[a - 1] + w == dist[v - 1] for a, b, w in edges
            )


def test_bad_source_raises():
    with pytest.raises(ValueError):
        dijkstra(3, [], 0)


def test_bad_node_raises():
    with pytest.raises(ValueError):
        dijkstra(3, [(1, 5, 1)], 1)


def test_negative_weight_raises():
    with pytest.raises(ValueError):
        dijkstra(2, [(1, 2, -1)], 1)