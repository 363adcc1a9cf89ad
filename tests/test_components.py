import random

import pytest

from cpkit.components import (
    edge_biconnected,
    scc_listing,
    strongly_connected,
    vertex_biconnected,
)


def _random_edges(seed, n, m):
    rng = random.Random(seed)
    return [(rng.randint(1, n), rng.randint(1, n)) for _ in range(m)]


def test_vertex_cycle_is_one_component():
    edges = [(i, i % 5 + 1) for i in range(1, 6)]
    assert vertex_biconnected(5, edges) == [list(range(1, 6))]


def test_vertex_path_shares_cut_vertex():
    comps = vertex_biconnected(3, [(1, 2), (2, 3)])
    assert len(comps) == 2
    assert all(len(c) == 2 and 2 in c for c in comps)


def test_vertex_two_triangles_share_vertex():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 3)]
    assert sorted(vertex_biconnected(5, edges)) == [[1, 2, 3], [3, 4, 5]]


def test_vertex_isolated_and_self_loop():
    assert [3] in vertex_biconnected(3, [(1, 2)])
    assert vertex_biconnected(1, [(1, 1)]) == [[1]]


@pytest.mark.parametrize("seed", range(5))
def test_vertex_every_edge_inside_a_component(seed):
    n = 10
    edges = _random_edges(seed, n, 14)
    comps = [set(c) for c in vertex_biconnected(n, edges)]
    covered = set().union(*comps)
    assert covered == set(range(1, n + 1))
    for u, v in edges:
        if u != v:
            assert any(u in c and v in c for c in comps)


def test_edge_bridge_splits_triangles():
    edges = [(1, 2), (2, 3), (3, 1), (3, 4), (4, 5), (5, 6), (6, 4)]
    comps = edge_biconnected(6, edges)
    assert {tuple(c) for c in comps} == {(1, 2, 3), (4, 5, 6)}


def test_edge_path_is_all_singletons():
    comps = edge_biconnected(4, [(1, 2), (2, 3), (3, 4)])
    assert sorted(comps) == [[v] for v in range(1, 5)]


def test_edge_doubled_edge_is_not_bridge():
    assert edge_biconnected(2, [(1, 2), (1, 2)]) == [[1, 2]]


@pytest.mark.parametrize("seed", range(5))
def test_edge_components_partition_vertices(seed):
    n = 10
    comps = edge_biconnected(n, _random_edges(seed, n, 12))
    flat = [v for c in comps for v in c]
    assert sorted(flat) == list(range(1, n + 1))


def test_scc_cycle_found_after_its_successor():
    comps = strongly_connected(4, [(1, 2), (2, 3), (3, 1), (3, 4)])
    assert comps.index([4]) < comps.index([1, 2, 3])
    assert len(comps) == 2


def test_scc_dag_is_all_singletons():
    comps = strongly_connected(4, [(1, 2), (2, 3), (1, 4)])
    assert sorted(comps) == [[v] for v in range(1, 5)]


@pytest.mark.parametrize("seed", range(5))
def test_scc_partition_and_listing(seed):
    n = 10
    edges = _random_edges(seed, n, 18)
    comps = strongly_connected(n, edges)
    listed = scc_listing(n, edges)
    assert sorted(v for c in comps for v in c) == list(range(1, n + 1))
    assert sorted(listed) == sorted(comps)
    firsts = [c[0] for c in listed]
    assert firsts == sorted(firsts)


@pytest.mark.parametrize("func", [vertex_biconnected, edge_biconnected, strongly_connected, scc_listing])
def test_out_of_range_node_raises(func):
    with pytest.raises(ValueError):
        func(3, [(1, 4)])