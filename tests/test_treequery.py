import pytest

from cpkit.treequery import Tree, answer_queries

PATH_EDGES = [(1, 2), (2, 3), (3, 4)]
STAR_EDGES = [(1, 2), (1, 3), (1, 4), (1, 5)]


def test_adjacent_is_symmetric():
    tree = Tree(4, PATH_EDGES)
    assert tree.adjacent(1, 2) is True
    assert tree.adjacent(2, 1) is True
    assert tree.adjacent(1, 3) is False


def test_all_nodes_contain_every_edge():
    tree = Tree(5, STAR_EDGES)
    assert tree.edges_within(range(1, 6)) == len(STAR_EDGES)


def test_leaves_of_star_share_no_edges():
    tree = Tree(5, STAR_EDGES)
    assert tree.edges_within([2, 3, 4, 5]) == 0


def test_pair_count_matches_adjacency():
    tree = Tree(4, PATH_EDGES)
    for a in range(1, 5):
        for b in range(1, 5):
            if a != b:
                assert tree.edges_within([a, b]) == int(tree.adjacent(a, b))


def test_order_of_nodes_does_not_matter():
    tree = Tree(4, PATH_EDGES)
    assert tree.edges_within([4, 2, 3]) == tree.edges_within([2, 3, 4])


def test_answer_queries_mixes_kinds():
    results = answer_queries(4, PATH_EDGES, [[1, 2], [1, 3], [1, 2, 3, 4], [4]])
    assert results[0] == 1
    assert results[1] == 0
    assert results[2] == len(PATH_EDGES)
    assert results[3] == 0


def test_out_of_range_edge_rejected():
    with pytest.raises(ValueError):
        Tree(3, [(1, 4)])


def test_out_of_range_query_rejected():
    tree = Tree(3, [(1, 2), (2, 3)])
    with pytest.raises(ValueError):
        tree.edges_within([1, 7])