import random

import pytest

from cpkit.treedp import (
    connected_black_counts,
    expected_operations,
    max_party_rating,
    min_balance_operations,
)


def test_party_worked_example():
    ratings = [1] * 7
    edges = [(1, 3), (2, 3), (6, 4), (7, 4), (4, 5), (3, 5)]
    assert max_party_rating(ratings, edges) == 5


def test_party_single_person():
    assert max_party_rating([9], []) == 9


@pytest.mark.parametrize("boss,leaves", [(10, [1, 2, 3]), (2, [4, 5]), (7, [7])])
def test_party_star(boss, leaves):
    edges = [(i, 1) for i in range(2, len(leaves) + 2)]
    assert max_party_rating([boss, *leaves], edges) == max(boss, sum(leaves))


def test_party_without_root_raises():
    with pytest.raises(ValueError):
        max_party_rating([1, 1], [(1, 2), (2, 1)])


def test_party_node_out_of_range():
    with pytest.raises(ValueError):
        max_party_rating([1, 1], [(1, 3)])


@pytest.mark.parametrize("w", [5, -4, 0])
def test_balance_single_node(w):
    assert min_balance_operations(1, [], [w]) == abs(w)


@pytest.mark.parametrize("c", [3, -2])
def test_balance_uniform_weights(c):
    edges = [(1, 2), (1, 3), (3, 4), (3, 5)]
    assert min_balance_operations(5, edges, [c] * 5) == abs(c)


def test_balance_all_zero():
    assert min_balance_operations(4, [(1, 2), (2, 3), (2, 4)], [0, 0, 0, 0]) == 0


def test_balance_weight_count_mismatch():
    with pytest.raises(ValueError):
        min_balance_operations(2, [(1, 2)], [1])


def test_connected_single_node():
    assert connected_black_counts(1, 1000, []) == [1]


@pytest.mark.parametrize("leaves", [1, 3, 6])
def test_connected_star(leaves):
    edges = [(1, i) for i in range(2, leaves + 2)]
    result = connected_black_counts(leaves + 1, 10**9 + 7, edges)
    assert result[0] == 2**leaves
    assert result[1:] == [2 ** (leaves - 1) + 1] * leaves


def test_connected_path_symmetric():
    edges = [(1, 2), (2, 3), (3, 4), (4, 5), (5, 6)]
    result = connected_black_counts(6, 10**9 + 7, edges)
    assert result == result[::-1]


def test_connected_modulus_reduction():
    rng = random.Random(2)
    n = 12
    edges = [(i, rng.randint(1, i - 1)) for i in range(2, n + 1)]
    exact = connected_black_counts(n, 10**18, edges)
    assert connected_black_counts(n, 7, edges) == [v % 7 for v in exact]


def test_connected_rejects_bad_modulus():
    with pytest.raises(ValueError):
        connected_black_counts(2, 0, [(1, 2)])


def test_expected_single_node():
    assert expected_operations(1, []) == pytest.approx(1.0)


def test_expected_path():
    assert expected_operations(3, [(1, 2), (2, 3)]) == pytest.approx(1 + 1 / 2 + 1 / 3)


def test_expected_star():
    edges = [(1, i) for i in range(2, 7)]
    assert expected_operations(6, edges) == pytest.approx(1 + 5 / 2)


def test_expected_rejects_empty_tree():
    with pytest.raises(ValueError):
        expected_operations(0, [])