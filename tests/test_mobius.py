import pytest

from cpkit.mobius import (
    count_coprime_pairs,
    count_coprime_pairs_in_box,
    count_prime_gcd_pairs,
    energy_sum,
    lcm_pair_sum,
    mobius_prefix,
)


def test_mobius_prefix_start():
    prefix = mobius_prefix(3)
    assert prefix[:2] == [0, 1]
    assert len(prefix) == 4


@pytest.mark.parametrize("n", [1, 2, 7, 30, 100])
def test_mertens_identity(n):
    prefix = mobius_prefix(n)
    assert sum(prefix[n // d] for d in range(1, n + 1)) == 1


def test_mobius_prefix_negative():
    with pytest.raises(ValueError):
        mobius_prefix(-1)


def test_coprime_pairs_sample():
    assert count_coprime_pairs(4, 5, 2) == 3


@pytest.mark.parametrize("a,b", [(6, 4), (10, 13), (30, 7)])
def test_coprime_pairs_partition_all_pairs(a, b):
    assert sum(count_coprime_pairs(a, b, d) for d in range(1, min(a, b) + 1)) == a * b


@pytest.mark.parametrize("a,b,d", [(6, 4, 3), (20, 9, 2), (15, 15, 1)])
def test_coprime_pairs_symmetric(a, b, d):
    assert count_coprime_pairs(a, b, d) == count_coprime_pairs(b, a, d)


def test_coprime_pairs_large_d():
    assert count_coprime_pairs(5, 5, 6) == 0


def test_coprime_pairs_bad_d():
    with pytest.raises(ValueError):
        count_coprime_pairs(5, 5, 0)


@pytest.mark.parametrize("b,d,k", [(5, 5, 1), (20, 14, 2), (9, 30, 3)])
def test_box_from_origin_matches_pairs(b, d, k):
    assert count_coprime_pairs_in_box(1, b, 1, d, k) == count_coprime_pairs(b, d, k)


@pytest.mark.parametrize("a,b,c,d,k", [(2, 5, 1, 5, 1), (3, 17, 4, 12, 2), (5, 30, 7, 22, 3)])
def test_box_splits_additively(a, b, c, d, k):
    whole = count_coprime_pairs_in_box(a, b, c, d, k)
    mid = (a + b) // 2
    parts = count_coprime_pairs_in_box(a, mid, c, d, k) + count_coprime_pairs_in_box(
        mid + 1, b, c, d, k
    )
    assert whole == parts


def test_box_bad_k():
    with pytest.raises(ValueError):
        count_coprime_pairs_in_box(1, 5, 1, 5, 0)


@pytest.mark.parametrize("v", [1, 6, 97])
def test_lcm_single_value(v):
    assert lcm_pair_sum([v]) == v


@pytest.mark.parametrize("v,k", [(4, 3), (9, 2)])
def test_lcm_repeated_value(v, k):
    assert lcm_pair_sum([v] * k) == k * k * v


def test_lcm_scales_linearly():
    base = [2, 3, 5, 8]
    assert lcm_pair_sum([3 * x for x in base]) == 3 * lcm_pair_sum(base)


def test_lcm_order_independent():
    assert lcm_pair_sum([4, 9, 6, 10]) == lcm_pair_sum([10, 6, 9, 4])


def test_lcm_rejects_zero():
    with pytest.raises(ValueError):
        lcm_pair_sum([0, 2])


def test_prime_gcd_sample():
    assert count_prime_gcd_pairs(10, 10) == 30


@pytest.mark.parametrize("a,b", [(12, 7), (25, 30)])
def test_prime_gcd_is_sum_over_primes(a, b):
    primes = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
    expected = sum(count_coprime_pairs(a, b, p) for p in primes if p <= min(a, b))
    assert count_prime_gcd_pairs(a, b) == expected


def test_prime_gcd_small():
    assert count_prime_gcd_pairs(1, 100) == 0


def test_energy_sample():
    assert energy_sum(5, 4) == 36


def test_energy_single_cell():
    assert energy_sum(1, 1) == 1


@pytest.mark.parametrize("n,m", [(3, 4), (10, 7), (25, 25)])
def test_energy_matches_gcd_counts(n, m):
    gcd_total = sum(d * count_coprime_pairs(n, m, d) for d in range(1, min(n, m) + 1))
    assert energy_sum(n, m) == 2 * gcd_total - n * m


def test_energy_symmetric():
    assert energy_sum(13, 8) == energy_sum(8, 13)


def test_energy_negative():
    with pytest.raises(ValueError):
        energy_sum(-1, 3)