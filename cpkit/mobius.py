"""Counting sums over gcd and lcm with the Mobius and Euler functions."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import accumulate


def _linear_sieve(limit: int) -> tuple[list[int], list[int], list[int]]:
    """Primes up to ``limit`` with the Mobius and Euler phi values of 0..limit."""
    mu = [0] * (limit + 1)
    phi = [0] * (limit + 1)
    if limit >= 1:
        mu[1] = phi[1] = 1
    composite = bytearray(limit + 1)
    primes: list[int] = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            mu[i] = -1
            phi[i] = i - 1
        for p in primes:
            t = i * p
            if t > limit:
                break
            composite[t] = 1
            if i % p == 0:
                mu[t] = 0
                phi[t] = phi[i] * p
                break
            mu[t] = -mu[i]
            phi[t] = phi[i] * phi[p]
    return primes, mu, phi


def _block_sum(prefix: Sequence[int], a: int, b: int) -> int:
    """Sum of f(i) * (a // i) * (b // i) over i = 1..min(a, b), f given by its prefix sums."""
    total = 0
    i = 1
    top = min(a, b)
    while i <= top:
        hi = min(a // (a // i), b // (b // i))
        total += (prefix[hi] - prefix[i - 1]) * (a // i) * (b // i)
        i = hi + 1
    return total


def mobius_prefix(limit: int) -> list[int]:
    """Prefix sums of the Mobius function; entry i holds mu(1) + ... + mu(i)."""
    if limit < 0:
        raise ValueError("the limit must be non-negative")
    _, mu, _ = _linear_sieve(limit)
    return list(accumulate(mu))


def count_coprime_pairs(a: int, b: int, d: int) -> int:
    """Count pairs (x, y) with 1 <= x <= a, 1 <= y <= b and gcd(x, y) == d."""
    if d < 1:
        raise ValueError("d must be positive")
    a //= d
    b //= d
    if min(a, b) <= 0:
        return 0
    return _block_sum(mobius_prefix(min(a, b)), a, b)


def count_coprime_pairs_in_box(a: int, b: int, c: int, d: int, k: int) -> int:
    """Count pairs with a <= x <= b, c <= y <= d and gcd(x, y) == k."""
    if k < 1:
        raise ValueError("k must be positive")
    if a < 1 or c < 1:
        raise ValueError("ranges must start at 1 or above")
    low_x, high_x = (a - 1) // k, b // k
    low_y, high_y = (c - 1) // k, d // k
    prefix = mobius_prefix(max(high_x, high_y, 0))

    def upto(x: int, y: int) -> int:
        return _block_sum(prefix, x, y) if min(x, y) > 0 else 0

    return upto(high_x, high_y) + upto(low_x, low_y) - upto(low_x, high_y) - upto(high_x, low_y)


def lcm_pair_sum(values: Sequence[int]) -> int:
    """Sum of lcm(a_i, a_j) over all ordered pairs (i, j), including i == j."""
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    if not values:
        return 0
    top = max(values)
    _, mu, _ = _linear_sieve(top)
    weight = [0] * (top + 1)
    for i in range(1, top + 1):
        term = mu[i] * i
        if term:
            for multiple in range(i, top + 1, i):
                weight[multiple] += term
    counts = [0] * (top + 1)
    for v in values:
        counts[v] += 1
    total = 0
    for i in range(1, top + 1):
        s = sum(j * counts[i * j] for j in range(1, top // i + 1))
        total += s * s * weight[i] * i
    return total


def count_prime_gcd_pairs(a: int, b: int) -> int:
    """Count pairs (x, y) with 1 <= x <= a, 1 <= y <= b whose gcd is a prime."""
    top = min(a, b)
    if top < 2:
        return 0
    primes, mu, _ = _linear_sieve(top)
    weight = [0] * (top + 1)
    for p in primes:
        for j in range(1, top // p + 1):
            weight[p * j] += mu[j]
    return _block_sum(list(accumulate(weight)), a, b)


def energy_sum(n: int, m: int) -> int:
    """Sum over 1 <= x <= n, 1 <= y <= m of 2 * gcd(x, y) - 1."""
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    top = min(n, m)
    _, _, phi = _linear_sieve(top)
    gcd_total = _block_sum(list(accumulate(phi)), n, m) if top > 0 else 0
    return gcd_total * 2 - n * m