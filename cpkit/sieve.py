"""Sieve-based counts: primes in a range, undivided values and coprime subsets."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import isqrt

_MODULUS = 10**9 + 7
_MAX_SUBSET = 8


def _base_primes(limit: int) -> list[int]:
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    primes = []
    for i in range(2, limit + 1):
        if not composite[i]:
            primes.append(i)
            composite[i * i :: i] = bytes(len(range(i * i, limit + 1, i)))
            for j in range(i * i, limit + 1, i):
                composite[j] = 1
    return primes


def count_primes_in_range(low: int, high: int) -> int:
    """Count the primes p with low <= p <= high, by a segmented sieve."""
    if low < 1:
        raise ValueError("the range must start at 1 or above")
    if high < low:
        return 0
    marked = bytearray(high - low + 1)
    for p in _base_primes(isqrt(high)):
        first = max(2, -(-low // p)) * p
        for multiple in range(first, high + 1, p):
            marked[multiple - low] = 1
    if low == 1:
        marked[0] = 1
    return marked.count(0)


def count_non_divisible(values: Sequence[int]) -> int:
    """Count the values that occur once and are divisible by no other value in the list."""
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    if not values:
        return 0
    counts = Counter(values)
    top = max(values)
    divided = bytearray(top + 1)
    for v in sorted(counts):
        if not divided[v]:
            for multiple in range(2 * v, top + 1, v):
                divided[multiple] = 1
    return sum(1 for v in values if counts[v] == 1 and not divided[v])


def min_coprime_subset(values: Sequence[int]) -> int | None:
    """Size of the smallest subset whose gcd is 1, trying sizes 1 to 8.

    Subsets with gcd exactly d are counted modulo 1e9+7 by inclusion-exclusion
    over multiples of d. Returns None when no size up to 8 works.
    """
    if any(v < 1 for v in values):
        raise ValueError("values must be positive")
    if not values:
        return None
    top = max(values)
    counts = [0] * (top + 1)
    for v in values:
        counts[v] += 1
    divisible = [sum(counts[i::i]) if i else 0 for i in range(top + 1)]

    n = len(values)
    factorial = [1] * (n + 1)
    for i in range(2, n + 1):
        factorial[i] = factorial[i - 1] * i % _MODULUS
    inverse = [1] * (n + 1)
    inverse[n] = pow(factorial[n], _MODULUS - 2, _MODULUS)
    for i in range(n, 0, -1):
        inverse[i - 1] = inverse[i] * i % _MODULUS

    def choose(total: int, size: int) -> int:
        if size > total:
            return 0
        return factorial[total] * inverse[size] % _MODULUS * inverse[total - size] % _MODULUS

    for size in range(1, _MAX_SUBSET + 1):
        exact = [0] * (top + 1)
        for d in range(top, 0, -1):
            value = choose(divisible[d], size) - sum(exact[2 * d :: d])
            exact[d] = value % _MODULUS
        if exact[1]:
            return size
    return None