"""Counting boarding orders for a plane with entrances at both ends."""

from __future__ import annotations

MODULUS = 10**9 + 7


def seating_count(n: int, m: int) -> int:
    """Ways for ``m`` passengers to board ``n`` seats with nobody left angry, mod 1e9+7.

    Equals ``(2(n+1))**m * (n+1-m) / (n+1)``.
    """
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    if m > n + 1:
        raise ValueError("more passengers than the formula admits")
    result = pow(2 * (n + 1), m, MODULUS)
    result = result * (n + 1 - m) % MODULUS
    return result * pow(n + 1, MODULUS - 2, MODULUS) % MODULUS