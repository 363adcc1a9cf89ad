"""Extended Euclid and what it solves: modular inverses and linear Diophantine equations."""

from __future__ import annotations

from collections.abc import Sequence
from math import gcd


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g``, where ``g`` is the gcd of ``a`` and ``b``."""
    if b == 0:
        return a, 1, 0
    g, x, y = ext_gcd(b, a % b)
    return g, y, x - (a // b) * y


def _inverse(value: int, modulus: int) -> int:
    g, x, _ = ext_gcd(value % modulus, modulus)
    if g != 1:
        raise ValueError(f"{value} has no inverse modulo {modulus}")
    return x % modulus


def weighted_inverse_sum(values: Sequence[int], p: int, k: int) -> int:
    """Sum of ``k**i / values[i-1]`` for i = 1..n, modulo ``p``.

    Only one modular inverse is taken, that of the product of all values;
    the individual inverses come from prefix and suffix products.
    """
    if p < 2:
        raise ValueError("the modulus must be at least 2")
    n = len(values)
    suffix = [1] * (n + 1)
    for i in range(n - 1, -1, -1):
        suffix[i] = suffix[i + 1] * values[i] % p

    prefix_over_total = _inverse(suffix[0], p)
    power = k % p
    total = 0
    for i, value in enumerate(values):
        total = (total + power * (prefix_over_total * suffix[i + 1] % p)) % p
        prefix_over_total = prefix_over_total * value % p
        power = power * k % p
    return total


def _least_positive(value: int, modulus: int) -> int:
    residue = value % modulus
    return residue if residue > 0 else modulus


def solve_linear_diophantine(a: int, b: int, c: int) -> tuple[int, ...] | None:
    """Describe the integer solutions of ``a*x + b*y == c`` for positive ``a`` and ``b``.

    Returns None when there is no integer solution. When solutions with both
    x and y positive exist, returns ``(count, x_min, y_min, x_max, y_max)``;
    otherwise returns ``(x_min, y_min)``, the least positive x and the least
    positive y among integer solutions.
    """
    if a <= 0 or b <= 0:
        raise ValueError("a and b must be positive")
    g = gcd(a, b)
    if c % g:
        return None
    a, b, c = a // g, b // g, c // g
    _, x0, y0 = ext_gcd(a, b)
    x_min = _least_positive(x0 * c, b)
    y_min = _least_positive(y0 * c, a)
    x_max = (c - b * y_min) // a
    y_max = (c - a * x_min) // b
    if x_max <= 0:
        return x_min, y_min
    count = (x_max - x_min) // b + 1
    return count, x_min, y_min, x_max, y_max