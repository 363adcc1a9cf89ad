"""Modular arithmetic: inverse tables, Lucas binomials and discrete logarithms."""

from __future__ import annotations

from math import isqrt


def linear_inverses(n: int, p: int) -> list[int]:
    """Inverses of 1..n modulo the prime ``p``, computed in linear time."""
    inverses = [0, 1]
    for i in range(2, n + 1):
        inverses.append(inverses[p % i] * (p - p // i) % p)
    return inverses[1 : n + 1]


def lucas_binomial(n: int, m: int, p: int) -> int:
    """The binomial coefficient C(n, m) modulo the prime ``p``."""
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    if p < 2:
        raise ValueError("the modulus must be a prime")
    factorials = [1]
    for i in range(1, min(n, p - 1) + 1):
        factorials.append(factorials[-1] * i % p)

    def small(a: int, b: int) -> int:
        if b > a:
            return 0
        denominator = factorials[b] * factorials[a - b] % p
        return factorials[a] * pow(denominator, p - 2, p) % p

    result = 1
    while m:
        result = result * small(n % p, m % p) % p
        n //= p
        m //= p
    return result


def discrete_log(base: int, target: int, modulus: int) -> int | None:
    """A positive x with base**x == target (mod modulus), by baby-step giant-step.

    Returns None when no solution is found.
    """
    if modulus < 2:
        raise ValueError("the modulus must be at least 2")
    a = base % modulus
    b = target % modulus
    giant = isqrt(modulus)
    if giant * giant < modulus:
        giant += 1

    baby: dict[int, int] = {}
    value = b
    for i in range(giant):
        baby[value] = i
        value = value * a % modulus

    step = pow(a, giant, modulus)
    if step == 0:
        return 1 if b == 0 else None
    current = 1
    for i in range(1, giant + 1):
        current = current * step % modulus
        j = baby.get(current)
        if j is not None and giant * i - j >= 0:
            return giant * i - j
    return None