"""Digit dynamic programming: counting numbers in a range by their digits."""

from __future__ import annotations

from functools import lru_cache
from math import lcm

# Every nonzero digit divides 2520, so residues modulo 2520 decide divisibility.
_LCM_ALL = 2520
# Numbers above this bound are counted but not extended by another digit.
_EXTEND_LIMIT = 10**8


def _with_digit(divisor: int, digit: int) -> int:
    return lcm(divisor, digit) if digit else divisor


@lru_cache(maxsize=None)
def _beautiful_suffixes(remaining: int, residue: int, divisor: int) -> int:
    """Ways to append ``remaining`` free digits so the whole number is beautiful."""
    if remaining == 0:
        return int(residue % divisor == 0)
    return sum(
        _beautiful_suffixes(
            remaining - 1, (residue * 10 + d) % _LCM_ALL, _with_digit(divisor, d)
        )
        for d in range(10)
    )


def _beautiful_upto(n: int) -> int:
    """Beautiful numbers in 0..n (zero counts); 0 when n is negative."""
    if n < 0:
        return 0
    digits = [int(c) for c in str(n)]
    total = 0
    residue = 0
    divisor = 1
    for position, top in enumerate(digits):
        remaining = len(digits) - position - 1
        for d in range(top):
            total += _beautiful_suffixes(
                remaining, (residue * 10 + d) % _LCM_ALL, _with_digit(divisor, d)
            )
        residue = (residue * 10 + top) % _LCM_ALL
        divisor = _with_digit(divisor, top)
    return total + int(residue % divisor == 0)


def count_beautiful(low: int, high: int) -> int:
    """Count numbers in [low, high] divisible by each of their nonzero digits."""
    return _beautiful_upto(high) - _beautiful_upto(low - 1)


def _windy_upto(n: int) -> int:
    """Windy numbers in 1..n: adjacent digits differ by at least 2."""
    if n <= 0:
        return 0
    digits = [int(c) for c in str(n)]

    @lru_cache(maxsize=None)
    def walk(position: int, previous: int, tight: bool, started: bool) -> int:
        if position == len(digits):
            return int(started)
        top = digits[position] if tight else 9
        total = 0
        for d in range(top + 1):
            if started and abs(d - previous) < 2:
                continue
            total += walk(position + 1, d, tight and d == top, started or d != 0)
        return total

    return walk(0, 0, True, False)


def count_windy(low: int, high: int) -> int:
    """Count positive numbers in [low, high] whose adjacent digits differ by at least 2."""
    return _windy_upto(high) - _windy_upto(low - 1)


def count_two_digit_numbers(limit: int) -> int:
    """Count numbers in 1..limit written with at most two distinct digits.

    Numbers are grown digit by digit from 1..9; a number above 10**8 is
    counted but not grown further.
    """
    total = 0
    stack = list(range(1, 10))
    while stack:
        number = stack.pop()
        if number > limit:
            continue
        total += 1
        if number > _EXTEND_LIMIT:
            continue
        for d in range(10):
            child = number * 10 + d
            if len(set(str(child))) <= 2:
                stack.append(child)
    return total