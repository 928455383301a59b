"""Divisibility, primes, binomial coefficients and calendar cycles."""

from __future__ import annotations

import math
from typing import Iterable

BINOMIAL_MODULUS = 10_007


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple, dividing before multiplying."""
    if a == 0 or b == 0:
        return 0
    return a // gcd(a, b) * b


def _check_choice(n: int, k: int) -> None:
    if n < 0:
        raise ValueError("n must be non-negative")
    if not 0 <= k <= n:
        raise ValueError("k must lie between 0 and n")


def binomial(n: int, k: int) -> int:
    """Number of ways to choose ``k`` items from ``n``."""
    _check_choice(n, k)
    return math.comb(n, k)


def binomial_mod(n: int, k: int, modulus: int = BINOMIAL_MODULUS) -> int:
    """Binomial coefficient modulo ``modulus``, built row by row from Pascal's rule."""
    _check_choice(n, k)
    if modulus < 1:
        raise ValueError("modulus must be positive")
    row = [1]
    for _ in range(n):
        row = [1, *((left + right) % modulus for left, right in zip(row, row[1:])), 1]
    return row[k] % modulus


def factorize(n: int) -> list[int]:
    """Prime factors of ``n`` in ascending order, repeated by multiplicity."""
    if n < 1:
        raise ValueError("n must be positive")
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n != 1:
        factors.append(n)
    return factors


def sieve(n: int) -> list[bool]:
    """Primality flags for 0..``n`` by the sieve of Eratosthenes."""
    if n < 0:
        raise ValueError("n must be non-negative")
    flags = [True] * (n + 1)
    flags[0] = False
    if n >= 1:
        flags[1] = False
    candidate = 2
    while candidate * candidate <= n:
        if flags[candidate]:
            for multiple in range(candidate * candidate, n + 1, candidate):
                flags[multiple] = False
        candidate += 1
    return flags


def primes_between(low: int, high: int) -> list[int]:
    """All primes ``p`` with ``low <= p <= high``."""
    if low > high or high < 2:
        return []
    flags = sieve(high)
    return [value for value in range(max(low, 0), high + 1) if flags[value]]


def is_prime(n: int) -> bool:
    """Whether ``n`` is prime, by trial division up to its square root."""
    if n < 2:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return False
        divisor += 1
    return True


def count_primes(values: Iterable[int]) -> int:
    """How many of ``values`` are prime."""
    return sum(1 for value in values if is_prime(value))


def kaing_year(m: int, n: int, x: int, y: int) -> int | None:
    """Year numbered ``<x:y>`` in a calendar cycling through m and n, or None if it never occurs."""
    if m < 1 or n < 1:
        raise ValueError("cycle lengths must be positive")
    if not 1 <= x <= m or not 1 <= y <= n:
        raise ValueError("x must lie in 1..m and y in 1..n")
    target = y % n
    for year in range(x, lcm(m, n) + 1, m):
        if year % n == target:
            return year
    return None


def divisors(n: int) -> list[int]:
    """All positive divisors of ``n`` in ascending order."""
    if n < 1:
        raise ValueError("n must be positive")
    small = []
    candidate = 1
    while candidate * candidate <= n:
        if n % candidate == 0:
            small.append(candidate)
        candidate += 1
    large = [n // d for d in reversed(small) if d * d != n]
    return small + large