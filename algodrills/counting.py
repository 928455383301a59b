"""Counting recurrences: Fibonacci calls, tilings, stair and pinary numbers and more."""

from __future__ import annotations

STAIR_MODULUS = 1_000_000_000
TILING_MODULUS = 10_007


def _require_positive(n: int) -> None:
    if n < 1:
        raise ValueError("n must be at least 1")


def fibonacci_calls(n: int) -> tuple[int, int]:
    """How often a naive recursive Fibonacci of ``n`` reaches fib(0) and fib(1)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    zeros, ones = 1, 0
    next_zeros, next_ones = 0, 1
    for _ in range(n):
        zeros, ones, next_zeros, next_ones = (
            next_zeros,
            next_ones,
            zeros + next_zeros,
            ones + next_ones,
        )
    return zeros, ones


def stair_numbers(n: int) -> int:
    """Count of ``n``-digit numbers whose adjacent digits differ by one, modulo 10**9."""
    _require_positive(n)
    ends = [0] + [1] * 9
    for _ in range(n - 1):
        ends = [
            (
                (ends[digit - 1] if digit > 0 else 0)
                + (ends[digit + 1] if digit < 9 else 0)
            )
            % STAIR_MODULUS
            for digit in range(10)
        ]
    return sum(ends) % STAIR_MODULUS


def _tiling_count(n: int, second: int, square_weight: int) -> int:
    _require_positive(n)
    if n == 1:
        return 1
    before, current = 1, second
    for _ in range(n - 2):
        before, current = current, (current + square_weight * before) % TILING_MODULUS
    return current % TILING_MODULUS


def tilings(n: int) -> int:
    """Ways to tile a 2 x ``n`` strip with 1 x 2 dominoes, modulo 10007."""
    return _tiling_count(n, 2, 1)


def tilings_with_squares(n: int) -> int:
    """Ways to tile a 2 x ``n`` strip with dominoes and 2 x 2 squares, modulo 10007."""
    return _tiling_count(n, 3, 2)


def _ops_table(n: int) -> tuple[list[int], list[int]]:
    _require_positive(n)
    steps = [0] * (n + 1)
    previous = [0] * (n + 1)
    for i in range(2, n + 1):
        steps[i] = steps[i - 1] + 1
        previous[i] = i - 1
        if i % 3 == 0:
            third = i // 3
            steps[i] = min(steps[third] + 1, steps[i])
            previous[i] = i - 1 if steps[third] > steps[i - 1] else third
        if i % 2 == 0:
            half = i // 2
            steps[i] = min(steps[half] + 1, steps[i])
            chosen = previous[i]
            previous[i] = chosen if steps[half] > steps[chosen] else half
    return steps, previous


def min_ops_to_one(n: int) -> int:
    """Fewest operations (divide by 3, divide by 2, subtract 1) taking ``n`` to 1."""
    steps, _ = _ops_table(n)
    return steps[n]


def min_ops_path(n: int) -> list[int]:
    """One shortest sequence of values from ``n`` down to 1."""
    steps, previous = _ops_table(n)
    path = [n]
    for _ in range(steps[n]):
        path.append(previous[path[-1]])
    return path


def pinary_numbers(n: int) -> int:
    """Count of ``n``-digit binary numbers starting with 1 and with no two adjacent 1s."""
    _require_positive(n)
    ending_zero, ending_one = 0, 1
    for _ in range(n - 1):
        ending_zero, ending_one = ending_zero + ending_one, ending_zero
    return ending_zero + ending_one


def sum_ways(n: int) -> int:
    """Ways to write ``n`` as an ordered sum of 1s, 2s and 3s."""
    _require_positive(n)
    ways = [1, 2, 4]
    while len(ways) < n:
        ways.append(ways[-1] + ways[-2] + ways[-3])
    return ways[n - 1]


def padovan(n: int) -> int:
    """The ``n``-th term of the Padovan sequence 1, 1, 1, 2, 2, 3, ..."""
    _require_positive(n)
    terms = [1, 1, 1]
    while len(terms) < n:
        terms.append(terms[-2] + terms[-3])
    return terms[n - 1]