"""Binary-search tools over sorted sequences, and problems built on them."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from itertools import combinations_with_replacement
from typing import Iterable, Sequence


def lower_bound(values: Sequence[int], x: int) -> int:
    """First index in sorted ``values`` whose element is not less than ``x``."""
    return bisect_left(values, x)


def upper_bound(values: Sequence[int], x: int) -> int:
    """First index in sorted ``values`` whose element is greater than ``x``."""
    return bisect_right(values, x)


def contains(values: Sequence[int], x: int) -> bool:
    """Whether sorted ``values`` holds ``x``."""
    index = lower_bound(values, x)
    return index < len(values) and values[index] == x


def membership(cards: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it appears among ``cards``."""
    ordered = sorted(cards)
    return [contains(ordered, query) for query in queries]


def count_occurrences(cards: Iterable[int], queries: Iterable[int]) -> list[int]:
    """For each query, how many of ``cards`` equal it."""
    ordered = sorted(cards)
    return [upper_bound(ordered, query) - lower_bound(ordered, query) for query in queries]


def max_cable_length(cables: Sequence[int], needed: int) -> int:
    """Longest whole length that cuts at least ``needed`` pieces from ``cables``."""
    if needed < 1:
        raise ValueError("needed must be positive")
    if any(cable < 1 for cable in cables):
        raise ValueError("cable lengths must be positive")
    if sum(cables) < needed:
        raise ValueError("cables are too short for that many pieces")
    low, high = 1, max(cables)
    while low < high:
        middle = (low + high + 1) // 2
        if sum(cable // middle for cable in cables) >= needed:
            low = middle
        else:
            high = middle - 1
    return low


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value by the number of distinct values smaller than it."""
    distinct = sorted(set(values))
    return [lower_bound(distinct, value) for value in values]


def largest_triple_sum(values: Iterable[int]) -> int | None:
    """Largest element equal to a sum of three elements (repeats allowed), or None."""
    ordered = sorted(values)
    pair_sums = sorted(a + b for a, b in combinations_with_replacement(ordered, 2))
    for i in reversed(range(1, len(ordered))):
        for j in reversed(range(i)):
            if contains(pair_sums, ordered[i] - ordered[j]):
                return ordered[i]
    return None