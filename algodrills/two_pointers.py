"""Two-cursor scans over sequences: windows, membership and gaps."""

from __future__ import annotations

from typing import Iterable, Sequence


def shortest_subarray(values: Sequence[int], target: int) -> int:
    """Length of the shortest contiguous run whose sum reaches ``target``, or 0 if none does.

    Values must be non-negative so that the sliding window stays monotone.
    """
    items = list(values)
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    best: int | None = None
    total = 0
    start = 0
    for end, value in enumerate(items):
        total += value
        while start <= end and total >= target:
            length = end - start + 1
            best = length if best is None else min(best, length)
            total -= items[start]
            start += 1
    return best or 0


def membership_scan(cards: Iterable[int], queries: Iterable[int]) -> list[bool]:
    """For each query, whether it appears among ``cards``, found by one merged scan."""
    ordered = sorted(cards)
    indexed = sorted(enumerate(queries), key=lambda pair: pair[1])
    found = [False] * len(indexed)
    position = 0
    for index, query in indexed:
        while position < len(ordered) and ordered[position] < query:
            position += 1
        if position == len(ordered):
            break
        found[index] = ordered[position] == query
    return found


def min_difference_at_least(values: Iterable[int], minimum: int) -> int:
    """Smallest difference between two elements that is at least ``minimum``.

    The same element may be paired with itself, so a ``minimum`` of 0 gives 0.
    """
    if minimum < 0:
        raise ValueError("minimum must be non-negative")
    ordered = sorted(values)
    best: int | None = None
    end = 0
    for start, low in enumerate(ordered):
        end = max(end, start)
        while end < len(ordered) and ordered[end] - low < minimum:
            end += 1
        if end == len(ordered):
            break
        difference = ordered[end] - low
        best = difference if best is None else min(best, difference)
    if best is None:
        raise ValueError("no pair of values differs by at least the minimum")
    return best