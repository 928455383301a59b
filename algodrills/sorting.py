"""Comparison and counting sorts, merging of sorted runs, and mode finding."""

from __future__ import annotations

from itertools import groupby
from typing import Any, Callable, Iterable, Sequence, TypeVar

T = TypeVar("T")


def _merge(
    left: list[T], right: list[T], key: Callable[[T], Any] | None
) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        a, b = left[i], right[j]
        if key is not None:
            a_key, b_key = key(a), key(b)
        else:
            a_key, b_key = a, b
        # Ties are taken from the left run, which keeps the sort stable.
        if a_key > b_key:
            merged.append(b)
            j += 1
        else:
            merged.append(a)
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[T], key: Callable[[T], Any] | None = None) -> list[T]:
    """Return a new list with ``values`` in ascending order (stable)."""
    items = list(values)

    def sort(part: list[T]) -> list[T]:
        if len(part) <= 1:
            return part
        middle = len(part) // 2
        return _merge(sort(part[:middle]), sort(part[middle:]), key)

    return sort(items)


def quick_sort(values: Iterable[T]) -> list[T]:
    """Return a new ascending list, partitioning around the first element."""
    items = list(values)

    def sort(start: int, end: int) -> None:
        while end - start > 1:
            pivot = items[start]
            left, right = start + 1, end - 1
            while True:
                while left <= right and pivot >= items[left]:
                    left += 1
                while left <= right and pivot <= items[right]:
                    right -= 1
                if left >= right:
                    break
                items[left], items[right] = items[right], items[left]
            items[start], items[right] = items[right], items[start]
            # Recurse into the smaller side, loop over the larger one.
            if right - start < end - right - 1:
                sort(start, right)
                start = right + 1
            else:
                sort(right + 1, end)
                end = right

    sort(0, len(items))
    return items


def merge_sorted(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Merge two ascending sequences into one ascending list."""
    return _merge(list(first), list(second), None)


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    low, high = min(items), max(items)
    counts = [0] * (high - low + 1)
    for value in items:
        counts[value - low] += 1
    return [low + offset for offset, count in enumerate(counts) for _ in range(count)]


def most_frequent(cards: Iterable[int]) -> int:
    """The value that occurs most often; the smallest one on a tie."""
    ordered = merge_sort(cards)
    if not ordered:
        raise ValueError("no cards given")
    best_value = ordered[0]
    best_count = 0
    for value, run in groupby(ordered):
        count = sum(1 for _ in run)
        if count > best_count:
            best_value, best_count = value, count
    return best_value