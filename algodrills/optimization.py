"""Optimising recurrences: subsequences, painting, schedules, triangles and stairs."""

from __future__ import annotations

from itertools import accumulate
from typing import Iterable, Sequence


def longest_increasing(values: Sequence[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    lengths: list[int] = []
    for i, value in enumerate(values):
        lengths.append(
            1 + max((lengths[j] for j in range(i) if values[j] < value), default=0)
        )
    return max(lengths, default=0)


def max_increasing_sum(values: Sequence[int]) -> int:
    """Largest sum of a strictly increasing subsequence."""
    sums: list[int] = []
    for i, value in enumerate(values):
        sums.append(
            value + max((sums[j] for j in range(i) if values[j] < value), default=0)
        )
    return max(sums, default=0)


def min_paint_cost(costs: Iterable[Sequence[int]]) -> int:
    """Cheapest way to paint a row of houses in three colours, neighbours differing."""
    best: list[int] | None = None
    for row in costs:
        if len(row) != 3:
            raise ValueError("each house needs exactly three colour costs")
        if best is None:
            best = list(row)
        else:
            best = [
                row[colour] + min(best[(colour + 1) % 3], best[(colour + 2) % 3])
                for colour in range(3)
            ]
    if best is None:
        raise ValueError("no houses given")
    return min(best)


class PrefixSums:
    """Constant-time sums over ranges of a fixed sequence."""

    def __init__(self, values: Iterable[int]) -> None:
        self._totals = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._totals) - 1

    def range_sum(self, start: int, end: int) -> int:
        """Sum of the elements numbered ``start`` to ``end``, counting from 1, inclusive."""
        if not 1 <= start <= len(self) or not 1 <= end <= len(self):
            raise IndexError("range outside the sequence")
        if start > end:
            raise ValueError("start must not exceed end")
        return self._totals[end] - self._totals[start - 1]


def max_consult_profit(jobs: Sequence[tuple[int, int]]) -> int:
    """Most pay from consultations (duration, pay) that finish within the schedule."""
    days = len(jobs)
    best = [0] * (days + 2)
    for day in range(days, 0, -1):
        duration, pay = jobs[day - 1]
        if duration < 1:
            raise ValueError("durations must be positive")
        if day + duration <= days + 1:
            best[day] = max(best[day + duration] + pay, best[day + 1])
        else:
            best[day] = best[day + 1]
    return max(best)


def max_triangle_path(triangle: Sequence[Sequence[int]]) -> int:
    """Largest sum on a path from the apex to the base, moving down-left or down-right."""
    best: list[int] = []
    for depth, row in enumerate(triangle):
        if len(row) != depth + 1:
            raise ValueError("row k of the triangle must hold k + 1 numbers")
        best = [
            value
            + max(
                (best[j] for j in (position - 1, position) if 0 <= j < len(best)),
                default=0,
            )
            for position, value in enumerate(row)
        ]
    if not best:
        raise ValueError("empty triangle")
    return max(best)


def max_stair_score(scores: Sequence[int]) -> int:
    """Best score climbing one or two stairs at a time, never three in a row, ending on top."""
    if not scores:
        raise ValueError("no stairs given")
    best = [0, scores[0]]
    if len(scores) >= 2:
        best.append(scores[0] + scores[1])
    for i in range(3, len(scores) + 1):
        best.append(scores[i - 1] + max(scores[i - 2] + best[i - 3], best[i - 2]))
    return best[len(scores)]