"""Greedy choices: pairing, coin change, scheduling, ropes and loot splitting."""

from __future__ import annotations

from typing import Iterable, Sequence


def min_product_sum(first: Sequence[int], second: Sequence[int]) -> int:
    """Smallest sum of pairwise products over all rearrangements of ``first``."""
    if len(first) != len(second):
        raise ValueError("sequences must have the same length")
    ascending = sorted(first)
    descending = sorted(second, reverse=True)
    return sum(a * b for a, b in zip(ascending, descending))


def min_coins(coins: Iterable[int], amount: int) -> int:
    """Coins needed for ``amount`` taking the largest denomination first.

    Each denomination is expected to divide the next larger one, as in the
    classic change-making puzzle, so the greedy count is the minimum.
    """
    denominations = sorted(coins, reverse=True)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must be non-negative")
    count = 0
    for coin in denominations:
        used, amount = divmod(amount, coin)
        count += used
    if amount:
        raise ValueError("amount cannot be made with these coins")
    return count


def max_meetings(meetings: Iterable[tuple[int, int]]) -> int:
    """Most non-overlapping meetings; one may start when the previous ends."""
    ordered = sorted(meetings, key=lambda meeting: (meeting[1], meeting[0]))
    count = 0
    last_end = 0
    for start, end in ordered:
        if start < last_end:
            continue
        count += 1
        last_end = end
    return count


def max_rope_weight(ropes: Iterable[int]) -> int:
    """Heaviest load liftable by sharing it evenly among a choice of ropes."""
    ordered = sorted(ropes)
    total = len(ordered)
    return max((limit * (total - i) for i, limit in enumerate(ordered)), default=0)


def divide_loot(pirates: int, treasures: Iterable[int]) -> int:
    """Value the last pirate gets when items are taken in turns, best first."""
    if pirates < 0:
        raise ValueError("pirates must be non-negative")
    ordered = sorted(treasures, reverse=True)
    share = len(ordered) // (pirates + 1)
    return sum(ordered[:share])