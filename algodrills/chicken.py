"""Choosing which restaurants to keep so the city's delivery distance is smallest."""

from __future__ import annotations

from itertools import combinations
from typing import Sequence

_HOME = 1
_SHOP = 2


def min_city_distance(grid: Sequence[Sequence[int]], keep: int) -> int:
    """Smallest total home-to-nearest-shop distance when only ``keep`` shops stay open.

    Cells are 0 (empty), 1 (home) or 2 (shop); distance is Manhattan distance.
    """
    homes = []
    shops = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == _HOME:
                homes.append((r, c))
            elif cell == _SHOP:
                shops.append((r, c))
    if not 1 <= keep <= len(shops):
        raise ValueError(f"keep must be between 1 and {len(shops)}")

    def total(open_shops: tuple[tuple[int, int], ...]) -> int:
        return sum(
            min(abs(hr - sr) + abs(hc - sc) for sr, sc in open_shops) for hr, hc in homes
        )

    return min(total(chosen) for chosen in combinations(shops, keep))