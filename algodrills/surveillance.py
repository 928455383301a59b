"""Minimum unwatched area for an office guarded by rotatable cameras."""

from __future__ import annotations

from itertools import product
from typing import Sequence

_EMPTY = 0
_WALL = 6
# (row step, column step): right, down, left, up
_STEPS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_CAMERA_OFFSETS = {
    1: (0,),
    2: (0, 2),
    3: (0, 1),
    4: (0, 1, 2),
    5: (0, 1, 2, 3),
}


def _ray(grid: Sequence[Sequence[int]], row: int, col: int, direction: int) -> frozenset:
    d_row, d_col = _STEPS[direction % 4]
    height, width = len(grid), len(grid[0])
    seen = set()
    r, c = row + d_row, col + d_col
    while 0 <= r < height and 0 <= c < width and grid[r][c] != _WALL:
        if grid[r][c] == _EMPTY:
            seen.add((r, c))
        r += d_row
        c += d_col
    return frozenset(seen)


def min_blind_spots(grid: Sequence[Sequence[int]]) -> int:
    """Fewest empty cells left unwatched over every camera orientation.

    Cells are 0 (empty), 1-5 (camera kinds) or 6 (wall). Camera views pass
    over other cameras and stop at walls or the grid edge.
    """
    if grid and any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("grid rows must all have the same length")
    empty = set()
    cameras = []
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == _EMPTY:
                empty.add((r, c))
            elif cell in _CAMERA_OFFSETS:
                cameras.append((r, c, cell))
            elif cell != _WALL:
                raise ValueError(f"invalid cell value {cell!r} at ({r}, {c})")

    options = []
    for r, c, kind in cameras:
        views = {
            frozenset().union(*(_ray(grid, r, c, turn + offset) for offset in _CAMERA_OFFSETS[kind]))
            for turn in range(4)
        }
        options.append(views)

    best = len(empty)
    for choice in product(*options):
        watched = set().union(*choice)
        best = min(best, len(empty) - len(watched))
    return best