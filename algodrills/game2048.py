"""Sliding-tile moves and exhaustive search for the 2048 puzzle."""

from __future__ import annotations

from enum import Enum
from typing import Sequence

Board = list[list[int]]


class Direction(Enum):
    """The four ways a board can be tilted."""

    RIGHT = 0
    DOWN = 1
    LEFT = 2
    UP = 3


def _merge_line(line: Sequence[int]) -> list[int]:
    """Slide a line toward its start, merging equal neighbours once each."""
    result: list[int] = []
    just_merged = False
    for value in line:
        if value == 0:
            continue
        if result and not just_merged and result[-1] == value:
            result[-1] += value
            just_merged = True
        else:
            result.append(value)
            just_merged = False
    return result + [0] * (len(line) - len(result))


def _copy(board: Sequence[Sequence[int]]) -> Board:
    rows = [list(row) for row in board]
    if rows and any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("board rows must all have the same length")
    return rows


def _transpose(rows: Board) -> Board:
    return [list(column) for column in zip(*rows)]


def slide(board: Sequence[Sequence[int]], direction: Direction) -> Board:
    """Return the board after tilting it in ``direction``."""
    direction = Direction(direction)
    rows = _copy(board)
    vertical = direction in (Direction.UP, Direction.DOWN)
    toward_end = direction in (Direction.RIGHT, Direction.DOWN)
    if vertical:
        rows = _transpose(rows)
    if toward_end:
        moved = [_merge_line(row[::-1])[::-1] for row in rows]
    else:
        moved = [_merge_line(row) for row in rows]
    return _transpose(moved) if vertical else moved


def _largest(board: Board) -> int:
    return max((max(row) for row in board if row), default=0)


def best_tile(board: Sequence[Sequence[int]], moves: int = 5) -> int:
    """Largest tile reachable after exactly ``moves`` tilts, over every sequence."""
    if moves < 0:
        raise ValueError("moves must be non-negative")
    start = _copy(board)

    def explore(state: Board, remaining: int) -> int:
        if remaining == 0:
            return _largest(state)
        return max(explore(slide(state, direction), remaining - 1) for direction in Direction)

    return explore(start, moves)