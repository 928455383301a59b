"""Placing stickers on a notebook, first fit, rotating when needed."""

from __future__ import annotations

from typing import Iterable, Sequence

Shape = list[list[int]]


def rotate(sticker: Sequence[Sequence[int]]) -> Shape:
    """Rotate a sticker 90 degrees clockwise."""
    return [list(row) for row in zip(*reversed(sticker))]


def _fits(board: list[list[bool]], shape: Shape, top: int, left: int) -> bool:
    return all(
        not board[top + i][left + j]
        for i, row in enumerate(shape)
        for j, cell in enumerate(row)
        if cell
    )


def _find_spot(board: list[list[bool]], shape: Shape) -> tuple[int, int] | None:
    rows = len(board)
    cols = len(board[0]) if board else 0
    height = len(shape)
    width = len(shape[0]) if shape else 0
    if height > rows or width > cols:
        return None
    for top in range(rows - height + 1):
        for left in range(cols - width + 1):
            if _fits(board, shape, top, left):
                return top, left
    return None


def attach_stickers(rows: int, cols: int, stickers: Iterable[Sequence[Sequence[int]]]) -> int:
    """Attach stickers in order and return the number of notebook cells covered.

    Each sticker goes at the first free spot scanning top to bottom, left to
    right; if none exists it is rotated clockwise and tried again, up to four
    orientations, and discarded if no orientation fits.
    """
    if rows < 0 or cols < 0:
        raise ValueError("notebook size must be non-negative")
    board = [[False] * cols for _ in range(rows)]
    covered = 0
    for sticker in stickers:
        shape = [list(row) for row in sticker]
        for _ in range(4):
            spot = _find_spot(board, shape)
            if spot is not None:
                top, left = spot
                for i, row in enumerate(shape):
                    for j, cell in enumerate(row):
                        if cell:
                            board[top + i][left + j] = True
                covered += sum(1 for row in shape for cell in row if cell)
                break
            shape = rotate(shape)
    return covered