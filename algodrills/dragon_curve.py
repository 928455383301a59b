"""Dragon curves on a lattice and the unit squares they enclose at corners."""

from __future__ import annotations

from typing import Iterable

# direction -> (x step, y step); y grows downward
_STEPS = ((1, 0), (0, -1), (-1, 0), (0, 1))


def _directions(direction: int, generation: int) -> list[int]:
    if direction not in range(4):
        raise ValueError("direction must be 0, 1, 2 or 3")
    if generation < 0:
        raise ValueError("generation must be non-negative")
    moves = [direction]
    for _ in range(generation):
        moves += [(d + 1) % 4 for d in reversed(moves)]
    return moves


def curve_points(x: int, y: int, direction: int, generation: int) -> list[tuple[int, int]]:
    """Lattice points visited by a dragon curve, in drawing order."""
    points = [(x, y)]
    for move in _directions(direction, generation):
        dx, dy = _STEPS[move]
        x += dx
        y += dy
        points.append((x, y))
    return points


def count_squares(curves: Iterable[tuple[int, int, int, int]]) -> int:
    """Number of unit squares whose four corners all lie on some curve."""
    marked: set[tuple[int, int]] = set()
    for x, y, direction, generation in curves:
        marked.update(curve_points(x, y, direction, generation))
    return sum(
        1
        for x, y in marked
        if (x + 1, y) in marked and (x, y + 1) in marked and (x + 1, y + 1) in marked
    )