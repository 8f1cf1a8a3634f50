from __future__ import annotations

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence


class Difficulty(str, Enum):
    """How much work the solver is allowed to do."""
    EASY = "easy"   # necessary moves only, no trial-and-error
    HARD = "hard"   # recursive trial-and-error allowed


class Location(NamedTuple):
    """A square on the grid, by column and row."""
    x: int
    y: int


Grid = List[int]

# Neighbour offsets in the order the search tries them.
ORTHOGONAL_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))
DIAGONAL_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def manhattan_distance(a: Location, b: Location) -> int:
    return abs(b.x - a.x) + abs(b.y - a.y)


def chebyshev_distance(a: Location, b: Location) -> int:
    return max(abs(b.x - a.x), abs(b.y - a.y))


def distance(a: Location, b: Location, diagonal: bool) -> int:
    """Number of moves between two squares under the active adjacency."""
    if diagonal:
        return chebyshev_distance(a, b)
    return manhattan_distance(a, b)


def neighbors(loc: Location, w: int, h: int, diagonal: bool) -> List[Location]:
    """Squares adjacent to ``loc`` that lie on a ``w`` x ``h`` grid.

    Orthogonal squares come first (left, up, right, down), then the
    diagonal ones when ``diagonal`` is set.  There are at most 8.
    """
    steps = ORTHOGONAL_STEPS + DIAGONAL_STEPS if diagonal else ORTHOGONAL_STEPS
    result = []
    for dx, dy in steps:
        x, y = loc.x + dx, loc.y + dy
        if 0 <= x < w and 0 <= y < h:
            result.append(Location(x, y))
    return result


def number_map(grid: Sequence[int], w: int, h: int) -> List[Optional[Location]]:
    """Map each number ``0..area`` to its location, or ``None`` when absent.

    For the grid::

        .  1
        3  4

    the map is ``[None, (1, 0), None, (0, 1), (1, 1)]``.
    """
    area = w * h
    result: List[Optional[Location]] = [None] * (area + 1)
    for y in range(h):
        for x in range(w):
            n = grid[y * w + x]
            if n > 0:
                result[n] = Location(x, y)
    return result
