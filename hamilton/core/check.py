"""Checks on a grid in progress: misplaced numbers and completion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .model import Location, distance, number_map


@dataclass
class GridStatus:
    bad: List[Location] = field(default_factory=list)
    completed: bool = False


def is_bad_square(locs, loc: Location, n: int, area: int, diagonal: bool) -> bool:
    """A number is bad when its predecessor or successor is on the grid
    but not next to it.
    """
    if n == 0:
        return False
    for m in (n - 1, n + 1):
        if 1 <= m <= area:
            other = locs[m]
            if other is not None and distance(loc, other, diagonal) != 1:
                return True
    return False


def check_grid(grid: Sequence[int], w: int, h: int, diagonal: bool) -> GridStatus:
    """Find bad squares and whether the grid is a finished solution.

    In this grid the 10 and the 9 are bad::

        10  .  .  .
         . 12  .  6
        16  .  2  7
         .  .  9  8
    """
    area = w * h
    locs = number_map(grid, w, h)
    status = GridStatus(completed=all(grid))
    for y in range(h):
        for x in range(w):
            loc = Location(x, y)
            if is_bad_square(locs, loc, grid[y * w + x], area, diagonal):
                status.bad.append(loc)
    if status.bad:
        status.completed = False
    return status
