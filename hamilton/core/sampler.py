"""Random Hamiltonian paths on a rectangular grid.

We start from a plain winding path and shuffle it with moves that keep it
Hamiltonian (after "Secondary Structures in Long Compact Polymers",
https://arxiv.org/abs/cond-mat/0508094).

One shuffle move: take the end of the path, A, and a random neighbour B of
A that is not already joined to it.  Walking the path from A we reach B;
call the square just before it C.  Disconnect B from C, reverse the A..C
stretch, and join A to B.  Starting from::

     1  2  3  4
     8  7  6  5
     9 10 11 12
    16 15 14 13

and picking 8 as B gives::

     7  6  5  4
     8  1  2  3
     9 10 11 12
    16 15 14 13
"""

from __future__ import annotations

from typing import List, Sequence

from .model import Grid, Location
from .rng import RandomSource

SHUFFLE_FACTOR = 5

# up, down, left, right, then the diagonals
_SHUFFLE_STEPS = ((0, -1), (0, 1), (-1, 0), (1, 0))
_SHUFFLE_DIAGONAL_STEPS = ((-1, -1), (-1, 1), (1, -1), (1, 1))


def simple_path(w: int, h: int) -> List[Location]:
    """Row-by-row zigzag path starting at (0, 0)."""
    path = []
    for y in range(h):
        xs = range(w) if y % 2 == 0 else range(w - 1, -1, -1)
        path.extend(Location(x, y) for x in xs)
    return path


def _neighbors_except(cursor: Location, exclude: Location, w: int, h: int,
                      diagonal: bool) -> List[Location]:
    steps = _SHUFFLE_STEPS + _SHUFFLE_DIAGONAL_STEPS if diagonal else _SHUFFLE_STEPS
    result = []
    for dx, dy in steps:
        x, y = cursor.x + dx, cursor.y + dy
        if 0 <= x < w and 0 <= y < h and (x, y) != exclude:
            result.append(Location(x, y))
    return result


def random_path(w: int, h: int, diagonal: bool, rng: RandomSource) -> List[Location]:
    """Return a shuffled Hamiltonian path visiting all ``w * h`` squares."""
    if min(w, h) < 2:
        # each end of the path needs a neighbour other than the next square
        raise ValueError(f"Cannot shuffle a path on a {w}x{h} grid")
    area = w * h
    path = simple_path(w, h)
    for i in range(2 * SHUFFLE_FACTOR * area):
        # The random walk may never reach the far end of the path.  Turn the
        # path around halfway so both ends get shuffled.
        if i == SHUFFLE_FACTOR * area:
            path.reverse()
        candidates = _neighbors_except(path[0], path[1], w, h, diagonal)
        target = candidates[rng.next_below(len(candidates))]
        index = path.index(target)
        path[:index] = path[:index][::-1]
    return path


def path_to_grid(path: Sequence[Location], w: int, h: int) -> Grid:
    """Number the squares of ``path`` from 1 upwards."""
    grid = [0] * (w * h)
    for i, loc in enumerate(path):
        grid[loc.y * w + loc.x] = i + 1
    return grid
