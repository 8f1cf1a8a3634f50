from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Sequence, Tuple

from .gaps import Gap, compute_gaps
from .model import Grid, Location


@dataclass
class SolverState:
    """A grid being solved together with its remaining gaps.

    Each backtracking branch works on its own copy, so abandoning a branch
    never needs to undo anything.
    """
    w: int
    h: int
    diagonal: bool
    grid: Grid
    gaps: List[Gap]

    @classmethod
    def from_grid(cls, grid: Sequence[int], w: int, h: int,
                  diagonal: bool) -> Tuple["SolverState", int]:
        """Build a fresh state; also returns the longest gap length."""
        gaps, longest = compute_gaps(grid, w, h)
        return cls(w, h, diagonal, list(grid), gaps), longest

    @property
    def area(self) -> int:
        return self.w * self.h

    def at(self, loc: Location) -> int:
        return self.grid[loc.y * self.w + loc.x]

    def put(self, loc: Location, n: int) -> None:
        self.grid[loc.y * self.w + loc.x] = n

    def copy(self) -> "SolverState":
        return SolverState(self.w, self.h, self.diagonal, list(self.grid),
                           [replace(g) for g in self.gaps])
