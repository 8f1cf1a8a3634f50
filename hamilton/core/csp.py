"""Backtracking search over gaps, and the solver entry point.

The solver first plays necessary moves (see :mod:`constraints`).  When
those run out it picks one open end of the shortest gap and tries every
possible next square, recursing on a copy of the state for each.  It keeps
looking after the first solution when asked to prove uniqueness.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from .check import check_grid
from .constraints import place_high, place_low, propagate
from .gaps import Gap
from .model import Difficulty, Grid, chebyshev_distance, manhattan_distance, neighbors
from .state import SolverState

logger = logging.getLogger(__name__)

GapKey = Callable[[Gap], tuple]


def gap_order(diagonal: bool) -> GapKey:
    """Sort key putting the shortest gaps first; they branch the least.

    Open-ended gaps have no length and go last.
    """
    metric = chebyshev_distance if diagonal else manhattan_distance

    def key(gap: Gap) -> tuple:
        if not gap.closed:
            return (1, 0)
        return (0, metric(gap.l1, gap.l2))

    return key


@dataclass
class SearchOutcome:
    solution: Optional[Grid] = None
    multiple: bool = False
    gave_up: bool = False
    steps: int = 0


class BacktrackingSearch:
    """Recursive trial-and-error over the remaining gaps.

    ``steps_limit`` bounds the number of nodes in the recursion tree; a
    value of 0 or less means no bound.  Running out of steps stops the
    whole search, and the outcome keeps whatever solution was found so far.
    """

    def __init__(self, unique_only: bool = False, steps_limit: int = -1):
        self.unique_only = unique_only
        self.steps_limit = steps_limit
        self.outcome = SearchOutcome()

    def run(self, state: SolverState) -> SearchOutcome:
        self.outcome = SearchOutcome()
        state.gaps.sort(key=gap_order(state.diagonal))
        self._search(state)
        return self.outcome

    def _search(self, state: SolverState) -> bool:
        """Returns True once the search is finished and should unwind."""
        if not propagate(state):
            return False
        if self.steps_limit > 0 and self.outcome.steps > self.steps_limit:
            self.outcome.gave_up = True
            return True
        self.outcome.steps += 1

        if not state.gaps:
            if self.outcome.solution is not None:
                self.outcome.multiple = True
                return True
            self.outcome.solution = list(state.grid)
            return not self.unique_only

        gap = state.gaps[0]
        if gap.l1 is not None:
            anchor, place = gap.l1, place_low
        else:
            anchor, place = gap.l2, place_high
        for loc in neighbors(anchor, state.w, state.h, state.diagonal):
            if state.at(loc) != 0:
                continue
            branch = state.copy()
            if place(branch, 0, loc) and self._search(branch):
                return True
        return False


def solve(grid: Sequence[int], w: int, h: int, diagonal: bool = False,
          max_gap_length: int = -1, max_difficulty: Optional[Difficulty] = None,
          steps_limit: int = -1, unique_only: bool = False) -> Optional[Grid]:
    """Try to solve a puzzle grid (row-major, 0 for blanks).

    Returns the solved grid, or ``None`` when no solution was found.  That
    covers a puzzle with no solution (including clues that already break
    the path), one with several (when ``unique_only`` is set) and a search
    cut short by ``steps_limit`` before it found anything.

    max_gap_length:
        Give up straight away if some gap is longer than this.  0 or less
        accepts any length.
    max_difficulty:
        ``Difficulty.EASY`` disables trial-and-error, so only necessary
        moves are played.  ``None`` or ``Difficulty.HARD`` allow both.
    steps_limit:
        Bound on recursion tree nodes; 0 or less for no bound.
    unique_only:
        Keep searching after a solution to make sure it is the only one.
    """
    if not any(grid):
        # nothing to anchor the path on
        return None
    if check_grid(grid, w, h, diagonal).bad:
        # consecutive clues that are not next to each other
        return None
    state, longest = SolverState.from_grid(grid, w, h, diagonal)
    if max_gap_length > 0 and longest > max_gap_length:
        return None

    if max_difficulty is Difficulty.EASY:
        if propagate(state) and not state.gaps:
            return list(state.grid)
        return None

    outcome = BacktrackingSearch(unique_only, steps_limit).run(state)
    logger.debug(f"search used {outcome.steps} steps (gave up: {outcome.gave_up}, multiple: {outcome.multiple})")
    if outcome.multiple:
        return None
    return outcome.solution
