"""Puzzle generation.

We start with a random Hamiltonian path, which is the solution, and then
take clues away while the puzzle keeps exactly one solution.  Difficulty
is controlled by which parts of the solver the uniqueness check may use:
an easy puzzle must be solvable by necessary moves alone.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from hamilton.patterns import Pattern, get_pattern

from .csp import solve
from .model import Grid, Location
from .params import GameParams, validate_params
from .rng import RandomSource, shuffle
from .sampler import path_to_grid, random_path

logger = logging.getLogger(__name__)


class GenerationError(RuntimeError):
    """Raised when generation runs out of its allowed attempts."""


def _unique(grid: Grid, params: GameParams, pattern: Pattern) -> bool:
    return solve(
        grid, params.w, params.h, params.diagonal,
        max_gap_length=pattern.max_gap_length(params.w, params.h, params.difficulty),
        max_difficulty=pattern.difficulty(params.difficulty),
        steps_limit=pattern.solver_steps(params.diagonal),
        unique_only=True,
    ) is not None


def apply_mask(grid: Grid, params: GameParams, pattern: Pattern) -> None:
    """Blank every square the pattern does not keep."""
    w, h = params.w, params.h
    for y in range(h):
        for x in range(w):
            if not pattern.keeps(Location(x, y), w, h):
                grid[y * w + x] = 0


def remove_clues(grid: Grid, path: List[Location], params: GameParams,
                 pattern: Pattern, rng: RandomSource) -> int:
    """Blank clues in random order while the solution stays unique.

    Returns the number of squares blanked.
    """
    w, h, area = params.w, params.h, params.area
    clues = grid[:pattern.removal_cells(area)]
    shuffle(clues, rng)
    removed = 0

    for clue in clues:
        loc = path[clue - 1]
        if params.keep_ends and clue in (1, area):
            continue
        other = pattern.partner(loc, w, h)
        sclue = 0
        if other is not None:
            sclue = grid[other.y * w + other.x]
            if params.keep_ends and sclue in (1, area):
                continue
            grid[other.y * w + other.x] = 0
        grid[loc.y * w + loc.x] = 0

        if _unique(grid, params, pattern):
            removed += 1 if other is None or other == loc else 2
        else:
            grid[loc.y * w + loc.x] = clue
            if other is not None:
                grid[other.y * w + other.x] = sclue
    return removed


def generate(params: GameParams, rng: RandomSource,
             max_attempts: Optional[int] = None) -> Grid:
    """Generate a puzzle and return its clue grid (0 for no clue).

    Masked patterns resample the path until the mask leaves a uniquely
    solvable puzzle.  That loop has no bound unless ``max_attempts`` is
    given, in which case ``GenerationError`` is raised when it runs out.
    """
    validate_params(params)
    pattern = get_pattern(params.pattern)
    w, h = params.w, params.h
    attempts = 0

    while True:
        attempts += 1
        path = random_path(w, h, params.diagonal, rng)
        grid = path_to_grid(path, w, h)

        if not pattern.masked:
            removed = remove_clues(grid, path, params, pattern, rng)
            logger.info(f"generated {w}x{h} {pattern.name} puzzle, {params.area - removed} clues left")
            return grid

        apply_mask(grid, params, pattern)
        if _unique(grid, params, pattern):
            logger.info(f"generated {w}x{h} {pattern.name} puzzle after {attempts} attempt(s)")
            return grid
        logger.debug(f"{pattern.name} mask not uniquely solvable, resampling (attempt {attempts})")
        if max_attempts is not None and attempts >= max_attempts:
            raise GenerationError(f"No uniquely solvable {pattern.name} puzzle after {attempts} attempts")
