"""Clue pattern registry and base class.

A pattern decides which clues a generated puzzle keeps.  Masked patterns
(ring, border) keep a fixed set of squares and resample the path until the
result has a unique solution; the others remove clues one at a time (or in
symmetric pairs) while the solution stays unique.
"""

from __future__ import annotations

from typing import Dict, Optional, Type

from hamilton.core.model import Difficulty, Location

MAX_GAP_LENGTH = 9


class Pattern:
    """Base clue pattern: remove any clue, in random order."""
    name: str = "pattern"
    code: str = ""          # letter used in params strings
    masked: bool = False
    min_side: int = 2       # smallest width or height the pattern works on

    # Solver effort per uniqueness check.  Diagonal puzzles take longer to
    # solve, so they get a smaller budget.
    steps_limit: int = -1
    diagonal_steps_limit: int = 80000

    def solver_steps(self, diagonal: bool) -> int:
        return self.diagonal_steps_limit if diagonal else self.steps_limit

    def max_gap_length(self, w: int, h: int, difficulty: Difficulty) -> int:
        return MAX_GAP_LENGTH

    def difficulty(self, difficulty: Difficulty) -> Difficulty:
        return difficulty

    def keeps(self, loc: Location, w: int, h: int) -> bool:
        """For masked patterns: whether the clue at ``loc`` is shown."""
        return True

    def removal_cells(self, area: int) -> int:
        """How many squares, in row-major order, to consider removing."""
        return area

    def partner(self, loc: Location, w: int, h: int) -> Optional[Location]:
        """Square whose clue is removed together with the one at ``loc``."""
        return None


PATTERN_REGISTRY: Dict[str, Type[Pattern]] = {}


def register_pattern(cls: Type[Pattern]) -> Type[Pattern]:
    PATTERN_REGISTRY[cls.name] = cls
    return cls


def get_pattern(name: str) -> Pattern:
    try:
        return PATTERN_REGISTRY[name]()
    except KeyError:
        raise ValueError(f"Unknown clue pattern: {name!r}") from None


def pattern_by_code(code: str) -> Optional[Type[Pattern]]:
    for cls in PATTERN_REGISTRY.values():
        if cls.code == code:
            return cls
    return None


from . import none, rot2, ring, border  # noqa: E402,F401  (fill the registry)
