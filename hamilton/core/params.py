from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from hamilton.patterns import PATTERN_REGISTRY

from .model import Difficulty

SIDE_MIN = 2        # smallest width or height
NUMBER_MAX = 99     # largest number a puzzle may hold


@dataclass
class GameParams:
    """Everything that shapes a generated puzzle."""
    w: int = 7
    h: int = 7
    diagonal: bool = False      # the path may use diagonal steps
    keep_ends: bool = False     # 1 and area always stay as clues
    pattern: str = "rot2"
    difficulty: Difficulty = Difficulty.EASY

    @property
    def area(self) -> int:
        return self.w * self.h


PRESETS: List[Tuple[str, GameParams]] = [
    ("7x7 Easy", GameParams(7, 7, pattern="rot2", difficulty=Difficulty.EASY)),
    ("7x7 Ring", GameParams(7, 7, pattern="ring", difficulty=Difficulty.HARD)),
    ("7x7 Border", GameParams(7, 7, pattern="border", difficulty=Difficulty.HARD)),
    ("7x7 Hard", GameParams(7, 7, pattern="rot2", difficulty=Difficulty.HARD)),
    ("9x9 Easy", GameParams(9, 9, pattern="rot2", difficulty=Difficulty.EASY)),
    ("9x9 Hard", GameParams(9, 9, pattern="rot2", difficulty=Difficulty.HARD)),
]


def validate_params(params: GameParams) -> None:
    """Raise ``ValueError`` if the parameters cannot make a puzzle."""
    if params.w < SIDE_MIN or params.h < SIDE_MIN:
        raise ValueError(f"Both dimensions must be at least {SIDE_MIN}")
    if params.area > NUMBER_MAX:
        raise ValueError(f"Unable to support more than {NUMBER_MAX} distinct symbols in a puzzle")
    if params.pattern not in PATTERN_REGISTRY:
        raise ValueError(f"Unknown clue pattern: {params.pattern!r}")
    pattern = PATTERN_REGISTRY[params.pattern]
    if min(params.w, params.h) < pattern.min_side:
        raise ValueError(f"The {pattern.name} pattern needs both dimensions at least {pattern.min_side}")
    if not isinstance(params.difficulty, Difficulty):
        raise ValueError("Unknown difficulty rating")
