"""Text forms of puzzles: clue descriptions, params strings, grid pictures.

A description lists the squares in row-major order separated by commas,
with an empty field for a square without a clue.  The 4x4 puzzle::

     .  .  4  3
     .  .  .  .
     .  7  .  9
     .  .  .  .

is ``",,4,3,,,,,,7,,9,,,,"``.  A params string such as ``"7x5opadh"``
gives the size followed by option letters: ``o`` diagonal steps, ``k``
keep the first and last clue, ``p<a|2|r|b>`` clue pattern, ``d<e|h>``
difficulty.
"""

from __future__ import annotations

import re
from typing import List, Sequence

from hamilton.core.model import Difficulty, Grid
from hamilton.core.params import GameParams
from hamilton.patterns import PATTERN_REGISTRY, pattern_by_code

_PARAMS_RE = re.compile(r"(\d+)(?:x(\d+))?(.*)", re.DOTALL)

_DIFFICULTY_CODES = {"e": Difficulty.EASY, "h": Difficulty.HARD}


def encode_desc(grid: Sequence[int]) -> str:
    return ",".join(str(n) if n else "" for n in grid)


def validate_desc(desc: str, w: int, h: int) -> None:
    """Raise ``ValueError`` if ``desc`` cannot describe a ``w`` x ``h`` grid."""
    area = w * h
    for c in desc:
        if c != "," and not ("0" <= c <= "9"):
            raise ValueError("Invalid character in game description")
    squares = desc.count(",") + 1
    if squares < area:
        raise ValueError("Not enough data to fill grid")
    if squares > area:
        raise ValueError("Too much data to fit in grid")


def decode_desc(desc: str, w: int, h: int) -> Grid:
    validate_desc(desc, w, h)
    area = w * h
    grid = [int(field) if field else 0 for field in desc.split(",")]
    seen = set()
    for n in grid:
        if n == 0:
            continue
        if n > area:
            raise ValueError(f"Clue {n} is out of range for a {w}x{h} grid")
        if n in seen:
            raise ValueError(f"Clue {n} appears more than once")
        seen.add(n)
    return grid


def encode_params(params: GameParams, full: bool = True) -> str:
    """Params string; without ``full`` only the parts a game needs to play."""
    parts: List[str] = [f"{params.w}x{params.h}"]
    if params.diagonal:
        parts.append("o")
    # the rest only affects generation
    if full:
        if params.keep_ends:
            parts.append("k")
        if params.pattern != "rot2":
            parts.append("p" + PATTERN_REGISTRY[params.pattern].code)
        if params.difficulty is Difficulty.HARD:
            parts.append("dh")
    return "".join(parts)


def decode_params(text: str) -> GameParams:
    """Parse a params string.  Unknown option letters are ignored."""
    m = _PARAMS_RE.fullmatch(text.strip())
    if not m:
        raise ValueError(f"Invalid params string: {text!r}")
    params = GameParams()
    params.w = params.h = int(m.group(1))
    if m.group(2):
        params.h = int(m.group(2))

    rest = iter(m.group(3))
    for c in rest:
        if c == "o":
            params.diagonal = True
        elif c == "k":
            params.keep_ends = True
        elif c == "p":
            cls = pattern_by_code(next(rest, ""))
            if cls is not None:
                params.pattern = cls.name
        elif c == "d":
            difficulty = _DIFFICULTY_CODES.get(next(rest, ""))
            if difficulty is not None:
                params.difficulty = difficulty
    return params


def format_grid(grid: Sequence[int], w: int, h: int) -> str:
    """Picture of the grid, two characters per square, ``.`` for blanks."""
    lines = []
    for y in range(h):
        row = grid[y * w:(y + 1) * w]
        lines.append(" ".join(f"{n:2d}" if n else " ." for n in row))
    return "\n".join(lines) + "\n"
