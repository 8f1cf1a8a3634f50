"""Necessary-move rules and the propagation loop.

Two rules find moves that need no guess-work:

``straight_path``
    A closed gap whose anchors are so far apart, and whose numbers are so
    close together, that only the direct line between them can complete it.
    In this grid (no diagonals) the gaps 7..10 and 12..14 are forced::

        10  .  .  7
         . 12  .  .
        16  .  2  .
         . 14  .  .

``only_move``
    An anchor with exactly one empty neighbour must continue the path
    into that square.

Every placement is followed by the blocked-number check, and placements at
a gap boundary also by the distance check.  Either can prove the state
unsolvable.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from .model import Location, distance, neighbors
from .state import SolverState


class MoveResult(Enum):
    UNSOLVABLE = "unsolvable"   # a necessary move was found but breaks the puzzle
    MOVED = "moved"             # a necessary move was played, gaps updated
    DIDNT_MOVE = "didnt_move"   # nothing necessary found


def find_only_move(state: SolverState, loc: Location) -> Optional[Location]:
    """Return the single empty neighbour of ``loc``, if there is exactly one."""
    found = None
    for n in neighbors(loc, state.w, state.h, state.diagonal):
        if state.at(n) == 0:
            if found is not None:
                return None
            found = n
    return found


def is_blocked(state: SolverState, loc: Location) -> bool:
    """True if the number at ``loc`` has too few squares left to connect.

    A square is available when it is empty or holds the next number up or
    down.  The path ends (1 and area) need one available square, every
    other number needs two.

    In this grid (no diagonals) placing 8 above the 7 leaves the 11 with
    only one available square::

        16 15  .  .
        11  .  .  .
         .  7  6  .
         .  .  .  .
    """
    n = state.at(loc)
    available = 0
    for other in neighbors(loc, state.w, state.h, state.diagonal):
        o = state.at(other)
        if o == 0 or o == n - 1 or o == n + 1:
            available += 1
    needed = 1 if n in (1, state.area) else 2
    return available < needed


def blocks_nearby(state: SolverState, loc: Location) -> bool:
    """Check the gap anchors next to a freshly placed number.

    Only ``l2`` anchors are looked at: a number with gaps on both sides is
    always the ``l2`` of the lower gap.
    """
    for gap in state.gaps:
        if gap.l2 is not None and distance(gap.l2, loc, state.diagonal) == 1:
            if is_blocked(state, gap.l2):
                return True
    return False


def place_low(state: SolverState, gap_index: int, loc: Location) -> bool:
    """Place ``n1 + 1`` at ``loc``, raising the low end of the gap.

    Returns False if that makes the puzzle unsolvable.  A completed gap is
    removed from the list.
    """
    gap = state.gaps[gap_index]
    n = gap.n1 + 1
    if gap.l2 is not None and distance(loc, gap.l2, state.diagonal) > gap.missing:
        return False
    state.put(loc, n)
    if blocks_nearby(state, loc):
        return False
    if n + 1 == gap.n2:
        del state.gaps[gap_index]
    else:
        gap.n1 = n
        gap.l1 = loc
    return True


def place_high(state: SolverState, gap_index: int, loc: Location) -> bool:
    """Place ``n2 - 1`` at ``loc``, lowering the high end of the gap."""
    gap = state.gaps[gap_index]
    n = gap.n2 - 1
    if gap.l1 is not None and distance(loc, gap.l1, state.diagonal) > gap.missing:
        return False
    state.put(loc, n)
    if blocks_nearby(state, loc):
        return False
    if n - 1 == gap.n1:
        del state.gaps[gap_index]
    else:
        gap.n2 = n
        gap.l2 = loc
    return True


def only_move(state: SolverState, gap_index: int) -> MoveResult:
    gap = state.gaps[gap_index]
    if gap.l1 is not None:
        loc = find_only_move(state, gap.l1)
        if loc is not None:
            return MoveResult.MOVED if place_low(state, gap_index, loc) else MoveResult.UNSOLVABLE
    if gap.l2 is not None:
        loc = find_only_move(state, gap.l2)
        if loc is not None:
            return MoveResult.MOVED if place_high(state, gap_index, loc) else MoveResult.UNSOLVABLE
    return MoveResult.DIDNT_MOVE


def straight_path(state: SolverState, gap_index: int) -> MoveResult:
    gap = state.gaps[gap_index]
    if not gap.closed:
        return MoveResult.DIDNT_MOVE
    dx = gap.l2.x - gap.l1.x
    dy = gap.l2.y - gap.l1.y
    span = gap.n2 - gap.n1
    if state.diagonal:
        # with king moves only an exact diagonal is forced
        if abs(dx) != abs(dy) or span != abs(dx):
            return MoveResult.DIDNT_MOVE
    elif dx == 0:
        if span != abs(dy):
            return MoveResult.DIDNT_MOVE
    elif dy == 0:
        if span != abs(dx):
            return MoveResult.DIDNT_MOVE
    else:
        return MoveResult.DIDNT_MOVE

    sx = (dx > 0) - (dx < 0)
    sy = (dy > 0) - (dy < 0)
    x, y = gap.l1
    for n in range(gap.n1 + 1, gap.n2):
        x += sx
        y += sy
        loc = Location(x, y)
        if state.at(loc) != 0:
            return MoveResult.UNSOLVABLE
        state.put(loc, n)
        if blocks_nearby(state, loc):
            return MoveResult.UNSOLVABLE
    del state.gaps[gap_index]
    return MoveResult.MOVED


def propagate(state: SolverState) -> bool:
    """Play necessary moves until none remain.

    Returns False when the state is proven unsolvable.  True does not mean
    the puzzle is solvable; it is solved only if no gaps remain.
    """
    changed = True
    while changed:
        changed = False
        g = 0
        while g < len(state.gaps):
            result = straight_path(state, g)
            if result is MoveResult.DIDNT_MOVE:
                result = only_move(state, g)
            if result is MoveResult.UNSOLVABLE:
                return False
            if result is MoveResult.MOVED:
                # revisit this index: the gap shrank, or the next one took its place
                changed = True
                continue
            g += 1
    return True
