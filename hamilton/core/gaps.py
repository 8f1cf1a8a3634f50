"""Gaps: runs of numbers missing from a partially filled grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .model import Location, number_map


@dataclass
class Gap:
    """Numbers strictly between ``n1`` and ``n2`` are missing from the grid.

    ``l1`` and ``l2`` locate ``n1`` and ``n2``.  An open-ended gap at the
    start of the path has ``n1 == 0`` and ``l1 is None``; one at the end has
    ``n2 == area + 1`` and ``l2 is None``.

    Given the grid::

         .  5  4  3
         .  .  1  2
        14  .  .  9
        13 12 11 10

    the gaps are ``5 at (1,0) -> 9 at (3,2)`` and ``14 at (0,2) -> 17``.
    """
    n1: int
    l1: Optional[Location]
    n2: int
    l2: Optional[Location]

    @property
    def closed(self) -> bool:
        return self.l1 is not None and self.l2 is not None

    @property
    def missing(self) -> int:
        return self.n2 - self.n1 - 1


def compute_gaps(grid: Sequence[int], w: int, h: int) -> Tuple[List[Gap], int]:
    """Find the gaps in ``grid`` and the length of the longest one.

    Raises ``ValueError`` if the grid holds no numbers at all, since every
    gap needs at least one anchor.
    """
    area = w * h
    locs = number_map(grid, w, h)
    present = [n for n in range(1, area + 1) if locs[n] is not None]
    if not present:
        raise ValueError("Grid has no numbers to anchor a path")
    first, last = present[0], present[-1]

    gaps: List[Gap] = []
    longest = 0

    if first != 1:
        gaps.append(Gap(0, None, first, locs[first]))
        longest = first - 1

    for i in range(first, last + 1):
        loc = locs[i]
        if loc is None:
            continue
        # i present and i-1 missing: the current gap ends here
        if i > first and locs[i - 1] is None:
            gap = gaps[-1]
            gap.n2 = i
            gap.l2 = loc
            longest = max(longest, gap.missing)
        # i present and i+1 missing: the next gap starts here
        if i < last and locs[i + 1] is None:
            gaps.append(Gap(i, loc, 0, None))

    if last != area:
        gaps.append(Gap(last, locs[last], area + 1, None))
        longest = max(longest, area - last)

    return gaps, longest
