from hamilton.core.model import Difficulty

from . import Pattern, register_pattern


@register_pattern
class Border(Pattern):
    """Every other square around the edge of the grid."""
    name = "border"
    code = "b"
    masked = True
    diagonal_steps_limit = 100

    def keeps(self, loc, w, h):
        x, y = loc
        on_edge = x in (0, w - 1) or y in (0, h - 1)
        return on_edge and (x + y) % 2 == 0

    def max_gap_length(self, w, h, difficulty):
        # long runs along the edge are the point of this pattern
        return max(w, h) + (4 if difficulty is Difficulty.HARD else 0)

    def difficulty(self, difficulty):
        return Difficulty.HARD
