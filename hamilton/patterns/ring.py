from . import Pattern, register_pattern


@register_pattern
class Ring(Pattern):
    """Clues on the ring of squares one step in from the edge."""
    name = "ring"
    code = "r"
    masked = True
    diagonal_steps_limit = 1000
    min_side = 3

    def keeps(self, loc, w, h):
        x, y = loc
        if x in (0, w - 1) or y in (0, h - 1):
            return False
        return x in (1, w - 2) or y in (1, h - 2)
