from hamilton.core.model import Location

from . import Pattern, register_pattern


@register_pattern
class RotationalSymmetry(Pattern):
    """Clues come and go in pairs mapped onto each other by a half turn."""
    name = "rot2"
    code = "2"
    steps_limit = 800000

    def removal_cells(self, area):
        # the first half of the grid; each square brings its partner along
        return (area + 1) // 2

    def partner(self, loc, w, h):
        return Location(w - 1 - loc.x, h - 1 - loc.y)
