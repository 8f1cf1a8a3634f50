from . import Pattern, register_pattern


@register_pattern
class Random(Pattern):
    name = "none"
    code = "a"
    steps_limit = 300000
