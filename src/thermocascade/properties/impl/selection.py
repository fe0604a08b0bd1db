"""Table categories keyed on the x coordinate; anything unmatched is "low"."""
from .registry import register

@register("high")
def _above_unity(x: float) -> bool:
    return x > 1

@register("unit")
def _unit_magnitude(x: float) -> bool:
    return x == 1 or x == -1
