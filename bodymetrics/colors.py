"""
Goal-proximity color synthesis.

A part's baseline color is blended toward white as its value closes in on the
goal, so a trend line whitens as it converges.
"""

import math
from typing import NamedTuple

from bodymetrics.parts import PART_COLORS

WHITE = 255
# Transition width is 10% of the goal, never narrower than half a unit
RANGE_FRACTION = 0.1
MIN_RANGE = 0.5


class RGB(NamedTuple):
    r: int
    g: int
    b: int


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse '#rrggbb' into an RGB triple."""
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected a #rrggbb color, got {hex_color!r}")
    return RGB(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))


def rgb_to_hex(color: RGB) -> str:
    return "#{:02x}{:02x}{:02x}".format(*color)


def rgb_css(color: RGB) -> str:
    return f"rgb({color.r}, {color.g}, {color.b})"


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def goal_progress(current: float, goal: float) -> float:
    """How close `current` is to `goal` on [0, 1]; 1 means the goal is met."""
    diff = abs(current - goal)
    transition = max(goal * RANGE_FRACTION, MIN_RANGE)
    return min(max(1 - diff / transition, 0.0), 1.0)


def color_for(baseline: RGB, current: float, goal: float) -> RGB:
    """Blend `baseline` toward white in proportion to goal proximity."""
    progress = goal_progress(current, goal)
    return RGB(*(round_half_up(c + (WHITE - c) * progress) for c in baseline))


def dynamic_color(part: str, current: float, goal: float) -> RGB:
    return color_for(hex_to_rgb(PART_COLORS[part]), current, goal)
