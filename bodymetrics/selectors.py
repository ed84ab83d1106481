"""
Chart data selection: display windows, axis domains and gradient stops.

Everything here is a pure projection over a snapshot of the entry list.
"""

from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from bodymetrics.colors import RGB, dynamic_color
from bodymetrics.models import MeasurementEntry

# Entries shown in focus view
FOCUS_WINDOW = 13
# Fraction of the value span added above and below the data
DOMAIN_PADDING = 0.15
# Used when the span is zero so a flat series never renders as a zero-height band
FLAT_PADDING = 2

Domain = Tuple[float, float]


def select_window(entries: Sequence[MeasurementEntry], zoomed_out: bool) -> List[MeasurementEntry]:
    """All entries when zoomed out, otherwise the most recent FOCUS_WINDOW."""
    if zoomed_out:
        return list(entries)
    return list(entries[-FOCUS_WINDOW:])


def compute_domain(
    entries: Sequence[MeasurementEntry],
    selected_parts: Iterable[str],
    goal_lookup: Callable[[str], float],
) -> Optional[Domain]:
    """
    Y-axis bounds covering every displayed value and goal of the selected parts.

    Returns None ("auto") when there is nothing to bound. Entries lacking a
    value for a part are skipped rather than read as zero.
    """
    parts = list(selected_parts)
    if not parts or not entries:
        return None

    values: List[float] = []
    for part in parts:
        for entry in entries:
            value = entry.value(part)
            if value is not None:
                values.append(value)
        values.append(goal_lookup(part))

    if not values:
        return None

    low, high = min(values), max(values)
    padding = (high - low) * DOMAIN_PADDING or FLAT_PADDING
    return (low - padding, high + padding)


def gradient_stops(
    entries: Sequence[MeasurementEntry], part: str, goal: float
) -> List[Tuple[float, RGB]]:
    """Evenly spaced (offset, color) stops along a part's trend line."""
    span = (len(entries) - 1) or 1
    return [
        (idx / span, dynamic_color(part, entry.value(part) or 0.0, goal))
        for idx, entry in enumerate(entries)
    ]
