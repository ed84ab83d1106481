"""Snapshot card summaries and tabular views of the history."""

from dataclasses import dataclass
from typing import Optional, Sequence

import pandas as pd

from bodymetrics.colors import RGB, dynamic_color, rgb_to_hex, round_half_up
from bodymetrics.models import AppState, MeasurementEntry
from bodymetrics.parts import DEFAULT_PARTS, unit_for, unit_suffix

# Within this distance of the goal a card is flagged OPTIMAL
OPTIMAL_THRESHOLD = 0.5
# Within this distance the remaining gap reads MET
MET_THRESHOLD = 0.05


@dataclass(frozen=True)
class CardSummary:
    part: str
    value: float
    goal: float
    unit: str
    color: RGB
    progress_pct: int
    is_optimal: bool
    diff_label: str


def card_summary(part: str, value: float, goal: float) -> CardSummary:
    if goal:
        progress_pct = min(round_half_up(value / goal * 100), 100)
    else:
        progress_pct = 0
    diff = abs(goal - value)
    diff_label = "MET" if diff <= MET_THRESHOLD else f"{diff:.1f}{unit_suffix(part)}"
    return CardSummary(
        part=part,
        value=value,
        goal=goal,
        unit=unit_for(part),
        color=dynamic_color(part, value, goal),
        progress_pct=progress_pct,
        is_optimal=diff < OPTIMAL_THRESHOLD,
        diff_label=diff_label,
    )


def snapshot(state: AppState, overrides: Optional[dict] = None) -> list:
    """
    One card per tracked part, built from the latest entry.

    `overrides` holds in-progress edits to the latest entry; when given it
    replaces the stored values entirely, as the edit buffer starts as a copy.
    """
    latest = state.latest
    source = overrides if overrides is not None else (latest.values if latest else {})
    goals = state.goal_map()
    return [card_summary(part, source.get(part) or 0.0, goals.get(part, 0.0)) for part in DEFAULT_PARTS]


def progress_frame(state: AppState) -> pd.DataFrame:
    rows = [
        {
            "Part": card.part,
            "Current": card.value,
            "Goal": card.goal,
            "Progress %": card.progress_pct,
            "Color": rgb_to_hex(card.color),
        }
        for card in snapshot(state)
    ]
    return pd.DataFrame(rows, columns=["Part", "Current", "Goal", "Progress %", "Color"])


def entries_frame(entries: Sequence[MeasurementEntry]) -> pd.DataFrame:
    """History as a table: one row per entry, one column per part."""
    extra = sorted({p for e in entries for p in e.values} - set(DEFAULT_PARTS))
    columns = ["date", *DEFAULT_PARTS, *extra]
    rows = [{"date": e.date, **e.values} for e in entries]
    return pd.DataFrame(rows, columns=columns)
