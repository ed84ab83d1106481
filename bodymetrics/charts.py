"""
Matplotlib figures for the dashboard.

Trend lines are drawn as a LineCollection so each segment can carry its own
goal-proximity color; the line whitens as the series converges on its goal.
"""

from typing import Callable, Optional, Sequence

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import seaborn as sns
from matplotlib.collections import LineCollection
from matplotlib.figure import Figure
from matplotlib.lines import Line2D

from bodymetrics.colors import rgb_to_hex
from bodymetrics.models import MeasurementEntry
from bodymetrics.parts import PART_COLORS, unit_suffix
from bodymetrics.selectors import compute_domain, gradient_stops

BACKGROUND = "#05050a"
GRID = "#1a1a22"
AXIS = "#8a8a93"
MAX_TICKS = 14


def apply_theme() -> None:
    sns.set_theme(
        style="darkgrid",
        rc={
            "axes.facecolor": BACKGROUND,
            "figure.facecolor": BACKGROUND,
            "grid.color": GRID,
            "grid.linestyle": "--",
            "axes.edgecolor": GRID,
            "axes.labelcolor": AXIS,
            "xtick.color": AXIS,
            "ytick.color": AXIS,
            "text.color": "white",
            "font.family": "monospace",
        },
    )


def format_tick(day: str) -> str:
    """'2024-03-07' -> '03/07'."""
    return "/".join(day.split("-")[1:])


def _date_ticks(ax, entries: Sequence[MeasurementEntry]) -> None:
    step = max(1, int(np.ceil(len(entries) / MAX_TICKS)))
    positions = list(range(0, len(entries), step))
    ax.set_xticks(positions)
    ax.set_xticklabels([format_tick(entries[i].date) for i in positions], fontsize=8)


def _series(entries: Sequence[MeasurementEntry], part: str) -> np.ndarray:
    # missing values become gaps
    return np.array(
        [np.nan if e.value(part) is None else e.value(part) for e in entries],
        dtype=float,
    )


def _gradient_line(ax, entries, part: str, goal: float, linewidth: float = 3.0) -> None:
    ys = _series(entries, part)
    xs = np.arange(len(ys))
    colors = [rgb_to_hex(color) for _, color in gradient_stops(entries, part, goal)]

    if len(ys) > 1:
        points = np.column_stack([xs, ys]).reshape(-1, 1, 2)
        segments = np.concatenate([points[:-1], points[1:]], axis=1)
        ax.add_collection(LineCollection(segments, colors=colors[1:], linewidths=linewidth, label=part))
    ax.scatter(xs, ys, c=colors, s=36, edgecolors="black", linewidths=1.2, zorder=3)


def _goal_line(ax, y: float, color: str, label: str, alpha: float = 0.4) -> None:
    ax.axhline(y, color=color, alpha=alpha, linestyle=(0, (5, 5)), linewidth=1.2)
    ax.annotate(
        label,
        xy=(1.0, y),
        xycoords=("axes fraction", "data"),
        xytext=(-6, 4),
        textcoords="offset points",
        ha="right",
        fontsize=8,
        fontweight="bold",
        color=color,
        alpha=0.8,
    )


def main_chart(
    entries: Sequence[MeasurementEntry],
    selected_parts: Sequence[str],
    goal_lookup: Callable[[str], float],
) -> Figure:
    """Gradient trend lines for the selected parts over an entry window."""
    apply_theme()
    fig, ax = plt.subplots(figsize=(10, 4.5))

    for part in selected_parts:
        goal = goal_lookup(part)
        color = PART_COLORS[part]
        _goal_line(ax, goal, color, f"GOAL: {goal:g}{unit_suffix(part)}")
        if entries:
            _gradient_line(ax, entries, part, goal)

    ax.autoscale_view()
    domain = compute_domain(entries, selected_parts, goal_lookup)
    if domain is not None:
        ax.set_ylim(*domain)
    if entries:
        ax.set_xlim(-0.5, len(entries) - 0.5)
        _date_ticks(ax, entries)
    if selected_parts:
        handles = [Line2D([], [], color=PART_COLORS[p], linewidth=4) for p in selected_parts]
        ax.legend(handles, [p.upper() for p in selected_parts], loc="upper center",
                  bbox_to_anchor=(0.5, -0.12), ncol=len(selected_parts), frameon=False, fontsize=8)
    fig.tight_layout()
    return fig


def area_chart(entries: Sequence[MeasurementEntry], part: str, goal: float) -> Figure:
    """Single-part trend with a faded fill and target line, auto-scaled."""
    apply_theme()
    fig, ax = plt.subplots(figsize=(5, 3.2))
    color = PART_COLORS[part]
    suffix = unit_suffix(part)
    _goal_line(ax, goal, color, f"TARGET: {goal:g}{' ' if suffix == 'LBS' else ''}{suffix}", alpha=0.3)

    if entries:
        _gradient_line(ax, entries, part, goal, linewidth=3.5)
        ax.autoscale_view()
        low, high = ax.get_ylim()
        ys = _series(entries, part)
        ax.fill_between(np.arange(len(ys)), ys, low, color=color, alpha=0.15, linewidth=0)
        ax.set_ylim(low, high)
        ax.set_xlim(-0.5, len(entries) - 0.5)
        _date_ticks(ax, entries)
    fig.tight_layout()
    return fig


def progress_chart(frame: pd.DataFrame) -> Figure:
    """Percent-to-goal per part, bars in each part's current color."""
    apply_theme()
    fig, ax = plt.subplots(figsize=(10, 3))
    palette = dict(zip(frame["Part"], frame["Color"]))
    sns.barplot(data=frame, x="Part", y="Progress %", hue="Part", palette=palette, legend=False, ax=ax)

    for index, row in frame.reset_index(drop=True).iterrows():
        ax.text(index, row["Progress %"] + 2, f"{row['Progress %']:.0f}%", ha="center", fontsize=8)

    ax.set_ylim(0, 110)
    ax.set_xlabel("")
    ax.tick_params(labelsize=8)
    fig.tight_layout()
    return fig


def close(fig: Optional[Figure]) -> None:
    if fig is not None:
        plt.close(fig)
