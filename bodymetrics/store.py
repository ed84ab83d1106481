"""
Measurement store: JSON persistence plus the commit operations that are the
only way AppState changes.

Reads never fail: a missing or malformed file yields the seed state so the
dashboard always has something to render.
"""

import contextlib
import json
import logging
import math
import os
import tempfile
import uuid
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

from dateutil.relativedelta import relativedelta

from bodymetrics.config import get_settings
from bodymetrics.models import AppState, Goal, MeasurementEntry, sort_entries
from bodymetrics.parts import DEFAULT_PARTS

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

SEED_GOALS = {
    "Chest": 44,
    "Shoulders": 50,
    "Arms": 16.5,
    "Weight": 180,
    "Thighs": 25,
    "Calves": 16,
    "Waist": 32,
    "Body Fat %": 12,
}

# (start value, change per step back in time)
SEED_TRENDS = {
    "Chest": (42, -0.05),
    "Shoulders": (48, -0.08),
    "Arms": (15, 0.02),
    "Waist": (34, 0.05),
    "Thighs": (24, -0.03),
    "Calves": (15.5, -0.01),
    "Weight": (195, -0.2),
    "Body Fat %": (18, 0.1),
}
SEED_POINTS = 13
SEED_SPACING_DAYS = 2


def _new_id() -> str:
    return uuid.uuid4().hex[:9]


def _resolve(path: Optional[PathLike]) -> Path:
    return Path(path) if path is not None else get_settings().storage_path


# ---------------------------
# Seed state
# ---------------------------

def seed_state(today: Optional[date] = None) -> AppState:
    """Synthetic multi-week history and one goal per tracked part."""
    today = today or date.today()
    entries = []
    for i in range(SEED_POINTS - 1, -1, -1):
        day = today - relativedelta(days=i * SEED_SPACING_DAYS)
        values = {part: start + i * step for part, (start, step) in SEED_TRENDS.items()}
        entries.append(MeasurementEntry(id=_new_id(), date=day.isoformat(), values=values))
    goals = [Goal(part=part, target=float(SEED_GOALS.get(part, 44))) for part in DEFAULT_PARTS]
    return AppState(entries=entries, goals=goals)


# ---------------------------
# Persistence
# ---------------------------

def load(path: Optional[PathLike] = None) -> AppState:
    path = _resolve(path)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.info("No stored data at %s, using seed state", path)
        return seed_state()
    except OSError as e:
        logger.warning("Could not read %s (%s), using seed state", path, e)
        return seed_state()

    try:
        return AppState.from_dict(json.loads(raw.decode("utf-8")))
    except (ValueError, KeyError, TypeError) as e:
        # covers UnicodeDecodeError, json.JSONDecodeError and dateutil's ParserError
        logger.warning("Error parsing stored data in %s: %s", path, e)
        return seed_state()


def save(state: AppState, path: Optional[PathLike] = None) -> None:
    """
    Overwrite the stored state with `state`.

    The payload goes to a temporary sibling file that is then renamed over
    `path`, so an interrupted write never leaves a truncated store behind.
    """
    path = _resolve(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(state.to_dict(), indent=2)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            os.unlink(tmp_name)
        raise


# ---------------------------
# Input coercion
# ---------------------------

def parse_number(raw, default: Optional[float] = 0.0) -> Optional[float]:
    """Lenient float parsing: anything unusable becomes `default`."""
    if raw is None:
        return default
    try:
        value = float(str(raw).strip())
    except ValueError:
        return default
    return value if math.isfinite(value) else default


# ---------------------------
# Commit operations
# ---------------------------

def append_entry(
    state: AppState,
    raw_values: Mapping[str, object],
    on: Optional[date] = None,
) -> AppState:
    """
    Add an entry dated `on` (today by default).

    A blank or unparseable field carries forward the latest recorded value for
    that part, or 0 when the part has never been recorded.
    """
    latest = state.latest
    values: Dict[str, float] = {}
    for part in DEFAULT_PARTS:
        previous = latest.value(part) if latest else None
        fallback = previous if previous is not None else 0.0
        values[part] = parse_number(raw_values.get(part), default=fallback)

    entry = MeasurementEntry(
        id=_new_id(),
        date=(on or date.today()).isoformat(),
        values=values,
    )
    logger.info("Appending entry %s for %s", entry.id, entry.date)
    return replace(state, entries=sort_entries([*state.entries, entry]))


def overwrite_latest(state: AppState, values: Mapping[str, object]) -> AppState:
    """Replace the newest entry's values; an empty history is left as is."""
    if not state.entries:
        return state
    entries = list(state.entries)
    latest = entries[-1]
    entries[-1] = replace(latest, values={part: parse_number(v) for part, v in values.items()})
    logger.info("Overwrote values of entry %s (%s)", latest.id, latest.date)
    return replace(state, entries=entries)


def overwrite_goals(state: AppState, targets: Mapping[str, object]) -> AppState:
    """Set new targets for the goals named in `targets`; other goals are kept."""
    goals = [
        replace(goal, target=parse_number(targets[goal.part])) if goal.part in targets else goal
        for goal in state.goals
    ]
    logger.info("Updated goals for %s", ", ".join(sorted(p for p in targets)))
    return replace(state, goals=goals)
