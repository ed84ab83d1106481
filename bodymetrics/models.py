"""
Data models for the measurement tracker.

The persisted JSON mirrors these shapes exactly:

    {"entries": [{"id": ..., "date": "YYYY-MM-DD", "values": {part: number}}],
     "goals":   [{"part": ..., "target": number}]}
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from dateutil import parser as date_parser


def normalize_date(raw) -> str:
    """Reduce any parseable date to its ISO day string."""
    try:
        return date_parser.parse(str(raw)).date().isoformat()
    except OverflowError as e:
        raise ValueError(f"Date out of range: {raw!r}") from e


@dataclass(frozen=True)
class MeasurementEntry:
    """One dated snapshot of measured values across tracked parts."""
    id: str
    date: str  # ISO day string (YYYY-MM-DD)
    values: Dict[str, float] = field(default_factory=dict)

    def value(self, part: str) -> Optional[float]:
        return self.values.get(part)

    def to_dict(self) -> dict:
        return {"id": self.id, "date": self.date, "values": dict(self.values)}

    @classmethod
    def from_dict(cls, data: dict) -> "MeasurementEntry":
        values = data["values"]
        if not isinstance(values, dict):
            raise TypeError("entry values must be an object")
        return cls(
            id=str(data["id"]),
            date=normalize_date(data["date"]),
            values={str(k): float(v) for k, v in values.items()},
        )


@dataclass(frozen=True)
class Goal:
    part: str
    target: float

    def to_dict(self) -> dict:
        return {"part": self.part, "target": self.target}

    @classmethod
    def from_dict(cls, data: dict) -> "Goal":
        return cls(part=str(data["part"]), target=float(data["target"]))


@dataclass
class AppState:
    """Entry history plus goal set; the unit of persistence."""
    entries: List[MeasurementEntry] = field(default_factory=list)
    goals: List[Goal] = field(default_factory=list)

    @property
    def latest(self) -> Optional[MeasurementEntry]:
        return self.entries[-1] if self.entries else None

    def goal_for(self, part: str) -> float:
        """Target for `part`; the first goal wins and a missing goal reads as 0."""
        for goal in self.goals:
            if goal.part == part:
                return goal.target
        return 0.0

    def goal_map(self) -> Dict[str, float]:
        targets: Dict[str, float] = {}
        for goal in self.goals:
            targets.setdefault(goal.part, goal.target)
        return targets

    def to_dict(self) -> dict:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "goals": [g.to_dict() for g in self.goals],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AppState":
        if not isinstance(data, dict):
            raise TypeError("state must be an object")
        entries = [MeasurementEntry.from_dict(e) for e in data["entries"]]
        goals = [Goal.from_dict(g) for g in data["goals"]]
        return cls(entries=sort_entries(entries), goals=goals)


def sort_entries(entries: List[MeasurementEntry]) -> List[MeasurementEntry]:
    # stable: entries sharing a date keep insertion order
    return sorted(entries, key=lambda e: e.date)
