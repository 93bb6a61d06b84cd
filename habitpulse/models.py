"""Habit entity model.

Plain frozen dataclasses. A Habit is never edited in place — the store
builds a new one with dataclasses.replace() and swaps the snapshot.
"""

import math
from dataclasses import dataclass, field
from datetime import date

from habitpulse.config import DATE_LABEL_FORMAT, DEFAULT_GOAL, DEFAULT_UNIT
from habitpulse.errors import ValidationError


@dataclass(frozen=True)
class HistoryPoint:
    """One day's recorded value in a habit's history window."""
    date: date
    value: float = 0

    @property
    def label(self) -> str:
        return self.date.strftime(DATE_LABEL_FORMAT)

    def to_dict(self) -> dict:
        """Chart-friendly form: {"date": "Oct 16", "value": 3}."""
        return {"date": self.label, "value": self.value}


@dataclass(frozen=True)
class Habit:
    """A tracked recurring behavior with a numeric daily goal."""
    id: str
    name: str
    goal: float = DEFAULT_GOAL
    unit: str = DEFAULT_UNIT
    progress: float = 0
    streak: int = 0
    icon: str = ""
    color: str = ""
    history: tuple[HistoryPoint, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Habit name must not be empty")
        if not (self.goal > 0) or math.isinf(self.goal):
            raise ValidationError(f"Goal must be a positive number, got {self.goal!r}")
        if not (self.progress >= 0):
            raise ValidationError(f"Progress must be >= 0, got {self.progress!r}")
        if self.streak < 0:
            raise ValidationError(f"Streak must be >= 0, got {self.streak!r}")
        # Lists sneak in from callers building fixtures by hand
        if not isinstance(self.history, tuple):
            object.__setattr__(self, "history", tuple(self.history))

        days = [p.date for p in self.history]
        if len(set(days)) != len(days):
            raise ValidationError(f"Duplicate day in history of {self.name!r}")
        if days != sorted(days):
            raise ValidationError(f"History of {self.name!r} is not chronological")

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "icon": self.icon,
            "goal": self.goal,
            "unit": self.unit,
            "progress": self.progress,
            "streak": self.streak,
            "history": [p.to_dict() for p in self.history],
            "color": self.color,
        }


@dataclass(frozen=True)
class Notification:
    """Transient message held by the notification slot.

    token identifies the scheduling round; only the newest token may expire it.
    """
    message: str
    token: int = 0
