"""History window — the bounded per-day series behind the charts.

A window is a tuple of HistoryPoint, oldest first, at most one point per
calendar day. Seeding fills the last N days ending today; recording a value
for today either overwrites today's point or slides the window forward
(append today, evict the oldest).
"""

import logging
from datetime import date, timedelta
from typing import Callable

from habitpulse.config import HISTORY_WINDOW_DAYS
from habitpulse.models import Habit, HistoryPoint

log = logging.getLogger(__name__)


def seed_history(
    today: date,
    baseline: float = 0,
    length: int = HISTORY_WINDOW_DAYS,
    value_fn: Callable[[int], float] | None = None,
) -> tuple[HistoryPoint, ...]:
    """Build a window of `length` consecutive days ending on `today`.

    Every point gets `baseline`, unless value_fn is given — then point i
    (0 = oldest) gets value_fn(i). Demo fixtures use that for fake history.
    """
    points = []
    for i in range(length):
        day = today - timedelta(days=length - 1 - i)
        value = value_fn(i) if value_fn is not None else baseline
        points.append(HistoryPoint(date=day, value=value))
    return tuple(points)


def record_today(
    history: tuple[HistoryPoint, ...],
    today: date,
    value: float,
    length: int = HISTORY_WINDOW_DAYS,
) -> tuple[HistoryPoint, ...]:
    """Return a new window with today's value recorded."""
    if history and history[-1].date == today:
        return history[:-1] + (HistoryPoint(date=today, value=value),)

    if history and history[-1].date > today:
        # Clock went backwards; appending would break chronological order
        log.warning(
            "Ignoring history update for %s — window already ends on %s",
            today, history[-1].date,
        )
        return history

    window = history + (HistoryPoint(date=today, value=value),)
    if len(window) > length:
        window = window[len(window) - length:]
    return window


def completion_rate(habit: Habit) -> float:
    """Today's progress as a percentage of the goal.

    Not clamped: 150.0 means the goal was beaten by half.
    """
    return habit.progress / habit.goal * 100


def display_completion(habit: Habit) -> float:
    """completion_rate clamped to 0..100, for progress bars."""
    return max(0.0, min(100.0, completion_rate(habit)))


def window_average(history: tuple[HistoryPoint, ...]) -> float:
    if not history:
        return 0.0
    return sum(p.value for p in history) / len(history)


def days_goal_met(history: tuple[HistoryPoint, ...], goal: float) -> int:
    """How many days in the window reached the goal line."""
    return sum(1 for p in history if p.value >= goal)
