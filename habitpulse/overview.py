"""Dashboard overview — read-only projections for the presentation layer.

Takes a habit snapshot and turns it into the flat dicts the dashboard,
weekly chart and stats pie consume. No state, no mutation.
"""

import logging
from typing import Iterable

from habitpulse.history import (
    completion_rate,
    days_goal_met,
    display_completion,
    window_average,
)
from habitpulse.models import Habit

log = logging.getLogger(__name__)


def build_overview(habits: Iterable[Habit]) -> dict:
    """Today's summary: goals met, habits still due, top streaks."""
    habits = list(habits)
    if not habits:
        return {}  # Nothing tracked — nothing to report

    active_habits = len(habits)
    goals_met = sum(1 for h in habits if h.progress >= h.goal)
    due_today = [h.name for h in habits if h.progress < h.goal]

    # Top streaks (≥2 days, sorted descending)
    streaks = sorted(
        [{"name": h.name, "streak_days": h.streak}
         for h in habits if h.streak >= 2],
        key=lambda x: x["streak_days"],
        reverse=True,
    )[:3]  # Top 3

    # Human-readable summary
    parts = [f"{goals_met}/{active_habits} goals met today"]
    if streaks:
        top = streaks[0]
        parts.append(f"{top['streak_days']}-day {top['name']} streak")

    result: dict = {
        "active_habits": active_habits,
        "goals_met_today": goals_met,
        "summary": ", ".join(parts),
    }
    if due_today:
        result["due_today"] = due_today
    if streaks:
        result["streaks"] = streaks

    return result


def progress_bars(habits: Iterable[Habit]) -> list[dict]:
    """One bar per habit; percent is clamped so bars never overflow."""
    return [
        {
            "id": h.id,
            "name": h.name,
            "icon": h.icon,
            "progress": h.progress,
            "goal": h.goal,
            "unit": h.unit,
            "percent": display_completion(h),
            "color": h.color,
        }
        for h in habits
    ]


def weekly_series(habits: Iterable[Habit]) -> list[dict]:
    """Line/bar chart series, one per habit, straight from its history window."""
    return [
        {
            "id": h.id,
            "name": h.name,
            "color": h.color,
            "goal": h.goal,
            "average": window_average(h.history),
            "days_goal_met": days_goal_met(h.history, h.goal),
            "data": [p.to_dict() for p in h.history],
        }
        for h in habits
    ]


def completion_slices(habits: Iterable[Habit]) -> list[dict]:
    """Pie slices of completion rate. Unclamped — over-achievers show >100."""
    return [
        {"name": h.name, "value": completion_rate(h), "color": h.color}
        for h in habits
    ]
