"""Streak rule.

Each progress update is treated as the day's final value: meeting the goal
extends the streak by one, anything short of it resets to zero. There is no
partial credit and no day-boundary check here.
"""


def next_streak(current_streak: int, new_progress: float, goal: float) -> int:
    """Return the streak after recording new_progress against goal."""
    if new_progress >= goal:
        return max(current_streak, 0) + 1
    return 0
