"""Seed data — palette colors and the demo habits shown on first start.

Everything random goes through an injected random.Random, so a fixed seed
gives the exact same colors and history every run.
"""

import random
from datetime import date

from habitpulse.history import seed_history
from habitpulse.models import Habit


def make_rng(seed: str = "") -> random.Random:
    """Random source from a config seed string ("" = unseeded)."""
    return random.Random(seed) if seed else random.Random()


def random_color(rng: random.Random) -> str:
    """Random #rrggbb color for a new habit."""
    return f"#{rng.randrange(0xFFFFFF):06x}"


def demo_habits(rng: random.Random, today: date) -> list[Habit]:
    """The four illustrative habits with a week of made-up history."""

    def exercise_minutes(_: int) -> float:
        # Roughly one rest day in five
        if rng.random() > 0.2:
            return rng.randint(10, 49)
        return 0

    return [
        Habit(
            id="1", name="Water intake", icon="💧", color="#3b82f6",
            goal=8, unit="glasses", progress=6, streak=7,
            history=seed_history(today, value_fn=lambda _: rng.randint(4, 8)),
        ),
        Habit(
            id="2", name="Sleep", icon="😴", color="#8b5cf6",
            goal=8, unit="hours", progress=7.5, streak=4,
            history=seed_history(today, value_fn=lambda _: round(rng.uniform(5, 9), 1)),
        ),
        Habit(
            id="3", name="Exercise", icon="🏃", color="#ef4444",
            goal=30, unit="minutes", progress=15, streak=2,
            history=seed_history(today, value_fn=exercise_minutes),
        ),
        Habit(
            id="4", name="Screen time", icon="📱", color="#f59e0b",
            goal=120, unit="minutes", progress=185, streak=0,
            history=seed_history(today, value_fn=lambda _: rng.randint(100, 279)),
        ),
    ]
