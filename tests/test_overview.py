"""Tests for the dashboard projections."""

import random
from datetime import date

import pytest

from habitpulse.history import seed_history
from habitpulse.models import Habit
from habitpulse.overview import (
    build_overview,
    completion_slices,
    progress_bars,
    weekly_series,
)
from habitpulse.seed import demo_habits

TODAY = date(2024, 3, 10)


@pytest.fixture
def habits():
    return demo_habits(random.Random(7), TODAY)


class TestBuildOverview:
    def test_empty(self):
        assert build_overview([]) == {}

    def test_counts(self, habits):
        ov = build_overview(habits)
        assert ov["active_habits"] == 4
        # Only Screen time (185/120) is over its goal
        assert ov["goals_met_today"] == 1
        assert ov["due_today"] == ["Water intake", "Sleep", "Exercise"]

    def test_top_streaks(self, habits):
        ov = build_overview(habits)
        assert [s["name"] for s in ov["streaks"]] == ["Water intake", "Sleep", "Exercise"]
        assert ov["streaks"][0]["streak_days"] == 7

    def test_summary(self, habits):
        assert build_overview(habits)["summary"] == "1/4 goals met today, 7-day Water intake streak"

    def test_no_streaks_key_when_short(self):
        ov = build_overview([Habit(id="1", name="Read", streak=1)])
        assert "streaks" not in ov
        assert ov["summary"] == "0/1 goals met today"

    def test_all_done(self):
        ov = build_overview([Habit(id="1", name="Read", goal=1, progress=1)])
        assert "due_today" not in ov


class TestProjections:
    def test_progress_bars_clamped(self, habits):
        bars = {b["name"]: b for b in progress_bars(habits)}
        assert bars["Screen time"]["percent"] == 100.0
        assert bars["Water intake"]["percent"] == pytest.approx(75.0)

    def test_completion_slices_unclamped(self, habits):
        slices = {s["name"]: s["value"] for s in completion_slices(habits)}
        assert slices["Screen time"] > 100
        assert slices["Exercise"] == pytest.approx(50.0)

    def test_weekly_series(self):
        h = Habit(
            id="1", name="Read", goal=2,
            history=seed_history(TODAY, length=3, value_fn=lambda i: [1, 2, 3][i]),
        )
        series = weekly_series([h])[0]
        assert series["average"] == 2
        assert series["days_goal_met"] == 2
        assert [p["date"] for p in series["data"]] == ["Mar 08", "Mar 09", "Mar 10"]
