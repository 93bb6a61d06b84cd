"""Tests for the history window and completion projections."""

from datetime import date, timedelta

import pytest

from habitpulse.history import (
    completion_rate,
    days_goal_met,
    display_completion,
    record_today,
    seed_history,
    window_average,
)
from habitpulse.models import Habit, HistoryPoint

TODAY = date(2024, 3, 10)


class TestSeedHistory:
    def test_seven_days_ending_today(self):
        window = seed_history(TODAY, length=7)
        assert len(window) == 7
        assert window[0].date == date(2024, 3, 4)
        assert window[-1].date == TODAY

    def test_consecutive_days(self):
        window = seed_history(TODAY, length=7)
        for prev, cur in zip(window, window[1:]):
            assert cur.date - prev.date == timedelta(days=1)

    def test_baseline(self):
        assert all(p.value == 0 for p in seed_history(TODAY))
        assert all(p.value == 2.5 for p in seed_history(TODAY, baseline=2.5))

    def test_value_fn_oldest_first(self):
        window = seed_history(TODAY, length=3, value_fn=lambda i: i * 10)
        assert [p.value for p in window] == [0, 10, 20]

    def test_labels(self):
        window = seed_history(TODAY, length=2)
        assert [p.to_dict() for p in window] == [
            {"date": "Mar 09", "value": 0},
            {"date": "Mar 10", "value": 0},
        ]


class TestRecordToday:
    def test_replaces_todays_point(self):
        window = seed_history(TODAY, length=7)
        updated = record_today(window, TODAY, 5, length=7)
        assert len(updated) == 7
        assert updated[-1] == HistoryPoint(TODAY, 5)
        assert updated[:-1] == window[:-1]

    def test_replaces_again_same_day(self):
        window = record_today(seed_history(TODAY), TODAY, 5)
        window = record_today(window, TODAY, 2)
        assert window[-1].value == 2
        assert len([p for p in window if p.date == TODAY]) == 1

    def test_new_day_slides_window(self):
        window = seed_history(TODAY, length=7)
        tomorrow = TODAY + timedelta(days=1)
        updated = record_today(window, tomorrow, 3, length=7)
        assert len(updated) == 7
        assert updated[0].date == window[1].date
        assert updated[-1] == HistoryPoint(tomorrow, 3)

    def test_eight_day_advancing_updates_keep_seven(self):
        original = seed_history(TODAY, baseline=1, length=7)
        window = original
        day = TODAY
        for v in range(8):
            day += timedelta(days=1)
            window = record_today(window, day, v, length=7)
        assert len(window) == 7
        assert original[0] not in window
        assert all(p.date > TODAY for p in window)
        assert [p.value for p in window] == [1, 2, 3, 4, 5, 6, 7]

    def test_short_window_grows_until_full(self):
        window = record_today((), TODAY, 1, length=3)
        assert len(window) == 1

    def test_older_day_is_ignored(self):
        window = seed_history(TODAY, length=7)
        assert record_today(window, TODAY - timedelta(days=2), 9) == window

    def test_input_not_mutated(self):
        window = seed_history(TODAY, length=7)
        snapshot = tuple(window)
        record_today(window, TODAY + timedelta(days=1), 1, length=7)
        assert window == snapshot


class TestCompletion:
    def _habit(self, progress, goal):
        return Habit(id="h", name="Water", goal=goal, progress=progress)

    def test_rate(self):
        assert completion_rate(self._habit(6, 8)) == pytest.approx(75.0)

    def test_rate_not_clamped(self):
        assert completion_rate(self._habit(185, 120)) == pytest.approx(154.1666, rel=1e-3)

    def test_display_clamped(self):
        assert display_completion(self._habit(185, 120)) == 100.0
        assert display_completion(self._habit(0, 5)) == 0.0

    def test_window_stats(self):
        window = seed_history(TODAY, length=4, value_fn=lambda i: [2, 8, 9, 5][i])
        assert window_average(window) == 6
        assert days_goal_met(window, 8) == 2

    def test_window_average_empty(self):
        assert window_average(()) == 0.0
