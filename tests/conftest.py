"""Shared fixtures: a hand-driven timer and a fixed calendar."""

import random
from datetime import date, timedelta

import pytest

from habitpulse.notifications import NotificationScheduler
from habitpulse.store import HabitStore


class _Handle:
    def __init__(self, when: float, callback) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTimer:
    """Stands in for loop.call_later; time only moves on advance()."""

    def __init__(self) -> None:
        self.now = 0.0
        self.handles: list[_Handle] = []

    def __call__(self, delay, callback) -> _Handle:
        handle = _Handle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def advance(self, seconds: float) -> None:
        target = self.now + seconds
        due = sorted(
            (h for h in self.handles if not h.cancelled and h.when <= target),
            key=lambda h: h.when,
        )
        for h in due:
            self.now = h.when
            self.handles.remove(h)
            h.callback()
        self.now = target


class Calendar:
    """Mutable "today" so tests can walk across days."""

    def __init__(self, start: date) -> None:
        self.day = start

    def __call__(self) -> date:
        return self.day

    def next_day(self) -> date:
        self.day += timedelta(days=1)
        return self.day


@pytest.fixture
def timer():
    return ManualTimer()


@pytest.fixture
def calendar():
    return Calendar(date(2024, 3, 10))


@pytest.fixture
def notifier(timer):
    return NotificationScheduler(duration=3, timer=timer)


@pytest.fixture
def store(notifier, calendar):
    clock_ms = iter(range(1_700_000_000_000, 1_800_000_000_000, 1))
    return HabitStore(
        notifier=notifier,
        rng=random.Random(42),
        today=calendar,
        clock=lambda: next(clock_ms) / 1000,
    )
