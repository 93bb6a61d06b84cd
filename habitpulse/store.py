"""Habit store — sole owner of the habit collection.

Every mutation is synchronous and builds a brand-new tuple snapshot; habits
themselves are frozen. Side effects (notification, "clear the name field")
are reported back on a StoreResult rather than kept as hidden state.

Subscribers are told about every state change — collection or notification —
only after the operation has fully committed both.

Usage:
    store = HabitStore()
    store.subscribe(lambda s: render(s.list_habits(), s.current_notification()))
    result = store.add_habit("Read")
    store.update_progress(result.habits[-1].id, 1)
"""

import logging
import math
import time
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone, timedelta
from typing import Callable, Iterable

from habitpulse.config import (
    DEFAULT_GOAL,
    DEFAULT_ICON,
    DEFAULT_UNIT,
    HISTORY_WINDOW_DAYS,
    RANDOM_SEED,
    SEED_DEMO_HABITS,
    TIMEZONE_OFFSET_HOURS,
)
from habitpulse.errors import HabitError, ValidationError
from habitpulse.history import record_today, seed_history
from habitpulse.models import Habit
from habitpulse.notifications import NotificationScheduler
from habitpulse.seed import demo_habits, make_rng, random_color
from habitpulse.streaks import next_streak

log = logging.getLogger(__name__)

TZ = timezone(timedelta(hours=TIMEZONE_OFFSET_HOURS))


def _today() -> date:
    return datetime.now(TZ).date()


def format_number(value: float) -> str:
    """8.0 -> "8", 7.5 -> "7.5"."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


@dataclass
class StoreResult:
    """Outcome of a store operation.

    - habits: snapshot after the operation (same object if nothing changed)
    - notification: message raised by the operation, "" if none
    - clear_input: caller should reset its name input field
    - error: validation failure that blocked the operation
    - changed: whether the collection was replaced
    """
    habits: tuple[Habit, ...]
    notification: str = ""
    clear_input: bool = False
    error: HabitError | None = None
    changed: bool = False


class HabitStore:
    """Owns the habit collection and the notification slot."""

    def __init__(
        self,
        habits: Iterable[Habit] = (),
        *,
        notifier: NotificationScheduler | None = None,
        rng=None,
        today: Callable[[], date] = _today,
        clock: Callable[[], float] = time.time,
        window: int = HISTORY_WINDOW_DAYS,
    ) -> None:
        self._habits: tuple[Habit, ...] = tuple(habits)
        ids = [h.id for h in self._habits]
        if len(set(ids)) != len(ids):
            raise ValidationError(f"Duplicate habit ids in initial collection: {ids}")

        self._notifier = notifier or NotificationScheduler()
        self._notifier.set_on_change(self._publish)
        self._rng = rng or make_rng()
        self._today = today
        self._clock = clock
        self._window = window
        self._last_id = 0
        self._subscribers: list[Callable[["HabitStore"], None]] = []

    # ── Read surface ────────────────────────────────────────────────────

    def list_habits(self) -> tuple[Habit, ...]:
        return self._habits

    def get_habit(self, habit_id: str) -> Habit | None:
        for h in self._habits:
            if h.id == habit_id:
                return h
        return None

    def current_notification(self) -> str:
        return self._notifier.current()

    def subscribe(self, callback: Callable[["HabitStore"], None]) -> Callable[[], None]:
        """Register callback(store) for every state change. Returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # ── Mutations ───────────────────────────────────────────────────────

    def add_habit(self, name: str) -> StoreResult:
        """Create a habit with default goal/unit and an all-zero history window."""
        name = (name or "").strip()
        if not name:
            message = "Please enter a habit name"
            log.info("Add habit rejected: empty name")
            self._announce(message)
            return StoreResult(
                habits=self._habits,
                notification=message,
                error=ValidationError("Habit name must not be empty"),
            )

        habit = Habit(
            id=self._new_id(),
            name=name,
            icon=DEFAULT_ICON,
            goal=DEFAULT_GOAL,
            unit=DEFAULT_UNIT,
            progress=0,
            streak=0,
            history=seed_history(self._today(), baseline=0, length=self._window),
            color=random_color(self._rng),
        )
        self._habits = self._habits + (habit,)
        log.info("Habit added: %s (id=%s)", habit.name, habit.id)

        message = f"Added new habit: {habit.name}"
        self._announce(message)
        return StoreResult(
            habits=self._habits, notification=message, clear_input=True, changed=True,
        )

    def update_progress(self, habit_id: str, new_value) -> StoreResult:
        """Set today's progress, recompute the streak and record today's history point."""
        index = self._index_of(habit_id)
        if index is None:
            log.debug("Update for unknown habit %s ignored", habit_id)
            return StoreResult(habits=self._habits)

        habit = self._habits[index]
        try:
            # bool is an int subclass; True would count as progress 1
            value = math.nan if isinstance(new_value, bool) else float(new_value)
        except (TypeError, ValueError):
            value = math.nan
        if not math.isfinite(value):
            message = f"Invalid progress value for {habit.name}"
            log.info("Progress update rejected for %s: %r", habit.id, new_value)
            self._announce(message)
            return StoreResult(
                habits=self._habits,
                notification=message,
                error=ValidationError(f"Progress must be a number, got {new_value!r}"),
            )
        if value < 0:
            log.debug("Clamping negative progress %s to 0 for %s", value, habit.id)
            value = 0.0

        updated = replace(
            habit,
            progress=value,
            streak=next_streak(habit.streak, value, habit.goal),
            history=record_today(habit.history, self._today(), value, length=self._window),
        )
        self._habits = self._habits[:index] + (updated,) + self._habits[index + 1:]
        log.info(
            "Progress %s -> %s %s (streak %d -> %d)",
            habit.name, format_number(value), habit.unit, habit.streak, updated.streak,
        )

        message = f"Updated {habit.name} progress to {format_number(value)} {habit.unit}"
        self._announce(message)
        return StoreResult(habits=self._habits, notification=message, changed=True)

    def delete_habit(self, habit_id: str) -> StoreResult:
        """Remove a habit for good. Unknown ids are a silent no-op."""
        index = self._index_of(habit_id)
        if index is None:
            log.debug("Delete for unknown habit %s ignored", habit_id)
            return StoreResult(habits=self._habits)

        habit = self._habits[index]
        self._habits = self._habits[:index] + self._habits[index + 1:]
        log.info("Habit deleted: %s (id=%s)", habit.name, habit.id)

        message = f"Deleted habit: {habit.name}"
        self._announce(message)
        return StoreResult(habits=self._habits, notification=message, changed=True)

    # ── Internals ───────────────────────────────────────────────────────

    def _index_of(self, habit_id: str) -> int | None:
        for i, h in enumerate(self._habits):
            if h.id == habit_id:
                return i
        return None

    def _new_id(self) -> str:
        """Millisecond timestamp, bumped past anything already handed out."""
        candidate = max(int(self._clock() * 1000), self._last_id + 1)
        taken = {h.id for h in self._habits}
        while str(candidate) in taken:
            candidate += 1
        self._last_id = candidate
        return str(candidate)

    def _announce(self, message: str) -> None:
        """Raise a notification; the slot's on_change publishes to subscribers.

        The collection is already committed when this runs, so a failing
        notifier must not turn the operation into an exception.
        """
        try:
            self._notifier.notify(message)
        except Exception as e:
            log.error("Notification %r failed: %s", message, e, exc_info=True)
            self._publish()

    def _publish(self) -> None:
        for callback in list(self._subscribers):
            try:
                callback(self)
            except Exception as e:
                log.error("Subscriber %r failed: %s", callback, e, exc_info=True)


def build_default_store(notifier: NotificationScheduler | None = None) -> HabitStore:
    """Store wired from config: demo habits (if enabled) and the configured seed."""
    rng = make_rng(RANDOM_SEED)
    habits = demo_habits(rng, _today()) if SEED_DEMO_HABITS else []
    log.info("Store ready with %d habits", len(habits))
    return HabitStore(habits, notifier=notifier, rng=rng)
