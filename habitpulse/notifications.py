"""Notification slot — single message, auto-expiring, debounced.

State machine:
  Idle   --notify(msg)--> Active   (schedule expiry)
  Active --notify(msg)--> Active   (replace message, cancel + reschedule)
  Active --expire------> Idle

Every scheduled expiry carries a monotonic token. Only the newest token is
allowed to clear the slot; an older expiry that still fires (cancel lost the
race, or a fake timer fires it anyway) is a no-op.

The timer is a cooperative deferred callback on the asyncio loop, not a
thread. Tests inject their own timer to drive time by hand.
"""

import asyncio
import logging
from typing import Any, Callable

from habitpulse.config import NOTIFICATION_DURATION_SECONDS
from habitpulse.models import Notification

log = logging.getLogger(__name__)

# (delay_seconds, callback) -> handle with .cancel()
Timer = Callable[[float, Callable[[], None]], Any]


def _loop_timer(delay: float, callback: Callable[[], None]) -> asyncio.TimerHandle | None:
    """Default timer: schedule on the running event loop.

    Without a running loop nothing is scheduled; the message then stays
    until the next notify() or clear().
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        log.warning("No running event loop — notification expiry not scheduled")
        return None
    return loop.call_later(delay, callback)


class NotificationScheduler:
    """Owns the one notification slot."""

    def __init__(
        self,
        duration: float = NOTIFICATION_DURATION_SECONDS,
        on_change: Callable[[], None] | None = None,
        timer: Timer | None = None,
    ) -> None:
        self.duration = duration
        self._on_change = on_change
        self._timer = timer or _loop_timer
        self._current: Notification | None = None
        self._handle: Any = None
        self._token = 0

    @property
    def active(self) -> bool:
        return self._current is not None

    def current(self) -> str:
        """The live message, or "" when idle."""
        return self._current.message if self._current else ""

    def set_on_change(self, callback: Callable[[], None] | None) -> None:
        self._on_change = callback

    def notify(self, message: str) -> Notification:
        """Show message now and (re)start the expiry countdown."""
        self._cancel_pending()
        self._token += 1
        token = self._token
        self._handle = self._timer(self.duration, lambda: self._expire(token))
        self._current = Notification(message=message, token=token)
        log.debug("Notification #%d: %s", token, message)
        self._changed()
        return self._current

    def clear(self) -> None:
        """Drop the live message without waiting for expiry."""
        if self._current is None:
            return
        self._cancel_pending()
        self._token += 1
        self._current = None
        self._changed()

    def _expire(self, token: int) -> None:
        if token != self._token or self._current is None:
            log.debug("Stale expiry #%d ignored (current #%d)", token, self._token)
            return
        log.debug("Notification #%d expired", token)
        self._current = None
        self._handle = None
        self._changed()

    def _cancel_pending(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
