"""Runtime state — in-memory UI preferences shared across modules.

Not persisted. Resets on restart. Holds the theme flag the presentation
layer toggles, plus free-form keys the console shell uses to remember
things for the session (e.g. the active view).
"""

import logging
from dataclasses import dataclass, field
from threading import Lock

from habitpulse.config import DARK_MODE

log = logging.getLogger(__name__)

_lock = Lock()


@dataclass
class RuntimeState:
    """Mutable runtime state, thread-safe via lock."""
    dark_mode: bool = DARK_MODE
    # Custom state (the shell can store arbitrary data here)
    custom: dict = field(default_factory=dict)


_state = RuntimeState()


def get_dark_mode() -> bool:
    with _lock:
        return _state.dark_mode


def set_dark_mode(enabled: bool) -> None:
    with _lock:
        _state.dark_mode = enabled
    log.info("Dark mode set to: %s", enabled)


def toggle_dark_mode() -> bool:
    """Flip the theme flag and return the new value."""
    with _lock:
        _state.dark_mode = not _state.dark_mode
        enabled = _state.dark_mode
    log.info("Dark mode set to: %s", enabled)
    return enabled


def get_custom(key: str, default=None):
    with _lock:
        return _state.custom.get(key, default)


def set_custom(key: str, value) -> None:
    with _lock:
        _state.custom[key] = value


def reset() -> None:
    """Back to config defaults. Used by tests."""
    global _state
    with _lock:
        _state = RuntimeState(dark_mode=DARK_MODE)
