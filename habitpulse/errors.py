"""Domain errors.

Store operations never raise these to the caller — they are turned into a
notification and reported on the StoreResult. Model constructors do raise
them, since an invalid Habit can only come from a programming error.
"""


class HabitError(ValueError):
    """Base class for habit engine errors."""


class ValidationError(HabitError):
    """Input rejected before any state changed (e.g. blank habit name)."""
