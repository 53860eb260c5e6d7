"""
Process-wide state shared by request handlers.

VERSION_INFO is fixed at import time. REPO_COUNT is written by whichever
subsystems discover repositories and read by page rendering, which only
needs an eventually-visible value for display.
"""

import threading

from repobadge.core.config import settings

VERSION_INFO: str = settings.version_info()


class RepoCounter:
    """Thread-safe count of known repositories.

    Writers serialize on a lock. Readers call load() without locking:
    rebinding an int attribute is atomic, so a read sees either the old
    or the new value, never a torn one.
    """

    def __init__(self, initial: int = 0) -> None:
        if initial < 0:
            raise ValueError(f"Repository count cannot be negative: {initial}")
        self._value = initial
        self._lock = threading.Lock()

    def load(self) -> int:
        """Return the current value without synchronizing with writers."""
        return self._value

    def increment(self, by: int = 1) -> int:
        """Add ``by`` to the counter and return the new value.

        The counter only grows through increments; use store() to reset it.
        """
        if by < 0:
            raise ValueError(f"Repository count cannot be decremented: {by}")
        with self._lock:
            self._value += by
            return self._value

    def store(self, value: int) -> None:
        """Overwrite the counter."""
        if value < 0:
            raise ValueError(f"Repository count cannot be negative: {value}")
        with self._lock:
            self._value = value

    def __repr__(self) -> str:
        return f"RepoCounter({self._value})"


REPO_COUNT = RepoCounter()
