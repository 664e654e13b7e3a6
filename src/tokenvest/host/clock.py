"""Ledger clocks."""

import threading
import time


class SystemClock:
    """Wall-clock seconds, clamped so readings never go backwards."""

    def __init__(self) -> None:
        self._last = 0
        self._lock = threading.Lock()

    def now(self) -> int:
        """Current unix time in seconds."""
        with self._lock:
            self._last = max(self._last, int(time.time()))
            return self._last


class FixedClock:
    """Manually driven clock for tests and replays.

    Example:
        clock = FixedClock(1_700_000_000)
        clock.advance(60)
        assert clock.now() == 1_700_000_060
    """

    def __init__(self, start: int = 0) -> None:
        if start < 0:
            raise ValueError("Clock start must be non-negative")
        self._now = start

    def now(self) -> int:
        """Current fixed time."""
        return self._now

    def advance(self, seconds: int) -> int:
        """Move the clock forward.

        Raises:
            ValueError: If seconds is negative.
        """
        if seconds < 0:
            raise ValueError("Clock cannot move backwards")
        self._now += seconds
        return self._now

    def set(self, value: int) -> None:
        """Jump to an absolute time no earlier than the current one."""
        if value < self._now:
            raise ValueError("Clock cannot move backwards")
        self._now = value
