"""Utility functions for time handling.

Device sessions are measured with a monotonic clock, never wall-clock
datetimes, so that NTP adjustments cannot produce negative durations.
Timestamps are plain floats in seconds.
"""

from __future__ import annotations

import time
from typing import Protocol


class Clock(Protocol):
    """Source of monotonic timestamps used by power accounts."""

    def now(self) -> float:
        """Current timestamp in seconds."""
        ...

    def elapsed(self, start: float, end: float) -> float:
        """Seconds between two timestamps produced by this clock."""
        ...


class MonotonicClock:
    """Clock backed by :func:`time.monotonic`."""

    def now(self) -> float:
        return time.monotonic()

    def elapsed(self, start: float, end: float) -> float:
        return max(0.0, end - start)


class ManualClock:
    """
    Clock that only moves when told to.

    Used for simulations and tests where a device should appear to run for
    an hour without actually waiting an hour.

    Usage:
        clock = ManualClock()
        bulb.turn_on()
        clock.advance(3600)
        bulb.turn_off()
    """

    def __init__(self, start: float = 0.0) -> None:
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def elapsed(self, start: float, end: float) -> float:
        return max(0.0, end - start)

    def advance(self, seconds: float) -> float:
        """Move the clock forward and return the new timestamp."""
        if seconds < 0:
            raise ValueError("ManualClock cannot move backwards")
        self._now += float(seconds)
        return self._now


_default_clock = MonotonicClock()


def get_default_clock() -> Clock:
    """Return the process-wide monotonic clock."""
    return _default_clock


def format_duration(total_seconds: float) -> str:
    """
    Format a duration as ``"Hh Mmin Ss"``.

    Hours are omitted when zero; minutes are omitted when both hours and
    minutes are zero.

    Examples:
        5      -> "5s"
        125    -> "2min 5s"
        3600   -> "1h 0min 0s"
    """
    seconds_int = max(0, int(total_seconds))
    hours = seconds_int // 3600
    minutes = (seconds_int % 3600) // 60
    seconds = seconds_int % 60

    parts = []
    if hours > 0:
        parts.append(f"{hours}h")
    if minutes > 0 or hours > 0:
        parts.append(f"{minutes}min")
    parts.append(f"{seconds}s")
    return " ".join(parts)
