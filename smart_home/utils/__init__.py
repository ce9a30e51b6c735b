"""Shared helpers: clocks, duration formatting and locking."""

from .concurrency import synchronized
from .time import Clock, ManualClock, MonotonicClock, format_duration, get_default_clock

__all__ = [
    "Clock",
    "ManualClock",
    "MonotonicClock",
    "format_duration",
    "get_default_clock",
    "synchronized",
]
