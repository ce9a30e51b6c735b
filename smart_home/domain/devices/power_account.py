"""
Power Account
=============
Per-device time and energy bookkeeping.

A PowerAccount tracks whether a session is running, when it started and
how long all finished sessions lasted. Energy is always derived from the
rated power and on-time; nothing else is stored.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from smart_home.domain.exceptions import ValidationError
from smart_home.utils.time import Clock

SECONDS_PER_HOUR = 3600.0


def validate_rated_power(rated_power_watts: float) -> float:
    """Return rated power as float or raise ValidationError if not positive."""
    if isinstance(rated_power_watts, bool) or not isinstance(rated_power_watts, (int, float)):
        raise ValidationError(
            f"Rated power must be a number, got {rated_power_watts!r}",
            detail={"field": "rated_power_watts", "value": rated_power_watts},
        )
    if not math.isfinite(rated_power_watts) or rated_power_watts <= 0:
        raise ValidationError(
            f"Rated power must be greater than 0 W, got {rated_power_watts}",
            detail={"field": "rated_power_watts", "value": rated_power_watts},
        )
    return float(rated_power_watts)


@dataclass
class PowerAccount:
    """
    Session and on-time bookkeeping for one device.

    Invariant: ``session_start is None`` exactly when the device is off.
    """

    rated_power_watts: float
    session_start: float | None = None
    accumulated_on_seconds: float = 0.0

    def __post_init__(self) -> None:
        self.rated_power_watts = validate_rated_power(self.rated_power_watts)

    @property
    def is_on(self) -> bool:
        return self.session_start is not None

    def start_session(self, clock: Clock) -> bool:
        """Open a session. Returns False (no-op) if one is already running."""
        if self.session_start is not None:
            return False
        self.session_start = clock.now()
        return True

    def end_session(self, clock: Clock) -> float:
        """
        Close the running session.

        Returns:
            Energy of the finished session in watt-hours (0.0 if none was running)
        """
        if self.session_start is None:
            return 0.0
        elapsed = self.current_session_seconds(clock)
        self.accumulated_on_seconds += elapsed
        self.session_start = None
        return self.energy_for(elapsed)

    def current_session_seconds(self, clock: Clock) -> float:
        """Seconds in the running session; 0.0 if off or the clock gives a non-finite or negative span."""
        if self.session_start is None:
            return 0.0
        elapsed = clock.elapsed(self.session_start, clock.now())
        if not math.isfinite(elapsed) or elapsed < 0:
            return 0.0
        return elapsed

    def total_on_seconds(self, clock: Clock) -> float:
        """Finished sessions plus the running one."""
        return self.accumulated_on_seconds + self.current_session_seconds(clock)

    def energy_for(self, seconds: float) -> float:
        """Energy in watt-hours for running ``seconds`` at rated power."""
        return self.rated_power_watts * (seconds / SECONDS_PER_HOUR)

    def energy_consumed(self, clock: Clock) -> float:
        """Live energy total in watt-hours, including the running session."""
        return self.energy_for(self.total_on_seconds(clock))

    def copy(self) -> PowerAccount:
        return replace(self)
