"""
Device Registry
===============
Process-wide aggregate counters shared by every device instance.

The registry is owned by no device. Devices receive it at construction
(defaulting to the process-wide instance) and report to it:

- once per construction or copy  -> ``register_creation()``
- once per finished session      -> ``record_energy(delta_wh)``

Tests and simulations create their own ``DeviceRegistry()`` to stay isolated
from the default one.
"""

from __future__ import annotations

import logging
import math
import threading
from typing import Any

from smart_home.domain.exceptions import ValidationError
from smart_home.utils.concurrency import synchronized

logger = logging.getLogger(__name__)


class DeviceRegistry:
    """Aggregate device count and energy total, safe for concurrent hosts."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._total_devices_created = 0
        self._total_energy_consumed_wh = 0.0

    @synchronized
    def register_creation(self) -> int:
        """Count one constructed (or copied) device. Returns the new total."""
        self._total_devices_created += 1
        return self._total_devices_created

    @synchronized
    def record_energy(self, delta_wh: float) -> float:
        """
        Add the energy of one finished session.

        Args:
            delta_wh: Energy in watt-hours, must be finite and non-negative

        Returns:
            The new aggregate total in watt-hours

        Raises:
            ValidationError: If delta_wh is negative or not finite
        """
        if not math.isfinite(delta_wh) or delta_wh < 0:
            raise ValidationError(
                f"Energy delta must be a non-negative number, got {delta_wh}",
                detail={"field": "delta_wh", "value": delta_wh},
            )
        self._total_energy_consumed_wh += delta_wh
        return self._total_energy_consumed_wh

    @synchronized
    def reset_energy_consumption(self) -> None:
        """Zero the energy total. Device count and per-device time are untouched."""
        previous = self._total_energy_consumed_wh
        self._total_energy_consumed_wh = 0.0
        logger.info(f"Energy consumption total reset (was {previous:.4f} Wh)")

    @synchronized
    def total_devices_created(self) -> int:
        return self._total_devices_created

    @synchronized
    def total_energy_consumed(self) -> float:
        """Aggregate energy in watt-hours since start or the last reset."""
        return self._total_energy_consumed_wh

    @synchronized
    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "total_devices_created": self._total_devices_created,
            "total_energy_consumed_wh": round(self._total_energy_consumed_wh, 4),
        }


_default_registry = DeviceRegistry()


def get_default_registry() -> DeviceRegistry:
    """Return the process-wide registry used when a device is given none."""
    return _default_registry
