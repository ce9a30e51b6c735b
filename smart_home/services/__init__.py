"""
Service Organization
====================
Services work on devices only through their public operations.

**device_factory**
  Builds devices from validated construction payloads.

**energy_monitoring**
  Fleet view: power draw, energy statistics, cost and power alerts.
"""

from .device_factory import DeviceFactory
from .energy_monitoring import EnergyMonitoringService

__all__ = [
    "DeviceFactory",
    "EnergyMonitoringService",
]
