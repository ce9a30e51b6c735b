"""
SmartHome devices
=================
Powered appliances (bulb, thermostat, sensor-equipped outlet) with an on/off
lifecycle, live power models and time-integrated energy accounting.
"""

from smart_home.domain import (
    Bulb,
    Device,
    DeviceRegistry,
    Outlet,
    SensorCapability,
    Thermostat,
    ValidationError,
    get_default_registry,
)
from smart_home.enums import DeviceKind, PowerState, ThermostatMode
from smart_home.utils.time import ManualClock, MonotonicClock

__version__ = "1.0.0"

__all__ = [
    "Bulb",
    "Device",
    "DeviceKind",
    "DeviceRegistry",
    "ManualClock",
    "MonotonicClock",
    "Outlet",
    "PowerState",
    "SensorCapability",
    "Thermostat",
    "ThermostatMode",
    "ValidationError",
    "get_default_registry",
]
