"""
Domain Package
==============
Device entities, the process-wide registry and consumption value objects.
"""

from .devices import (
    BEHAVIORS,
    POWER_MODELS,
    Bulb,
    Device,
    Outlet,
    PowerAccount,
    SensorCapability,
    Thermostat,
    VariantBehavior,
    VoltageSensor,
    behavior_for,
)
from .energy import ConsumptionStats
from .exceptions import (
    ConfigurationError,
    ConflictError,
    NotFoundError,
    SmartHomeError,
    ValidationError,
)
from .registry import DeviceRegistry, get_default_registry

__all__ = [
    # Devices
    "Device",
    "Bulb",
    "Thermostat",
    "Outlet",
    "PowerAccount",
    "BEHAVIORS",
    "POWER_MODELS",
    "VariantBehavior",
    "behavior_for",
    "SensorCapability",
    "VoltageSensor",
    # Registry
    "DeviceRegistry",
    "get_default_registry",
    # Energy
    "ConsumptionStats",
    # Errors
    "SmartHomeError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "ConfigurationError",
]
