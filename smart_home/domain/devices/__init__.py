"""
Device Domain Models

All device entities, their bookkeeping and capability components.
"""

from .device_entity import Bulb, Device, Outlet, Thermostat
from .power_account import PowerAccount
from .power_models import BEHAVIORS, POWER_MODELS, VariantBehavior, behavior_for
from .sensor import SensorCapability, VoltageSensor

__all__ = [
    # Entities
    "Device",
    "Bulb",
    "Thermostat",
    "Outlet",
    # Bookkeeping
    "PowerAccount",
    # Behaviour table
    "BEHAVIORS",
    "POWER_MODELS",
    "VariantBehavior",
    "behavior_for",
    # Capabilities
    "SensorCapability",
    "VoltageSensor",
]
