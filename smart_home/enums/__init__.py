"""
Enums Module
============

This module provides enumeration types for the SmartHome package.
Enums ensure type safety and consistency across the codebase.
"""

from smart_home.enums.device import DeviceKind, PowerState, ThermostatMode

__all__ = [
    "DeviceKind",
    "PowerState",
    "ThermostatMode",
]
