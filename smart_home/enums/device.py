"""
Device-related Enumerations
============================

This module contains all enums related to powered devices.
"""

from enum import Enum


class DeviceKind(str, Enum):
    """
    Closed set of device kinds.

    Every kind must have an entry in the power model and lifecycle hook
    tables in ``smart_home.domain.devices.power_models``.
    """

    BULB = "bulb"
    THERMOSTAT = "thermostat"
    OUTLET = "outlet"

    @classmethod
    def _missing_(cls, value: object) -> "DeviceKind | None":
        """Accept legacy / display names for device kinds."""
        if not isinstance(value, str):
            return None
        legacy_map = {
            "light": cls.BULB,
            "lightbulb": cls.BULB,
            "light_bulb": cls.BULB,
            "lamp": cls.BULB,
            "smart_outlet": cls.OUTLET,
            "smartoutlet": cls.OUTLET,
            "plug": cls.OUTLET,
        }
        normalized = value.strip().lower()
        if normalized in legacy_map:
            return legacy_map[normalized]
        for member in cls:
            if member.value == normalized:
                return member
        return None

    @property
    def label(self) -> str:
        """Human readable label used in status and info strings."""
        return {
            DeviceKind.BULB: "Bulb",
            DeviceKind.THERMOSTAT: "Thermostat",
            DeviceKind.OUTLET: "Smart outlet",
        }[self]


class PowerState(str, Enum):
    """On/off state of a device"""

    ON = "on"
    OFF = "off"


class ThermostatMode(str, Enum):
    """Thermostat operating modes"""

    OFF = "off"
    HEATING = "heating"
    COOLING = "cooling"

    @classmethod
    def _missing_(cls, value: object) -> "ThermostatMode | None":
        """Case-insensitive lookup ("Heating", " COOLING ")."""
        if not isinstance(value, str):
            return None
        normalized = value.strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        return None
