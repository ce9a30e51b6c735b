"""
Power Models
============
Per-kind behaviour table for devices.

Each ``DeviceKind`` maps to a ``VariantBehavior`` holding plain functions:

- ``power_usage``    instantaneous draw in watts (pure, callable while off)
- ``status``         human readable status line
- ``fields``         variant parameters for ``Device.to_dict()``
- ``on_activate``    extra effect after an Off -> On transition
- ``on_deactivate``  extra effect after an On -> Off transition

The hooks only add effects; the base session bookkeeping in
``Device.turn_on``/``Device.turn_off`` always runs first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from smart_home.enums.device import DeviceKind, ThermostatMode

if TYPE_CHECKING:
    from smart_home.domain.devices.device_entity import Bulb, Device, Outlet, Thermostat

THERMOSTAT_BASELINE_FACTOR = 0.5
THERMOSTAT_DEGREES_PER_RATED_STEP = 10.0


def _noop(device: Device) -> None:
    return None


def _on_off(device: Device) -> str:
    return "ON" if device.is_on else "OFF"


# ── Bulb ─────────────────────────────────────────────────────────────


def bulb_power_usage(bulb: Bulb) -> float:
    return bulb.rated_power_watts if bulb.is_on else 0.0


def bulb_status(bulb: Bulb) -> str:
    return (
        f"{bulb.kind.label} {bulb.name} {_on_off(bulb)}, "
        f"brightness: {bulb.brightness}%, color: {bulb.color}, "
        f"rated power: {bulb.rated_power_watts:g} W"
    )


def bulb_fields(bulb: Bulb) -> dict[str, Any]:
    return {"brightness": bulb.brightness, "color": bulb.color}


# ── Thermostat ───────────────────────────────────────────────────────


def thermostat_power_usage(thermostat: Thermostat) -> float:
    """Draw grows with the distance to target, with a 50% floor while running."""
    if not thermostat.is_on or thermostat.mode == ThermostatMode.OFF:
        return 0.0
    temperature_gap = abs(thermostat.target_temperature - thermostat.current_temperature)
    return thermostat.rated_power_watts * (
        THERMOSTAT_BASELINE_FACTOR + temperature_gap / THERMOSTAT_DEGREES_PER_RATED_STEP
    )


def thermostat_status(thermostat: Thermostat) -> str:
    return (
        f"{thermostat.kind.label} {thermostat.name} {_on_off(thermostat)}, "
        f"current: {thermostat.current_temperature:.1f}C, "
        f"target: {thermostat.target_temperature:.1f}C, "
        f"mode: {thermostat.mode.value}, "
        f"rated power: {thermostat.rated_power_watts:g} W"
    )


def thermostat_fields(thermostat: Thermostat) -> dict[str, Any]:
    return {
        "current_temperature": thermostat.current_temperature,
        "target_temperature": thermostat.target_temperature,
        "mode": thermostat.mode.value,
    }


def thermostat_on_activate(thermostat: Thermostat) -> None:
    if thermostat.mode == ThermostatMode.OFF:
        thermostat.set_mode(ThermostatMode.HEATING)


def thermostat_on_deactivate(thermostat: Thermostat) -> None:
    thermostat.set_mode(ThermostatMode.OFF)


# ── Outlet ───────────────────────────────────────────────────────────


def outlet_power_usage(outlet: Outlet) -> float:
    if outlet.is_on and outlet.outlet_active:
        return outlet.rated_power_watts
    return 0.0


def outlet_status(outlet: Outlet) -> str:
    return (
        f"{outlet.kind.label} {outlet.name} {_on_off(outlet)}, "
        f"outlet: {'active' if outlet.outlet_active else 'inactive'}, "
        f"max current: {outlet.max_current_amps:g} A, "
        f"rated power: {outlet.rated_power_watts:g} W"
    )


def outlet_fields(outlet: Outlet) -> dict[str, Any]:
    return {
        "outlet_active": outlet.outlet_active,
        "max_current_amps": outlet.max_current_amps,
        "read_counter": outlet.read_counter,
        "sensor_type": outlet.get_sensor_type(),
    }


def outlet_on_activate(outlet: Outlet) -> None:
    outlet.outlet_active = True


def outlet_on_deactivate(outlet: Outlet) -> None:
    outlet.outlet_active = False


# ── Table ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class VariantBehavior:
    """Function table entry for one device kind."""

    power_usage: Callable[[Any], float]
    status: Callable[[Any], str]
    fields: Callable[[Any], dict[str, Any]]
    on_activate: Callable[[Any], None] = _noop
    on_deactivate: Callable[[Any], None] = _noop
    info_suffix: str = ""


BEHAVIORS: dict[DeviceKind, VariantBehavior] = {
    DeviceKind.BULB: VariantBehavior(
        power_usage=bulb_power_usage,
        status=bulb_status,
        fields=bulb_fields,
    ),
    DeviceKind.THERMOSTAT: VariantBehavior(
        power_usage=thermostat_power_usage,
        status=thermostat_status,
        fields=thermostat_fields,
        on_activate=thermostat_on_activate,
        on_deactivate=thermostat_on_deactivate,
    ),
    DeviceKind.OUTLET: VariantBehavior(
        power_usage=outlet_power_usage,
        status=outlet_status,
        fields=outlet_fields,
        on_activate=outlet_on_activate,
        on_deactivate=outlet_on_deactivate,
        info_suffix=" with sensor",
    ),
}

POWER_MODELS: dict[DeviceKind, Callable[[Any], float]] = {
    kind: behavior.power_usage for kind, behavior in BEHAVIORS.items()
}

_uncovered = set(DeviceKind) - set(BEHAVIORS)
if _uncovered:
    raise RuntimeError(f"No behaviour registered for device kinds: {sorted(k.value for k in _uncovered)}")


def behavior_for(kind: DeviceKind) -> VariantBehavior:
    return BEHAVIORS[kind]
