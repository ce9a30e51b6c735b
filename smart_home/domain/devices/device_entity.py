"""
Device Domain Entities

Domain model for powered devices: a dimmable bulb, a thermostat and a
sensor-equipped outlet.

Every device owns one PowerAccount and reports to a DeviceRegistry. Kind
specific power draw, status text and lifecycle side effects come from the
table in ``power_models``; the subclasses here only hold variant state and
its validated setters.
"""

from __future__ import annotations

import logging
import math
from typing import Any, ClassVar, TypeVar

from smart_home.domain.devices.power_account import PowerAccount
from smart_home.domain.devices.power_models import VariantBehavior, behavior_for
from smart_home.domain.devices.sensor import SensorCapability, VoltageSensor
from smart_home.domain.exceptions import ValidationError
from smart_home.domain.registry import DeviceRegistry, get_default_registry
from smart_home.enums.device import DeviceKind, PowerState, ThermostatMode
from smart_home.utils.time import Clock, format_duration, get_default_clock

logger = logging.getLogger(__name__)

C = TypeVar("C")

DEFAULT_BULB_BRIGHTNESS = 100
DEFAULT_BULB_COLOR = "warm white"
DEFAULT_THERMOSTAT_TEMPERATURE = 20.0
DEFAULT_OUTLET_MAX_CURRENT = 16.0
MIN_BRIGHTNESS = 0
MAX_BRIGHTNESS = 100


def _require_text(field_name: str, value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(
            f"{field_name} must be a non-empty string",
            detail={"field": field_name, "value": value},
        )
    return value


def _require_temperature(field_name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise ValidationError(
            f"{field_name} must be a finite number, got {value!r}",
            detail={"field": field_name, "value": value},
        )
    return float(value)


def _require_brightness(level: Any) -> int:
    if isinstance(level, bool) or not isinstance(level, int):
        raise ValidationError(
            f"Brightness must be an integer, got {level!r}",
            detail={"field": "brightness", "value": level},
        )
    if not MIN_BRIGHTNESS <= level <= MAX_BRIGHTNESS:
        raise ValidationError(
            f"Brightness must be between {MIN_BRIGHTNESS} and {MAX_BRIGHTNESS}, got {level}",
            detail={"field": "brightness", "value": level},
        )
    return level


def validate_max_current(max_current_amps: Any) -> float:
    if (
        isinstance(max_current_amps, bool)
        or not isinstance(max_current_amps, (int, float))
        or not math.isfinite(max_current_amps)
        or max_current_amps <= 0
    ):
        raise ValidationError(
            f"Max current must be greater than 0 A, got {max_current_amps!r}",
            detail={"field": "max_current_amps", "value": max_current_amps},
        )
    return float(max_current_amps)


class Device:
    """
    Powered device with an Off/On lifecycle and energy accounting.

    ``turn_on``/``turn_off`` are total: they never raise and repeating them
    is a no-op. Energy of every finished session is added to the registry.
    """

    kind: ClassVar[DeviceKind]

    def __init__(
        self,
        device_id: str,
        name: str,
        rated_power_watts: float,
        *,
        registry: DeviceRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        if not hasattr(type(self), "kind"):
            raise TypeError("Device is a base class; construct Bulb, Thermostat or Outlet")
        # Validate everything before registering so a failed construction
        # is never counted.
        _require_text("device_id", device_id)
        _require_text("name", name)
        account = PowerAccount(rated_power_watts)

        self._device_id = device_id
        self.name = name
        self.account = account
        self.registry = registry or get_default_registry()
        self.clock = clock or get_default_clock()
        self.sensor: SensorCapability | None = None
        self.registry.register_creation()

    # ── Identity ──────────────────────────────────────────────────────

    @property
    def device_id(self) -> str:
        return self._device_id

    @property
    def behavior(self) -> VariantBehavior:
        return behavior_for(self.kind)

    def rename(self, name: str) -> None:
        self.name = _require_text("name", name)

    # ── Lifecycle ─────────────────────────────────────────────────────

    @property
    def is_on(self) -> bool:
        return self.account.is_on

    @property
    def state(self) -> PowerState:
        return PowerState.ON if self.is_on else PowerState.OFF

    def turn_on(self) -> None:
        """Off -> On. No-op if already on."""
        if not self.account.start_session(self.clock):
            return
        self.behavior.on_activate(self)
        logger.debug(f"{self.kind.label} {self.device_id} turned on")

    def turn_off(self) -> None:
        """On -> Off, booking the session energy. No-op if already off."""
        if not self.is_on:
            return
        energy_wh = self.account.end_session(self.clock)
        self.registry.record_energy(energy_wh)
        self.behavior.on_deactivate(self)
        logger.debug(f"{self.kind.label} {self.device_id} turned off ({energy_wh:.4f} Wh)")

    def toggle(self) -> None:
        if self.is_on:
            self.turn_off()
        else:
            self.turn_on()

    # ── Power and energy ──────────────────────────────────────────────

    @property
    def rated_power_watts(self) -> float:
        return self.account.rated_power_watts

    def get_power_consumption(self) -> float:
        """Rated (nameplate) power in watts."""
        return self.account.rated_power_watts

    def get_power_usage(self) -> float:
        """Instantaneous draw in watts; 0 while off."""
        return self.behavior.power_usage(self)

    def get_device_energy_consumed(self) -> float:
        """Watt-hours over the device's lifetime, including a running session."""
        return self.account.energy_consumed(self.clock)

    def get_total_on_time(self) -> float:
        """Seconds spent on in finished sessions."""
        return self.account.accumulated_on_seconds

    def get_current_session_time(self) -> float:
        return self.account.current_session_seconds(self.clock)

    def get_on_time_hours(self) -> float:
        return self.account.total_on_seconds(self.clock) / 3600.0

    def get_formatted_on_time(self) -> str:
        return format_duration(self.account.total_on_seconds(self.clock))

    # ── Capabilities ──────────────────────────────────────────────────

    def capabilities(self) -> list[Any]:
        return [self.sensor] if self.sensor is not None else []

    def get_capability(self, capability: type[C]) -> C | None:
        """Return the component implementing ``capability``, or None."""
        for component in self.capabilities():
            if isinstance(component, capability):
                return component
        return None

    def has_capability(self, capability: type) -> bool:
        return self.get_capability(capability) is not None

    # ── Reporting ─────────────────────────────────────────────────────

    def get_status(self) -> str:
        return self.behavior.status(self)

    def get_device_info(self) -> str:
        return f"Device: {self.name} (ID: {self.device_id}) [{self.kind.label}{self.behavior.info_suffix}]"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = {
            "device_id": self.device_id,
            "name": self.name,
            "kind": self.kind.value,
            "state": self.state.value,
            "is_on": self.is_on,
            "rated_power_watts": self.rated_power_watts,
            "power_usage_watts": round(self.get_power_usage(), 3),
            "energy_consumed_wh": round(self.get_device_energy_consumed(), 4),
            "total_on_seconds": round(self.account.total_on_seconds(self.clock), 3),
        }
        data.update(self.behavior.fields(self))
        return data

    # ── Copy ──────────────────────────────────────────────────────────

    def copy(self, device_id: str | None = None, name: str | None = None) -> Device:
        """
        Value copy of this device, counted as a new construction.

        The copy keeps the on/off state, session and accumulated time but
        owns its own PowerAccount and sensor. Identity is unchanged unless
        ``device_id``/``name`` are given; uniqueness is the caller's policy.
        """
        new_id = _require_text("device_id", device_id) if device_id is not None else self.device_id
        new_name = _require_text("name", name) if name is not None else self.name

        clone = object.__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone._device_id = new_id
        clone.name = new_name
        clone.account = self.account.copy()
        if isinstance(self.sensor, VoltageSensor):
            clone.sensor = self.sensor.copy()
        clone.registry.register_creation()
        logger.debug(f"Copied {self.kind.label} {self.device_id} -> {new_id}")
        return clone

    def __copy__(self) -> Device:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Device:
        # Registry and clock stay shared; everything the device owns is copied.
        return self.copy()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(device_id={self.device_id!r}, name={self.name!r}, state={self.state.value})"


class Bulb(Device):
    """Dimmable light bulb. Writes to ``brightness``/``color`` are validated."""

    kind = DeviceKind.BULB

    def __init__(
        self,
        device_id: str,
        name: str,
        rated_power_watts: float,
        brightness: int = DEFAULT_BULB_BRIGHTNESS,
        color: str = DEFAULT_BULB_COLOR,
        *,
        registry: DeviceRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        brightness = _require_brightness(brightness)
        color = _require_text("color", color)
        super().__init__(device_id, name, rated_power_watts, registry=registry, clock=clock)
        self._brightness = brightness
        self._color = color
        logger.info(f"Created bulb {device_id}: {self.rated_power_watts:g}W, {brightness}%, {color}")

    @property
    def brightness(self) -> int:
        return self._brightness

    @brightness.setter
    def brightness(self, level: int) -> None:
        self.set_brightness(level)

    @property
    def color(self) -> str:
        return self._color

    @color.setter
    def color(self, color: str) -> None:
        self.set_color(color)

    def set_brightness(self, level: int) -> None:
        try:
            self._brightness = _require_brightness(level)
        except ValidationError:
            logger.warning(f"Bulb {self.device_id}: rejected brightness {level!r}")
            raise

    def get_brightness(self) -> int:
        return self.brightness

    def set_color(self, color: str) -> None:
        self._color = _require_text("color", color)

    def get_color(self) -> str:
        return self.color


class Thermostat(Device):
    """
    Thermostat whose draw depends on the gap between target and measured
    temperature.

    The mode is off exactly while the device is off. Asking for a non-off
    mode, or for a target that differs from the measured temperature, while
    off switches the device on.
    """

    kind = DeviceKind.THERMOSTAT

    def __init__(
        self,
        device_id: str,
        name: str,
        rated_power_watts: float,
        initial_temperature: float = DEFAULT_THERMOSTAT_TEMPERATURE,
        *,
        registry: DeviceRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        initial_temperature = _require_temperature("initial_temperature", initial_temperature)
        super().__init__(device_id, name, rated_power_watts, registry=registry, clock=clock)
        self._current_temperature = initial_temperature
        self._target_temperature = initial_temperature
        self._mode = ThermostatMode.OFF
        logger.info(f"Created thermostat {device_id}: {self.rated_power_watts:g}W at {initial_temperature:.1f}C")

    @property
    def current_temperature(self) -> float:
        return self._current_temperature

    @current_temperature.setter
    def current_temperature(self, temperature: float) -> None:
        self.update_temperature(temperature)

    @property
    def target_temperature(self) -> float:
        return self._target_temperature

    @target_temperature.setter
    def target_temperature(self, temperature: float) -> None:
        self.set_target_temperature(temperature)

    @property
    def mode(self) -> ThermostatMode:
        return self._mode

    @mode.setter
    def mode(self, mode: ThermostatMode | str) -> None:
        self.set_mode(mode)

    def set_target_temperature(self, temperature: float) -> None:
        self._target_temperature = _require_temperature("target_temperature", temperature)
        if not self.is_on and self._target_temperature != self._current_temperature:
            self.turn_on()

    def update_temperature(self, temperature: float) -> None:
        """Record a new measured temperature."""
        self._current_temperature = _require_temperature("current_temperature", temperature)

    def set_mode(self, mode: ThermostatMode | str) -> None:
        try:
            new_mode = ThermostatMode(mode)
        except ValueError:
            logger.warning(f"Thermostat {self.device_id}: rejected mode {mode!r}")
            raise ValidationError(
                f"Mode must be one of {[m.value for m in ThermostatMode]}, got {mode!r}",
                detail={"field": "mode", "value": mode},
            ) from None

        if new_mode == ThermostatMode.OFF:
            if self.is_on:
                self.turn_off()
            self._mode = ThermostatMode.OFF
            return

        self._mode = new_mode
        if not self.is_on:
            self.turn_on()

    def get_current_temperature(self) -> float:
        return self.current_temperature

    def get_target_temperature(self) -> float:
        return self.target_temperature

    def get_mode(self) -> ThermostatMode:
        return self.mode


class Outlet(Device):
    """
    Smart outlet with a voltage sensor.

    ``outlet_active`` is a relay independent of the device power state;
    energy only flows when both are on.

    Without an explicit ``sensor`` the outlet gets a ``VoltageSensor`` with
    built-in defaults. Use ``DeviceFactory`` (or pass
    ``DeviceFactory.create_voltage_sensor()``) to apply the
    ``SMARTHOME_*VOLTAGE*`` settings.
    """

    kind = DeviceKind.OUTLET

    def __init__(
        self,
        device_id: str,
        name: str,
        rated_power_watts: float,
        max_current_amps: float = DEFAULT_OUTLET_MAX_CURRENT,
        *,
        sensor: VoltageSensor | None = None,
        registry: DeviceRegistry | None = None,
        clock: Clock | None = None,
    ) -> None:
        max_current_amps = validate_max_current(max_current_amps)
        super().__init__(device_id, name, rated_power_watts, registry=registry, clock=clock)
        self.max_current_amps = max_current_amps
        self.outlet_active = False
        self.sensor = sensor or VoltageSensor()
        logger.info(f"Created outlet {device_id}: {self.rated_power_watts:g}W, max {max_current_amps:g}A")

    def toggle_outlet(self) -> None:
        self.outlet_active = not self.outlet_active

    def is_outlet_on(self) -> bool:
        return self.outlet_active

    def get_max_current(self) -> float:
        return self.max_current_amps

    def get_voltage(self) -> float:
        """Nominal voltage; no reading is taken."""
        return self.sensor.nominal_voltage

    def get_current_voltage(self) -> float:
        return self.sensor.get_current_voltage()

    def get_sensor_type(self) -> str:
        return self.sensor.get_sensor_type()

    @property
    def read_counter(self) -> int:
        return self.sensor.read_counter


__all__ = [
    "Bulb",
    "Device",
    "Outlet",
    "Thermostat",
    "validate_max_current",
]
