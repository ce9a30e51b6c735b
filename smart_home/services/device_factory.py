"""
Device Factory

Factory for creating devices from validated construction requests.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from smart_home.config import AppConfig
from smart_home.domain.devices import Bulb, Device, Outlet, Thermostat, VoltageSensor
from smart_home.domain.exceptions import ValidationError
from smart_home.domain.registry import DeviceRegistry, get_default_registry
from smart_home.enums.device import DeviceKind
from smart_home.schemas.device import (
    CreateBulbRequest,
    CreateOutletRequest,
    CreateThermostatRequest,
    create_device_request_adapter,
)
from smart_home.utils.time import Clock, get_default_clock

logger = logging.getLogger(__name__)


class DeviceFactory:
    """
    Factory for creating devices of every kind.

    All devices built by one factory share its registry and clock.

    Usage:
        factory = DeviceFactory(registry=DeviceRegistry())
        bulb = factory.create_device({"kind": "bulb", "device_id": "LB1",
                                      "name": "Living room", "rated_power_watts": 60})
    """

    def __init__(
        self,
        registry: DeviceRegistry | None = None,
        clock: Clock | None = None,
        config: AppConfig | None = None,
    ):
        """
        Initialize factory.

        Args:
            registry: Aggregate counters for created devices (default: process-wide)
            clock: Clock used for device sessions (default: monotonic)
            config: Settings for outlet sensors (default: loaded from environment)
        """
        self.registry = registry or get_default_registry()
        self.clock = clock or get_default_clock()
        self.config = config or AppConfig()

    def create_device(self, payload: dict[str, Any]) -> Device:
        """
        Validate a raw payload and build the matching device.

        Args:
            payload: Dict with a ``kind`` key and the fields of the kind's request

        Returns:
            Device instance

        Raises:
            ValidationError: If the payload is invalid for its kind
        """
        payload = dict(payload)
        raw_kind = payload.get("kind")
        if isinstance(raw_kind, (str, DeviceKind)):
            try:
                payload["kind"] = DeviceKind(raw_kind).value
            except ValueError:
                pass  # left as-is; the discriminator reports it

        try:
            request = create_device_request_adapter.validate_python(payload)
        except PydanticValidationError as exc:
            logger.warning(f"Rejected device payload {payload.get('device_id')!r}: {exc.error_count()} error(s)")
            raise ValidationError(
                f"Invalid device payload: {exc.error_count()} validation error(s)",
                detail={"errors": exc.errors(include_url=False)},
            ) from exc

        return self.create_from_request(request)

    def create_from_request(
        self, request: CreateBulbRequest | CreateThermostatRequest | CreateOutletRequest
    ) -> Device:
        """Build a device from an already validated request."""
        if isinstance(request, CreateBulbRequest):
            device: Device = Bulb(
                request.device_id,
                request.name,
                request.rated_power_watts,
                brightness=request.brightness,
                color=request.color,
                registry=self.registry,
                clock=self.clock,
            )
        elif isinstance(request, CreateThermostatRequest):
            device = Thermostat(
                request.device_id,
                request.name,
                request.rated_power_watts,
                initial_temperature=request.initial_temperature,
                registry=self.registry,
                clock=self.clock,
            )
        elif isinstance(request, CreateOutletRequest):
            device = Outlet(
                request.device_id,
                request.name,
                request.rated_power_watts,
                max_current_amps=request.max_current_amps,
                sensor=self.create_voltage_sensor(),
                registry=self.registry,
                clock=self.clock,
            )
        else:
            raise TypeError(f"Unsupported request type: {type(request).__name__}")

        logger.info("Created %s device: %s", device.kind.value, device.device_id)
        return device

    def create_voltage_sensor(self) -> VoltageSensor:
        return VoltageSensor(
            nominal_voltage=self.config.nominal_voltage,
            oscillation_amplitude=self.config.voltage_oscillation,
            jitter_amplitude=self.config.voltage_jitter,
        )
