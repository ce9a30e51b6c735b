"""Pydantic request schemas."""

from .device import (
    CreateBulbRequest,
    CreateDeviceRequest,
    CreateOutletRequest,
    CreateThermostatRequest,
    create_device_request_adapter,
)

__all__ = [
    "CreateBulbRequest",
    "CreateThermostatRequest",
    "CreateOutletRequest",
    "CreateDeviceRequest",
    "create_device_request_adapter",
]
