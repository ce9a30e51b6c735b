"""
Device Schemas
==============

Pydantic models for device construction requests.

Raw payloads (dicts from a CLI, a config file or a test) are validated here
before any device is built, so a rejected request never reaches the
registry.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from smart_home.domain.devices.device_entity import (
    DEFAULT_BULB_BRIGHTNESS,
    DEFAULT_BULB_COLOR,
    DEFAULT_OUTLET_MAX_CURRENT,
    DEFAULT_THERMOSTAT_TEMPERATURE,
    MAX_BRIGHTNESS,
    MIN_BRIGHTNESS,
)


class _CreateDeviceBase(BaseModel):
    """Fields shared by every device kind"""

    model_config = ConfigDict(extra="forbid", allow_inf_nan=False)

    device_id: str = Field(..., min_length=1, max_length=64, description="Unique device identifier")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    rated_power_watts: float = Field(..., gt=0, description="Nameplate power in watts")

    @field_validator("device_id", "name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v


class CreateBulbRequest(_CreateDeviceBase):
    """Request model for creating a bulb"""

    kind: Literal["bulb"] = "bulb"
    brightness: int = Field(
        default=DEFAULT_BULB_BRIGHTNESS, ge=MIN_BRIGHTNESS, le=MAX_BRIGHTNESS, description="Brightness in percent"
    )
    color: str = Field(default=DEFAULT_BULB_COLOR, min_length=1, max_length=50, description="Light color")


class CreateThermostatRequest(_CreateDeviceBase):
    """Request model for creating a thermostat"""

    kind: Literal["thermostat"] = "thermostat"
    initial_temperature: float = Field(
        default=DEFAULT_THERMOSTAT_TEMPERATURE, description="Measured and target temperature at start (C)"
    )


class CreateOutletRequest(_CreateDeviceBase):
    """Request model for creating a smart outlet"""

    kind: Literal["outlet"] = "outlet"
    max_current_amps: float = Field(default=DEFAULT_OUTLET_MAX_CURRENT, gt=0, description="Maximum current in amps")


CreateDeviceRequest = Annotated[
    Union[CreateBulbRequest, CreateThermostatRequest, CreateOutletRequest],
    Field(discriminator="kind"),
]

create_device_request_adapter: TypeAdapter = TypeAdapter(CreateDeviceRequest)
