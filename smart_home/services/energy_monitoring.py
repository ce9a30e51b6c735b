"""
Energy Monitoring Service for Devices

Keeps a fleet of devices by id and reports their power draw, energy use and
cost. Works purely on the public device operations.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from smart_home.config import AppConfig
from smart_home.domain.devices import Device
from smart_home.domain.energy import ConsumptionStats
from smart_home.domain.exceptions import ConflictError, NotFoundError
from smart_home.domain.registry import DeviceRegistry, get_default_registry

logger = logging.getLogger(__name__)


class EnergyMonitoringService:
    """
    Service for monitoring device energy consumption.

    Features:
    - Fleet-wide on/off
    - Live power draw per device and in total
    - Energy usage statistics and cost calculations
    - Power threshold alerts
    """

    def __init__(
        self,
        registry: DeviceRegistry | None = None,
        electricity_rate_kwh: float | None = None,
        config: AppConfig | None = None,
    ):
        """
        Initialize energy monitoring service.

        Args:
            registry: Aggregate counters reported in the fleet summary
            electricity_rate_kwh: Cost per kWh in local currency (default from config)
            config: Application settings (default: loaded from environment)
        """
        self.config = config or AppConfig()
        self.registry = registry or get_default_registry()
        self.electricity_rate = (
            electricity_rate_kwh if electricity_rate_kwh is not None else self.config.electricity_rate_kwh
        )
        self.power_alert_watts = self.config.power_alert_watts

        self.devices: dict[str, Device] = {}
        self.power_threshold_callbacks: list[Callable[[str, float], None]] = []

        logger.info(f"EnergyMonitoringService initialized (rate: {self.electricity_rate}/kWh)")

    # ── Fleet ─────────────────────────────────────────────────────────

    def register_device(self, device: Device) -> None:
        if device.device_id in self.devices:
            raise ConflictError(
                f"Device {device.device_id} is already registered", detail={"device_id": device.device_id}
            )
        self.devices[device.device_id] = device
        logger.info(f"Registered {device.kind.value} {device.device_id} for monitoring")

    def unregister_device(self, device_id: str) -> Device:
        device = self.get_device(device_id)
        del self.devices[device_id]
        logger.info(f"Unregistered device {device_id}")
        return device

    def get_device(self, device_id: str) -> Device:
        device = self.devices.get(device_id)
        if device is None:
            raise NotFoundError(f"Device {device_id} not found", detail={"device_id": device_id})
        return device

    def list_devices(self) -> list[Device]:
        return list(self.devices.values())

    def turn_all_on(self) -> None:
        for device in self.devices.values():
            device.turn_on()

    def turn_all_off(self) -> None:
        for device in self.devices.values():
            device.turn_off()

    # ── Power and energy ──────────────────────────────────────────────

    def get_total_power_usage(self) -> float:
        """Total instantaneous draw in watts across the fleet."""
        return sum(device.get_power_usage() for device in self.devices.values())

    def get_consumption_stats(self, device_id: str) -> ConsumptionStats:
        """
        Get consumption statistics for a device.

        Args:
            device_id: Device ID

        Returns:
            ConsumptionStats for the device's whole lifetime
        """
        device = self.get_device(device_id)
        energy_wh = device.get_device_energy_consumed()
        return ConsumptionStats(
            device_id=device.device_id,
            kind=device.kind.value,
            total_energy_wh=energy_wh,
            current_power_watts=device.get_power_usage(),
            rated_power_watts=device.rated_power_watts,
            runtime_hours=device.get_on_time_hours(),
            cost_estimate=self.estimate_cost(energy_wh),
        )

    def estimate_cost(self, energy_wh: float) -> float:
        """Cost of ``energy_wh`` watt-hours at the configured rate."""
        if energy_wh <= 0:
            return 0.0
        return (energy_wh / 1000.0) * self.electricity_rate

    def estimate_daily_cost(self, power_watts: float) -> float:
        """
        Estimate daily electricity cost from current power consumption.

        Assumes continuous operation for 24 hours.

        Args:
            power_watts: Current power consumption in watts

        Returns:
            Estimated daily cost in local currency (based on electricity_rate)
        """
        if not power_watts or power_watts <= 0:
            return 0.0
        daily_kwh = (power_watts * 24) / 1000
        return round(daily_kwh * self.electricity_rate, 2)

    def get_fleet_summary(self) -> dict[str, Any]:
        """Dashboard summary for all monitored devices."""
        total_power = self.get_total_power_usage()
        return {
            "device_count": len(self.devices),
            "devices_on": sum(1 for d in self.devices.values() if d.is_on),
            "current_power_watts": round(total_power, 2),
            "daily_cost": self.estimate_daily_cost(total_power),
            **self.registry.to_dict(),
        }

    # ── Alerts ────────────────────────────────────────────────────────

    def register_power_threshold_callback(self, callback: Callable[[str, float], None]) -> None:
        """
        Register callback for power threshold alerts.

        Callback signature: callback(device_id: str, power: float)
        """
        self.power_threshold_callbacks.append(callback)

    def check_power_thresholds(self) -> list[str]:
        """
        Fire callbacks for every device drawing more than the alert threshold.

        Returns:
            Ids of the devices above the threshold
        """
        over_limit = []
        for device in self.devices.values():
            power = device.get_power_usage()
            if power <= self.power_alert_watts:
                continue
            over_limit.append(device.device_id)
            logger.warning(f"Device {device.device_id} drawing {power:.1f}W (limit {self.power_alert_watts:.1f}W)")
            for callback in self.power_threshold_callbacks:
                try:
                    callback(device.device_id, power)
                except Exception as e:
                    logger.error(f"Error in power threshold callback: {e}")
        return over_limit
