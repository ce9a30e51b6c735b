"""
Energy Monitoring Domain Objects
=================================
Dataclasses for energy consumption reporting.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


@dataclass
class ConsumptionStats:
    """Consumption statistics for one device."""

    device_id: str
    kind: str
    total_energy_wh: float
    current_power_watts: float
    rated_power_watts: float
    runtime_hours: float
    cost_estimate: float
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def total_energy_kwh(self) -> float:
        return self.total_energy_wh / 1000.0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "device_id": self.device_id,
            "kind": self.kind,
            "total_energy_wh": round(self.total_energy_wh, 4),
            "current_power_watts": round(self.current_power_watts, 2),
            "rated_power_watts": round(self.rated_power_watts, 2),
            "runtime_hours": round(self.runtime_hours, 4),
            "cost_estimate": round(self.cost_estimate, 4),
            "last_updated": self.last_updated.isoformat(),
        }
