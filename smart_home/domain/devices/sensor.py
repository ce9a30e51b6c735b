"""
Sensor Capability
=================
Optional secondary capability a device may expose next to its lifecycle.

Only outlets carry a sensor today. Devices expose it through a capability
query (``device.sensor`` / ``device.has_capability(SensorCapability)``)
instead of inheriting sensor behaviour.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

DEFAULT_NOMINAL_VOLTAGE = 220.0
DEFAULT_OSCILLATION_AMPLITUDE = 2.0
DEFAULT_JITTER_AMPLITUDE = 1.0
DEFAULT_PHASE_STEP = 0.5  # radians per read


@runtime_checkable
class SensorCapability(Protocol):
    """Protocol for device sensors"""

    def get_current_voltage(self) -> float:
        """Take a reading. May have side effects (read counters)."""
        ...

    def get_sensor_type(self) -> str:
        """Fixed descriptive label for the sensor kind."""
        ...


@dataclass
class VoltageSensor:
    """
    Simulated mains voltage sensor.

    Each reading is ``nominal + oscillation + jitter`` where the oscillation
    is a sine of the read counter and the jitter is uniform noise. The result
    is always within ``nominal ± (oscillation_amplitude + jitter_amplitude)``.
    """

    nominal_voltage: float = DEFAULT_NOMINAL_VOLTAGE
    oscillation_amplitude: float = DEFAULT_OSCILLATION_AMPLITUDE
    jitter_amplitude: float = DEFAULT_JITTER_AMPLITUDE
    phase_step: float = DEFAULT_PHASE_STEP
    read_counter: int = 0
    rng: random.Random = field(default_factory=random.Random, repr=False, compare=False)

    SENSOR_TYPE = "Voltage sensor"

    def get_current_voltage(self) -> float:
        self.read_counter += 1
        oscillation = self.oscillation_amplitude * math.sin(self.read_counter * self.phase_step)
        jitter = self.rng.uniform(-self.jitter_amplitude, self.jitter_amplitude)
        return self.nominal_voltage + oscillation + jitter

    def get_sensor_type(self) -> str:
        return self.SENSOR_TYPE

    @property
    def max_deviation(self) -> float:
        """Largest possible distance between a reading and the nominal voltage."""
        return abs(self.oscillation_amplitude) + abs(self.jitter_amplitude)

    def copy(self) -> VoltageSensor:
        """Independent copy with its own random stream and the same counter."""
        rng = random.Random()
        rng.setstate(self.rng.getstate())
        return VoltageSensor(
            nominal_voltage=self.nominal_voltage,
            oscillation_amplitude=self.oscillation_amplitude,
            jitter_amplitude=self.jitter_amplitude,
            phase_step=self.phase_step,
            read_counter=self.read_counter,
            rng=rng,
        )
