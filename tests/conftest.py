"""
Shared test fixtures for the SmartHome test suite.

Provides:
- A fresh DeviceRegistry per test (never the process-wide one)
- A ManualClock so sessions can "run" for hours instantly
- Builders for each device kind wired to both
- A deterministic VoltageSensor

Usage:
    def test_example(make_bulb, clock, registry):
        bulb = make_bulb(rated_power_watts=60)
        bulb.turn_on()
        clock.advance(3600)
        bulb.turn_off()
        assert registry.total_energy_consumed() == pytest.approx(60.0)
"""

from __future__ import annotations

import logging
import random

import pytest

from smart_home.config import AppConfig
from smart_home.domain.devices import Bulb, Outlet, Thermostat, VoltageSensor
from smart_home.domain.registry import DeviceRegistry
from smart_home.services import DeviceFactory, EnergyMonitoringService
from smart_home.utils.time import ManualClock

# ---------------------------------------------------------------------------
# Logging: keep test output clean
# ---------------------------------------------------------------------------
logging.getLogger("smart_home").setLevel(logging.WARNING)


# ========================== Core Fixtures ==================================


@pytest.fixture()
def registry():
    """Isolated aggregate counters for one test."""
    return DeviceRegistry()


@pytest.fixture()
def clock():
    """Clock that only moves on ``advance``."""
    return ManualClock(start=1_000.0)


@pytest.fixture()
def config(monkeypatch):
    """AppConfig built from defaults, ignoring the caller's environment."""
    for name in (
        "SMARTHOME_ENV",
        "SMARTHOME_DEBUG",
        "SMARTHOME_LOG_LEVEL",
        "SMARTHOME_LOG_FILE",
        "SMARTHOME_NOMINAL_VOLTAGE",
        "SMARTHOME_VOLTAGE_OSCILLATION",
        "SMARTHOME_VOLTAGE_JITTER",
        "SMARTHOME_ELECTRICITY_RATE_KWH",
        "SMARTHOME_POWER_ALERT_WATTS",
    ):
        monkeypatch.delenv(name, raising=False)
    return AppConfig()


@pytest.fixture()
def seeded_sensor():
    """Voltage sensor with a fixed random stream."""
    return VoltageSensor(rng=random.Random(42))


# ========================== Device Builders ================================


@pytest.fixture()
def make_bulb(registry, clock):
    def _make(device_id="LB1", name="Living room lamp", rated_power_watts=60.0, **kwargs):
        return Bulb(device_id, name, rated_power_watts, registry=registry, clock=clock, **kwargs)

    return _make


@pytest.fixture()
def make_thermostat(registry, clock):
    def _make(device_id="TH1", name="Bedroom thermostat", rated_power_watts=1000.0, **kwargs):
        return Thermostat(device_id, name, rated_power_watts, registry=registry, clock=clock, **kwargs)

    return _make


@pytest.fixture()
def make_outlet(registry, clock, seeded_sensor):
    def _make(device_id="SO1", name="Hall outlet", rated_power_watts=5.0, **kwargs):
        kwargs.setdefault("sensor", seeded_sensor)
        return Outlet(device_id, name, rated_power_watts, registry=registry, clock=clock, **kwargs)

    return _make


# ========================== Service Fixtures ===============================


@pytest.fixture()
def factory(registry, clock, config):
    return DeviceFactory(registry=registry, clock=clock, config=config)


@pytest.fixture()
def monitoring(registry, config):
    return EnergyMonitoringService(registry=registry, config=config)
