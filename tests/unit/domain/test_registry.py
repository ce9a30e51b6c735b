"""
Unit tests for DeviceRegistry aggregate counters.
"""

import math
import threading

import pytest

from smart_home.domain.exceptions import ValidationError
from smart_home.domain.registry import DeviceRegistry, get_default_registry


class TestCreationCount:
    def test_starts_at_zero(self, registry):
        assert registry.total_devices_created() == 0
        assert registry.total_energy_consumed() == 0.0

    def test_counts_every_kind(self, registry, make_bulb, make_thermostat, make_outlet):
        make_bulb()
        make_thermostat()
        make_outlet()
        assert registry.total_devices_created() == 3

    def test_copies_are_counted(self, registry, make_bulb):
        bulb = make_bulb()
        bulb.copy()
        bulb.copy(device_id="LB2")
        assert registry.total_devices_created() == 3

    def test_failed_construction_is_not_counted(self, registry, make_bulb):
        make_bulb()
        with pytest.raises(ValidationError):
            make_bulb(rated_power_watts=-1)
        assert registry.total_devices_created() == 1

    def test_register_creation_returns_total(self, registry):
        assert registry.register_creation() == 1
        assert registry.register_creation() == 2


class TestEnergyTotal:
    def test_record_energy_accumulates(self, registry):
        registry.record_energy(10.0)
        assert registry.record_energy(2.5) == pytest.approx(12.5)

    @pytest.mark.parametrize("delta", [-0.1, math.nan, math.inf])
    def test_invalid_delta_rejected(self, registry, delta):
        registry.record_energy(1.0)
        with pytest.raises(ValidationError):
            registry.record_energy(delta)
        assert registry.total_energy_consumed() == pytest.approx(1.0)

    def test_zero_delta_allowed(self, registry):
        registry.record_energy(0.0)
        assert registry.total_energy_consumed() == 0.0

    def test_sessions_from_many_devices_add_up(self, registry, clock, make_bulb, make_thermostat):
        bulb = make_bulb(rated_power_watts=60)
        thermostat = make_thermostat(rated_power_watts=1000)
        bulb.turn_on()
        thermostat.turn_on()
        clock.advance(1800)
        bulb.turn_off()
        thermostat.turn_off()
        assert registry.total_energy_consumed() == pytest.approx(30.0 + 500.0)


class TestReset:
    def test_reset_zeroes_energy_only(self, registry, clock, make_bulb):
        bulb = make_bulb(rated_power_watts=60)
        bulb.turn_on()
        clock.advance(3600)
        bulb.turn_off()

        registry.reset_energy_consumption()

        assert registry.total_energy_consumed() == 0.0
        assert registry.total_devices_created() == 1
        assert bulb.get_total_on_time() == pytest.approx(3600.0)
        assert bulb.get_device_energy_consumed() == pytest.approx(60.0)

    def test_sessions_after_reset_count_again(self, registry, clock, make_bulb):
        bulb = make_bulb(rated_power_watts=60)
        bulb.turn_on()
        clock.advance(3600)
        registry.reset_energy_consumption()
        bulb.turn_off()
        assert registry.total_energy_consumed() == pytest.approx(60.0)


class TestRegistryMisc:
    def test_to_dict(self, registry):
        registry.register_creation()
        registry.record_energy(1.23456789)
        assert registry.to_dict() == {
            "total_devices_created": 1,
            "total_energy_consumed_wh": 1.2346,
        }

    def test_default_registry_is_shared(self):
        assert get_default_registry() is get_default_registry()
        assert isinstance(get_default_registry(), DeviceRegistry)

    def test_registries_are_isolated(self, registry):
        other = DeviceRegistry()
        registry.register_creation()
        assert other.total_devices_created() == 0

    def test_concurrent_updates_are_not_lost(self, registry):
        def worker():
            for _ in range(500):
                registry.register_creation()
                registry.record_energy(1.0)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert registry.total_devices_created() == 4000
        assert registry.total_energy_consumed() == pytest.approx(4000.0)
