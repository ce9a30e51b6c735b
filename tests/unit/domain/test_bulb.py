"""
Unit tests for the Bulb device.
"""

import pytest

from smart_home.domain.exceptions import ValidationError


class TestBulbConstruction:
    def test_defaults(self, make_bulb):
        bulb = make_bulb()
        assert bulb.get_brightness() == 100
        assert bulb.get_color() == "warm white"
        assert bulb.get_power_consumption() == 60.0

    @pytest.mark.parametrize("brightness", [-1, 101, 150])
    def test_invalid_initial_brightness_fails_construction(self, make_bulb, registry, brightness):
        with pytest.raises(ValidationError):
            make_bulb(brightness=brightness)
        assert registry.total_devices_created() == 0

    @pytest.mark.parametrize("rated", [0, -60])
    def test_non_positive_power_fails_construction(self, make_bulb, registry, rated):
        with pytest.raises(ValidationError):
            make_bulb(rated_power_watts=rated)
        assert registry.total_devices_created() == 0

    def test_blank_id_fails_construction(self, make_bulb, registry):
        with pytest.raises(ValidationError):
            make_bulb(device_id="")
        assert registry.total_devices_created() == 0


class TestBrightness:
    def test_set_brightness_in_range(self, make_bulb):
        bulb = make_bulb()
        bulb.set_brightness(80)
        assert bulb.get_brightness() == 80

    @pytest.mark.parametrize("level", [0, 100])
    def test_bounds_are_inclusive(self, make_bulb, level):
        bulb = make_bulb()
        bulb.set_brightness(level)
        assert bulb.brightness == level

    def test_out_of_range_is_rejected_without_mutation(self, make_bulb):
        bulb = make_bulb(brightness=75)
        with pytest.raises(ValidationError) as excinfo:
            bulb.set_brightness(150)
        assert bulb.get_brightness() == 75
        assert excinfo.value.detail == {"field": "brightness", "value": 150}

    @pytest.mark.parametrize("level", [50.5, "80", True, None])
    def test_non_integer_is_rejected(self, make_bulb, level):
        bulb = make_bulb(brightness=40)
        with pytest.raises(ValidationError):
            bulb.set_brightness(level)
        assert bulb.brightness == 40

    def test_brightness_does_not_change_draw(self, make_bulb):
        bulb = make_bulb(rated_power_watts=60)
        bulb.turn_on()
        bulb.set_brightness(10)
        assert bulb.get_power_usage() == 60.0


class TestColor:
    def test_set_color(self, make_bulb):
        bulb = make_bulb()
        bulb.set_color("blue")
        assert bulb.get_color() == "blue"

    def test_blank_color_rejected(self, make_bulb):
        bulb = make_bulb(color="green")
        with pytest.raises(ValidationError):
            bulb.set_color("  ")
        assert bulb.color == "green"


class TestBulbReporting:
    def test_power_usage_follows_state(self, make_bulb):
        bulb = make_bulb(rated_power_watts=60)
        assert bulb.get_power_usage() == 0.0
        bulb.turn_on()
        assert bulb.get_power_usage() == 60.0

    def test_status_mentions_state_parameters_and_power(self, make_bulb):
        bulb = make_bulb(brightness=75, color="warm white")
        assert bulb.get_status() == (
            "Bulb Living room lamp OFF, brightness: 75%, color: warm white, rated power: 60 W"
        )
        bulb.turn_on()
        assert " ON," in bulb.get_status()

    def test_to_dict_variant_fields(self, make_bulb):
        data = make_bulb(brightness=30, color="red").to_dict()
        assert data["brightness"] == 30
        assert data["color"] == "red"
        assert data["kind"] == "bulb"


class TestAttributeWrites:
    def test_brightness_attribute_is_validated(self, make_bulb):
        bulb = make_bulb(brightness=75)
        with pytest.raises(ValidationError):
            bulb.brightness = 150
        assert bulb.get_brightness() == 75

    def test_brightness_attribute_accepts_valid_level(self, make_bulb):
        bulb = make_bulb()
        bulb.brightness = 20
        assert bulb.get_brightness() == 20

    def test_color_attribute_is_validated(self, make_bulb):
        bulb = make_bulb(color="green")
        with pytest.raises(ValidationError):
            bulb.color = ""
        assert bulb.get_color() == "green"
