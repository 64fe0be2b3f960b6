"""
Unit tests for plugin settings.
"""

import pytest

import config
from surface_helper.settings import (
    SurfaceHelperSettings,
    TemperatureScale,
    DEFAULT_LOG_NAME,
)


class TestDefaults:

    def test_default_values(self):
        s = SurfaceHelperSettings()
        assert s.ship_distance_1 == 1750
        assert s.ship_distance_2 == 1900
        assert s.overlay_enabled
        assert s.ship_center_offset == 0.0
        assert s.log_file == DEFAULT_LOG_NAME
        assert s.temperature_scale == TemperatureScale.CELSIUS
        assert s.band1_enabled
        assert s.band2_enabled

    def test_config_defaults_match(self):
        """Demo config defaults build the same settings as the dataclass."""
        assert SurfaceHelperSettings.from_dict(config.SURFACE_HELPER_DEFAULTS) == SurfaceHelperSettings()


class TestValidation:
    """Out-of-range values fail fast."""

    @pytest.mark.parametrize("kwargs", [
        dict(ship_distance_1=-1),
        dict(ship_distance_1=2001),
        dict(ship_distance_2=5000),
        dict(ship_center_offset=2.5),
        dict(ship_center_offset=-2.1),
        dict(high_gravity_g=0.0),
        dict(high_temperature_k=-10.0),
    ])
    def test_invalid(self, kwargs):
        with pytest.raises(AssertionError):
            SurfaceHelperSettings(**kwargs)

    def test_unknown_temperature_scale(self):
        with pytest.raises(ValueError):
            SurfaceHelperSettings(temperature_scale=7)

    @pytest.mark.parametrize("kwargs", [
        dict(ship_distance_1=0, ship_distance_2=0),
        dict(ship_distance_1=2000, ship_distance_2=2000),
        dict(ship_center_offset=-2.0),
        dict(ship_center_offset=2.0),
    ])
    def test_limits_accepted(self, kwargs):
        SurfaceHelperSettings(**kwargs)

    def test_zero_disables_band(self):
        s = SurfaceHelperSettings(ship_distance_1=0)
        assert not s.band1_enabled
        assert s.band2_enabled


class TestSerialization:

    def test_to_dict(self):
        d = SurfaceHelperSettings(temperature_scale=TemperatureScale.FAHRENHEIT).to_dict()
        assert d['temperature_scale'] == 2
        assert type(d['temperature_scale']) is int
        assert d['ship_distance_1'] == 1750

    def test_from_dict_coerces_scale(self):
        s = SurfaceHelperSettings.from_dict({'temperature_scale': 0})
        assert s.temperature_scale is TemperatureScale.KELVIN

    def test_from_dict_ignores_unknown_keys(self):
        s = SurfaceHelperSettings.from_dict({'ship_distance_1': 1000, 'legacy_option': 'x'})
        assert s.ship_distance_1 == 1000
        assert s.ship_distance_2 == 1900

    def test_from_dict_restores_to_dict(self):
        stored = SurfaceHelperSettings(ship_distance_1=1200, overlay_enabled=False,
                                       ship_center_offset=0.4, log_file="")
        assert SurfaceHelperSettings.from_dict(stored.to_dict()) == stored
