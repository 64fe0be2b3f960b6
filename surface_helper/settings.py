"""
Surface Helper settings.

The host owns persistence; this module only defines the settings shape,
defaults and validation.
"""

from dataclasses import dataclass, asdict, fields
from enum import IntEnum
from typing import Any, Dict

DEFAULT_LOG_NAME = "SurfaceHelper.log"

# Limits shown in the host settings UI
SHIP_DISTANCE_MAX_M = 2000
SHIP_CENTER_OFFSET_LIMIT = 2.0


class TemperatureScale(IntEnum):
    KELVIN = 0
    CELSIUS = 1
    FAHRENHEIT = 2


@dataclass
class SurfaceHelperSettings:
    """
    Plugin settings.

    Attributes:
        ship_distance_1: First warning distance (m), 0 disables
        ship_distance_2: Second warning distance (m), 0 disables
        overlay_enabled: Allow warning popups (the live distance readout
            is not affected)
        ship_center_offset: Cockpit -> exit point interpolation factor
            (-1 cockpit, 0 middle, +1 exit point)
        log_file: Plugin log file path, empty disables
        touchdown_welcome: Announce body on touchdown/disembark
        approach_welcome: Announce body on approach
        sc_exit_welcome: Announce body on supercruise exit
        high_gravity_g: Gravity (G) flagged as high
        high_temperature_k: Temperature (K) flagged as high
        temperature_scale: Scale used in announcements
        temperature_scale_name: Name the scale in announcements
    """

    ship_distance_1: int = 1750
    ship_distance_2: int = 1900
    overlay_enabled: bool = True
    ship_center_offset: float = 0.0
    log_file: str = DEFAULT_LOG_NAME
    touchdown_welcome: bool = False
    approach_welcome: bool = True
    sc_exit_welcome: bool = False
    high_gravity_g: float = 2.0
    high_temperature_k: float = 800.0
    temperature_scale: TemperatureScale = TemperatureScale.CELSIUS
    temperature_scale_name: bool = True

    def __post_init__(self):
        """Validate configuration."""
        self.temperature_scale = TemperatureScale(self.temperature_scale)
        assert 0 <= self.ship_distance_1 <= SHIP_DISTANCE_MAX_M, \
            "ship_distance_1 must be within 0..2000"
        assert 0 <= self.ship_distance_2 <= SHIP_DISTANCE_MAX_M, \
            "ship_distance_2 must be within 0..2000"
        assert abs(self.ship_center_offset) <= SHIP_CENTER_OFFSET_LIMIT, \
            "ship_center_offset must be within -2..2"
        assert self.high_gravity_g > 0, "high_gravity_g must be positive"
        assert self.high_temperature_k > 0, "high_temperature_k must be positive"

    @property
    def band1_enabled(self) -> bool:
        return self.ship_distance_1 > 0

    @property
    def band2_enabled(self) -> bool:
        return self.ship_distance_2 > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for the host settings store."""
        d = asdict(self)
        d['temperature_scale'] = int(self.temperature_scale)
        return d

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SurfaceHelperSettings':
        """
        Build settings from a stored dictionary.

        Unknown keys are ignored, missing keys take defaults.
        """
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in known})
