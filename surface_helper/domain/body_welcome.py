"""
Body welcome announcements.

Caches scan results of the current star system and greets the player
with surface gravity and temperature when arriving at a body.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from surface_helper.io import ObservatoryCore
from surface_helper.localization import kelvin_to_celsius, kelvin_to_fahrenheit
from surface_helper.proto import (
    ApproachBody,
    Disembark,
    NotificationArgs,
    NotificationRendering,
    Scan,
    SupercruiseExit,
    Touchdown,
    TIMEOUT_DEFAULT,
    SILENT_SSML,
    speak_ssml,
)
from surface_helper.settings import SurfaceHelperSettings, TemperatureScale
from .notifier import PluginNotifier, PLUGIN_SHORT_NAME

logger = logging.getLogger(__name__)

STANDARD_GRAVITY = 9.81   # m/s^2 per G
TEMPERATURE_STEP = 25     # Announced temperatures are rounded to this

_SCALE_NAMES = {
    TemperatureScale.KELVIN: "degrees Kelvin",
    TemperatureScale.CELSIUS: "degrees Celsius",
    TemperatureScale.FAHRENHEIT: "degrees Fahrenheit",
}


@dataclass
class BodyInfo:
    """
    Scanned body surface data.

    Attributes:
        gravity: Surface gravity (m/s^2)
        temperature: Surface temperature (K)
    """

    gravity: float
    temperature: float

    @property
    def gravity_g(self) -> float:
        return self.gravity / STANDARD_GRAVITY


def extract_body_name(star_system: str, full_body_name: str) -> str:
    """'Col 285 Sector AB-C d1-2 A 3' -> 'A 3'."""
    if not star_system:
        return full_body_name.strip()
    return full_body_name.replace(star_system, "").strip()


class BodyWelcome(PluginNotifier):
    """
    Per-system body cache and welcome popups.

    Usage:
        welcome = BodyWelcome(core, settings)
        welcome.on_scan(scan)                # fills the cache
        welcome.on_approach_body(approach)   # greets if body was scanned
    """

    def __init__(
        self,
        core: ObservatoryCore,
        settings: Optional[SurfaceHelperSettings] = None,
        sender: str = PLUGIN_SHORT_NAME,
    ):
        super().__init__(core, settings, sender)
        self.current_system_name = ""
        self.current_system_address = 0
        self.current_body_name = ""
        self.current_body_id = -1
        self.bodies: Dict[int, BodyInfo] = {}

    def check_new_system(self, system_address: int, star_system: str):
        """Reset the body cache when entering another star system."""
        if self.current_system_address != system_address:
            logger.info(f"New system: [{star_system}] ID={system_address}")
            self.current_system_name = star_system
            self.current_system_address = system_address
            self.bodies.clear()

    # ------------------------------------------------------------------
    # Journal events
    # ------------------------------------------------------------------

    def on_scan(self, scan: Scan):
        self.check_new_system(scan.system_address, scan.star_system)
        logger.debug(f"Scan: body ID={scan.body_id}, grav {scan.surface_gravity}, "
                     f"temp {scan.surface_temperature}")
        self.bodies[scan.body_id] = BodyInfo(scan.surface_gravity, scan.surface_temperature)

    def on_approach_body(self, approach: ApproachBody):
        self.check_new_system(approach.system_address, approach.star_system)
        if self.settings.approach_welcome:
            self.welcome(approach.body_id, approach.body)

    def on_supercruise_exit(self, sc_exit: SupercruiseExit):
        if sc_exit.system_address:
            self.check_new_system(sc_exit.system_address, sc_exit.star_system)
        if self.settings.sc_exit_welcome:
            self.welcome(sc_exit.body_id, sc_exit.body)

    def on_touchdown(self, touchdown: Touchdown):
        if not touchdown.on_planet_surface:
            return
        self.check_new_system(touchdown.system_address, touchdown.star_system)
        if self.settings.touchdown_welcome:
            self.welcome(touchdown.body_id, touchdown.body)

    def on_disembark(self, disembark: Disembark):
        if not disembark.on_planet_surface or disembark.srv:
            return
        self.check_new_system(disembark.system_address, disembark.star_system)
        if self.settings.touchdown_welcome:
            self.welcome(disembark.body_id, disembark.body)

    # ------------------------------------------------------------------
    # Welcome
    # ------------------------------------------------------------------

    def welcome(self, body_id: int, full_body_name: str) -> Optional[NotificationArgs]:
        """
        Greet the player at a body.

        Args:
            body_id: Body id within current system
            full_body_name: Body name including system name

        Returns:
            The notification built (also when suppressed), None for an
            unscanned body
        """
        self.current_body_id = body_id
        self.current_body_name = extract_body_name(self.current_system_name, full_body_name)

        info = self.bodies.get(body_id)
        if info is None:
            logger.info(f"Welcome: unscanned body #{body_id} ({self.current_body_name})")
            return None

        text = self.format_welcome(info)
        logger.info(f"Welcome: #{body_id} ({self.current_body_name}), {text!r}")

        title = f"Welcome to body {self.current_body_name}!"
        args = NotificationArgs(
            title=title,
            title_ssml=SILENT_SSML,
            detail=text,
            detail_ssml=speak_ssml(f"{title}\n{text}"),
            rendering=NotificationRendering.ALL,
            timeout=TIMEOUT_DEFAULT,
            sender=self.sender,
        )
        self.send_popup(args)
        return args

    def format_welcome(self, info: BodyInfo) -> str:
        """
        Two-line gravity and temperature summary.

        Example:
            'High gravity! 2.4 G.\\nTemperature: 175 degrees Celsius.'
        """
        gravity = round(info.gravity_g, 1)
        gravity_str = "High gravity! " if info.gravity_g >= self.settings.high_gravity_g else "Gravity: "
        temp_str = ("High temperature! " if info.temperature >= self.settings.high_temperature_k
                    else "Temperature: ")

        scale = self.settings.temperature_scale
        if scale == TemperatureScale.CELSIUS:
            temp = kelvin_to_celsius(info.temperature)
        elif scale == TemperatureScale.FAHRENHEIT:
            temp = kelvin_to_fahrenheit(info.temperature)
        else:
            temp = info.temperature

        deg_str = _SCALE_NAMES[scale] if self.settings.temperature_scale_name else "degrees"
        rounded_temp = int(round(temp / TEMPERATURE_STEP)) * TEMPERATURE_STEP

        return f"{gravity_str}{gravity} G.\n{temp_str}{rounded_temp} {deg_str}."
