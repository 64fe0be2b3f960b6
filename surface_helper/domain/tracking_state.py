"""
Ship distance tracking state.

All mutable state of the tracker lives in one TrackerState instance so a
test can build any situation directly and inspect the result of a single
event.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from surface_helper.proto import NotificationArgs

# Status samples right after landing report stale coordinates
DISCARDED_SAMPLES_AFTER_LANDING = 3


class DistanceBand(IntEnum):
    """Distance zone of the last computed ship distance."""
    NEAR = 0      # Below every enabled threshold
    BAND1 = 1     # At or over ship_distance_1
    BAND2 = 2     # At or over ship_distance_2


@dataclass
class TrackerState:
    """
    Ship distance tracker state.

    Attributes:
        tracking: Player is outside the ship on the surface
        ship_location: Best guess of ship (lat, lon), None when unknown
        cockpit_location: Cockpit (lat, lon) from a piloted touchdown,
            used to correct the ship location guess
        band: Distance band of the last computed distance
        samples_since_landing: Status samples seen while ship location
            was unknown
        body_radius: Last known radius of the current body (m)
        active_notification: Live distance readout, None when not shown
    """

    tracking: bool = False
    ship_location: Optional[Tuple[float, float]] = None
    cockpit_location: Optional[Tuple[float, float]] = None
    band: DistanceBand = DistanceBand.NEAR
    samples_since_landing: int = 0
    body_radius: float = 0.0
    active_notification: Optional[NotificationArgs] = None

    @property
    def ship_location_known(self) -> bool:
        return self.ship_location is not None

    @property
    def has_active_notification(self) -> bool:
        return self.active_notification is not None

    def forget_ship(self):
        """Drop everything known about the ship position."""
        self.ship_location = None
        self.cockpit_location = None
        self.samples_since_landing = 0
        self.band = DistanceBand.NEAR
