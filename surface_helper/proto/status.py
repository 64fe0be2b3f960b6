"""
Status Sample Schema.

A live snapshot of the player's surface position, as published by the
game's status file and handed over by the host.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple


@dataclass
class StatusSample:
    """
    Player status sample.

    Attributes:
        latitude: Current latitude (degrees), None away from a surface
        longitude: Current longitude (degrees), None away from a surface
        planet_radius: Radius of the current body (m), 0 when unknown
        altitude: Altitude above surface (m)
        heading: Heading (degrees)
        body_name: Current body name
    """

    # Input kind reported in diagnostics, alongside journal event names
    event: ClassVar[str] = "Status"

    latitude: Optional[float] = None
    longitude: Optional[float] = None
    planet_radius: float = 0.0
    altitude: Optional[float] = None
    heading: Optional[float] = None
    body_name: str = ""

    @property
    def has_position(self) -> bool:
        """Check if the sample carries a surface position."""
        return self.latitude is not None and self.longitude is not None

    @property
    def position(self) -> Optional[Tuple[float, float]]:
        """Get (lat, lon) or None."""
        if not self.has_position:
            return None
        return (self.latitude, self.longitude)

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'latitude': self.latitude,
            'longitude': self.longitude,
            'planet_radius': self.planet_radius,
            'altitude': self.altitude,
            'heading': self.heading,
            'body_name': self.body_name,
        }
