"""
Journal Event Schemas.

Typed records for the journal events the surface helper consumes. The
journal reader upstream builds these from raw journal lines; nothing in
this package parses journal files.

The set of event kinds is closed: JOURNAL_EVENT_TYPES lists every kind
and the worker keeps a handler table keyed by these classes.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple


@dataclass
class JournalEvent:
    """
    Base for all journal events.

    Attributes:
        timestamp: Journal timestamp (ISO 8601 string, informational only)
    """

    event: ClassVar[str] = ""

    timestamp: str = ""


@dataclass
class SurfaceContextEvent(JournalEvent):
    """
    Journal event carrying the player's location context.

    Attributes:
        on_station: Event happened on a station pad
        on_planet: Event happened on a planet (surface or planetary port)
        taxi: Player is a passenger in a taxi
        star_system: Star system name
        system_address: Star system id
        body: Full body name (includes the system name)
        body_id: Body id within the system
    """

    on_station: bool = False
    on_planet: bool = False
    taxi: bool = False
    star_system: str = ""
    system_address: int = 0
    body: str = ""
    body_id: int = -1

    @property
    def on_planet_surface(self) -> bool:
        """True for a planet surface outside stations and taxis."""
        return self.on_planet and not self.on_station and not self.taxi


@dataclass
class LoadGame(JournalEvent):
    event: ClassVar[str] = "LoadGame"

    odyssey: bool = False
    start_landed: bool = False


@dataclass
class Touchdown(SurfaceContextEvent):
    """
    Ship landed.

    Attributes:
        player_controlled: False when the ship landed by itself (recalled)
        latitude: Landing latitude (degrees). For a piloted landing this is
            the cockpit location, not the ship center.
        longitude: Landing longitude (degrees)
        nearest_destination: Nearest settlement or POI name
    """

    event: ClassVar[str] = "Touchdown"

    player_controlled: bool = True
    latitude: float = 0.0
    longitude: float = 0.0
    nearest_destination: str = ""

    @property
    def position(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


@dataclass
class Liftoff(SurfaceContextEvent):
    """Ship took off. player_controlled is False when it left without the player."""

    event: ClassVar[str] = "Liftoff"

    player_controlled: bool = True
    latitude: Optional[float] = None
    longitude: Optional[float] = None


@dataclass
class Embark(SurfaceContextEvent):
    """Player boarded the ship (or an SRV, when srv is set)."""

    event: ClassVar[str] = "Embark"

    srv: bool = False
    multicrew: bool = False


@dataclass
class Disembark(SurfaceContextEvent):
    """Player left the ship (or an SRV, when srv is set)."""

    event: ClassVar[str] = "Disembark"

    srv: bool = False
    multicrew: bool = False


@dataclass
class LaunchSRV(JournalEvent):
    event: ClassVar[str] = "LaunchSRV"

    srv_type: str = ""
    player_controlled: bool = True


@dataclass
class DockSRV(JournalEvent):
    event: ClassVar[str] = "DockSRV"

    srv_type: str = ""


@dataclass
class Location(JournalEvent):
    """
    Location update.

    Latitude and longitude are only present when the player is near a
    planet surface.
    """

    event: ClassVar[str] = "Location"

    on_foot: bool = False
    in_srv: bool = False
    taxi: bool = False
    docked: bool = False
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    star_system: str = ""
    system_address: int = 0
    body: str = ""
    body_id: int = -1

    @property
    def has_position(self) -> bool:
        return self.latitude is not None and self.longitude is not None


@dataclass
class ApproachBody(JournalEvent):
    event: ClassVar[str] = "ApproachBody"

    star_system: str = ""
    system_address: int = 0
    body: str = ""
    body_id: int = -1


@dataclass
class SupercruiseExit(JournalEvent):
    event: ClassVar[str] = "SupercruiseExit"

    star_system: str = ""
    system_address: int = 0
    body: str = ""
    body_id: int = -1
    body_type: str = ""


@dataclass
class Scan(JournalEvent):
    """
    Body scan result.

    Attributes:
        surface_gravity: Surface gravity (m/s^2)
        surface_temperature: Surface temperature (K)
    """

    event: ClassVar[str] = "Scan"

    star_system: str = ""
    system_address: int = 0
    body_name: str = ""
    body_id: int = -1
    surface_gravity: float = 0.0
    surface_temperature: float = 0.0
    landable: bool = False


@dataclass
class LeaveBody(JournalEvent):
    event: ClassVar[str] = "LeaveBody"

    star_system: str = ""
    system_address: int = 0
    body: str = ""
    body_id: int = -1


@dataclass
class FSDJump(JournalEvent):
    event: ClassVar[str] = "FSDJump"

    star_system: str = ""
    system_address: int = 0


@dataclass
class Shutdown(JournalEvent):
    event: ClassVar[str] = "Shutdown"


@dataclass
class SupercruiseEntry(JournalEvent):
    event: ClassVar[str] = "SupercruiseEntry"

    star_system: str = ""
    system_address: int = 0


# Every event kind the worker knows about
JOURNAL_EVENT_TYPES = (
    LoadGame,
    Liftoff,
    Touchdown,
    Location,
    Embark,
    Disembark,
    LaunchSRV,
    DockSRV,
    ApproachBody,
    SupercruiseExit,
    Scan,
    LeaveBody,
    FSDJump,
    Shutdown,
    SupercruiseEntry,
)

# Events that take the player away from the surface
SURFACE_EXIT_EVENTS = (LeaveBody, FSDJump, Shutdown, SupercruiseEntry)
