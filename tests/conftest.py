"""
Pytest configuration and shared fixtures for Surface Helper tests.

This module provides a recording host, settings and tracker fixtures, and
helpers to place status samples at known distances from the ship.
"""

import sys
import math
import uuid
from pathlib import Path
from typing import List, Optional, Tuple

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from surface_helper.domain import ShipDistanceTracker, BodyWelcome
from surface_helper.io import ObservatoryCore
from surface_helper.metrics import reset_metrics
from surface_helper.proto import NotificationArgs, StatusSample
from surface_helper.settings import SurfaceHelperSettings


# Small moon, radius in meters
PLANET_RADIUS_M = 1_500_000.0
SHIP_POSITION = (10.0, 20.0)


# =============================================================================
# Host Test Double
# =============================================================================


class RecordingCore(ObservatoryCore):
    """
    Host that records every notification request.

    Attributes:
        sent: NotificationArgs passed to send_notification, in order
        updated: NotificationArgs passed to update_notification, in order
        cancelled: Guids passed to cancel_notification, in order
        status: Value returned by get_status()
        batch_reading: Value of is_log_monitor_batch_reading
    """

    def __init__(self, status: Optional[StatusSample] = None, batch_reading: bool = False):
        self.sent: List[NotificationArgs] = []
        self.updated: List[NotificationArgs] = []
        self.cancelled: List[uuid.UUID] = []
        self.status = status
        self.batch_reading = batch_reading
        self.plugin_storage_folder = ""

    def send_notification(self, args: NotificationArgs) -> uuid.UUID:
        self.sent.append(args)
        return args.guid

    def update_notification(self, args: NotificationArgs):
        self.updated.append(args)

    def cancel_notification(self, guid: uuid.UUID):
        self.cancelled.append(guid)

    def get_status(self) -> Optional[StatusSample]:
        return self.status

    @property
    def is_log_monitor_batch_reading(self) -> bool:
        return self.batch_reading

    def sent_titled(self, title: str) -> List[NotificationArgs]:
        """Sent notifications with the given title."""
        return [args for args in self.sent if args.title == title]


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def fresh_metrics():
    """Every test starts with zeroed global metrics."""
    reset_metrics()
    yield
    reset_metrics()


@pytest.fixture
def core() -> RecordingCore:
    """Recording host, realtime mode, no live status."""
    return RecordingCore()


@pytest.fixture
def settings() -> SurfaceHelperSettings:
    """
    Default settings without plugin log file.

    Thresholds: band1 = 1750 m, band2 = 1900 m.
    """
    return SurfaceHelperSettings(log_file="")


@pytest.fixture
def tracker(core: RecordingCore, settings: SurfaceHelperSettings) -> ShipDistanceTracker:
    """Tracker in its initial state."""
    return ShipDistanceTracker(core, settings)


@pytest.fixture
def tracking_tracker(tracker: ShipDistanceTracker) -> ShipDistanceTracker:
    """Tracker with known ship location at SHIP_POSITION and tracking on."""
    tracker.state.ship_location = SHIP_POSITION
    tracker.state.tracking = True
    return tracker


@pytest.fixture
def welcome(core: RecordingCore, settings: SurfaceHelperSettings) -> BodyWelcome:
    return BodyWelcome(core, settings)


# =============================================================================
# Helper Functions
# =============================================================================


def north_of(
    origin: Tuple[float, float],
    meters: float,
    radius: float = PLANET_RADIUS_M
) -> Tuple[float, float]:
    """
    Point `meters` north of origin along the meridian.

    Args:
        origin: (lat, lon) in degrees
        meters: Distance to move
        radius: Planet radius (m)

    Returns:
        (lat, lon) in degrees
    """
    return (origin[0] + math.degrees(meters / radius), origin[1])


def sample_at(
    meters: float,
    origin: Tuple[float, float] = SHIP_POSITION,
    radius: float = PLANET_RADIUS_M
) -> StatusSample:
    """Status sample `meters` north of origin."""
    lat, lon = north_of(origin, meters, radius)
    return StatusSample(latitude=lat, longitude=lon, planet_radius=radius)
