"""
Surface Helper Package.

Tracks the distance between the player and their parked ship on a planet
surface and warns before the ship is too far away to recall.

Package structure:
- proto: Journal events, status samples, notification requests
- localization: Surface geometry (great-circle distance, midpoint)
- domain: Ship distance tracker, body welcome announcements
- io: Host interface, plugin log file
- metrics: Diagnostics, counters, ignored input, ship distance stats
"""

__version__ = "0.3.0"
__author__ = "G-Shadow"

from .settings import SurfaceHelperSettings, TemperatureScale
from .worker import SurfaceHelperWorker

__all__ = [
    'SurfaceHelperSettings',
    'TemperatureScale',
    'SurfaceHelperWorker',
]
