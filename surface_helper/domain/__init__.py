"""
Domain Module: ship distance tracking and body announcements.

Implements:
- Ship location inference (touchdown, cockpit correction, status samples)
- Distance bands with one warning per band entry
- Live distance readout lifecycle
- Body welcome popups from cached scans
"""

from .tracking_state import (
    TrackerState,
    DistanceBand,
    DISCARDED_SAMPLES_AFTER_LANDING,
)
from .notifier import PluginNotifier, PLUGIN_SHORT_NAME
from .ship_tracker import (
    ShipDistanceTracker,
    format_distance_text,
)
from .body_welcome import (
    BodyWelcome,
    BodyInfo,
    extract_body_name,
)

__all__ = [
    'TrackerState',
    'DistanceBand',
    'DISCARDED_SAMPLES_AFTER_LANDING',
    'PluginNotifier',
    'PLUGIN_SHORT_NAME',
    'ShipDistanceTracker',
    'format_distance_text',
    'BodyWelcome',
    'BodyInfo',
    'extract_body_name',
]
