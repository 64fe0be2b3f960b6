"""
Protocol Module: Message schemas exchanged with the host.

- Journal events in (typed records, closed set)
- Status samples in
- Notification requests out
"""

from .journal_events import (
    JournalEvent,
    SurfaceContextEvent,
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
    JOURNAL_EVENT_TYPES,
    SURFACE_EXIT_EVENTS,
)
from .status import StatusSample
from .notification import (
    NotificationArgs,
    NotificationRendering,
    TIMEOUT_PERSISTENT,
    TIMEOUT_DEFAULT,
    SILENT_SSML,
    speak_ssml,
)

__all__ = [
    # Journal events
    'JournalEvent',
    'SurfaceContextEvent',
    'LoadGame',
    'Liftoff',
    'Touchdown',
    'Location',
    'Embark',
    'Disembark',
    'LaunchSRV',
    'DockSRV',
    'ApproachBody',
    'SupercruiseExit',
    'Scan',
    'LeaveBody',
    'FSDJump',
    'Shutdown',
    'SupercruiseEntry',
    'JOURNAL_EVENT_TYPES',
    'SURFACE_EXIT_EVENTS',
    # Status
    'StatusSample',
    # Notifications
    'NotificationArgs',
    'NotificationRendering',
    'TIMEOUT_PERSISTENT',
    'TIMEOUT_DEFAULT',
    'SILENT_SSML',
    'speak_ssml',
]
