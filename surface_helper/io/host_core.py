"""
Host core interface.

The host application delivers journal events and status samples, renders
notifications and knows whether it is replaying old journals. Plugins talk
to it only through this interface.
"""

import uuid
from typing import Optional

from surface_helper.proto import NotificationArgs, StatusSample


class ObservatoryCore:
    """
    Host services used by the plugin.

    Subclass and override the notification methods. get_status() and
    is_log_monitor_batch_reading have usable defaults.
    """

    plugin_storage_folder: str = ""

    def send_notification(self, args: NotificationArgs) -> uuid.UUID:
        """Display a new notification. Returns its guid."""
        raise NotImplementedError

    def update_notification(self, args: NotificationArgs):
        """Replace the content of the notification with args.guid."""
        raise NotImplementedError

    def cancel_notification(self, guid: uuid.UUID):
        """Remove the notification with the given guid."""
        raise NotImplementedError

    def get_status(self) -> Optional[StatusSample]:
        """Latest status sample, None when the host has none."""
        return None

    @property
    def is_log_monitor_batch_reading(self) -> bool:
        """True while the host replays historical journals."""
        return False
