"""
Shared notification plumbing for plugin components.
"""

import logging
from typing import Optional

from surface_helper.io import ObservatoryCore
from surface_helper.metrics import get_metrics
from surface_helper.proto import NotificationArgs
from surface_helper.settings import SurfaceHelperSettings

logger = logging.getLogger(__name__)

PLUGIN_SHORT_NAME = "SurfaceHelper"


class PluginNotifier:
    """
    Base for components that raise popups through the host.

    Popups sent with send_popup() are dropped while the host replays old
    journals or when the overlay is disabled in settings.
    """

    def __init__(
        self,
        core: ObservatoryCore,
        settings: Optional[SurfaceHelperSettings] = None,
        sender: str = PLUGIN_SHORT_NAME,
    ):
        self.core = core
        self.settings = settings or SurfaceHelperSettings()
        self.sender = sender
        self.metrics = get_metrics()

    def skip_notifications(self) -> bool:
        """True while popups must not be shown."""
        return self.core.is_log_monitor_batch_reading or not self.settings.overlay_enabled

    def send_popup(self, args: NotificationArgs) -> bool:
        """
        Send a one-shot popup unless suppressed.

        Returns:
            True if the popup was handed to the host
        """
        if self.skip_notifications():
            logger.debug(f"Popup suppressed: {args.title}")
            self.metrics.increment('notifications_suppressed')
            return False

        self.core.send_notification(args)
        self.metrics.increment('notifications_sent')
        return True
