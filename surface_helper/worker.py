"""
Surface Helper plugin worker.

Entry point used by the host: receives journal events and status samples
and routes them to the ship distance tracker and the body welcome
component.
"""

import logging
import os
from typing import Callable, Dict, Optional, Tuple

import surface_helper
from surface_helper.domain import BodyWelcome, ShipDistanceTracker, PLUGIN_SHORT_NAME
from surface_helper.io import ObservatoryCore, attach_plugin_log, detach_plugin_log
from surface_helper.metrics import get_metrics
from surface_helper.proto import (
    JournalEvent,
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
    StatusSample,
    SURFACE_EXIT_EVENTS,
)
from surface_helper.settings import SurfaceHelperSettings, DEFAULT_LOG_NAME

logger = logging.getLogger(__name__)

ABOUT_INFO = {
    'full_name': "Surface Helper",
    'short_name': PLUGIN_SHORT_NAME,
    'description': "SurfaceHelper helps to track 2km distance to ship.",
    'links': {'GitHub': "https://github.com/gshadows/SurfaceHelper"},
}


class SurfaceHelperWorker:
    """
    Host-facing plugin worker.

    Usage:
        worker = SurfaceHelperWorker(settings)
        worker.load(core)
        for event in journal_events:
            worker.journal_event(event)
        worker.status_change(status)
    """

    def __init__(self, settings: Optional[SurfaceHelperSettings] = None):
        self._settings = settings or SurfaceHelperSettings()
        self.core: Optional[ObservatoryCore] = None
        self.tracker: Optional[ShipDistanceTracker] = None
        self.welcome: Optional[BodyWelcome] = None
        self.odyssey_loaded = False
        self.metrics = get_metrics()
        self._log_handler = None
        self._dispatch: Dict[type, Tuple[Callable, ...]] = {}

    @property
    def version(self) -> str:
        return surface_helper.__version__

    @property
    def about_info(self) -> dict:
        return ABOUT_INFO

    @property
    def settings(self) -> SurfaceHelperSettings:
        return self._settings

    @settings.setter
    def settings(self, value: SurfaceHelperSettings):
        """Apply new settings. A changed log file takes effect at once."""
        old_log_file = self._settings.log_file
        self._settings = value
        if self.tracker is not None:
            self.tracker.settings = value
            self.welcome.settings = value

        if self.core is not None:
            self._place_log_file()
            if value.log_file != old_log_file:
                self._attach_log()

    def load(self, core: ObservatoryCore):
        """
        Bind to the host.

        The default log file name is moved into the host's plugin storage.
        Loading again rebinds to the new host and reopens the log file.
        """
        self.core = core
        self._place_log_file()
        self._attach_log()

        self.tracker = ShipDistanceTracker(core, self._settings)
        self.welcome = BodyWelcome(core, self._settings)
        self._dispatch = self._build_dispatch()
        logger.info(f"SurfaceHelper {self.version} loaded")

    def unload(self):
        """Release the plugin log file and the host."""
        detach_plugin_log(self._log_handler)
        self._log_handler = None
        self.core = None

    def _place_log_file(self):
        if self._settings.log_file == DEFAULT_LOG_NAME and self.core.plugin_storage_folder:
            self._settings.log_file = os.path.join(self.core.plugin_storage_folder, DEFAULT_LOG_NAME)

    def _attach_log(self):
        """Swap the plugin log handler for one writing to the current log file."""
        detach_plugin_log(self._log_handler)
        self._log_handler = attach_plugin_log(self._settings.log_file)

    def _build_dispatch(self) -> Dict[type, Tuple[Callable, ...]]:
        """Handler table, one entry per journal event kind."""
        tracker = self.tracker
        welcome = self.welcome
        dispatch = {
            LoadGame: (self._on_load_game,),
            Liftoff: (tracker.on_liftoff,),
            Touchdown: (tracker.on_touchdown, welcome.on_touchdown),
            Location: (tracker.on_location,),
            Embark: (tracker.on_embark,),
            Disembark: (tracker.on_disembark, welcome.on_disembark),
            LaunchSRV: (tracker.on_launch_srv,),
            DockSRV: (tracker.on_dock_srv,),
            ApproachBody: (welcome.on_approach_body,),
            SupercruiseExit: (welcome.on_supercruise_exit,),
            Scan: (welcome.on_scan,),
        }
        for event_type in SURFACE_EXIT_EVENTS:
            dispatch[event_type] = (tracker.on_surface_exit,)
        return dispatch

    def journal_event(self, journal: JournalEvent):
        """Process one journal event in arrival order."""
        self.metrics.increment('events_in')
        handlers = self._dispatch.get(type(journal))
        if handlers is None:
            logger.debug(f"Ignoring event {type(journal).__name__}")
            self.metrics.increment_drop('unknown_event', type(journal).__name__)
            return
        for handler in handlers:
            handler(journal)

    def status_change(self, status: StatusSample):
        """Process a live status sample."""
        if self.tracker is None:
            return
        self.tracker.on_status(status)

    def log_monitor_state_changed(self, batch_reading: bool):
        """Host switched between batch replay and realtime monitoring."""
        logger.debug(f"Log monitor batch reading: {batch_reading}")

    def _on_load_game(self, load_game: LoadGame):
        logger.info(f"LoadGame: StartLanded {load_game.start_landed}")
        self.odyssey_loaded = load_game.odyssey
