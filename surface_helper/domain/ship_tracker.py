"""
Ship Distance Tracker.

Infers where the ship is parked from landing events and status samples,
computes the player's distance to it and warns when the player goes too
far. Journal events arrive in order from the host; every guard that does
not hold makes the handler a no-op, so malformed or out-of-order events
never raise.

Ship location sources, best first:
1. Touchdown without pilot (ship recalled): exact location from the event.
2. Piloted touchdown: the event reports the cockpit, not the ship center.
   The first status samples after disembarking are stale, so the 4th
   sample becomes the ship location, corrected towards the cockpit with
   middle_point().
3. No touchdown seen: the 4th status sample as is.
"""

import logging
import uuid
from typing import Optional, Tuple

from surface_helper.io import ObservatoryCore
from surface_helper.localization import great_circle_distance, middle_point
from surface_helper.proto import (
    Touchdown,
    Liftoff,
    LaunchSRV,
    DockSRV,
    Embark,
    Disembark,
    Location,
    JournalEvent,
    SurfaceContextEvent,
    StatusSample,
    NotificationArgs,
    NotificationRendering,
    TIMEOUT_PERSISTENT,
    TIMEOUT_DEFAULT,
    SILENT_SSML,
)
from surface_helper.settings import SurfaceHelperSettings
from .notifier import PluginNotifier, PLUGIN_SHORT_NAME
from .tracking_state import (
    TrackerState,
    DistanceBand,
    DISCARDED_SAMPLES_AFTER_LANDING,
)

logger = logging.getLogger(__name__)

# Live readout position on screen (percent)
READOUT_X_POS = 0.0
READOUT_Y_POS = 50.0


def format_distance_text(distance: float) -> str:
    """Readout text, distance rounded to whole meters."""
    return f"Ship distance: {int(distance + 0.5):,}m"


class ShipDistanceTracker(PluginNotifier):
    """
    Ship location inference and distance tracking state machine.

    Usage:
        tracker = ShipDistanceTracker(core, settings)
        tracker.on_touchdown(touchdown)
        tracker.on_disembark(disembark)
        tracker.on_status(status)     # for every status sample

        if tracker.state.ship_location_known:
            print(tracker.state.ship_location)

    Outbound notifications:
    - Live "Ship Distance" readout: created once, then updated in place
      under the same guid, cancelled when the distance becomes unknown
      or tracking stops. Never suppressed.
    - "Ship Distance!" warning: once per entry into a higher band.
    - "Ship lost!": ship took off without the player.
    The last two are popups and obey skip_notifications().
    """

    def __init__(
        self,
        core: ObservatoryCore,
        settings: Optional[SurfaceHelperSettings] = None,
        state: Optional[TrackerState] = None,
        sender: str = PLUGIN_SHORT_NAME,
    ):
        """
        Initialize tracker.

        Args:
            core: Host services
            settings: Plugin settings (defaults if None)
            state: Initial state (fresh state if None)
            sender: Sender name put on notifications
        """
        super().__init__(core, settings, sender)
        self.state = state or TrackerState()

    # ------------------------------------------------------------------
    # Journal events
    # ------------------------------------------------------------------

    def on_touchdown(self, touchdown: Touchdown):
        """
        EVENT:       Ship landed.
        ASSUMPTIONS: Player could be inside or outside the ship.
        ACTION:      Save its coordinates. Exact only for a recalled ship.
        """
        if not touchdown.on_planet_surface:
            self._drop_off_surface(touchdown)
            self.maybe_close_notification()
            return

        logger.info(f"Touchdown: LAT {touchdown.latitude}, LON {touchdown.longitude}, "
                    f"piloted={touchdown.player_controlled}")
        if touchdown.nearest_destination:
            logger.info(f"  near {touchdown.nearest_destination}")

        if not touchdown.player_controlled:
            # Ship was recalled and landed by itself, player is outside.
            self.state.ship_location = touchdown.position
            self.state.cockpit_location = None
            self.start_tracking()
        else:
            # Player is inside; this is the cockpit, not the ship center.
            self.state.forget_ship()
            self.state.cockpit_location = touchdown.position

    def on_liftoff(self, liftoff: Liftoff):
        """
        EVENT:       Ship took off.
        ASSUMPTIONS: Player can be inside or outside.
        ACTION:      Forget its coordinates and stop tracking.
        """
        logger.info(f"Liftoff: piloted={liftoff.player_controlled}")
        self.stop_tracking()
        self.state.forget_ship()

        if not liftoff.player_controlled:
            self.show_ship_lost_notification()

    def on_launch_srv(self, launch_srv: LaunchSRV):
        """Player drove out of the ship."""
        logger.info("LaunchSRV")
        self.start_tracking()

    def on_dock_srv(self, dock_srv: DockSRV):
        """Player drove back into the ship. Ship is still landed."""
        logger.info("DockSRV")
        self.stop_tracking()

    def on_embark(self, embark: Embark):
        """Player walked back into the ship. Boarding an SRV is ignored."""
        if embark.srv:
            self.metrics.increment_drop('srv_transition', embark.event)
            return
        logger.info("Embark")
        self.stop_tracking()

    def on_disembark(self, disembark: Disembark):
        """Player walked out of the ship. Leaving an SRV is ignored."""
        if not disembark.on_planet_surface:
            self._drop_off_surface(disembark)
            return
        if disembark.srv:
            self.metrics.increment_drop('srv_transition', disembark.event)
            return
        logger.info("Disembark")
        self.start_tracking()

    def on_location(self, location: Location):
        """
        EVENT:       Location update.
        ACTION:      Recompute distance if tracking on foot or in SRV.
        """
        logger.debug("Location")
        if not location.on_foot and not location.in_srv:
            self.metrics.increment_drop('not_on_surface', location.event)
            return
        if location.taxi:
            self.metrics.increment_drop('taxi', location.event)
            return
        if location.docked:
            self.metrics.increment_drop('docked', location.event)
            return
        if not self.state.tracking:
            self.metrics.increment_drop('not_tracking', location.event)
            return

        status = self.core.get_status()
        if status is None:
            status = StatusSample(
                latitude=location.latitude,
                longitude=location.longitude,
                planet_radius=self.state.body_radius,
            )
        else:
            self._remember_radius(status)

        self.process_new_location(status, location.event)

    def on_surface_exit(self, event: Optional[JournalEvent] = None):
        """Leaving the body, jumping, entering supercruise or shutting down."""
        if event is not None:
            logger.info(type(event).__name__)
        self.stop_tracking()

    # ------------------------------------------------------------------
    # Status samples
    # ------------------------------------------------------------------

    def on_status(self, status: StatusSample):
        """
        Handle a periodic status sample.

        While the ship location is unknown, the first samples after
        landing are discarded and the next one becomes the location guess.
        """
        self.metrics.increment('status_samples')
        if not self.state.tracking:
            self.metrics.increment_drop('not_tracking', status.event)
            return

        self._remember_radius(status)

        if not self.state.ship_location_known and status.has_position:
            self.state.samples_since_landing += 1
            if self.state.samples_since_landing > DISCARDED_SAMPLES_AFTER_LANDING:
                self.guess_ship_location(status.position)
            else:
                self.metrics.increment('samples_discarded')

        self.process_new_location(status)

    def guess_ship_location(self, player: Tuple[float, float]):
        """Adopt a player position near the ship as the ship location."""
        logger.info(f"Guessing ship location: player at (LAT: {player[0]}, LON: {player[1]})")
        if self.state.ship_location_known:
            logger.info(f"Keep ship location: LAT: {self.state.ship_location[0]}, "
                        f"LON: {self.state.ship_location[1]}")
            return

        cockpit = self.state.cockpit_location
        if cockpit is not None:
            self.state.ship_location = middle_point(
                cockpit, player, self.settings.ship_center_offset
            )
            logger.info(f"Ship location with cockpit correction: "
                        f"LAT: {self.state.ship_location[0]}, LON: {self.state.ship_location[1]}")
        else:
            self.state.ship_location = player
            logger.info("Ship location saved directly")

        self.metrics.increment('ship_location_guesses')

    # ------------------------------------------------------------------
    # Distance processing
    # ------------------------------------------------------------------

    def get_distance(self, status: StatusSample) -> Optional[float]:
        """
        Distance from ship to the status position.

        Returns:
            Distance (m), or None when the ship location, the position or
            the planet radius is unknown
        """
        if (not self.state.ship_location_known
                or not status.has_position
                or status.planet_radius <= 0):
            return None
        return great_circle_distance(
            self.state.ship_location, status.position, status.planet_radius
        )

    def process_new_location(
        self, status: StatusSample, source: str = StatusSample.event
    ) -> Optional[float]:
        """
        Update distance band and live readout for a new player position.

        Args:
            status: Player position and planet radius
            source: Input kind the position came from, for diagnostics

        Returns:
            Computed distance (m), None if undefined
        """
        logger.debug(f"LAT: {status.latitude}, LON: {status.longitude}, "
                     f"PR {status.planet_radius}")

        distance = self.get_distance(status)
        logger.debug(f"  distance = {distance}")
        if distance is None:
            self.metrics.increment_drop(
                'distance_undefined' if status.has_position else 'no_position', source
            )
            self.maybe_close_notification()
            return None

        self.metrics.record_distance(distance)
        self.notify_distance_limits(distance)
        self.show_distance(distance)
        return distance

    def notify_distance_limits(self, distance: float) -> Optional[DistanceBand]:
        """
        Move between distance bands, warning on entry into a higher band.

        A band is left only by dropping under every enabled threshold, so
        wandering around a threshold does not repeat the warning.

        Returns:
            The band just entered when a warning fired, else None
        """
        if self.settings.band2_enabled and distance >= self.settings.ship_distance_2:
            if self.state.band < DistanceBand.BAND2:
                self.state.band = DistanceBand.BAND2
                self.show_ship_too_far_notification(DistanceBand.BAND2)
                return DistanceBand.BAND2
            return None

        if self.settings.band1_enabled and distance >= self.settings.ship_distance_1:
            if self.state.band < DistanceBand.BAND1:
                self.state.band = DistanceBand.BAND1
                self.show_ship_too_far_notification(DistanceBand.BAND1)
                return DistanceBand.BAND1
            return None

        self.state.band = DistanceBand.NEAR
        return None

    def show_distance(self, distance: float):
        """Create or update the live distance readout."""
        is_first_time = not self.state.has_active_notification

        args = NotificationArgs(
            title="Ship Distance",
            detail=format_distance_text(distance),
            rendering=NotificationRendering.NATIVE_VISUAL,
            timeout=TIMEOUT_PERSISTENT,
            sender=self.sender,
            guid=uuid.uuid4() if is_first_time else self.state.active_notification.guid,
            x_pos=READOUT_X_POS,
            y_pos=READOUT_Y_POS,
        )
        self.state.active_notification = args

        if is_first_time:
            self.core.send_notification(args)
            self.metrics.increment('notifications_sent')
        else:
            self.core.update_notification(args)
            self.metrics.increment('notifications_updated')

    def maybe_close_notification(self):
        """Cancel the live readout if shown. Safe to call repeatedly."""
        if not self.state.has_active_notification:
            return
        self.core.cancel_notification(self.state.active_notification.guid)
        self.state.active_notification = None
        self.metrics.increment('notifications_cancelled')

    # ------------------------------------------------------------------
    # Tracking switch
    # ------------------------------------------------------------------

    def start_tracking(self):
        logger.info("--- start tracking ---")
        self.state.tracking = True
        self.metrics.increment('tracking_started')

    def stop_tracking(self):
        logger.info("--- stop tracking ---")
        self.maybe_close_notification()
        self.state.tracking = False
        self.metrics.increment('tracking_stopped')

    # ------------------------------------------------------------------
    # Popups
    # ------------------------------------------------------------------

    def show_ship_lost_notification(self) -> bool:
        """Ship flew away without the player."""
        logger.warning("Ship took off without the player")
        return self.send_popup(NotificationArgs(
            title="Ship lost!",
            title_ssml=SILENT_SSML,
            detail="Your ship just took off without you!",
            rendering=NotificationRendering.ALL,
            timeout=TIMEOUT_DEFAULT,
            sender=self.sender,
        ))

    def show_ship_too_far_notification(self, band: DistanceBand) -> bool:
        """Warn that the ship distance exceeded a threshold."""
        range_m = (self.settings.ship_distance_2 if band == DistanceBand.BAND2
                   else self.settings.ship_distance_1)
        logger.warning(f"Ship distance exceeded: {band.name} ({range_m} m)")
        self.metrics.increment('distance_alerts')

        return self.send_popup(NotificationArgs(
            title="Ship Distance!",
            title_ssml=SILENT_SSML,
            detail=f"Ship distance is over {range_m:,} meters, commander!",
            rendering=NotificationRendering.ALL,
            timeout=TIMEOUT_DEFAULT,
            sender=self.sender,
        ))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _remember_radius(self, status: StatusSample):
        if status.planet_radius > 0:
            self.state.body_radius = status.planet_radius

    def _drop_off_surface(self, event: SurfaceContextEvent):
        if event.on_station:
            self.metrics.increment_drop('on_station', event.event)
        elif event.taxi:
            self.metrics.increment_drop('taxi', event.event)
        else:
            self.metrics.increment_drop('not_on_planet', event.event)
