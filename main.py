"""
Surface Helper demo.

Replays a scripted surface excursion through the plugin worker with a
console host: piloted landing, disembark, a straight walk away from the
ship and back aboard. Notifications are printed as the overlay would show
them.
"""

import sys
import math
import logging
import argparse
import uuid
from typing import List, Optional

import config
from surface_helper import SurfaceHelperSettings, SurfaceHelperWorker
from surface_helper.io import ObservatoryCore
from surface_helper.metrics import get_metrics
from surface_helper.proto import (
    Disembark,
    Embark,
    LoadGame,
    NotificationArgs,
    StatusSample,
    Touchdown,
)

logging.basicConfig(
    level=getattr(logging, config.LOGGING_CONFIG["level"]),
    format=config.LOGGING_CONFIG["format"]
)
logger = logging.getLogger(__name__)


class ConsoleCore(ObservatoryCore):
    """Host stand-in printing notifications to stdout."""

    def __init__(self, batch_reading: bool = False):
        self.batch_reading = batch_reading
        self.plugin_storage_folder = ""
        self.status: Optional[StatusSample] = None

    def send_notification(self, args: NotificationArgs) -> uuid.UUID:
        print(f"[overlay] NEW    {args.title}: {args.detail}")
        return args.guid

    def update_notification(self, args: NotificationArgs):
        print(f"[overlay] UPDATE {args.title}: {args.detail}")

    def cancel_notification(self, guid: uuid.UUID):
        print(f"[overlay] CLOSE  {guid}")

    def get_status(self) -> Optional[StatusSample]:
        return self.status

    @property
    def is_log_monitor_batch_reading(self) -> bool:
        return self.batch_reading


def walk_samples(lat: float, lon: float, radius: float,
                 step_m: float, steps: int) -> List[StatusSample]:
    """Status samples along a meridian, step_m apart, walking north."""
    step_deg = math.degrees(step_m / radius)
    return [
        StatusSample(latitude=lat + i * step_deg, longitude=lon, planet_radius=radius)
        for i in range(steps)
    ]


def run_excursion(worker: SurfaceHelperWorker, core: ConsoleCore, demo: dict):
    lat = demo["landing_lat"]
    lon = demo["landing_lon"]
    radius = demo["planet_radius_m"]

    body = dict(on_planet=True, star_system="Demo System", system_address=1,
                body="Demo System A 1", body_id=5)

    worker.journal_event(LoadGame(odyssey=True))
    worker.journal_event(Touchdown(player_controlled=True, latitude=lat,
                                   longitude=lon, **body))
    worker.journal_event(Disembark(**body))

    for sample in walk_samples(lat, lon, radius, demo["walk_step_m"], demo["walk_steps"]):
        core.status = sample
        worker.status_change(sample)

    worker.journal_event(Embark(**body))


def main():
    """Run the demo excursion."""
    parser = argparse.ArgumentParser(description='Surface Helper demo excursion')
    parser.add_argument('--steps', '-n', type=int, default=None,
                        help='Number of status samples')
    parser.add_argument('--step', '-s', type=float, default=None,
                        help='Distance walked between samples (m)')
    parser.add_argument('--offset', '-o', type=float, default=0.0,
                        help='Ship center offset (-2..2)')
    parser.add_argument('--batch', '-b', action='store_true',
                        help='Pretend the host is replaying old journals')
    parser.add_argument('--log-file', '-l', type=str, default='',
                        help='Plugin log file (default: none)')
    parser.add_argument('--debug', '-d', action='store_true',
                        help='Enable debug logging')

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    demo = dict(config.DEMO_CONFIG)
    if args.steps:
        demo["walk_steps"] = args.steps
    if args.step:
        demo["walk_step_m"] = args.step

    defaults = dict(config.SURFACE_HELPER_DEFAULTS)
    defaults["ship_center_offset"] = args.offset
    defaults["log_file"] = args.log_file
    try:
        settings = SurfaceHelperSettings.from_dict(defaults)
    except AssertionError as e:
        logger.error(f"Invalid settings: {e}")
        return 1

    core = ConsoleCore(batch_reading=args.batch)
    worker = SurfaceHelperWorker(settings)
    worker.load(core)
    try:
        run_excursion(worker, core, demo)
    finally:
        worker.unload()

    get_metrics().print_summary()
    return 0


if __name__ == "__main__":
    sys.exit(main())
