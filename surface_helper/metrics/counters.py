"""
Tracker diagnostics.

Counts what the plugin did with its input:
- Journal events and status samples handled
- Notification traffic (sent, updated, cancelled, suppressed)
- Why an input was ignored, per event kind
- Running ship distance statistics

Every guarded no-op in the tracker records a reason code here together
with the kind of input that hit the guard, so a silent branch still shows
up in the summary.
"""

import logging
import threading
from collections import Counter, defaultdict
from dataclasses import dataclass, replace
from typing import Dict, Optional

logger = logging.getLogger(__name__)

# Reason codes for ignored journal events and status samples
DROP_REASONS = {
    'on_station': 'Event happened on a station',
    'not_on_planet': 'Event happened away from a planet surface',
    'taxi': 'Player is in a taxi',
    'srv_transition': 'Embark/disembark from SRV, not the ship',
    'not_on_surface': 'Player neither on foot nor in SRV',
    'docked': 'Ship is docked',
    'not_tracking': 'Tracking disabled',
    'no_position': 'Status sample without latitude/longitude',
    'distance_undefined': 'Ship location unknown or invalid planet radius',
    'unknown_event': 'No handler for event type',
}

STANDARD_COUNTERS = (
    'events_in',
    'events_dropped',
    'status_samples',
    'samples_discarded',
    'ship_location_guesses',
    'tracking_started',
    'tracking_stopped',
    'notifications_sent',
    'notifications_updated',
    'notifications_cancelled',
    'notifications_suppressed',
    'distance_alerts',
)


@dataclass
class DistanceStats:
    """
    Running statistics of computed ship distances (m).

    Only aggregates are kept.
    """

    count: int = 0
    minimum: float = 0.0
    maximum: float = 0.0
    total: float = 0.0
    last: float = 0.0

    def add(self, distance: float):
        if self.count == 0:
            self.minimum = self.maximum = distance
        else:
            self.minimum = min(self.minimum, distance)
            self.maximum = max(self.maximum, distance)
        self.count += 1
        self.total += distance
        self.last = distance

    @property
    def mean(self) -> float:
        return self.total / self.count if self.count else 0.0


class MetricsCollector:
    """
    Thread-safe tracker diagnostics.

    The host may read the collector from its UI thread while journal
    events are processed.

    Usage:
        collector = MetricsCollector()
        collector.increment('events_in')
        collector.increment_drop('not_tracking', 'Status')
        collector.record_distance(412.0)

        print(collector.drops_by_source())
    """

    DROP_REASONS = DROP_REASONS

    def __init__(self):
        self._lock = threading.Lock()
        self._counters: Counter = Counter()
        self._drops: Dict[str, Counter] = defaultdict(Counter)
        self._distance = DistanceStats()
        self._zero_standard_counters()

    def _zero_standard_counters(self):
        # Standard counters show up in the summary even when never hit
        with self._lock:
            for name in STANDARD_COUNTERS:
                self._counters.setdefault(name, 0)

    def increment(self, counter_name: str, value: int = 1):
        with self._lock:
            self._counters[counter_name] += value

    def increment_drop(self, reason: str, source: str = "", value: int = 1):
        """
        Record an ignored input.

        Args:
            reason: Reason code (should be in DROP_REASONS)
            source: Kind of input that was ignored ('Touchdown', 'Status', ...)
            value: Amount to increment (default 1)
        """
        if reason not in DROP_REASONS:
            # Unknown reasons are still counted
            logger.warning(f"Unknown drop reason '{reason}' from {source or 'unknown source'}")

        with self._lock:
            self._drops[source][reason] += value
            self._counters['events_dropped'] += value

    def get_counter(self, counter_name: str) -> int:
        with self._lock:
            return self._counters.get(counter_name, 0)

    def get_drop_count(self, reason: str, source: Optional[str] = None) -> int:
        """
        How many inputs were ignored for a reason.

        Args:
            reason: Reason code
            source: Restrict to one input kind; None sums over all kinds
        """
        with self._lock:
            if source is not None:
                return self._drops[source][reason] if source in self._drops else 0
            return sum(reasons[reason] for reasons in self._drops.values())

    def drops_by_source(self) -> Dict[str, Dict[str, int]]:
        """Copy of {input kind: {reason: count}} for non-zero entries."""
        with self._lock:
            return {
                source: {reason: n for reason, n in reasons.items() if n}
                for source, reasons in self._drops.items()
                if any(reasons.values())
            }

    def record_distance(self, distance: float):
        with self._lock:
            self._distance.add(distance)

    def distance_stats(self) -> DistanceStats:
        """Copy of the running ship distance statistics."""
        with self._lock:
            return replace(self._distance)

    def reset(self):
        """Zero everything (used between tests and demo runs)."""
        with self._lock:
            self._counters.clear()
            self._drops.clear()
            self._distance = DistanceStats()
        self._zero_standard_counters()

    def print_summary(self):
        """Print human-readable metrics summary."""
        with self._lock:
            counters = dict(self._counters)
        drops = self.drops_by_source()
        distance = self.distance_stats()

        print("\n" + "=" * 70)
        print("  SURFACE HELPER METRICS")
        print("=" * 70)

        print("\nCOUNTERS:")
        for name, value in sorted(counters.items()):
            print(f"  {name:30s}: {value:8d}")

        if drops:
            print("\nIGNORED INPUT:")
            for source in sorted(drops):
                print(f"  {source or '(unknown)'}:")
                for reason, count in sorted(drops[source].items()):
                    print(f"    {reason:28s}: {count:8d}")

        if distance.count:
            print("\nSHIP DISTANCE (m):")
            print(f"  count={distance.count}, min={distance.minimum:.1f}, "
                  f"mean={distance.mean:.1f}, max={distance.maximum:.1f}, "
                  f"last={distance.last:.1f}")

        print("=" * 70 + "\n")
