"""
Metrics Module: tracker diagnostics.

- Counters: events_in, status_samples, notifications_sent, etc.
- Drop reasons: why a journal event or status sample was ignored, per
  event kind
- Ship distance statistics

Usage:
    from surface_helper.metrics import get_metrics

    metrics = get_metrics()
    metrics.increment('events_in')
    metrics.increment_drop('not_tracking', 'Status')
    metrics.record_distance(1234.5)
"""

from .counters import MetricsCollector, DistanceStats, DROP_REASONS

# Global singleton for easy access
_global_metrics = None


def get_metrics() -> MetricsCollector:
    """
    Get the global metrics collector singleton.

    Returns:
        MetricsCollector instance
    """
    global _global_metrics
    if _global_metrics is None:
        _global_metrics = MetricsCollector()
    return _global_metrics


def reset_metrics():
    """Reset global metrics in place (for testing)."""
    get_metrics().reset()


__all__ = ['MetricsCollector', 'DistanceStats', 'DROP_REASONS', 'get_metrics', 'reset_metrics']
