"""
Planet surface math.

Great-circle distance between two surface points, short-range
interpolation between cockpit and ship center, and the temperature
conversions used by body announcements.

Coordinates are (latitude, longitude) tuples in degrees.
"""

from typing import Tuple
import numpy as np

# Degrees -> radians, fixed factor
DEG_TO_RAD = 0.0174533

KELVIN_ZERO_C = 273.15


def to_radians(degrees: float) -> float:
    """Convert degrees to radians using the fixed factor."""
    return degrees * DEG_TO_RAD


def great_circle_distance(
    p1: Tuple[float, float],
    p2: Tuple[float, float],
    radius: float
) -> float:
    """
    Calculate distance between two points on a planet with given radius.

    Args:
        p1: First point (lat, lon) in degrees
        p2: Second point (lat, lon) in degrees
        radius: Planet radius (m)

    Returns:
        Distance along the surface in the same units as radius (>= 0)

    Algorithm:
        Haversine:
        h = sin²(Δlat/2) + cos(lat1)·cos(lat2)·sin²(Δlon/2)
        d = 2·R·asin(√h)
    """
    lat_delta_sin = np.sin(to_radians(p1[0] - p2[0]) / 2)
    lon_delta_sin = np.sin(to_radians(p1[1] - p2[1]) / 2)

    h = (lat_delta_sin * lat_delta_sin +
         np.cos(to_radians(p1[0])) * np.cos(to_radians(p2[0])) *
         lon_delta_sin * lon_delta_sin)

    # Rounding can push h a hair outside [0, 1]
    h = min(max(float(h), 0.0), 1.0)

    return abs(float(2 * radius * np.arcsin(np.sqrt(h))))


def middle_point(
    p1: Tuple[float, float],
    p2: Tuple[float, float],
    factor: float
) -> Tuple[float, float]:
    """
    Calculate an intermediate point between two surface locations.

    Factor defines the offset along the segment:
        -1 -> p1
         0 -> middle point
        +1 -> p2
    Values outside [-1, 1] extrapolate past the endpoints.

    Surface curvature is ignored: this corrects the distance between the
    ship cockpit and the player's exit point, which is hardly more than
    100 meters.
    """
    weight = (factor + 1) / 2.0
    a = np.array(p1, dtype=float)
    b = np.array(p2, dtype=float)
    # (1 - w)·a + w·b == a + w·(b - a), exact at both ends
    mid = (1.0 - weight) * a + weight * b
    return float(mid[0]), float(mid[1])


def kelvin_to_celsius(temp: float) -> float:
    return temp - KELVIN_ZERO_C


def kelvin_to_fahrenheit(temp: float) -> float:
    return (temp - KELVIN_ZERO_C) * 9 / 5 + 32
