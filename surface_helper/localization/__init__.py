"""
Localization Module: planet surface geometry.

Key functions:
- great_circle_distance: Haversine distance on a sphere of given radius
- middle_point: Linear cockpit -> ship center correction
- kelvin_to_celsius / kelvin_to_fahrenheit: Body temperature display
"""

from .surface_math import (
    DEG_TO_RAD,
    to_radians,
    great_circle_distance,
    middle_point,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)

__all__ = [
    'DEG_TO_RAD',
    'to_radians',
    'great_circle_distance',
    'middle_point',
    'kelvin_to_celsius',
    'kelvin_to_fahrenheit',
]
