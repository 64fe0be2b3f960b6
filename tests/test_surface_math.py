"""
Unit tests for planet surface math.

Tests cover:
- Great-circle distance (zero, symmetry, known arcs, sign)
- Midpoint interpolation endpoints and extrapolation
- Temperature conversions
"""

import math

import pytest

from surface_helper.localization import (
    DEG_TO_RAD,
    to_radians,
    great_circle_distance,
    middle_point,
    kelvin_to_celsius,
    kelvin_to_fahrenheit,
)


class TestGreatCircleDistance:
    """Tests for haversine distance."""

    @pytest.mark.parametrize("point", [
        (0.0, 0.0),
        (10.0, 20.0),
        (-89.5, 179.9),
        (45.123456, -120.654321),
    ])
    def test_same_point_is_zero(self, point):
        """Distance from a point to itself is zero."""
        assert great_circle_distance(point, point, 1_000_000.0) == 0.0

    @pytest.mark.parametrize("p1,p2", [
        ((10.0, 20.0), (10.01, 20.02)),
        ((-45.0, 170.0), (-44.5, -179.0)),
        ((0.0, 0.0), (60.0, 90.0)),
    ])
    def test_symmetric(self, p1, p2):
        """distance(p1, p2) == distance(p2, p1)."""
        radius = 2_500_000.0
        assert great_circle_distance(p1, p2, radius) == pytest.approx(
            great_circle_distance(p2, p1, radius), rel=1e-12
        )

    def test_quarter_meridian(self):
        """Pole to equator is a quarter of the circumference."""
        radius = 1_000_000.0
        d = great_circle_distance((0.0, 0.0), (90.0, 0.0), radius)
        assert d == pytest.approx(math.pi / 2 * radius, rel=1e-5)

    def test_equator_arc(self):
        """Along the equator the arc equals radius * delta lon."""
        radius = 3_000_000.0
        d = great_circle_distance((0.0, 10.0), (0.0, 11.0), radius)
        assert d == pytest.approx(to_radians(1.0) * radius, rel=1e-9)

    def test_longitude_shrinks_with_latitude(self):
        """Same longitude delta is shorter away from the equator."""
        radius = 1_000_000.0
        at_equator = great_circle_distance((0.0, 0.0), (0.0, 1.0), radius)
        at_60 = great_circle_distance((60.0, 0.0), (60.0, 1.0), radius)
        assert at_60 == pytest.approx(at_equator * 0.5, rel=1e-3)

    def test_scales_with_radius(self):
        """Distance is proportional to radius."""
        p1, p2 = (1.0, 2.0), (1.5, 2.5)
        d1 = great_circle_distance(p1, p2, 1_000.0)
        d2 = great_circle_distance(p1, p2, 2_000.0)
        assert d2 == pytest.approx(2 * d1)

    def test_never_negative(self):
        """Negative radius still yields a non-negative distance."""
        d = great_circle_distance((0.0, 0.0), (1.0, 1.0), -1_000.0)
        assert d >= 0.0

    def test_antipodes(self):
        """Antipodal points do not blow up asin."""
        radius = 1_000.0
        d = great_circle_distance((0.0, 0.0), (0.0, 180.0), radius)
        assert d == pytest.approx(math.pi * radius, rel=1e-5)
        assert not math.isnan(d)

    def test_fixed_conversion_factor(self):
        """Degrees are converted with the fixed factor."""
        assert DEG_TO_RAD == 0.0174533
        assert to_radians(2.0) == 2.0 * 0.0174533


class TestMiddlePoint:
    """Tests for linear cockpit/ship interpolation."""

    def test_factor_minus_one_is_first_point(self):
        p1, p2 = (10.25, 20.5), (10.75, 21.0)
        assert middle_point(p1, p2, -1.0) == p1

    def test_factor_plus_one_is_second_point(self):
        p1, p2 = (10.25, 20.5), (10.75, 21.0)
        assert middle_point(p1, p2, 1.0) == p2

    def test_endpoints_exact_for_arbitrary_values(self):
        """Endpoints reproduce inputs bit for bit."""
        p1, p2 = (0.1, -33.3333333), (0.7, -33.1111111)
        assert middle_point(p1, p2, -1.0) == p1
        assert middle_point(p1, p2, 1.0) == p2

    def test_factor_zero_is_mean(self):
        p1, p2 = (10.0, 20.0), (12.0, 26.0)
        assert middle_point(p1, p2, 0.0) == (11.0, 23.0)

    def test_quarter_factor(self):
        """factor -0.5 -> weight 0.25."""
        lat, lon = middle_point((0.0, 0.0), (4.0, 8.0), -0.5)
        assert lat == pytest.approx(1.0)
        assert lon == pytest.approx(2.0)

    def test_extrapolation(self):
        """factor 2 goes past p2 by half the segment."""
        lat, lon = middle_point((0.0, 0.0), (2.0, 4.0), 2.0)
        assert lat == pytest.approx(3.0)
        assert lon == pytest.approx(6.0)

    def test_components_independent(self):
        """Latitude and longitude interpolate independently."""
        lat, lon = middle_point((5.0, 100.0), (5.0, 101.0), 0.0)
        assert lat == 5.0
        assert lon == pytest.approx(100.5)

    def test_returns_plain_floats(self):
        lat, lon = middle_point((1, 2), (3, 4), 0)
        assert type(lat) is float
        assert type(lon) is float


class TestTemperatureConversion:

    def test_kelvin_to_celsius(self):
        assert kelvin_to_celsius(273.15) == pytest.approx(0.0)
        assert kelvin_to_celsius(373.15) == pytest.approx(100.0)

    def test_kelvin_to_fahrenheit(self):
        assert kelvin_to_fahrenheit(273.15) == pytest.approx(32.0)
        assert kelvin_to_fahrenheit(373.15) == pytest.approx(212.0)
