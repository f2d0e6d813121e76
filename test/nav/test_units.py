"""Unit tests for ``nmea_nav.units``."""

from math import pi
from typing import Optional

from pytest import approx, mark, raises

from nmea_nav.errors import ValueOutOfRange
from nmea_nav.units import (
    meters_per_second_to_knots,
    meters_to_nautical_miles,
    normalize_angle_degrees,
)


@mark.parametrize(
    ("input", "output"),
    [
        (0.0, 0.0),
        (pi / 2, 90.0),
        (-pi / 2, 270.0),
        (5 * pi, 180.0),
        (1.5708, 90.00021046),
        (1e308, None),
        (-1e308, None),
    ],
)
def test_normalize_angle_degrees(input: float, output: Optional[float]):
    result = normalize_angle_degrees(input)
    if output is not None:
        assert result == approx(output, abs=1e-7)
    assert 0 <= result < 360


def test_normalize_angle_degrees_tiny_negative():
    assert normalize_angle_degrees(-1e-20) == 0.0


@mark.parametrize("input", [float("nan"), float("inf"), float("-inf")])
def test_normalize_angle_degrees_non_finite(input: float):
    with raises(ValueOutOfRange):
        normalize_angle_degrees(input)


def test_meters_to_nautical_miles():
    assert meters_to_nautical_miles(1852) == 1.0
    assert meters_to_nautical_miles(926) == 0.5
    assert meters_to_nautical_miles(-100) == approx(-0.0539957)


def test_meters_per_second_to_knots():
    assert meters_per_second_to_knots(1.0) == approx(1.943844, abs=1e-6)
    assert meters_per_second_to_knots(1852 / 3600) == approx(1.0)
