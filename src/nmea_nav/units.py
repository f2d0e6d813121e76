"""Unit conversion routines used when rendering navigation data."""

from math import degrees, fmod, isfinite, tau

from .constants import KNOTS_PER_METER_PER_SECOND, METERS_PER_NAUTICAL_MILE
from .errors import ValueOutOfRange

__all__ = (
    "meters_per_second_to_knots",
    "meters_to_nautical_miles",
    "normalize_angle_degrees",
)


def normalize_angle_degrees(radians: float) -> float:
    """Converts an angle given in radians to degrees, reduced into the
    half-open range [0; 360).

    Parameters:
        radians: the angle to convert, in radians

    Returns:
        the angle in degrees, at least zero and less than 360

    Raises:
        ValueOutOfRange: if the angle is not a finite number
    """
    if not isfinite(radians):
        raise ValueOutOfRange(radians, "angle", "(-inf; inf)")

    # degrees() overflows to infinity for huge angles
    result = degrees(fmod(radians, tau)) % 360.0
    if result >= 360.0:
        # x % 360 may round up to 360 when x is a tiny negative number
        result -= 360.0
    return result


def meters_to_nautical_miles(meters: float) -> float:
    """Converts a distance given in metres to nautical miles."""
    return meters / METERS_PER_NAUTICAL_MILE


def meters_per_second_to_knots(mps: float) -> float:
    """Converts a speed given in metres per second to knots."""
    return mps * KNOTS_PER_METER_PER_SECOND
