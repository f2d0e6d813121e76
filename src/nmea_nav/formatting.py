"""Formatting of individual field values of NMEA-0183 sentences."""

from __future__ import annotations

from math import isfinite
from typing import Optional

from .constants import NMEA_RESERVED_CHARACTERS
from .errors import ValueOutOfRange

__all__ = (
    "format_angle",
    "format_decimal",
    "format_latitude",
    "format_latitude_for_nmea",
    "format_longitude",
    "format_longitude_for_nmea",
    "format_optional_decimal",
    "sanitize_identifier",
)


def _to_degrees_and_minutes(value: float) -> tuple[int, float]:
    """Splits the absolute value of a coordinate given in decimal degrees into
    whole degrees and minutes, rounded to four decimal places. Minutes that
    round up to 60 are carried over into the degrees.
    """
    deg, min_frac = divmod(abs(value), 1)
    minutes = round(min_frac * 60, 4)
    if minutes >= 60:
        deg += 1
        minutes -= 60
    return int(deg), minutes


def format_latitude_for_nmea(lat: float) -> tuple[str, str]:
    """Formats a latitude in a way that is suitable for NMEA sentences.

    Args:
        lat: the latitude, in decimal degrees

    Returns:
        the formatted coordinate (``DDMM.MMMM``) and the sign (North or South)

    Raises:
        ValueOutOfRange: if the latitude is not finite or is outside the
            [-90; 90] range
    """
    if not isfinite(lat) or lat < -90 or lat > 90:
        raise ValueOutOfRange(lat, "latitude", "[-90; 90]")

    sign = "S" if lat < 0 else "N"
    deg, minutes = _to_degrees_and_minutes(lat)
    return f"{deg:02}{minutes:07.4f}", sign


def format_longitude_for_nmea(lon: float) -> tuple[str, str]:
    """Formats a longitude in a way that is suitable for NMEA sentences.

    Args:
        lon: the longitude, in decimal degrees

    Returns:
        the formatted coordinate (``DDDMM.MMMM``) and the sign (East or West)

    Raises:
        ValueOutOfRange: if the longitude is not finite or is outside the
            [-180; 180) range
    """
    if not isfinite(lon) or lon < -180 or lon >= 180:
        raise ValueOutOfRange(lon, "longitude", "[-180; 180)")

    sign = "W" if lon < 0 else "E"
    deg, minutes = _to_degrees_and_minutes(lon)
    return f"{deg:03}{minutes:07.4f}", sign


def format_latitude(lat: float) -> str:
    """Formats a latitude as two comma-separated NMEA fields, e.g.
    ``4530.0000,N``.
    """
    return ",".join(format_latitude_for_nmea(lat))


def format_longitude(lon: float) -> str:
    """Formats a longitude as two comma-separated NMEA fields, e.g.
    ``12215.0000,W``.
    """
    return ",".join(format_longitude_for_nmea(lon))


def format_decimal(value: float, digits: int) -> str:
    """Formats a number with a fixed number of fractional digits.

    Scientific notation is never used and trailing zeros are kept. Values
    that round to zero are never rendered with a minus sign.
    """
    result = f"{value:.{digits}f}"
    if result.startswith("-") and float(result) == 0:
        result = result[1:]
    return result


def format_optional_decimal(value: Optional[float], digits: int) -> str:
    """Formats a number with a fixed number of fractional digits, or returns
    an empty field if the value is missing or not finite.
    """
    if value is None or not isfinite(value):
        return ""
    return format_decimal(value, digits)


def format_angle(degrees: float, digits: int = 1) -> str:
    """Formats an angle in the [0; 360) range with a fixed number of
    fractional digits. Angles that would be rendered as 360 are wrapped
    around to zero.
    """
    result = format_decimal(degrees, digits)
    if float(result) >= 360:
        result = format_decimal(0.0, digits)
    return result


def sanitize_identifier(value: Optional[str], default: str = "") -> str:
    """Cleans up a free-text identifier (e.g., a waypoint name) so it can be
    used as the value of a single NMEA field.

    Reserved NMEA characters as well as non-printable and non-ASCII
    characters are removed.

    Args:
        value: the identifier to clean up
        default: the value to return if nothing remains of the identifier

    Returns:
        the cleaned identifier or the default
    """
    if value is None:
        return default

    result = "".join(
        ch
        for ch in str(value)
        if " " <= ch <= "~" and ch not in NMEA_RESERVED_CHARACTERS
    ).strip()
    return result or default
