"""Constants used in several places throughout the NMEA navigation package."""

__all__ = (
    "METERS_PER_NAUTICAL_MILE",
    "SECONDS_PER_HOUR",
    "KNOTS_PER_METER_PER_SECOND",
    "NMEA_RESERVED_CHARACTERS",
    "WAYPOINT_PLACEHOLDER",
)


METERS_PER_NAUTICAL_MILE = 1852.0
"""Length of the international nautical mile, in metres"""

SECONDS_PER_HOUR = 3600.0
"""Number of seconds in an hour"""

KNOTS_PER_METER_PER_SECOND = SECONDS_PER_HOUR / METERS_PER_NAUTICAL_MILE
"""Conversion factor from metres per second to knots (approx. 1.94384)"""

NMEA_RESERVED_CHARACTERS = frozenset("\r\n$*,!\\^~")
"""Characters that may not appear inside the value of an NMEA-0183 field"""

WAYPOINT_PLACEHOLDER = "WAYPOINT"
"""Identifier emitted for a destination waypoint that has no name"""
