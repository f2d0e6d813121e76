"""Builder for the RMB (recommended minimum navigation information)
sentence.
"""

from typing import Optional

from ..constants import WAYPOINT_PLACEHOLDER
from ..formatting import (
    format_angle,
    format_decimal,
    format_latitude_for_nmea,
    format_longitude_for_nmea,
    format_optional_decimal,
    sanitize_identifier,
)
from ..snapshot import NavigationSnapshot
from ..units import (
    meters_per_second_to_knots,
    meters_to_nautical_miles,
    normalize_angle_degrees,
)
from .base import SentenceBuilder, steer_direction

__all__ = ("RMBBuilder",)


class RMBBuilder(SentenceBuilder):
    """Builds RMB sentences with the cross-track error, the waypoint
    identifiers, the destination position and the range, bearing and
    velocity made good towards the destination.

    The arrival flag is always ``V`` so the sentence never triggers an
    arrival alarm on its own.
    """

    sentence = "RMB"
    title = "RMB - Heading and distance to waypoint"
    keys = (
        "crossTrackError",
        "origin.name",
        "nextPoint.name",
        "nextPoint.position",
        "nextPoint.distance",
        "nextPoint.bearingTrue",
        "vmgTowardsDestination",
    )

    def get_fields(self, snapshot: NavigationSnapshot) -> Optional[list[str]]:
        xte = snapshot.number("crossTrackError")
        position = snapshot.position("nextPoint.position")
        bearing_true = snapshot.number("nextPoint.bearingTrue")

        if xte is None or position is None or bearing_true is None:
            return None

        distance = snapshot.number("nextPoint.distance")
        vmg = snapshot.number("vmgTowardsDestination")

        return [
            # Data status
            "A",
            # Cross-track error and direction to steer
            format_decimal(abs(meters_to_nautical_miles(xte)), 3),
            steer_direction(xte),
            # Origin and destination waypoint identifiers
            sanitize_identifier(snapshot.text("origin.name")),
            sanitize_identifier(snapshot.text("nextPoint.name"), WAYPOINT_PLACEHOLDER),
            # Destination latitude and longitude with their signs
            *format_latitude_for_nmea(position.lat),
            *format_longitude_for_nmea(position.lon),
            # Range to destination in nautical miles
            format_optional_decimal(
                meters_to_nautical_miles(distance) if distance is not None else None,
                2,
            ),
            # Bearing to destination, degrees true
            format_angle(normalize_angle_degrees(bearing_true)),
            # Velocity made good towards destination, knots
            format_optional_decimal(
                meters_per_second_to_knots(vmg) if vmg is not None else None, 2
            ),
            # Arrival status
            "V",
        ]
