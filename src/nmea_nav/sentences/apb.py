"""Builder for the APB (autopilot sentence "B") sentence.

Field layout, after the address field::

    $--APB,A,A,x.xxx,a,N,x.x,T,,x.x,T,x.x,M,c--c,A,A*hh
           1 2   3   4 5  6  7 8  9 10 11 12  13 14 15

    1-2    status flags (always ``A``)
    3-5    cross-track error magnitude in nautical miles, steer direction
           (``L``/``R``) and unit (``N``)
    6-7    bearing to the destination, degrees true
    8      reserved, always empty
    9-10   heading to steer, degrees true (same as the bearing)
    11-12  heading to steer, degrees magnetic; empty if unknown
    13     destination waypoint identifier
    14-15  mode indicators (always ``A``)
"""

from typing import Optional

from ..constants import WAYPOINT_PLACEHOLDER
from ..formatting import format_angle, format_decimal, sanitize_identifier
from ..snapshot import NavigationSnapshot
from ..units import meters_to_nautical_miles, normalize_angle_degrees
from .base import SentenceBuilder, magnetic_bearing, steer_direction

__all__ = ("APBBuilder",)


class APBBuilder(SentenceBuilder):
    """Builds APB sentences from the cross-track error and the bearings to
    the next waypoint.
    """

    sentence = "APB"
    title = "APB - Autopilot info"
    keys = (
        "crossTrackError",
        "bearingTrackTrue",
        "nextPoint.bearingTrue",
        "nextPoint.bearingMagnetic",
        "magneticVariation",
        "nextPoint.name",
    )

    def get_fields(self, snapshot: NavigationSnapshot) -> Optional[list[str]]:
        xte = snapshot.number("crossTrackError")
        bearing_true = snapshot.number("nextPoint.bearingTrue")
        if bearing_true is None:
            bearing_true = snapshot.number("bearingTrackTrue")

        if xte is None or bearing_true is None:
            return None

        true_field = format_angle(normalize_angle_degrees(bearing_true))

        bearing_mag = magnetic_bearing(snapshot, bearing_true)
        mag_field = (
            format_angle(normalize_angle_degrees(bearing_mag))
            if bearing_mag is not None
            else ""
        )

        return [
            "A",
            "A",
            format_decimal(abs(meters_to_nautical_miles(xte)), 3),
            steer_direction(xte),
            "N",
            true_field,
            "T",
            "",
            true_field,
            "T",
            mag_field,
            "M",
            sanitize_identifier(
                snapshot.text("nextPoint.name"), WAYPOINT_PLACEHOLDER
            ),
            "A",
            "A",
        ]
