"""Typed, read-only view of the navigation data that the sentence builders
consume.
"""

from __future__ import annotations

import logging

from dataclasses import dataclass
from math import isfinite
from typing import Any, Mapping, Optional, Union

from .vectors import GPSCoordinate

__all__ = ("NavigationSnapshot", "PATHS")

log = logging.getLogger(__name__)


PATHS: dict[str, str] = {
    "crossTrackError": "cross_track_error",
    "bearingTrackTrue": "bearing_track_true",
    "nextPoint.bearingTrue": "next_point_bearing_true",
    "nextPoint.bearingMagnetic": "next_point_bearing_magnetic",
    "nextPoint.distance": "next_point_distance",
    "nextPoint.name": "next_point_name",
    "nextPoint.position": "next_point_position",
    "magneticVariation": "magnetic_variation",
    "origin.name": "origin_name",
    "vmgTowardsDestination": "vmg_towards_destination",
}
"""Mapping from the dotted paths of the navigation data model to the
attributes of the snapshot.
"""

_PATH_PREFIXES = ("navigation.courseGreatCircle.", "navigation.")
_WAYPOINTS = ("nextPoint", "origin")
_WAYPOINT_MEMBERS = {
    "name": "name",
    "identifier": "name",
    "position": "position",
    "distance": "distance",
    "bearingTrue": "bearingTrue",
    "bearingMagnetic": "bearingMagnetic",
}

_POSITION_ATTRIBUTES = frozenset(["next_point_position"])
_STRING_ATTRIBUTES = frozenset(["next_point_name", "origin_name"])

Value = Union[float, str, GPSCoordinate, None]


def _normalize_path(path: str) -> str:
    for prefix in _PATH_PREFIXES:
        if path.startswith(prefix):
            return path[len(prefix) :]
    return path


def _coerce(attr: str, value: Any) -> Value:
    """Converts a raw value of the navigation data model to the type expected
    by the given snapshot attribute. Values of the wrong type are treated as
    missing.
    """
    if value is None:
        return None

    if attr in _POSITION_ATTRIBUTES:
        try:
            return GPSCoordinate.from_json(value)
        except (OverflowError, TypeError, ValueError):
            log.debug(f"Ignoring malformed position: {value!r}")
            return None

    if attr in _STRING_ATTRIBUTES:
        return str(value)

    if isinstance(value, bool) or not isinstance(value, (int, float)):
        log.debug(f"Ignoring non-numeric value for {attr}: {value!r}")
        return None

    try:
        return float(value)
    except OverflowError:
        log.debug(f"Ignoring out-of-range value for {attr}: {value!r}")
        return None


@dataclass(frozen=True)
class NavigationSnapshot:
    """Sparse, read-only collection of navigation values at a given instant.

    Every attribute is optional; ``None`` means that the value is not
    available, which is distinct from zero. Angles are in radians, distances
    in metres and speeds in metres per second.
    """

    cross_track_error: Optional[float] = None
    """Cross-track error in metres; positive if the vessel is to the right of
    the intended track"""

    bearing_track_true: Optional[float] = None
    """True bearing of the track from the origin to the next waypoint"""

    next_point_bearing_true: Optional[float] = None
    """True bearing from the present position to the next waypoint"""

    next_point_bearing_magnetic: Optional[float] = None
    """Magnetic bearing from the present position to the next waypoint"""

    next_point_distance: Optional[float] = None
    """Distance from the present position to the next waypoint"""

    next_point_name: Optional[str] = None
    """Identifier of the next (destination) waypoint"""

    next_point_position: Optional[GPSCoordinate] = None
    """Position of the next (destination) waypoint"""

    magnetic_variation: Optional[float] = None
    """Magnetic variation; positive towards East"""

    origin_name: Optional[str] = None
    """Identifier of the origin waypoint"""

    vmg_towards_destination: Optional[float] = None
    """Velocity made good towards the next waypoint"""

    @classmethod
    def from_paths(cls, values: Mapping[str, Any]) -> NavigationSnapshot:
        """Creates a snapshot from a sparse mapping of dotted paths to values.

        Paths may carry the ``navigation.courseGreatCircle.`` or
        ``navigation.`` prefix. Waypoint objects given at ``nextPoint`` or
        ``origin`` are expanded into their members; explicitly given member
        paths take precedence over them. Unknown paths are ignored.
        """
        kwargs: dict[str, Value] = {}
        explicit: list[tuple[str, Any]] = []

        for raw_path, value in values.items():
            path = _normalize_path(raw_path)
            if path in _WAYPOINTS:
                if isinstance(value, Mapping):
                    for member, target in _WAYPOINT_MEMBERS.items():
                        attr = PATHS.get(f"{path}.{target}")
                        if attr and value.get(member) is not None:
                            kwargs.setdefault(attr, _coerce(attr, value[member]))
            else:
                explicit.append((path, value))

        for path, value in explicit:
            attr = PATHS.get(path)
            if attr is None:
                log.debug(f"Ignoring unknown navigation path: {path!r}")
                continue
            kwargs[attr] = _coerce(attr, value)

        return cls(**kwargs)  # type: ignore

    def get(self, path: str) -> Value:
        """Returns the value at the given dotted path.

        Raises:
            KeyError: if the path is not known
        """
        try:
            attr = PATHS[_normalize_path(path)]
        except KeyError:
            raise KeyError(f"Unknown navigation path: {path!r}") from None
        return getattr(self, attr)

    def number(self, path: str) -> Optional[float]:
        """Returns the value at the given dotted path if it is a finite number,
        ``None`` otherwise.
        """
        value = self.get(path)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None

        try:
            value = float(value)
        except OverflowError:
            return None

        return value if isfinite(value) else None

    def position(self, path: str) -> Optional[GPSCoordinate]:
        """Returns the position at the given dotted path if it has finite
        coordinates, ``None`` otherwise.
        """
        value = self.get(path)
        if isinstance(value, GPSCoordinate) and value.is_finite:
            return value
        return None

    def text(self, path: str) -> Optional[str]:
        """Returns the string at the given dotted path or ``None``."""
        value = self.get(path)
        return value if isinstance(value, str) else None
