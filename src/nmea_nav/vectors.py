"""Classes representing geographic positions."""

from __future__ import annotations

from math import isfinite
from typing import Any, Mapping, Sequence, TypeVar, Union

__all__ = ("GPSCoordinate",)

C = TypeVar("C", bound="GPSCoordinate")


class GPSCoordinate:
    """Class representing a geographic position given with latitude and
    longitude, both in decimal degrees.
    """

    _lat: float
    _lon: float

    @classmethod
    def from_json(
        cls, data: Union[Mapping[str, Any], Sequence[float], GPSCoordinate]
    ) -> GPSCoordinate:
        """Creates a GPS coordinate from its JSON representation.

        Both the ``{"latitude": ..., "longitude": ...}`` object form of the
        navigation data model and the ``[lat, lon]`` pair form are accepted.

        Raises:
            ValueError: if the data cannot be interpreted as a position
        """
        if isinstance(data, GPSCoordinate):
            return data.copy()

        if isinstance(data, Mapping):
            try:
                return cls(lat=data["latitude"], lon=data["longitude"])
            except KeyError as ex:
                raise ValueError(f"position has no {ex.args[0]!r} member") from None

        if isinstance(data, (str, bytes)) or len(data) < 2:
            raise ValueError(f"cannot interpret {data!r} as a position")

        return cls(lat=data[0], lon=data[1])

    def __init__(self, lat: float = 0.0, lon: float = 0.0):
        """Constructor.

        Parameters:
            lat: the latitude
            lon: the longitude
        """
        self._lat, self._lon = 0.0, 0.0
        self.lat = lat
        self.lon = lon

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GPSCoordinate):
            return NotImplemented
        return self._lat == other._lat and self._lon == other._lon

    def __hash__(self) -> int:
        return hash((self._lat, self._lon))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(lat={self._lat!r}, lon={self._lon!r})"

    def copy(self: C) -> C:
        """Returns a copy of the current GPS coordinate object."""
        return self.__class__(lat=self.lat, lon=self.lon)

    @property
    def is_finite(self) -> bool:
        """Whether both the latitude and the longitude are finite numbers."""
        return isfinite(self._lat) and isfinite(self._lon)

    @property
    def lat(self) -> float:
        """The latitude of the coordinate."""
        return self._lat

    @lat.setter
    def lat(self, value: float) -> None:
        self._lat = float(value)

    @property
    def lon(self) -> float:
        """The longitude of the coordinate."""
        return self._lon

    @lon.setter
    def lon(self, value: float) -> None:
        self._lon = float(value)
