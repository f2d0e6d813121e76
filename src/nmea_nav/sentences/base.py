"""Base class and shared logic of the sentence builders."""

from __future__ import annotations

import logging

from abc import ABCMeta, abstractmethod
from typing import ClassVar, Iterable, Optional, Sequence

from ..config import NMEAConfig
from ..errors import ValueOutOfRange
from ..nmea.packet import create_talker_sentence
from ..snapshot import NavigationSnapshot

__all__ = (
    "SentenceBuilder",
    "encode_sentences",
    "magnetic_bearing",
    "steer_direction",
)

log = logging.getLogger(__name__)


class SentenceBuilder(metaclass=ABCMeta):
    """Base class for objects that turn a navigation snapshot into a single
    NMEA-0183 sentence of a given type.
    """

    sentence: ClassVar[str]
    """The sentence type that the builder emits, e.g. ``APB``"""

    title: ClassVar[str]
    """Human-readable description of the sentence"""

    keys: ClassVar[Sequence[str]]
    """The navigation paths that the builder reads, in order"""

    def build(
        self, snapshot: NavigationSnapshot, config: Optional[NMEAConfig] = None
    ) -> Optional[list[str]]:
        """Builds the sentence from the given snapshot.

        Parameters:
            snapshot: the navigation data to encode
            config: the configuration to use; ``None`` means the defaults

        Returns:
            a list holding exactly one sentence, or ``None`` if the snapshot
            does not contain the data that the sentence needs

        Raises:
            ValueOutOfRange: if a value in the snapshot is present but lies
                outside its valid domain
        """
        fields = self.get_fields(snapshot)
        if fields is None:
            log.debug(f"Not enough data to emit {self.sentence} sentence")
            return None

        talker = (config or NMEAConfig()).talker.value
        packet = create_talker_sentence(talker, self.sentence, fields)
        return [packet.render()]

    @abstractmethod
    def get_fields(self, snapshot: NavigationSnapshot) -> Optional[list[str]]:
        """Returns the data fields of the sentence, excluding the address
        field, or ``None`` if a mandatory value is missing from the snapshot.
        """
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} sentence={self.sentence!r}>"


def encode_sentences(
    builders: Iterable[SentenceBuilder],
    snapshot: NavigationSnapshot,
    config: Optional[NMEAConfig] = None,
) -> list[str]:
    """Runs multiple sentence builders on the same snapshot and collects the
    sentences that they produced.

    Builders that do not have enough data are skipped silently. Builders
    that encounter a value outside its valid domain are logged and skipped;
    the remaining builders still run.
    """
    result: list[str] = []
    for builder in builders:
        try:
            sentences = builder.build(snapshot, config)
        except ValueOutOfRange as ex:
            log.warning(f"Skipping {builder.sentence} sentence: {ex}")
            continue

        if sentences:
            result.extend(sentences)

    return result


def steer_direction(cross_track_error: float) -> str:
    """Returns the direction to steer to correct the given cross-track error.

    A non-negative error means that the vessel is right of the track.
    """
    return "R" if cross_track_error >= 0 else "L"


def magnetic_bearing(
    snapshot: NavigationSnapshot, bearing_true: float
) -> Optional[float]:
    """Returns the magnetic bearing to the next waypoint, in radians.

    The bearing is taken from the snapshot directly if present; otherwise it
    is derived from the given true bearing and the magnetic variation.
    Returns ``None`` if neither source is available.
    """
    bearing = snapshot.number("nextPoint.bearingMagnetic")
    if bearing is not None:
        return bearing

    variation = snapshot.number("magneticVariation")
    if variation is not None:
        return bearing_true + variation

    return None
