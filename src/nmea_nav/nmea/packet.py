"""NMEA-0183 sentence assembly and checksum computation."""

import pynmea2

from functools import lru_cache, reduce
from operator import xor
from typing import Any, Iterable, Sequence

from pynmea2 import NMEASentence as NMEAPacket

__all__ = (
    "NMEAPacket",
    "assemble_sentence",
    "checksum",
    "create_nmea_packet",
    "create_talker_sentence",
    "format_checksum_hex",
)


def checksum(body: str) -> int:
    """Computes the checksum of the body of an NMEA sentence.

    The checksum is the XOR of the character codes of the body, scanned from
    left to right and stopping at the first ``*`` character.

    Parameters:
        body: the body of the sentence, without the leading ``$``

    Returns:
        the checksum, between 0 and 255; zero for an empty body
    """
    body, _, _ = body.partition("*")
    return reduce(xor, map(ord, body), 0) & 0xFF


def format_checksum_hex(value: int) -> str:
    """Formats a checksum as exactly two uppercase hexadecimal digits."""
    return f"{value & 0xFF:02X}"


def assemble_sentence(fields: Iterable[str]) -> str:
    """Assembles an NMEA sentence from its fields.

    The first field is expected to be the address field (talker ID and
    sentence type, e.g. ``GPAPB``); a leading ``$`` is added unless it is
    already present. Checksum suffixes already embedded in any of the fields
    are stripped and the checksum is recomputed from scratch. Stripping happens
    field by field, so the fields following a stale suffix are kept.

    Parameters:
        fields: the fields of the sentence, in order

    Returns:
        the sentence in ``$<body>*<HH>`` form, without a line terminator
    """
    body = ",".join(field.partition("*")[0] for field in fields)
    if body.startswith("$"):
        body = body[1:]
    return f"${body}*{format_checksum_hex(checksum(body))}"


@lru_cache()
def _sentence_factory_from_type(type: str):
    if not type or "_" in type:
        raise RuntimeError(f"Invalid NMEA sentence: {type!r}")

    func = getattr(pynmea2, type.upper(), None)
    if func is None:
        raise RuntimeError(f"Invalid NMEA sentence: {type!r}")

    return func


def create_talker_sentence(talker: str, type: str, args: Sequence[Any]) -> NMEAPacket:
    """Creates an NMEA talker sentence with the given talker ID, packet type
    and arguments.

    The rendered form of the sentence is identical to what
    :func:`assemble_sentence` returns for the same fields.
    """
    factory = _sentence_factory_from_type(type)
    return factory(talker, type.upper(), [str(arg) for arg in args])


create_nmea_packet = create_talker_sentence
