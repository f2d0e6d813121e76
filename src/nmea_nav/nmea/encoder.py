from typing import Callable, Union

from .packet import NMEAPacket

__all__ = ("create_nmea_encoder",)


class NMEAEncoder:
    """NMEA-0183 sentence encoder."""

    def encode(self, packet: Union[NMEAPacket, str]) -> bytes:
        return str(packet).encode("ascii") + b"\r\n"


def create_nmea_encoder() -> Callable[[Union[NMEAPacket, str]], bytes]:
    """Creates an NMEA-0183 encoder function that turns sentences into the
    byte sequence that is sent on the wire, terminated by CR-LF.

    Returns:
        the encoder function
    """
    return NMEAEncoder().encode
