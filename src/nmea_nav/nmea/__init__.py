from .encoder import create_nmea_encoder
from .packet import (
    NMEAPacket,
    assemble_sentence,
    checksum,
    create_nmea_packet,
    create_talker_sentence,
    format_checksum_hex,
)

__all__ = (
    "assemble_sentence",
    "checksum",
    "create_nmea_encoder",
    "create_nmea_packet",
    "create_talker_sentence",
    "format_checksum_hex",
    "NMEAPacket",
)
