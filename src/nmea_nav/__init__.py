"""Main package for encoding marine navigation data into NMEA-0183 sentences."""

from .config import NMEAConfig
from .enums import Talker
from .errors import Error, ValueOutOfRange
from .snapshot import NavigationSnapshot
from .version import __version__, __version_info__

__all__ = (
    "__version__",
    "__version_info__",
    "Error",
    "NavigationSnapshot",
    "NMEAConfig",
    "Talker",
    "ValueOutOfRange",
)
