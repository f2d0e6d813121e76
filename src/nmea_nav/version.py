"""Version information for the NMEA navigation sentence encoder."""

__version_info__ = (1, 0, 0)
__version__ = ".".join("{0}".format(x) for x in __version_info__)
