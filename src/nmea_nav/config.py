"""Configuration of the sentence builders."""

from __future__ import annotations

import os

from dataclasses import dataclass
from typing import Mapping, Optional

from .enums import Talker

__all__ = ("NMEAConfig", "TALKER_ENV_VAR")


TALKER_ENV_VAR = "NMEA_TALKER"
"""Name of the environment variable that the legacy configuration reads the
talker ID from.
"""


@dataclass(frozen=True)
class NMEAConfig:
    """Configuration values that influence how sentences are rendered.

    The configuration is passed explicitly to every sentence builder; the
    builders themselves never look at the process environment.
    """

    talker: Talker = Talker.GP
    """The talker ID to use as the prefix of each sentence"""

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> NMEAConfig:
        """Creates a configuration object from the ``NMEA_TALKER`` environment
        variable. Unset or unknown values select the ``GP`` talker.

        Parameters:
            environ: the environment to read; defaults to ``os.environ``
        """
        if environ is None:
            environ = os.environ
        return cls(talker=Talker.from_value(environ.get(TALKER_ENV_VAR)))

    @classmethod
    def with_talker(cls, talker: Optional[str | Talker]) -> NMEAConfig:
        """Creates a configuration object that uses the given talker ID."""
        return cls(talker=Talker.from_value(talker))
