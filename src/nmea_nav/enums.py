from __future__ import annotations

from enum import Enum
from typing import Optional

__all__ = ("Talker",)


class Talker(Enum):
    """Enum representing the talker IDs that the sentence builders may use
    as the prefix of the sentences they emit.
    """

    GP = "GP"
    II = "II"

    @classmethod
    def from_value(cls, value: Optional[str | Talker]) -> Talker:
        """Returns the talker corresponding to the given configuration value.

        Matching is case-insensitive. Unset or unknown values fall back to
        the generic GPS talker, which has the widest compatibility.
        """
        if isinstance(value, Talker):
            return value

        try:
            return cls(str(value or "").strip().upper())
        except ValueError:
            return cls.GP

    def describe(self) -> str:
        return _talker_to_string[self]


_talker_to_string: dict[Talker, str] = {
    Talker.GP: "GPS receiver",
    Talker.II: "Integrated instrumentation",
}
