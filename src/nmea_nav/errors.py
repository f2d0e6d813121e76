"""Base class for all the exceptions that are thrown from the NMEA navigation
package.
"""

from typing import Any, Optional

__all__ = ("Error", "ValueOutOfRange")


class Error(RuntimeError):
    """Base class for all exceptions that are thrown from the NMEA navigation
    package.
    """

    pass


class ValueOutOfRange(Error, ValueError):
    """Error thrown when a value is present but lies outside its physical
    domain (e.g., a latitude beyond 90 degrees) or is not finite.
    """

    def __init__(self, value: Any, name: Optional[str] = None, domain: str = ""):
        """Constructor.

        Parameters:
            value: the offending value
            name: the name of the quantity that the value represents
            domain: human-readable description of the valid domain
        """
        message = f"invalid {name or 'value'}: {value!r}"
        if domain:
            message += f", expected a finite number in {domain}"
        super().__init__(message)
        self.value = value
        self.name = name
