"""Exception classes for battery thermometer operations.

Missing or malformed sensor data is never an error: it is represented as
an absent value. These exceptions cover the conditions that stop a sensor
source from being used at all.
"""

from __future__ import annotations


class BatteryThermometerError(Exception):
    """Base class for battherm errors."""


class SensorUnavailableError(BatteryThermometerError):
    """Raised when a battery sensor source cannot be opened.

    Includes the source name and, when available, the underlying exception.
    """

    def __init__(self, source: str, message: str, original_error: Exception | None = None) -> None:
        """Initialize with sensor source details.

        Args:
            source: Name of the sensor source (e.g. "sysfs", "pijuice")
            message: Human-readable error message
            original_error: The original exception that was caught
        """
        super().__init__(f"[{source}] {message}")
        self.source = source
        self.message = message
        self.original_error = original_error
