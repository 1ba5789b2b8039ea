"""Data models for battery readings and chart samples."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LatestReading:
    """Most recent values received from the battery sensor.

    A single current-value cell, not a history. Any field not yet received
    is ``None``. Only the sensor update handler writes to it; both sampling
    ticks read from it.
    """

    temperature_c: float | None = None
    battery_percent: float | None = None
    is_charging: bool = False

    @property
    def has_temperature(self) -> bool:
        return self.temperature_c is not None

    @property
    def is_complete(self) -> bool:
        """Return True when both temperature and battery level are known."""
        return self.temperature_c is not None and self.battery_percent is not None


@dataclass(frozen=True, slots=True)
class LiveSample:
    """One bar of the live chart, taken once per second."""

    second: int
    temperature_c: float


@dataclass(frozen=True, slots=True)
class SnapshotPoint:
    """A long-term point collected once per minute.

    Attributes:
        second: Session seconds elapsed when the point was taken
        temperature_c: Battery temperature in °C at that time
        battery_percent: Battery level in percent at that time
    """

    second: int
    temperature_c: float
    battery_percent: float
