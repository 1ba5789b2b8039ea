"""Battery broadcast payload and its parsing rules."""

from __future__ import annotations

from dataclasses import dataclass

from battherm.common.enums import BatteryStatus
from battherm.constants import TEMPERATURE_UNSET


@dataclass(frozen=True)
class BatteryBroadcast:
    """One battery-changed notification from a sensor source.

    Mirrors the platform battery broadcast: raw level and scale, the
    temperature in tenths of a degree Celsius, and a status code. Negative
    level, non-positive scale and the ``TEMPERATURE_UNSET`` sentinel mark
    values the source did not report.
    """

    level: int = -1
    scale: int = -1
    temperature_tenths: int = TEMPERATURE_UNSET
    status: BatteryStatus = BatteryStatus.UNKNOWN

    @property
    def battery_percent(self) -> float | None:
        """Level as a percentage, or None when level or scale is unusable."""
        if self.level >= 0 and self.scale > 0:
            return self.level * 100 / self.scale
        return None

    @property
    def temperature_c(self) -> float | None:
        """Temperature in °C, or None when the sentinel was reported."""
        if self.temperature_tenths == TEMPERATURE_UNSET:
            return None
        return self.temperature_tenths / 10

    @property
    def is_charging(self) -> bool:
        return self.status.is_charging

