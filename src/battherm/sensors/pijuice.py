"""PiJuice HAT battery sensor."""

from __future__ import annotations

import logging
from typing import Any, Final, cast

from battherm.common.enums import BatteryStatus
from battherm.constants import TEMPERATURE_UNSET
from battherm.errors import SensorUnavailableError
from battherm.sensors.base import BatterySensor
from battherm.sensors.broadcast import BatteryBroadcast
from battherm.types.pijuice import PiJuiceLike, PiJuiceResult, PiJuiceStatusData

logger: Final = logging.getLogger(__name__)


def _data(result: PiJuiceResult) -> Any | None:
    """Unwrap a PiJuice result envelope, None on error."""
    if result.get("error", "NO_ERROR") != "NO_ERROR":
        logger.debug("PiJuice call failed: %s", result.get("error"))
        return None
    return result.get("data")


class PiJuiceBatterySensor(BatterySensor):
    """Battery sensor reading a PiJuice HAT over I2C."""

    source = "pijuice"

    def __init__(self, pijuice: PiJuiceLike | None = None, poll_seconds: float = 1.0) -> None:
        """Initialize the sensor.

        Args:
            pijuice: Optional pre-configured PiJuice object (useful for testing)
            poll_seconds: Seconds between reads

        Raises:
            SensorUnavailableError: If no PiJuice could be opened
        """
        super().__init__(poll_seconds)
        self.pijuice = pijuice or self._initialize_pijuice()

    def _initialize_pijuice(self) -> PiJuiceLike:
        try:
            import pijuice  # type: ignore[import-not-found]

            return pijuice.PiJuice(1, 0x14)  # type: ignore[no-any-return]
        except Exception as exc:
            raise SensorUnavailableError(self.source, "PiJuice not available", exc) from exc

    def _status(self, level: int | None) -> BatteryStatus:
        data = _data(self.pijuice.status.GetStatus())
        if not isinstance(data, dict):
            return BatteryStatus.UNKNOWN
        battery = cast(PiJuiceStatusData, data).get("battery")
        if not isinstance(battery, str):
            return BatteryStatus.UNKNOWN
        if battery.startswith("CHARGING"):
            return BatteryStatus.FULL if level is not None and level >= 100 else BatteryStatus.CHARGING
        if battery == "NORMAL":
            return BatteryStatus.DISCHARGING
        return BatteryStatus.UNKNOWN

    def read(self) -> BatteryBroadcast:
        level = _data(self.pijuice.status.GetChargeLevel())
        temp_c = _data(self.pijuice.status.GetBatteryTemperature())

        level = int(level) if isinstance(level, (int, float)) else None
        tenths = round(temp_c * 10) if isinstance(temp_c, (int, float)) else TEMPERATURE_UNSET
        return BatteryBroadcast(
            level=level if level is not None else -1,
            scale=100,
            temperature_tenths=tenths,
            status=self._status(level),
        )
