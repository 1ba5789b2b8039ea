"""Linux power_supply battery sensor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import ClassVar, Final

from battherm.common.enums import BatteryStatus
from battherm.constants import TEMPERATURE_UNSET
from battherm.errors import SensorUnavailableError
from battherm.sensors.base import BatterySensor
from battherm.sensors.broadcast import BatteryBroadcast

logger: Final = logging.getLogger(__name__)


class SysfsBatterySensor(BatterySensor):
    """Battery sensor backed by ``/sys/class/power_supply/<name>``.

    The kernel exposes ``capacity`` (percent), ``temp`` (tenths of °C, only
    on some drivers) and ``status`` ("Charging", "Full", ...). Files that
    are missing or unreadable are reported as absent values.
    """

    source = "sysfs"

    STATUS_MAP: ClassVar[dict[str, BatteryStatus]] = {
        "charging": BatteryStatus.CHARGING,
        "discharging": BatteryStatus.DISCHARGING,
        "not charging": BatteryStatus.NOT_CHARGING,
        "full": BatteryStatus.FULL,
    }

    def __init__(
        self,
        power_supply: str = "BAT0",
        sysfs_root: Path | str = "/sys/class/power_supply",
        poll_seconds: float = 1.0,
    ) -> None:
        """Initialize the sensor.

        Args:
            power_supply: Name of the power_supply device (e.g. BAT0, battery)
            sysfs_root: Directory holding power_supply devices
            poll_seconds: Seconds between reads

        Raises:
            SensorUnavailableError: If the device directory does not exist
        """
        super().__init__(poll_seconds)
        self.path = Path(sysfs_root) / power_supply
        if not self.path.is_dir():
            raise SensorUnavailableError(self.source, f"No power supply at {self.path}")

    def _read_text(self, name: str) -> str | None:
        try:
            return (self.path / name).read_text(encoding="utf-8").strip()
        except OSError as exc:
            logger.debug("Could not read %s: %s", self.path / name, exc)
            return None

    def _read_int(self, name: str) -> int | None:
        raw = self._read_text(name)
        if raw is None:
            return None
        try:
            return int(raw)
        except ValueError:
            logger.warning("Ignoring non-numeric %s value %r", name, raw)
            return None

    def read(self) -> BatteryBroadcast:
        capacity = self._read_int("capacity")
        temp = self._read_int("temp")
        status_text = self._read_text("status") or ""
        return BatteryBroadcast(
            level=capacity if capacity is not None else -1,
            scale=100,
            temperature_tenths=temp if temp is not None else TEMPERATURE_UNSET,
            status=self.STATUS_MAP.get(status_text.lower(), BatteryStatus.UNKNOWN),
        )
