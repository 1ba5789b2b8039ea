"""Battery sensor sources."""

from __future__ import annotations

from typing import TYPE_CHECKING

from battherm.sensors.base import BatterySensor, BroadcastCallback
from battherm.sensors.broadcast import BatteryBroadcast
from battherm.sensors.pijuice import PiJuiceBatterySensor
from battherm.sensors.simulated import SimulatedBatterySensor
from battherm.sensors.sysfs import SysfsBatterySensor

if TYPE_CHECKING:
    from battherm.settings.user import SensorSettings


def create_sensor(settings: "SensorSettings") -> BatterySensor:
    """Build the sensor source selected in the user settings.

    Raises:
        SensorUnavailableError: If the selected source cannot be opened
    """
    if settings.source == "pijuice":
        return PiJuiceBatterySensor(poll_seconds=settings.poll_seconds)
    if settings.source == "simulated":
        return SimulatedBatterySensor(poll_seconds=settings.poll_seconds)
    return SysfsBatterySensor(
        power_supply=settings.power_supply,
        sysfs_root=settings.sysfs_root,
        poll_seconds=settings.poll_seconds,
    )


__all__ = [
    "BatteryBroadcast",
    "BatterySensor",
    "BroadcastCallback",
    "PiJuiceBatterySensor",
    "SimulatedBatterySensor",
    "SysfsBatterySensor",
    "create_sensor",
]
