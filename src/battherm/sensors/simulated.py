"""Simulated battery sensor for previews and tests."""

from __future__ import annotations

import math

from battherm.common.enums import BatteryStatus
from battherm.sensors.base import BatterySensor
from battherm.sensors.broadcast import BatteryBroadcast


class SimulatedBatterySensor(BatterySensor):
    """Deterministic battery that warms and cools in a slow sine wave.

    Each read advances one step: the temperature oscillates around
    ``base_temp_c`` by ``swing_c`` over ``period_steps`` reads, and the
    level drops one percent every ``drain_steps`` reads.
    """

    source = "simulated"

    def __init__(
        self,
        base_temp_c: float = 30.0,
        swing_c: float = 5.0,
        period_steps: int = 600,
        start_level: int = 80,
        drain_steps: int = 120,
        charging: bool = False,
        poll_seconds: float = 1.0,
    ) -> None:
        super().__init__(poll_seconds)
        self.base_temp_c = base_temp_c
        self.swing_c = swing_c
        self.period_steps = period_steps
        self.start_level = start_level
        self.drain_steps = drain_steps
        self.charging = charging
        self.step = 0

    def read(self) -> BatteryBroadcast:
        phase = 2 * math.pi * self.step / self.period_steps
        temp_c = self.base_temp_c + self.swing_c * math.sin(phase)
        level = max(self.start_level - self.step // self.drain_steps, 0)
        self.step += 1

        if self.charging:
            status = BatteryStatus.FULL if level >= 100 else BatteryStatus.CHARGING
        else:
            status = BatteryStatus.DISCHARGING
        return BatteryBroadcast(
            level=level,
            scale=100,
            temperature_tenths=round(temp_c * 10),
            status=status,
        )
