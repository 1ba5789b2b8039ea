"""Session state shared by the sensor, the sampling ticks and the views."""

from __future__ import annotations

import logging
from typing import Final

from battherm.history.buffers import LiveBuffer, SnapshotBuffer
from battherm.models.samples import LatestReading, LiveSample, SnapshotPoint
from battherm.sensors.broadcast import BatteryBroadcast
from battherm.view import ViewController

logger: Final = logging.getLogger(__name__)


class BatterySession:
    """Everything one thermometer session holds in memory.

    Owns the latest sensor reading, the session clock, both sample buffers
    and the view controller. Nothing here survives the process.

    All mutation happens on a single event loop through synchronous,
    run-to-completion methods, so no tick ever observes a partially
    applied update.
    """

    def __init__(
        self,
        live: LiveBuffer | None = None,
        snapshots: SnapshotBuffer | None = None,
    ) -> None:
        self.reading = LatestReading()
        self.elapsed_seconds = 0
        self.live = live if live is not None else LiveBuffer()
        self.snapshots = snapshots if snapshots is not None else SnapshotBuffer()
        self.view = ViewController(self.snapshots)

    def on_broadcast(self, broadcast: BatteryBroadcast) -> None:
        """Apply a battery broadcast to the latest reading.

        An absent temperature keeps the previous one; battery level and
        charging state are replaced on every broadcast. The very first
        temperature seeds the live buffer at second 0 so the chart has a
        bar before the first tick.
        """
        self.reading.battery_percent = broadcast.battery_percent
        self.reading.is_charging = broadcast.is_charging

        temp_c = broadcast.temperature_c
        if temp_c is None:
            return
        self.reading.temperature_c = temp_c
        if not self.live:
            self.live.append(0, temp_c)
            logger.debug("First reading %.1f°C seeded the live chart", temp_c)

    def live_tick(self) -> LiveSample | None:
        """Advance the session clock and record a live sample.

        Skipped (clock not advanced) while no temperature is known.
        """
        temp_c = self.reading.temperature_c
        if temp_c is None:
            return None
        self.elapsed_seconds += 1
        return self.live.append(self.elapsed_seconds, temp_c)

    def snapshot_tick(self) -> SnapshotPoint | None:
        """Record a long-term point if temperature and battery are both known.

        Also skipped when the session clock has not advanced past the newest
        point, since snapshot seconds must be strictly increasing.
        """
        if not self.reading.is_complete:
            return None
        latest = self.snapshots.latest
        if latest is not None and latest.second >= self.elapsed_seconds:
            logger.debug("Session clock has not advanced since %ds; snapshot skipped", latest.second)
            return None
        return self.snapshots.append(
            self.elapsed_seconds,
            self.reading.temperature_c,
            self.reading.battery_percent,
        )
