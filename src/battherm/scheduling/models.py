"""Data models for sampling settings."""

from __future__ import annotations

from dataclasses import dataclass

from battherm.constants import LIVE_SAMPLE_INTERVAL_MS, SNAPSHOT_SAMPLE_INTERVAL_MS


@dataclass(frozen=True)
class SamplingSettings:
    """Tick periods for the live and snapshot timers."""

    live_interval_ms: int = LIVE_SAMPLE_INTERVAL_MS
    snapshot_interval_ms: int = SNAPSHOT_SAMPLE_INTERVAL_MS

    @property
    def live_interval(self) -> float:
        """Live tick period in seconds."""
        return self.live_interval_ms / 1000

    @property
    def snapshot_interval(self) -> float:
        """Snapshot tick period in seconds."""
        return self.snapshot_interval_ms / 1000
