"""Bounded, time-ordered sample buffers backing the two chart views."""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Iterator
from typing import Deque, Final, Generic, TypeVar

from battherm.constants import LIVE_WINDOW_SECONDS, MAX_SNAPSHOT_POINTS
from battherm.models.samples import LiveSample, SnapshotPoint

logger: Final = logging.getLogger(__name__)

S = TypeVar("S", LiveSample, SnapshotPoint)


class _SampleBuffer(Generic[S]):
    """Append-at-tail, evict-at-head sequence ordered by session second."""

    def __init__(self) -> None:
        self._samples: Deque[S] = deque()

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[S]:
        return iter(self._samples)

    def __bool__(self) -> bool:
        return bool(self._samples)

    @property
    def latest(self) -> S | None:
        """Newest sample, or None while empty."""
        return self._samples[-1] if self._samples else None

    @property
    def oldest(self) -> S | None:
        """Oldest retained sample, or None while empty."""
        return self._samples[0] if self._samples else None

    def frozen(self) -> tuple[S, ...]:
        """Return an immutable point-in-time copy of the contents.

        Later appends and evictions do not affect the returned tuple.
        """
        return tuple(self._samples)

    def _check_order(self, second: int) -> None:
        if second < 0:
            raise ValueError(f"Session second cannot be negative: {second}")
        latest = self.latest
        if latest is not None and second <= latest.second:
            raise ValueError(
                f"Samples must be strictly increasing: {second} after {latest.second}"
            )


class LiveBuffer(_SampleBuffer[LiveSample]):
    """Rolling window of one-second samples for the live bar chart.

    The window is relative to the newest sample, not to wall-clock time: if
    no reading arrives for a while, the window does not advance.
    """

    def __init__(self, window_seconds: int = LIVE_WINDOW_SECONDS) -> None:
        super().__init__()
        self.window_seconds = window_seconds

    def append(self, second: int, temperature_c: float) -> LiveSample:
        """Push a sample, then drop every head entry older than the window.

        Entries whose second is below ``max(latest - window, 0)`` are
        evicted, so a single append may remove zero or more entries.

        Args:
            second: Session second of the sample
            temperature_c: Battery temperature in °C

        Returns:
            The appended sample
        """
        self._check_order(second)
        sample = LiveSample(second, temperature_c)
        self._samples.append(sample)

        cutoff = max(second - self.window_seconds, 0)
        while self._samples and self._samples[0].second < cutoff:
            self._samples.popleft()
        return sample

    @property
    def span(self) -> int:
        """Seconds between the oldest and newest retained samples."""
        if not self._samples:
            return 0
        return self._samples[-1].second - self._samples[0].second


class SnapshotBuffer(_SampleBuffer[SnapshotPoint]):
    """Capped history of one-minute points for the long-term trend chart."""

    def __init__(self, capacity: int = MAX_SNAPSHOT_POINTS) -> None:
        super().__init__()
        self.capacity = capacity

    def append(
        self,
        second: int,
        temperature_c: float | None,
        battery_percent: float | None,
    ) -> SnapshotPoint | None:
        """Record a point when both temperature and battery level are known.

        Once the buffer holds more than ``capacity`` points the single
        oldest point is evicted; one append evicts at most one point.

        Args:
            second: Session second of the point
            temperature_c: Battery temperature in °C, or None if unknown
            battery_percent: Battery level (0-100), or None if unknown

        Returns:
            The appended point, or None if the append was skipped
        """
        if temperature_c is None or battery_percent is None:
            return None

        self._check_order(second)
        point = SnapshotPoint(second, temperature_c, battery_percent)
        self._samples.append(point)
        if len(self._samples) > self.capacity:
            evicted = self._samples.popleft()
            logger.debug("Snapshot buffer full → evicted point at %ds", evicted.second)
        return point

    @property
    def is_full(self) -> bool:
        return len(self._samples) >= self.capacity
