"""Sampling scheduler for the battery thermometer."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from types import TracebackType
from typing import Any, Final

from battherm.scheduling.models import SamplingSettings
from battherm.session import BatterySession

logger: Final = logging.getLogger(__name__)


class SamplingScheduler:
    """Runs the live and snapshot ticks on the current event loop.

    Two independent repeating tasks:
    - Live tick every second: advance the session clock, append a live sample
    - Snapshot tick every minute: append a long-term point

    Each task runs its tick to completion before sleeping again, so a timer
    never re-enters itself. The two tasks may interleave in any order.
    """

    def __init__(
        self,
        session: BatterySession,
        settings: SamplingSettings | None = None,
    ) -> None:
        self.session = session
        self.settings = settings or SamplingSettings()
        self._tasks: list[asyncio.Task[None]] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    async def _repeat(self, name: str, interval: float, tick: Callable[[], Any]) -> None:
        logger.debug("%s timer started (%.1fs)", name, interval)
        while True:
            await asyncio.sleep(interval)
            result = tick()
            if result is not None:
                logger.debug("%s tick → %s", name, result)

    def start(self) -> None:
        """Start both timers. Calling it again while running does nothing."""
        if self.running:
            return
        self._tasks = [
            asyncio.create_task(
                self._repeat("live", self.settings.live_interval, self.session.live_tick)
            ),
            asyncio.create_task(
                self._repeat(
                    "snapshot", self.settings.snapshot_interval, self.session.snapshot_tick
                )
            ),
        ]
        logger.info(
            "Sampling started (live %.1fs, snapshot %.1fs)",
            self.settings.live_interval,
            self.settings.snapshot_interval,
        )

    async def stop(self) -> None:
        """Cancel both timers and wait for them to finish. Safe to repeat."""
        if not self._tasks:
            return
        for task in self._tasks:
            task.cancel()
        for task in self._tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._tasks = []
        logger.info("Sampling stopped at %ds", self.session.elapsed_seconds)

    async def __aenter__(self) -> SamplingScheduler:
        self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.stop()


__all__ = ["SamplingScheduler", "SamplingSettings"]
