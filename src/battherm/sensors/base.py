"""Polling battery sensor base class."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Final

from battherm.sensors.broadcast import BatteryBroadcast

logger: Final = logging.getLogger(__name__)

BroadcastCallback = Callable[[BatteryBroadcast], None]


class BatterySensor(ABC):
    """Delivers battery broadcasts to a single subscriber.

    Subclasses implement :meth:`read`, a short synchronous read of the
    underlying source. :meth:`start` polls it from an asyncio task and
    notifies the subscriber whenever the bundle changes, mirroring a
    "battery changed" broadcast: any time, possibly never, possibly more
    than once per second.
    """

    source: str = "battery"

    def __init__(self, poll_seconds: float = 1.0) -> None:
        self.poll_seconds = poll_seconds
        self._callback: BroadcastCallback | None = None
        self._last: BatteryBroadcast | None = None
        self._task: asyncio.Task[None] | None = None

    @abstractmethod
    def read(self) -> BatteryBroadcast:
        """Read the current battery state from the source."""
        ...

    @property
    def subscribed(self) -> bool:
        return self._callback is not None

    def subscribe(self, callback: BroadcastCallback) -> None:
        """Register the callback that receives broadcasts."""
        self._callback = callback
        self._last = None

    def unsubscribe(self) -> None:
        """Drop the subscriber. Calling this when not subscribed is harmless."""
        if self._callback is None:
            logger.debug("%s sensor already unsubscribed", self.source)
        self._callback = None

    def poll(self) -> BatteryBroadcast | None:
        """Read once and notify the subscriber if the bundle changed.

        Returns:
            The broadcast that was delivered, or None if nothing changed
        """
        broadcast = self.read()
        if broadcast == self._last:
            return None
        self._last = broadcast
        if self._callback is not None:
            logger.debug("Battery broadcast from %s: %s", self.source, broadcast)
            self._callback(broadcast)
        return broadcast

    async def _poll_loop(self) -> None:
        while True:
            try:
                self.poll()
            except Exception:
                logger.warning("%s sensor read failed, retrying", self.source, exc_info=True)
            await asyncio.sleep(self.poll_seconds)

    def start(self) -> None:
        """Start polling on the running event loop."""
        if self._task is None or self._task.done():
            self._task = asyncio.create_task(self._poll_loop())
            logger.info("%s sensor polling every %.1fs", self.source, self.poll_seconds)

    async def stop(self) -> None:
        """Stop polling and unsubscribe. Safe to call more than once."""
        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            except Exception:
                logger.warning("%s sensor poll task ended with an error", self.source, exc_info=True)
            self._task = None
        self.unsubscribe()
