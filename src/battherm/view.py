"""Live / snapshot view state for the temperature graph."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from battherm.common.enums import GraphMode
from battherm.history.buffers import SnapshotBuffer
from battherm.models.samples import SnapshotPoint

logger: Final = logging.getLogger(__name__)


@dataclass(frozen=True)
class LiveView:
    """Graph follows the live buffer as it fills."""

    mode: GraphMode = GraphMode.LIVE


@dataclass(frozen=True)
class SnapshotView:
    """Graph shows the snapshot history as it was when the view was entered."""

    points: tuple[SnapshotPoint, ...] = ()
    mode: GraphMode = GraphMode.SNAPSHOT


GraphView = LiveView | SnapshotView


class ViewController:
    """Two-state toggle between the live and snapshot graphs.

    Entering SNAPSHOT freezes a copy of the snapshot buffer so further
    background appends do not move the displayed trend. Returning to LIVE
    drops that copy. Neither transition mutates any buffer.
    """

    def __init__(self, snapshot_buffer: SnapshotBuffer) -> None:
        self._snapshot_buffer = snapshot_buffer
        self._view: GraphView = LiveView()

    @property
    def view(self) -> GraphView:
        return self._view

    @property
    def mode(self) -> GraphMode:
        return self._view.mode

    @property
    def frozen_points(self) -> tuple[SnapshotPoint, ...] | None:
        """The frozen snapshot copy, or None while in LIVE."""
        if isinstance(self._view, SnapshotView):
            return self._view.points
        return None

    def enter_snapshot(self) -> SnapshotView:
        """Switch to SNAPSHOT, capturing the buffer if coming from LIVE."""
        if isinstance(self._view, SnapshotView):
            return self._view
        self._view = SnapshotView(self._snapshot_buffer.frozen())
        logger.info("Graph → snapshot (%d points frozen)", len(self._view.points))
        return self._view

    def enter_live(self) -> LiveView:
        """Switch to LIVE, dropping any frozen snapshot copy."""
        if not isinstance(self._view, LiveView):
            self._view = LiveView()
            logger.info("Graph → live")
        return self._view

    def toggle(self) -> GraphView:
        """Flip between LIVE and SNAPSHOT."""
        if isinstance(self._view, LiveView):
            return self.enter_snapshot()
        return self.enter_live()
