"""Data models for battherm."""

from battherm.models.samples import LatestReading, LiveSample, SnapshotPoint

__all__ = ["LatestReading", "LiveSample", "SnapshotPoint"]
