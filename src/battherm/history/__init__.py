"""Session-scoped sample history."""

from battherm.history.buffers import LiveBuffer, SnapshotBuffer

__all__ = ["LiveBuffer", "SnapshotBuffer"]
