"""Type definitions for battherm."""

from .pijuice import PiJuiceLike, PiJuiceResult, PiJuiceStatusData

__all__ = ["PiJuiceLike", "PiJuiceResult", "PiJuiceStatusData"]
