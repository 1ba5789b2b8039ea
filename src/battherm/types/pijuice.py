"""Type definitions for the PiJuice battery HAT interface."""

from typing import Any, Protocol, TypedDict, runtime_checkable


class PiJuiceResult(TypedDict, total=False):
    """Result envelope returned by every PiJuice call."""

    data: Any
    error: str


class PiJuiceStatusData(TypedDict, total=False):
    """Payload of ``status.GetStatus()``."""

    isFault: bool
    isButton: bool
    battery: str
    powerInput: str
    powerInput5vIo: str


@runtime_checkable
class StatusInterface(Protocol):
    """Protocol for PiJuice status API."""

    def GetStatus(self) -> PiJuiceResult: ...
    def GetChargeLevel(self) -> PiJuiceResult: ...
    def GetBatteryTemperature(self) -> PiJuiceResult: ...


@runtime_checkable
class PiJuiceLike(Protocol):
    """Protocol for objects that behave like PiJuice."""

    status: StatusInterface
