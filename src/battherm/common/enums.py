from enum import Enum, IntEnum


class TemperatureUnit(Enum):
    """Temperature display unit."""

    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"
    KELVIN = "kelvin"


class GraphMode(Enum):
    """Graph modes.

    LIVE shows the last 60 seconds, updating every second. SNAPSHOT shows a
    frozen long-term view that does not update while shown.
    """

    LIVE = "live"
    SNAPSHOT = "snapshot"


class BatteryStatus(IntEnum):
    """Battery status codes as reported by the platform battery broadcast."""

    UNKNOWN = 1
    CHARGING = 2
    DISCHARGING = 3
    NOT_CHARGING = 4
    FULL = 5

    @property
    def is_charging(self) -> bool:
        return self in (BatteryStatus.CHARGING, BatteryStatus.FULL)


class TemperatureBand(Enum):
    """Seven display colour bands, coldest first."""

    BLUE = "#0000FF"
    CYAN = "#00FFFF"
    GREEN = "#00FF00"
    YELLOW = "#FFFF00"
    ORANGE = "#FFA500"
    ORANGE_RED = "#FF6B35"
    RED = "#FF0000"

    @property
    def hex(self) -> str:
        return self.value
