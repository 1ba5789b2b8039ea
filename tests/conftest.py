from pathlib import Path

import pytest

from battherm.common.enums import BatteryStatus
from battherm.sensors.base import BatterySensor
from battherm.sensors.broadcast import BatteryBroadcast
from battherm.session import BatterySession
from battherm.settings.user import UserSettings


class FakeSensor(BatterySensor):
    """Sensor returning whatever broadcast the test sets."""

    source = "fake"

    def __init__(self, broadcast: BatteryBroadcast | None = None) -> None:
        super().__init__(poll_seconds=0.01)
        self.broadcast = broadcast or BatteryBroadcast()
        self.reads = 0

    def read(self) -> BatteryBroadcast:
        self.reads += 1
        return self.broadcast


def make_broadcast(
    tenths: int = 250, level: int = 80, scale: int = 100, status: BatteryStatus = BatteryStatus.DISCHARGING
) -> BatteryBroadcast:
    return BatteryBroadcast(level=level, scale=scale, temperature_tenths=tenths, status=status)


@pytest.fixture
def session() -> BatterySession:
    return BatterySession()


@pytest.fixture
def fake_sensor() -> FakeSensor:
    return FakeSensor(make_broadcast())


@pytest.fixture
def user_settings(tmp_path: Path) -> UserSettings:
    return UserSettings(
        units="fahrenheit",
        sensor={"source": "simulated", "poll_seconds": 0.01},
        display_width=300,
        display_height=300,
        render_seconds=0.01,
        output_dir=str(tmp_path / "out"),
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(
        "units: celsius\n"
        "sensor:\n"
        "  source: simulated\n"
        "  poll_seconds: 0.01\n"
        "display_width: 200\n"
        "display_height: 200\n"
        "render_seconds: 0.01\n"
        f"output_dir: {tmp_path / 'out'}\n",
        encoding="utf-8",
    )
    return path
