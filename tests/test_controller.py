import asyncio
from pathlib import Path

from PIL import Image

from battherm.common.enums import GraphMode, TemperatureUnit
from battherm.controller import ThermometerApp
from battherm.display.protocols import MockDisplay
from battherm.scheduling import SamplingSettings
from battherm.settings import ApplicationSettings, UserSettings
from battherm.sensors import SimulatedBatterySensor

from conftest import FakeSensor


def _app(user_settings: UserSettings, **kwargs) -> ThermometerApp:
    kwargs.setdefault("display_driver", MockDisplay())
    return ThermometerApp(settings=user_settings, **kwargs)


def test_builds_components_from_settings(user_settings: UserSettings) -> None:
    app = _app(user_settings)
    assert isinstance(app.sensor, SimulatedBatterySensor)
    assert app.unit is TemperatureUnit.FAHRENHEIT
    assert app.mode is GraphMode.LIVE


def test_loads_config_file(config_file: Path) -> None:
    app = ThermometerApp(config_file, display_driver=MockDisplay())
    assert app.unit is TemperatureUnit.CELSIUS
    assert app.config.display_width == 200


def test_render_once_writes_and_displays(user_settings: UserSettings, fake_sensor: FakeSensor) -> None:
    display = MockDisplay()
    app = _app(user_settings, sensor=fake_sensor, display_driver=display)
    fake_sensor.subscribe(app.session.on_broadcast)
    fake_sensor.poll()

    png = app.render_once()

    assert display.display_calls == [png]
    assert app.settings.paths.html_path.exists()
    with Image.open(png) as img:
        assert img.size == (300, 300)

    app.render_once(show=False)
    assert len(display.display_calls) == 1


def test_toggle_mode_and_cycle_unit(user_settings: UserSettings) -> None:
    app = _app(user_settings)
    assert app.toggle_mode() is GraphMode.SNAPSHOT
    assert app.toggle_mode() is GraphMode.LIVE

    assert app.cycle_unit() is TemperatureUnit.CELSIUS
    assert app.cycle_unit() is TemperatureUnit.KELVIN
    assert app.cycle_unit() is TemperatureUnit.FAHRENHEIT


def test_unit_change_applies_to_next_frame(user_settings: UserSettings, fake_sensor: FakeSensor) -> None:
    app = _app(user_settings, sensor=fake_sensor)
    fake_sensor.subscribe(app.session.on_broadcast)
    fake_sensor.poll()

    assert app.build_context()["temperature_text"] == "77°F"
    app.cycle_unit()
    assert app.build_context()["temperature_text"] == "25°C"
    app.cycle_unit()
    assert app.build_context()["temperature_text"] == "298K"


def test_run_for_duration_samples_and_tears_down(
    user_settings: UserSettings, fake_sensor: FakeSensor
) -> None:
    display = MockDisplay()
    app = _app(
        user_settings,
        sensor=fake_sensor,
        display_driver=display,
        app_settings=ApplicationSettings(
            user_settings, sampling=SamplingSettings(live_interval_ms=1, snapshot_interval_ms=5)
        ),
    )

    asyncio.run(app.run(duration=0.1))

    assert display.display_calls
    assert app.session.elapsed_seconds > 0
    assert len(app.session.snapshots) >= 1
    assert not app.scheduler.running
    assert not fake_sensor.subscribed


def test_run_zero_duration_still_tears_down(user_settings: UserSettings, fake_sensor: FakeSensor) -> None:
    app = _app(user_settings, sensor=fake_sensor)
    asyncio.run(app.run(duration=0))
    assert not app.scheduler.running
    assert not fake_sensor.subscribed
