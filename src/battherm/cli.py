"""Battery Thermometer CLI application.

This module provides the command-line interface for the battery
thermometer: the live display loop, one-off frame rendering and
configuration utilities.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path
from typing import Any, Final

import typer
import yaml
from pydantic import ValidationError

from battherm.common.enums import GraphMode
from battherm.controller import ThermometerApp
from battherm.display.protocols import MockDisplay
from battherm.errors import SensorUnavailableError
from battherm.settings.user import UserSettings

# ── CLI setup ────────────────────────────────────────────────────────────────
app = typer.Typer(help="Battery Thermometer CLI", add_completion=False)
config_app = typer.Typer(help="Config helpers")
app.add_typer(config_app, name="config")

logger: Final = logging.getLogger(__name__)  # Will be "battherm.cli"

# Options for the main commands
CONFIG_OPTION = typer.Option(..., "--config", "-c", exists=True, dir_okay=False)
DEBUG_OPTION = typer.Option(False, "--debug", help="Enable debug logging")
DURATION_OPTION = typer.Option(None, "--duration", "-d", min=0, help="Stop after N seconds")
MODE_OPTION = typer.Option(GraphMode.LIVE, "--mode", "-m", help="Graph to render")
DST_ARGUMENT = typer.Argument(..., help="Output config.yaml")


def _build_app(config: Path, debug: bool, **kwargs: Any) -> ThermometerApp:
    try:
        return ThermometerApp(config, debug=debug, **kwargs)
    except RuntimeError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    except SensorUnavailableError as exc:
        typer.secho(f"Battery sensor unavailable: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@app.command()
def run(
    config: Path = CONFIG_OPTION,
    debug: bool = DEBUG_OPTION,
    duration: float | None = DURATION_OPTION,
) -> None:
    """Run the thermometer: sample the battery and refresh the display."""
    thermometer = _build_app(config, debug)
    asyncio.run(thermometer.run(duration))


@app.command()
def render(
    config: Path = CONFIG_OPTION,
    mode: GraphMode = MODE_OPTION,
    debug: bool = DEBUG_OPTION,
) -> None:
    """Read the sensor once and write a single dashboard frame.

    The HTML and PNG land in the configured output directory; the display
    is not touched.
    """
    thermometer = _build_app(config, debug, display_driver=MockDisplay())
    thermometer.sensor.subscribe(thermometer.session.on_broadcast)
    thermometer.sensor.poll()
    thermometer.sensor.unsubscribe()
    if mode is GraphMode.SNAPSHOT:
        thermometer.toggle_mode()

    png = thermometer.render_once(show=False)
    typer.echo(f"Frame written to {png}")


# ───────────────────────── config sub-commands ───────────────────────────────
@config_app.command("validate")
def validate_config(file: Path):
    """Validate a YAML config file against the schema."""
    try:
        cfg = UserSettings.load(file)
        typer.echo(f"✅ Config valid ({cfg.units}, {cfg.sensor.source} sensor)")
    except (RuntimeError, FileNotFoundError) as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc


@config_app.command("wizard")
def wizard(dst: Path = DST_ARGUMENT):
    """Interactive prompt to create a config file."""
    typer.echo("Interactive config builder - press Enter for defaults.")

    while True:
        data: dict[str, Any] = {
            "units": typer.prompt("Units [fahrenheit|celsius|kelvin]", default="fahrenheit"),
            "sensor": {
                "source": typer.prompt("Sensor [sysfs|pijuice|simulated]", default="sysfs"),
                "power_supply": typer.prompt("Power supply name", default="BAT0"),
            },
        }
        try:
            cfg = UserSettings(**data)
            break  # valid → exit loop
        except ValidationError as err:
            typer.secho("\nConfig error(s):", fg=typer.colors.RED, err=True)
            for e in err.errors():
                loc = ".".join(str(part) for part in e["loc"])
                typer.secho(f"  • {loc} - {e['msg']}", fg=typer.colors.RED, err=True)
            typer.echo("Please re-enter the values.\n")

    dst.write_text(yaml.safe_dump(cfg.model_dump(), sort_keys=False), encoding="utf-8")
    typer.secho(f"Config written to {dst}", fg=typer.colors.GREEN)


# ───────────────────────── module entrypoint ────────────────────────────────
if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(0)
