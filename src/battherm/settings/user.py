"""User-configurable settings loaded from config.yaml."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import ClassVar, Literal

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from battherm.common.enums import TemperatureUnit

# Load environment variables from .env file(s)
load_dotenv()

CONFIG_ENV_VAR = "BATTHERM_CONFIG"


def _interpolate_env(content: str) -> str:
    return re.sub(r"\$\{(\w+)\}", lambda m: os.getenv(m.group(1), ""), content)


class SensorSettings(BaseModel):
    """Where battery readings come from."""

    source: Literal["sysfs", "pijuice", "simulated"] = Field(
        "sysfs", description="Battery sensor source"
    )
    power_supply: str = Field(
        "BAT0", min_length=1, description="power_supply device name for the sysfs source"
    )
    sysfs_root: str = Field(
        "/sys/class/power_supply", description="Directory holding power_supply devices"
    )
    poll_seconds: float = Field(1.0, gt=0, description="Seconds between sensor reads")


class UserSettings(BaseModel):
    """User settings for the thermometer and its output image.

    These values can be overridden in config.yaml. Default dimensions suit a
    450x450 round watch face.
    """

    # Default search paths for configuration
    DEFAULT_CONFIG_PATHS: ClassVar[list[Path]] = [
        Path("config.yaml"),
        Path("~/.config/battherm/config.yaml").expanduser(),
        Path("/etc/battherm/config.yaml"),
    ]

    units: Literal["fahrenheit", "celsius", "kelvin"] = "fahrenheit"
    sensor: SensorSettings = Field(default_factory=SensorSettings)

    # Display settings
    display_width: int = Field(450, gt=0, description="Width of the output image in pixels")
    display_height: int = Field(450, gt=0, description="Height of the output image in pixels")
    render_seconds: float = Field(
        1.0, gt=0, description="Seconds between dashboard redraws"
    )
    output_dir: str = Field("preview", description="Directory for rendered dashboards")

    @property
    def temperature_unit(self) -> TemperatureUnit:
        """Configured display unit as an enum."""
        return TemperatureUnit(self.units)

    @classmethod
    def locate(cls, path: Path | None = None) -> Path:
        """Resolve which config file to read.

        An explicit path wins, then ``$BATTHERM_CONFIG``, then the first of
        ``DEFAULT_CONFIG_PATHS`` that exists.

        Raises:
            FileNotFoundError: If no config file can be found
        """
        if path is not None:
            return path

        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidate = Path(env_path)
            if not candidate.exists():
                raise FileNotFoundError(f"Config file from {CONFIG_ENV_VAR} not found: {candidate}")
            return candidate

        found = next((p for p in cls.DEFAULT_CONFIG_PATHS if p.exists()), None)
        if found is None:
            raise FileNotFoundError(
                f"No configuration file found. Create config.yaml or set {CONFIG_ENV_VAR}."
            )
        return found

    @classmethod
    def load(cls, path: Path | None = None) -> UserSettings:
        """Load and validate the YAML config.

        ``${VAR}`` references are replaced from the environment (and any
        ``.env`` file) before parsing.

        Raises:
            FileNotFoundError: If no config file is found
            RuntimeError: If the file cannot be read, parsed or validated
        """
        source = cls.locate(path)
        try:
            data = yaml.safe_load(_interpolate_env(source.read_text(encoding="utf-8"))) or {}
        except (OSError, yaml.YAMLError) as exc:
            raise RuntimeError(f"Unable to read config YAML {source}: {exc}") from exc

        try:
            return cls.model_validate(data)
        except ValidationError as err:
            raise RuntimeError(f"Invalid configuration in {source}:\n{err}") from err
