"""Internal application settings derived from user settings."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from battherm.scheduling.models import SamplingSettings
from battherm.settings.user import UserSettings


@dataclass
class AppPaths:
    """Application file and directory paths.

    Centralizes template locations and the files each rendered frame is
    written to.
    """

    templates_dir: Path
    output_dir: Path
    dashboard_html: str = "dashboard.html"
    dashboard_png: str = "dashboard.png"

    @classmethod
    def from_settings(cls, user_settings: UserSettings) -> AppPaths:
        """Create paths from the packaged templates and the configured output dir."""
        return cls(
            templates_dir=Path(__file__).parents[1] / "templates",
            output_dir=Path(user_settings.output_dir),
        )

    @property
    def html_path(self) -> Path:
        return self.output_dir / self.dashboard_html

    @property
    def png_path(self) -> Path:
        return self.output_dir / self.dashboard_png


class ApplicationSettings:
    """Application settings container.

    Combines user-provided configuration with application defaults:

    - Path configuration (templates, output files)
    - Sampling periods for the live and snapshot timers

    Examples:
        user_settings = UserSettings.load()
        app_settings = ApplicationSettings(user_settings)
        png = app_settings.paths.png_path
    """

    def __init__(
        self,
        user_settings: UserSettings,
        paths: AppPaths | None = None,
        sampling: SamplingSettings | None = None,
    ):
        """Initialize application settings with configuration sources."""
        self.user = user_settings
        self.paths = paths or AppPaths.from_settings(user_settings)
        self.sampling = sampling or SamplingSettings()
