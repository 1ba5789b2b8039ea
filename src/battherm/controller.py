"""Core controller for the battery thermometer."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Final

from battherm.common.enums import GraphMode, TemperatureUnit
from battherm.display.framebuffer import FramebufferDisplay
from battherm.display.protocols import DisplayDriver
from battherm.display.render import DashboardContextBuilder, PillowChartRenderer, TemplateRenderer
from battherm.scheduling import SamplingScheduler
from battherm.sensors import BatterySensor, create_sensor
from battherm.session import BatterySession
from battherm.settings.application import ApplicationSettings
from battherm.settings.user import UserSettings
from battherm.utils.units import UnitConverter

logger: Final = logging.getLogger(__name__)


class ThermometerApp:
    """Main controller class for the battery thermometer.

    This class orchestrates the whole workflow:
    - Loading configuration and initializing components
    - Subscribing the session to the battery sensor
    - Running the live and snapshot sampling timers
    - Rendering dashboard frames and pushing them to the display
    - Switching graph mode and display unit

    All application dependencies are initialized here, making this the
    central coordination point for the application.
    """

    def __init__(
        self,
        config_path: Path | None = None,
        settings: UserSettings | None = None,
        sensor: BatterySensor | None = None,
        display_driver: DisplayDriver | None = None,
        template_renderer: TemplateRenderer | None = None,
        png_renderer: PillowChartRenderer | None = None,
        app_settings: ApplicationSettings | None = None,
        debug: bool = False,
    ):
        """Initialize the thermometer controller.

        Args:
            config_path: Path to config.yaml (ignored when settings is given)
            settings: Pre-built user settings
            sensor: Optional custom battery sensor
            display_driver: Optional custom display driver
            template_renderer: Optional custom HTML renderer
            png_renderer: Optional custom PNG renderer
            app_settings: Optional application settings (paths, sampling)
            debug: Enable debug logging

        Raises:
            SensorUnavailableError: If the configured sensor cannot be opened
        """
        # Configure logging
        logging.basicConfig(
            level=logging.DEBUG if debug else logging.INFO,
            format="%(asctime)s [%(levelname)s] %(message)s",
        )

        self.config = settings or UserSettings.load(config_path)
        self.settings = app_settings or ApplicationSettings(self.config)
        self.unit: TemperatureUnit = self.config.temperature_unit

        self.session = BatterySession()
        self.sensor = sensor or create_sensor(self.config.sensor)
        self.scheduler = SamplingScheduler(self.session, self.settings.sampling)

        self.template_renderer = template_renderer or TemplateRenderer(self.settings.paths.templates_dir)
        self.png_renderer = png_renderer or PillowChartRenderer()
        self.display_driver = display_driver or FramebufferDisplay(
            size=(self.config.display_width, self.config.display_height)
        )

    @property
    def mode(self) -> GraphMode:
        return self.session.view.mode

    def toggle_mode(self) -> GraphMode:
        """Switch between the live and snapshot graphs."""
        self.session.view.toggle()
        return self.mode

    def cycle_unit(self) -> TemperatureUnit:
        """Advance the display unit (°F → °C → K → °F)."""
        self.unit = UnitConverter.next_unit(self.unit)
        logger.info("Display unit → %s", self.unit.value)
        return self.unit

    def build_context(self) -> dict[str, Any]:
        builder = DashboardContextBuilder(
            self.unit, self.config.display_width, self.config.display_height
        )
        return builder.build_dashboard_context(self.session)

    def render_once(self, show: bool = True) -> Path:
        """Render the current state to HTML and PNG and optionally display it.

        Returns:
            Path of the PNG frame
        """
        ctx = self.build_context()
        paths = self.settings.paths
        paths.output_dir.mkdir(parents=True, exist_ok=True)

        html = self.template_renderer.render_dashboard(**ctx)
        paths.html_path.write_text(html, encoding="utf-8")
        png = self.png_renderer.render_to_image(ctx, paths.png_path)

        if show:
            self.display_driver.display_image(png)
        return png

    def start(self) -> None:
        """Subscribe to the sensor and start sensor polling and both timers."""
        self.sensor.subscribe(self.session.on_broadcast)
        self.sensor.start()
        self.scheduler.start()

    async def stop(self) -> None:
        """Stop the timers and the sensor. Safe to call more than once."""
        await self.scheduler.stop()
        await self.sensor.stop()

    async def run(self, duration: float | None = None) -> None:
        """Run the thermometer until cancelled or ``duration`` seconds pass.

        Args:
            duration: Optional run time in seconds (None runs forever)
        """
        loop = asyncio.get_running_loop()
        deadline = loop.time() + duration if duration is not None else None

        self.start()
        try:
            while deadline is None or loop.time() < deadline:
                self.render_once()
                await asyncio.sleep(self.config.render_seconds)
        finally:
            await self.stop()
            logger.info(
                "Session ended after %ds (%d live, %d snapshot samples)",
                self.session.elapsed_seconds,
                len(self.session.live),
                len(self.session.snapshots),
            )
