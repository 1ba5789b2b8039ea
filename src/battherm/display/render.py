"""Dashboard rendering components for the battery thermometer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final, cast

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape
from PIL import Image, ImageDraw, ImageFont

from battherm.common.enums import GraphMode, TemperatureUnit
from battherm.display.battery import BAR_BACKGROUND, BatteryBar, to_hex
from battherm.display.chart import Chart, ChartBuilder, LiveChart, SnapshotChart, Viewport
from battherm.session import BatterySession
from battherm.utils.units import UnitConverter

logger: Final = logging.getLogger(__name__)

WAITING_TEXT = "Waiting for battery data..."
BATTERY_UNAVAILABLE_TEXT = "Battery info unavailable"
ABOUT_TEXT = (
    "Live mode updates every second with a 60-second rolling window. "
    "Snapshot mode collects data every minute for long-term analysis."
)
NOTICE_TEXT = (
    "NOTICE: This measures BATTERY temperature only. "
    "Do NOT use for room, weather, or body temperature."
)
GRID_COLOR = "#3C3C3C"


def chart_viewport(mode: GraphMode, width: int, height: int) -> Viewport:
    """Pixel box for the graph; the snapshot graph gets the taller box."""
    if mode is GraphMode.SNAPSHOT:
        return Viewport(width * 0.15, height * 0.18, width * 0.7, height * 0.55)
    return Viewport(width * 0.18, height * 0.45, width * 0.64, height * 0.32)


class DashboardContextBuilder:
    """Builds template context from the session's current state.

    The builder:
    - Picks the chart matching the view mode (live buffer or frozen copy)
    - Converts the latest temperature to the display unit
    - Substitutes placeholder text for readings not received yet
    - Lays out the chart viewport for the output size
    """

    def __init__(
        self,
        unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT,
        width: int = 450,
        height: int = 450,
    ) -> None:
        self.unit = unit
        self.width = width
        self.height = height

    def build_chart(self, session: BatterySession) -> Chart:
        """Chart for the current view: live buffer or frozen snapshot copy."""
        builder = ChartBuilder(self.unit)
        frozen = session.view.frozen_points
        if frozen is not None:
            return builder.snapshot(frozen)
        return builder.live(session.live.frozen())

    def build_dashboard_context(self, session: BatterySession) -> dict[str, Any]:
        """Build complete context for the dashboard template.

        Args:
            session: Battery session to render

        Returns:
            Template context dictionary
        """
        reading = session.reading
        mode = session.view.mode
        chart = self.build_chart(session)

        temperature_text = (
            UnitConverter.format_temperature(reading.temperature_c, self.unit)
            if reading.temperature_c is not None
            else "--"
        )
        battery = (
            BatteryBar(reading.battery_percent, reading.is_charging)
            if reading.battery_percent is not None
            else None
        )

        return {
            "width": self.width,
            "height": self.height,
            "mode": mode.value,
            "unit": self.unit.value,
            "temperature_text": temperature_text,
            "waiting": not reading.has_temperature,
            "waiting_text": WAITING_TEXT,
            "battery": battery,
            "battery_unavailable_text": BATTERY_UNAVAILABLE_TEXT,
            "elapsed_seconds": session.elapsed_seconds,
            "chart": chart,
            "viewport": chart_viewport(mode, self.width, self.height),
            "about_text": ABOUT_TEXT,
            "notice_text": NOTICE_TEXT,
        }


class TemplateRenderer:
    """Handles the Jinja2 template environment and dashboard rendering.

    Renders the dashboard as a standalone HTML page with the chart drawn
    as inline SVG, suitable for previews in a browser.
    """

    dashboard_template: Template

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Initialize the template renderer.

        Args:
            templates_dir: Directory containing templates (default: packaged templates)
        """
        self.templates_dir = templates_dir or Path(__file__).parents[1] / "templates"

        self.env = Environment(
            loader=FileSystemLoader(self.templates_dir),
            autoescape=select_autoescape(["html", "j2"]),
        )
        self._register_filters()
        self.dashboard_template = self.env.get_template("dashboard.html.j2")

    def _register_filters(self) -> None:
        """Register custom filters with the Jinja environment."""
        self.env.filters.update(
            {
                "hex": to_hex,
                "round1": lambda v: round(v, 1),
            }
        )

    def render_dashboard(self, **context: Any) -> str:
        """Render the dashboard template with the provided context."""
        return cast(str, self.dashboard_template.render(**context))


class PillowChartRenderer:
    """Draws the dashboard straight to a PNG with Pillow.

    Uses the same context as the HTML template, so both outputs agree.
    """

    def __init__(self, background: str = "#000000", foreground: str = "#FFFFFF") -> None:
        self.background = background
        self.foreground = foreground
        self.font = ImageFont.load_default()

    def render_to_image(self, context: dict[str, Any], output_path: Path) -> Path:
        """Render a dashboard frame.

        Args:
            context: Context from DashboardContextBuilder
            output_path: Path where the PNG will be saved

        Returns:
            The output path
        """
        width, height = context["width"], context["height"]
        img = Image.new("RGB", (width, height), self.background)
        draw = ImageDraw.Draw(img)

        if context["mode"] == GraphMode.LIVE.value:
            self._draw_header(draw, context)

        chart: Chart = context["chart"]
        viewport: Viewport = context["viewport"]
        if isinstance(chart, SnapshotChart):
            self._draw_snapshot(draw, chart, viewport)
        else:
            self._draw_live(draw, chart, viewport)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        img.save(output_path, format="PNG")
        logger.debug("Dashboard frame written to %s", output_path)
        return output_path

    def _draw_header(self, draw: ImageDraw.ImageDraw, context: dict[str, Any]) -> None:
        width, height = context["width"], context["height"]
        draw.text(
            (width / 2, height * 0.18),
            context["temperature_text"],
            fill=self.foreground,
            font=self.font,
            anchor="mm",
        )
        if context["waiting"]:
            draw.text(
                (width / 2, height * 0.25),
                context["waiting_text"],
                fill=self.foreground,
                font=self.font,
                anchor="mm",
            )

        battery: BatteryBar | None = context["battery"]
        if battery is None:
            draw.text(
                (width / 2, height * 0.35),
                context["battery_unavailable_text"],
                fill=self.foreground,
                font=self.font,
                anchor="mm",
            )
            return

        left, right = width * 0.1, width * 0.9
        top, bottom = height * 0.32, height * 0.37
        draw.rectangle((left, top, right, bottom), fill=to_hex(BAR_BACKGROUND))
        fill_left = right - (right - left) * battery.fraction
        draw.rectangle((fill_left, top, right, bottom), fill=to_hex(battery.fill_color))
        label = f"+ {battery.label}" if battery.is_charging else battery.label
        draw.text(
            (left + 4, (top + bottom) / 2),
            label,
            fill=to_hex(battery.text_color),
            font=self.font,
            anchor="lm",
        )

    def _draw_grid(
        self, draw: ImageDraw.ImageDraw, chart: LiveChart | SnapshotChart, vp: Viewport
    ) -> None:
        for tick in chart.x_axis.ticks:
            x = vp.x(tick.value, chart.x_axis)
            draw.line((x, vp.top, x, vp.bottom), fill=GRID_COLOR)
            if tick.label:
                draw.text((x, vp.bottom + 4), tick.label, fill=self.foreground, font=self.font, anchor="mt")
        for tick in chart.y_axis.ticks:
            y = vp.y(tick.value, chart.y_axis)
            draw.line((vp.left, y, vp.right, y), fill=GRID_COLOR)
            draw.text((vp.left - 4, y), tick.label, fill=self.foreground, font=self.font, anchor="rm")

    def _draw_live(self, draw: ImageDraw.ImageDraw, chart: LiveChart, vp: Viewport) -> None:
        self._draw_grid(draw, chart, vp)
        half = vp.bar_width(chart.x_axis) / 2
        for bar in chart.bars:
            x = vp.x(bar.second, chart.x_axis)
            y = vp.y(bar.value, chart.y_axis)
            draw.rectangle((x - half, y, x + half, vp.bottom), fill=bar.color)

    def _draw_snapshot(self, draw: ImageDraw.ImageDraw, chart: SnapshotChart, vp: Viewport) -> None:
        self._draw_grid(draw, chart, vp)
        for tick in chart.right_axis.ticks:
            y = vp.y(tick.value, chart.right_axis)
            draw.text((vp.right + 4, y), tick.label, fill=self.foreground, font=self.font, anchor="lm")

        for series, axis, width in (
            (chart.temperature, chart.y_axis, 2),
            (chart.battery, chart.right_axis, 1),
        ):
            xy = [(vp.x(x, chart.x_axis), vp.y(y, axis)) for x, y in series.points]
            if len(xy) > 1:
                draw.line(xy, fill=series.color, width=width)
            elif xy:
                draw.point(xy, fill=series.color)
