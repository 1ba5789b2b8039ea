"""Chart models for the live and snapshot graphs.

The builders here turn buffer contents into plain data (bars, line series,
axis bounds and tick labels) already expressed in the display unit, so the
HTML and PNG renderers only have to draw.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field

from battherm.common.enums import GraphMode, TemperatureUnit
from battherm.constants import LIVE_WINDOW_SECONDS, SNAPSHOT_DEFAULT_HORIZON_SECONDS
from battherm.models.samples import LiveSample, SnapshotPoint
from battherm.utils.formatting import live_axis_label, percent_axis_label, snapshot_axis_label
from battherm.utils.units import UnitConverter

LIVE_TICK_SECONDS = 15
SNAPSHOT_TICK_SECONDS = 300
TEMPERATURE_LINE_COLOR = "#FF6B35"
BATTERY_LINE_COLOR = "#FFFF00"


@dataclass(frozen=True)
class Tick:
    value: float
    label: str


@dataclass(frozen=True)
class Axis:
    """Axis bounds plus labelled ticks."""

    minimum: float
    maximum: float
    ticks: tuple[Tick, ...] = ()

    @property
    def span(self) -> float:
        return self.maximum - self.minimum


@dataclass(frozen=True)
class Bar:
    second: int
    value: float
    color: str


@dataclass(frozen=True)
class LineSeries:
    label: str
    color: str
    points: tuple[tuple[float, float], ...]
    axis: str = "left"


@dataclass(frozen=True)
class LiveChart:
    """Bar chart of the last 60 seconds."""

    bars: tuple[Bar, ...]
    x_axis: Axis
    y_axis: Axis
    mode: GraphMode = field(default=GraphMode.LIVE, init=False)

    @property
    def is_empty(self) -> bool:
        return not self.bars


@dataclass(frozen=True)
class SnapshotChart:
    """Temperature and battery lines over the frozen long-term history."""

    temperature: LineSeries
    battery: LineSeries
    x_axis: Axis
    y_axis: Axis
    right_axis: Axis
    mode: GraphMode = field(default=GraphMode.SNAPSHOT, init=False)

    @property
    def is_empty(self) -> bool:
        return not self.temperature.points


Chart = LiveChart | SnapshotChart


def _ticks(
    minimum: float, maximum: float, step: float, label: Callable[[float], str]
) -> tuple[Tick, ...]:
    first = math.ceil(minimum / step) * step
    count = int((maximum - first) // step) + 1 if maximum >= first else 0
    return tuple(Tick(first + i * step, label(first + i * step)) for i in range(count))


def _value_axis(values: Iterable[float], unit: TemperatureUnit) -> Axis:
    """Temperature axis padded one degree past the data, with ~5 labels."""
    data = list(values)
    if not data:
        return Axis(0, 1)
    low = math.floor(min(data)) - 1
    high = math.ceil(max(data)) + 1
    step = max(1, math.ceil((high - low) / 5))
    suffix = UnitConverter.unit_suffix(unit)
    return Axis(low, high, _ticks(low, high, step, lambda v: f"{v:.0f}{suffix}"))


class ChartBuilder:
    """Builds chart models in the configured display unit."""

    def __init__(self, unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT) -> None:
        self.unit = unit

    def live(self, samples: Sequence[LiveSample]) -> LiveChart:
        """Bars coloured by temperature band, windowed to the newest 60 s."""
        bars = tuple(
            Bar(
                s.second,
                UnitConverter.convert(s.temperature_c, self.unit),
                UnitConverter.color_for_celsius(s.temperature_c, self.unit).hex,
            )
            for s in samples
        )
        if bars:
            last = bars[-1].second
            x_min, x_max = max(0, last - LIVE_WINDOW_SECONDS), last
        else:
            x_min, x_max = 0, LIVE_WINDOW_SECONDS
        x_axis = Axis(x_min, x_max, _ticks(x_min, x_max, LIVE_TICK_SECONDS, live_axis_label))
        return LiveChart(bars, x_axis, _value_axis((b.value for b in bars), self.unit))

    def snapshot(self, points: Sequence[SnapshotPoint]) -> SnapshotChart:
        """Overlaid temperature and battery lines from zero to at least 20 minutes."""
        temperature = tuple(
            (float(p.second), UnitConverter.convert(p.temperature_c, self.unit)) for p in points
        )
        battery = tuple((float(p.second), p.battery_percent) for p in points)

        last = points[-1].second if points else 0
        x_max = max(last, SNAPSHOT_DEFAULT_HORIZON_SECONDS)
        x_axis = Axis(0, x_max, _ticks(0, x_max, SNAPSHOT_TICK_SECONDS, snapshot_axis_label))
        right_axis = Axis(0, 100, _ticks(0, 100, 25, percent_axis_label))
        return SnapshotChart(
            temperature=LineSeries("Temperature", TEMPERATURE_LINE_COLOR, temperature),
            battery=LineSeries("Battery %", BATTERY_LINE_COLOR, battery, axis="right"),
            x_axis=x_axis,
            y_axis=_value_axis((v for _, v in temperature), self.unit),
            right_axis=right_axis,
        )


@dataclass(frozen=True)
class Viewport:
    """Pixel box a chart is drawn into, with data → pixel projection."""

    left: float
    top: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def x(self, value: float, axis: Axis) -> float:
        if axis.span <= 0:
            return self.left
        return self.left + (value - axis.minimum) / axis.span * self.width

    def y(self, value: float, axis: Axis) -> float:
        if axis.span <= 0:
            return self.bottom
        return self.bottom - (value - axis.minimum) / axis.span * self.height

    def bar_width(self, axis: Axis) -> float:
        """Width of a one-second bar, with a small gap."""
        slots = max(axis.span, 1) + 1
        return max(self.width / slots * 0.8, 1.0)
