"""Battery bar presentation."""

from __future__ import annotations

from dataclasses import dataclass

from battherm.constants import BATTERY_FULL_THRESHOLD
from battherm.utils.formatting import format_percentage

RGB = tuple[int, int, int]

BAR_BACKGROUND: RGB = (0x30, 0x30, 0x30)
FULL_COLOR: RGB = (0x4C, 0xAF, 0x50)  # green at 100%
EMPTY_COLOR: RGB = (0xF4, 0x43, 0x36)  # red at 0%


def lerp_color(a: RGB, b: RGB, t: float) -> RGB:
    """Linear interpolation between two RGB colours (t in 0..1)."""
    return tuple(round(ca + (cb - ca) * t) for ca, cb in zip(a, b))  # type: ignore[return-value]


def to_hex(color: RGB) -> str:
    return "#{:02X}{:02X}{:02X}".format(*color)


@dataclass(frozen=True)
class BatteryBar:
    """Battery level bar: fill shrinks toward the right as the level drops.

    The fill colour runs from green at 100% to red at 0%, and the label
    switches between white and black text to stay readable on the fill.
    """

    level: float
    is_charging: bool = False

    @property
    def clamped_level(self) -> float:
        return min(max(self.level, 0.0), 100.0)

    @property
    def fraction(self) -> float:
        return self.clamped_level / 100

    @property
    def fill_color(self) -> RGB:
        return lerp_color(FULL_COLOR, EMPTY_COLOR, 1 - self.fraction)

    @property
    def text_color(self) -> RGB:
        """White on dark fills, black on light ones (simple luma heuristic)."""
        r, g, b = (c / 255 for c in self.fill_color)
        brightness = 0.299 * r + 0.587 * g + 0.114 * b
        return (255, 255, 255) if brightness < 0.5 else (0, 0, 0)

    @property
    def label(self) -> str:
        return format_percentage(self.clamped_level)

    @property
    def is_full(self) -> bool:
        return self.clamped_level >= BATTERY_FULL_THRESHOLD
