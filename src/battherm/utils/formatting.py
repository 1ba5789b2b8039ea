"""Text and axis-label formatting utilities."""

from __future__ import annotations


def format_percentage(value: float, decimals: int = 1) -> str:
    """Format a battery percentage.

    Args:
        value: Percentage (0-100)
        decimals: Decimal places to keep

    Returns:
        Formatted percentage string, e.g. ``85.0%``
    """
    return f"{value:.{decimals}f}%"


def live_axis_label(second: float) -> str:
    """Label for the live chart x-axis, which ticks every 15 seconds.

    Whole minutes read ``1m``, ``2m``; quarter minutes read ``.25m``,
    ``.50m``, ``.75m``. The origin and off-grid values are unlabelled.
    """
    seconds = int(second % 60)
    if seconds == 0:
        return f"{int(second / 60)}m" if second >= 60 else ""
    return {15: ".25m", 30: ".50m", 45: ".75m"}.get(seconds, "")


def snapshot_axis_label(second: float) -> str:
    """Label for the snapshot chart x-axis: every fifth minute, e.g. ``15m``."""
    minutes = int(second / 60)
    return f"{minutes}m" if minutes > 0 and minutes % 5 == 0 else ""


def percent_axis_label(value: float) -> str:
    """Label for the fixed 0-100 battery axis."""
    return f"{int(value)}%"
