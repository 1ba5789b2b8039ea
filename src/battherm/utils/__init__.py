"""Common utility functions and helpers for the battherm package."""

from battherm.utils.formatting import (
    format_percentage,
    live_axis_label,
    percent_axis_label,
    snapshot_axis_label,
)
from battherm.utils.units import UnitConverter

__all__ = [
    "UnitConverter",
    "format_percentage",
    "live_axis_label",
    "percent_axis_label",
    "snapshot_axis_label",
]
