"""Temperature unit conversion utilities."""

from __future__ import annotations

from typing import ClassVar

from battherm.common.enums import TemperatureBand, TemperatureUnit


class UnitConverter:
    """Temperature unit conversion utilities.

    Converts battery readings (always carried in Celsius) to the unit the
    user picked for display, and provides:
    - Unit suffixes (°C, °F, K)
    - Formatted temperature strings
    - Seven-band display colours with unit-specific thresholds

    Every method is a total function over finite floats.
    """

    SUFFIXES: ClassVar[dict[TemperatureUnit, str]] = {
        TemperatureUnit.CELSIUS: "°C",
        TemperatureUnit.FAHRENHEIT: "°F",
        TemperatureUnit.KELVIN: "K",
    }

    # Exclusive upper bounds per band, BLUE through ORANGE_RED; anything
    # at or above the last bound is RED.
    BAND_LIMITS: ClassVar[dict[TemperatureUnit, list[float]]] = {
        TemperatureUnit.FAHRENHEIT: [50, 70, 80, 90, 100, 110],
        TemperatureUnit.CELSIUS: [10, 21, 27, 32, 38, 43],
        TemperatureUnit.KELVIN: [283, 294, 300, 305, 311, 316],
    }

    BANDS: ClassVar[list[TemperatureBand]] = list(TemperatureBand)

    # Tap-to-cycle order
    CYCLE: ClassVar[dict[TemperatureUnit, TemperatureUnit]] = {
        TemperatureUnit.FAHRENHEIT: TemperatureUnit.CELSIUS,
        TemperatureUnit.CELSIUS: TemperatureUnit.KELVIN,
        TemperatureUnit.KELVIN: TemperatureUnit.FAHRENHEIT,
    }

    @staticmethod
    def to_fahrenheit(temp_c: float) -> float:
        """Convert °C → °F."""
        return temp_c * 9 / 5 + 32

    @staticmethod
    def to_kelvin(temp_c: float) -> float:
        """Convert °C → K."""
        return temp_c + 273.15

    @classmethod
    def convert(cls, temp_c: float, unit: TemperatureUnit) -> float:
        """Convert a Celsius reading to the target display unit."""
        if unit is TemperatureUnit.FAHRENHEIT:
            return cls.to_fahrenheit(temp_c)
        if unit is TemperatureUnit.KELVIN:
            return cls.to_kelvin(temp_c)
        return temp_c

    @staticmethod
    def to_celsius(value: float, unit: TemperatureUnit) -> float:
        """Convert a value expressed in ``unit`` back to Celsius."""
        if unit is TemperatureUnit.FAHRENHEIT:
            return (value - 32) * 5 / 9
        if unit is TemperatureUnit.KELVIN:
            return value - 273.15
        return value

    @classmethod
    def unit_suffix(cls, unit: TemperatureUnit) -> str:
        """Return the display label for a unit."""
        return cls.SUFFIXES[unit]

    @classmethod
    def display_color(cls, value: float, unit: TemperatureUnit) -> TemperatureBand:
        """Bucket a temperature already expressed in ``unit`` into a colour band.

        Args:
            value: Temperature in the target unit
            unit: Unit the value is expressed in

        Returns:
            One of the seven TemperatureBand members
        """
        for band, limit in zip(cls.BANDS, cls.BAND_LIMITS[unit]):
            if value < limit:
                return band
        return TemperatureBand.RED

    @classmethod
    def color_for_celsius(cls, temp_c: float, unit: TemperatureUnit) -> TemperatureBand:
        """Convert a Celsius reading to ``unit`` and return its colour band."""
        return cls.display_color(cls.convert(temp_c, unit), unit)

    @classmethod
    def format_temperature(cls, temp_c: float, unit: TemperatureUnit) -> str:
        """Format a Celsius reading in the display unit (0 dp), e.g. ``77°F``."""
        return f"{cls.convert(temp_c, unit):.0f}{cls.unit_suffix(unit)}"

    @classmethod
    def next_unit(cls, unit: TemperatureUnit) -> TemperatureUnit:
        """Return the next unit in the F → C → K cycle."""
        return cls.CYCLE[unit]
