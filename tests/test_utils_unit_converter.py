import pytest

from battherm.common.enums import TemperatureBand, TemperatureUnit
from battherm.utils.units import UnitConverter

F = TemperatureUnit.FAHRENHEIT
C = TemperatureUnit.CELSIUS
K = TemperatureUnit.KELVIN


@pytest.mark.parametrize(
    "celsius, unit, expected",
    [
        (0.0, F, 32.0),
        (100.0, F, 212.0),
        (-40.0, F, -40.0),
        (25.0, C, 25.0),
        (0.0, K, 273.15),
        (-273.15, K, 0.0),
    ],
)
def test_convert(celsius: float, unit: TemperatureUnit, expected: float) -> None:
    assert UnitConverter.convert(celsius, unit) == pytest.approx(expected)


@pytest.mark.parametrize("x", [-40.0, -12.5, 0.0, 32.0, 77.0, 98.6, 105.0, 150.0])
def test_fahrenheit_round_trip(x: float) -> None:
    once = UnitConverter.to_fahrenheit(UnitConverter.to_celsius(x, F))
    twice = UnitConverter.to_fahrenheit(UnitConverter.to_celsius(once, F))
    assert once == pytest.approx(x)
    assert twice == pytest.approx(x)


@pytest.mark.parametrize("unit", list(TemperatureUnit))
def test_to_celsius_inverts_convert(unit: TemperatureUnit) -> None:
    assert UnitConverter.to_celsius(UnitConverter.convert(31.4, unit), unit) == pytest.approx(31.4)


@pytest.mark.parametrize(
    "unit, suffix", [(F, "°F"), (C, "°C"), (K, "K")]
)
def test_unit_suffix(unit: TemperatureUnit, suffix: str) -> None:
    assert UnitConverter.unit_suffix(unit) == suffix


@pytest.mark.parametrize(
    "value, expected",
    [
        (20.0, TemperatureBand.BLUE),
        (49.9, TemperatureBand.BLUE),
        (50.0, TemperatureBand.CYAN),
        (70.0, TemperatureBand.GREEN),
        (85.0, TemperatureBand.YELLOW),
        (95.0, TemperatureBand.ORANGE),
        (105.0, TemperatureBand.ORANGE_RED),
        (110.0, TemperatureBand.RED),
        (140.0, TemperatureBand.RED),
    ],
)
def test_display_color_fahrenheit(value: float, expected: TemperatureBand) -> None:
    assert UnitConverter.display_color(value, F) is expected


@pytest.mark.parametrize(
    "value, unit, expected",
    [
        (9.9, C, TemperatureBand.BLUE),
        (21.0, C, TemperatureBand.GREEN),
        (40.0, C, TemperatureBand.ORANGE_RED),
        (43.0, C, TemperatureBand.RED),
        (282.0, K, TemperatureBand.BLUE),
        (303.0, K, TemperatureBand.YELLOW),
        (316.0, K, TemperatureBand.RED),
    ],
)
def test_display_color_other_units(
    value: float, unit: TemperatureUnit, expected: TemperatureBand
) -> None:
    assert UnitConverter.display_color(value, unit) is expected


def test_color_for_celsius_converts_first() -> None:
    # 25 °C is 77 °F: GREEN on the Fahrenheit scale, GREEN on Celsius too
    assert UnitConverter.color_for_celsius(25.0, F) is TemperatureBand.GREEN
    # 40.6 °C is ~105 °F
    assert UnitConverter.color_for_celsius(40.6, F) is TemperatureBand.ORANGE_RED


def test_format_temperature() -> None:
    assert UnitConverter.format_temperature(25.0, F) == "77°F"
    assert UnitConverter.format_temperature(25.0, C) == "25°C"
    assert UnitConverter.format_temperature(25.0, K) == "298K"


def test_next_unit_cycles_f_c_k() -> None:
    assert UnitConverter.next_unit(F) is C
    assert UnitConverter.next_unit(C) is K
    assert UnitConverter.next_unit(K) is F
