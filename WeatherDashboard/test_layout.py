"""Tests for layout and formatting logic."""
import pytest
from datetime import date
from weather_data import WeatherObservation
from layout import format_average_label, format_rainy_days_label, format_table


@pytest.fixture
def hot_days():
    """Rows returned by a threshold query."""
    return [
        WeatherObservation(date(2023, 8, 1), 32.5, 65, 0.0),
        WeatherObservation(date(2023, 7, 5), 31.0, 50, 12.7),
    ]


def test_average_label():
    """Test label for a month with data."""
    assert format_average_label("August", 25.25) == "Average temperature for August: 25.25°C"


def test_average_label_rounds_to_two_places():
    assert format_average_label("January", -1.5333333) == "Average temperature for January: -1.53°C"


def test_average_label_no_data():
    """NaN average becomes a no-data message."""
    assert format_average_label("March", float("nan")) == "No data available for March."


def test_rainy_days_label():
    assert format_rainy_days_label(0) == "Rainy days: 0"
    assert format_rainy_days_label(4) == "Rainy days: 4"


def test_table_header_only_when_empty():
    """Empty result still shows headers and a rule."""
    lines = format_table([])

    assert len(lines) == 2
    assert lines[0].split(" | ") == ["Date", "Temperature (°C)", "Humidity (%)", "Precipitation"]
    assert set(lines[1]) == {"-", "+"}


def test_table_rows(hot_days):
    """One line per observation, in order, with every field shown."""
    lines = format_table(hot_days)

    assert len(lines) == 4
    first = [cell.strip() for cell in lines[2].split("|")]
    second = [cell.strip() for cell in lines[3].split("|")]
    assert first == ["2023-08-01", "32.5", "65", "0.0"]
    assert second == ["2023-07-05", "31.0", "50", "12.7"]


def test_table_columns_aligned(hot_days):
    """Every data line has the same width as the rule."""
    lines = format_table(hot_days)

    assert len(lines[2]) == len(lines[1])
    assert len(lines[3]) == len(lines[1])


def test_table_widens_for_long_values():
    """Columns grow to fit values wider than the header."""
    obs = WeatherObservation(date(2023, 1, 1), -1234567890123.25, 1, 0.0)

    lines = format_table([obs])

    assert "-1234567890123.25" in lines[2]
    assert len(lines[2]) == len(lines[1])
