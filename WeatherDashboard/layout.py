"""Layout and formatting logic for the dashboard - pure functions for testability."""
import math
from typing import List, Sequence
from weather_data import WeatherObservation

TABLE_HEADERS = ("Date", "Temperature (°C)", "Humidity (%)", "Precipitation")
COLUMN_SEPARATOR = " | "


def format_average_label(month_name: str, average: float) -> str:
    """
    Build the label text for a monthly average.

    Args:
        month_name: Month as shown to the user (e.g. "August")
        average: Result of average_temperature_for_month (NaN when no data)

    Returns:
        Label text
    """
    if math.isnan(average):
        return f"No data available for {month_name}."
    return f"Average temperature for {month_name}: {average:.2f}°C"


def format_rainy_days_label(count: int) -> str:
    return f"Rainy days: {count}"


def format_table(observations: Sequence[WeatherObservation]) -> List[str]:
    """
    Format observations as an aligned text table.

    The first line holds the column headers, the second a rule, then one
    line per observation in the given order.

    Args:
        observations: Rows to show

    Returns:
        List of text lines (header and rule only when there are no rows)
    """
    cells = [[str(value) for value in obs.as_row()] for obs in observations]
    widths = [len(header) for header in TABLE_HEADERS]
    for row in cells:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))

    lines = [COLUMN_SEPARATOR.join(h.ljust(w) for h, w in zip(TABLE_HEADERS, widths)).rstrip()]
    lines.append("-+-".join("-" * w for w in widths))
    for row in cells:
        # Date left-aligned, numbers right-aligned
        line = COLUMN_SEPARATOR.join(
            [row[0].ljust(widths[0])] + [cell.rjust(w) for cell, w in zip(row[1:], widths[1:])]
        )
        lines.append(line)
    return lines
