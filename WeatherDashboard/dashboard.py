"""Dashboard controller - holds the loaded data and turns queries into label/table text."""
import calendar
import logging
from typing import List, Optional, Union

from layout import format_average_label, format_rainy_days_label, format_table
from weather_analyzer import (
    WeatherFileError,
    WeatherFormatError,
    average_temperature_for_month,
    count_rainy_days,
    days_above_temperature,
    parse_csv,
    parse_decimal,
    weather_category,
)
from weather_data import WeatherObservation

MONTH_NAMES = [name for name in calendar.month_name if name]


def month_number(selection: Union[str, int]) -> int:
    """
    Convert a month selection to its number.

    Args:
        selection: English month name (any case) or a number 1-12

    Returns:
        Month number (1-12)

    Raises:
        ValueError: If the selection is not a month
    """
    if isinstance(selection, bool) or not isinstance(selection, (str, int)):
        raise ValueError(f"Unsupported month selection: {selection!r}")
    if isinstance(selection, int):
        number = selection
    else:
        text = selection.strip()
        if text.isascii() and text.isdigit():
            number = int(text)
        else:
            lowered = [name.lower() for name in MONTH_NAMES]
            if text.lower() not in lowered:
                raise ValueError(f"Unknown month: {selection!r}")
            return lowered.index(text.lower()) + 1
    if not 1 <= number <= 12:
        raise ValueError(f"Month out of range: {number}")
    return number


def parse_threshold(text: str) -> float:
    """Parse a user-typed temperature. Raises ValueError on anything but a plain decimal."""
    if not isinstance(text, str):
        raise ValueError(f"Unsupported temperature value: {text!r}")
    return parse_decimal(text)


class Dashboard:
    """
    Controller behind the dashboard view.

    Keeps the observations from the last successful load and the text shown
    in the result label, rainy-days label and threshold table. A failed load
    leaves the previous data in place.
    """

    def __init__(self):
        self.observations: Optional[List[WeatherObservation]] = None
        self.file_path: Optional[str] = None
        self.result_label = ""
        self.rainy_days_label = ""
        self.table_rows: Optional[List[WeatherObservation]] = None

    def load_file(self, file_path: Optional[str]) -> bool:
        """
        Load a CSV file and refresh the rainy-days label.

        Returns:
            True if the file was loaded, False otherwise
        """
        if not file_path:
            self.result_label = "No file selected."
            return False

        try:
            observations = parse_csv(file_path)
        except WeatherFileError as e:
            logging.error(f"Failed to load {file_path}: {e}")
            self.result_label = "Error reading weather data file."
            return False
        except WeatherFormatError as e:
            logging.error(f"Failed to load {file_path}: {e}")
            self.result_label = f"Invalid weather data in file (line {e.line_number})."
            return False

        self.observations = observations
        self.file_path = file_path
        self.table_rows = None
        self.result_label = ""
        self.rainy_days_label = format_rainy_days_label(count_rainy_days(observations))
        logging.info(f"Dashboard loaded {file_path}: {self.rainy_days_label}")
        return True

    def _has_data(self) -> bool:
        if not self.observations:
            self.result_label = "No weather data available."
            return False
        return True

    def calculate_average(self, selection: Optional[Union[str, int]]) -> Optional[float]:
        """
        Show the average temperature for the selected month.

        Returns:
            The average (NaN if the month has no data), or None if the
            selection was rejected or nothing is loaded
        """
        if selection is None or selection == "":
            self.result_label = "Please select a month."
            return None

        try:
            month = month_number(selection)
        except ValueError:
            logging.warning(f"Invalid month selection: {selection!r}")
            self.result_label = "Invalid month selected."
            return None

        if not self._has_data():
            return None

        average = average_temperature_for_month(self.observations, month)
        self.result_label = format_average_label(MONTH_NAMES[month - 1], average)
        return average

    def find_days_above(self, threshold_text: str) -> Optional[List[WeatherObservation]]:
        """
        Fill the table with days warmer than the typed threshold.

        Returns:
            The filtered observations, or None if the threshold was rejected
            or nothing is loaded
        """
        try:
            threshold = parse_threshold(threshold_text)
        except (TypeError, ValueError):
            logging.warning(f"Invalid threshold: {threshold_text!r}")
            self.result_label = "Invalid threshold value. Please enter a valid number."
            return None

        if not self._has_data():
            return None

        self.table_rows = days_above_temperature(self.observations, threshold)
        logging.debug(f"{len(self.table_rows)} days above {threshold}")
        return self.table_rows

    def classify(self, temperature_text: str) -> Optional[str]:
        """Return the category for a typed temperature, or None if it is not a number."""
        try:
            temperature = parse_threshold(temperature_text)
        except (TypeError, ValueError):
            self.result_label = "Invalid temperature value. Please enter a valid number."
            return None
        category = weather_category(temperature)
        self.result_label = f"{temperature:g}°C is {category}"
        return category

    def render(self) -> List[str]:
        """Text lines for the current dashboard state."""
        lines = []
        if self.file_path:
            lines.append(f"File: {self.file_path}")
        if self.rainy_days_label:
            lines.append(self.rainy_days_label)
        if self.result_label:
            lines.append(self.result_label)
        if self.table_rows is not None:
            lines.extend(format_table(self.table_rows))
        return lines
