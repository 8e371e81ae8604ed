"""Weather analyzer - CSV loading plus pure queries over observation lists."""
import logging
import re
from datetime import date
from typing import List, Optional, Sequence

from weather_data import WeatherObservation

EXPECTED_FIELDS = 4
ISO_DATE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")
DECIMAL = re.compile(r"^[+-]?[0-9]+(\.[0-9]+)?$")
INTEGER = re.compile(r"^[+-]?[0-9]+$")

HOT_THRESHOLD = 30.0
WARM_THRESHOLD = 20.0


class WeatherDataError(Exception):
    """Base exception for weather data loading failures."""
    pass


class WeatherFileError(WeatherDataError):
    """Raised when the weather file cannot be opened or read."""
    pass


class WeatherFormatError(WeatherDataError):
    """Raised when a data row does not match date,temperature,humidity,precipitation."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        super().__init__(message)
        self.line_number = line_number
        self.line = line


def _parse_date(text: str) -> date:
    if not ISO_DATE.match(text):
        raise ValueError(f"invalid ISO date {text!r}")
    return date.fromisoformat(text)


def parse_decimal(text: str) -> float:
    """Parse a plain decimal such as 32.5 or -4.1. No exponents, underscores, inf or nan."""
    text = text.strip()
    if not DECIMAL.match(text):
        raise ValueError(f"invalid decimal number {text!r}")
    return float(text)


def _parse_integer(text: str) -> int:
    text = text.strip()
    if not INTEGER.match(text):
        raise ValueError(f"invalid integer {text!r}")
    return int(text)


def _parse_row(line: str, line_number: int) -> WeatherObservation:
    parts = line.split(",")
    if len(parts) != EXPECTED_FIELDS:
        raise WeatherFormatError(
            f"Line {line_number}: expected {EXPECTED_FIELDS} fields, got {len(parts)}",
            line_number=line_number,
            line=line,
        )
    try:
        return WeatherObservation(
            date=_parse_date(parts[0]),
            temperature=parse_decimal(parts[1]),
            humidity=_parse_integer(parts[2]),
            precipitation=parse_decimal(parts[3]),
        )
    except ValueError as e:
        raise WeatherFormatError(
            f"Line {line_number}: {e}", line_number=line_number, line=line
        ) from e


def parse_csv(file_path: str) -> List[WeatherObservation]:
    """
    Parse weather observations from a CSV file.

    The first line is a header and is always skipped. Every other line must
    hold exactly four comma-separated fields. One bad row fails the whole
    load; no partial list is returned.

    Args:
        file_path: Path to the CSV file

    Returns:
        Observations in file order

    Raises:
        WeatherFileError: If the file cannot be opened or read
        WeatherFormatError: If any data row is malformed
    """
    observations = []
    try:
        with open(file_path, "r", encoding="utf-8") as handle:
            header = next(handle, None)
            if header is None:
                logging.warning(f"Weather file {file_path} is empty")
                return observations
            for line_number, raw_line in enumerate(handle, start=2):
                observations.append(_parse_row(raw_line.rstrip("\n"), line_number))
    except OSError as e:
        logging.error(f"Cannot read weather file {file_path}: {e}")
        raise WeatherFileError(f"Cannot read {file_path}: {e}") from e
    except UnicodeDecodeError as e:
        logging.error(f"Weather file {file_path} is not valid UTF-8 text: {e}")
        raise WeatherFileError(f"Cannot decode {file_path}: {e}") from e
    except WeatherFormatError as e:
        logging.error(f"Malformed weather file {file_path}: {e}")
        raise

    logging.info(f"Loaded {len(observations)} observations from {file_path}")
    return observations


def average_temperature_for_month(data: Sequence[WeatherObservation], month: int) -> float:
    """
    Average temperature of the observations that fall in a month.

    Args:
        data: Observations to scan
        month: Month number (1-12); anything else matches nothing

    Returns:
        The mean temperature, or NaN if no observation matches
    """
    temperatures = [w.temperature for w in data if w.date.month == month]
    if not temperatures:
        logging.debug(f"No observations for month {month}")
        return float("nan")
    average = sum(temperatures) / len(temperatures)
    logging.debug(f"Month {month}: {len(temperatures)} observations, average {average:.2f}")
    return average


def days_above_temperature(data: Sequence[WeatherObservation], threshold: float) -> List[WeatherObservation]:
    """Return the observations strictly warmer than threshold, in original order."""
    return [w for w in data if w.temperature > threshold]


def count_rainy_days(data: Sequence[WeatherObservation]) -> int:
    """Count observations with precipitation above zero."""
    return sum(1 for w in data if w.precipitation > 0)


def weather_category(temperature: float) -> str:
    """
    Classify a temperature.

    Hot (>= 30.0), Warm (>= 20.0), otherwise Cold. NaN is Cold.
    """
    if temperature >= HOT_THRESHOLD:
        return "Hot"
    elif temperature >= WARM_THRESHOLD:
        return "Warm"
    return "Cold"
