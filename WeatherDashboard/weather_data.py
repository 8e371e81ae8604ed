"""Weather domain model - one day's observation, independent of any file format."""
from dataclasses import dataclass
from datetime import date
from typing import Tuple


@dataclass(frozen=True)
class WeatherObservation:
    """A single day's measurements. Immutable once constructed."""
    date: date
    temperature: float  # degrees Celsius, may be negative
    humidity: int  # percent, not range-checked
    precipitation: float  # 0.0 means no rain

    def as_row(self) -> Tuple[str, float, int, float]:
        """Return the values shown in a table row, date as ISO text."""
        return (self.date.isoformat(), self.temperature, self.humidity, self.precipitation)
