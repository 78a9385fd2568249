"""
Derived forecast data models.

Recomputed from a snapshot on every render; never persisted.
"""

from dataclasses import dataclass
from datetime import date


@dataclass
class DailyAggregate:
    """Calendar-day summary of the forecast series."""

    date: date
    high_temperature_c: float
    low_temperature_c: float
    average_precipitation_probability_percent: float
    dominant_sky_condition: str


@dataclass
class ForecastBlock:
    """Summary of a few consecutive 3-hour samples."""

    start_time: str  # display time, e.g. '3 PM'
    end_time: str
    mean_temperature_c: float  # mean of the entries rounded to whole °C
    dominant_sky_condition: str
    mean_wind_speed: float
    mean_humidity: float
    entry_count: int
