"""
Data models for the weather pipeline.

Contains DTOs for locations, forecast samples, derived aggregates and cache records.
"""

from .location import Coordinates
from .forecast import RawForecastEntry, AirQualityReading, WeatherSnapshot
from .aggregates import DailyAggregate, ForecastBlock
from .cache import CacheRecord

__all__ = [
    "Coordinates",
    "RawForecastEntry",
    "AirQualityReading",
    "WeatherSnapshot",
    "DailyAggregate",
    "ForecastBlock",
    "CacheRecord",
]
