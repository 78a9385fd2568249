"""
Business logic services for the weather pipeline.

Services orchestrate API operations, caching and session state.
"""

from .geocoder import Geocoder
from .weather_fetcher import WeatherFetcher
from .cache_store import CacheStore
from .session import WeatherSession, SessionState, SessionView
from .report import ReportBuilder, WeatherReport, format_report

__all__ = [
    "Geocoder",
    "WeatherFetcher",
    "CacheStore",
    "WeatherSession",
    "SessionState",
    "SessionView",
    "ReportBuilder",
    "WeatherReport",
    "format_report",
]
