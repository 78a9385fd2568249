"""
Weather Outlook

This package fetches current weather, forecast and air quality from
OpenWeather, aggregates the forecast into hourly blocks and daily summaries,
derives a next-day outlook, and falls back to a cached snapshot when the
provider is unreachable.
"""

__version__ = "0.1.0"
__description__ = "Weather forecast pipeline with cached fallback"


def __getattr__(name):
    """Lazy import to avoid importing dependencies when not needed."""
    if name == "WeatherOutlookApp":
        from .main import WeatherOutlookApp
        return WeatherOutlookApp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "WeatherOutlookApp",
]
