"""
Forecast heuristics.

Provides the next-day predictor, weather alerts and air quality categories.
"""

from .predictor import Predictor
from .advisories import AirQualityCategory, build_weather_alert, classify_air_quality

__all__ = [
    "Predictor",
    "AirQualityCategory",
    "build_weather_alert",
    "classify_air_quality",
]
