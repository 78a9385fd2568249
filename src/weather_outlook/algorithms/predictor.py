"""
Next-day outlook heuristic.

Classifies the next 24 forecast entries into a one-line outlook. This is a
fixed rule set, not a statistical model; the thresholds and the window size
are part of the contract and are not configurable.
"""

import logging
import statistics
from typing import Optional, Sequence

from ..core import constants
from ..models import RawForecastEntry
from ..processing.conditions import dominant_condition
from ..processing.converter import UnitConverter


class Predictor:
    """Derive a next-day outlook from a forecast series."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize predictor.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def predict_next_day(self, series: Sequence[RawForecastEntry]) -> str:
        """
        Outlook for the 24 entries following the current one.

        Rules, first match wins:
            1. mean > 25 °C and dominant condition 'Clear' -> warm and sunny
            2. mean < 10 °C -> cold
            3. dominant condition 'Rain' -> rain likely
            4. otherwise -> stable weather

        Args:
            series: Forecast entries; index 0 is the current conditions

        Returns:
            Outlook message, or the insufficient-data message when fewer than
            24 entries follow index 0
        """
        window = constants.PREDICTION_WINDOW
        if len(series) < window + 1:
            self.logger.debug(f"Only {len(series)} entries, need {window + 1} for a prediction")
            return constants.INSUFFICIENT_DATA_MESSAGE

        next_day = series[1:window + 1]
        mean_temp = statistics.mean(
            UnitConverter.kelvin_to_celsius(e.temperature_kelvin) for e in next_day
        )
        dominant = dominant_condition(e.sky_condition for e in next_day)
        self.logger.debug(f"Next day: mean={mean_temp:.1f}°C, dominant={dominant}")

        if mean_temp > constants.WARM_THRESHOLD_C and dominant == "Clear":
            return constants.WARM_AND_SUNNY_MESSAGE
        if mean_temp < constants.COLD_THRESHOLD_C:
            return constants.COLD_MESSAGE
        if dominant == "Rain":
            return constants.RAIN_LIKELY_MESSAGE
        return constants.STABLE_WEATHER_MESSAGE
