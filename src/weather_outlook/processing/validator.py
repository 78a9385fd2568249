"""
Data validation module.

Flags data-quality anomalies in provider readings. Anomalies are logged and
reported, never raised: the provider data is still shown as received.
"""

import logging
from typing import List, Optional, Sequence

from ..models import RawForecastEntry, AirQualityReading


class DataValidator:
    """Validate forecast samples and air quality readings."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize data validator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_air_quality(self, reading: AirQualityReading) -> List[str]:
        """
        Check an air quality reading.

        Returns:
            List of anomaly descriptions (empty when the reading looks sane)
        """
        errors = []
        if reading.is_anomalous:
            errors.append(f"AQI index out of range: {reading.aqi_index} (must be 1-5)")
        if reading.pm2_5 < 0:
            errors.append(f"Negative pm2_5: {reading.pm2_5}")
        if reading.pm10 < 0:
            errors.append(f"Negative pm10: {reading.pm10}")

        for error in errors:
            self.logger.warning(f"Air quality anomaly: {error}")
        return errors

    def validate_series(self, series: Sequence[RawForecastEntry]) -> List[str]:
        """
        Check ordering and value ranges of a forecast series.

        Returns:
            List of anomaly descriptions (empty when the series looks sane)
        """
        errors = []
        previous: Optional[str] = None

        for index, entry in enumerate(series):
            if previous is not None and entry.timestamp < previous:
                errors.append(f"Entry {index} out of order: {entry.timestamp} < {previous}")
            previous = entry.timestamp

            if entry.temperature_kelvin <= 0:
                errors.append(f"Entry {index}: invalid temperature {entry.temperature_kelvin} K")
            if not (0 <= entry.humidity_percent <= 100):
                errors.append(f"Entry {index}: invalid humidity {entry.humidity_percent} (must be 0-100)")
            if not (0 <= entry.precipitation_probability <= 1):
                errors.append(
                    f"Entry {index}: invalid precipitation probability "
                    f"{entry.precipitation_probability} (must be 0-1)"
                )

        for error in errors:
            self.logger.warning(f"Forecast anomaly: {error}")
        return errors
