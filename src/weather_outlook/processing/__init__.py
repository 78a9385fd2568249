"""
Data processing module for the weather pipeline.

Provides aggregation, unit conversion, sky condition helpers and validation.
"""

import logging
from typing import List, Optional, Sequence

from .aggregator import ForecastAggregator
from .converter import UnitConverter
from .validator import DataValidator
from .conditions import SkyAsset, sky_condition_to_asset_key, dominant_condition
from ..core import constants
from ..models import RawForecastEntry, DailyAggregate, ForecastBlock


class DataProcessor:
    """
    Unified data processor combining aggregation, conversion, and validation.

    This class provides a convenient interface to all processing operations.
    """

    def __init__(self, temperature_unit: str = "metric", logger: Optional[logging.Logger] = None):
        """
        Initialize data processor.

        Args:
            temperature_unit: Display unit ('metric' or 'imperial')
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.aggregator = ForecastAggregator(logger)
        self.converter = UnitConverter(temperature_unit, logger)
        self.validator = DataValidator(logger)

    def group_by_day(self, series: Sequence[RawForecastEntry]) -> List[DailyAggregate]:
        """Calendar-day summaries (at most five)."""
        return self.aggregator.group_by_day(series)

    def group_into_blocks(
        self,
        series: Sequence[RawForecastEntry],
        block_size: int = constants.DEFAULT_BLOCK_SIZE,
        max_entries: int = constants.DEFAULT_MAX_BLOCK_ENTRIES
    ) -> List[ForecastBlock]:
        """Display blocks of the upcoming entries."""
        return self.aggregator.group_into_blocks(series, block_size, max_entries)

    def format_temperature(self, kelvin: float) -> str:
        """Temperature in the display unit, e.g. '27°C'."""
        return self.converter.format_temperature(kelvin)


__all__ = [
    "ForecastAggregator",
    "UnitConverter",
    "DataValidator",
    "DataProcessor",
    "SkyAsset",
    "sky_condition_to_asset_key",
    "dominant_condition",
]
