"""
Forecast aggregation module.

Groups the flat 3-hour forecast series into calendar-day summaries and
short display blocks. Pure transformations: no I/O, no state between calls.
"""

import logging
import statistics
from datetime import date
from typing import Dict, List, Optional, Sequence

from .conditions import dominant_condition
from .converter import UnitConverter
from ..core import constants
from ..core.date_utils import DateUtils
from ..models import RawForecastEntry, DailyAggregate, ForecastBlock


class ForecastAggregator:
    """Calculate daily and block aggregates from a forecast series."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize forecast aggregator.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    def group_by_day(
        self,
        series: Sequence[RawForecastEntry],
        max_days: int = constants.MAX_DAILY_AGGREGATES
    ) -> List[DailyAggregate]:
        """
        Summarize the series per calendar day.

        Args:
            series: Forecast entries, ascending by timestamp
            max_days: Number of earliest days to keep

        Returns:
            Daily aggregates in ascending date order:
                - high/low temperature (°C)
                - mean precipitation probability (%)
                - dominant sky condition
        """
        buckets: Dict[date, List[RawForecastEntry]] = {}
        for entry in series:
            buckets.setdefault(DateUtils.parse_day(entry.timestamp), []).append(entry)

        aggregates = []
        for day in sorted(buckets)[:max_days]:
            entries = buckets[day]
            temps = [UnitConverter.kelvin_to_celsius(e.temperature_kelvin) for e in entries]
            pops = [e.precipitation_probability * 100 for e in entries]

            aggregate = DailyAggregate(
                date=day,
                high_temperature_c=max(temps),
                low_temperature_c=min(temps),
                average_precipitation_probability_percent=statistics.mean(pops),
                dominant_sky_condition=dominant_condition(e.sky_condition for e in entries),
            )
            self.logger.debug(
                f"{day}: high={aggregate.high_temperature_c:.1f}, "
                f"low={aggregate.low_temperature_c:.1f}, "
                f"pop={aggregate.average_precipitation_probability_percent:.0f}%, "
                f"sky={aggregate.dominant_sky_condition}"
            )
            aggregates.append(aggregate)

        if len(buckets) > max_days:
            self.logger.debug(f"Dropped {len(buckets) - max_days} days beyond the first {max_days}")

        return aggregates

    def group_into_blocks(
        self,
        series: Sequence[RawForecastEntry],
        block_size: int = constants.DEFAULT_BLOCK_SIZE,
        max_entries: int = constants.DEFAULT_MAX_BLOCK_ENTRIES
    ) -> List[ForecastBlock]:
        """
        Partition the upcoming entries into consecutive display blocks.

        Index 0 (the current conditions) is skipped. At most max_entries
        entries are used; a trailing block shorter than block_size is kept.
        Each entry is rounded to whole degrees Celsius before the block mean
        is taken.

        Args:
            series: Forecast entries, ascending by timestamp
            block_size: Entries per block
            max_entries: Upper bound on entries considered after index 0

        Returns:
            Block summaries in series order

        Raises:
            ValueError: If block_size < 1 or max_entries < 0
        """
        if block_size < 1:
            raise ValueError(f"block_size must be positive, got {block_size}")
        if max_entries < 0:
            raise ValueError(f"max_entries must not be negative, got {max_entries}")

        upcoming = list(series[1:1 + max_entries])
        blocks = []
        for start in range(0, len(upcoming), block_size):
            entries = upcoming[start:start + block_size]
            temps = [
                UnitConverter.round_half_away(UnitConverter.kelvin_to_celsius(e.temperature_kelvin))
                for e in entries
            ]

            blocks.append(ForecastBlock(
                start_time=UnitConverter.format_display_time(entries[0].timestamp),
                end_time=UnitConverter.format_display_time(entries[-1].timestamp),
                mean_temperature_c=float(statistics.mean(temps)),
                dominant_sky_condition=dominant_condition(e.sky_condition for e in entries),
                mean_wind_speed=statistics.mean(e.wind_speed for e in entries),
                mean_humidity=statistics.mean(e.humidity_percent for e in entries),
                entry_count=len(entries),
            ))

        self.logger.debug(f"Built {len(blocks)} blocks from {len(upcoming)} entries")
        return blocks
