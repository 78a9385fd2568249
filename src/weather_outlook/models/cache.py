"""
Cache data models.
"""

from dataclasses import dataclass
from datetime import datetime

from .forecast import WeatherSnapshot


@dataclass
class CacheRecord:
    """Last successful snapshot and the (UTC) moment it was fetched."""

    snapshot: WeatherSnapshot
    fetched_at: datetime
