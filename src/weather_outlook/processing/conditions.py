"""
Sky condition helpers shared by aggregation and presentation.
"""

from enum import Enum
from typing import Dict, Iterable, Optional

from ..core import constants


class SkyAsset(Enum):
    """Presentation asset for a sky condition."""

    THUNDERSTORM = "thunderstorm"
    RAIN = "rain"
    CLOUDY = "cloudy"
    SUNNY = "sunny"
    UNKNOWN = "unknown"

    @property
    def animation_path(self) -> str:
        return f"assets/animations/{self.value}.json"


_ASSET_BY_CONDITION = {
    "thunderstorm": SkyAsset.THUNDERSTORM,
    "rain": SkyAsset.RAIN,
    "drizzle": SkyAsset.RAIN,
    "clouds": SkyAsset.CLOUDY,
    "partly cloudy": SkyAsset.CLOUDY,
    "partlycloudy": SkyAsset.CLOUDY,
    "clear": SkyAsset.SUNNY,
}


def sky_condition_to_asset_key(condition: Optional[str]) -> SkyAsset:
    """Map a provider sky condition (case-insensitive) to its asset."""
    if not condition:
        return SkyAsset.UNKNOWN
    return _ASSET_BY_CONDITION.get(condition.strip().lower(), SkyAsset.UNKNOWN)


def dominant_condition(conditions: Iterable[str]) -> str:
    """
    Most frequent condition label.

    Ties go to the label that reached the winning count first while walking
    the sequence in order. An empty sequence yields 'Unknown'.
    """
    counts: Dict[str, int] = {}
    best = constants.UNKNOWN_CONDITION
    best_count = 0
    for condition in conditions:
        counts[condition] = counts.get(condition, 0) + 1
        if counts[condition] > best_count:
            best = condition
            best_count = counts[condition]
    return best
