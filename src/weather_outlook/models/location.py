"""
Location data models.

Contains DTOs for geocoding results.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Coordinates:
    """Geographic position resolved by the geocoder."""

    latitude: float
    longitude: float

    @classmethod
    def from_provider(cls, item: Dict[str, Any]) -> "Coordinates":
        """Build from one element of a geocoding response array."""
        return cls(latitude=float(item["lat"]), longitude=float(item["lon"]))
