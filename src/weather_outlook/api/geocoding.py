"""
Geocoding operations for the OpenWeather API.

Handles forward (city -> coordinates) and reverse lookups.
"""

import logging
from typing import List, Dict, Any, Optional

from ..core import constants


class GeocodingAPI:
    """Mixin for geocoding API operations."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def geocode_direct(self, city_name: str, limit: int = 1) -> List[Dict[str, Any]]:
        """
        Look up places matching a free-text city name.

        Args:
            city_name: City name, e.g. 'London' or 'London,GB'
            limit: Maximum number of matches

        Returns:
            List of place objects with 'name', 'lat' and 'lon'
        """
        self.logger.info(f"Geocoding city '{city_name}'")
        result = self.get(
            constants.GEOCODING_DIRECT_PATH,
            params={"q": city_name, "limit": limit}
        )
        return result if isinstance(result, list) else []

    def geocode_reverse(
        self,
        latitude: float,
        longitude: float,
        limit: int = 1
    ) -> List[Dict[str, Any]]:
        """
        Look up places near a coordinate pair.

        Args:
            latitude: Latitude in degrees
            longitude: Longitude in degrees
            limit: Maximum number of matches

        Returns:
            List of place objects with 'name', 'lat' and 'lon'
        """
        self.logger.info(f"Reverse geocoding ({latitude}, {longitude})")
        result = self.get(
            constants.GEOCODING_REVERSE_PATH,
            params={"lat": latitude, "lon": longitude, "limit": limit}
        )
        return result if isinstance(result, list) else []
