"""
API layer for the OpenWeather provider.

Provides a low-level client for geocoding, forecast, air pollution and map tile operations.
"""

import logging
from typing import Optional

from .client import APIClient
from .geocoding import GeocodingAPI
from .forecast import ForecastAPI, AirPollutionAPI
from .maps import MapTilesAPI
from ..core import constants


class OpenWeatherAPI(APIClient, GeocodingAPI, ForecastAPI, AirPollutionAPI, MapTilesAPI):
    """
    Unified API client for OpenWeather.

    Combines geocoding, forecast, air pollution and map tile operations.
    """

    def __init__(
        self,
        base_url: str = constants.DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        timeout: int = 30,
        max_retries: int = 0,
        tile_base_url: str = constants.DEFAULT_TILE_URL,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize unified API client.

        Args:
            base_url: Base URL for the API
            api_key: Provider access key
            timeout: Request timeout in seconds
            max_retries: Transport-level retry attempts
            tile_base_url: Base URL for map tiles
            logger: Logger instance
        """
        super().__init__(
            base_url=base_url,
            api_key=api_key,
            timeout=timeout,
            max_retries=max_retries,
            logger=logger
        )
        self.tile_base_url = tile_base_url

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "OpenWeatherAPI":
        """Build a client from application configuration."""
        return cls(
            base_url=config.api_base_url,
            api_key=config.api_key,
            timeout=config.api_timeout,
            max_retries=config.api_max_retries,
            tile_base_url=config.tile_base_url,
            logger=logger
        )


__all__ = [
    "APIClient",
    "GeocodingAPI",
    "ForecastAPI",
    "AirPollutionAPI",
    "MapTilesAPI",
    "OpenWeatherAPI",
]
