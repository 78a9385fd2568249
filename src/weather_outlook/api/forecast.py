"""
Forecast and air pollution operations for the OpenWeather API.
"""

import logging
from typing import Dict, Any, Optional

from ..core import constants


class ForecastAPI:
    """Mixin for the 5-day / 3-hour forecast endpoint."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_forecast(self, city_name: str) -> Dict[str, Any]:
        """
        Get the forecast series for a city.

        Args:
            city_name: City name (percent-encoded by the client)

        Returns:
            Forecast body with 'cod', 'list' and optional 'message'.
            Temperatures are in Kelvin (no 'units' parameter is sent).
        """
        self.logger.info(f"Fetching forecast for '{city_name}'")
        return self.get(constants.FORECAST_PATH, params={"q": city_name})


class AirPollutionAPI:
    """Mixin for the current air pollution endpoint."""

    logger: logging.Logger

    def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Method provided by APIClient base class."""
        ...

    def get_air_pollution(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Get current air pollution at a coordinate pair.

        Returns:
            Body whose 'list[0]' holds 'main.aqi' and 'components'
        """
        self.logger.info(f"Fetching air quality for ({latitude}, {longitude})")
        return self.get(
            constants.AIR_POLLUTION_PATH,
            params={"lat": latitude, "lon": longitude}
        )
