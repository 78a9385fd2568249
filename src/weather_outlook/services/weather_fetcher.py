"""
Weather fetching service.

Assembles a WeatherSnapshot from three sequential provider calls: the
forecast series, a geocode of the city, and air quality at those
coordinates. Temperatures are left in Kelvin.
"""

import logging
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from .geocoder import Geocoder
from ..core import constants
from ..core.exceptions import ConfigurationError, InvalidInputError, UpstreamError
from ..models import RawForecastEntry, AirQualityReading, WeatherSnapshot
from ..processing.validator import DataValidator

if TYPE_CHECKING:
    from ..api import OpenWeatherAPI


class WeatherFetcher:
    """Fetch a complete weather snapshot for a city."""

    def __init__(
        self,
        api_client: "OpenWeatherAPI",
        geocoder: Optional[Geocoder] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize weather fetcher.

        Args:
            api_client: API client instance
            geocoder: Geocoder (built on the same client when omitted)
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)
        self.geocoder = geocoder or Geocoder(api_client, logger)
        self.validator = DataValidator(logger)

    def fetch_snapshot(self, city_name: str) -> WeatherSnapshot:
        """
        Fetch forecast and air quality for a city.

        Input is validated before any request is made. The first failing
        step aborts the whole operation; no partial snapshot is returned.

        Args:
            city_name: Free-text city name

        Returns:
            Snapshot whose current entry is the first forecast sample

        Raises:
            InvalidInputError: If the city name is blank
            ConfigurationError: If no API key is configured
            UpstreamError: On a failed request or an unusable response
            NotFoundError: If the city cannot be geocoded
        """
        if not city_name or not city_name.strip():
            raise InvalidInputError("City name cannot be empty")
        if not self.api_client.has_api_key:
            raise ConfigurationError("OpenWeather API key is missing")

        city = city_name.strip()

        series = self._fetch_series(city)
        coordinates = self.geocoder.forward(city)
        air_quality = self._fetch_air_quality(coordinates.latitude, coordinates.longitude)

        self.validator.validate_series(series)
        self.validator.validate_air_quality(air_quality)

        self.logger.info(
            f"Fetched {len(series)} forecast entries for '{city}' "
            f"(AQI {air_quality.aqi_index})"
        )
        return WeatherSnapshot.from_series(series, air_quality, city_name=city)

    def _fetch_series(self, city: str) -> List[RawForecastEntry]:
        body = self.api_client.get_forecast(city)
        if not isinstance(body, dict):
            raise UpstreamError("Forecast response is not an object")

        if str(body.get("cod")) != constants.FORECAST_SUCCESS_CODE:
            raise UpstreamError(
                f"City not found or an unexpected error occurred: {body.get('message')}"
            )

        items: List[Dict[str, Any]] = body.get("list") or []
        if not items:
            raise UpstreamError(f"Forecast for '{city}' contains no entries")

        try:
            return [RawForecastEntry.from_provider(item) for item in items]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamError(f"Malformed forecast entry: {e}") from e

    def _fetch_air_quality(self, latitude: float, longitude: float) -> AirQualityReading:
        body = self.api_client.get_air_pollution(latitude, longitude)
        readings = body.get("list") if isinstance(body, dict) else None
        if not readings:
            raise UpstreamError("Air pollution response contains no readings")

        try:
            return AirQualityReading.from_provider(readings[0])
        except AttributeError as e:
            raise UpstreamError(f"Malformed air pollution reading: {e}") from e
