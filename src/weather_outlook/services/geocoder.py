"""
Geocoding service.

Resolves city names to coordinates and back. One request per call, no
retries: failures propagate to the caller immediately.
"""

import logging
from typing import Optional, TYPE_CHECKING

from ..core.exceptions import ConfigurationError, InvalidInputError, NotFoundError, UpstreamError
from ..models import Coordinates

if TYPE_CHECKING:
    from ..api import OpenWeatherAPI


class Geocoder:
    """City name <-> coordinates lookups."""

    def __init__(
        self,
        api_client: "OpenWeatherAPI",
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize geocoder.

        Args:
            api_client: API client instance
            logger: Logger instance
        """
        self.api_client = api_client
        self.logger = logger or logging.getLogger(__name__)

    def _check_credentials(self) -> None:
        if not self.api_client.has_api_key:
            raise ConfigurationError("OpenWeather API key is missing")

    def forward(self, city_name: str) -> Coordinates:
        """
        Coordinates of the best match for a city name.

        Raises:
            InvalidInputError: If the city name is blank
            ConfigurationError: If no API key is configured
            NotFoundError: If the provider knows no such place
            UpstreamError: On a failed request or a match without usable coordinates
        """
        if not city_name or not city_name.strip():
            raise InvalidInputError("City name cannot be empty")
        self._check_credentials()

        matches = self.api_client.geocode_direct(city_name.strip(), limit=1)
        if not matches:
            raise NotFoundError(f"City not found: {city_name}")

        try:
            coordinates = Coordinates.from_provider(matches[0])
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamError(f"Malformed geocoding result for '{city_name}': {e}") from e
        self.logger.debug(
            f"'{city_name}' -> ({coordinates.latitude}, {coordinates.longitude})"
        )
        return coordinates

    def reverse(self, latitude: float, longitude: float) -> str:
        """
        Name of the place at a coordinate pair.

        Raises:
            ConfigurationError: If no API key is configured
            NotFoundError: If no place name resolves to the coordinates
            UpstreamError: On a failed request
        """
        self._check_credentials()

        matches = self.api_client.geocode_reverse(latitude, longitude, limit=1)
        try:
            name = matches[0].get("name") if matches else None
        except (KeyError, TypeError, AttributeError) as e:
            raise UpstreamError(f"Malformed reverse geocoding result: {e}") from e
        if not name:
            raise NotFoundError(f"No city found for coordinates ({latitude}, {longitude})")

        self.logger.debug(f"({latitude}, {longitude}) -> '{name}'")
        return name
