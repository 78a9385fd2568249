"""
User-facing advisories derived from a snapshot.

Weather alerts feed the notification collaborator; air quality categories
feed the AQI panel.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from ..core import constants
from ..models import RawForecastEntry
from ..processing.converter import UnitConverter

RAIN_ALERT = "Take an umbrella, it's rainy out there!"
SUNNY_ALERT = "Light clothes today - it's sunny!"
COLD_ALERT = "Bundle up, it's cold - grab a jacket!"


@dataclass(frozen=True)
class AirQualityCategory:
    """Label and health advice for an AQI index."""

    aqi_index: int
    label: str
    advice: str

    @property
    def message(self) -> str:
        return f"{self.label} - {self.advice}"


_AQI_CATEGORIES = {
    1: ("Good", "Enjoy outdoor activities!"),
    2: ("Fair", "Sensitive groups should limit prolonged exertion."),
    3: ("Moderate", "Unhealthy for sensitive groups; reduce outdoor time."),
    4: ("Poor", "Avoid outdoor activities; seek indoor air quality."),
    5: ("Very Poor", "Stay indoors; use air purifiers if available."),
}
_UNKNOWN_AQI = ("Unknown", "Check data reliability.")


def build_weather_alert(
    current: RawForecastEntry,
    logger: Optional[logging.Logger] = None
) -> Optional[Tuple[str, str]]:
    """
    Notification (title, body) for the current conditions.

    Rules, first match wins: rain, clear and above 25 °C, below 10 °C.
    The temperature is rounded to whole degrees before comparing.

    Returns:
        (title, body), or None when no alert applies
    """
    logger = logger or logging.getLogger(__name__)
    temp = UnitConverter.round_half_away(
        UnitConverter.kelvin_to_celsius(current.temperature_kelvin)
    )

    if current.sky_condition == "Rain":
        body = RAIN_ALERT
    elif current.sky_condition == "Clear" and temp > constants.WARM_THRESHOLD_C:
        body = SUNNY_ALERT
    elif temp < constants.COLD_THRESHOLD_C:
        body = COLD_ALERT
    else:
        logger.debug(f"No alert for {current.sky_condition} at {temp}°C")
        return None

    logger.info(f"Weather alert: {body}")
    return constants.ALERT_TITLE, body


def classify_air_quality(
    aqi_index: int,
    logger: Optional[logging.Logger] = None
) -> AirQualityCategory:
    """Category for an AQI index; indices outside 1-5 are reported as Unknown."""
    category = _AQI_CATEGORIES.get(aqi_index)
    if category is None:
        (logger or logging.getLogger(__name__)).warning(
            f"AQI index {aqi_index} outside 1-5, treating as unknown"
        )
        category = _UNKNOWN_AQI
    label, advice = category
    return AirQualityCategory(aqi_index=aqi_index, label=label, advice=advice)
