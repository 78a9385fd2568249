"""
Forecast data models.

Contains DTOs for provider forecast samples, air quality readings and the
snapshot bundle handed to the presentation layer.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional

from ..core import constants
from ..core.date_utils import DateUtils


def _number(value: Any, default: float = 0.0) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class RawForecastEntry:
    """One 3-hour forecast sample as reported by the provider."""

    timestamp: str  # provider 'dt_txt', e.g. '2024-01-15 12:00:00'
    temperature_kelvin: float
    sky_condition: str  # 'Clear', 'Rain', 'Clouds', ...
    wind_speed: float  # m/s
    humidity_percent: float
    pressure_hpa: float
    precipitation_probability: float  # 0-1

    @classmethod
    def from_provider(cls, item: Dict[str, Any]) -> "RawForecastEntry":
        """
        Build from one element of the forecast 'list' array.

        Missing optional blocks fall back to neutral values; a missing
        'weather' array yields the 'Unknown' condition.

        Raises:
            KeyError: If 'dt_txt' is missing
            ValueError: If 'dt_txt' is not a provider timestamp
        """
        timestamp = item["dt_txt"]
        if not isinstance(timestamp, str):
            raise ValueError(f"dt_txt must be a string, got {timestamp!r}")
        DateUtils.parse_provider_time(timestamp)

        main = item.get("main") or {}
        wind = item.get("wind") or {}
        weather = item.get("weather") or []
        condition = weather[0].get("main") if weather else None

        return cls(
            timestamp=timestamp,
            temperature_kelvin=_number(main.get("temp")),
            sky_condition=condition or constants.UNKNOWN_CONDITION,
            wind_speed=_number(wind.get("speed")),
            humidity_percent=_number(main.get("humidity")),
            pressure_hpa=_number(main.get("pressure")),
            precipitation_probability=_number(item.get("pop")),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawForecastEntry":
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AirQualityReading:
    """Current air quality; aqi_index is on the provider's 1-5 scale."""

    aqi_index: int
    pm2_5: float
    pm10: float

    @property
    def is_anomalous(self) -> bool:
        """True when the index falls outside the documented 1-5 range."""
        return not (constants.AQI_MIN <= self.aqi_index <= constants.AQI_MAX)

    @classmethod
    def from_provider(cls, item: Dict[str, Any]) -> "AirQualityReading":
        """
        Build from 'list[0]' of an air pollution response.

        An index that cannot be read as an integer is stored as 0 so it is
        reported as anomalous instead of being guessed.
        """
        main = item.get("main") or {}
        components = item.get("components") or {}
        raw_aqi = main.get("aqi")
        try:
            aqi = int(raw_aqi)
        except (TypeError, ValueError):
            aqi = 0

        return cls(
            aqi_index=aqi,
            pm2_5=_number(components.get("pm2_5")),
            pm10=_number(components.get("pm10")),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AirQualityReading":
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class WeatherSnapshot:
    """
    Current conditions, air quality and the full forecast series.

    forecast_series[0] is always the entry used as current.
    """

    current: RawForecastEntry
    air_quality: AirQualityReading
    forecast_series: List[RawForecastEntry] = field(default_factory=list)
    city_name: Optional[str] = None

    def __post_init__(self):
        if not self.forecast_series:
            self.forecast_series = [self.current]
        elif self.forecast_series[0] != self.current:
            raise ValueError("forecast_series must start with the current entry")

    @classmethod
    def from_series(
        cls,
        series: List[RawForecastEntry],
        air_quality: AirQualityReading,
        city_name: Optional[str] = None
    ) -> "WeatherSnapshot":
        """
        Assemble a snapshot whose current entry is the first forecast sample.

        Raises:
            ValueError: If the series is empty
        """
        if not series:
            raise ValueError("Forecast series is empty")
        return cls(
            current=series[0],
            air_quality=air_quality,
            forecast_series=list(series),
            city_name=city_name,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "city_name": self.city_name,
            "current": self.current.to_dict(),
            "air_quality": self.air_quality.to_dict(),
            "forecast_series": [entry.to_dict() for entry in self.forecast_series],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WeatherSnapshot":
        return cls(
            current=RawForecastEntry.from_dict(data["current"]),
            air_quality=AirQualityReading.from_dict(data["air_quality"]),
            forecast_series=[
                RawForecastEntry.from_dict(entry) for entry in data["forecast_series"]
            ],
            city_name=data.get("city_name"),
        )
