"""
Pytest configuration and shared fixtures for all tests.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest

# Add the project root to sys.path so we can import from src
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from src.weather_outlook.core import constants  # noqa: E402
from src.weather_outlook.models import RawForecastEntry, AirQualityReading  # noqa: E402

BASE_URL = "https://api.test"
API_KEY = "test-key"


def provider_time(start: datetime, hours: float) -> str:
    """Provider 'dt_txt' string for start + hours."""
    return (start + timedelta(hours=hours)).strftime(constants.PROVIDER_TIME_FORMAT)


@pytest.fixture
def make_entry():
    """Factory for a single forecast entry."""
    def _make(
        timestamp="2024-01-15 12:00:00",
        kelvin=293.15,
        sky="Clear",
        wind=3.0,
        humidity=50.0,
        pressure=1013.0,
        pop=0.0
    ):
        return RawForecastEntry(
            timestamp=timestamp,
            temperature_kelvin=kelvin,
            sky_condition=sky,
            wind_speed=wind,
            humidity_percent=humidity,
            pressure_hpa=pressure,
            precipitation_probability=pop,
        )
    return _make


@pytest.fixture
def make_series(make_entry):
    """
    Factory for a 3-hourly series.

    temps/skies/pops may be a scalar (applied to every entry) or a list with
    one value per entry.
    """
    def _make(count, start=datetime(2024, 1, 15, 0, 0), temps=293.15, skies="Clear", pops=0.0, step_hours=3):
        def pick(value, index):
            return value[index] if isinstance(value, (list, tuple)) else value

        return [
            make_entry(
                timestamp=provider_time(start, index * step_hours),
                kelvin=pick(temps, index),
                sky=pick(skies, index),
                pop=pick(pops, index),
            )
            for index in range(count)
        ]
    return _make


@pytest.fixture
def air_quality():
    """A sane air quality reading."""
    return AirQualityReading(aqi_index=2, pm2_5=12.5, pm10=20.1)


@pytest.fixture
def forecast_body():
    """Factory for a forecast response body as returned by the provider."""
    def _make(count=40, start=datetime(2024, 1, 15, 0, 0), kelvin=293.15, sky="Clear"):
        return {
            "cod": "200",
            "message": 0,
            "cnt": count,
            "list": [
                {
                    "dt_txt": provider_time(start, index * 3),
                    "main": {"temp": kelvin, "humidity": 60, "pressure": 1012},
                    "weather": [{"main": sky, "description": sky.lower()}],
                    "wind": {"speed": 4.2},
                    "pop": 0.1,
                }
                for index in range(count)
            ],
        }
    return _make


@pytest.fixture
def air_pollution_body():
    """Air pollution response body."""
    return {
        "coord": {"lon": 78.47, "lat": 17.38},
        "list": [
            {
                "main": {"aqi": 3},
                "components": {"pm2_5": 35.2, "pm10": 58.9},
                "dt": 1705312800,
            }
        ],
    }


@pytest.fixture
def geocode_body():
    """Direct geocoding response body."""
    return [{"name": "Hyderabad", "lat": 17.38, "lon": 78.47, "country": "IN"}]


@pytest.fixture
def api_client():
    """OpenWeather client pointed at a fake base URL."""
    from src.weather_outlook.api import OpenWeatherAPI

    client = OpenWeatherAPI(base_url=BASE_URL, api_key=API_KEY)
    yield client
    client.close()


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test requiring API access"
    )
    config.addinivalue_line(
        "markers", "unit: mark test as unit test (no external dependencies)"
    )
