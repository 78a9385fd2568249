"""
Tests for unit conversion, sky condition helpers, date utilities and models.
"""

from datetime import date, datetime

import pytest
import pytz

from src.weather_outlook.core import DateUtils
from src.weather_outlook.models import AirQualityReading, RawForecastEntry, WeatherSnapshot
from src.weather_outlook.processing import DataValidator, SkyAsset, UnitConverter, sky_condition_to_asset_key


class TestUnitConverter:
    """Test cases for UnitConverter."""

    def test_kelvin_to_celsius(self):
        assert UnitConverter.kelvin_to_celsius(300.0) == pytest.approx(26.85)

    def test_celsius_to_fahrenheit(self):
        assert UnitConverter.celsius_to_fahrenheit(100.0) == pytest.approx(212.0)

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (-2.5, -3),
        (2.4, 2),
        (-0.4, 0),
        (26.85, 27),
    ])
    def test_round_half_away(self, value, expected):
        assert UnitConverter.round_half_away(value) == expected

    def test_format_temperature(self):
        assert UnitConverter().format_temperature(300.0) == "27°C"
        assert UnitConverter("imperial").format_temperature(273.15) == "32°F"

    def test_format_celsius_in_display_unit(self):
        assert UnitConverter().format_celsius(17.5) == "18°C"
        assert UnitConverter("imperial").format_celsius(18.0) == "64°F"

    def test_unsupported_unit(self):
        with pytest.raises(ValueError):
            UnitConverter("kelvin")

    @pytest.mark.parametrize("dt_txt,expected", [
        ("2024-01-15 00:00:00", "12 AM"),
        ("2024-01-15 09:00:00", "9 AM"),
        ("2024-01-15 12:00:00", "12 PM"),
        ("2024-01-15 21:00:00", "9 PM"),
    ])
    def test_format_display_time(self, dt_txt, expected):
        assert UnitConverter.format_display_time(dt_txt) == expected

    def test_format_day_label(self):
        today = date(2025, 1, 5)

        assert UnitConverter.format_day_label(today, today=today) == "Today"
        assert UnitConverter.format_day_label(date(2025, 1, 6), today=today) == "Monday, Jan 6"


class TestSkyConditions:
    """Test sky condition to asset mapping."""

    @pytest.mark.parametrize("condition,expected", [
        ("Thunderstorm", SkyAsset.THUNDERSTORM),
        ("rain", SkyAsset.RAIN),
        ("Drizzle", SkyAsset.RAIN),
        ("Clouds", SkyAsset.CLOUDY),
        ("Partly Cloudy", SkyAsset.CLOUDY),
        ("CLEAR", SkyAsset.SUNNY),
        ("Mist", SkyAsset.UNKNOWN),
        ("", SkyAsset.UNKNOWN),
        (None, SkyAsset.UNKNOWN),
    ])
    def test_asset_key(self, condition, expected):
        assert sky_condition_to_asset_key(condition) is expected

    def test_animation_path(self):
        assert SkyAsset.SUNNY.animation_path == "assets/animations/sunny.json"


class TestDateUtils:
    """Test date helpers."""

    def test_parse_provider_time(self):
        assert DateUtils.parse_provider_time("2024-01-15 12:00:00") == datetime(2024, 1, 15, 12, 0)
        assert DateUtils.parse_provider_time("2024-01-15T12:00:00") == datetime(2024, 1, 15, 12, 0)

    def test_parse_day_reads_date_prefix(self):
        assert DateUtils.parse_day("2024-01-15 21:00:00") == date(2024, 1, 15)

    def test_iso_round_trip_is_utc(self):
        moment = DateUtils.convert_to_timezone(datetime(2024, 1, 15, 6, 30), "Asia/Kolkata")

        parsed = DateUtils.parse_iso(DateUtils.to_iso(moment))

        assert parsed == datetime(2024, 1, 15, 6, 30, tzinfo=pytz.UTC)
        assert parsed.utcoffset().total_seconds() == 0

    def test_age_in_hours(self):
        reference = datetime(2024, 1, 15, 12, 0, tzinfo=pytz.UTC)

        assert DateUtils.age_in_hours(datetime(2024, 1, 15, 10, 0), reference) == pytest.approx(2.0)

    def test_convert_to_timezone(self):
        moment = datetime(2024, 1, 15, 6, 30, tzinfo=pytz.UTC)

        local = DateUtils.convert_to_timezone(moment, "Asia/Kolkata")

        assert (local.hour, local.minute) == (12, 0)
        assert local.utcoffset().total_seconds() == 5.5 * 3600

    def test_invalid_timezone(self):
        with pytest.raises(ValueError):
            DateUtils.parse_timezone("Mars/Olympus")


class TestModels:
    """Test provider parsing and snapshot invariants."""

    def test_entry_from_provider(self):
        entry = RawForecastEntry.from_provider({
            "dt_txt": "2024-01-15 12:00:00",
            "main": {"temp": 300.5, "humidity": 40, "pressure": 1010},
            "weather": [{"main": "Clear"}],
            "wind": {"speed": 2.5},
            "pop": 0.15,
        })

        assert entry.temperature_kelvin == 300.5
        assert entry.sky_condition == "Clear"
        assert entry.wind_speed == 2.5
        assert entry.precipitation_probability == 0.15

    def test_entry_without_weather(self):
        entry = RawForecastEntry.from_provider({"dt_txt": "2024-01-15 12:00:00", "main": {"temp": 280}})

        assert entry.sky_condition == "Unknown"
        assert entry.precipitation_probability == 0.0

    @pytest.mark.parametrize("dt_txt", [None, 1705320000, "", "tomorrow noon"])
    def test_entry_rejects_unusable_timestamp(self, dt_txt):
        with pytest.raises(ValueError):
            RawForecastEntry.from_provider({"dt_txt": dt_txt, "main": {"temp": 280}})

    def test_snapshot_current_must_lead_series(self, make_series, air_quality):
        series = make_series(3)

        with pytest.raises(ValueError):
            WeatherSnapshot(current=series[1], air_quality=air_quality, forecast_series=series)

    def test_snapshot_from_empty_series(self, air_quality):
        with pytest.raises(ValueError):
            WeatherSnapshot.from_series([], air_quality)

    def test_snapshot_dict_round_trip(self, make_series, air_quality):
        snapshot = WeatherSnapshot.from_series(make_series(4), air_quality, city_name="Pune")

        assert WeatherSnapshot.from_dict(snapshot.to_dict()) == snapshot


class TestDataValidator:
    """Test anomaly detection."""

    def test_clean_series(self, make_series):
        assert DataValidator().validate_series(make_series(8)) == []

    def test_series_anomalies(self, make_entry):
        series = [
            make_entry(timestamp="2024-01-15 12:00:00"),
            make_entry(timestamp="2024-01-15 09:00:00", humidity=120, pop=1.5),
        ]

        errors = DataValidator().validate_series(series)

        assert len(errors) == 3

    def test_air_quality_anomaly(self):
        errors = DataValidator().validate_air_quality(AirQualityReading(aqi_index=0, pm2_5=1.0, pm10=-2.0))

        assert len(errors) == 2
