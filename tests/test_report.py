"""
Tests for the report builder and the command-line application.
"""

import json
import sys
from datetime import datetime

import pytest
import pytz

from src.weather_outlook.core import constants
from src.weather_outlook.main import WeatherOutlookApp, main
from src.weather_outlook.models import WeatherSnapshot
from src.weather_outlook.processing import DataProcessor, SkyAsset
from src.weather_outlook.services import ReportBuilder, SessionState, SessionView, format_report

BASE_URL = "https://api.test"
NOW = datetime(2024, 1, 15, 12, 0, tzinfo=pytz.UTC)


class TestReportBuilder:
    """Test cases for ReportBuilder."""

    @pytest.fixture
    def builder(self):
        return ReportBuilder()

    @pytest.fixture
    def view(self, make_series, air_quality):
        series = make_series(40, temps=constants.KELVIN_OFFSET + 15, skies="Rain", pops=0.8)
        snapshot = WeatherSnapshot.from_series(series, air_quality, city_name="Hyderabad")
        return SessionView(
            state=SessionState.VISIBLE, city_name="Hyderabad", snapshot=snapshot, fetched_at=NOW
        )

    def test_build(self, builder, view):
        report = builder.build(view)

        assert report.temperature == "15°C"
        assert report.sky_asset is SkyAsset.RAIN
        assert report.prediction == constants.RAIN_LIKELY_MESSAGE
        assert report.air_quality.label == "Fair"
        assert len(report.daily) == 5
        assert len(report.blocks) == 6
        assert report.alert is not None
        assert not report.is_stale

    def test_no_data(self, builder):
        view = SessionView(state=SessionState.UNAVAILABLE, error=RuntimeError("offline"))

        assert builder.build(view) is None

    def test_stale_report_carries_notice(self, builder, view):
        view.state = SessionState.STALE_FALLBACK
        view.error = RuntimeError("offline")

        report = builder.build(view)

        assert report.is_stale
        assert "offline" in report.notice

    def test_format_report(self, builder, view):
        text = format_report(builder.build(view))

        assert text.startswith("HYDERABAD: 15°C, Rain")
        assert "Prediction: Rain likely tomorrow, bring an umbrella." in text
        assert "5-Day Forecast" in text
        assert "Weather Alert:" in text

    def test_format_report_in_fahrenheit(self, view):
        builder = ReportBuilder(DataProcessor(temperature_unit="imperial"))

        text = format_report(builder.build(view))

        assert text.startswith("HYDERABAD: 59°F, Rain")
        assert ": 59°F, Rain, wind" in text
        assert "59°F/59°F" in text
        assert "°C" not in text


class TestWeatherOutlookApp:
    """End-to-end runs against stubbed provider endpoints."""

    @pytest.fixture
    def config_file(self, tmp_path, monkeypatch):
        for name in ("OPENWEATHER_API_KEY", "API_BASE_URL", "WEATHER_DATA_DIR", "DEFAULT_CITY", "ENVIRONMENT"):
            monkeypatch.delenv(name, raising=False)
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "app.log"))

        path = tmp_path / "config.json"
        path.write_text(json.dumps({
            "api": {"base_url": BASE_URL, "key": "test-key", "timeout": 5},
            "storage": {"data_dir": str(tmp_path / "data")},
        }), encoding="utf-8")
        return str(path)

    @pytest.fixture
    def provider(self, requests_mock, forecast_body, geocode_body, air_pollution_body):
        requests_mock.get(f"{BASE_URL}/data/2.5/forecast", json=forecast_body(40))
        requests_mock.get(f"{BASE_URL}/geo/1.0/direct", json=geocode_body)
        requests_mock.get(f"{BASE_URL}/geo/1.0/reverse", json=geocode_body)
        requests_mock.get(f"{BASE_URL}/data/2.5/air_pollution", json=air_pollution_body)
        return requests_mock

    def test_run_city(self, config_file, provider, capsys):
        view = WeatherOutlookApp(config_file).run(city="Hyderabad")

        assert view.state is SessionState.VISIBLE
        assert "HYDERABAD: 20°C, Clear" in capsys.readouterr().out

    def test_run_current_location(self, config_file, provider):
        view = WeatherOutlookApp(config_file).run(latitude=17.38, longitude=78.47)

        assert view.city_name == "Hyderabad"

    def test_second_run_falls_back_to_cache(self, config_file, provider, capsys):
        WeatherOutlookApp(config_file).run(city="Hyderabad")
        provider.get(f"{BASE_URL}/data/2.5/forecast", status_code=503)

        view = WeatherOutlookApp(config_file).run(city="Hyderabad")

        assert view.state is SessionState.STALE_FALLBACK
        assert "Showing cached data" in capsys.readouterr().out

    def test_main_exits_when_unavailable(self, config_file, requests_mock, monkeypatch):
        requests_mock.get(f"{BASE_URL}/data/2.5/forecast", status_code=500)
        monkeypatch.setattr(sys, "argv", ["weather-outlook", "--config", config_file, "--city", "Paris"])

        with pytest.raises(SystemExit) as exc_info:
            main()

        assert exc_info.value.code == 1

    def test_main_requires_both_coordinates(self, config_file, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["weather-outlook", "--config", config_file, "--lat", "17.38"])

        with pytest.raises(SystemExit):
            main()

    def test_unit_change_reaches_report(self, config_file):
        app = WeatherOutlookApp(config_file)
        app.initialize_components()

        app.preferences.update(temperature_unit="imperial")

        assert app.report_builder.processor.format_temperature(273.15) == "32°F"
        app.api_client.close()
