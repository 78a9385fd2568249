"""
Tests for the next-day predictor and user advisories.
"""

import unittest
from unittest.mock import Mock

import pytest

from src.weather_outlook.algorithms import Predictor, build_weather_alert, classify_air_quality
from src.weather_outlook.algorithms.advisories import RAIN_ALERT, SUNNY_ALERT, COLD_ALERT
from src.weather_outlook.core import constants


def kelvin(celsius):
    return celsius + constants.KELVIN_OFFSET


class TestPredictor:
    """Test cases for Predictor.predict_next_day."""

    @pytest.fixture
    def predictor(self):
        return Predictor()

    def test_insufficient_data(self, predictor, make_series):
        assert predictor.predict_next_day(make_series(24)) == constants.INSUFFICIENT_DATA_MESSAGE
        assert predictor.predict_next_day([]) == constants.INSUFFICIENT_DATA_MESSAGE

    def test_rain_likely(self, predictor, make_series):
        series = make_series(25, temps=kelvin(15), skies="Rain")

        assert predictor.predict_next_day(series) == constants.RAIN_LIKELY_MESSAGE

    def test_warm_and_sunny(self, predictor, make_series):
        series = make_series(40, temps=kelvin(28), skies="Clear")

        assert predictor.predict_next_day(series) == constants.WARM_AND_SUNNY_MESSAGE

    def test_cold_beats_rain(self, predictor, make_series):
        series = make_series(25, temps=kelvin(5), skies="Rain")

        assert predictor.predict_next_day(series) == constants.COLD_MESSAGE

    def test_warm_but_cloudy_is_stable(self, predictor, make_series):
        series = make_series(25, temps=kelvin(28), skies="Clouds")

        assert predictor.predict_next_day(series) == constants.STABLE_WEATHER_MESSAGE

    def test_ignores_current_entry(self, predictor, make_series):
        """Index 0 is outside the window even when it would change the outcome."""
        temps = [kelvin(-30)] + [kelvin(15)] * 24
        skies = ["Snow"] + ["Rain"] * 24

        series = make_series(25, temps=temps, skies=skies)

        assert predictor.predict_next_day(series) == constants.RAIN_LIKELY_MESSAGE

    def test_ignores_entries_after_window(self, predictor, make_series):
        skies = ["Clear"] + ["Clouds"] * 24 + ["Rain"] * 15
        series = make_series(40, temps=kelvin(15), skies=skies)

        assert predictor.predict_next_day(series) == constants.STABLE_WEATHER_MESSAGE


class TestWeatherAlert:
    """Test cases for build_weather_alert."""

    def test_rain(self, make_entry):
        assert build_weather_alert(make_entry(kelvin=kelvin(30), sky="Rain")) == (
            constants.ALERT_TITLE, RAIN_ALERT
        )

    def test_clear_and_hot(self, make_entry):
        assert build_weather_alert(make_entry(kelvin=kelvin(30), sky="Clear")) == (
            constants.ALERT_TITLE, SUNNY_ALERT
        )

    def test_clear_at_threshold_is_not_hot(self, make_entry):
        assert build_weather_alert(make_entry(kelvin=kelvin(25), sky="Clear")) is None

    def test_cold(self, make_entry):
        assert build_weather_alert(make_entry(kelvin=kelvin(3), sky="Clouds")) == (
            constants.ALERT_TITLE, COLD_ALERT
        )

    def test_mild(self, make_entry):
        assert build_weather_alert(make_entry(kelvin=kelvin(18), sky="Clouds")) is None


class TestAirQualityCategory(unittest.TestCase):
    """Test AQI classification."""

    def test_known_indices(self):
        labels = [classify_air_quality(i).label for i in range(1, 6)]
        self.assertEqual(labels, ["Good", "Fair", "Moderate", "Poor", "Very Poor"])

    def test_message(self):
        category = classify_air_quality(1)
        self.assertEqual(category.message, "Good - Enjoy outdoor activities!")

    def test_out_of_range_is_unknown_and_logged(self):
        logger = Mock()

        category = classify_air_quality(7, logger)

        self.assertEqual(category.label, "Unknown")
        self.assertEqual(category.advice, "Check data reliability.")
        self.assertEqual(category.aqi_index, 7)
        logger.warning.assert_called_once()
