"""
Unit conversion module.

Converts provider units (Kelvin, raw timestamps) to display units.
"""

import logging
import math
from datetime import date, datetime
from typing import Optional

from ..core import constants
from ..core.date_utils import DateUtils


class UnitConverter:
    """Convert between provider and display units."""

    def __init__(self, temperature_unit: str = "metric", logger: Optional[logging.Logger] = None):
        """
        Initialize unit converter.

        Args:
            temperature_unit: 'metric' (Celsius) or 'imperial' (Fahrenheit)
            logger: Logger instance
        """
        if temperature_unit not in ("metric", "imperial"):
            raise ValueError(f"Unsupported temperature unit: {temperature_unit}")
        self.temperature_unit = temperature_unit
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def round_half_away(value: float) -> int:
        """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
        return int(math.copysign(math.floor(abs(value) + 0.5), value))

    @staticmethod
    def kelvin_to_celsius(kelvin: float) -> float:
        """°C = K - 273.15"""
        return kelvin - constants.KELVIN_OFFSET

    @staticmethod
    def celsius_to_fahrenheit(celsius: float) -> float:
        return celsius * 9 / 5 + 32

    def format_temperature(self, kelvin: float) -> str:
        """Rounded temperature with unit symbol, e.g. '27°C'."""
        return self.format_celsius(self.kelvin_to_celsius(kelvin))

    def format_celsius(self, celsius: float) -> str:
        """Celsius value shown in the display unit, e.g. '18°C' or '64°F'."""
        if self.temperature_unit == "imperial":
            return f"{self.round_half_away(self.celsius_to_fahrenheit(celsius))}°F"
        return f"{self.round_half_away(celsius)}°C"

    @staticmethod
    def format_display_time(dt_txt: str) -> str:
        """Hour label of a provider timestamp, e.g. '3 PM'."""
        moment = DateUtils.parse_provider_time(dt_txt)
        hour = moment.hour % 12 or 12
        suffix = "AM" if moment.hour < 12 else "PM"
        return f"{hour} {suffix}"

    @staticmethod
    def format_day_label(day: date, today: Optional[date] = None) -> str:
        """'Today' or a weekday label such as 'Monday, Jan 6'."""
        today = today or datetime.now().date()
        if day == today:
            return "Today"
        return f"{day.strftime('%A, %b')} {day.day}"
