"""
Render-ready weather report.

Recomputes every derived value (daily summaries, blocks, outlook, AQI
category, alert) from a session view; nothing here is cached.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .session import SessionView
from ..algorithms import AirQualityCategory, Predictor, build_weather_alert, classify_air_quality
from ..models import DailyAggregate, ForecastBlock
from ..processing import DataProcessor, SkyAsset, UnitConverter, sky_condition_to_asset_key


@dataclass
class WeatherReport:
    """Everything the current-conditions screen shows."""

    city_name: Optional[str]
    temperature: str
    sky_condition: str
    sky_asset: SkyAsset
    humidity_percent: float
    wind_speed: float
    pressure_hpa: float
    prediction: str
    air_quality: AirQualityCategory
    pm2_5: float
    pm10: float
    daily: List[DailyAggregate] = field(default_factory=list)
    blocks: List[ForecastBlock] = field(default_factory=list)
    alert: Optional[Tuple[str, str]] = None
    notice: Optional[str] = None
    is_stale: bool = False
    temperature_unit: str = "metric"


class ReportBuilder:
    """Turn a session view into a WeatherReport."""

    def __init__(
        self,
        processor: Optional[DataProcessor] = None,
        predictor: Optional[Predictor] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or logging.getLogger(__name__)
        self.processor = processor or DataProcessor(logger=logger)
        self.predictor = predictor or Predictor(logger)

    def build(self, view: SessionView) -> Optional[WeatherReport]:
        """Report for the view, or None when the view carries no data."""
        snapshot = view.snapshot
        if snapshot is None:
            return None

        current = snapshot.current
        series = snapshot.forecast_series
        return WeatherReport(
            city_name=view.city_name,
            temperature=self.processor.format_temperature(current.temperature_kelvin),
            sky_condition=current.sky_condition,
            sky_asset=sky_condition_to_asset_key(current.sky_condition),
            humidity_percent=current.humidity_percent,
            wind_speed=current.wind_speed,
            pressure_hpa=current.pressure_hpa,
            prediction=self.predictor.predict_next_day(series),
            air_quality=classify_air_quality(snapshot.air_quality.aqi_index, self.logger),
            pm2_5=snapshot.air_quality.pm2_5,
            pm10=snapshot.air_quality.pm10,
            daily=self.processor.group_by_day(series),
            blocks=self.processor.group_into_blocks(series),
            alert=build_weather_alert(current, self.logger),
            notice=view.notice,
            is_stale=view.is_stale,
            temperature_unit=self.processor.converter.temperature_unit,
        )


def format_report(report: WeatherReport) -> str:
    """Plain-text rendering used by the command line."""
    converter = UnitConverter(report.temperature_unit)
    lines = []
    title = (report.city_name or "Unknown location").upper()
    lines.append(f"{title}: {report.temperature}, {report.sky_condition}")
    if report.notice:
        lines.append(report.notice)
    lines.append(f"Prediction: {report.prediction}")
    lines.append(
        f"Humidity {report.humidity_percent:g}% | Wind {report.wind_speed:g}m/s | "
        f"Pressure {report.pressure_hpa:g}hPa"
    )
    lines.append(
        f"Air quality: {report.air_quality.message} "
        f"(PM2.5 {report.pm2_5:g}, PM10 {report.pm10:g})"
    )

    if report.blocks:
        lines.append("")
        lines.append("Weather Forecast")
        for block in report.blocks:
            lines.append(
                f"  {block.start_time}-{block.end_time}: {converter.format_celsius(block.mean_temperature_c)}, "
                f"{block.dominant_sky_condition}, wind {block.mean_wind_speed:.1f}m/s, "
                f"humidity {block.mean_humidity:.0f}%"
            )

    if report.daily:
        lines.append("")
        lines.append("5-Day Forecast")
        for day in report.daily:
            lines.append(
                f"  {UnitConverter.format_day_label(day.date)}: "
                f"{converter.format_celsius(day.high_temperature_c)}/{converter.format_celsius(day.low_temperature_c)}, "
                f"{day.average_precipitation_probability_percent:.0f}% rain, {day.dominant_sky_condition}"
            )

    if report.alert:
        lines.append("")
        lines.append(f"{report.alert[0]}: {report.alert[1]}")

    return "\n".join(lines)
