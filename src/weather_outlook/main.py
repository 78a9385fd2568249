"""
Main entry point for the weather outlook pipeline.

Fetches weather for a city (or the current location), falling back to the
cached snapshot when the provider cannot be reached.
"""

import sys
from typing import Optional

from .core import Config, Preferences, setup_logger, LoggerContext
from .api import OpenWeatherAPI
from .processing import DataProcessor
from .algorithms import Predictor
from .services import (
    CacheStore,
    Geocoder,
    ReportBuilder,
    SessionState,
    SessionView,
    WeatherFetcher,
    WeatherSession,
    format_report,
)


class WeatherOutlookApp:
    """Main application wiring the pipeline components together."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(
            log_file=self.config.get("logging.file"),
            log_level=self.config.get("logging.level", "INFO"),
            console_level=self.config.get("logging.console_level", "INFO")
        )
        self.logger.info("=" * 60)
        self.logger.info("Weather Outlook")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.preferences = Preferences.from_config(self.config, logger=self.logger)

        # Initialize components (will be set in initialize_components)
        self.api_client: Optional[OpenWeatherAPI] = None
        self.session: Optional[WeatherSession] = None
        self.report_builder: Optional[ReportBuilder] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        self.api_client = OpenWeatherAPI.from_config(self.config, logger=self.logger)
        geocoder = Geocoder(self.api_client, logger=self.logger)
        fetcher = WeatherFetcher(self.api_client, geocoder=geocoder, logger=self.logger)
        cache_store = CacheStore(self.config.cache_file, logger=self.logger)

        self.session = WeatherSession(
            fetcher=fetcher,
            cache_store=cache_store,
            geocoder=geocoder,
            staleness_hours=self.config.staleness_hours,
            default_city=self.config.default_city,
            preferences=self.preferences,
            notifier=self._print_alert,
            display_timezone=self.config.timezone,
            logger=self.logger
        )

        processor = DataProcessor(
            temperature_unit=self.preferences.temperature_unit,
            logger=self.logger
        )
        self.report_builder = ReportBuilder(processor, Predictor(self.logger), logger=self.logger)
        self.preferences.subscribe(self._on_preferences_changed)

        self.logger.info("All components initialized successfully")

    def _on_preferences_changed(self, changes: dict) -> None:
        if "temperature_unit" in changes and self.report_builder is not None:
            self.report_builder.processor = DataProcessor(
                temperature_unit=changes["temperature_unit"],
                logger=self.logger
            )

    def _print_alert(self, title: str, body: str) -> None:
        print(f"[{title}] {body}")

    def run(
        self,
        city: Optional[str] = None,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None
    ) -> SessionView:
        """
        Fetch and print weather for a city or a coordinate pair.

        Args:
            city: City name. Defaults to the configured city.
            latitude: Latitude of the current location
            longitude: Longitude of the current location

        Returns:
            Final session view
        """
        try:
            self.initialize_components()

            if not self.session or not self.report_builder:
                raise RuntimeError("Components not properly initialized")

            with LoggerContext(self.logger, "weather request"):
                if latitude is not None and longitude is not None:
                    view = self.session.request_current_location(latitude, longitude)
                else:
                    view = self.session.request_city(city or self.config.default_city)

            report = self.report_builder.build(view)
            if report is None:
                print(view.notice)
            else:
                print(format_report(report))

            return view

        finally:
            if self.session:
                self.session.close()
            if self.api_client:
                self.api_client.close()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Weather Outlook: current conditions, forecast and air quality"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--city",
        type=str,
        default=None,
        help="City name. Default: session.default_city from the configuration"
    )
    parser.add_argument("--lat", type=float, default=None, help="Latitude of the current location")
    parser.add_argument("--lon", type=float, default=None, help="Longitude of the current location")

    args = parser.parse_args()

    if (args.lat is None) != (args.lon is None):
        print("--lat and --lon must be given together")
        sys.exit(1)

    try:
        app = WeatherOutlookApp(config_file=args.config)
        view = app.run(city=args.city, latitude=args.lat, longitude=args.lon)
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)

    if view.state is SessionState.UNAVAILABLE:
        sys.exit(1)


if __name__ == "__main__":
    main()
