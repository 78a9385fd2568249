"""
Configuration module for the weather pipeline.

Loads configuration from JSON file and environment variables.
"""

import json
import os
from typing import Dict, Any, Optional
from pathlib import Path

from . import constants
from .date_utils import DateUtils


class Config:
    """Configuration manager for the application."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration.

        Args:
            config_file: Path to configuration JSON file. If None, uses CONFIG_FILE env var
                        or defaults to 'config.json'
        """
        self.config_file = config_file or os.getenv("CONFIG_FILE", "config.json")
        self.config: Dict[str, Any] = {}
        self._load_config()
        self._override_from_env()
        self._validate_config()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_file}")

        with open(config_path, "r", encoding="utf-8") as f:
            self.config = json.load(f)

    def _set(self, section: str, key: str, value: Any) -> None:
        if section not in self.config:
            self.config[section] = {}
        self.config[section][key] = value

    def _override_from_env(self) -> None:
        """Override configuration with environment variables."""
        # API configuration
        if os.getenv("API_BASE_URL"):
            self._set("api", "base_url", os.getenv("API_BASE_URL"))

        if os.getenv("OPENWEATHER_API_KEY"):
            self._set("api", "key", os.getenv("OPENWEATHER_API_KEY"))

        # Storage
        if os.getenv("WEATHER_DATA_DIR"):
            self._set("storage", "data_dir", os.getenv("WEATHER_DATA_DIR"))

        # Session
        if os.getenv("DEFAULT_CITY"):
            self._set("session", "default_city", os.getenv("DEFAULT_CITY"))

        # Environment
        if os.getenv("ENVIRONMENT"):
            self.config["environment"] = os.getenv("ENVIRONMENT")

    def _validate_config(self) -> None:
        """Validate that required configuration keys are present."""
        required_config = {
            "api": ["base_url", "timeout"],
        }

        missing_sections = [
            section for section in required_config if section not in self.config
        ]
        if missing_sections:
            raise ValueError(
                f"Missing required configuration sections: {', '.join(missing_sections)}"
            )

        missing_keys = []
        for section, keys in required_config.items():
            for key in keys:
                if key not in self.config[section]:
                    missing_keys.append(f"{section}.{key}")

        if missing_keys:
            raise ValueError(
                f"Missing required configuration keys: {', '.join(missing_keys)}"
            )

        unit = self.temperature_unit
        if unit not in ("metric", "imperial"):
            raise ValueError(f"Invalid display.temperature_unit: {unit}")

        DateUtils.parse_timezone(self.timezone)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key (supports dot notation).

        Args:
            key: Configuration key (e.g., 'api.base_url')
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value = self.config

        for k in keys:
            if isinstance(value, dict):
                value = value.get(k)
                if value is None:
                    return default
            else:
                return default

        return value

    @property
    def api_base_url(self) -> str:
        """Get API base URL."""
        return self.get("api.base_url", constants.DEFAULT_BASE_URL)

    @property
    def api_key(self) -> Optional[str]:
        """Get provider API key (may be missing; checked before each fetch)."""
        return self.get("api.key")

    @property
    def api_timeout(self) -> int:
        """Get API timeout in seconds."""
        return self.get("api.timeout", constants.DEFAULT_TIMEOUT)

    @property
    def api_max_retries(self) -> int:
        """Get transport-level retry attempts. The pipeline itself never retries."""
        return self.get("api.max_retries", 0)

    @property
    def tile_base_url(self) -> str:
        """Get map tile base URL."""
        return self.get("api.tile_url", constants.DEFAULT_TILE_URL)

    @property
    def default_city(self) -> str:
        """Get the city shown when nothing else was requested."""
        return self.get("session.default_city", constants.DEFAULT_CITY)

    @property
    def staleness_hours(self) -> float:
        """Get the maximum age of a cached snapshot usable as fallback."""
        return self.get("session.staleness_hours", constants.STALENESS_THRESHOLD_HOURS)

    @property
    def data_dir(self) -> str:
        """Get application data directory."""
        return self.get("storage.data_dir", "data")

    @property
    def cache_file(self) -> str:
        """Get full path of the cache database."""
        file_name = self.get("storage.cache_file", constants.DEFAULT_CACHE_FILE)
        return str(Path(self.data_dir) / file_name)

    @property
    def temperature_unit(self) -> str:
        """Get display temperature unit ('metric' or 'imperial')."""
        return self.get("display.temperature_unit", "metric")

    @property
    def dark_mode(self) -> bool:
        """Get dark mode preference."""
        return self.get("display.dark_mode", False)

    @property
    def notifications_enabled(self) -> bool:
        """Check if weather alerts should be produced."""
        return self.get("notifications.enabled", True)

    @property
    def timezone(self) -> str:
        """Get the timezone used to show timestamps (e.g. the cache notice)."""
        return self.get("display.timezone", "UTC")

    def __repr__(self) -> str:
        """String representation of config."""
        return f"Config(file={self.config_file}, env={self.get('environment')})"
