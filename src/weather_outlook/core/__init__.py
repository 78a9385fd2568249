"""
Core utilities for the weather pipeline.

Provides configuration management, logging, errors and preferences.
"""

from .config import Config
from .logger import setup_logger, LoggerContext
from . import constants
from .date_utils import DateUtils
from .preferences import Preferences
from .exceptions import (
    WeatherOutlookError,
    InvalidInputError,
    ConfigurationError,
    UpstreamError,
    NotFoundError,
    StorageUnavailableError,
)

__all__ = [
    "Config",
    "setup_logger",
    "LoggerContext",
    "constants",
    "DateUtils",
    "Preferences",
    "WeatherOutlookError",
    "InvalidInputError",
    "ConfigurationError",
    "UpstreamError",
    "NotFoundError",
    "StorageUnavailableError",
]
