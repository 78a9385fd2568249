"""
Error taxonomy for the weather pipeline.

Geocoding and fetching code raise these and never recover from them;
WeatherSession is the only place that catches them.
"""


class WeatherOutlookError(Exception):
    """Base class for all pipeline errors."""


class InvalidInputError(WeatherOutlookError):
    """Empty or malformed user input (e.g. a blank city name)."""


class ConfigurationError(WeatherOutlookError):
    """Missing or invalid configuration, such as the provider API key."""


class UpstreamError(WeatherOutlookError):
    """The provider answered with a non-success status or could not be reached."""

    def __init__(self, message: str, status_code=None):
        super().__init__(message)
        self.status_code = status_code


class NotFoundError(WeatherOutlookError):
    """Geocoding returned an empty result set."""


class StorageUnavailableError(WeatherOutlookError):
    """The cache store could not be opened, read or written."""
