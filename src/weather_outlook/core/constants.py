"""
Application-wide constants for the weather pipeline.

Provider paths, conversion factors and the fixed thresholds used by the
aggregation and prediction heuristics.
"""

# Provider
DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_TILE_URL = "https://tile.openweathermap.org"
GEOCODING_DIRECT_PATH = "/geo/1.0/direct"
GEOCODING_REVERSE_PATH = "/geo/1.0/reverse"
FORECAST_PATH = "/data/2.5/forecast"
AIR_POLLUTION_PATH = "/data/2.5/air_pollution"
FORECAST_SUCCESS_CODE = "200"  # the forecast body reports "cod" as a string

# Map overlay layers (tile.openweathermap.org/map/{layer}/{z}/{x}/{y}.png)
MAP_LAYERS = ("temp_new", "precipitation_new", "clouds_new")

# Temperature
KELVIN_OFFSET = 273.15

# Aggregation
MAX_DAILY_AGGREGATES = 5
DEFAULT_BLOCK_SIZE = 3
DEFAULT_MAX_BLOCK_ENTRIES = 16
PROVIDER_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
UNKNOWN_CONDITION = "Unknown"

# Prediction
PREDICTION_WINDOW = 24  # entries after index 0
WARM_THRESHOLD_C = 25
COLD_THRESHOLD_C = 10
INSUFFICIENT_DATA_MESSAGE = "Insufficient data for prediction"
WARM_AND_SUNNY_MESSAGE = "Sunny and warm tomorrow!"
COLD_MESSAGE = "Cold weather expected tomorrow."
RAIN_LIKELY_MESSAGE = "Rain likely tomorrow, bring an umbrella."
STABLE_WEATHER_MESSAGE = "Stable weather expected tomorrow"

# Alerts
ALERT_TITLE = "Weather Alert"

# Air quality (OpenWeather 1-5 ordinal scale)
AQI_MIN = 1
AQI_MAX = 5

# Cache
CACHE_KEY = "weatherData"
DEFAULT_CACHE_FILE = "weather_cache.sqlite3"
STALENESS_THRESHOLD_HOURS = 24

# Defaults
DEFAULT_CITY = "Hyderabad"
DEFAULT_TIMEOUT = 30
