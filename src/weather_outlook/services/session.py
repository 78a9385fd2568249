"""
Weather session orchestration.

The session is the single recovery point of the pipeline. Each request goes
Idle/any -> Fetching -> Visible | StaleFallback | Unavailable:

- Visible: the fetch succeeded; the snapshot was written through the cache.
- StaleFallback: the fetch failed but the cached snapshot is younger than
  the staleness threshold; it is exposed, tagged stale, with the error.
- Unavailable: the fetch failed and no usable cache exists.

Requests on one session are serialized, so the cache and the exposed state
always reflect the last request to finish.
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, List, Optional, TYPE_CHECKING

from .cache_store import CacheStore
from ..algorithms.advisories import build_weather_alert
from ..core import constants
from ..core.date_utils import DateUtils
from ..core.exceptions import StorageUnavailableError, WeatherOutlookError
from ..models import WeatherSnapshot

if TYPE_CHECKING:
    from .geocoder import Geocoder
    from .weather_fetcher import WeatherFetcher
    from ..core.preferences import Preferences


class SessionState(Enum):
    IDLE = "idle"
    FETCHING = "fetching"
    VISIBLE = "visible"
    STALE_FALLBACK = "stale_fallback"
    UNAVAILABLE = "unavailable"


@dataclass
class SessionView:
    """What the presentation layer renders for the current state."""

    state: SessionState
    city_name: Optional[str] = None
    snapshot: Optional[WeatherSnapshot] = None
    fetched_at: Optional[datetime] = None
    error: Optional[Exception] = None
    display_timezone: str = "UTC"

    @property
    def is_stale(self) -> bool:
        return self.state is SessionState.STALE_FALLBACK

    @property
    def has_data(self) -> bool:
        return self.snapshot is not None

    @property
    def notice(self) -> Optional[str]:
        """Non-blocking message for the user, if any."""
        if self.state is SessionState.STALE_FALLBACK and self.fetched_at is not None:
            updated = DateUtils.convert_to_timezone(self.fetched_at, self.display_timezone)
            return (
                f"Failed to fetch weather: {self.error}. "
                f"Showing cached data (last updated: {updated.isoformat()})"
            )
        if self.state is SessionState.UNAVAILABLE:
            return f"No weather data available: {self.error}"
        return None


Listener = Callable[[SessionView], None]
Notifier = Callable[[str, str], None]


class WeatherSession:
    """Fetch weather with cache fallback and publish state transitions."""

    def __init__(
        self,
        fetcher: "WeatherFetcher",
        cache_store: Optional[CacheStore] = None,
        geocoder: Optional["Geocoder"] = None,
        staleness_hours: float = constants.STALENESS_THRESHOLD_HOURS,
        default_city: str = constants.DEFAULT_CITY,
        preferences: Optional["Preferences"] = None,
        notifier: Optional[Notifier] = None,
        display_timezone: str = "UTC",
        clock: Callable[[], datetime] = DateUtils.now_utc,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize weather session.

        Args:
            fetcher: Snapshot fetcher
            cache_store: Snapshot cache (no fallback when omitted)
            geocoder: Geocoder for location requests (defaults to the fetcher's)
            staleness_hours: Maximum age of a cached snapshot used as fallback
            default_city: City used by refresh() before any request
            preferences: Display preferences (alerts are skipped when disabled)
            notifier: Receives (title, body) weather alerts after fresh fetches
            display_timezone: Timezone of the timestamp in the stale-data notice
            clock: Source of "now" for staleness checks
            logger: Logger instance
        """
        self.fetcher = fetcher
        self.cache_store = cache_store
        self.geocoder = geocoder or fetcher.geocoder
        self.staleness_hours = staleness_hours
        self.default_city = default_city
        self.preferences = preferences
        self.notifier = notifier
        self.display_timezone = display_timezone
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)

        self._view = SessionView(state=SessionState.IDLE)
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()
        self._executor: Optional[ThreadPoolExecutor] = None

    @property
    def view(self) -> SessionView:
        return self._view

    @property
    def state(self) -> SessionState:
        return self._view.state

    @property
    def city_name(self) -> Optional[str]:
        return self._view.city_name

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the new view on every transition.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _transition(self, view: SessionView) -> SessionView:
        self.logger.debug(f"Session {self._view.state.value} -> {view.state.value}")
        self._view = view
        for listener in list(self._listeners):
            try:
                listener(view)
            except Exception as e:
                self.logger.error(f"Session listener failed: {e}", exc_info=True)
        return view

    # Requests -----------------------------------------------------------
    def request_city(self, city_name: str) -> SessionView:
        """Fetch weather for a city and return the resulting view."""
        with self._lock:
            self._transition(SessionView(state=SessionState.FETCHING, city_name=city_name))
            return self._fetch(city_name)

    def request_current_location(self, latitude: float, longitude: float) -> SessionView:
        """Resolve coordinates to a city name, then fetch weather for it."""
        with self._lock:
            self._transition(SessionView(state=SessionState.FETCHING))
            try:
                city_name = self.geocoder.reverse(latitude, longitude)
            except WeatherOutlookError as e:
                self.logger.warning(f"Could not resolve current location: {e}")
                return self._fall_back(None, e)
            self.logger.info(f"Current location resolved to '{city_name}'")
            return self._fetch(city_name)

    def refresh(self) -> SessionView:
        """Fetch again for the current city (or the default city)."""
        return self.request_city(self._view.city_name or self.default_city)

    def submit_city(self, city_name: str) -> "Future[SessionView]":
        """Run request_city on a background worker; requests run one at a time."""
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="weather-session")
        return self._executor.submit(self.request_city, city_name)

    def close(self) -> None:
        """Wait for background requests and release the worker."""
        if self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    # Internals ----------------------------------------------------------
    def _fetch(self, city_name: str) -> SessionView:
        try:
            snapshot = self.fetcher.fetch_snapshot(city_name)
        except WeatherOutlookError as e:
            self.logger.warning(f"Fetch failed for '{city_name}': {e}")
            return self._fall_back(city_name, e)

        fetched_at = DateUtils.to_utc(self.clock())
        if self.cache_store is not None:
            try:
                fetched_at = self.cache_store.put(snapshot, fetched_at=fetched_at).fetched_at
            except StorageUnavailableError as e:
                self.logger.warning(f"Snapshot not cached: {e}")

        view = self._transition(SessionView(
            state=SessionState.VISIBLE,
            city_name=snapshot.city_name or city_name,
            snapshot=snapshot,
            fetched_at=fetched_at,
        ))
        self._notify(snapshot)
        return view

    def _fall_back(self, city_name: Optional[str], error: Exception) -> SessionView:
        record = None
        if self.cache_store is not None:
            try:
                record = self.cache_store.get()
            except StorageUnavailableError as e:
                self.logger.warning(f"Cache unavailable for fallback: {e}")

        if record is not None:
            age = DateUtils.age_in_hours(record.fetched_at, self.clock())
            if age < self.staleness_hours:
                self.logger.info(f"Showing cached snapshot ({age:.1f}h old)")
                return self._transition(SessionView(
                    state=SessionState.STALE_FALLBACK,
                    city_name=record.snapshot.city_name or city_name,
                    snapshot=record.snapshot,
                    fetched_at=record.fetched_at,
                    error=error,
                    display_timezone=self.display_timezone,
                ))
            self.logger.info(
                f"Cached snapshot is {age:.1f}h old (limit {self.staleness_hours}h), not used"
            )

        return self._transition(SessionView(
            state=SessionState.UNAVAILABLE,
            city_name=city_name,
            error=error,
        ))

    def _notify(self, snapshot: WeatherSnapshot) -> None:
        if self.notifier is None:
            return
        if self.preferences is not None and not self.preferences.notifications_enabled:
            return

        alert = build_weather_alert(snapshot.current, self.logger)
        if alert is None:
            return
        try:
            self.notifier(*alert)
        except Exception as e:
            self.logger.error(f"Error sending notification: {e}", exc_info=True)
