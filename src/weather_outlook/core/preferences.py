"""
User display preferences with change notification.

Replaces process-wide theme flags: components receive a Preferences instance
and subscribe to the keys they care about.
"""

import logging
from typing import Any, Callable, Dict, List, Optional

Listener = Callable[[Dict[str, Any]], None]

_FIELDS = ("dark_mode", "temperature_unit", "notifications_enabled")


class Preferences:
    """Observable dark mode / temperature unit / notification settings."""

    def __init__(
        self,
        dark_mode: bool = False,
        temperature_unit: str = "metric",
        notifications_enabled: bool = True,
        logger: Optional[logging.Logger] = None
    ):
        self.logger = logger or logging.getLogger(__name__)
        self._values: Dict[str, Any] = {
            "dark_mode": dark_mode,
            "temperature_unit": temperature_unit,
            "notifications_enabled": notifications_enabled,
        }
        self._validate(self._values)
        self._listeners: List[Listener] = []

    @classmethod
    def from_config(cls, config, logger: Optional[logging.Logger] = None) -> "Preferences":
        """Build preferences from the display/notification config sections."""
        return cls(
            dark_mode=config.dark_mode,
            temperature_unit=config.temperature_unit,
            notifications_enabled=config.notifications_enabled,
            logger=logger
        )

    @staticmethod
    def _validate(values: Dict[str, Any]) -> None:
        unit = values.get("temperature_unit")
        if unit is not None and unit not in ("metric", "imperial"):
            raise ValueError(f"Unsupported temperature unit: {unit}")

    @property
    def dark_mode(self) -> bool:
        return self._values["dark_mode"]

    @property
    def temperature_unit(self) -> str:
        return self._values["temperature_unit"]

    @property
    def notifications_enabled(self) -> bool:
        return self._values["notifications_enabled"]

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with the changed keys after each update.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> Dict[str, Any]:
        """
        Apply changes and notify listeners of the keys whose value changed.

        Raises:
            KeyError: For an unknown preference name
            ValueError: For an unsupported value
        """
        unknown = [key for key in changes if key not in _FIELDS]
        if unknown:
            raise KeyError(f"Unknown preferences: {', '.join(unknown)}")
        self._validate(changes)

        changed = {
            key: value for key, value in changes.items() if self._values[key] != value
        }
        if not changed:
            return changed

        self._values.update(changed)
        self.logger.debug(f"Preferences changed: {changed}")
        for listener in list(self._listeners):
            listener(dict(changed))
        return changed

    def as_dict(self) -> Dict[str, Any]:
        return dict(self._values)
