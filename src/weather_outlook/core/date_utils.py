"""
Date and timezone utilities.

Centralizes parsing of provider timestamps and cache timestamps with proper
timezone handling.
"""

from datetime import date, datetime
from typing import Optional
import pytz
from pytz.tzinfo import BaseTzInfo

from . import constants


class DateUtils:
    """Utilities for date and timezone handling."""

    @staticmethod
    def parse_timezone(timezone_str: str) -> BaseTzInfo:
        """
        Parse timezone string to pytz timezone object.

        Args:
            timezone_str: Timezone string (e.g., 'Asia/Kolkata', 'UTC')

        Returns:
            pytz timezone object

        Raises:
            ValueError: If timezone is invalid
        """
        try:
            return pytz.timezone(timezone_str)
        except pytz.exceptions.UnknownTimeZoneError:
            raise ValueError(f"Invalid timezone: {timezone_str}")

    @staticmethod
    def parse_provider_time(dt_txt: str) -> datetime:
        """
        Parse a provider 'dt_txt' string ('2024-01-15 12:00:00').

        The result is naive; the provider reports these strings without an
        offset and they are bucketed as-is.

        Raises:
            ValueError: If the string is not in the provider format
        """
        try:
            return datetime.strptime(dt_txt, constants.PROVIDER_TIME_FORMAT)
        except ValueError:
            # Tolerate ISO strings ('2024-01-15T12:00:00') from other sources
            return datetime.fromisoformat(dt_txt)

    @staticmethod
    def parse_day(dt_txt: str) -> date:
        """
        Calendar day of a provider timestamp.

        Only the leading 'yyyy-MM-dd' part is read; the time of day is ignored.
        """
        return date.fromisoformat(dt_txt[:10])

    @staticmethod
    def now_utc() -> datetime:
        """Current time as an aware UTC datetime."""
        return datetime.now(pytz.UTC)

    @staticmethod
    def to_utc(dt: datetime) -> datetime:
        """
        Convert datetime to UTC.

        Args:
            dt: Datetime object (can be naive or aware)

        Returns:
            Datetime in UTC (timezone-aware)
        """
        if dt.tzinfo is None:
            # Assume UTC if no timezone
            return pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC)

    @classmethod
    def to_iso(cls, dt: datetime) -> str:
        """ISO-8601 string of a datetime, normalized to UTC."""
        return cls.to_utc(dt).isoformat()

    @classmethod
    def parse_iso(cls, value: str) -> datetime:
        """
        Parse an ISO-8601 timestamp into an aware UTC datetime.

        Naive values are assumed to be UTC.
        """
        return cls.to_utc(datetime.fromisoformat(value))

    @classmethod
    def age_in_hours(cls, moment: datetime, reference: Optional[datetime] = None) -> float:
        """Hours elapsed between moment and reference (defaults to now)."""
        reference = cls.to_utc(reference) if reference is not None else cls.now_utc()
        return (reference - cls.to_utc(moment)).total_seconds() / 3600

    @classmethod
    def convert_to_timezone(cls, dt: datetime, timezone_str: str) -> datetime:
        """
        Convert a datetime to a different timezone.

        Naive datetimes are assumed to be UTC.

        Raises:
            ValueError: If the timezone is invalid
        """
        return cls.to_utc(dt).astimezone(cls.parse_timezone(timezone_str))
