"""
Persistent snapshot cache.

Keeps the last successful snapshot under one fixed key in an SQLite file.
The store never judges staleness; callers compare the returned timestamp
against their own threshold.
"""

import json
import logging
import sqlite3
from contextlib import closing
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from ..core import constants
from ..core.date_utils import DateUtils
from ..core.exceptions import StorageUnavailableError
from ..models import CacheRecord, WeatherSnapshot

_SCHEMA = """
CREATE TABLE IF NOT EXISTS cache_entries (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL
)
"""


class CacheStore:
    """Single-record key-value cache backed by SQLite."""

    def __init__(
        self,
        db_path: str,
        key: str = constants.CACHE_KEY,
        clock: Callable[[], datetime] = DateUtils.now_utc,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize cache store.

        Args:
            db_path: Path of the SQLite file (parent directories are created)
            key: Record key
            clock: Source of the timestamp written with each record
            logger: Logger instance
        """
        self.db_path = db_path
        self.key = key
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)

    def _connect(self) -> sqlite3.Connection:
        try:
            Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            connection = sqlite3.connect(self.db_path, timeout=5)
            connection.execute(_SCHEMA)
            return connection
        except (sqlite3.Error, OSError) as e:
            self.logger.error(f"Cannot open cache at {self.db_path}: {e}")
            raise StorageUnavailableError(f"Cannot open cache at {self.db_path}: {e}") from e

    def put(self, snapshot: WeatherSnapshot, fetched_at: Optional[datetime] = None) -> CacheRecord:
        """
        Store a snapshot, replacing any previous record.

        Args:
            snapshot: Snapshot to persist
            fetched_at: Record timestamp (defaults to now)

        Returns:
            The record as written

        Raises:
            StorageUnavailableError: If the database cannot be opened or written
        """
        record = CacheRecord(
            snapshot=snapshot,
            fetched_at=DateUtils.to_utc(fetched_at or self.clock()),
        )
        payload = json.dumps({
            "data": snapshot.to_dict(),
            "timestamp": DateUtils.to_iso(record.fetched_at),
        })

        with closing(self._connect()) as connection:
            try:
                with connection:
                    connection.execute(
                        "INSERT OR REPLACE INTO cache_entries (key, value) VALUES (?, ?)",
                        (self.key, payload)
                    )
            except sqlite3.Error as e:
                self.logger.error(f"Cache write failed: {e}")
                raise StorageUnavailableError(f"Cache write failed: {e}") from e

        self.logger.debug(f"Cached snapshot for '{snapshot.city_name}' at {record.fetched_at.isoformat()}")
        return record

    def get(self) -> Optional[CacheRecord]:
        """
        Most recently stored record.

        Returns:
            The record, or None if nothing was ever stored

        Raises:
            StorageUnavailableError: If the database cannot be read or the
                record cannot be decoded
        """
        with closing(self._connect()) as connection:
            try:
                row = connection.execute(
                    "SELECT value FROM cache_entries WHERE key = ?", (self.key,)
                ).fetchone()
            except sqlite3.Error as e:
                self.logger.error(f"Cache read failed: {e}")
                raise StorageUnavailableError(f"Cache read failed: {e}") from e

        if row is None:
            self.logger.debug("Cache is empty")
            return None

        try:
            payload = json.loads(row[0])
            return CacheRecord(
                snapshot=WeatherSnapshot.from_dict(payload["data"]),
                fetched_at=DateUtils.parse_iso(payload["timestamp"]),
            )
        except (ValueError, KeyError, TypeError) as e:
            self.logger.error(f"Cached record is corrupt: {e}")
            raise StorageUnavailableError(f"Cached record is corrupt: {e}") from e
