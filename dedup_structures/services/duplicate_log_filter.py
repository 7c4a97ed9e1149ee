"""
Logging filter that suppresses repeated log lines.

This module plugs the RateLimitedLogCache into the standard logging
machinery: a record is dropped when the same logger emitted the same
message at the same level less than the window ago.
"""

import logging
import threading
from typing import Optional

from dedup_structures.services.rate_limited_log_cache import RateLimitedLogCache

# Records from this package bypass the filter so that the cache's own
# log lines never re-enter it.
_OWN_LOGGER_PREFIX = 'dedup_structures'

logger = logging.getLogger(__name__)


class DuplicateLogFilter(logging.Filter):
    """
    Drop log records that repeat within the suppression window.

    Records are keyed by logger name, level and formatted message, and
    timestamped with the whole second of `record.created`. Records above
    max_level are always let through. The cache is guarded by a lock
    because handlers may be shared across threads.

    `record.created` is taken before the lock, so records from different
    threads can reach the filter slightly out of order. A record up to
    max_clock_skew_seconds older than the newest one seen is treated as
    arriving at that newest second. A larger backwards jump means the wall
    clock was stepped back, and the cache is restarted.

    Stale entries are evicted at most once per second of record time, so
    the cache holds roughly one window's worth of distinct messages.

    Attributes:
        cache: Underlying log cache
        max_level: Highest level subject to suppression (default: WARNING)
        max_clock_skew_seconds: Largest backwards step absorbed without
            restarting the cache (default: 5)
    """

    def __init__(
        self,
        window_seconds: int = 10,
        max_level: int = logging.WARNING,
        name: str = '',
        max_clock_skew_seconds: int = 5
    ) -> None:
        """
        Initialize the filter.

        Args:
            window_seconds: Suppression window in seconds
            max_level: Highest level subject to suppression
            name: Logger name prefix, as for logging.Filter
            max_clock_skew_seconds: Largest backwards step absorbed by
                treating the record as arriving at the newest second
        """
        super().__init__(name)
        self.cache = RateLimitedLogCache(window_seconds=window_seconds)
        self.max_level = max_level
        self.max_clock_skew_seconds = max_clock_skew_seconds
        self._last_eviction: Optional[int] = None
        self._lock = threading.Lock()

    def filter(self, record: logging.LogRecord) -> bool:
        if not super().filter(record):
            return False
        if record.levelno > self.max_level:
            return True
        if record.name.startswith(_OWN_LOGGER_PREFIX):
            return True

        key = self._record_key(record)

        with self._lock:
            timestamp = self._effective_timestamp(int(record.created))

            if timestamp != self._last_eviction:
                self.cache.evict_expired(timestamp)
                self._last_eviction = timestamp

            return self.cache.should_print(key, timestamp)

    def _effective_timestamp(self, timestamp: int) -> int:
        """
        Map a record timestamp onto the cache's timeline.

        Must be called with the lock held.
        """
        latest = self.cache.latest_timestamp
        if latest is None or timestamp >= latest:
            return timestamp

        if latest - timestamp <= self.max_clock_skew_seconds:
            return latest

        logger.warning(
            f"Clock moved back from {latest} to {timestamp}, "
            "restarting duplicate log suppression"
        )
        self.cache.clear()
        self._last_eviction = None
        return timestamp

    @staticmethod
    def _record_key(record: logging.LogRecord) -> str:
        return f"{record.name}\x00{record.levelno}\x00{record.getMessage()}"
