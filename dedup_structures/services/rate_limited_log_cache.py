"""
Rate-limited log cache for suppressing repeated messages.

This module implements a cache that decides whether a log message should
be printed, suppressing duplicates seen within a trailing time window.
Stale entries are evicted by advancing the head of a linked timeline;
the content index holds only weak references, so evicted entries drop
out of the index without a separate sweep.
"""

import logging
import weakref
from typing import Iterator, Optional, Tuple

from dedup_structures.exceptions import InvalidTimestampError
from dedup_structures.models import LogCacheConfig, LogEntry
from dedup_structures.utils.structured_logger import log_event

logger = logging.getLogger(__name__)


class _TimelineEntry(LogEntry):
    """LogEntry carrying its position in arrival order."""

    __slots__ = ('sequence',)

    def __init__(self, content: str, timestamp: int, sequence: int):
        super().__init__(content, timestamp)
        self.sequence = sequence


class RateLimitedLogCache:
    """
    Decides whether a message should be printed given its timestamp.

    The timeline is a singly-linked chain of entries in arrival order,
    starting at a sentinel head. Each entry owns the entry after it, so
    moving the head's `next` pointer forward releases every entry it
    skips. The index maps content to the newest entry for that content
    through a WeakValueDictionary and therefore never keeps an evicted
    entry alive.

    Entries are numbered in arrival order and the cache remembers the
    number of the last evicted entry. An index hit at or below that
    watermark is treated as a miss, so lookups stay correct even on
    interpreters that reclaim unreachable entries lazily.

    Timestamps must arrive in non-decreasing order. A timestamp older
    than the newest one seen, by should_print() or evict_expired(),
    raises InvalidTimestampError.

    This class is not thread-safe; callers sharing an instance across
    threads must guard every call with one lock.

    Attributes:
        window_seconds: Suppression window (default: 10)
        printed_count: Messages allowed through
        suppressed_count: Messages suppressed as duplicates
        evicted_count: Timeline entries evicted so far
    """

    def __init__(self, window_seconds: int = 10):
        """
        Initialize the log cache.

        Args:
            window_seconds: Trailing window during which a repeated message
                is suppressed

        Raises:
            ConfigurationError: If window_seconds is not a positive integer
        """
        config = LogCacheConfig(window_seconds=window_seconds)
        self.window_seconds = config.window_seconds

        self._head = LogEntry('', 0)
        self._tail = self._head
        self._index: 'weakref.WeakValueDictionary[str, _TimelineEntry]' = (
            weakref.WeakValueDictionary()
        )
        self._next_sequence = 1
        self._evicted_through = 0
        self._latest_timestamp: Optional[int] = None

        self.printed_count = 0
        self.suppressed_count = 0
        self.evicted_count = 0

        logger.info(f"RateLimitedLogCache initialized with window={self.window_seconds}s")

    @classmethod
    def from_config(cls, config: LogCacheConfig) -> 'RateLimitedLogCache':
        """Create a cache from a LogCacheConfig."""
        return cls(window_seconds=config.window_seconds)

    def should_print(self, content: str, timestamp: int) -> bool:
        """
        Decide whether a message should be printed.

        Args:
            content: Message text
            timestamp: Message time in seconds, not older than the newest
                timestamp already seen

        Returns:
            True if the message should be printed, False if it repeats a
            message printed less than window_seconds ago

        Raises:
            InvalidTimestampError: If timestamp is older than the newest
                timestamp seen

        Examples:
            >>> cache = RateLimitedLogCache(window_seconds=10)
            >>> cache.should_print("A", 0)
            True
            >>> cache.should_print("A", 5)
            False
            >>> cache.should_print("A", 11)
            True
        """
        self._check_timestamp(content, timestamp)

        entry = self._lookup(content)

        if entry is None:
            self._append(content, timestamp)
            self.printed_count += 1
            logger.debug(f"Printing first sighting of message: {content[:50]}")
            return True

        if timestamp - entry.timestamp < self.window_seconds:
            self.suppressed_count += 1
            logger.debug(
                f"Suppressed repeat of message: {content[:50]} "
                f"(last printed at {entry.timestamp})"
            )
            return False

        evicted = self._evict_through(entry)
        del entry
        self._append(content, timestamp)
        self.printed_count += 1

        log_event(
            logger,
            'log_cache_eviction',
            level=logging.DEBUG,
            evicted=evicted,
            trigger_timestamp=timestamp,
            cache_size=self.size()
        )
        return True

    def evict_expired(self, now: int) -> int:
        """
        Evict every timeline entry that can no longer suppress a message.

        An entry is stale once `now - entry.timestamp >= window_seconds`.
        Since the timeline is ordered by timestamp the stale entries form
        a prefix, and each entry is visited at most once over the lifetime
        of the cache.

        `now` is held to the same ordering rule as message timestamps and
        becomes the newest timestamp seen, so a later should_print() call
        may not go back before it.

        Args:
            now: Current time in seconds

        Returns:
            Number of entries evicted

        Raises:
            InvalidTimestampError: If now is older than the newest timestamp
        """
        self._check_timestamp(None, now)
        self._latest_timestamp = now

        last_stale = None
        node = self._head.next
        while node is not None and now - node.timestamp >= self.window_seconds:
            last_stale = node
            node = node.next

        if last_stale is None:
            return 0

        evicted = self._evict_through(last_stale)
        log_event(
            logger,
            'log_cache_expired',
            level=logging.DEBUG,
            evicted=evicted,
            now=now,
            cache_size=self.size()
        )
        return evicted

    def last_seen(self, content: str) -> Optional[int]:
        """
        Get the timestamp at which content was last printed.

        Args:
            content: Message text

        Returns:
            Timestamp of the live timeline entry, or None
        """
        entry = self._lookup(content)
        return entry.timestamp if entry is not None else None

    def entries(self) -> Iterator[Tuple[str, int]]:
        """
        Iterate over the timeline from oldest to newest.

        Yields:
            (content, timestamp) pairs
        """
        node = self._head.next
        while node is not None:
            yield node.content, node.timestamp
            node = node.next

    def size(self) -> int:
        """
        Get the number of entries on the timeline.

        Returns:
            Number of live entries
        """
        return (self._next_sequence - 1) - self._evicted_through

    def clear(self) -> None:
        """
        Drop every entry and forget the newest timestamp.

        Releasing the head's reference to the first entry releases the
        whole chain and, with it, every index mapping.
        """
        self._head.next = None
        self._tail = self._head
        self._evicted_through = self._next_sequence - 1
        self._latest_timestamp = None
        logger.info("Log cache cleared")

    def get_statistics(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with printed, suppressed and evicted counts and the
            current timeline size
        """
        return {
            'printed_count': self.printed_count,
            'suppressed_count': self.suppressed_count,
            'evicted_count': self.evicted_count,
            'current_size': self.size()
        }

    def reset_statistics(self) -> None:
        """Reset statistics counters."""
        self.printed_count = 0
        self.suppressed_count = 0
        self.evicted_count = 0

    @property
    def latest_timestamp(self) -> Optional[int]:
        """Newest timestamp appended or passed to evict_expired(); None after clear()."""
        return self._latest_timestamp

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, content: str) -> bool:
        return self._lookup(content) is not None

    def _check_timestamp(self, content: str, timestamp: int) -> None:
        """
        Reject timestamps older than the newest timestamp seen.

        Raises:
            InvalidTimestampError: If timestamp moved backwards
        """
        if self._latest_timestamp is not None and timestamp < self._latest_timestamp:
            logger.warning(
                f"Rejected out-of-order timestamp {timestamp} "
                f"(newest is {self._latest_timestamp})"
            )
            raise InvalidTimestampError(
                f"timestamp {timestamp} is older than the newest timestamp "
                f"({self._latest_timestamp})",
                content=content,
                timestamp=timestamp,
                latest_timestamp=self._latest_timestamp
            )

    def _lookup(self, content: str) -> Optional[_TimelineEntry]:
        entry = self._index.get(content)
        if entry is None or entry.sequence <= self._evicted_through:
            return None
        return entry

    def _append(self, content: str, timestamp: int) -> None:
        entry = _TimelineEntry(content, timestamp, self._next_sequence)
        self._next_sequence += 1
        self._tail.next = entry
        self._tail = entry
        self._index[content] = entry
        self._latest_timestamp = timestamp

    def _evict_through(self, entry: _TimelineEntry) -> int:
        """
        Advance the head past every entry up to and including `entry`.

        Entries are numbered consecutively and always evicted as a prefix,
        so the number of entries skipped is known without walking them.

        Returns:
            Number of entries evicted
        """
        evicted = entry.sequence - self._evicted_through
        self._evicted_through = entry.sequence
        if self._tail is entry:
            self._tail = self._head
        self._head.next = entry.next
        self.evicted_count += evicted
        return evicted
