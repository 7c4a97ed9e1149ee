"""
Deduplication data structures.

This package provides a time-windowed log message limiter backed by an
auto-evicting cache and a Bloom filter membership set.
"""

__version__ = '1.0.0'

from dedup_structures.exceptions import (
    DedupStructuresError,
    ConfigurationError,
    InvalidTimestampError
)
from dedup_structures.models import LogEntry, LogCacheConfig, BloomFilterConfig
from dedup_structures.services import (
    RateLimitedLogCache,
    BloomFilterSet,
    PrefilteredLookup,
    DuplicateLogFilter
)

__all__ = [
    'DedupStructuresError',
    'ConfigurationError',
    'InvalidTimestampError',
    'LogEntry',
    'LogCacheConfig',
    'BloomFilterConfig',
    'RateLimitedLogCache',
    'BloomFilterSet',
    'PrefilteredLookup',
    'DuplicateLogFilter',
]
