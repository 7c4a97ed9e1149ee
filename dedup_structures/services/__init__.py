"""
Services implementing the deduplication structures.

This module provides the rate-limited log cache, the Bloom filter set,
a Bloom-guarded lookup and a logging filter built on the log cache.
"""

from .rate_limited_log_cache import RateLimitedLogCache
from .bloom_filter_set import BloomFilterSet
from .prefiltered_lookup import PrefilteredLookup
from .duplicate_log_filter import DuplicateLogFilter

__all__ = [
    'RateLimitedLogCache',
    'BloomFilterSet',
    'PrefilteredLookup',
    'DuplicateLogFilter'
]
