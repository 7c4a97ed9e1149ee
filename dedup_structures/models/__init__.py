"""
Data models for the deduplication structures.

This module provides the timeline node used by the log cache and the
configuration dataclasses for both structures.
"""

from .log_entry import LogEntry
from .configuration import LogCacheConfig, BloomFilterConfig

__all__ = [
    'LogEntry',
    'LogCacheConfig',
    'BloomFilterConfig'
]
