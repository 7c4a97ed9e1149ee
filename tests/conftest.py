"""
Shared pytest fixtures for dedup_structures tests.
"""

import logging

import pytest

from dedup_structures.config import reset_settings
from dedup_structures.models import BloomFilterConfig, LogCacheConfig
from dedup_structures.services import BloomFilterSet, RateLimitedLogCache


@pytest.fixture
def log_cache():
    """Fixture providing a log cache with the default 10 second window."""
    return RateLimitedLogCache(window_seconds=10)


@pytest.fixture
def small_bloom():
    """Fixture providing a small Bloom filter (100 bits, 2 hashes)."""
    return BloomFilterSet(size=100, hash_count=2)


@pytest.fixture
def default_bloom_config():
    """Fixture providing the default Bloom filter configuration."""
    return BloomFilterConfig()


@pytest.fixture
def default_log_cache_config():
    """Fixture providing the default log cache configuration."""
    return LogCacheConfig()


@pytest.fixture
def clean_settings():
    """Fixture that drops cached settings before and after the test."""
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def restore_root_logger():
    """Fixture that restores root logger handlers and level after the test."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)


def make_record(message, created, name='app', level=logging.INFO, args=None):
    """Build a LogRecord with a fixed creation time."""
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=args,
        exc_info=None
    )
    record.created = created
    return record


@pytest.fixture
def record_factory():
    """Fixture providing the make_record helper."""
    return make_record
