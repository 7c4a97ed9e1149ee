"""
Unit tests for configuration dataclasses and environment settings.
"""

import pytest

from dedup_structures.config import Settings, get_settings, reset_settings
from dedup_structures.exceptions import ConfigurationError, DedupStructuresError
from dedup_structures.models import LogCacheConfig


class TestLogCacheConfig:
    """Test suite for LogCacheConfig validation."""

    def test_default_window(self, default_log_cache_config):
        """Test the default window is ten seconds."""
        assert default_log_cache_config.window_seconds == 10
        assert default_log_cache_config.validate() == []

    def test_ten_minute_window_accepted(self):
        """Test that a long window is accepted."""
        assert LogCacheConfig(window_seconds=600).window_seconds == 600

    def test_zero_window_rejected(self):
        """Test rejection of a zero window."""
        with pytest.raises(ConfigurationError) as exc_info:
            LogCacheConfig(window_seconds=0)

        assert "window_seconds must be at least 1" in str(exc_info.value)

    def test_configuration_error_is_package_error(self):
        """Test that ConfigurationError derives from the package base error."""
        with pytest.raises(DedupStructuresError):
            LogCacheConfig(window_seconds=-1)


class TestSettings:
    """Test suite for environment-driven Settings."""

    def test_defaults(self, monkeypatch, clean_settings):
        """Test defaults when no environment variables are set."""
        for name in ('LOG_CACHE_WINDOW_SECONDS', 'BLOOM_FILTER_SIZE',
                     'BLOOM_FILTER_HASH_COUNT', 'LOG_LEVEL', 'LOG_JSON'):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.log_cache_window_seconds == 10
        assert settings.bloom_filter_size == 1000
        assert settings.bloom_filter_hash_count == 5
        assert settings.log_level == 'INFO'
        assert settings.log_json is True

    def test_environment_overrides(self, monkeypatch, clean_settings):
        """Test that environment variables override defaults."""
        monkeypatch.setenv('LOG_CACHE_WINDOW_SECONDS', '600')
        monkeypatch.setenv('BLOOM_FILTER_SIZE', '4096')
        monkeypatch.setenv('BLOOM_FILTER_HASH_COUNT', '3')
        monkeypatch.setenv('LOG_LEVEL', 'debug')
        monkeypatch.setenv('LOG_JSON', 'no')

        settings = Settings()

        assert settings.log_cache_config().window_seconds == 600
        bloom_config = settings.bloom_filter_config()
        assert bloom_config.size == 4096
        assert bloom_config.hash_count == 3
        assert settings.log_level == 'debug'
        assert settings.log_json is False

    def test_non_integer_rejected(self, monkeypatch, clean_settings):
        """Test that unparsable integers raise ConfigurationError."""
        monkeypatch.setenv('BLOOM_FILTER_SIZE', 'lots')

        with pytest.raises(ConfigurationError) as exc_info:
            Settings()

        assert 'BLOOM_FILTER_SIZE' in str(exc_info.value)

    def test_invalid_bloom_parameters_rejected(self, monkeypatch, clean_settings):
        """Test that non-positive filter parameters are rejected."""
        monkeypatch.setenv('BLOOM_FILTER_HASH_COUNT', '0')

        with pytest.raises(ConfigurationError):
            Settings()

    def test_invalid_window_rejected(self, monkeypatch, clean_settings):
        """Test that a non-positive window is rejected."""
        monkeypatch.setenv('LOG_CACHE_WINDOW_SECONDS', '0')

        with pytest.raises(ConfigurationError):
            Settings()

    def test_invalid_log_level_rejected(self, monkeypatch, clean_settings):
        """Test that unknown log levels are rejected."""
        monkeypatch.setenv('LOG_LEVEL', 'VERBOSE')

        with pytest.raises(ConfigurationError):
            Settings()

    def test_get_settings_is_cached(self, monkeypatch, clean_settings):
        """Test the singleton accessor and reset."""
        monkeypatch.setenv('LOG_CACHE_WINDOW_SECONDS', '30')
        first = get_settings()

        monkeypatch.setenv('LOG_CACHE_WINDOW_SECONDS', '45')
        assert get_settings() is first
        assert get_settings().log_cache_window_seconds == 30

        reset_settings()
        assert get_settings().log_cache_window_seconds == 45
