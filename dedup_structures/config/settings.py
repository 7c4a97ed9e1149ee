"""
Configuration settings for the deduplication structures.

Loads configuration from environment variables with sensible defaults.
"""

import os
from typing import Optional

from dedup_structures.exceptions import ConfigurationError
from dedup_structures.models.configuration import BloomFilterConfig, LogCacheConfig


class Settings:
    """
    Configuration settings for the log cache, the Bloom filter and logging.

    All settings are loaded from environment variables with defaults.
    """

    def __init__(self):
        """Initialize settings from environment variables."""
        # Log cache configuration
        self.log_cache_window_seconds: int = self._parse_int(
            'LOG_CACHE_WINDOW_SECONDS', '10'
        )

        # Bloom filter configuration
        self.bloom_filter_size: int = self._parse_int('BLOOM_FILTER_SIZE', '1000')
        self.bloom_filter_hash_count: int = self._parse_int('BLOOM_FILTER_HASH_COUNT', '5')

        # Logging configuration
        self.log_level: str = os.getenv('LOG_LEVEL', 'INFO')
        self.log_json: bool = self._parse_bool(os.getenv('LOG_JSON', 'true'))

        # Validate configuration
        self._validate()

    def _parse_int(self, name: str, default: str) -> int:
        """
        Parse integer value from an environment variable.

        Args:
            name: Environment variable name
            default: Default value used when the variable is unset

        Returns:
            Integer value

        Raises:
            ConfigurationError: If the value is not an integer
        """
        raw = os.getenv(name, default)
        try:
            return int(raw)
        except ValueError:
            raise ConfigurationError(f"{name} must be an integer, got {raw!r}")

    def _parse_bool(self, value: str) -> bool:
        """
        Parse boolean value from string.

        Args:
            value: String value to parse

        Returns:
            Boolean value
        """
        return value.lower() in ('true', '1', 'yes', 'on')

    def _validate(self):
        """Validate configuration values."""
        # Raises ConfigurationError with the individual messages
        self.log_cache_config()
        self.bloom_filter_config()

        valid_log_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.log_level.upper() not in valid_log_levels:
            raise ConfigurationError(
                f"Invalid LOG_LEVEL: {self.log_level}. "
                f"Must be one of {sorted(valid_log_levels)}"
            )

    def log_cache_config(self) -> LogCacheConfig:
        """Build the log cache configuration from these settings."""
        return LogCacheConfig(window_seconds=self.log_cache_window_seconds)

    def bloom_filter_config(self) -> BloomFilterConfig:
        """Build the Bloom filter configuration from these settings."""
        return BloomFilterConfig(
            size=self.bloom_filter_size,
            hash_count=self.bloom_filter_hash_count
        )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get global settings instance (singleton pattern).

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
