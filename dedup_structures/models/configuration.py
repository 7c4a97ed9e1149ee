"""
Configuration data models for the log cache and the Bloom filter.

This module defines the configuration dataclasses that carry the tunable
parameters of both structures. Values are validated on construction.
"""

from dataclasses import dataclass
from typing import List

from dedup_structures.exceptions import ConfigurationError


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class LogCacheConfig:
    """
    Configuration for the rate-limited log cache.

    Attributes:
        window_seconds: Trailing window during which a repeated message is
            suppressed (default: 10)
    """

    window_seconds: int = 10

    def validate(self) -> List[str]:
        """
        Validate configuration parameters.

        Returns:
            List of error messages. Empty list if configuration is valid.
        """
        errors = []

        if not _is_int(self.window_seconds):
            errors.append(
                f"window_seconds must be an integer, got {type(self.window_seconds).__name__}"
            )
        elif self.window_seconds < 1:
            errors.append(f"window_seconds must be at least 1, got {self.window_seconds}")

        return errors

    def __post_init__(self):
        """Validate configuration on initialization."""
        errors = self.validate()
        if errors:
            raise ConfigurationError("Invalid log cache configuration", validation_errors=errors)


@dataclass
class BloomFilterConfig:
    """
    Configuration for a Bloom filter.

    Size and hash count are chosen by the caller for the expected
    cardinality and tolerable false-positive rate; see
    dedup_structures.utils.bloom_math for the sizing formulas.

    Attributes:
        size: Number of bits in the filter
        hash_count: Number of seeded hash functions
    """

    size: int = 1000
    hash_count: int = 5

    def validate(self) -> List[str]:
        """
        Validate configuration parameters.

        Returns:
            List of error messages. Empty list if configuration is valid.
        """
        errors = []

        if not _is_int(self.size):
            errors.append(f"size must be an integer, got {type(self.size).__name__}")
        elif self.size <= 0:
            errors.append(f"size must be positive, got {self.size}")

        if not _is_int(self.hash_count):
            errors.append(f"hash_count must be an integer, got {type(self.hash_count).__name__}")
        elif self.hash_count <= 0:
            errors.append(f"hash_count must be positive, got {self.hash_count}")

        return errors

    def __post_init__(self):
        """Validate configuration on initialization."""
        errors = self.validate()
        if errors:
            raise ConfigurationError("Invalid Bloom filter configuration", validation_errors=errors)
