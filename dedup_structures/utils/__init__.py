"""
Utility functions for the deduplication structures.

This module provides Bloom filter sizing formulas and structured
logging helpers.
"""

from .bloom_math import false_positive_rate, optimal_size, optimal_hash_count
from .structured_logger import (
    StructuredFormatter,
    configure_structured_logging,
    configure_from_settings,
    log_event
)

__all__ = [
    'false_positive_rate',
    'optimal_size',
    'optimal_hash_count',
    'StructuredFormatter',
    'configure_structured_logging',
    'configure_from_settings',
    'log_event'
]
