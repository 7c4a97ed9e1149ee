"""
Sizing formulas for Bloom filters.

The filter never sizes itself: callers pick `size` and `hash_count` for
their expected cardinality and tolerable false-positive rate, and these
helpers do the arithmetic.
"""

import math

from dedup_structures.exceptions import ConfigurationError


def false_positive_rate(size: int, hash_count: int, item_count: int) -> float:
    """
    Predicted false-positive rate of a Bloom filter.

    Uses p = (1 - e^(-k*n/m))^k.

    Args:
        size: Number of bits (m)
        hash_count: Number of hash functions (k)
        item_count: Number of distinct items inserted (n)

    Returns:
        Probability in [0, 1] that an item never added tests positive

    Examples:
        >>> round(false_positive_rate(1000, 5, 100), 4)
        0.0094
    """
    if size <= 0 or hash_count <= 0:
        raise ConfigurationError(
            f"size and hash_count must be positive, got size={size}, hash_count={hash_count}"
        )
    if item_count < 0:
        raise ConfigurationError(f"item_count must be non-negative, got {item_count}")

    return (1.0 - math.exp(-hash_count * item_count / size)) ** hash_count


def optimal_size(expected_items: int, false_positive_rate: float) -> int:
    """
    Number of bits needed for a target false-positive rate.

    Uses m = -n * ln(p) / (ln 2)^2.

    Args:
        expected_items: Expected number of distinct items (n)
        false_positive_rate: Target false-positive probability (p), 0 < p < 1

    Returns:
        Bit count m, rounded up
    """
    if expected_items <= 0:
        raise ConfigurationError(f"expected_items must be positive, got {expected_items}")
    if not 0.0 < false_positive_rate < 1.0:
        raise ConfigurationError(
            f"false_positive_rate must be between 0 and 1, got {false_positive_rate}"
        )

    return math.ceil(-expected_items * math.log(false_positive_rate) / (math.log(2) ** 2))


def optimal_hash_count(size: int, expected_items: int) -> int:
    """
    Number of hash functions that minimizes the false-positive rate.

    Uses k = (m / n) * ln 2, never less than 1.

    Args:
        size: Number of bits (m)
        expected_items: Expected number of distinct items (n)

    Returns:
        Hash function count k
    """
    if size <= 0 or expected_items <= 0:
        raise ConfigurationError(
            f"size and expected_items must be positive, got size={size}, "
            f"expected_items={expected_items}"
        )

    return max(1, round(size / expected_items * math.log(2)))
